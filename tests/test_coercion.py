"""Tests for boolean coercion used by filters."""

import pytest

from jsonwalk._coercion import truthy
from jsonwalk._value import MISSING, JsonObject


class TestFalsyValues:
    def test_empty_array(self) -> None:
        assert truthy([]) is False

    def test_empty_object(self) -> None:
        assert truthy(JsonObject()) is False

    def test_empty_string(self) -> None:
        assert truthy("") is False

    def test_missing(self) -> None:
        assert truthy(MISSING) is False

    def test_null(self) -> None:
        assert truthy(None) is False

    def test_integer_zero(self) -> None:
        assert truthy(0) is False

    def test_float_zero(self) -> None:
        assert truthy(0.0) is False

    def test_false(self) -> None:
        assert truthy(False) is False


class TestTruthyValues:
    @pytest.mark.parametrize(
        "value",
        [
            [0],
            JsonObject([("a", None)]),
            "0",
            1,
            -0.5,
            True,
        ],
        ids=["array", "object", "string", "int", "float", "true"],
    )
    def test_non_empty_values(self, value: object) -> None:
        assert truthy(value) is True

    def test_array_of_missing_is_truthy(self) -> None:
        # A non-empty node set is true even when it only holds MISSING
        assert truthy([MISSING]) is True

    def test_empty_tuple_is_falsy(self) -> None:
        assert truthy(()) is False

    def test_plain_mappings(self) -> None:
        # Function results may be dicts rather than JsonObject pairs
        assert truthy({}) is False
        assert truthy({"a": 0}) is True
