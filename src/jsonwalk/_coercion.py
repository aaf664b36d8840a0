"""Boolean coercion used by filter predicates."""

from collections.abc import Mapping
from typing import Any

from ._value import MISSING, JsonObject


def truthy(value: Any) -> bool:
    """Map any value (or the MISSING sentinel) to a truth value.

    False for: empty array, empty object, empty string, MISSING, null, zero
    (int or float) and ``False``. Everything else is true.
    """
    if value is MISSING or value is None:
        return False
    match value:
        case bool():
            return value
        case int() | float():
            return value != 0
        case str() | list() | tuple() | JsonObject() | Mapping():
            return len(value) > 0
        case _:
            return True
