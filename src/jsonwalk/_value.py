"""Value model for JSON documents walked by the engine.

JSON values are represented by plain Python objects:

- null    -> None
- boolean -> bool
- number  -> int / float
- string  -> str
- array   -> list (tuples are accepted as arrays)
- object  -> JsonObject, an ordered sequence of (key, value) pairs

Keys in a JsonObject are not required to be unique. Lookups always return the
first matching pair; later duplicates are shadowed but kept.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, unique
from typing import TYPE_CHECKING, Any, Final

if TYPE_CHECKING:
    from collections.abc import Iterator


class _MissingType:
    """Sentinel returned by a lookup that finds nothing.

    Distinct from ``None``, which is an explicit JSON null.
    """

    _instance: _MissingType | None = None

    def __new__(cls) -> _MissingType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Final = _MissingType()


@dataclass(slots=True, frozen=True)
class JsonObject:
    """A JSON object as an ordered, immutable sequence of key/value pairs."""

    pairs: tuple[tuple[str, Any], ...] = ()

    def __post_init__(self) -> None:
        # Any iterable of pairs is accepted; stored as a tuple of 2-tuples
        object.__setattr__(self, "pairs", tuple((key, value) for key, value in self.pairs))

    def __len__(self) -> int:
        return len(self.pairs)

    def __iter__(self) -> Iterator[tuple[str, Any]]:
        return iter(self.pairs)

    def lookup(self, key: str) -> Any:
        """Return the value of the first pair whose key is *key*, or MISSING."""
        for pair_key, value in self.pairs:
            if pair_key == key:
                return value
        return MISSING

    def keys(self) -> list[str]:
        return [key for key, _ in self.pairs]

    def values(self) -> list[Any]:
        return [value for _, value in self.pairs]


@unique
class ValueKind(StrEnum):
    ARRAY = "array"
    OBJECT = "object"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


def kind(value: Any) -> ValueKind:
    """Classify a JSON value for dispatch.

    Raises:
        TypeError: If *value* is not part of the value model (this includes
            the MISSING sentinel, which is not a value).

    """
    match value:
        case list() | tuple():
            return ValueKind.ARRAY
        case JsonObject():
            return ValueKind.OBJECT
        case str():
            return ValueKind.STRING
        # bool before number: bool is an int subclass
        case bool():
            return ValueKind.BOOLEAN
        case int() | float():
            return ValueKind.NUMBER
        case None:
            return ValueKind.NULL
        case _:
            msg = f"Not a JSON value: {value!r}"
            raise TypeError(msg)
