"""Conversion between caller documents and the engine's value model.

Callers may encode JSON objects either as ``JsonObject`` pairs or as plain
mappings (``dict``, or a pydantic model). The engine always walks
``JsonObject`` pairs; results go back out in the caller's encoding.
"""

from collections.abc import Mapping
from enum import StrEnum, unique
from typing import Any

from pydantic import BaseModel

from ._value import JsonObject


@unique
class Representation(StrEnum):
    PAIRS = "pairs"
    MAPPING = "mapping"


def detect_representation(document: Any) -> Representation:
    """Return MAPPING if any object in *document* is a mapping or pydantic model."""
    if isinstance(document, (Mapping, BaseModel)):
        return Representation.MAPPING
    if isinstance(document, JsonObject):
        children = document.values()
    elif isinstance(document, (list, tuple)):
        children = document
    else:
        return Representation.PAIRS
    if any(detect_representation(child) is Representation.MAPPING for child in children):
        return Representation.MAPPING
    return Representation.PAIRS


def normalize(document: Any, *, sort_keys: bool = False) -> Any:
    """Recursively convert mappings and pydantic models into JsonObject pairs.

    Mapping keys keep their insertion order unless *sort_keys* is set. The
    input is never modified.
    """
    if isinstance(document, BaseModel):
        return normalize(document.model_dump(mode="json"), sort_keys=sort_keys)

    if isinstance(document, Mapping):
        items = sorted(document.items(), key=lambda item: item[0]) if sort_keys else document.items()
        return JsonObject((key, normalize(value, sort_keys=sort_keys)) for key, value in items)

    if isinstance(document, JsonObject):
        return JsonObject((key, normalize(value, sort_keys=sort_keys)) for key, value in document)

    if isinstance(document, list):
        return [normalize(item, sort_keys=sort_keys) for item in document]

    if isinstance(document, tuple):
        return tuple(normalize(item, sort_keys=sort_keys) for item in document)

    return document


def denormalize(value: Any, representation: Representation) -> Any:
    """Convert a result value back to the caller's object encoding.

    For MAPPING, every JsonObject becomes a dict. When a JsonObject holds
    duplicate keys the first pair wins, matching key lookup.
    """
    if representation is Representation.PAIRS:
        return value

    if isinstance(value, JsonObject):
        result: dict[str, Any] = {}
        for key, item in value:
            if key not in result:
                result[key] = denormalize(item, representation)
        return result

    if isinstance(value, list):
        return [denormalize(item, representation) for item in value]

    if isinstance(value, tuple):
        return tuple(denormalize(item, representation) for item in value)

    return value
