"""Application of a single predicate to a single node."""

from typing import Any

from jsonwalk._ast import FilterExpr, IndexExpr, IndexList, Key, Predicate, Slice, Wildcard
from jsonwalk._coercion import truthy
from jsonwalk._errors import UnsupportedSliceError
from jsonwalk._value import MISSING, JsonObject, ValueKind, kind

from ._context import EvaluationContext
from ._script import evaluate_script


def apply_predicate(predicate: Predicate, node: Any, ctx: EvaluationContext) -> list[Any]:  # noqa: C901, PLR0911
    """Return the children of *node* matched by *predicate*, in order.

    A predicate applied to a node kind it does not support matches nothing.
    ``IndexList`` on an object keeps MISSING in place of each absent key;
    callers drop it.

    Raises:
        UnsupportedSliceError: For a slice whose step is not 1.

    """
    if node is MISSING:
        return []

    match predicate, kind(node):
        case Key(name), ValueKind.OBJECT:
            value = node.lookup(name)
            return [] if value is MISSING else [value]
        case IndexExpr(script), ValueKind.OBJECT:
            key = evaluate_script(script, node, ctx)
            if not isinstance(key, str):
                return []
            return apply_predicate(Key(key), node, ctx)
        case IndexExpr(script), ValueKind.ARRAY:
            index = evaluate_script(script, node, ctx)
            return _select_indices(node, [index])
        case FilterExpr(script), ValueKind.OBJECT:
            return [value for value in node.values() if truthy(evaluate_script(script, value, ctx))]
        case FilterExpr(script), ValueKind.ARRAY:
            return [item for item in node if truthy(evaluate_script(script, item, ctx))]
        case IndexList(scripts), ValueKind.OBJECT:
            return [_lookup_key(node, evaluate_script(script, node, ctx)) for script in scripts]
        case IndexList(scripts), ValueKind.ARRAY:
            return _select_indices(node, [evaluate_script(script, node, ctx) for script in scripts])
        case Slice(begin, end, step), ValueKind.ARRAY:
            return _slice(node, begin, end, step)
        case Wildcard(), ValueKind.OBJECT:
            return node.values()
        case Wildcard(), ValueKind.ARRAY:
            return list(node)
        case (Key() | IndexExpr() | FilterExpr() | IndexList() | Slice() | Wildcard()), _:
            return []
        case _:
            msg = f"Unknown predicate type: {type(predicate)}"
            raise TypeError(msg)


def _lookup_key(obj: JsonObject, key: Any) -> Any:
    if not isinstance(key, str):
        return MISSING
    return obj.lookup(key)


def _as_index(value: Any) -> int | None:
    match value:
        case bool():
            return None
        case int():
            return value
        case float() if value.is_integer():
            return int(value)
        case _:
            return None


def _select_indices(array: list[Any], indices: list[Any]) -> list[Any]:
    """Pick elements by index; negative indices count from the end.

    Unlike key lookup on objects, a single index with no element empties the
    whole selection.
    """
    length = len(array)
    selected: list[Any] = []
    for index in indices:
        position = _as_index(index)
        if position is None:
            return []
        if position < 0:
            position += length
        if not 0 <= position < length:
            return []
        selected.append(array[position])
    return selected


def _slice(array: list[Any], begin: int, end: int | None, step: int) -> list[Any]:
    if step != 1:
        raise UnsupportedSliceError(step)

    length = len(array)
    if begin < 0:
        begin = max(length + begin, 0)
    if end is None:
        end = length
    elif end < 0:
        end = max(min(length + end, length), 0)
    # The resolved end is taken as a count of elements from begin
    return list(array[begin : begin + end])
