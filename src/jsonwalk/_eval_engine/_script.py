"""Evaluation of scripts: literals, comparisons, function calls and relative paths."""

import logging
import operator
from collections.abc import Callable
from typing import Any

from jsonwalk._ast import (
    BinaryOp,
    ComparisonOp,
    CurrentNode,
    FunctionCall,
    LiteralNumber,
    LiteralString,
    RelativePath,
    Script,
)
from jsonwalk._errors import UnsupportedOperatorError
from jsonwalk._value import MISSING

from ._context import EvaluationContext

logger = logging.getLogger(__name__)

_COMPARATORS: dict[ComparisonOp, Callable[[Any, Any], Any]] = {
    ComparisonOp.EQ: operator.eq,
    ComparisonOp.NE: operator.ne,
    ComparisonOp.GT: operator.gt,
    ComparisonOp.GE: operator.ge,
    ComparisonOp.LT: operator.lt,
    ComparisonOp.LE: operator.le,
}


def evaluate_script(script: Any, current: Any, ctx: EvaluationContext) -> Any:
    """Evaluate *script* with *current* as the ``@`` node.

    Returns a single value, or a list of values for relative paths (and for
    functions that return one).

    Raises:
        UnknownFunctionError: A function call names an unregistered function.
        UnsupportedOperatorError: A binary expression uses an unknown operator.
        MaxDepthExceededError: Relative paths nest deeper than allowed.

    """
    match script:
        case LiteralString(value) | LiteralNumber(value):
            return value
        case CurrentNode():
            return current
        case FunctionCall(name, args):
            func = ctx.get_function(name)
            logger.debug(f"Calling {script}")
            return func(current, ctx.root, args)
        case RelativePath(steps):
            from ._steps import run_steps  # noqa: PLC0415

            return [node for node in run_steps(steps, [current], ctx.descend()) if node is not MISSING]
        case BinaryOp(op, left, right):
            return _evaluate_comparison(op, left, right, current, ctx)
        case str() | int() | float() | None:
            return script
        case _:
            msg = f"Unknown script type: {type(script)}"
            raise TypeError(msg)


def _evaluate_comparison(
    op: ComparisonOp | str,
    left: Script,
    right: Script,
    current: Any,
    ctx: EvaluationContext,
) -> bool:
    try:
        comparison = ComparisonOp.from_token(op)
    except ValueError as e:
        raise UnsupportedOperatorError(op) from e

    lhs = _unwrap_single(evaluate_script(left, current, ctx))
    rhs = _unwrap_single(evaluate_script(right, current, ctx))
    try:
        return bool(_COMPARATORS[comparison](lhs, rhs))
    except TypeError:
        # Operands without a native ordering never match
        return False


def _unwrap_single(value: Any) -> Any:
    """Unwrap a one-element list; longer lists are compared as a whole."""
    if isinstance(value, (list, tuple)) and len(value) == 1:
        return value[0]
    return value
