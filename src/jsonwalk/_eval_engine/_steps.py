"""Step execution: folding path steps over a node set."""

import logging
from collections.abc import Sequence
from typing import Any

from jsonwalk._ast import Child, Step
from jsonwalk._value import MISSING

from ._context import EvaluationContext
from ._predicate import apply_predicate

logger = logging.getLogger(__name__)


def run_steps(steps: Sequence[Step], nodes: Sequence[Any], ctx: EvaluationContext) -> list[Any]:
    """Apply each step to every node in order, concatenating the matches.

    Output order is node order first, then each predicate's own order.
    MISSING entries contribute nothing; an empty set stays empty.
    """
    current = list(nodes)
    for step in steps:
        match step:
            case Child(predicate):
                pass
            case _:
                msg = f"Unknown step type: {type(step)}"
                raise TypeError(msg)

        if not current:
            return []

        matched: list[Any] = []
        for node in current:
            if node is MISSING:
                continue
            matched.extend(apply_predicate(predicate, node, ctx))
        logger.debug(f"  {step}: {len(current)} -> {len(matched)} node(s)")
        current = matched
    return current
