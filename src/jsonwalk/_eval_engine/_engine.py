"""Entry point of the evaluation engine."""

import logging
from collections.abc import Mapping
from typing import Any

from jsonwalk._ast import Root
from jsonwalk._config import EngineConfig
from jsonwalk._document import denormalize, detect_representation, normalize
from jsonwalk._value import MISSING

from ._context import EvaluationContext, PathFunction
from ._steps import run_steps

logger = logging.getLogger(__name__)


def execute(
    ast: Root,
    document: Any,
    functions: Mapping[str, PathFunction] | None = None,
    *,
    config: EngineConfig | None = None,
) -> list[Any]:
    """Evaluate a parsed query against a JSON document.

    Args:
        ast: The parsed query. Trusted as already validated.
        document: The JSON document. Objects may be ``JsonObject`` pairs or
            mappings (dicts, pydantic models); results use the same encoding.
        functions: Functions callable from query scripts, by name.
        config: Evaluation settings. Defaults to ``EngineConfig()``.

    Returns:
        The matched nodes in match order. Duplicates are kept when several
        branches reach the same node.

    Raises:
        EvaluationError: For an unknown function, unsupported operator or
            slice step, or relative paths nested beyond ``config.max_depth``.
            No partial result is returned.

    """
    if config is None:
        config = EngineConfig()

    representation = detect_representation(document)
    root = normalize(document, sort_keys=config.sort_keys)
    logger.debug(f"Executing {ast} on {type(document).__name__} document ({representation} objects)")

    ctx = EvaluationContext(root=root, functions=functions or {}, config=config)
    nodes = execute_tree(ast, ctx)

    result = [denormalize(node, representation) for node in nodes if node is not MISSING]
    logger.debug(f"Matched {len(result)} node(s)")
    return result


def execute_tree(ast: Root, ctx: EvaluationContext) -> list[Any]:
    """Run the steps of *ast* starting from the document root in *ctx*."""
    match ast:
        case Root(steps):
            return run_steps(steps, [ctx.root], ctx)
        case _:
            msg = f"Unknown query type: {type(ast)}"
            raise TypeError(msg)
