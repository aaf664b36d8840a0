"""Evaluation engine for jsonwalk.

This module walks a JSON document along a parsed query and produces the
ordered node set it matches. Evaluation is pure: the document is never
modified and no state outlives a call.

Key types:
- EvaluationContext: Root, function registry and settings for one call
- PathFunction: Protocol for functions callable from query scripts
- execute: Evaluate a query against a document
- run_steps / apply_predicate / evaluate_script: The evaluation layers
"""

from ._context import EvaluationContext, PathFunction
from ._engine import execute, execute_tree
from ._predicate import apply_predicate
from ._script import evaluate_script
from ._steps import run_steps

__all__ = [
    "EvaluationContext",
    "PathFunction",
    "apply_predicate",
    "evaluate_script",
    "execute",
    "execute_tree",
    "run_steps",
]
