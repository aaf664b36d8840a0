"""Exceptions raised by jsonwalk.

Evaluation errors abort the whole ``execute`` call; lookups that simply match
nothing never raise.
"""

from typing import Any


class JsonWalkError(Exception):
    """Base class for all jsonwalk errors."""


class ConfigError(JsonWalkError):
    """Error in jsonwalk configuration."""


class EvaluationError(JsonWalkError):
    """A query construct or function registry the engine cannot evaluate."""


class UnknownFunctionError(EvaluationError):
    """A function call names a function missing from the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        msg = f"Unknown function '{name}'"
        super().__init__(msg)


class UnsupportedOperatorError(EvaluationError):
    """A binary expression uses an operator other than the six comparisons."""

    def __init__(self, op: Any) -> None:
        self.op = op
        msg = f"Unsupported operator: {op!r}"
        super().__init__(msg)


class UnsupportedSliceError(EvaluationError):
    """A slice uses a step other than 1."""

    def __init__(self, step: int) -> None:
        self.step = step
        msg = f"Unsupported slice step: {step} (only 1 is supported)"
        super().__init__(msg)


class MaxDepthExceededError(EvaluationError):
    """Relative paths are nested deeper than the configured limit."""

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        msg = f"Relative path nesting exceeds max_depth={max_depth}"
        super().__init__(msg)
