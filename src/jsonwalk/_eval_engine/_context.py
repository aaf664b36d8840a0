"""Runtime context threaded through one evaluation."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Protocol

from jsonwalk._config import EngineConfig
from jsonwalk._errors import MaxDepthExceededError, UnknownFunctionError

if TYPE_CHECKING:
    from collections.abc import Mapping


class PathFunction(Protocol):
    """A function callable from a query script.

    Receives the current node, the document root and the call's arguments
    (passed through as written in the query), and returns a value or a list
    of values. Objects are seen as ``JsonObject`` pairs.
    """

    def __call__(self, current: Any, root: Any, args: tuple[Any, ...], /) -> Any: ...


@dataclass(frozen=True, slots=True)
class EvaluationContext:
    """Read-only state for one ``execute`` call.

    Attributes:
        root: The normalised document.
        functions: Registry of functions callable from scripts, by name.
        config: Evaluation settings.
        depth: Number of relative paths currently being evaluated.

    """

    root: Any
    functions: Mapping[str, PathFunction] = field(default_factory=dict)
    config: EngineConfig = field(default_factory=EngineConfig)
    depth: int = 0

    def descend(self) -> EvaluationContext:
        """Return the context for evaluating one more level of relative path.

        Raises:
            MaxDepthExceededError: If that would exceed ``config.max_depth``.

        """
        depth = self.depth + 1
        if depth > self.config.max_depth:
            raise MaxDepthExceededError(self.config.max_depth)
        return replace(self, depth=depth)

    def get_function(self, name: str) -> PathFunction:
        try:
            return self.functions[name]
        except KeyError:
            raise UnknownFunctionError(name) from None
