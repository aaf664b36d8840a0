"""Query syntax tree consumed by the evaluation engine.

The tree is produced by an external parser (or built by hand) and treated as
read-only, already-validated input. Every node renders back to JSONPath-like
text via ``str()``, which is what log messages and errors show::

    >>> str(Root((Child(Key("store")), Child(Wildcard()))))
    '$.store[*]'

"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import StrEnum, unique
from typing import Any, ClassVar, Self


@unique
class ComparisonOp(StrEnum):
    EQ = "=="
    NE = "!="
    GT = ">"
    GE = ">="
    LT = "<"
    LE = "<="

    @classmethod
    def from_token(cls, op: object) -> Self:
        """Resolve an operator given as a member, its symbol or its name.

        Raises:
            ValueError: If *op* is none of the six comparison operators.

        """
        if isinstance(op, cls):
            return op
        if isinstance(op, str):
            if op in cls:
                return cls(op)
            if op.upper() in cls.__members__:
                return cls[op.upper()]
        msg = f"Not a comparison operator: {op!r}"
        raise ValueError(msg)


# ---------------------------------------------------------------------------
# Scripts
# ---------------------------------------------------------------------------


@dataclass(slots=True, frozen=True)
class LiteralString:
    value: str

    def __str__(self) -> str:
        return _quote(self.value)


@dataclass(slots=True, frozen=True)
class LiteralNumber:
    value: int | float

    def __str__(self) -> str:
        return str(self.value)


@dataclass(slots=True, frozen=True)
class FunctionCall:
    name: str
    args: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))

    def __str__(self) -> str:
        return f"{self.name}({', '.join(render_script(arg) for arg in self.args)})"


@dataclass(slots=True, frozen=True)
class BinaryOp:
    op: ComparisonOp | str
    left: Script
    right: Script

    def __str__(self) -> str:
        return f"{render_script(self.left)} {self.op} {render_script(self.right)}"


@dataclass(slots=True, frozen=True)
class RelativePath:
    steps: tuple[Step, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "steps", tuple(self.steps))

    def __str__(self) -> str:
        return "@" + "".join(str(step) for step in self.steps)


@dataclass(slots=True, frozen=True)
class CurrentNode:
    def __str__(self) -> str:
        return "@"


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


@dataclass(slots=True, frozen=True)
class Key:
    name: str

    def __str__(self) -> str:
        if self.name.isidentifier():
            return f".{self.name}"
        return f"[{_quote(self.name)}]"


@dataclass(slots=True, frozen=True)
class IndexExpr:
    script: Script

    def __str__(self) -> str:
        return f"[({render_script(self.script)})]"


@dataclass(slots=True, frozen=True)
class FilterExpr:
    script: Script

    def __str__(self) -> str:
        return f"[?({render_script(self.script)})]"


@dataclass(slots=True, frozen=True)
class IndexList:
    scripts: tuple[Script, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "scripts", tuple(self.scripts))

    def __str__(self) -> str:
        return f"[{','.join(render_script(script) for script in self.scripts)}]"


@dataclass(slots=True, frozen=True)
class Slice:
    """Array slice. ``end=None`` selects through the end of the array."""

    begin: int = 0
    end: int | None = None
    step: int = 1

    def __str__(self) -> str:
        end = "" if self.end is None else str(self.end)
        if self.step == 1:
            return f"[{self.begin}:{end}]"
        return f"[{self.begin}:{end}:{self.step}]"


@dataclass(slots=True, frozen=True)
class Wildcard:
    def __str__(self) -> str:
        return "[*]"


# ---------------------------------------------------------------------------
# Steps and root
# ---------------------------------------------------------------------------


@dataclass(slots=True, frozen=True)
class Child:
    predicate: Predicate

    def __str__(self) -> str:
        return str(self.predicate)


@dataclass(slots=True, frozen=True)
class Root:
    steps: tuple[Step, ...] = ()

    ROOT_SYMBOL: ClassVar[str] = "$"

    def __post_init__(self) -> None:
        object.__setattr__(self, "steps", tuple(self.steps))

    def __str__(self) -> str:
        return self.ROOT_SYMBOL + "".join(str(step) for step in self.steps)


Script = LiteralString | LiteralNumber | FunctionCall | BinaryOp | RelativePath | CurrentNode
Predicate = Key | IndexExpr | FilterExpr | IndexList | Slice | Wildcard
Step = Child

SCRIPT_TYPES = (LiteralString, LiteralNumber, FunctionCall, BinaryOp, RelativePath, CurrentNode)


def render_script(script: Any) -> str:
    """Render a script, or a bare literal in script position, as text."""
    if isinstance(script, SCRIPT_TYPES):
        return str(script)
    if isinstance(script, str):
        return _quote(script)
    return json.dumps(script, default=repr)


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"
