"""JSONPath-style query evaluation over in-memory JSON documents."""

__all__ = [
    "MISSING",
    "BinaryOp",
    "Child",
    "ComparisonOp",
    "ConfigError",
    "CurrentNode",
    "EngineConfig",
    "EvaluationContext",
    "EvaluationError",
    "FilterExpr",
    "FunctionCall",
    "IndexExpr",
    "IndexList",
    "JsonObject",
    "JsonWalkError",
    "Key",
    "LiteralNumber",
    "LiteralString",
    "MaxDepthExceededError",
    "PathFunction",
    "RelativePath",
    "Root",
    "Slice",
    "UnknownFunctionError",
    "UnsupportedOperatorError",
    "UnsupportedSliceError",
    "ValueKind",
    "Wildcard",
    "execute",
    "get_config",
    "kind",
    "load_config",
    "truthy",
]

from ._ast import (
    BinaryOp,
    Child,
    ComparisonOp,
    CurrentNode,
    FilterExpr,
    FunctionCall,
    IndexExpr,
    IndexList,
    Key,
    LiteralNumber,
    LiteralString,
    RelativePath,
    Root,
    Slice,
    Wildcard,
)
from ._coercion import truthy
from ._config import EngineConfig, get_config, load_config
from ._errors import (
    ConfigError,
    EvaluationError,
    JsonWalkError,
    MaxDepthExceededError,
    UnknownFunctionError,
    UnsupportedOperatorError,
    UnsupportedSliceError,
)
from ._eval_engine import EvaluationContext, PathFunction, execute
from ._value import MISSING, JsonObject, ValueKind, kind
