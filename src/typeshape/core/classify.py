"""
Classification of concrete Python values into `Type` lattice nodes.

Values are first sorted into an explicit `ValueKind`; the node is then built
from the kind, recursing into object members and sampled array elements.
Recursion depth follows the structural depth of the value, and circular
structures are not detected.
"""
from __future__ import annotations

import enum
import json
import types
from typing import Any, Optional, Union

from .errors import UnsupportedValueKind
from .lattice import SimpleKind, Type, is_identifier
from .log import get_logger
from .merge import fold
from .sampling import SamplingStrategy, sample

logger = get_logger(__name__)


class _Undefined:
    """Type of the `UNDEFINED` sentinel."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


# Stands for a value that is not there at all, as opposed to None (null).
UNDEFINED = _Undefined()

_FUNCTION_TYPES = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    type,
)


class ValueKind(enum.Enum):
    NULL = "null"
    UNDEFINED = "undefined"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    FUNCTION = "function"
    ARRAY = "array"
    OBJECT = "object"
    NAMED = "named"


_SIMPLE_KINDS = {
    ValueKind.NULL: SimpleKind.NULL,
    ValueKind.UNDEFINED: SimpleKind.UNDEFINED,
    ValueKind.BOOLEAN: SimpleKind.BOOLEAN,
    ValueKind.NUMBER: SimpleKind.NUMBER,
    ValueKind.STRING: SimpleKind.STRING,
    ValueKind.FUNCTION: SimpleKind.FUNCTION,
}


def kind_of(value: Any) -> Optional[ValueKind]:
    """
    Returns the `ValueKind` of a value, or None if it has none.

    Containers are matched on their exact type: subclasses of ``dict``,
    ``list`` or ``tuple`` (an ``OrderedDict``, a named tuple) are instances
    of a distinct class and classify as `ValueKind.NAMED`.
    """
    if value is None:
        return ValueKind.NULL
    if value is UNDEFINED:
        return ValueKind.UNDEFINED

    cls = type(value)
    if cls is bool:
        return ValueKind.BOOLEAN
    if cls in (int, float):
        return ValueKind.NUMBER
    if cls is str:
        return ValueKind.STRING
    if cls in (list, tuple):
        return ValueKind.ARRAY
    if cls is dict:
        return ValueKind.OBJECT
    if isinstance(value, _FUNCTION_TYPES):
        return ValueKind.FUNCTION
    if cls.__module__ != "builtins":
        return ValueKind.NAMED
    return None


def _snapshot(value: Any) -> str:
    try:
        return json.dumps(value)
    except (TypeError, ValueError):
        return repr(value)


def _member_path(path: str, name: str) -> str:
    if is_identifier(name):
        return f"{path}.{name}"
    return f"{path}[{json.dumps(name)}]"


def _classify(value: Any, strategy: SamplingStrategy, path: str) -> Type:
    kind = kind_of(value)

    if kind in _SIMPLE_KINDS:
        return Type.simple(_SIMPLE_KINDS[kind])

    if kind is ValueKind.ARRAY:
        if not value:
            logger.warning("empty_array_found", path=path)
        # Indices are only needed for paths; pair them before sampling.
        candidates = sample(list(enumerate(value)), strategy)
        return Type.array_of(
            fold(
                _classify(item, strategy, f"{path}[{index}]")
                for index, item in candidates
            )
        )

    if kind is ValueKind.OBJECT:
        # Keys that stringify alike collapse onto the first one's position.
        members = {}
        for name, item in value.items():
            key = str(name)
            members[key] = _classify(item, strategy, _member_path(path, key))
        return Type.object_of(members.items())

    if kind is ValueKind.NAMED:
        return Type.named(type(value).__name__)

    raise UnsupportedValueKind(type(value).__name__, _snapshot(value), path)


def classify(value: Any, strategy: Union[str, SamplingStrategy] = "all") -> Type:
    """
    Infers the `Type` of a value.

    Args:
        value: A decoded JSON value, or a richer Python value (see `kind_of`).
        strategy: The `SamplingStrategy`, or its string value, used for every
            array at every depth.

    Returns:
        A new `Type` node.

    Raises:
        ValueError: If `strategy` is not a known sampling strategy.
        UnsupportedValueKind: If some nested value has no `ValueKind`.
    """
    return _classify(value, SamplingStrategy.parse(strategy), "$")
