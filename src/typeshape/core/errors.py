from __future__ import annotations

from typing import Optional


class TypeshapeError(Exception):
    """Base class for all exceptions raised by typeshape."""

    pass


class InvalidInputError(TypeshapeError, ValueError):
    """Raised when the input text is not a well-formed JSON document."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.message = message
        self.line = line
        self.column = column
        location = f" (line {line}, column {column})" if line is not None else ""
        super().__init__(f"Invalid JSON input{location}: {message}")


class UnsupportedValueKind(TypeshapeError, TypeError):
    """
    Raised when the classifier meets a value it has no type for.

    Plain JSON input never triggers this; it is reachable only when richer
    Python values are classified programmatically.

    Attributes:
        kind (str): The name of the value's runtime type.
        snapshot (str): A best-effort serialization of the value.
        path (str): Where the value was found, e.g. ``$.items[0]``.
    """

    def __init__(self, kind: str, snapshot: str, path: str = "$"):
        self.kind = kind
        self.snapshot = snapshot
        self.path = path
        super().__init__(f"Unrecognised value of type {kind} at {path}: {snapshot}")


class InvariantViolation(TypeshapeError, AssertionError):
    """Raised when an unvalidated sampling strategy reaches the array sampler."""

    pass
