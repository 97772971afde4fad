from .core.classify import UNDEFINED, classify
from .core.errors import (
    InvalidInputError,
    InvariantViolation,
    TypeshapeError,
    UnsupportedValueKind,
)
from .core.infer import infer
from .core.lattice import SimpleKind, Type
from .core.merge import merge
from .core.render import declare, render
from .core.sampling import SamplingStrategy

__all__ = [
    # Core API
    "classify",
    "merge",
    "render",
    "declare",
    "infer",
    "Type",
    "SimpleKind",
    "SamplingStrategy",
    "UNDEFINED",

    # Errors
    "TypeshapeError",
    "InvalidInputError",
    "UnsupportedValueKind",
    "InvariantViolation",
]

__version__ = "0.1.0"
