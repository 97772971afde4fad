# typeshape.core
# This package contains the type inference engine: the Type lattice, the
# array sampler, the classifier, the merger and the renderer.

from .classify import UNDEFINED, ValueKind, classify, kind_of
from .errors import (
    InvalidInputError,
    InvariantViolation,
    TypeshapeError,
    UnsupportedValueKind,
)
from .infer import infer, load_json
from .lattice import EMPTY, UNDEFINED_TYPE, SimpleKind, Type
from .merge import fold, merge, merge_object_members
from .render import declare, render, render_property
from .sampling import SamplingStrategy, sample

__all__ = [
    "Type",
    "SimpleKind",
    "EMPTY",
    "UNDEFINED",
    "UNDEFINED_TYPE",
    "ValueKind",
    "SamplingStrategy",
    "sample",
    "classify",
    "kind_of",
    "merge",
    "merge_object_members",
    "fold",
    "render",
    "render_property",
    "declare",
    "infer",
    "load_json",
    "TypeshapeError",
    "InvalidInputError",
    "UnsupportedValueKind",
    "InvariantViolation",
]
