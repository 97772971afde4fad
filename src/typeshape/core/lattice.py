"""
This module defines the `Type` lattice node, the structure that describes
the type of one value, or of several sampled values at once.

A node is not a tagged union: any combination of its fields may be populated
at the same time, and each populated field contributes one alternative to
the rendered union. A node with no populated field carries no information
and renders as ``unknown``.
"""
from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import FrozenSet, Iterator, Optional, Tuple


class SimpleKind(str, enum.Enum):
    """Primitive kind tags. The value is the name the renderer emits."""

    BOOLEAN = "boolean"
    FUNCTION = "function"
    NULL = "null"
    NUMBER = "number"
    STRING = "string"
    UNDEFINED = "undefined"

    def __str__(self) -> str:
        return self.value


Member = Tuple[str, "Type"]


@dataclass(frozen=True)
class Type:
    """
    An immutable node of the type lattice.

    Attributes:
        simples: Primitive kind tags.
        members: Property name and member type pairs of a plain object, in
            declaration order, or None when no object shape was observed.
            An empty tuple is an object with zero members.
        instance_of: Class names of opaque, nominally typed values.
        array: The merged element type, or None when no array was observed.
    """

    simples: FrozenSet[SimpleKind] = frozenset()
    members: Optional[Tuple[Member, ...]] = None
    instance_of: FrozenSet[str] = frozenset()
    array: Optional["Type"] = None

    @classmethod
    def simple(cls, kind: SimpleKind) -> "Type":
        return cls(simples=frozenset([kind]))

    @classmethod
    def object_of(cls, members) -> "Type":
        """Builds an object node from an iterable of (name, Type) pairs."""
        return cls(members=tuple(members))

    @classmethod
    def named(cls, name: str) -> "Type":
        return cls(instance_of=frozenset([name]))

    @classmethod
    def array_of(cls, element: "Type") -> "Type":
        return cls(array=element)

    def member(self, name: str) -> Optional["Type"]:
        """Returns the type of the named member, or None if it is absent."""
        for key, value in self.members or ():
            if key == name:
                return value
        return None

    def member_names(self) -> Iterator[str]:
        for key, _ in self.members or ():
            yield key


EMPTY = Type()

# The type a member takes in samples where it was not observed.
UNDEFINED_TYPE = Type.simple(SimpleKind.UNDEFINED)

IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def is_identifier(name: str) -> bool:
    """True if `name` can be written as a bare property name."""
    return IDENTIFIER.fullmatch(name) is not None


# Reserved words and built-in type names that cannot name a type alias.
RESERVED_TYPE_NAMES = frozenset(
    [
        "any", "bigint", "boolean", "break", "case", "catch", "class", "const",
        "continue", "debugger", "default", "delete", "do", "else", "enum",
        "export", "extends", "false", "finally", "for", "function", "if",
        "implements", "import", "in", "instanceof", "interface", "let", "never",
        "new", "null", "number", "object", "package", "private", "protected",
        "public", "return", "static", "string", "super", "switch", "symbol",
        "this", "throw", "true", "try", "type", "typeof", "undefined", "unknown",
        "var", "void", "while", "with", "yield",
    ]
)


def is_type_name(name: str) -> bool:
    """True if `name` can be declared as a type alias."""
    return is_identifier(name) and name not in RESERVED_TYPE_NAMES
