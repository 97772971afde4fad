"""
Rendering of `Type` lattice nodes as type declaration syntax.

A node renders as the union of its populated fields, always in this order:
the array type, the class names, the primitive kinds, then the object
literal. Class names and primitive kinds are sorted so that output does not
depend on set iteration order.
"""
from __future__ import annotations

import json
from typing import Optional

from typeguard import typechecked

from .lattice import Type, is_identifier, is_type_name

UNION_SEPARATOR = " | "
DEFAULT_TYPE_NAME = "MyCustomType"


def render_property(name: str) -> str:
    """Emits a property name bare, or as a quoted, bracket-indexed key."""
    if is_identifier(name):
        return name
    # Lone surrogates cannot be encoded as UTF-8 and stay escaped.
    escape_all = any("\ud800" <= char <= "\udfff" for char in name)
    return f"[{json.dumps(name, ensure_ascii=escape_all)}]"


def _render_object(members, indent: int, level: int) -> str:
    fields = [
        f"{render_property(name)}: {_render(member, indent, level + 1)};"
        for name, member in members
    ]
    if not indent:
        return "{" + "".join(fields) + "}"
    if not fields:
        return "{}"
    inner = " " * (indent * (level + 1))
    outer = " " * (indent * level)
    body = "\n".join(inner + field for field in fields)
    return "{\n" + body + "\n" + outer + "}"


def _render(t: Type, indent: int, level: int) -> str:
    parts = []
    if t.array is not None:
        parts.append(f"Array<{_render(t.array, indent, level)}>")
    parts.extend(sorted(t.instance_of))
    parts.extend(sorted(kind.value for kind in t.simples))
    if t.members is not None:
        parts.append(_render_object(t.members, indent, level))

    if not parts:
        return "unknown"
    return UNION_SEPARATOR.join(parts)


@typechecked
def render(t: Type, indent: Optional[int] = None) -> str:
    """
    Renders a node as a type expression.

    Args:
        t: The node to render.
        indent: None or 0 renders object literals on one line with no
            separator between members, e.g. ``{a: number;b: string;}``.
            A positive number puts each member on its own line, indented by
            that many spaces per nesting level.
    """
    if indent is not None and indent < 0:
        raise ValueError(f"indent must not be negative, got {indent}")
    return _render(t, indent or 0, 0)


@typechecked
def declare(t: Type, name: str = DEFAULT_TYPE_NAME, indent: Optional[int] = None) -> str:
    """Renders a node as a ``type <name> = ...;`` declaration."""
    if not is_type_name(name):
        raise ValueError(f"Type name {name!r} is not a valid identifier or is reserved")
    return f"type {name} = {render(t, indent)};"
