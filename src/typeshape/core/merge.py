"""
Merging of `Type` lattice nodes.

Two rules are at work and are deliberately kept apart:

* At the top level, and when folding sampled array elements, an absent
  operand is a true identity: ``merge(t, None) == t``.
* Inside object shapes, a member that only one operand has is merged with
  ``undefined`` instead. This records that the member was missing from some
  of the observed samples, i.e. that the field is optional.

Nodes are never mutated; every merge builds new nodes.
"""
from __future__ import annotations

import functools
from typing import Iterable, Optional, Tuple

from .lattice import EMPTY, UNDEFINED_TYPE, Member, Type


def merge(a: Optional[Type], b: Optional[Type]) -> Optional[Type]:
    """Returns the union of two possibly absent nodes."""
    if a is None:
        return b
    if b is None:
        return a

    if a.members is None:
        members = b.members
    elif b.members is None:
        members = a.members
    else:
        members = merge_object_members(a.members, b.members)

    return Type(
        simples=a.simples | b.simples,
        members=members,
        instance_of=a.instance_of | b.instance_of,
        array=merge(a.array, b.array),
    )


def merge_object_members(
    a: Tuple[Member, ...], b: Tuple[Member, ...]
) -> Tuple[Member, ...]:
    """
    Merges two object shapes member by member.

    Members keep their first-appearance order: those of `a` first, then the
    ones only `b` has. A member missing on one side is merged with
    ``undefined`` rather than taken over unchanged.
    """
    a_types = dict(a)
    b_types = dict(b)
    names = list(a_types)
    names.extend(name for name in b_types if name not in a_types)

    return tuple(
        (
            name,
            merge(
                a_types.get(name, UNDEFINED_TYPE),
                b_types.get(name, UNDEFINED_TYPE),
            ),
        )
        for name in names
    )


def fold(types: Iterable[Type]) -> Type:
    """Left-folds `types` through `merge`, starting from the empty node."""
    return functools.reduce(merge, types, EMPTY)
