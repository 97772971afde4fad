"""
Array sampling strategies.

Classifying every element of a large, homogeneous array is wasted work. A
`SamplingStrategy` selects a bounded set of representative elements whose
types are merged to describe the whole array. The strategy chosen for a
top-level call applies at every nesting depth.
"""
from __future__ import annotations

import enum
from typing import Any, List, Sequence, Union

from .errors import InvariantViolation


class SamplingStrategy(str, enum.Enum):
    FIRST = "first"
    FIRST_LAST = "first+last"
    FIRST_MID_LAST = "first+mid+last"
    ALL = "all"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, token: Union[str, "SamplingStrategy"]) -> "SamplingStrategy":
        """
        Validates a strategy given as an enum member or its string value.

        Raises:
            ValueError: If the token does not name a strategy.
        """
        if isinstance(token, cls):
            return token
        try:
            return cls(token)
        except ValueError:
            valid = ", ".join(repr(s.value) for s in cls)
            raise ValueError(
                f"Unknown sampling strategy {token!r}; expected one of {valid}"
            ) from None


def _indices(length: int, strategy: SamplingStrategy) -> List[int]:
    last = length - 1
    if strategy is SamplingStrategy.FIRST:
        return [0]
    if strategy is SamplingStrategy.FIRST_LAST:
        return [0, last]
    if strategy is SamplingStrategy.FIRST_MID_LAST:
        return [0, length // 2, last]
    if strategy is SamplingStrategy.ALL:
        return list(range(length))
    raise InvariantViolation(f"Unhandled sampling strategy: {strategy!r}")


def sample(items: Sequence[Any], strategy: SamplingStrategy) -> List[Any]:
    """
    Selects the elements of `items` to classify, in their original order.

    Indices that coincide on short sequences are only taken once, so a
    single-element sequence yields one candidate under every strategy.

    Args:
        items: The sequence to sample.
        strategy: A validated `SamplingStrategy`. Strings are not accepted
            here; use `SamplingStrategy.parse` at the API boundary.

    Raises:
        InvariantViolation: If `strategy` is not a `SamplingStrategy`.
    """
    if not isinstance(strategy, SamplingStrategy):
        raise InvariantViolation(
            f"Sampling strategy must be validated before sampling, got {strategy!r}"
        )
    if not items:
        return []

    seen = set()
    picked = []
    for index in _indices(len(items), strategy):
        if index not in seen:
            seen.add(index)
            picked.append(items[index])
    return picked
