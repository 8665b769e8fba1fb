"""
Finite-or-infinite distance values.

A :class:`Distance` is either a finite integer or the single infinite value
:data:`INFINITY`. Unreachability is carried by the tag itself (``value is
None``), so no finite distance, however large, can be mistaken for it.
"""

from __future__ import annotations

import functools
import numbers
from dataclasses import dataclass
from typing import Optional

from ..errors import InvalidArgument


@functools.total_ordering
@dataclass(frozen=True)
class Distance:
    """
    Shortest-path cost from the start vertex.

    Attributes:
        value: Finite integer cost, or None for +infinity.

    Example:
        >>> Distance(3) < INFINITY
        True
        >>> str(INFINITY)
        'INF'
    """

    value: Optional[int] = None

    def __post_init__(self) -> None:
        if self.value is not None and (
            isinstance(self.value, bool) or not isinstance(self.value, numbers.Integral)
        ):
            raise InvalidArgument(f"Distance value must be an integer or None, got {self.value!r}.")
        if self.value is not None:
            object.__setattr__(self, "value", int(self.value))

    @property
    def is_finite(self) -> bool:
        return self.value is not None

    @property
    def is_infinite(self) -> bool:
        return self.value is None

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Distance):
            return NotImplemented
        if self.value is None:
            return False
        if other.value is None:
            return True
        return self.value < other.value

    def __int__(self) -> int:
        if self.value is None:
            raise InvalidArgument("Cannot convert an infinite distance to int.")
        return self.value

    def __float__(self) -> float:
        return float("inf") if self.value is None else float(self.value)

    def __str__(self) -> str:
        return "INF" if self.value is None else str(self.value)


INFINITY = Distance()


__all__ = ["Distance", "INFINITY"]
