"""Exception hierarchy for bellford.

Caller mistakes raise :class:`InvalidArgument`, which is also a
``ValueError`` so existing ``except ValueError`` handlers keep working.
Negative cycles and unreachable targets are *not* errors; they are returned
as result values (see :mod:`bellford.graphs.shortest` and
:mod:`bellford.graphs.paths`).
"""

from __future__ import annotations


class BellfordError(Exception):
    """Base class for all bellford exceptions."""


class InvalidArgument(BellfordError, ValueError):
    """Malformed input: bad vertex count, out-of-range vertex, non-integer weight."""


class CorruptResult(BellfordError, RuntimeError):
    """
    A shortest-path result is internally inconsistent.

    Raised when a predecessor walk cannot reach the start vertex although
    the target has a finite distance, or when a debug-mode consistency check
    fails. Indicates a logic defect, never a property of the input graph.
    """


class DistanceOverflowError(BellfordError, OverflowError):
    """A candidate distance fell below the configured representable range."""


__all__ = [
    "BellfordError",
    "InvalidArgument",
    "CorruptResult",
    "DistanceOverflowError",
]
