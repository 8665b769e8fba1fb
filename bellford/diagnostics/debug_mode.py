"""Debug mode management for bellford.

While debug mode is on, every successful ``ShortestPathEngine.run`` passes
its tables through :func:`~bellford.diagnostics.assert_relaxation_fixpoint`
and :func:`~bellford.diagnostics.assert_predecessor_forest` before returning,
turning a silent logic defect into a ``CorruptResult``. The checks cost an
extra O(E + V^2) per run, so the default comes from ``BELLFORD_DEBUG``.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_DEBUG_ENV_VAR = "BELLFORD_DEBUG"
_TRUTHY = ("1", "true", "yes", "on")


def _debug_from_env() -> bool:
    return os.getenv(_DEBUG_ENV_VAR, "0").strip().lower() in _TRUTHY


_debug_enabled: bool = _debug_from_env()


def is_debug_enabled() -> bool:
    """Return whether runs are checked for consistency before returning."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Globally enable or disable result consistency checks.

    Parameters
    ----------
    enabled:
        Whether to enable debug mode.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


def reset_debug_enabled() -> bool:
    """
    Restore debug mode to the value of ``BELLFORD_DEBUG``.

    Returns
    -------
    bool
        The restored setting.
    """
    global _debug_enabled
    _debug_enabled = _debug_from_env()
    return _debug_enabled


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Context manager to temporarily enable or disable debug mode.

    Parameters
    ----------
    enabled:
        Whether to check runs inside the block.

    Example
    -------
    >>> with debug_context(True):
    ...     result = bellman_ford(graph, 0)
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev
