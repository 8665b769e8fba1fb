"""Diagnostics and debugging utilities for bellford."""

from .core import (
    assert_predecessor_forest,
    assert_relaxation_fixpoint,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    reset_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "assert_relaxation_fixpoint",
    "assert_predecessor_forest",
    "is_debug_enabled",
    "set_debug_enabled",
    "reset_debug_enabled",
    "debug_context",
]
