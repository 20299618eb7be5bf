"""Diagnostics and debugging utilities for normopt."""

from .core import (
    assert_01_column,
    assert_orthonormal,
    constraint_residual,
    is_01_column,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "is_01_column",
    "assert_01_column",
    "assert_orthonormal",
    "constraint_residual",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
