"""Debug mode switch for normopt.

With debug mode on:

- ``M[i, j]`` and ``M.column(j)`` check logical indices against ``M.shape``
  and raise ``IndexError``; with it off, an out-of-range index may silently
  address another element of the flat buffer.
- ``apply_lp`` checks after every pivot that each basic column is a
  01-column with its 1 in the recorded row.
- ``qr`` checks that ``Q`` came out orthonormal when no column was
  dependent.

The initial state comes from ``NORMOPT_DEBUG`` (``1``, ``true``, ``yes`` or
``on``, any case) when the module is first imported.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_DEBUG_ENV_VAR = "NORMOPT_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _flag_from_env() -> bool:
    return os.getenv(_DEBUG_ENV_VAR, "0").strip().lower() in _TRUTHY


_debug_enabled: bool = _flag_from_env()


def is_debug_enabled() -> bool:
    """Return whether bounds and invariant checks are active."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Turn the checks on or off for the whole process.

    Parameters
    ----------
    enabled:
        New state. Matrices already allocated pick it up on their next access.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Run a block with the checks switched to ``enabled``.

    The previous state is restored on exit, including when the block raises.

    Example
    -------
    >>> with debug_context():
    ...     # M[i, j] raises IndexError here for i, j outside M.shape
    ...     pass
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev
