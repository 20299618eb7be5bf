"""
Column kernels.

These four primitives are the only arithmetic the decompositions and solvers
use. They act on logical columns, so passing ``M.T`` turns each of them into
a row operation on ``M``. In the docstrings ``A[i]`` means column ``i`` of
``A``.
"""

from __future__ import annotations

import math

import numpy as np

from ..logging import get_logger
from .matrix import MatrixLike

logger = get_logger(__name__)


def dot_prod(A: MatrixLike, i: int, B: MatrixLike, j: int) -> float:
    """
    Return ``<A[i], B[j]>``.

    Both operands must have the same logical row count. A mismatch is logged
    and ``nan`` is returned so the caller's arithmetic cannot silently
    continue with a plausible-looking number.
    """
    if A.shape[0] != B.shape[0]:
        logger.error(
            "dot_prod expects equal row counts, got %d and %d", A.shape[0], B.shape[0]
        )
        return math.nan
    return float(np.dot(A.column(i), B.column(j)))


def mul_and_add(c: float, A: MatrixLike, i: int, B: MatrixLike, j: int) -> None:
    """``B[j] += c * A[i]``."""
    target = B.column(j)
    target += c * A.column(i)


def scale(c: float, A: MatrixLike, i: int) -> None:
    """``A[i] *= c``."""
    col = A.column(i)
    col *= c


def norm(A: MatrixLike, i: int) -> float:
    """Return ``||A[i]||_2``."""
    return math.sqrt(dot_prod(A, i, A, i))


__all__ = ["dot_prod", "mul_and_add", "scale", "norm"]
