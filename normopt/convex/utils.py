"""
Input validation and problem reformulation helpers.

Validators return an error message (or ``None``) instead of raising so the
solvers can turn a bad call into ``Status.INPUT_ERROR`` before touching any
caller-owned output.
"""

from __future__ import annotations

from typing import Optional

from ..core.kernels import mul_and_add
from ..core.matrix import Matrix, MatrixLike, is_allocated
from ..core.result import OptimizeResult, Status
from ..logging import get_logger

logger = get_logger(__name__)


def check_column_vector(M: Optional[MatrixLike], rows: int, name: str) -> Optional[str]:
    """Return an error message unless ``M`` is an allocated ``rows x 1`` matrix."""
    if not is_allocated(M):
        return f"Expected {name} to be an allocated matrix."
    if M.shape != (rows, 1):
        return f"Expected {name} to have shape {rows} x 1, got {M.shape[0]} x {M.shape[1]}."
    return None


def validate_system(
    A: Optional[MatrixLike],
    b: Optional[MatrixLike],
    x: Optional[MatrixLike],
) -> Optional[str]:
    """Check that ``A`` is ``m x n``, ``b`` is ``m x 1`` and ``x`` is ``n x 1``."""
    if not is_allocated(A):
        return "Expected A to be an allocated matrix."
    m, n = A.shape
    return check_column_vector(b, m, "b") or check_column_vector(x, n, "x")


def input_error(message: str) -> OptimizeResult:
    logger.info(message)
    return OptimizeResult(Status.INPUT_ERROR, message)


def split_variables(A: MatrixLike) -> Matrix:
    """
    Represent each free variable as a difference of two non-negative ones.

    Returns ``A2`` with ``2n`` columns where column ``2k`` is ``A[k]`` and
    column ``2k + 1`` is ``-A[k]``.
    """
    m, n = A.shape
    A2 = Matrix.zeros(m, 2 * n)
    for k in range(n):
        mul_and_add(1.0, A, k, A2, 2 * k)
        mul_and_add(-1.0, A, k, A2, 2 * k + 1)
    return A2


def recombine(split: MatrixLike, x: MatrixLike) -> None:
    """Write ``x[k] = split[2k] - split[2k + 1]`` for every ``k``."""
    for k in range(x.shape[0]):
        x[k, 0] = split[2 * k, 0] - split[2 * k + 1, 0]


__all__ = [
    "check_column_vector",
    "validate_system",
    "input_error",
    "split_variables",
    "recombine",
]
