"""
Reduced QR decomposition by modified Gram-Schmidt.

The input matrix is orthonormalized in place, column by column, so that on
return ``Q_orig = Q R`` with ``Q`` holding orthonormal columns and ``R``
upper triangular. ``R`` is optional; the L2 solver only needs ``Q``.

References:
    - Trefethen & Bau, *Numerical Linear Algebra*, Lecture 8, 1997.
"""

from __future__ import annotations

from typing import List, Optional

from ..core.kernels import dot_prod, mul_and_add, norm, scale
from ..core.matrix import MatrixLike, is_allocated
from ..core.result import OptimizeResult, SolverConfig, Status, resolve_config
from ..diagnostics import assert_orthonormal, is_debug_enabled
from ..logging import get_logger

logger = get_logger(__name__)


def qr(
    Q: MatrixLike,
    R: Optional[MatrixLike] = None,
    config: Optional[SolverConfig] = None,
) -> OptimizeResult:
    """
    Decompose a tall-or-square matrix in place.

    Parameters
    ----------
    Q:
        Matrix (or view) of shape ``(rows, cols)`` with ``rows >= cols``. It is
        overwritten with the orthonormal factor.
    R:
        Optional ``(cols, cols)`` output for the triangular factor. It is
        zeroed before being filled.
    config:
        Solver settings; ``tol`` decides when a column counts as dependent.

    Returns
    -------
    OptimizeResult
        ``Status.OK`` on success. ``Status.LINEARLY_DEPENDENT`` when some column
        had (relatively) zero norm after orthogonalization; such columns are
        left as they are, their ``R`` diagonal stays 0, and the remaining
        columns are still processed. ``Status.INPUT_ERROR`` for wide or
        released inputs and a mis-shaped ``R``.
    """
    cfg = resolve_config(config)
    if not is_allocated(Q):
        return OptimizeResult(Status.INPUT_ERROR, "Expected an allocated matrix to decompose.")
    rows, cols = Q.shape
    if rows < cols:
        return OptimizeResult(
            Status.INPUT_ERROR,
            f"Expected a tall or square matrix for QR, got {rows} x {cols}.",
        )
    if R is not None:
        if not is_allocated(R) or R.shape != (cols, cols):
            return OptimizeResult(
                Status.INPUT_ERROR, f"Expected R to be an allocated {cols} x {cols} matrix."
            )
        for k in range(cols):
            R.column(k)[:] = 0.0

    original_norms = [norm(Q, i) for i in range(cols)]
    dependent: List[int] = []

    for i in range(cols):
        col_norm = norm(Q, i)
        if col_norm <= cfg.tol * original_norms[i]:
            dependent.append(i)
            continue
        scale(1.0 / col_norm, Q, i)
        if R is not None:
            R[i, i] = col_norm
        for j in range(i + 1, cols):
            dp = dot_prod(Q, i, Q, j)
            if R is not None:
                R[i, j] = dp
            mul_and_add(-dp, Q, i, Q, j)

    if dependent:
        message = f"Columns {dependent} are linearly dependent on earlier columns."
        logger.info(message)
        return OptimizeResult(Status.LINEARLY_DEPENDENT, message, nit=cols)

    if is_debug_enabled():
        assert_orthonormal(Q, atol=max(cfg.tol, 1e-9) * 1e3)
    return OptimizeResult(Status.OK, nit=cols)


__all__ = ["qr"]
