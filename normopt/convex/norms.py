"""
Minimum-norm solutions of ``A x = b``.

For ``p`` in ``{1, 2, inf}`` the functions here find ``x`` minimizing
``||x||_p`` subject to ``A x = b``. The output ``x`` must be pre-allocated
with shape ``n x 1``.

- L2 has a closed form: project successively onto each constraint hyperplane
  along an orthonormal basis of the row space of ``A``.
- L1 and L-infinity become linear programs after splitting every variable
  into a non-negative positive and negative part; L-infinity additionally
  bounds every part by a single epigraph variable ``t``.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..core.kernels import dot_prod, mul_and_add, norm
from ..core.matrix import Matrix, MatrixLike
from ..core.result import OptimizeResult, SolverConfig, Status, resolve_config
from ..decompose.qr import qr
from ..diagnostics import constraint_residual
from ..logging import get_logger
from .lp import run_lp
from .utils import input_error, recombine, split_variables, validate_system

logger = get_logger(__name__)


def l2_min(
    A: MatrixLike,
    b: MatrixLike,
    x: MatrixLike,
    config: Optional[SolverConfig] = None,
) -> OptimizeResult:
    """
    Find the minimum Euclidean-norm ``x`` with ``A x = b``.

    The rows of ``A`` are orthonormalized by QR into ``q_1 .. q_m``. Starting
    from ``x = 0``, each step moves ``x`` along ``q_i`` just far enough to
    satisfy row ``i``; since ``q_i`` is orthogonal to the earlier rows, the
    earlier constraints stay satisfied and ``x`` stays in the row space.

    Returns ``Status.NO_SOLUTION`` when a row needs a correction along a
    direction with no component outside the earlier rows (an inconsistent
    dependent constraint), and ``Status.INPUT_ERROR`` for shape mismatches or
    more constraints than unknowns.
    """
    cfg = resolve_config(config)
    error = validate_system(A, b, x)
    if error is not None:
        return input_error(error)

    rows = A.T
    Q = Matrix.from_array(rows.to_array())
    decomposition = qr(Q, config=cfg)
    if decomposition.status is Status.INPUT_ERROR:
        return input_error(f"QR of the constraint rows failed: {decomposition.message}")

    x.column(0)[:] = 0.0
    m = A.shape[0]
    for i in range(m):
        numerator = b[i, 0] - dot_prod(rows, i, x, 0)
        if abs(numerator) <= cfg.tol:
            continue
        denominator = dot_prod(rows, i, Q, i)
        if abs(denominator) <= cfg.tol:
            message = f"Constraint row {i} is inconsistent with the earlier rows."
            logger.info(message)
            return OptimizeResult(Status.NO_SOLUTION, message, x=x, nit=i)
        mul_and_add(numerator / denominator, Q, i, x, 0)

    return OptimizeResult(
        Status.OK,
        x=x,
        fun=norm(x, 0),
        nit=m,
        primal_residual=constraint_residual(A, b, x),
    )


def l1_min(
    A: MatrixLike,
    b: MatrixLike,
    x: MatrixLike,
    config: Optional[SolverConfig] = None,
) -> OptimizeResult:
    """
    Find ``x`` minimizing ``||x||_1`` with ``A x = b``.

    Solves ``min sum(x+ + x-)`` subject to ``A (x+ - x-) = b``,
    ``x+, x- >= 0`` and recombines ``x = x+ - x-``. Statuses from the LP are
    returned unchanged.
    """
    cfg = resolve_config(config)
    error = validate_system(A, b, x)
    if error is not None:
        return input_error(error)

    A2 = split_variables(A)
    n2 = A2.shape[1]
    x2 = Matrix(n2, 1)
    cost = Matrix.zeros(n2, 1)
    cost.column(0)[:] = 1.0

    result = run_lp(A2, b, x2, cost, cfg)
    if result.status is not Status.OK:
        return OptimizeResult(result.status, result.message, x=x, nit=result.nit)

    recombine(x2, x)
    return OptimizeResult(
        Status.OK,
        x=x,
        fun=float(np.sum(np.abs(x.column(0)))),
        nit=result.nit,
        primal_residual=constraint_residual(A, b, x),
    )


def _epigraph_system(A: MatrixLike, b: MatrixLike) -> tuple[Matrix, Matrix, Matrix]:
    """
    Build ``A3 = [[A2, 0, 0], [I, I, -1]]``, ``b3 = [b; 0]`` and ``c3 = e_last``.

    The extra rows read ``x2_i + s_i - t = 0`` with slack ``s_i >= 0``, i.e.
    every split variable is bounded by ``t``.
    """
    A2 = split_variables(A)
    m, n2 = A2.shape
    A3 = Matrix.zeros(m + n2, 2 * n2 + 1)
    t_col = 2 * n2
    for j in range(n2):
        A3.column(j)[:m] = A2.column(j)
        A3[m + j, j] = 1.0
        A3[m + j, n2 + j] = 1.0
        A3[m + j, t_col] = -1.0

    b3 = Matrix.zeros(m + n2, 1)
    b3.column(0)[:m] = b.column(0)

    c3 = Matrix.zeros(2 * n2 + 1, 1)
    c3[t_col, 0] = 1.0
    return A3, b3, c3


def linf_min(
    A: MatrixLike,
    b: MatrixLike,
    x: MatrixLike,
    config: Optional[SolverConfig] = None,
) -> OptimizeResult:
    """
    Find ``x`` minimizing ``||x||_inf`` with ``A x = b``.

    After splitting ``x = x+ - x-`` a single variable ``t`` bounds every
    split variable from above; minimizing ``t`` minimizes the largest part,
    which at the optimum equals ``max |x_k|``.
    """
    cfg = resolve_config(config)
    error = validate_system(A, b, x)
    if error is not None:
        return input_error(error)

    A3, b3, c3 = _epigraph_system(A, b)
    x3 = Matrix(A3.shape[1], 1)

    result = run_lp(A3, b3, x3, c3, cfg)
    if result.status is not Status.OK:
        return OptimizeResult(result.status, result.message, x=x, nit=result.nit)

    recombine(x3, x)
    return OptimizeResult(
        Status.OK,
        x=x,
        fun=float(np.max(np.abs(x.column(0)))),
        nit=result.nit,
        primal_residual=constraint_residual(A, b, x),
    )


__all__ = ["l1_min", "l2_min", "linf_min"]
