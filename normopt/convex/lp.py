"""
Linear programming: two-phase tableau simplex and a SciPy reference solver.

Problems are given in standard form

```
    minimize    c^T x
    subject to  A x = b
                x >= 0
```

with ``A`` of shape ``m x n`` and ``b``, ``x``, ``c`` single-column matrices.
Phase 1 minimizes the total mass of one artificial variable per constraint;
a positive optimum means no non-negative ``x`` satisfies ``A x = b``. Phase 2
drops the artificial columns and optimizes the true cost from the feasible
basis phase 1 found.

Example:
    >>> from normopt.core.matrix import Matrix
    >>> from normopt.convex.lp import run_lp
    >>> A = Matrix.from_rows([[1.0, 5.0]])
    >>> b = Matrix.column_vector([5.0])
    >>> c = Matrix.column_vector([1.0, 1.0])
    >>> x = Matrix(2, 1)
    >>> run_lp(A, b, x, c).status
    <Status.OK: 'ok'>
    >>> x.to_array().ravel()
    array([0., 1.])

References:
    - Bertsimas & Tsitsiklis, *Introduction to Linear Optimization*, 1997.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..core.kernels import dot_prod
from ..core.matrix import Matrix, MatrixLike, is_allocated
from ..core.result import OptimizeResult, SolverConfig, Status, resolve_config
from ..diagnostics import constraint_residual
from ..logging import get_logger
from .simplex import apply_lp, drive_out_artificials
from .tableau import artificial_clearing_pivots, build_phase_one
from .utils import check_column_vector, input_error, validate_system

try:
    from scipy.optimize import linprog as _scipy_linprog

    SCIPY_AVAILABLE = True
except ImportError:  # pragma: no cover - SciPy is optional
    SCIPY_AVAILABLE = False
    _scipy_linprog = None

logger = get_logger(__name__)


def _validate_lp(
    A: Optional[MatrixLike],
    b: Optional[MatrixLike],
    x: Optional[MatrixLike],
    c: Optional[MatrixLike],
) -> Optional[str]:
    error = validate_system(A, b, x)
    if error is None:
        error = check_column_vector(c, A.shape[1], "c")
    return error


def run_lp(
    A: MatrixLike,
    b: MatrixLike,
    x: MatrixLike,
    c: MatrixLike,
    config: Optional[SolverConfig] = None,
) -> OptimizeResult:
    """
    Solve ``min c^T x`` subject to ``A x = b, x >= 0``.

    ``x`` must be pre-allocated with shape ``n x 1``; it is written only when
    the solve succeeds and left untouched on input errors.

    Returns
    -------
    OptimizeResult
        ``Status.OK`` with ``fun = c^T x``; ``Status.NO_SOLUTION`` when the
        constraints admit no non-negative solution;
        ``Status.UNBOUNDED_SOLUTION`` when the objective decreases without
        limit; ``Status.INPUT_ERROR`` for shape mismatches. A final basis
        whose ``x`` misses ``A x = b`` by more than ``tol * (1 + ||b||_inf)``
        is reported as ``Status.NO_SOLUTION`` rather than ``Status.OK``.
    """
    cfg = resolve_config(config)
    error = _validate_lp(A, b, x, c)
    if error is not None:
        return input_error(error)

    tableau, layout = build_phase_one(A, b, c)
    status, message, nit = apply_lp(tableau, cfg, clear_columns=artificial_clearing_pivots(layout))
    if status is not Status.OK:
        return OptimizeResult(status, f"Phase 1 failed: {message}", x=x, nit=nit)

    infeasibility = tableau.objective_value
    if abs(infeasibility) > cfg.tol:
        message = (
            f"No non-negative x satisfies Ax = b "
            f"(phase 1 objective {infeasibility:.3e} exceeds tolerance {cfg.tol:g})."
        )
        logger.info(message)
        return OptimizeResult(Status.NO_SOLUTION, message, x=x, nit=nit)

    nit += drive_out_artificials(tableau, layout, cfg.tol)
    phase_two = tableau.phase_two(layout)
    status, message, nit2 = apply_lp(phase_two, cfg)
    nit += nit2
    if status is not Status.OK:
        return OptimizeResult(status, f"Phase 2 failed: {message}", x=x, nit=nit)

    candidate = Matrix.zeros(A.shape[1], 1)
    for k, col in enumerate(phase_two.original_vars):
        candidate[k, 0] = phase_two.basic_value(col)

    residual = constraint_residual(A, b, candidate)
    limit = cfg.tol * (1.0 + float(np.max(np.abs(b.column(0)))))
    if residual > limit:
        message = (
            f"Extracted x violates Ax = b "
            f"(residual {residual:.3e} exceeds tolerance {limit:.3e})."
        )
        logger.warning(message)
        return OptimizeResult(Status.NO_SOLUTION, message, x=x, nit=nit)

    x.column(0)[:] = candidate.column(0)
    return OptimizeResult(
        Status.OK,
        x=x,
        fun=dot_prod(c, 0, x, 0),
        nit=nit,
        primal_residual=residual,
    )


def linprog_wrapper(
    A: MatrixLike,
    b: MatrixLike,
    c: MatrixLike,
) -> OptimizeResult:
    """
    Solve the same standard-form LP with SciPy's HiGHS backend.

    Intended for cross-checking :func:`run_lp`. The solution is returned in a
    freshly allocated ``n x 1`` matrix.
    """
    if not SCIPY_AVAILABLE:  # pragma: no cover - depends on SciPy
        return input_error("SciPy is not available")
    if not is_allocated(A):
        return input_error("Expected A to be an allocated matrix.")
    m, n = A.shape
    error = check_column_vector(b, m, "b") or check_column_vector(c, n, "c")
    if error is not None:
        return input_error(error)

    a_eq = A.to_array()
    b_eq = b.to_array().reshape(-1)
    res = _scipy_linprog(
        c=c.to_array().reshape(-1),
        A_eq=a_eq,
        b_eq=b_eq,
        bounds=[(0, None)] * n,
        method="highs",
    )
    if res.status == 2:
        return OptimizeResult(Status.NO_SOLUTION, res.message, nit=res.nit)
    if res.status == 3:
        return OptimizeResult(Status.UNBOUNDED_SOLUTION, res.message, nit=res.nit)
    if not res.success:
        return OptimizeResult(Status.NO_SOLUTION, res.message, nit=res.nit)

    x = Matrix.from_array(np.asarray(res.x, dtype=float))
    return OptimizeResult(
        Status.OK,
        message=res.message,
        x=x,
        fun=float(res.fun),
        nit=res.nit,
        primal_residual=float(np.linalg.norm(a_eq @ res.x - b_eq, ord=np.inf)),
    )


__all__ = ["run_lp", "linprog_wrapper", "SCIPY_AVAILABLE"]
