"""
Tableau simplex pivoting shared by both phases.

The pivot loop is written once and parameterized by the tableau's objective
row, first eligible pivot row and enterable columns. Row operations are the
column kernels applied to the transposed view of the tableau.

References:
    - Bertsimas & Tsitsiklis, *Introduction to Linear Optimization*, 1997,
      Sections 3.3 and 3.5.
    - Bland, "New finite pivoting rules for the simplex method", 1977.
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from ..core.kernels import mul_and_add, scale
from ..core.result import SolverConfig, Status
from ..diagnostics import assert_01_column, is_debug_enabled
from ..logging import get_logger
from .tableau import Tableau, TableauLayout

logger = get_logger(__name__)


def pivot(tableau: Tableau, row: int, col: int) -> None:
    """
    Make ``col`` basic in ``row``.

    The pivot row is scaled so the pivot entry is 1, then ``col`` is
    eliminated from every other row. Pivot and eliminated entries are set
    exactly so the column is an exact 01-column afterwards.
    """
    T = tableau.matrix
    rows_view = T.T
    scale(1.0 / T[row, col], rows_view, row)
    T[row, col] = 1.0
    for other in range(T.shape[0]):
        if other == row:
            continue
        factor = T[other, col]
        if factor != 0.0:
            mul_and_add(-factor, rows_view, row, rows_view, other)
            T[other, col] = 0.0
    tableau.basis[row] = col


def _entering_column(tableau: Tableau, tol: float) -> Optional[int]:
    T = tableau.matrix
    for col in tableau.var_cols:
        if T[tableau.objective_row, col] > tol:
            return col
    return None


def _leaving_row(tableau: Tableau, col: int, config: SolverConfig) -> Optional[int]:
    T = tableau.matrix
    best_row: Optional[int] = None
    best_ratio = 0.0
    for row in range(tableau.first_pivot_row, T.shape[0]):
        entry = T[row, col]
        if entry <= config.tol:
            continue
        ratio = T[row, tableau.rhs_col] / entry
        if best_row is None or ratio < best_ratio:
            best_row, best_ratio = row, ratio
        elif config.anti_cycling and ratio == best_ratio:
            # Only exact ties, so the chosen ratio stays minimal.
            if _basis_rank(tableau, row) < _basis_rank(tableau, best_row):
                best_row = row
    return best_row


def _basis_rank(tableau: Tableau, row: int) -> int:
    basic = tableau.basis[row]
    return -1 if basic is None else basic


def _check_basis(tableau: Tableau) -> None:
    for row, col in enumerate(tableau.basis):
        if col is not None:
            assert_01_column(tableau.matrix, col, row)


def apply_lp(
    tableau: Tableau,
    config: SolverConfig,
    clear_columns: Iterable[Tuple[int, int]] = (),
) -> Tuple[Status, str, int]:
    """
    Pivot until the objective row has no entry above ``tol``.

    Parameters
    ----------
    tableau:
        Tableau to optimize in place.
    config:
        Tolerance and tie-breaking settings.
    clear_columns:
        ``(row, col)`` pivots performed before the main loop. Phase 1 uses this
        to turn each artificial column into a 01-column on its own row.

    Returns
    -------
    tuple
        ``(status, message, pivots)`` with ``Status.OK`` at an optimum and
        ``Status.UNBOUNDED_SOLUTION`` when an entering column has no eligible
        pivot row.
    """
    nit = 0
    for row, col in clear_columns:
        pivot(tableau, row, col)
        nit += 1

    while True:
        col = _entering_column(tableau, config.tol)
        if col is None:
            return Status.OK, "", nit
        row = _leaving_row(tableau, col, config)
        if row is None:
            message = f"Objective is unbounded below along tableau column {col}."
            logger.info(message)
            return Status.UNBOUNDED_SOLUTION, message, nit
        logger.debug("pivot %d: entering column %d, leaving row %d", nit, col, row)
        pivot(tableau, row, col)
        nit += 1
        if is_debug_enabled():
            _check_basis(tableau)


def drive_out_artificials(tableau: Tableau, layout: TableauLayout, tol: float) -> int:
    """
    Remove artificial variables left in the basis at level zero by phase 1.

    Each such row is pivoted on its first variable column whose entry exceeds
    ``tol`` in magnitude, whatever its sign. The row's RHS is zero, so no
    other basic variable moves. A row with no such entry is a combination of
    the other constraints; it keeps its artificial basis and
    :meth:`Tableau.phase_two` drops it.

    Returns the number of pivots performed.
    """
    T = tableau.matrix
    artificial = layout.artificial_cols
    pivots = 0
    for row in range(layout.FIRST_CONSTRAINT_ROW, layout.n_rows):
        if tableau.basis[row] not in artificial:
            continue
        for col in layout.var_cols:
            if abs(T[row, col]) > tol:
                logger.debug("driving artificial out of row %d via column %d", row, col)
                pivot(tableau, row, col)
                pivots += 1
                break
        else:
            logger.debug("row %d is redundant", row)
    return pivots


__all__ = ["pivot", "apply_lp", "drive_out_artificials"]
