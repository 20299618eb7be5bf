"""
Simplex tableau layout and construction.

For a standard-form LP with ``m`` constraints and ``n`` variables the phase-1
tableau is laid out as follows::

    col:  0      1      2 .. 2+m-1      2+m .. 2+m+n-1     2+m+n
    row 0 [ 1    0    -1 ... -1         0 ...  0           0   ]  artificial cost
    row 1 [ 0    1     0 ...  0        -c_1 ... -c_n       0   ]  true cost
    row 2 [ 0    0     I                A                  b   ]  constraints
    ...

Phase 2 keeps rows ``1..m+1`` and the columns ``[1] + variables + [rhs]``,
minus any constraint row found redundant at the end of phase 1.
Every index used by the simplex engine comes from :class:`TableauLayout` or
from :func:`phase_two_projection`, so both are pure functions of ``(m, n)``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from ..core.matrix import Matrix, MatrixLike, submatrix


@dataclass(frozen=True)
class TableauLayout:
    """Column and row positions of the phase-1 tableau."""

    n_constraints: int
    n_vars: int

    ARTIFICIAL_COST_COL = 0
    TRUE_COST_COL = 1
    ARTIFICIAL_COST_ROW = 0
    TRUE_COST_ROW = 1
    FIRST_CONSTRAINT_ROW = 2

    @property
    def n_rows(self) -> int:
        return self.n_constraints + 2

    @property
    def n_cols(self) -> int:
        return 2 + self.n_constraints + self.n_vars + 1

    @property
    def artificial_cols(self) -> range:
        return range(2, 2 + self.n_constraints)

    @property
    def var_cols(self) -> range:
        start = 2 + self.n_constraints
        return range(start, start + self.n_vars)

    @property
    def rhs_col(self) -> int:
        return 2 + self.n_constraints + self.n_vars

    def constraint_row(self, i: int) -> int:
        return self.FIRST_CONSTRAINT_ROW + i


def phase_two_projection(n_constraints: int, n_vars: int) -> Tuple[List[int], List[int]]:
    """
    Rows and columns of the phase-1 tableau that make up the phase-2 tableau.

    The artificial-cost row and every artificial column are dropped. In the
    result the true-cost row is row 0, the cost column is column 0, variable
    ``k`` sits in column ``1 + k`` and the RHS is the last column.
    """
    layout = TableauLayout(n_constraints, n_vars)
    rows = list(range(layout.TRUE_COST_ROW, layout.n_rows))
    cols = [layout.TRUE_COST_COL, *layout.var_cols, layout.rhs_col]
    return rows, cols


@dataclass
class Tableau:
    """
    A tableau matrix together with the bookkeeping the pivot loop needs.

    Attributes:
        matrix: The tableau itself.
        objective_row: Row scanned for entering variables.
        first_pivot_row: First row eligible in the ratio test.
        var_cols: Columns that may enter the basis, in scan order.
        rhs_col: Right-hand-side column.
        basis: Basic column per row; ``None`` for header rows and for rows
            whose basic variable is no longer part of the tableau.
        original_vars: Columns holding the caller's variables, in order.
    """

    matrix: Matrix
    objective_row: int
    first_pivot_row: int
    var_cols: range
    rhs_col: int
    basis: List[Optional[int]] = field(default_factory=list)
    original_vars: Sequence[int] = ()

    @property
    def objective_value(self) -> float:
        return self.matrix[self.objective_row, self.rhs_col]

    def basic_value(self, col: int) -> float:
        """Value of the variable in ``col``: its row's RHS if basic, else 0."""
        for row, basic in enumerate(self.basis):
            if basic == col:
                return self.matrix[row, self.rhs_col]
        return 0.0

    def phase_two(self, layout: TableauLayout) -> "Tableau":
        """
        Project a finished phase-1 tableau onto the phase-2 tableau.

        Constraint rows still basic in an artificial column are redundant
        (see :func:`~normopt.convex.simplex.drive_out_artificials`) and are
        left out.
        """
        rows, cols = phase_two_projection(layout.n_constraints, layout.n_vars)
        artificial = layout.artificial_cols
        rows = [r for r in rows if self.basis[r] is None or self.basis[r] not in artificial]
        remap: Dict[int, int] = {old: new for new, old in enumerate(cols)}
        basis = [remap.get(self.basis[r]) if self.basis[r] is not None else None for r in rows]
        n_vars = layout.n_vars
        return Tableau(
            matrix=submatrix(self.matrix, rows, cols),
            objective_row=0,
            first_pivot_row=1,
            var_cols=range(1, 1 + n_vars),
            rhs_col=1 + n_vars,
            basis=basis,
            original_vars=range(1, 1 + n_vars),
        )


def build_phase_one(A: MatrixLike, b: MatrixLike, c: MatrixLike) -> Tuple[Tableau, TableauLayout]:
    """
    Build the phase-1 tableau for ``min c^T x, A x = b, x >= 0``.

    Constraint rows with a negative right-hand side are negated (coefficients
    and RHS) so that every RHS is non-negative. The artificial identity entry
    is not negated, which keeps the initial artificial basis feasible.
    """
    m, n = A.shape
    layout = TableauLayout(m, n)
    T = Matrix.zeros(layout.n_rows, layout.n_cols)

    T[layout.ARTIFICIAL_COST_ROW, layout.ARTIFICIAL_COST_COL] = 1.0
    for col in layout.artificial_cols:
        T[layout.ARTIFICIAL_COST_ROW, col] = -1.0

    T[layout.TRUE_COST_ROW, layout.TRUE_COST_COL] = 1.0
    for k, col in enumerate(layout.var_cols):
        T[layout.TRUE_COST_ROW, col] = -c[k, 0]

    for i in range(m):
        row = layout.constraint_row(i)
        sign = -1.0 if b[i, 0] < 0 else 1.0
        T[row, layout.artificial_cols[i]] = 1.0
        for k, col in enumerate(layout.var_cols):
            T[row, col] = sign * A[i, k]
        T[row, layout.rhs_col] = sign * b[i, 0]

    # Rows start without a basic column; the clearing pre-pass fills them in.
    basis: List[Optional[int]] = [None] * layout.n_rows
    tableau = Tableau(
        matrix=T,
        objective_row=layout.ARTIFICIAL_COST_ROW,
        first_pivot_row=layout.FIRST_CONSTRAINT_ROW,
        var_cols=range(layout.artificial_cols.start, layout.rhs_col),
        rhs_col=layout.rhs_col,
        basis=basis,
        original_vars=layout.var_cols,
    )
    return tableau, layout


def artificial_clearing_pivots(layout: TableauLayout) -> List[Tuple[int, int]]:
    """``(row, col)`` pivots that turn each artificial column into a 01-column."""
    return [(layout.constraint_row(i), col) for i, col in enumerate(layout.artificial_cols)]


__all__ = [
    "TableauLayout",
    "Tableau",
    "phase_two_projection",
    "build_phase_one",
    "artificial_clearing_pivots",
]
