"""Invariant checks used by debug mode and by tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from ..core.matrix import MatrixLike


def is_01_column(M: "MatrixLike", col: int) -> bool:
    """
    Return True if column ``col`` holds exactly one ``1`` and zeros elsewhere.

    The comparison is exact: the pivoting code force-sets these entries, so
    any deviation means the column is not basic.
    """
    values = M.column(col)
    return int(np.count_nonzero(values == 1.0)) == 1 and int(np.count_nonzero(values)) == 1


def assert_01_column(M: "MatrixLike", col: int, row: int) -> None:
    """
    Assert that column ``col`` is the unit vector selecting ``row``.

    Raises
    ------
    ValueError
        If the column is not a 01-column with its ``1`` in ``row``.
    """
    if not is_01_column(M, col) or M[row, col] != 1.0:
        raise ValueError(
            f"Column {col} is not a 01-column with its unit entry in row {row}: "
            f"{M.column(col).tolist()}"
        )


def assert_orthonormal(Q: "MatrixLike", atol: float = 1e-6) -> None:
    """
    Assert that the logical columns of ``Q`` are orthonormal.

    Parameters
    ----------
    Q:
        Matrix or view whose columns are checked.
    atol:
        Absolute tolerance on every entry of ``Q^T Q - I``.

    Raises
    ------
    ValueError
        If the Gram matrix is not the identity within the tolerance.
    """
    arr = Q.to_array()
    gram = arr.T @ arr
    if not np.all(np.isfinite(gram)):
        raise ValueError("Gram matrix contains non-finite values.")
    if not np.allclose(gram, np.eye(gram.shape[0]), atol=atol, rtol=0.0):
        deviation = float(np.max(np.abs(gram - np.eye(gram.shape[0]))))
        raise ValueError(
            f"Columns are not orthonormal within tolerance {atol}; "
            f"max deviation {deviation:.3e}."
        )


def constraint_residual(A: "MatrixLike", b: "MatrixLike", x: "MatrixLike") -> float:
    """Return ``||A x - b||_inf``."""
    residual = A.to_array() @ x.to_array() - b.to_array()
    return float(np.linalg.norm(residual.reshape(-1), ord=np.inf))


__all__ = ["is_01_column", "assert_01_column", "assert_orthonormal", "constraint_residual"]
