"""Plain-text rendering of matrices."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.matrix import MatrixLike


def matrix_as_str(M: "MatrixLike") -> str:
    """
    Render ``M`` one logical row per line.

    Example
    -------
    >>> from normopt.core.matrix import Matrix
    >>> print(matrix_as_str(Matrix.from_rows([[1.0, -2.5], [0.0, 1e-3]])), end="")
    (     1  -2.5 )
    (     0 0.001 )
    """
    rows, cols = M.shape
    lines = []
    for i in range(rows):
        cells = "".join(f"{M[i, j]:5.2g} " for j in range(cols))
        lines.append(f"( {cells})\n")
    return "".join(lines)


__all__ = ["matrix_as_str"]
