"""
Dense matrices with zero-copy transposition.

A :class:`Matrix` owns a flat, row-major ``float64`` buffer together with its
storage shape ``(nrows, ncols)``. Every element access goes through a single
piece of stride arithmetic: logical entry ``(i, j)`` lives at offset
``i * stride_r + j * stride_c`` where the strides are ``(ncols, 1)`` for the
storage orientation and ``(1, ncols)`` for the transposed one. Flipping the
orientation therefore never touches the buffer.

Algorithms that want to work on rows do not flip the caller's flag. They take
``M.T``, a :class:`MatrixView` sharing the buffer with the opposite
orientation, and hand it to the same column kernels.

Example:
    >>> from normopt.core.matrix import Matrix
    >>> A = Matrix.from_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
    >>> A.shape, A.T.shape
    ((2, 3), (3, 2))
    >>> A.T[2, 1]
    6.0
"""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple, Union

import numpy as np

from ..diagnostics.debug_mode import is_debug_enabled
from ..io.format import matrix_as_str


class _StridedAccess:
    """Element and column access shared by matrices and their views."""

    __slots__ = ()

    def _layout(self) -> Tuple[np.ndarray, int, int, bool]:
        """Return ``(buffer, storage_rows, storage_cols, transposed)``."""
        raise NotImplementedError

    @property
    def shape(self) -> Tuple[int, int]:
        """Logical ``(rows, cols)`` after applying the orientation."""
        _, nrows, ncols, transposed = self._layout()
        return (ncols, nrows) if transposed else (nrows, ncols)

    @property
    def strides(self) -> Tuple[int, int]:
        """Element strides ``(stride_r, stride_c)`` into the flat buffer."""
        _, _, ncols, transposed = self._layout()
        return (1, ncols) if transposed else (ncols, 1)

    def _offset(self, i: int, j: int) -> int:
        if is_debug_enabled():
            rows, cols = self.shape
            if not (0 <= i < rows and 0 <= j < cols):
                raise IndexError(
                    f"Index ({i}, {j}) out of bounds for logical shape {(rows, cols)}."
                )
        stride_r, stride_c = self.strides
        return i * stride_r + j * stride_c

    def __getitem__(self, index: Tuple[int, int]) -> float:
        i, j = index
        data = self._layout()[0]
        return float(data[self._offset(i, j)])

    def __setitem__(self, index: Tuple[int, int], value: float) -> None:
        i, j = index
        data = self._layout()[0]
        data[self._offset(i, j)] = value

    def column(self, j: int) -> np.ndarray:
        """
        Return logical column ``j`` as a writable strided view of the buffer.

        Writes through the returned array land in the matrix.
        """
        data = self._layout()[0]
        rows, cols = self.shape
        if is_debug_enabled() and not 0 <= j < cols:
            raise IndexError(f"Column {j} out of bounds for logical shape {(rows, cols)}.")
        stride_r, stride_c = self.strides
        start = j * stride_c
        return data[start : start + stride_r * (rows - 1) + 1 : stride_r]

    def to_array(self) -> np.ndarray:
        """Return a dense copy in the logical orientation."""
        data, nrows, ncols, transposed = self._layout()
        grid = data.reshape(nrows, ncols)
        return (grid.T if transposed else grid).copy()


class MatrixView(_StridedAccess):
    """
    Fixed-orientation window onto a :class:`Matrix`.

    Views are cheap and immutable: they share the owner's buffer, so writes
    through a view are visible in the matrix, but the view's orientation never
    changes and building one never touches the owner's ``is_transposed`` flag.
    """

    __slots__ = ("_base", "_transposed")

    def __init__(self, base: "Matrix", transposed: bool) -> None:
        self._base = base
        self._transposed = bool(transposed)

    def _layout(self) -> Tuple[np.ndarray, int, int, bool]:
        base = self._base
        return base.data, base.nrows, base.ncols, self._transposed

    @property
    def base(self) -> "Matrix":
        return self._base

    @property
    def is_transposed(self) -> bool:
        return self._transposed

    @property
    def released(self) -> bool:
        return self._base.released

    @property
    def T(self) -> "MatrixView":
        return MatrixView(self._base, not self._transposed)

    def __str__(self) -> str:
        return matrix_as_str(self)

    def __repr__(self) -> str:
        return f"MatrixView(shape={self.shape}, is_transposed={self._transposed})"


class Matrix(_StridedAccess):
    """
    Dense rectangular matrix owning a flat row-major buffer.

    Parameters
    ----------
    nrows, ncols:
        Storage shape; both must be positive. Contents start uninitialized.
    """

    def __init__(self, nrows: int, ncols: int) -> None:
        if int(nrows) < 1 or int(ncols) < 1:
            raise ValueError(f"Matrix dimensions must be positive, got {nrows} x {ncols}.")
        self.nrows = int(nrows)
        self.ncols = int(ncols)
        self.is_transposed = False
        self._data: np.ndarray | None = np.empty(self.nrows * self.ncols, dtype=float)

    @classmethod
    def zeros(cls, nrows: int, ncols: int) -> "Matrix":
        out = cls(nrows, ncols)
        out.data.fill(0.0)
        return out

    @classmethod
    def from_array(cls, values: np.ndarray) -> "Matrix":
        """Build a matrix from a 2-D array, or a column vector from a 1-D one."""
        arr = np.asarray(values, dtype=float)
        if arr.ndim == 1:
            arr = arr.reshape(-1, 1)
        if arr.ndim != 2:
            raise ValueError(f"Expected a 1-D or 2-D array, got {arr.ndim} dimensions.")
        out = cls(*arr.shape)
        out.data[:] = arr.reshape(-1)
        return out

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        return cls.from_array(np.asarray(rows, dtype=float).reshape(len(rows), -1))

    @classmethod
    def column_vector(cls, values: Iterable[float]) -> "Matrix":
        return cls.from_array(np.fromiter(values, dtype=float))

    def _layout(self) -> Tuple[np.ndarray, int, int, bool]:
        return self.data, self.nrows, self.ncols, self.is_transposed

    @property
    def data(self) -> np.ndarray:
        """The flat storage buffer."""
        if self._data is None:
            raise ValueError("Matrix has been released.")
        return self._data

    @property
    def released(self) -> bool:
        return self._data is None

    def set_values(self, *values: float) -> None:
        """
        Assign every element at once, in storage (row-major) order.

        Example
        -------
        >>> A = Matrix(2, 3)
        >>> A.set_values(1, 2, 3,
        ...              4, 5, 6)
        """
        if len(values) != self.data.size:
            raise ValueError(f"Expected {self.data.size} values, got {len(values)}.")
        self.data[:] = values

    def copy(self) -> "Matrix":
        """Deep copy of the buffer and the orientation flag."""
        out = Matrix(self.nrows, self.ncols)
        out.is_transposed = self.is_transposed
        out.data[:] = self.data
        return out

    def release(self) -> None:
        """Drop the buffer; the matrix is unusable afterwards."""
        self._data = None

    def transpose(self) -> None:
        """Flip the orientation flag in place."""
        self.is_transposed = not self.is_transposed

    def view(self) -> MatrixView:
        """Snapshot of the current orientation as an immutable view."""
        return MatrixView(self, self.is_transposed)

    @property
    def T(self) -> MatrixView:
        return MatrixView(self, not self.is_transposed)

    def __str__(self) -> str:
        return matrix_as_str(self)

    def __repr__(self) -> str:
        if self.released:
            return f"Matrix(nrows={self.nrows}, ncols={self.ncols}, released)"
        return (
            f"Matrix(nrows={self.nrows}, ncols={self.ncols}, "
            f"is_transposed={self.is_transposed})"
        )


MatrixLike = Union[Matrix, MatrixView]


def allocate(nrows: int, ncols: int) -> Matrix:
    """Allocate an uninitialized ``nrows x ncols`` matrix."""
    return Matrix(nrows, ncols)


def copy_matrix(orig: Matrix) -> Matrix:
    return orig.copy()


def release(M: Matrix) -> None:
    M.release()


def from_rows(rows: Sequence[Sequence[float]]) -> Matrix:
    return Matrix.from_rows(rows)


def is_allocated(M: object) -> bool:
    """True for a matrix or view whose buffer has not been released."""
    return isinstance(M, _StridedAccess) and not M.released


def submatrix(M: MatrixLike, rows: Sequence[int], cols: Sequence[int]) -> Matrix:
    """
    Build a fresh matrix from a row/column projection of ``M``.

    ``rows`` and ``cols`` are logical indices in the order they should appear
    in the result.
    """
    picked = M.to_array()[np.ix_(list(rows), list(cols))]
    return Matrix.from_array(picked)


__all__ = [
    "Matrix",
    "MatrixView",
    "MatrixLike",
    "allocate",
    "copy_matrix",
    "release",
    "from_rows",
    "is_allocated",
    "submatrix",
]
