"""Dense matrix container, column kernels and the shared result types."""

from .kernels import dot_prod, mul_and_add, norm, scale
from .matrix import (
    Matrix,
    MatrixLike,
    MatrixView,
    allocate,
    copy_matrix,
    from_rows,
    is_allocated,
    release,
    submatrix,
)
from .result import DEFAULT_TOL, OptimizeResult, SolverConfig, Status

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
    "dot_prod",
    "mul_and_add",
    "scale",
    "norm",
    "DEFAULT_TOL",
    "Status",
    "SolverConfig",
    "OptimizeResult",
]
