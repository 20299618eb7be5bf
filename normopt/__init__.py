"""normopt - minimum-norm solutions of linear systems and a tableau LP solver."""

__version__ = "0.1.0"

# Linear programming and norm minimization
from .convex import (
    l1_min,
    l2_min,
    linf_min,
    linprog_wrapper,
    run_lp,
)

# Matrices, kernels and result types
from .core import (
    DEFAULT_TOL,
    Matrix,
    MatrixView,
    OptimizeResult,
    SolverConfig,
    Status,
    allocate,
    copy_matrix,
    dot_prod,
    from_rows,
    mul_and_add,
    norm,
    release,
    scale,
)

# Decompositions
from .decompose import qr

# Diagnostics
from .diagnostics import (
    constraint_residual,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)
from .io import matrix_as_str
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Core
    "Matrix",
    "MatrixView",
    "allocate",
    "copy_matrix",
    "release",
    "from_rows",
    "dot_prod",
    "mul_and_add",
    "scale",
    "norm",
    # Results and configuration
    "Status",
    "OptimizeResult",
    "SolverConfig",
    "DEFAULT_TOL",
    # Algorithms
    "qr",
    "run_lp",
    "linprog_wrapper",
    "l1_min",
    "l2_min",
    "linf_min",
    # Diagnostics
    "constraint_residual",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Output and logging
    "matrix_as_str",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
