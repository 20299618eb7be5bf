"""
Linear programming and minimum-norm solvers.

The tableau simplex engine in :mod:`.simplex` drives :func:`run_lp`, which in
turn backs :func:`l1_min` and :func:`linf_min`. :func:`l2_min` projects along
a QR basis of the constraint rows instead.
"""

from . import lp, norms, simplex, tableau, utils
from .lp import linprog_wrapper, run_lp
from .norms import l1_min, l2_min, linf_min
from .simplex import apply_lp, drive_out_artificials, pivot
from .tableau import Tableau, TableauLayout, build_phase_one, phase_two_projection

__all__ = [
    "lp",
    "norms",
    "simplex",
    "tableau",
    "utils",
    # Solvers
    "run_lp",
    "linprog_wrapper",
    "l1_min",
    "l2_min",
    "linf_min",
    # Tableau engine
    "Tableau",
    "TableauLayout",
    "build_phase_one",
    "phase_two_projection",
    "apply_lp",
    "drive_out_artificials",
    "pivot",
]
