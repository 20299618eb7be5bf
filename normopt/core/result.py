"""
Status codes, result container and solver configuration.

Every solver in the package returns an :class:`OptimizeResult`. The status is
one of a closed set of outcomes and the message explains any non-ok result,
so callers never have to consult shared state to find out what went wrong.
Numerical outcomes such as infeasibility are statuses, not exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .matrix import Matrix

DEFAULT_TOL = 1e-6


class Status(Enum):
    """Solution status for every solver in the package."""

    OK = "ok"
    NO_SOLUTION = "no_solution"
    UNBOUNDED_SOLUTION = "unbounded_solution"
    INPUT_ERROR = "input_error"
    LINEARLY_DEPENDENT = "linearly_dependent"


@dataclass(frozen=True)
class SolverConfig:
    """
    Numerical settings shared by the QR, simplex and norm solvers.

    Attributes:
        tol: Threshold below which a pivot candidate, reduced cost, residual or
            column norm is treated as zero.
        anti_cycling: Break ratio-test ties by the smallest basic-variable
            index instead of the lowest row. Together with the
            first-positive entering rule this is Bland's rule, which rules
            out cycling on degenerate tableaus.
    """

    tol: float = DEFAULT_TOL
    anti_cycling: bool = True

    def __post_init__(self) -> None:
        if not self.tol > 0:
            raise ValueError(f"tol must be positive, got {self.tol}.")


@dataclass
class OptimizeResult:
    """
    Solution container shared across all solvers.

    Attributes:
        status: Enumeration describing solver exit.
        message: Human-readable explanation; empty for a plain success.
        x: The caller's output matrix (or ``None`` on input errors).
        fun: Objective value at ``x`` when the solve succeeded.
        nit: Number of pivots or projection steps performed.
        primal_residual: ``||A x - b||_inf`` when the solve succeeded.
    """

    status: Status
    message: str = ""
    x: Optional[Matrix] = None
    fun: Optional[float] = None
    nit: int = 0
    primal_residual: Optional[float] = None

    @property
    def ok(self) -> bool:
        return self.status is Status.OK


def resolve_config(config: Optional[SolverConfig]) -> SolverConfig:
    return SolverConfig() if config is None else config


__all__ = ["DEFAULT_TOL", "Status", "SolverConfig", "OptimizeResult", "resolve_config"]
