"""Benchmark the tableau simplex and the minimum-norm solvers."""

import time
from typing import Callable, Dict

import numpy as np

import normopt as no


def _random_system(m: int, n: int, seed: int = 0):
    rng = np.random.default_rng(seed)
    A = no.Matrix.from_array(rng.standard_normal((m, n)))
    b = no.Matrix.from_array(rng.standard_normal(m))
    return A, b


def benchmark_solver(
    solver: Callable,
    m: int,
    n: int,
    repeats: int = 20,
) -> Dict[str, float]:
    """Benchmark one minimum-norm solver on a random ``m x n`` system.

    Args:
        solver: One of ``l1_min``, ``l2_min`` or ``linf_min``.
        m: Number of constraints.
        n: Number of unknowns.
        repeats: Number of timed solves.

    Returns:
        Dictionary with timing results.
    """
    A, b = _random_system(m, n)
    x = no.Matrix(n, 1)

    # Warmup
    solver(A, b, x)

    start = time.perf_counter()
    for _ in range(repeats):
        solver(A, b, x)
    end = time.perf_counter()

    total_time = end - start
    return {
        "m": m,
        "n": n,
        "total_time_sec": total_time,
        "time_per_solve_sec": total_time / repeats,
    }


if __name__ == "__main__":
    print("Benchmarking minimum-norm solvers...")

    for name, solver in (("l2_min", no.l2_min), ("l1_min", no.l1_min), ("linf_min", no.linf_min)):
        results = benchmark_solver(solver, m=10, n=30)
        print(f"{name} (10 x 30):")
        print(f"  Time per solve: {results['time_per_solve_sec']*1e3:.2f} ms")
