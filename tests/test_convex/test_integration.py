"""
Integration tests for the solver stack.

Checks that the public API is reachable from the top-level package and that
the tableau simplex agrees with SciPy's HiGHS on random feasible problems.
"""

import numpy as np
import pytest

import normopt
from normopt import (
    Matrix,
    OptimizeResult,
    Status,
    l1_min,
    linf_min,
    linprog_wrapper,
    run_lp,
)


def test_main_package_exports():
    for name in normopt.__all__:
        assert hasattr(normopt, name), name
    assert isinstance(normopt.__version__, str)


def _random_feasible_lp(rng, m, n):
    a = rng.standard_normal((m, n))
    x_feasible = rng.uniform(0.0, 2.0, n)
    rhs = a @ x_feasible
    cost = rng.uniform(0.1, 1.0, n)
    return a, rhs, cost


@pytest.mark.parametrize("m, n", [(2, 4), (3, 6), (4, 7)])
def test_run_lp_matches_scipy(rng, m, n):
    pytest.importorskip("scipy")
    a, rhs, cost = _random_feasible_lp(rng, m, n)
    A = Matrix.from_array(a)
    b = Matrix.column_vector(rhs)
    c = Matrix.column_vector(cost)
    x = Matrix(n, 1)

    ours = run_lp(A, b, x, c)
    reference = linprog_wrapper(A, b, c)

    assert isinstance(reference, OptimizeResult)
    assert ours.status is Status.OK
    assert reference.status is Status.OK
    assert pytest.approx(reference.fun, rel=1e-6, abs=1e-8) == ours.fun
    assert ours.primal_residual <= 1e-8
    assert np.all(x.to_array() >= -1e-9)


def test_linprog_wrapper_reports_failures():
    pytest.importorskip("scipy")
    infeasible = linprog_wrapper(
        Matrix.from_rows([[0.0]]), Matrix.column_vector([1.0]), Matrix.column_vector([1.0])
    )
    assert infeasible.status is Status.NO_SOLUTION

    unbounded = linprog_wrapper(
        Matrix.from_rows([[1.0, 0.0]]),
        Matrix.column_vector([1.0]),
        Matrix.column_vector([-1.0, -1.0]),
    )
    assert unbounded.status is Status.UNBOUNDED_SOLUTION


def test_linprog_wrapper_input_error():
    pytest.importorskip("scipy")
    result = linprog_wrapper(
        Matrix.from_rows([[1.0, 2.0]]), Matrix.column_vector([1.0]), Matrix.column_vector([1.0])
    )
    assert result.status is Status.INPUT_ERROR


def test_l1_and_linf_objectives_match_scipy(rng):
    optimize = pytest.importorskip("scipy.optimize")
    a = rng.standard_normal((2, 5))
    rhs = rng.standard_normal(2)
    n = a.shape[1]

    x = Matrix(n, 1)
    l1 = l1_min(Matrix.from_array(a), Matrix.column_vector(rhs), x)
    ref_l1 = optimize.linprog(
        np.ones(2 * n), A_eq=np.hstack([a, -a]), b_eq=rhs, bounds=(0, None), method="highs"
    )
    assert l1.status is Status.OK
    assert pytest.approx(ref_l1.fun, rel=1e-6) == l1.fun

    x = Matrix(n, 1)
    linf = linf_min(Matrix.from_array(a), Matrix.column_vector(rhs), x)
    # Variables (x, t): minimize t with -t <= x_k <= t.
    c = np.zeros(n + 1)
    c[-1] = 1.0
    eye = np.eye(n)
    ones = np.ones((n, 1))
    ref_linf = optimize.linprog(
        c,
        A_ub=np.vstack([np.hstack([eye, -ones]), np.hstack([-eye, -ones])]),
        b_ub=np.zeros(2 * n),
        A_eq=np.hstack([a, np.zeros((2, 1))]),
        b_eq=rhs,
        bounds=[(None, None)] * n + [(0, None)],
        method="highs",
    )
    assert linf.status is Status.OK
    assert pytest.approx(ref_linf.fun, rel=1e-6) == linf.fun


def test_run_lp_small_integer_problems_match_scipy(rng):
    # Small integer data produces degenerate bases and redundant rows often.
    pytest.importorskip("scipy")
    for _ in range(60):
        m = int(rng.integers(1, 4))
        n = int(rng.integers(2, 5))
        a = rng.integers(-2, 3, (m, n)).astype(float)
        rhs = a @ rng.integers(0, 3, n).astype(float)
        cost = rng.integers(-2, 3, n).astype(float)
        A = Matrix.from_array(a)
        b = Matrix.column_vector(rhs)
        c = Matrix.column_vector(cost)
        x = Matrix(n, 1)

        ours = run_lp(A, b, x, c)
        reference = linprog_wrapper(A, b, c)

        if reference.status is Status.OK:
            assert ours.status is Status.OK, ours.message
            assert pytest.approx(reference.fun, abs=1e-7) == ours.fun
        else:
            assert ours.status is Status.UNBOUNDED_SOLUTION, ours.message
        if ours.ok:
            assert np.allclose(a @ x.to_array().ravel(), rhs, atol=1e-9)
            assert np.all(x.to_array() >= -1e-9)
