import math

import numpy as np
import pytest

from normopt import Matrix, SolverConfig, Status, dot_prod, norm, qr
from normopt.diagnostics import assert_orthonormal


def test_qr_square_triangular_input():
    A = Matrix.from_rows([[-5.0, 2.0], [0.0, 6.0]])
    result = qr(A)

    assert result.status is Status.OK
    assert abs(A[0, 0]) == pytest.approx(1.0)
    assert A[1, 0] == 0.0
    assert abs(A[1, 1]) == pytest.approx(1.0)


def test_qr_orthonormalizes_columns():
    A = Matrix.from_rows([[1.0, 9.0], [1.0, 7.0]])
    result = qr(A)

    assert result.status is Status.OK
    assert A[0, 0] == pytest.approx(1.0 / math.sqrt(2.0), abs=1e-3)
    assert abs(dot_prod(A, 0, A, 1)) < 1e-3
    assert norm(A, 0) == pytest.approx(1.0, abs=1e-3)
    assert norm(A, 1) == pytest.approx(1.0, abs=1e-3)


def test_qr_tall_random_matrix_reconstructs(rng):
    original = rng.standard_normal((6, 4))
    Q = Matrix.from_array(original)
    R = Matrix(4, 4)

    result = qr(Q, R)

    assert result.status is Status.OK
    assert_orthonormal(Q, atol=1e-9)
    r = R.to_array()
    assert np.allclose(np.tril(r, -1), 0.0)
    assert np.all(np.diag(r) > 0.0)
    assert np.allclose(Q.to_array() @ r, original, atol=1e-9)


def test_qr_on_transposed_view_orthonormalizes_rows(rng):
    original = rng.standard_normal((3, 5))
    A = Matrix.from_array(original)

    result = qr(A.T)

    assert result.status is Status.OK
    assert not A.is_transposed
    rows = A.to_array()
    assert np.allclose(rows @ rows.T, np.eye(3), atol=1e-9)


def test_qr_rejects_wide_matrix():
    A = Matrix.from_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
    before = A.to_array()

    result = qr(A)

    assert result.status is Status.INPUT_ERROR
    assert "tall or square" in result.message
    np.testing.assert_array_equal(A.to_array(), before)


def test_qr_rejects_misshaped_r():
    A = Matrix.from_rows([[1.0, 0.0], [0.0, 1.0], [1.0, 1.0]])
    assert qr(A, Matrix(3, 3)).status is Status.INPUT_ERROR


def test_qr_dependent_column_continues():
    # Column 1 is twice column 0; column 2 is independent.
    A = Matrix.from_rows([[1.0, 2.0, 0.0], [1.0, 2.0, 1.0], [0.0, 0.0, 1.0]])
    R = Matrix(3, 3)

    result = qr(A, R)

    assert result.status is Status.LINEARLY_DEPENDENT
    assert "[1]" in result.message
    assert R[1, 1] == 0.0
    assert norm(A, 0) == pytest.approx(1.0)
    assert norm(A, 2) == pytest.approx(1.0)
    assert abs(dot_prod(A, 0, A, 2)) < 1e-12


def test_qr_zero_column_is_dependent():
    A = Matrix.from_rows([[0.0, 1.0], [0.0, 1.0]])
    result = qr(A)

    assert result.status is Status.LINEARLY_DEPENDENT
    assert A[0, 0] == 0.0 and A[1, 0] == 0.0
    assert norm(A, 1) == pytest.approx(1.0)


def test_qr_dependency_threshold_follows_config():
    A = Matrix.from_rows([[1.0, 1.0], [0.0, 1e-4]])
    assert qr(A.copy(), config=SolverConfig(tol=1e-6)).status is Status.OK
    assert qr(A.copy(), config=SolverConfig(tol=1e-3)).status is Status.LINEARLY_DEPENDENT
