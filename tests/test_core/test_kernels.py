import math

import pytest

from normopt.core.kernels import dot_prod, mul_and_add, norm, scale
from normopt.core.matrix import Matrix


@pytest.fixture
def columns():
    # A = (1, 3)^T, B = (-2, 0)^T
    return Matrix.column_vector([1.0, 3.0]), Matrix.column_vector([-2.0, 0.0])


def test_dot_prod_and_norm(columns):
    A, B = columns
    assert dot_prod(A, 0, B, 0) == -2.0
    assert norm(A, 0) == pytest.approx(math.sqrt(10.0))
    assert norm(B, 0) == 2.0


def test_mul_and_add_then_scale(columns):
    A, B = columns
    mul_and_add(2.0, A, 0, B, 0)
    assert (B[0, 0], B[1, 0]) == (0.0, 6.0)

    scale(0.5, B, 0)
    assert B[1, 0] == 3.0
    assert (A[0, 0], A[1, 0]) == (1.0, 3.0)


def test_kernels_on_transposed_views():
    # As rows: A = (1 3), B = (0 3).
    A = Matrix.column_vector([1.0, 3.0])
    B = Matrix.column_vector([0.0, 3.0])

    assert A.T[0, 1] == 3.0
    assert dot_prod(A.T, 1, B.T, 1) == 9.0
    assert norm(A.T, 1) == 3.0

    mul_and_add(-2.0, A.T, 0, B.T, 1)
    assert B.T[0, 1] == 1.0


def test_row_operations_via_transposed_view():
    M = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
    rows = M.T

    mul_and_add(-3.0, rows, 0, rows, 1)
    scale(0.5, rows, 0)

    assert M.to_array().tolist() == [[0.5, 1.0], [0.0, -2.0]]
    assert dot_prod(rows, 0, rows, 1) == -2.0


def test_dot_prod_rejects_mismatched_rows():
    A = Matrix.column_vector([1.0, 2.0])
    B = Matrix.column_vector([1.0, 2.0, 3.0])
    assert math.isnan(dot_prod(A, 0, B, 0))
