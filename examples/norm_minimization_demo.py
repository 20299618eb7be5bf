"""
Example: minimum-norm solutions and linear programming with normopt.

Solves one underdetermined system under the L1, L2 and L-infinity norms,
runs a small standard-form LP, and shows how infeasible and unbounded
problems are reported.
"""

from normopt import (
    Matrix,
    Status,
    l1_min,
    l2_min,
    linf_min,
    qr,
    run_lp,
)


def example_norm_minimization():
    """Example: the same constraints under three different norms."""
    print("=" * 60)
    print("Example 1: Minimum-Norm Solutions of Ax = b")
    print("=" * 60)

    A = Matrix.from_rows([[5.0, 2.0, 3.0], [1.0, 4.0, -3.0]])
    b = Matrix.column_vector([7.0, 5.0])
    print("A =")
    print(A, end="")

    for label, solver in (("L1", l1_min), ("L2", l2_min), ("Linf", linf_min)):
        x = Matrix(3, 1)
        result = solver(A, b, x)
        print(f"{label:>4}: status={result.status.value}", end="")
        if result.status == Status.OK:
            print(f"  x={x.to_array().ravel()}  norm={result.fun:.4f}")
        else:
            print(f"  ({result.message})")
    print()


def example_linear_programming():
    """Example: minimize 3 x_4 + 2 x_5 over a small equality-constrained set."""
    print("=" * 60)
    print("Example 2: Linear Programming in Standard Form")
    print("=" * 60)

    A = Matrix.from_rows([[1, 0, 0, 0, 1], [0, 1, 0, 4, -5], [0, 0, 1, -4, 1]])
    b = Matrix.column_vector([7, -7, -5])
    c = Matrix.column_vector([0, 0, 0, 3, 2])
    x = Matrix(5, 1)

    result = run_lp(A, b, x, c)
    print(f"Status: {result.status.value}")
    if result.status == Status.OK:
        print(f"Optimal solution: x = {x.to_array().ravel()}")
        print(f"Optimal value: {result.fun}")
        print(f"Pivots: {result.nit}")
    print()


def example_failure_modes():
    """Example: statuses for problems without a usable optimum."""
    print("=" * 60)
    print("Example 3: Infeasible, Unbounded and Dependent Inputs")
    print("=" * 60)

    infeasible = run_lp(
        Matrix.from_rows([[0.0]]),
        Matrix.column_vector([1.0]),
        Matrix(1, 1),
        Matrix.column_vector([1.0]),
    )
    print(f"0 * x = 1:          {infeasible.status.value}")

    unbounded = run_lp(
        Matrix.from_rows([[1.0, 0.0]]),
        Matrix.column_vector([1.0]),
        Matrix(2, 1),
        Matrix.column_vector([-1.0, -1.0]),
    )
    print(f"min -x1 - x2:       {unbounded.status.value}")

    dependent = qr(Matrix.from_rows([[1.0, 2.0], [2.0, 4.0]]))
    print(f"QR of rank-1 input: {dependent.status.value}")
    print()


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("normopt - Norm Minimization Examples")
    print("=" * 60 + "\n")

    example_norm_minimization()
    example_linear_programming()
    example_failure_modes()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)
