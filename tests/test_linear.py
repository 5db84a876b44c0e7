import pytest

from numcalc.linear import (
    jacobi_iterate,
    seidel_iterate,
    solve_gauss_pivot,
    solve_tridiagonal,
    sor_iterate,
)
from numcalc.matrix import ConvergenceError, Matrix


def _residual(a, x, b):
    product = a @ Matrix.from_vector(x)
    return max(abs(p - q) for p, q in zip(product.data, b))


# Chasing method

A29 = Matrix(3, 3, [4.0, -1.0, 0.0, -1.0, 4.0, -1.0, 0.0, -1.0, 4.0])
B29 = Matrix(3, 1, [1.0, 4.0, -3.0])


def test_tridiagonal_source_case():
    sol = solve_tridiagonal(A29, B29)
    assert (sol.rows, sol.columns) == (3, 1)
    assert sol.data == pytest.approx([0.5, 1.0, -0.5])


def test_tridiagonal_accepts_plain_list():
    sol = solve_tridiagonal(A29, [1.0, 4.0, -3.0])
    assert sol.data == pytest.approx([0.5, 1.0, -0.5])


def test_tridiagonal_agrees_with_gauss():
    a = Matrix.from_rows(
        [
            [5.0, 1.0, 0.0, 0.0],
            [2.0, 6.0, -1.0, 0.0],
            [0.0, 1.0, 4.0, 2.0],
            [0.0, 0.0, -1.0, 3.0],
        ]
    )
    b = [1.0, -2.0, 3.0, 0.5]
    assert solve_tridiagonal(a, b).data == pytest.approx(
        solve_gauss_pivot(a.to_rows(), b)
    )


def test_tridiagonal_rejects_non_square():
    with pytest.raises(ValueError):
        solve_tridiagonal(Matrix.zeros(2, 3), [1.0, 2.0])


def test_tridiagonal_rejects_mismatched_rhs():
    with pytest.raises(ValueError):
        solve_tridiagonal(A29, [1.0, 2.0])


# Gaussian elimination with column pivoting

A12 = [[1.0, 4.0, -5.0], [1.0, 3.0, -2.0], [6.0, -1.0, 18.0]]
B12 = [3.0, 2.0, 2.0]


def test_gauss_source_case():
    x = solve_gauss_pivot(A12, B12)
    assert x == pytest.approx([4.0 / 3.0, 0.0, -1.0 / 3.0], abs=1e-12)
    assert _residual(Matrix.from_rows(A12), x, B12) < 1e-12


def test_gauss_does_not_modify_inputs():
    a = [row[:] for row in A12]
    b = B12[:]
    solve_gauss_pivot(a, b)
    assert a == A12
    assert b == B12


def test_gauss_needs_pivoting():
    a = [[0.0, 1.0], [1.0, 1.0]]
    x = solve_gauss_pivot(a, [2.0, 3.0])
    assert x == pytest.approx([1.0, 2.0])


def test_gauss_rejects_mismatched_sizes():
    with pytest.raises(ValueError):
        solve_gauss_pivot(A12, [1.0, 2.0])


# Iterative methods

A16 = Matrix(3, 3, [10.0, -2.0, -1.0, -2.0, 10.0, -1.0, -1.0, -2.0, 5.0])
B16 = Matrix(3, 1, [3.0, 15.0, 10.0])


def test_jacobi_source_case():
    x0 = Matrix.zeros(3, 1)
    x = jacobi_iterate(A16, B16, x0, 1e-6, 1_000_000)
    assert x == pytest.approx([1.0, 2.0, 3.0], abs=1e-5)
    assert x0.data == [0.0, 0.0, 0.0]


def test_seidel_source_case():
    x = seidel_iterate(A16, B16, Matrix.zeros(3, 1), 1e-6, 1_000_000)
    assert x == pytest.approx([1.0, 2.0, 3.0], abs=1e-5)


def test_sor_source_case():
    a = Matrix(
        4,
        4,
        [
            2.0, -1.0, 0.0, 0.0,
            -1.0, 2.0, -1.0, 0.0,
            0.0, -1.0, 2.0, -1.0,
            0.0, 0.0, -1.0, 2.0,
        ],
    )
    b = Matrix(4, 1, [1.0, 0.0, 1.0, 0.0])
    x0 = Matrix(4, 1, [1.0, 1.0, 1.0, 1.0])
    x = sor_iterate(a, b, x0, 1e-6, 1.46, 1_000_000)
    assert x == pytest.approx(solve_tridiagonal(a, b).data, abs=1e-4)
    assert x0.data == [1.0, 1.0, 1.0, 1.0]


def test_sor_with_unit_factor_matches_seidel_solution():
    x = sor_iterate(A16, B16, [0.0, 0.0, 0.0], 1e-9, 1.0, 1000)
    assert _residual(A16, x, B16.data) < 1e-6


@pytest.mark.parametrize("solver", [jacobi_iterate, seidel_iterate])
def test_non_dominant_matrix_is_rejected(solver):
    a = Matrix.from_rows([[1.0, 2.0], [3.0, 1.0]])
    with pytest.raises(ConvergenceError):
        solver(a, [1.0, 1.0], [0.0, 0.0], 1e-6, 100)


@pytest.mark.parametrize("solver", [jacobi_iterate, seidel_iterate])
def test_iteration_limit_raises(solver):
    with pytest.raises(ConvergenceError):
        solver(A16, B16, [0.0, 0.0, 0.0], 1e-12, 1)


def test_sor_iteration_limit_raises():
    with pytest.raises(ConvergenceError):
        sor_iterate(A16, B16, [0.0, 0.0, 0.0], 1e-12, 1.2, 1)


def test_initial_guess_size_is_checked():
    with pytest.raises(ValueError):
        jacobi_iterate(A16, B16, [0.0, 0.0], 1e-6, 10)