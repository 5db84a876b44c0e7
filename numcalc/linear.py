"""Direct and iterative solvers for systems of linear equations."""

from __future__ import annotations

from typing import Sequence, Union

from .matrix import ConvergenceError, Matrix
from .norms import norm_1, norm_inf
from .vector import max_abs, max_value

VectorLike = Union[Matrix, Sequence[float]]


def _as_list(values: VectorLike) -> list[float]:
    if isinstance(values, Matrix):
        return values.to_vector()
    return [float(v) for v in values]


def _check_system(a: Matrix, b: list[float]) -> None:
    if a.rows != a.columns:
        raise ValueError("coefficient matrix is not square")
    if len(b) != a.rows:
        raise ValueError("right-hand side does not match the coefficient matrix")


def solve_tridiagonal(a: Matrix, b: VectorLike) -> Matrix:
    """Solve a diagonally dominant tridiagonal system by the chasing method.

    Only the three central diagonals of ``a`` are read. Returns a column vector.
    """
    rhs = _as_list(b)
    _check_system(a, rhs)
    n = a.rows
    if n < 2:
        raise ValueError("a tridiagonal system needs at least two equations")

    lower = [a[i, i - 1] for i in range(1, n)]
    diag = [a[i, i] for i in range(n)]
    upper = [a[i, i + 1] for i in range(n - 1)]

    gamma = [diag[0]]
    delta = [upper[0] / gamma[0]]
    for i in range(1, n):
        g = diag[i] - lower[i - 1] * delta[i - 1]
        gamma.append(g)
        if i < n - 1:
            delta.append(upper[i] / g)

    y = [rhs[0] / gamma[0]]
    for i in range(1, n):
        y.append((rhs[i] - lower[i - 1] * y[i - 1]) / gamma[i])

    x = [0.0] * n
    x[-1] = y[-1]
    for i in reversed(range(n - 1)):
        x[i] = y[i] - delta[i] * x[i + 1]
    return Matrix.from_vector(x)


def solve_gauss_pivot(
    a: Sequence[Sequence[float]], b: Sequence[float]
) -> list[float]:
    """Solve ``a x = b`` by Gaussian elimination with partial pivoting."""
    rows = [[float(v) for v in row] for row in a]
    rhs = [float(v) for v in b]
    n = len(rhs)
    if len(rows) != n:
        raise ValueError("number of equations does not match the right-hand side")
    if n == 0:
        raise ValueError("system is empty")
    if any(len(row) != n for row in rows):
        raise ValueError("coefficient matrix is not square")

    for i in range(n - 1):
        _, offset = max_abs([rows[k][i] for k in range(i, n)])
        pivot = i + offset
        if pivot != i:
            rows[i], rows[pivot] = rows[pivot], rows[i]
            rhs[i], rhs[pivot] = rhs[pivot], rhs[i]
        for j in range(i + 1, n):
            factor = rows[j][i] / rows[i][i]
            for k in range(i, n):
                rows[j][k] -= rows[i][k] * factor
            rhs[j] -= rhs[i] * factor

    x = [0.0] * n
    for i in reversed(range(n)):
        tail = sum(rows[i][j] * x[j] for j in range(i + 1, n))
        x[i] = (rhs[i] - tail) / rows[i][i]
    return x


def _iteration_form(a: Matrix, b: list[float]) -> tuple[Matrix, list[float]]:
    """Return ``B`` and ``g`` of the fixed-point form ``x = B x + g``."""
    _check_system(a, b)
    n = a.rows
    data = [
        0.0 if i == j else -a[i, j] / a[i, i] for i in range(n) for j in range(n)
    ]
    iteration = Matrix(n, n, data)
    g = [b[i] / a[i, i] for i in range(n)]
    if norm_1(iteration) >= 1 or norm_inf(iteration) >= 1:
        raise ConvergenceError(
            "iteration matrix norm is not below 1; the method may diverge"
        )
    return iteration, g


def _converged(new: list[float], old: list[float], tol: float) -> bool:
    largest, _ = max_value([n - o for n, o in zip(new, old)])
    return abs(largest) < tol


def _start(x0: VectorLike, n: int) -> list[float]:
    x = _as_list(x0)
    if len(x) != n:
        raise ValueError("initial guess does not match the coefficient matrix")
    return x


def jacobi_iterate(
    a: Matrix, b: VectorLike, x0: VectorLike, tol: float, max_iter: int
) -> list[float]:
    """Solve ``a x = b`` by Jacobi (simple) iteration."""
    rhs = _as_list(b)
    iteration, g = _iteration_form(a, rhs)
    x = _start(x0, a.rows)
    shift = Matrix.from_vector(g)
    for _ in range(max_iter):
        x1 = (iteration @ Matrix.from_vector(x) + shift).data
        if _converged(x1, x, tol):
            return x1
        x = x1
    raise ConvergenceError(f"Jacobi iteration did not converge in {max_iter} steps")


def seidel_iterate(
    a: Matrix, b: VectorLike, x0: VectorLike, tol: float, max_iter: int
) -> list[float]:
    """Solve ``a x = b`` by Gauss-Seidel iteration.

    The sweeps start from zero; ``x0`` serves only as the first reference
    point for the convergence test.
    """
    rhs = _as_list(b)
    iteration, g = _iteration_form(a, rhs)
    x = _start(x0, a.rows)
    current = [0.0] * a.rows
    for _ in range(max_iter):
        for i, gi in enumerate(g):
            current[i] = sum(
                bij * cj for bij, cj in zip(iteration.row(i), current)
            ) + gi
        x1 = list(current)
        if _converged(x1, x, tol):
            return x1
        x = x1
    raise ConvergenceError(f"Seidel iteration did not converge in {max_iter} steps")


def sor_iterate(
    a: Matrix,
    b: VectorLike,
    x0: VectorLike,
    tol: float,
    omega: float,
    max_iter: int,
) -> list[float]:
    """Solve ``a x = b`` by successive over-relaxation with factor ``omega``."""
    rhs = _as_list(b)
    _check_system(a, rhs)
    n = a.rows
    x = _start(x0, n)
    x1 = [0.0] * n
    for _ in range(max_iter):
        for i in range(n):
            row = a.row(i)
            done = sum(row[j] * x1[j] for j in range(i))
            pending = sum(row[j] * x[j] for j in range(i + 1, n))
            x1[i] = (1 - omega) * x[i] + omega * (rhs[i] - done - pending) / row[i]
        new = list(x1)
        if _converged(new, x, tol):
            return new
        x = new
    raise ConvergenceError(f"SOR iteration did not converge in {max_iter} steps")