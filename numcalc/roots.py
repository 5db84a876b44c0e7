"""Roots of single nonlinear equations and of nonlinear systems."""

from __future__ import annotations

import math
from typing import Callable, Sequence, Union

from .linear import solve_gauss_pivot
from .matrix import ConvergenceError, Matrix
from .vector import max_abs, sort_ascending

VectorLike = Union[Matrix, Sequence[float]]
MatrixLike = Union[Matrix, Sequence[Sequence[float]]]


def _as_list(values: VectorLike) -> list[float]:
    if isinstance(values, Matrix):
        return values.to_vector()
    return [float(v) for v in values]


def _as_rows(values: MatrixLike) -> list[list[float]]:
    if isinstance(values, Matrix):
        return values.to_rows()
    return [[float(v) for v in row] for row in values]


def muller(
    f: Callable[[float], float], x0: VectorLike, tol: float, max_iter: int
) -> float:
    """Find a root of ``f`` by Muller's method from three distinct points.

    Stops as soon as ``abs(f(z)) < tol``. A negative discriminant of the
    interpolating parabola is treated as zero.
    """
    if tol <= 0.0:
        raise ValueError("tolerance must be greater than zero")
    points = sort_ascending(_as_list(x0))
    if len(points) != 3:
        raise ValueError("exactly three starting points are required")
    values = [f(x) for x in points]

    for _ in range(max_iter):
        (p0, p1, p2), (f0, f1, f2) = points, values
        h0 = p0 - p2
        h1 = p1 - p2
        c = f2
        e0 = f0 - c
        e1 = f1 - c
        denom = h1 * h0 * h0 - h0 * h1 * h1
        a = (e0 * h1 - e1 * h0) / denom
        b = (e1 * h0 * h0 - e0 * h1 * h1) / denom
        disc = b * b - 4.0 * a * c
        if disc < 0:
            disc = 0.0
        z = p2 + (-2.0 * c / (b + math.sqrt(disc)))

        if abs(f(z)) < tol:
            return z

        _, farthest = max_abs([z - p for p in points])
        points[farthest] = z
        points = sort_ascending(points)
        values = [f(x) for x in points]

    raise ConvergenceError(f"Muller's method did not converge in {max_iter} steps")


def newton_iterate(
    f: Callable[[float], float],
    df: Callable[[float], float],
    a: float,
    b: float,
    c: float,
    max_iter: int,
    tol: float,
) -> float:
    """Find a root of ``f`` in ``[a, b]`` by Newton's method starting at ``c``.

    ``a``, ``b`` or ``c`` is returned at once when ``f`` is already below
    ``tol`` in magnitude there. Otherwise iteration stops when two successive
    iterates differ by less than ``tol``.
    """
    for candidate in (a, b, c):
        if abs(f(candidate)) < tol:
            return candidate

    current = c
    following = current - f(current) / df(current)
    for _ in range(max_iter):
        if abs(following - current) < tol:
            return following
        current = following
        following = current - f(current) / df(current)
    raise ConvergenceError(f"Newton's method did not converge in {max_iter} steps")


def newton_system(
    funcs: Callable[[list[float]], VectorLike],
    jacobian: Callable[[list[float]], MatrixLike],
    x0: VectorLike,
    tol: float,
    max_iter: int,
) -> list[float]:
    """Solve the nonlinear system ``funcs(x) = 0`` by Newton iteration.

    ``jacobian(x)`` returns the matrix of partial derivatives. Each step
    solves ``J dx = -F`` and iteration stops once every component of
    ``funcs(x)`` is below ``tol`` in magnitude.
    """
    if isinstance(x0, Matrix) and x0.columns != 1:
        raise ValueError("starting point is not a column vector")
    x = _as_list(x0)

    residual = [-v for v in _as_list(funcs(list(x)))]
    for _ in range(max_iter):
        step = solve_gauss_pivot(_as_rows(jacobian(list(x))), residual)
        x = [xi + dxi for xi, dxi in zip(x, step)]
        residual = [-v for v in _as_list(funcs(list(x)))]
        largest, _ = max_abs(residual)
        if abs(largest) < tol:
            return x
    raise ConvergenceError(
        f"Newton iteration for the system did not converge in {max_iter} steps"
    )