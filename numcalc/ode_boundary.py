"""Finite-difference solution of linear two-point boundary value problems."""

from __future__ import annotations

from typing import Callable, Sequence, Union

from .linear import solve_tridiagonal
from .matrix import Matrix

Coefficient = Callable[[float], float]


def solve_linear_bvp(
    p: Coefficient,
    q: Coefficient,
    r: Coefficient,
    boundary: Union[Matrix, Sequence[Sequence[float]]],
    steps: int,
) -> Matrix:
    """Solve ``x'' = p(t) x' + q(t) x + r(t)`` with fixed end values.

    ``boundary`` is 2x2: the first row holds ``a`` and ``b``, the second row
    ``x(a)`` and ``x(b)``. The interval is split into ``steps`` equal parts.
    Returns a 2 x (steps + 1) matrix of grid times and solution values.
    """
    bounds = boundary if isinstance(boundary, Matrix) else Matrix.from_rows(boundary)
    if (bounds.rows, bounds.columns) != (2, 2):
        raise ValueError("boundary must be a 2x2 matrix")
    if steps < 1:
        raise ValueError("number of steps must be at least 1")
    if steps == 1:
        return Matrix(2, 2, list(bounds.data))

    (t_start, t_end), (x_start, x_end) = bounds.to_rows()
    h = (t_end - t_start) / steps
    times = [t_start + h * i for i in range(steps + 1)]

    size = steps - 1
    system = Matrix.zeros(size, size)
    rhs: list[float] = []
    for row, t in enumerate(times[1:-1]):
        half = h * p(t) / 2.0
        system[row, row] = 2.0 + h * h * q(t)
        if row > 0:
            system[row, row - 1] = -half - 1.0
        if row < size - 1:
            system[row, row + 1] = half - 1.0
        value = -h * h * r(t)
        if row == 0:
            value += (half + 1.0) * x_start
        if row == size - 1:
            value += (1.0 - half) * x_end
        rhs.append(value)

    if size == 1:
        interior = [rhs[0] / system[0, 0]]
    else:
        interior = solve_tridiagonal(system, rhs).data
    return Matrix(2, steps + 1, times + [x_start, *interior, x_end])