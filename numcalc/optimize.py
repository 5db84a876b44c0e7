"""Minimisation by golden-section search and the Nelder-Mead simplex method."""

from __future__ import annotations

import math
from typing import Callable, Sequence, Union

from .matrix import ConvergenceError, Matrix
from .vector import max_value, min_value

MatrixLike = Union[Matrix, Sequence[Sequence[float]]]


def golden_section(
    f: Callable[[float], float], a: float, b: float, tol: float, max_iter: int
) -> float:
    """Locate the minimum of a unimodal function on ``[a, b]``.

    Iteration stops once ``abs(f(a) - f(b)) < tol``; the better of the two
    inner golden-section points is returned.
    """
    if abs(f(a) - f(b)) < tol:
        return a if f(a) < f(b) else b

    shrink = 1.0 - (math.sqrt(5.0) - 1.0) / 2.0
    for _ in range(max_iter):
        width = b - a
        c = a + shrink * width
        d = b - shrink * width
        if f(c) > f(d):
            a = c
        else:
            b = d
        if abs(f(a) - f(b)) < tol:
            return c if f(c) < f(d) else d
    raise ConvergenceError(
        f"golden-section search did not converge in {max_iter} steps"
    )


def _combine(u: list[float], v: list[float], su: float, sv: float) -> list[float]:
    return [su * ui + sv * vi for ui, vi in zip(u, v)]


def _ranks(values: list[float]) -> tuple[int, int, int, int]:
    """Return indices of the lowest, highest, second lowest and second highest."""
    _, low = min_value(values)
    _, high = max_value(values)
    second_low, second_high = high, low
    for i, value in enumerate(values):
        if i in (low, high):
            continue
        if value < values[second_low]:
            second_low = i
        if value > values[second_high]:
            second_high = i
    return low, high, second_low, second_high


def nelder_mead(
    f: Callable[[list[float]], float],
    x0: MatrixLike,
    tol: float,
    max_iter: int,
) -> tuple[list[float], float]:
    """Minimise a function of n variables by the Nelder-Mead simplex method.

    ``x0`` is an n x (n + 1) matrix whose columns are the starting vertices.
    Returns the best vertex and its function value once the spread between
    the best and worst function values falls below ``tol``.
    """
    start = x0 if isinstance(x0, Matrix) else Matrix.from_rows(x0)
    n = start.rows
    if start.columns != n + 1:
        raise ValueError("starting simplex must have one more vertex than variables")
    if max_iter < 1:
        raise ValueError("number of iterations must be at least 1")

    vertices = [start.column(j) for j in range(n + 1)]
    values = [f(list(v)) for v in vertices]
    low, high, second_low, second_high = _ranks(values)

    def replace_worst(point: list[float], value: float) -> None:
        vertices[high] = point
        values[high] = value

    for _ in range(max_iter):
        total = [0.0] * n
        for vertex in vertices:
            total = [t + v for t, v in zip(total, vertex)]
        worst = vertices[high]
        mid = [(t - w) * (1.0 / n) for t, w in zip(total, worst)]
        reflected = _combine(mid, worst, 2.0, -1.0)
        f_reflected = f(list(reflected))

        if f_reflected < values[second_high]:
            if f_reflected > values[second_low]:
                replace_worst(reflected, f_reflected)
            else:
                expanded = _combine(reflected, mid, 2.0, -1.0)
                f_expanded = f(list(expanded))
                if f_expanded < values[second_low]:
                    replace_worst(expanded, f_expanded)
                else:
                    replace_worst(reflected, f_reflected)
        else:
            if f_reflected < values[high]:
                replace_worst(reflected, f_reflected)
            contracted = [(w + m) * 0.5 for w, m in zip(vertices[high], mid)]
            f_contracted = f(list(contracted))
            outside = [(r + m) * 0.5 for r, m in zip(reflected, mid)]
            f_outside = f(list(outside))
            if f_contracted > f_outside:
                contracted, f_contracted = outside, f_outside
            if f_contracted < values[high]:
                replace_worst(contracted, f_contracted)
            else:
                best = vertices[low]
                for j in range(n + 1):
                    if j != low:
                        shrunk = [(v + b) * 0.5 for v, b in zip(vertices[j], best)]
                        vertices[j] = shrunk
                        values[j] = f(list(shrunk))

        low, high, second_low, second_high = _ranks(values)
        if abs(values[high] - values[low]) < tol:
            return list(vertices[low]), values[low]

    raise ConvergenceError(f"Nelder-Mead did not converge in {max_iter} steps")