"""Four-step predictor-corrector solvers for ``y' = f(x, y)``."""

from __future__ import annotations

from typing import Callable, Sequence, Union

from .matrix import Matrix

Derivative = Callable[[float, float], float]
MatrixLike = Union[Matrix, Sequence[Sequence[float]]]
Step = Callable[[Derivative, list[float], list[float], float], float]


def _integrate(f: Derivative, start: MatrixLike, h: float, n: int, step: Step) -> Matrix:
    if n < 0:
        raise ValueError("number of steps must not be negative")
    table = start if isinstance(start, Matrix) else Matrix.from_rows(start)
    if table.rows != 2 or table.columns < 4:
        raise ValueError("start must be 2 x 4: a row of x and a row of y values")
    if n < 3:
        raise ValueError("number of steps must cover the four starting values")
    xs = table.row(0)[:4]
    ys = table.row(1)[:4]
    for _ in range(4, n + 1):
        x_next = xs[-1] + h
        ys.append(step(f, xs, ys, x_next))
        xs.append(x_next)
    return Matrix(2, n + 1, xs + ys)


def _abm_step(f: Derivative, xs: list[float], ys: list[float], x_next: float) -> float:
    h = x_next - xs[-1]
    f4, f3, f2, f1 = (f(x, y) for x, y in zip(xs[-4:], ys[-4:]))
    predicted = ys[-1] + h * (-9.0 * f4 + 37.0 * f3 - 59.0 * f2 + 55.0 * f1) / 24.0
    return ys[-1] + h * (
        f3 - 5.0 * f2 + 19.0 * f1 + 9.0 * f(x_next, predicted)
    ) / 24.0


def _milne_prediction(f3: float, f2: float, f1: float, y4: float, h: float) -> float:
    return y4 + 4.0 * h * (2.0 * f3 - f2 + 2.0 * f1) / 3.0


def _hamming_step(
    f: Derivative, xs: list[float], ys: list[float], x_next: float
) -> float:
    h = x_next - xs[-1]
    f3, f2, f1 = (f(x, y) for x, y in zip(xs[-3:], ys[-3:]))
    predicted = _milne_prediction(f3, f2, f1, ys[-4], h)
    return (-ys[-3] + 9.0 * ys[-1]) / 8.0 + 3.0 * h * (
        -f2 + 2.0 * f1 + f(x_next, predicted)
    ) / 8.0


def _milne_simpson_step(
    f: Derivative, xs: list[float], ys: list[float], x_next: float
) -> float:
    h = x_next - xs[-1]
    f3, f2, f1 = (f(x, y) for x, y in zip(xs[-3:], ys[-3:]))
    predicted = _milne_prediction(f3, f2, f1, ys[-4], h)
    return ys[-2] + h * (f2 + 4.0 * f1 + f(x_next, predicted)) / 3.0


def adams_bashforth_moulton(
    f: Derivative, start: MatrixLike, h: float, n: int
) -> Matrix:
    """Integrate by the Adams-Bashforth-Moulton predictor-corrector method.

    ``start`` is 2 x 4: four x values and the matching y values. Returns a
    2 x (n + 1) matrix whose rows are x and y.
    """
    return _integrate(f, start, h, n, _abm_step)


def hamming(f: Derivative, start: MatrixLike, h: float, n: int) -> Matrix:
    """Integrate by Hamming's predictor-corrector method.

    ``start`` is 2 x 4: four x values and the matching y values. Returns a
    2 x (n + 1) matrix whose rows are x and y.
    """
    return _integrate(f, start, h, n, _hamming_step)


def milne_simpson(f: Derivative, start: MatrixLike, h: float, n: int) -> Matrix:
    """Integrate by the Milne-Simpson predictor-corrector method.

    ``start`` is 2 x 4: four x values and the matching y values. Returns a
    2 x (n + 1) matrix whose rows are x and y.
    """
    return _integrate(f, start, h, n, _milne_simpson_step)