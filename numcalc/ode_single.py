"""One-step solvers for the initial value problem ``y' = f(x, y)``."""

from __future__ import annotations

from typing import Callable

from .matrix import ConvergenceError, Matrix

Derivative = Callable[[float, float], float]

_MAX_INNER_ITERATIONS = 100_000


def _check_steps(n: int) -> None:
    if n < 0:
        raise ValueError("number of steps must not be negative")


def _table(xs: list[float], ys: list[float]) -> Matrix:
    """Return an (n + 1) x 2 matrix whose rows are ``(x, y)`` pairs."""
    return Matrix(len(xs), 2, [v for pair in zip(xs, ys) for v in pair])


def euler(f: Derivative, x0: float, y0: float, h: float, n: int) -> Matrix:
    """Integrate by Euler's method, ``y_(k+1) = y_k + h f(x_k, y_k)``.

    Returns an (n + 1) x 2 matrix of ``(x, y)`` rows.
    """
    _check_steps(n)
    xs, ys = [float(x0)], [float(y0)]
    for _ in range(n):
        x, y = xs[-1], ys[-1]
        ys.append(y + h * f(x, y))
        xs.append(x + h)
    return _table(xs, ys)


def euler_predictor_corrector(
    f: Derivative, x0: float, y0: float, h: float, n: int
) -> Matrix:
    """Integrate by Euler's predictor-corrector (improved Euler) method.

    Returns an (n + 1) x 2 matrix of ``(x, y)`` rows.
    """
    _check_steps(n)
    xs, ys = [float(x0)], [float(y0)]
    for _ in range(n):
        x, y = xs[-1], ys[-1]
        x_next = x + h
        slope = f(x, y)
        predicted = y + h * slope
        ys.append(y + h * (slope + f(x_next, predicted)) / 2.0)
        xs.append(x_next)
    return _table(xs, ys)


def heun(f: Derivative, x0: float, y0: float, h: float, n: int) -> Matrix:
    """Integrate by Heun's method: an Euler predictor and a trapezoid corrector.

    Returns an (n + 1) x 2 matrix of ``(x, y)`` rows.
    """
    _check_steps(n)
    xs, ys = [float(x0)], [float(y0)]
    for _ in range(n):
        x, y = xs[-1], ys[-1]
        x_next = x + h
        slope = f(x, y)
        predicted = y + h * slope
        ys.append(y + h * (slope + f(x_next, predicted)) / 2.0)
        xs.append(x_next)
    return _table(xs, ys)


def trapezoid(
    f: Derivative, x0: float, y0: float, h: float, tol: float, n: int
) -> Matrix:
    """Integrate by the implicit trapezoid rule.

    Each step starts from an Euler prediction and repeats the trapezoid
    correction until two successive values differ by less than ``tol``.
    Returns an (n + 1) x 2 matrix of ``(x, y)`` rows.
    """
    _check_steps(n)
    xs, ys = [float(x0)], [float(y0)]
    for _ in range(n):
        x, y = xs[-1], ys[-1]
        x_next = x + h
        slope = f(x, y)
        guess = y + h * slope
        for _ in range(_MAX_INNER_ITERATIONS):
            corrected = y + h * (slope + f(x_next, guess)) / 2.0
            if abs(corrected - guess) < tol:
                break
            guess = corrected
        else:
            raise ConvergenceError(
                f"trapezoid correction did not settle at x={x_next}"
            )
        xs.append(x_next)
        ys.append(corrected)
    return _table(xs, ys)