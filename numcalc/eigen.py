"""Eigenvalues and eigenvectors: Jacobi rotations and the power method."""

from __future__ import annotations

import math
from typing import Sequence, Union

from .matrix import ConvergenceError, Matrix
from .vector import max_abs

VectorLike = Union[Matrix, Sequence[float]]


def is_symmetric(a: Matrix) -> bool:
    """Return True if ``a`` is square and equal to its transpose."""
    if a.rows != a.columns:
        return False
    return all(
        a[i, j] == a[j, i] for i in range(a.rows) for j in range(i + 1, a.columns)
    )


def _check_symmetric(a: Matrix) -> None:
    if not is_symmetric(a):
        raise ValueError("matrix is not symmetric")
    if a.rows == 0:
        raise ValueError("matrix is empty")


def _off_diagonal_square_sum(a: Matrix) -> float:
    return 2.0 * sum(
        a[i, j] ** 2 for i in range(a.rows - 1) for j in range(i + 1, a.columns)
    )


def _largest_off_diagonal(a: Matrix) -> tuple[int, int]:
    p = q = 0
    largest = 0.0
    for i in range(a.rows - 1):
        for j in range(i + 1, a.rows):
            if abs(largest) < abs(a[i, j]):
                largest, p, q = a[i, j], i, j
    return p, q


def _rotation_angle(a: Matrix, p: int, q: int) -> tuple[float, float]:
    """Return cos and sin of the rotation that annihilates ``a[p, q]``."""
    apq, app, aqq = a[p, q], a[p, p], a[q, q]
    if apq == 0.0:
        raise ValueError("rotation is undefined: off-diagonal element is zero")
    if app == aqq:
        c = math.sqrt(2.0) / 2.0
        return (c, c) if apq > 0 else (c, -c)
    if 1000.0 * abs(apq) < abs(app - aqq):
        d = 2.0 * apq / (app - aqq)
        tangent = d / (1.0 + math.sqrt(1.0 + d * d))
    else:
        c = (app - aqq) / (2.0 * apq)
        tangent = math.copysign(1.0, c) / (abs(c) + math.sqrt(1.0 + c * c))
    cosine = 1.0 / math.sqrt(1.0 + tangent * tangent)
    return cosine, tangent * cosine


def _rotate(b: Matrix, vectors: Matrix, p: int, q: int) -> tuple[Matrix, Matrix]:
    cosine, sine = _rotation_angle(b, p, q)
    rotation = Matrix.identity(b.rows)
    rotation[p, p] = cosine
    rotation[p, q] = sine
    rotation[q, p] = -sine
    rotation[q, q] = cosine
    rotation_t = rotation.transpose()
    return rotation @ b @ rotation_t, vectors @ rotation_t


def eigen_classical_jacobi(
    a: Matrix, tol: float, max_iter: int
) -> tuple[Matrix, Matrix]:
    """Diagonalise a symmetric matrix by the classical Jacobi method.

    Returns ``(D, V)``: ``D`` is nearly diagonal with the eigenvalues on its
    diagonal and column ``i`` of ``V`` is the eigenvector of ``D[i, i]``.
    Iteration stops once twice the sum of squared off-diagonal entries is
    at most ``tol``.
    """
    _check_symmetric(a)
    b = Matrix(a.rows, a.columns, list(a.data))
    vectors = Matrix.identity(a.rows)
    if _off_diagonal_square_sum(b) <= tol:
        return b, vectors
    for _ in range(max_iter):
        p, q = _largest_off_diagonal(b)
        b, vectors = _rotate(b, vectors, p, q)
        if _off_diagonal_square_sum(b) <= tol:
            return b, vectors
    raise ConvergenceError(f"Jacobi method did not converge in {max_iter} steps")


def eigen_jacobi_pass(
    a: Matrix, tol: float, max_iter: int
) -> tuple[Matrix, Matrix]:
    """Diagonalise a symmetric matrix by the threshold (pass) Jacobi method.

    Each sweep rotates away every off-diagonal entry whose magnitude exceeds
    the current threshold, the square root of the off-diagonal square sum
    divided by the order. Returns ``(D, V)`` as
    :func:`eigen_classical_jacobi` does; stops when the off-diagonal square
    sum falls below ``tol``.
    """
    _check_symmetric(a)
    n = a.rows
    b = Matrix(n, n, list(a.data))
    vectors = Matrix.identity(n)
    off = _off_diagonal_square_sum(b)
    if off < tol:
        return b, vectors
    threshold = math.sqrt(off) / n
    for _ in range(max_iter):
        for i in range(n - 1):
            for j in range(i + 1, n):
                if abs(b[i, j]) > threshold:
                    b, vectors = _rotate(b, vectors, i, j)
        off = _off_diagonal_square_sum(b)
        if off < tol:
            return b, vectors
        threshold = math.sqrt(off) / n
    raise ConvergenceError(
        f"threshold Jacobi method did not converge in {max_iter} sweeps"
    )


def _as_list(values: VectorLike) -> list[float]:
    if isinstance(values, Matrix):
        return values.to_vector()
    return [float(v) for v in values]


def eigen_power(
    a: Matrix, u0: VectorLike, tol: float, max_iter: int
) -> tuple[float, list[float]]:
    """Return the dominant eigenvalue of ``a`` and its eigenvector.

    The eigenvector is scaled so that its largest component is 1.
    """
    u = _as_list(u0)
    if a.rows != a.columns:
        raise ValueError("matrix is not square")
    if len(u) != a.rows:
        raise ValueError("initial vector does not match the matrix")

    def apply(vector: list[float]) -> list[float]:
        return (a @ Matrix.from_vector(vector)).data

    following = apply(u)
    ratio_index = 0
    previous = 0.0
    for i, (old, new) in enumerate(zip(u, following)):
        if abs(old) > 1e-3 and abs(new) > 1e-3:
            ratio_index = i
            previous = new / old
    u = following

    for _ in range(max_iter):
        following = apply(u)
        estimate = following[ratio_index] / u[ratio_index]
        peak, _ = max_abs(following)
        if abs(estimate - previous) < tol:
            return estimate, [v / peak for v in following]
        if abs(peak) > 1e6:
            following = [v / peak for v in following]
        previous = estimate
        u = following
    raise ConvergenceError(f"power method did not converge in {max_iter} steps")