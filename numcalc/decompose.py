"""Square-root (Cholesky) and Doolittle LU decompositions."""

from __future__ import annotations

import math

from .matrix import Matrix


def _check_square(a: Matrix) -> int:
    if a.rows != a.columns:
        raise ValueError("matrix is not square")
    if a.rows == 0:
        raise ValueError("matrix is empty")
    return a.rows


def cholesky(a: Matrix) -> Matrix:
    """Return the lower triangular ``L`` with ``a = L @ L.T``.

    ``a`` must be symmetric positive definite; only its upper triangle and
    diagonal are read.
    """
    n = _check_square(a)
    lower = Matrix.zeros(n, n)
    for k in range(n):
        pivot = a[k, k] - sum(lower[k, m] ** 2 for m in range(k))
        if pivot <= 0.0:
            raise ValueError("matrix is not positive definite")
        diagonal = math.sqrt(pivot)
        lower[k, k] = diagonal
        for j in range(k + 1, n):
            partial = sum(lower[k, m] * lower[j, m] for m in range(k))
            lower[j, k] = (a[k, j] - partial) / diagonal
    return lower


def lu_doolittle(a: Matrix) -> tuple[Matrix, Matrix]:
    """Return ``(L, U)`` with ``a = L @ U``.

    ``L`` is unit lower triangular and ``U`` upper triangular; no pivoting
    is done.
    """
    n = _check_square(a)
    lower = Matrix.identity(n)
    upper = Matrix.zeros(n, n)
    for k in range(n):
        for j in range(k, n):
            partial = sum(lower[k, m] * upper[m, j] for m in range(k))
            upper[k, j] = a[k, j] - partial
        pivot = upper[k, k]
        for i in range(k + 1, n):
            if pivot == 0.0:
                raise ValueError("zero pivot; matrix has no LU decomposition")
            partial = sum(lower[i, m] * upper[m, k] for m in range(k))
            lower[i, k] = (a[i, k] - partial) / pivot
    return lower, upper