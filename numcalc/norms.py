"""Vector p-norms and the 1- and infinity-norms of matrices."""

from __future__ import annotations

import math
from typing import Sequence, Union

from .matrix import Matrix
from .vector import max_abs, max_value

INFINITY_NORM = -1.0
"""Value of ``p`` that selects the infinity norm in :func:`vector_norm`."""


def vector_norm(vector: Union[Matrix, Sequence[float]], p: float) -> float:
    """Return the p-norm of a column vector.

    ``p`` is 1, 2, any value above zero, or -1 for the infinity norm.
    """
    if isinstance(vector, Matrix):
        if vector.columns != 1:
            raise ValueError("matrix is not a column vector")
        values = list(vector.data)
    else:
        values = [float(v) for v in vector]
    if p < INFINITY_NORM or INFINITY_NORM < p <= 0.0:
        raise ValueError(f"invalid norm order p={p}")

    if p == 1.0:
        return sum(abs(v) for v in values)
    if p == 2.0:
        return math.sqrt(sum(v * v for v in values))
    if p == INFINITY_NORM:
        largest, _ = max_abs(values)
        return abs(largest)
    return math.pow(sum(math.pow(v, p) for v in values), 1.0 / p)


def norm_1(matrix: Matrix) -> float:
    """Return the largest absolute column sum of a matrix."""
    sums = [sum(abs(v) for v in matrix.column(j)) for j in range(matrix.columns)]
    largest, _ = max_value(sums)
    return largest


def norm_inf(matrix: Matrix) -> float:
    """Return the largest absolute row sum of a matrix."""
    sums = [sum(abs(v) for v in matrix.row(i)) for i in range(matrix.rows)]
    largest, _ = max_value(sums)
    return largest