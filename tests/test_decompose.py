import math

import pytest

from numcalc.decompose import cholesky, lu_doolittle
from numcalc.matrix import Matrix


def _assert_matrix_close(actual, expected, abs_tol=1e-12):
    assert (actual.rows, actual.columns) == (expected.rows, expected.columns)
    assert actual.data == pytest.approx(expected.data, abs=abs_tol)


def test_cholesky_source_case_values():
    a = Matrix(3, 3, [3.0, 2.0, 1.0, 2.0, 2.0, 0.0, 1.0, 0.0, 3.0])
    lower = cholesky(a)
    root23 = math.sqrt(2.0 / 3.0)
    expected = Matrix(
        3,
        3,
        [
            math.sqrt(3.0), 0.0, 0.0,
            2.0 / math.sqrt(3.0), root23, 0.0,
            1.0 / math.sqrt(3.0), -root23, math.sqrt(2.0),
        ],
    )
    _assert_matrix_close(lower, expected)


def test_cholesky_reconstructs_matrix():
    a = Matrix(3, 3, [3.0, 2.0, 1.0, 2.0, 2.0, 0.0, 1.0, 0.0, 3.0])
    lower = cholesky(a)
    _assert_matrix_close(lower @ lower.transpose(), a)


def test_cholesky_is_lower_triangular():
    a = Matrix(2, 2, [4.0, 2.0, 2.0, 5.0])
    lower = cholesky(a)
    assert lower[0, 1] == 0.0
    assert lower.data == pytest.approx([2.0, 0.0, 1.0, 2.0])


def test_cholesky_rejects_non_square():
    with pytest.raises(ValueError):
        cholesky(Matrix.zeros(2, 3))


def test_cholesky_rejects_indefinite():
    with pytest.raises(ValueError):
        cholesky(Matrix(2, 2, [1.0, 2.0, 2.0, 1.0]))


def test_lu_source_case():
    a = Matrix(3, 3, [2.0, 1.0, 2.0, 4.0, 5.0, 4.0, 6.0, -3.0, 5.0])
    lower, upper = lu_doolittle(a)
    _assert_matrix_close(
        lower, Matrix(3, 3, [1.0, 0.0, 0.0, 2.0, 1.0, 0.0, 3.0, -2.0, 1.0])
    )
    _assert_matrix_close(
        upper, Matrix(3, 3, [2.0, 1.0, 2.0, 0.0, 3.0, 0.0, 0.0, 0.0, -1.0])
    )


def test_lu_reconstructs_matrix():
    a = Matrix(3, 3, [2.0, 1.0, 2.0, 4.0, 5.0, 4.0, 6.0, -3.0, 5.0])
    lower, upper = lu_doolittle(a)
    _assert_matrix_close(lower @ upper, a)


def test_lu_rejects_non_square():
    with pytest.raises(ValueError):
        lu_doolittle(Matrix.zeros(3, 2))


def test_lu_rejects_zero_pivot():
    with pytest.raises(ValueError):
        lu_doolittle(Matrix(2, 2, [0.0, 1.0, 1.0, 0.0]))