import pytest

from numcalc.matrix import Matrix
from numcalc.norms import norm_1, norm_inf, vector_norm


SAMPLE = [1.5, -2.0, 0.5, 3.0]


def test_two_norm_of_classic_triangle():
    assert vector_norm(Matrix.from_vector([3.0, 4.0]), 2) == pytest.approx(5.0)


def test_sequence_and_matrix_give_same_result():
    for p in (1, 2, 3, -1):
        assert vector_norm(SAMPLE, p) == vector_norm(Matrix.from_vector(SAMPLE), p)


def test_norms_are_ordered():
    one = vector_norm(SAMPLE, 1)
    two = vector_norm(SAMPLE, 2)
    inf = vector_norm(SAMPLE, -1)
    assert one >= two >= inf


def test_infinity_norm_ignores_sign_and_order():
    flipped = [-v for v in reversed(SAMPLE)]
    assert vector_norm(flipped, -1) == vector_norm(SAMPLE, -1)
    assert vector_norm(SAMPLE, -1) == abs(SAMPLE[3])


def test_general_p_norm_lies_between_inf_and_one_norm():
    positive = [1.0, 2.0, 0.25]
    three = vector_norm(positive, 3)
    assert vector_norm(positive, -1) <= three <= vector_norm(positive, 1)


@pytest.mark.parametrize("p", [1, 2, -1, 3])
def test_norm_is_homogeneous(p):
    values = [1.0, 2.0, 0.5]
    scaled = [2.5 * v for v in values]
    assert vector_norm(scaled, p) == pytest.approx(2.5 * vector_norm(values, p))


@pytest.mark.parametrize("p", [0.0, -0.5, -2.0])
def test_invalid_order_is_rejected(p):
    with pytest.raises(ValueError):
        vector_norm(SAMPLE, p)


def test_non_vector_matrix_is_rejected():
    with pytest.raises(ValueError):
        vector_norm(Matrix.identity(2), 2)


def test_matrix_norms_of_small_example():
    a = Matrix.from_rows([[1.0, -2.0], [3.0, 4.0]])
    assert norm_1(a) == pytest.approx(6.0)
    assert norm_inf(a) == pytest.approx(7.0)


def test_one_norm_is_inf_norm_of_transpose():
    a = Matrix.from_rows([[2.0, -1.0, 0.5], [-3.0, 0.0, 4.0]])
    assert norm_1(a) == norm_inf(a.transpose())
    assert norm_inf(a) == norm_1(a.transpose())


def test_identity_norms_agree():
    e = Matrix.identity(4)
    assert norm_1(e) == norm_inf(e)
    assert norm_1(e) == vector_norm(Matrix.from_vector(e.column(0)), 2)