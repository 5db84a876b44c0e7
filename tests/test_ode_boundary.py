import math

import pytest

from numcalc.matrix import Matrix
from numcalc.ode_boundary import solve_linear_bvp


def _p(t):
    return 2.0 * t / (1.0 + t * t)


def _q(t):
    return -2.0 / (1.0 + t * t)


def _r(t):
    return 1.0


def _exact(t):
    log_term = math.log(1.0 + t * t)
    return (
        1.25
        + 0.4860896526 * t
        - 2.25 * t * t
        + 2.0 * t * math.atan(t)
        - 0.5 * log_term
        + 0.5 * t * t * log_term
    )


def test_source_case_matches_exact_solution():
    boundary = Matrix(2, 2, [0.0, 4.0, 1.25, -0.95])
    result = solve_linear_bvp(_p, _q, _r, boundary, 160)
    assert (result.rows, result.columns) == (2, 161)
    times = result.row(0)
    values = result.row(1)
    assert times[0] == 0.0
    assert times[-1] == pytest.approx(4.0)
    assert values[0] == 1.25
    assert values[-1] == -0.95
    assert values == pytest.approx([_exact(t) for t in times], abs=1e-3)


def test_quadratic_solution_is_exact():
    zero = lambda t: 0.0  # noqa: E731
    result = solve_linear_bvp(zero, zero, lambda t: 2.0, [[0.0, 1.0], [0.0, 1.0]], 10)
    times = result.row(0)
    assert result.row(1) == pytest.approx([t * t for t in times], abs=1e-12)


def test_two_steps_single_interior_point():
    zero = lambda t: 0.0  # noqa: E731
    result = solve_linear_bvp(zero, zero, lambda t: 2.0, [[0.0, 2.0], [0.0, 4.0]], 2)
    assert result.data == pytest.approx([0.0, 1.0, 2.0, 0.0, 1.0, 4.0])


def test_single_step_returns_boundary():
    boundary = Matrix(2, 2, [0.0, 1.0, 3.0, 5.0])
    result = solve_linear_bvp(_p, _q, _r, boundary, 1)
    assert result.data == [0.0, 1.0, 3.0, 5.0]


def test_rejects_non_positive_steps():
    with pytest.raises(ValueError):
        solve_linear_bvp(_p, _q, _r, Matrix(2, 2, [0.0, 1.0, 0.0, 1.0]), 0)


def test_rejects_bad_boundary_shape():
    with pytest.raises(ValueError):
        solve_linear_bvp(_p, _q, _r, Matrix.zeros(2, 3), 10)