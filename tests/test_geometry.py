import pytest

from lp_solver.geometry import axis_intercepts, intersect, is_feasible, objective_value, satisfies


def test_intersect():
    assert intersect(((2, 1), 10), ((1, 2), 8)) == pytest.approx((4, 2))


def test_intersect_parallel_lines_is_none():
    assert intersect(((1, 1), 1), ((2, 2), 5)) is None
    # same line twice
    assert intersect(((1, 2), 4), ((1, 2), 4)) is None


def test_intersect_nearly_parallel_below_tolerance_is_none():
    assert intersect(((1, 1), 1), ((1, 1 + 1e-9), 2)) is None


def test_axis_intercepts():
    assert axis_intercepts(((2, 1), 10)) == [(0.0, 10.0), (5.0, 0.0)]
    assert axis_intercepts(((0, 1), 3)) == [(0.0, 3.0)]
    assert axis_intercepts(((0, 0), 3)) == []


def test_is_feasible():
    A, signs, b = [[2, 1], [1, 2]], ["<=", "<="], [10, 8]
    assert is_feasible((4, 2), A, signs, b)
    assert not is_feasible((4.1, 2), A, signs, b)


def test_is_feasible_non_negativity_tolerance():
    assert is_feasible((-1e-9, 0.0), [], [], [])
    assert not is_feasible((-1e-6, 0.0), [], [], [])


def test_is_feasible_equality_within_tolerance():
    assert is_feasible((1, 1 + 1e-9), [[1, 1]], ["="], [2])
    assert not is_feasible((1, 1.1), [[1, 1]], ["="], [2])
    assert is_feasible((3, 3), [[1, 1]], [">="], [6])


def test_satisfies_rejects_unknown_sense():
    with pytest.raises(ValueError):
        satisfies(1.0, "<>", 2.0)


def test_objective_value():
    assert objective_value([3, 2], (4, 2)) == 16
