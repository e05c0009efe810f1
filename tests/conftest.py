import matplotlib

matplotlib.use("Agg")

import pytest

from lp_solver.geometry import lhs, satisfies
from lp_solver.models import LPProblem


@pytest.fixture
def textbook_problem():
    # max 3x1 + 2x2, 2x1 + x2 <= 10, x1 + 2x2 <= 8 -> (4, 2), Z = 16
    return LPProblem(
        problem_type="max",
        objective_function=[3, 2],
        constraint_coefficients=[[2, 1], [1, 2]],
        constraint_signs=["<=", "<="],
        constraint_values=[10, 8],
    )


@pytest.fixture
def three_var_problem():
    # max 5x1 + 4x2 + 3x3 -> (2, 0, 1), Z = 13
    return LPProblem(
        problem_type="max",
        objective_function=[5, 4, 3],
        constraint_coefficients=[[2, 3, 1], [4, 1, 2], [3, 4, 2]],
        constraint_signs=["<=", "<=", "<="],
        constraint_values=[5, 11, 8],
    )


def assert_feasible(problem, coordinates, tol=1e-6):
    assert len(coordinates) == problem.num_variables
    assert all(x >= -tol for x in coordinates)
    for row, s, bi in zip(problem.constraint_coefficients, problem.senses(), problem.constraint_values):
        assert satisfies(lhs(row, coordinates), s, float(bi), tol=tol), (row, s, bi, coordinates)
