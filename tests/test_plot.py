import matplotlib.pyplot as plt

from lp_solver.models import LPProblem
from lp_solver.plot import plot_2d
from lp_solver.solver import solve_lp_problem


def test_plot_textbook_problem(textbook_problem):
    fig = plot_2d(textbook_problem, solve_lp_problem(textbook_problem))

    assert fig is not None
    ax = fig.axes[0]
    assert ax.get_title() == "Constraints, Feasible Region, Iso-objective"
    labels = [t.get_text() for t in ax.get_legend().get_texts()]
    assert "2x1 + x2 <= 10" in labels
    assert "optimal (4, 2)" in labels
    plt.close(fig)


def test_plot_without_solution(textbook_problem):
    fig = plot_2d(textbook_problem)

    assert fig is not None
    plt.close(fig)


def test_plot_vertical_constraint_and_equality():
    problem = LPProblem("max", [1, 1], [[1, 0], [1, 2]], ["<=", "="], [2, 4])
    fig = plot_2d(problem, solve_lp_problem(problem))

    assert fig is not None
    plt.close(fig)


def test_nothing_to_plot(three_var_problem):
    assert plot_2d(three_var_problem) is None

    infeasible = LPProblem("max", [1, 1], [[1, 1], [1, 1]], ["<=", ">="], [1, 5])
    assert plot_2d(infeasible) is None
