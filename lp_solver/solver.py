"""
Single entry point used by the CLI and the app.

solve_lp_problem never raises: malformed input and numerical failures are
logged and come back as an invalid LPSolution with status "error".
"""

import logging
from dataclasses import replace
from typing import List, Optional, Sequence, Union

from lp_solver.graphical import graphical_method
from lp_solver.general import general_method
from lp_solver.models import LPProblem, LPSolution, SolveMethod, Status, invalid_solution
from lp_solver.simplex import simplex_method

logger = logging.getLogger(__name__)


def _negate_tail(row: Sequence) -> List:
    # first coefficient keeps its sign, the others become -|c|
    return [c if j == 0 else -abs(c) for j, c in enumerate(row)]


def apply_sign_operators(problem: LPProblem) -> LPProblem:
    """Fold the form's "+"/"-" operators into the coefficients."""
    objective = list(problem.objective_function)
    if problem.objective_operator == "-":
        objective = _negate_tail(objective)

    rows = [list(r) for r in problem.constraint_coefficients]
    ops = problem.constraint_operators
    if ops and len(ops) == len(rows):
        rows = [_negate_tail(r) if op == "-" else r for r, op in zip(rows, ops)]

    return replace(
        problem,
        objective_function=objective,
        constraint_coefficients=rows,
        objective_operator=None,
        constraint_operators=None,
    )


def pick_method(num_variables: int, method: Optional[SolveMethod]) -> SolveMethod:
    if num_variables == 2:
        return SolveMethod.GRAPHICAL
    if method == SolveMethod.GENERAL:
        return SolveMethod.GENERAL
    return SolveMethod.SIMPLEX


def solve_lp_problem(problem: LPProblem, method: Union[str, SolveMethod] = SolveMethod.GRAPHICAL,
                     verbose: bool = False) -> LPSolution:
    try:
        problem.validate()
        problem = apply_sign_operators(problem)
        chosen = pick_method(problem.num_variables, SolveMethod.parse(method))
        args = (
            problem.objective_function,
            problem.constraint_coefficients,
            problem.constraint_values,
            problem.senses(),
        )
        logger.debug("solving %d x %d problem with the %s method",
                     problem.num_constraints, problem.num_variables, chosen.value)
        if chosen == SolveMethod.GRAPHICAL:
            result = graphical_method(*args, maximize=problem.maximize, verbose=verbose)
        elif chosen == SolveMethod.GENERAL:
            result = general_method(*args, maximize=problem.maximize, verbose=verbose)
        else:
            result = simplex_method(*args, maximize=problem.maximize, verbose=verbose)
    except Exception:
        logger.exception("Error solving LP problem")
        return invalid_solution(Status.ERROR)

    if not result.is_valid:
        logger.info("no optimal solution: %s", result.status.value)
    return result
