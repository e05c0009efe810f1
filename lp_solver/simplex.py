"""
Tableau simplex for problems in canonical form (every row ``<=`` with b >= 0).

- max/min handled by maximising the negated objective for min.
- Slack variables s1..sm form the starting basis.
- Problems with ``>=``/``=`` rows or a negative RHS have no slack basis and
  are handed to the two-phase engine in ``lp_solver.general``.
"""

from typing import List

from lp_solver.formatting import F
from lp_solver.general import general_method
from lp_solver.models import LE, LPSolution, SolveMethod, Status, invalid_solution
from lp_solver.tableau import Tableau
from lp_solver.trace import build_trace_table

MAX_ITERATIONS = 100


def is_canonical(b, senses) -> bool:
    return all(s == LE for s in senses) and all(F(v) >= 0 for v in b)


def build_tableau(c, A, b, maximize: bool = True, max_iterations: int = MAX_ITERATIONS) -> Tableau:
    m, n = len(A), len(c)
    cj = [F(v) if maximize else -F(v) for v in c] + [F(0)] * m
    var_names = [f"x{j+1}" for j in range(n)] + [f"s{i+1}" for i in range(m)]
    rows: List[list] = []
    for i in range(m):
        slack = [F(0)] * m
        slack[i] = F(1)
        rows.append([F(v) for v in A[i]] + slack + [F(b[i])])
    basis = [n + i for i in range(m)]
    return Tableau(rows, basis, cj, var_names, max_iterations=max_iterations)


def simplex_method(c, A, b, senses, maximize: bool = True, verbose: bool = False,
                   max_iterations: int = MAX_ITERATIONS) -> LPSolution:
    if not is_canonical(b, senses):
        if verbose:
            print("No slack basis for this problem, switching to the two-phase method")
        return general_method(c, A, b, senses, maximize=maximize, verbose=verbose,
                              max_iterations=max_iterations)

    tab = build_tableau(c, A, b, maximize=maximize, max_iterations=max_iterations)
    if verbose:
        print("\nInitial tableau")
    status = tab.solve(verbose=verbose)
    if status != Status.OPTIMAL:
        return invalid_solution(status, SolveMethod.SIMPLEX, tab.iter)

    z = tab.z if maximize else -tab.z
    x = tab.extract_solution(len(c))
    return LPSolution(
        is_valid=True,
        coordinates=[float(v) for v in x],
        value=float(z),
        table_data=build_trace_table(tab.trace),
        status=Status.OPTIMAL,
        method=SolveMethod.SIMPLEX,
        iterations=tab.iter,
    )
