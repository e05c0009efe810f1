"""
General-form LP via the two-phase simplex method.

Each row is brought to b >= 0 (flipping the sense when the row is negated),
then augmented:
- ``<=``  slack s_i (basic)
- ``>=``  surplus e_i (-1) and artificial a_i (basic)
- ``=``   artificial a_i (basic)

Phase I maximises -sum(a); a negative optimum means the constraints have no
common non-negative solution. Phase II drops the artificial columns and
maximises the original objective (negated for min).
"""

from typing import Dict, List, Tuple

from lp_solver.formatting import F
from lp_solver.models import EQ, GE, LE, LPSolution, SolveMethod, Status, invalid_solution
from lp_solver.tableau import EPS, Tableau
from lp_solver.trace import build_trace_table

MAX_ITERATIONS = 20

_FLIP = {LE: GE, GE: LE, EQ: EQ}


def standardize(A, b, senses) -> Tuple[List[list], List, List[str]]:
    """Return copies of A, b, senses with every RHS non-negative."""
    rows, rhs, out_senses = [], [], []
    for row, bi, s in zip(A, b, senses):
        row = [F(v) for v in row]
        bi = F(bi)
        if bi < 0:
            row = [-v for v in row]
            bi = -bi
            s = _FLIP[s]
        rows.append(row)
        rhs.append(bi)
        out_senses.append(s)
    return rows, rhs, out_senses


def build_phase_one(c, A, b, senses, max_iterations: int = MAX_ITERATIONS) -> Tuple[Tableau, Dict[str, object]]:
    m, n = len(A), len(c)
    A, b, senses = standardize(A, b, senses)

    var_names = [f"x{j+1}" for j in range(n)]
    extra_cols = []
    extra_names = []
    basic_per_row = []

    for i, sense in enumerate(senses):
        if sense == LE:
            col = [F(0)]*m; col[i] = F(1)
            extra_cols.append(col); extra_names.append(f"s{i+1}")
        elif sense == GE:
            col_sur = [F(0)]*m; col_sur[i] = F(-1)
            extra_cols.append(col_sur); extra_names.append(f"e{i+1}")
            col_art = [F(0)]*m; col_art[i] = F(1)
            extra_cols.append(col_art); extra_names.append(f"a{i+1}")
        elif sense == EQ:
            col_art = [F(0)]*m; col_art[i] = F(1)
            extra_cols.append(col_art); extra_names.append(f"a{i+1}")
        else:
            raise ValueError("sense must be one of <=, >=, =")
        basic_per_row.append(n + len(extra_names) - 1)

    rows = []
    for i in range(m):
        rows.append(A[i] + [col[i] for col in extra_cols] + [b[i]])

    var_names_all = var_names + extra_names
    artificial = [j for j, name in enumerate(var_names_all) if name.startswith("a")]
    cj = [F(-1) if j in artificial else F(0) for j in range(len(var_names_all))]

    tab = Tableau(rows, basic_per_row, cj, var_names_all, phase="Phase I", max_iterations=max_iterations)
    meta = {"n": n, "var_names": var_names_all, "artificial_indices": artificial}
    return tab, meta


def drive_out_artificials(tab: Tableau, artificial: List[int]) -> List[int]:
    """Pivot artificial variables left in the basis at level zero out of it.

    Returns the rows that could not be cleared; they are redundant and are
    dropped before Phase II.
    """
    art_set = set(artificial)
    redundant = []
    for i in range(tab.m):
        if tab.basis[i] not in art_set:
            continue
        for j in range(tab.num_vars):
            if j not in art_set and abs(tab.T[i+1][j]) > EPS:
                tab.pivot(i, j)
                break
        else:
            redundant.append(i)
    return redundant


def build_phase_two(tab: Tableau, meta: Dict[str, object], c, maximize: bool,
                    max_iterations: int = MAX_ITERATIONS) -> Tableau:
    n = meta["n"]
    art_set = set(meta["artificial_indices"])
    redundant = set(drive_out_artificials(tab, meta["artificial_indices"]))

    keep_cols = [j for j in range(tab.num_vars) if j not in art_set]
    new_index = {old: new for new, old in enumerate(keep_cols)}
    rows, basis = [], []
    for i in range(tab.m):
        if i in redundant:
            continue
        row = tab.T[i+1]
        rows.append([row[j] for j in keep_cols] + [row[-1]])
        basis.append(new_index[tab.basis[i]])

    names = [meta["var_names"][j] for j in keep_cols]
    cj = [F(0)] * len(keep_cols)
    for j in range(n):
        cj[new_index[j]] = F(c[j]) if maximize else -F(c[j])
    phase = "Phase II" if art_set else None
    return Tableau(rows, basis, cj, names, phase=phase, max_iterations=max_iterations)


def general_method(c, A, b, senses, maximize: bool = True, verbose: bool = False,
                   max_iterations: int = MAX_ITERATIONS) -> LPSolution:
    tab1, meta = build_phase_one(c, A, b, senses, max_iterations=max_iterations)
    trace = []
    iterations = 0

    if meta["artificial_indices"]:
        if verbose:
            print("\n=== Phase I ===")
        status1 = tab1.solve(verbose=verbose)
        trace += tab1.trace
        iterations += tab1.iter
        if status1 != Status.OPTIMAL:
            return invalid_solution(status1, SolveMethod.GENERAL, iterations)
        # should be 0 if feasible (we maximize -sum a)
        if tab1.z < -EPS:
            if verbose:
                print("Artificial variables cannot reach zero: infeasible")
            return invalid_solution(Status.INFEASIBLE, SolveMethod.GENERAL, iterations)

    tab2 = build_phase_two(tab1, meta, c, maximize, max_iterations=max_iterations)
    if verbose and meta["artificial_indices"]:
        print("\n=== Phase II ===")
    status2 = tab2.solve(verbose=verbose)
    trace += tab2.trace
    iterations += tab2.iter
    if status2 != Status.OPTIMAL:
        return invalid_solution(status2, SolveMethod.GENERAL, iterations)

    z = tab2.z if maximize else -tab2.z
    x = tab2.extract_solution(len(c))
    return LPSolution(
        is_valid=True,
        coordinates=[float(v) for v in x],
        value=float(z),
        table_data=build_trace_table(trace),
        status=Status.OPTIMAL,
        method=SolveMethod.GENERAL,
        iterations=iterations,
    )
