"""
Graphical (vertex enumeration) method for LPs in exactly two variables.

Every vertex of the feasible region lies on two of the lines
{constraint lines, x1 = 0, x2 = 0}, so the candidates are the pairwise
constraint intersections, the axis intercepts and the origin. The best
feasible candidate is optimal unless the region is unbounded in an
improving direction, which is probed separately.
"""

import math
from itertools import combinations
from typing import List, Optional, Tuple

from lp_solver.formatting import fmt_linear, fmt_number, fmt_point
from lp_solver.geometry import (
    EPS,
    Point,
    axis_intercepts,
    intersect,
    is_feasible,
    lhs,
    objective_value,
    same_point,
    satisfies,
)
from lp_solver.models import LPSolution, SolveMethod, Status, TableData, invalid_solution

TABLE_HEADERS = ["Constraint", "Equation", "Point 1", "Point 2", "Point 3"]
POINTS_PER_ROW = 3


def _lines(A, b) -> List[Tuple[Tuple[float, float], float]]:
    return [((float(row[0]), float(row[1])), float(bi)) for row, bi in zip(A, b)]


def candidate_points(A, b) -> List[Point]:
    """Pairwise intersections, then axis intercepts, then the origin."""
    lines = _lines(A, b)
    pts = []
    for i, j in combinations(range(len(lines)), 2):
        p = intersect(lines[i], lines[j])
        if p is not None:
            pts.append(p)
    for line in lines:
        pts.extend(axis_intercepts(line))
    pts.append((0.0, 0.0))
    return pts


def improving_ray(c, A, senses, maximize: bool) -> Optional[Point]:
    """Return a direction of the region's recession cone that improves the
    objective, or None if the objective is bounded over the region.

    The extreme rays of a cone in the positive quadrant are the axis
    directions or lie along a constraint line, so those are the only
    directions worth testing.
    """
    dirs = [(1.0, 0.0), (0.0, 1.0)]
    for row in A:
        a1, a2 = float(row[0]), float(row[1])
        norm = math.hypot(a1, a2)
        if norm < EPS:
            continue
        dirs.append((a2/norm, -a1/norm))
        dirs.append((-a2/norm, a1/norm))

    for d in dirs:
        if d[0] < -EPS or d[1] < -EPS:
            continue
        if not all(satisfies(lhs(row, d), s, 0.0) for row, s in zip(A, senses)):
            continue
        gain = objective_value(c, d)
        if (maximize and gain > EPS) or (not maximize and gain < -EPS):
            return d
    return None


def build_table(A, b, senses) -> TableData:
    lines = _lines(A, b)
    rows = []
    for i, line in enumerate(lines):
        on_line = list(axis_intercepts(line))
        for j, other in enumerate(lines):
            if j == i:
                continue
            p = intersect(line, other)
            if p is not None:
                on_line.append(p)
        uniq: List[Point] = []
        for p in on_line:
            if not any(same_point(p, q) for q in uniq):
                uniq.append(p)
        cells = [fmt_point(p) for p in uniq[:POINTS_PER_ROW]]
        cells += ["-"] * (POINTS_PER_ROW - len(cells))
        expr = fmt_linear(A[i])
        rows.append([f"{expr} {senses[i]} {fmt_number(b[i])}", f"{expr} = {fmt_number(b[i])}"] + cells)
    rows.append(["x1, x2 >= 0", "x1 = 0, x2 = 0", "(0, 0)"] + ["-"] * (POINTS_PER_ROW - 1))
    return TableData(headers=TABLE_HEADERS[:], rows=rows)


def graphical_method(c, A, b, senses, maximize: bool = True, verbose: bool = False) -> LPSolution:
    if len(c) != 2:
        raise ValueError("the graphical method needs exactly 2 decision variables")

    pts = candidate_points(A, b)
    feas = [p for p in pts if is_feasible(p, A, senses, b)]
    if verbose:
        print("\nCandidate points")
        for p in pts:
            flag = "feasible" if p in feas else "-"
            print(f"  {fmt_point(p):>16}  {flag}")
    if not feas:
        return invalid_solution(Status.INFEASIBLE, SolveMethod.GRAPHICAL)

    ray = improving_ray(c, A, senses, maximize)
    if ray is not None:
        if verbose:
            print(f"Objective improves without limit along {fmt_point(ray)}")
        return invalid_solution(Status.UNBOUNDED, SolveMethod.GRAPHICAL)

    values = [objective_value(c, p) for p in feas]
    best = 0
    for k in range(1, len(values)):
        if (maximize and values[k] > values[best]) or (not maximize and values[k] < values[best]):
            best = k
    x, y = feas[best]
    if verbose:
        print(f"Optimum at {fmt_point((x, y))}, Z = {values[best]:g}")
    return LPSolution(
        is_valid=True,
        coordinates=[x, y],
        value=values[best],
        table_data=build_table(A, b, senses),
        status=Status.OPTIMAL,
        method=SolveMethod.GRAPHICAL,
    )
