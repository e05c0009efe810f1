"""Plane geometry for the two-variable (graphical) method.

A line is ``((a1, a2), b)`` meaning ``a1*x1 + a2*x2 = b``; a point is an
``(x1, x2)`` tuple of floats.
"""

from typing import List, Optional, Sequence, Tuple

EPS = 1e-8

Point = Tuple[float, float]
Line = Tuple[Sequence[float], float]


def intersect(line1: Line, line2: Line) -> Optional[Point]:
    (a1, a2), bi = line1
    (c1, c2), bj = line2
    a1, a2, c1, c2 = float(a1), float(a2), float(c1), float(c2)
    bi, bj = float(bi), float(bj)
    det = a1*c2 - a2*c1
    if abs(det) < EPS:
        # parallel or coincident
        return None
    x = (bi*c2 - a2*bj) / det
    y = (a1*bj - bi*c1) / det
    return (x, y)


def axis_intercepts(line: Line) -> List[Point]:
    """Points where the line meets x1 = 0, then x2 = 0."""
    (a1, a2), b = line
    a1, a2, b = float(a1), float(a2), float(b)
    pts = []
    if abs(a2) > EPS:
        pts.append((0.0, b/a2))
    if abs(a1) > EPS:
        pts.append((b/a1, 0.0))
    return pts


def lhs(row: Sequence[float], point: Sequence[float]) -> float:
    return sum(float(a)*float(x) for a, x in zip(row, point))


def satisfies(value: float, sense: str, rhs: float, tol: float = EPS) -> bool:
    if sense == "<=":
        return value <= rhs + tol
    if sense == ">=":
        return value >= rhs - tol
    if sense == "=":
        return abs(value - rhs) <= tol
    raise ValueError("sense must be one of <=, >=, =")


def is_feasible(point: Point, coefficients, signs, values) -> bool:
    x, y = point
    for row, s, bi in zip(coefficients, signs, values):
        if not satisfies(lhs(row, (x, y)), s, float(bi)):
            return False
    return x >= -EPS and y >= -EPS


def objective_value(objective: Sequence[float], point: Sequence[float]) -> float:
    return lhs(objective, point)


def same_point(p: Point, q: Point, tol: float = 1e-7) -> bool:
    return abs(p[0] - q[0]) < tol and abs(p[1] - q[1]) < tol
