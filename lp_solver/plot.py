"""Plot constraints, feasible region and the optimum of a 2-variable LP.

- Only supports 2 variables. Shades the feasible region, draws every
  constraint line, marks the feasible vertices and the iso-objective line
  through the optimum when the solution is valid.
"""

from typing import Optional

import matplotlib.pyplot as plt
import numpy as np

from lp_solver.formatting import fmt_linear, fmt_number, fmt_point
from lp_solver.geometry import EPS, is_feasible, same_point
from lp_solver.graphical import candidate_points
from lp_solver.models import LPProblem, LPSolution


def _mask(A, b, senses, X, Y):
    mask = np.ones_like(X, dtype=bool)
    for row, bi, s in zip(A, b, senses):
        lhs = row[0]*X + row[1]*Y
        if s == "<=":
            mask &= lhs <= bi + EPS
        elif s == ">=":
            mask &= lhs >= bi - EPS
        else:
            mask &= np.abs(lhs - bi) <= 1e-2 * max(1.0, abs(bi))
    return mask & (X >= -EPS) & (Y >= -EPS)


def plot_2d(problem: LPProblem, solution: Optional[LPSolution] = None):
    """Return a matplotlib Figure, or None when there is nothing to draw."""
    if problem.num_variables != 2:
        return None

    A = [[float(v) for v in row] for row in problem.constraint_coefficients]
    b = [float(v) for v in problem.constraint_values]
    senses = problem.senses()

    pts = [p for p in candidate_points(A, b) if is_feasible(p, A, senses, b)]
    vertices = []
    for p in pts:
        if not any(same_point(p, q) for q in vertices):
            vertices.append(p)
    if not vertices:
        return None

    xs = [p[0] for p in vertices]
    ys = [p[1] for p in vertices]
    xmax = max(max(xs)*1.2, 1.0)
    ymax = max(max(ys)*1.2, 1.0)
    grid_x = np.linspace(0.0, xmax, 400)

    fig, ax = plt.subplots(figsize=(6, 6))

    color_cycle = plt.rcParams.get('axes.prop_cycle', None)
    colors = color_cycle.by_key()['color'] if color_cycle else [f'C{i}' for i in range(10)]
    for i, (row, bi, s) in enumerate(zip(A, b, senses)):
        a1, a2 = row
        c = colors[i % len(colors)]
        label = f"{fmt_linear(row)} {s} {fmt_number(bi)}"
        if abs(a2) < EPS:
            x0 = bi/a1 if abs(a1) > EPS else 0.0
            ax.axvline(x0, color=c, alpha=0.7, label=label)
        else:
            ax.plot(grid_x, (bi - a1*grid_x)/a2, color=c, alpha=0.7, label=label)

    X, Y = np.meshgrid(np.linspace(0.0, xmax, 200), np.linspace(0.0, ymax, 200))
    mask = _mask(A, b, senses, X, Y)
    if mask.any():
        ax.contourf(X, Y, mask, levels=[0.5, 1.5], colors=['#e8f7ff'], alpha=0.5)

    ax.scatter(xs, ys, s=25, color='#444444', alpha=0.9, label='vertices')

    if solution is not None and solution.is_valid and len(solution.coordinates) == 2:
        xopt, yopt = solution.coordinates
        zopt = solution.value
        c1, c2 = (float(v) for v in problem.objective_function)
        if abs(c2) < EPS:
            if abs(c1) > EPS:
                ax.axvline(zopt/c1, color='red', linestyle='--', label='iso-objective')
        else:
            ax.plot(grid_x, (zopt - c1*grid_x)/c2, 'r--', label='iso-objective')
        ax.plot([xopt], [yopt], 'ro', label=f"optimal {fmt_point((xopt, yopt))}")
        ax.annotate(f"Z* = {zopt:.4g}", (xopt, yopt), textcoords="offset points", xytext=(8, 8))

    ax.set_xlim(0.0, xmax)
    ax.set_ylim(0.0, ymax)
    ax.set_xlabel('x1')
    ax.set_ylabel('x2')
    ax.set_title('Constraints, Feasible Region, Iso-objective')
    ax.legend(loc='best', fontsize=8)
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    return fig
