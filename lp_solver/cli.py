"""
Command line front-end.

    lp-solver problem.json [--method graphical|simplex|general] [--sense max|min]
                           [--no-verbose] [--graph] [--log-level LEVEL]

The JSON file holds c, A, b, senses and optionally maximize,
objective_operator and constraint_operators.
"""

import argparse
import json
import logging
import sys
from decimal import Decimal

from lp_solver.models import LPProblem, SolveMethod
from lp_solver.solver import apply_sign_operators, solve_lp_problem


def build_parser():
    p = argparse.ArgumentParser(description="Linear programming solver (graphical, simplex, general form)")
    p.add_argument("json", help="Path to JSON file describing the LP")
    p.add_argument("--method", choices=[m.value for m in SolveMethod], default=SolveMethod.GRAPHICAL.value,
                   help="2-variable problems always use the graphical method")
    p.add_argument("--sense", choices=["max", "min"], default=None, help="Objective sense (default: use JSON or max)")
    p.add_argument("--no-verbose", action="store_true", help="Hide iteration printouts")
    p.add_argument("--graph", action="store_true", help="Plot constraints and optimum (2 variables only)")
    p.add_argument("--log-level", type=str.upper, default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                   help="Logging level for solver diagnostics")
    return p


def load_problem(path, sense=None) -> LPProblem:
    with open(path, "r") as f:
        # Parse floats as Decimal to avoid binary float artifacts
        cfg = json.load(f, parse_float=Decimal)
    # CLI (if provided) overrides JSON; else fallback to JSON->max
    if sense is not None:
        cfg["maximize"] = (sense == "max")
    return LPProblem.from_dict(cfg)


def print_table(table_data):
    if not table_data.headers:
        return
    widths = [len(h) for h in table_data.headers]
    for row in table_data.rows:
        for k, cell in enumerate(row):
            widths[k] = max(widths[k], len(cell))
    print(" | ".join(h.ljust(w) for h, w in zip(table_data.headers, widths)))
    print("-+-".join("-" * w for w in widths))
    for row in table_data.rows:
        print(" | ".join(c.ljust(w) for c, w in zip(row, widths)))


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    problem = load_problem(args.json, sense=args.sense)
    res = solve_lp_problem(problem, method=args.method, verbose=not args.no_verbose)

    print("\n=== Result ===")
    print("Status:", res.status.value)
    if res.is_valid:
        print(f"Optimal value: {res.value:.6g}")
        print("Solution x:", [f"{v:.6g}" for v in res.coordinates])
    print("Iterations:", res.iterations)
    print("Method:", res.method.value if res.method else "-")
    if res.is_valid:
        print()
        print_table(res.table_data)

    if args.graph:
        from lp_solver.plot import plot_2d
        import matplotlib.pyplot as plt

        fig = plot_2d(apply_sign_operators(problem), res)
        if fig is None:
            print("Graph only supports 2 variables with a non-empty feasible region.")
        else:
            plt.show()
    return 0 if res.is_valid else 1


if __name__ == "__main__":
    sys.exit(main())
