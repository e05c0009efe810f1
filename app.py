import io
import json
from contextlib import redirect_stdout
from decimal import Decimal

import streamlit as st

from lp_solver.models import LPProblem, SolveMethod
from lp_solver.plot import plot_2d
from lp_solver.solver import apply_sign_operators, solve_lp_problem

st.set_page_config(page_title="LP Solver", layout="wide")
st.title("Linear Programming — Graphical, Simplex, General Form")

# Sidebar options
with st.sidebar:
    st.header("Options")
    method = st.selectbox("Method", [m.value for m in SolveMethod], index=0,
                          help="Problems with 2 variables are always solved graphically.")
    is_min = st.checkbox("Minimize (default: Maximize)", value=False)
    show_trace = st.checkbox("Show iteration printout", value=False)
    show_graph = st.checkbox("Show graph (2 variables only)", value=True)

# Default JSON template
default_json = {
    "c": [3, 2],
    "A": [[2, 1], [1, 2]],
    "b": [10, 8],
    "senses": ["<=", "<="],
    "maximize": True
}

st.subheader("Model JSON")
json_text = st.text_area("Edit LP JSON here", json.dumps(default_json, indent=2), height=260)

run = st.button("Solve")


def table_records(table_data):
    return [dict(zip(table_data.headers, row)) for row in table_data.rows]


if run:
    try:
        cfg = json.loads(json_text, parse_float=Decimal)
        if is_min:
            cfg["maximize"] = False
        problem = LPProblem.from_dict(cfg)
    except (ValueError, KeyError, TypeError) as e:
        st.error(f"Invalid LP JSON: {e}")
    else:
        buf = io.StringIO()
        with redirect_stdout(buf):
            res = solve_lp_problem(problem, method=method, verbose=show_trace)

        st.subheader("Result")
        st.json({
            "status": res.status.value,
            "value": res.value if res.is_valid else None,
            "solution": res.coordinates,
            "iterations": res.iterations,
            "method": res.method.value if res.method else None,
        })
        if not res.is_valid:
            st.warning("No optimal solution: the problem is infeasible, unbounded or could not be solved.")
        elif res.table_data.headers:
            st.subheader("Graphical table" if res.method == SolveMethod.GRAPHICAL else "Simplex tableaux")
            st.dataframe(table_records(res.table_data))

        if show_trace:
            st.subheader("Iterations / Tableaux")
            st.code(buf.getvalue())

        if show_graph and problem.num_variables == 2:
            st.subheader("Graph")
            try:
                fig = plot_2d(apply_sign_operators(problem), res)
            except ValueError as e:
                fig = None
                st.info(f"Cannot plot: {e}")
            if fig is not None:
                st.pyplot(fig)
            else:
                st.info("No feasible region to plot.")
