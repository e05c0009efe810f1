"""Iteration snapshots and their textbook-style rendering.

Each snapshot becomes one block of rows:

    Iteration k
    Cb | Basis | x1 ... | s1 ... | b | Ratio
    one row per constraint
    Cj row
    Δj row (RHS cell holds the running Z)
"""

from dataclasses import dataclass, field
from fractions import Fraction
from typing import List, Optional

from lp_solver.formatting import fmt_frac
from lp_solver.models import TableData

PIVOT_MARK = "⭕"


@dataclass
class IterationSnapshot:
    iteration: int
    rows: List[List[Fraction]]  # constraint rows, RHS last
    basis: List[int]
    basis_costs: List[Fraction]
    cj: List[Fraction]
    delta_j: List[Fraction]
    z: Fraction
    var_names: List[str]
    phase: Optional[str] = None
    entering: Optional[int] = None
    leaving: Optional[int] = None
    pivot: Optional[Fraction] = None
    ratios: List[Optional[Fraction]] = field(default_factory=list)

    @property
    def title(self) -> str:
        label = f"Iteration {self.iteration}"
        return f"{self.phase} - {label}" if self.phase else label


def header_row(var_names: List[str]) -> List[str]:
    return ["Cb", "Basis"] + list(var_names) + ["b", "Ratio"]


def snapshot_block(snap: IterationSnapshot) -> List[List[str]]:
    headers = header_row(snap.var_names)
    width = len(headers)
    block = [[snap.title] + [""] * (width - 1), headers]

    for i, row in enumerate(snap.rows):
        cells = [fmt_frac(snap.basis_costs[i]), snap.var_names[snap.basis[i]]]
        for j, a in enumerate(row[:-1]):
            text = fmt_frac(a)
            if i == snap.leaving and j == snap.entering:
                text = f"{PIVOT_MARK}{text}"
            cells.append(text)
        ratio = snap.ratios[i] if i < len(snap.ratios) else None
        cells += [fmt_frac(row[-1]), fmt_frac(ratio) if ratio is not None else ""]
        block.append(cells)

    block.append(["", "Cj"] + [fmt_frac(v) for v in snap.cj] + ["", ""])
    block.append(["", "Δj"] + [fmt_frac(v) for v in snap.delta_j] + [f"Z = {fmt_frac(snap.z)}", ""])
    return block


def _all_var_names(trace: List[IterationSnapshot]) -> List[str]:
    names = []
    for snap in trace:
        for name in snap.var_names:
            if name not in names:
                names.append(name)
    return names


def build_trace_table(trace: List[IterationSnapshot]) -> TableData:
    """Stack every snapshot block under one header.

    Columns dropped between phases (artificials) stay in the header and are
    left blank in the blocks that no longer carry them.
    """
    if not trace:
        return TableData()
    headers = header_row(_all_var_names(trace))
    column = {name: k for k, name in enumerate(headers)}
    rows = []
    for snap in trace:
        own = header_row(snap.var_names)
        for r in snapshot_block(snap):
            cells = [""] * len(headers)
            for name, cell in zip(own, r):
                cells[column[name]] = cell
            rows.append(cells)
    return TableData(headers=headers, rows=rows)
