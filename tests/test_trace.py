from fractions import Fraction

from lp_solver.models import TableData
from lp_solver.trace import IterationSnapshot, build_trace_table, snapshot_block


def make_snapshot(**kw):
    defaults = dict(
        iteration=1,
        rows=[[Fraction(1), Fraction(1, 2), Fraction(5)]],
        basis=[0],
        basis_costs=[Fraction(3)],
        cj=[Fraction(3), Fraction(0)],
        delta_j=[Fraction(0), Fraction(-3, 2)],
        z=Fraction(15),
        var_names=["x1", "s1"],
    )
    defaults.update(kw)
    return IterationSnapshot(**defaults)


def test_snapshot_block_layout():
    block = snapshot_block(make_snapshot())

    assert block == [
        ["Iteration 1", "", "", "", "", ""],
        ["Cb", "Basis", "x1", "s1", "b", "Ratio"],
        ["3", "x1", "1", "1/2", "5", ""],
        ["", "Cj", "3", "0", "", ""],
        ["", "Δj", "0", "-3/2", "Z = 15", ""],
    ]


def test_phase_title_and_ratio_column():
    snap = make_snapshot(phase="Phase I", entering=1, leaving=0, pivot=Fraction(1, 2), ratios=[Fraction(10)])
    block = snapshot_block(snap)

    assert block[0][0] == "Phase I - Iteration 1"
    assert block[2] == ["3", "x1", "1", "⭕1/2", "5", "10"]


def test_empty_trace():
    assert build_trace_table([]) == TableData()


def test_dropped_columns_left_blank():
    wide = make_snapshot(iteration=0, phase="Phase I", var_names=["x1", "a1", "s1"],
                         rows=[[Fraction(1), Fraction(1), Fraction(0), Fraction(5)]],
                         cj=[Fraction(0), Fraction(-1), Fraction(0)],
                         delta_j=[Fraction(0), Fraction(-1), Fraction(0)], z=Fraction(0))
    narrow = make_snapshot(iteration=0, phase="Phase II")
    table = build_trace_table([wide, narrow])

    assert table.headers == ["Cb", "Basis", "x1", "a1", "s1", "b", "Ratio"]
    assert table.rows[5] == ["Phase II - Iteration 0", "", "", "", "", "", ""]
    assert table.rows[6] == ["Cb", "Basis", "x1", "", "s1", "b", "Ratio"]
    assert table.rows[7] == ["3", "x1", "1", "", "1/2", "5", ""]
