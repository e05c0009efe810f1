from __future__ import annotations

"""
Tableau shared by the simplex and general-form engines.

Layout: row 0 is the objective row (Δj per column, Z in the RHS slot),
rows 1..m are the constraints, the last column is the right-hand side.
Entries are Fractions, so pivots are exact; the tolerances only guard
against inputs that were floats to begin with.
"""

from fractions import Fraction
from typing import List, Optional

from lp_solver.formatting import F, Num, fmt_frac
from lp_solver.models import Status
from lp_solver.trace import IterationSnapshot, snapshot_block

EPS = 1e-10


class Tableau:
    def __init__(self, rows: List[List[Num]], basis: List[int], cj: List[Num], var_names: List[str],
                 phase: Optional[str] = None, max_iterations: int = 100):
        # rows: m constraint rows, each [a_1 .. a_N, rhs]
        self.m = len(rows)
        self.num_vars = len(cj)
        self.T = [[F(0)] * (self.num_vars + 1)]
        self.T += [[F(v) for v in row] for row in rows]
        for i, row in enumerate(self.T[1:]):
            if len(row) != self.num_vars + 1:
                raise ValueError(f"tableau row {i + 1} has {len(row)} entries, expected {self.num_vars + 1}")
        self.basis = basis[:]
        self.cj = [F(v) for v in cj]
        self.var_names = var_names[:]
        self.phase = phase
        self.max_iterations = max_iterations
        self.iter = 0
        self.trace: List[IterationSnapshot] = []
        self.refresh_objective()

    @property
    def delta_j(self) -> List[Fraction]:
        return self.T[0][:-1]

    @property
    def z(self) -> Fraction:
        return self.T[0][-1]

    def basis_costs(self) -> List[Fraction]:
        return [self.cj[j] for j in self.basis]

    def refresh_objective(self):
        """Recompute Δj = cj - Σ cb·a_ij and Z = Σ cb·b_i from the basis."""
        cb = self.basis_costs()
        obj = []
        for j in range(self.num_vars):
            zj = sum((cb[i] * self.T[i+1][j] for i in range(self.m)), F(0))
            obj.append(self.cj[j] - zj)
        obj.append(sum((cb[i] * self.T[i+1][-1] for i in range(self.m)), F(0)))
        self.T[0] = obj

    def choose_entering(self) -> Optional[int]:
        best_j = None
        for j, rc in enumerate(self.delta_j):
            if rc > EPS and (best_j is None or rc > self.delta_j[best_j]):
                best_j = j
        return best_j

    def ratios(self, enter_j: int) -> List[Optional[Fraction]]:
        out: List[Optional[Fraction]] = []
        for i in range(self.m):
            aij = self.T[i+1][enter_j]
            out.append(self.T[i+1][-1] / aij if aij > EPS else None)
        return out

    def choose_leaving(self, ratios: List[Optional[Fraction]]) -> Optional[int]:
        best_i = None
        for i, r in enumerate(ratios):
            if r is not None and (best_i is None or r < ratios[best_i]):
                best_i = i
        return best_i

    def pivot(self, row: int, col: int):
        """Pivot on constraint ``row`` (0-based) and column ``col``."""
        r = row + 1
        piv = self.T[r][col]
        if piv == 0:
            raise RuntimeError("Zero pivot encountered")
        self.T[r] = [v / piv for v in self.T[r]]
        for i in range(1, self.m + 1):
            if i == r:
                continue
            coeff = self.T[i][col]
            if coeff == 0:
                continue
            self.T[i] = [a - coeff * p for a, p in zip(self.T[i], self.T[r])]
        self.basis[row] = col
        self.refresh_objective()

    def snapshot(self, entering=None, leaving=None, ratios=None) -> IterationSnapshot:
        snap = IterationSnapshot(
            iteration=self.iter,
            rows=[row[:] for row in self.T[1:]],
            basis=self.basis[:],
            basis_costs=self.basis_costs(),
            cj=self.cj[:],
            delta_j=self.delta_j[:],
            z=self.z,
            var_names=self.var_names[:],
            phase=self.phase,
            entering=entering,
            leaving=leaving,
            pivot=self.T[leaving+1][entering] if leaving is not None else None,
            ratios=list(ratios or []),
        )
        self.trace.append(snap)
        return snap

    def print_tableau(self, snap: IterationSnapshot):
        block = snapshot_block(snap)
        colw = max(6, max(len(c) for r in block[1:] for c in r) + 2)
        print(f"\n{snap.title}")
        for k, cells in enumerate(block[1:]):
            print(" ".join(f"{c:>{colw}}" for c in cells))
            if k == 0:
                print("-" * (len(cells) * (colw + 1)))
        if snap.entering is not None and snap.leaving is not None:
            print(f"entering {self.var_names[snap.entering]}, "
                  f"leaving {self.var_names[snap.basis[snap.leaving]]}, pivot {fmt_frac(snap.pivot)}")

    def solve(self, verbose=False) -> Status:
        while True:
            enter_j = self.choose_entering()
            if enter_j is None:
                snap = self.snapshot()
                if verbose:
                    self.print_tableau(snap)
                return Status.OPTIMAL
            ratios = self.ratios(enter_j)
            leave_i = self.choose_leaving(ratios)
            if leave_i is None:
                snap = self.snapshot(entering=enter_j, ratios=ratios)
                if verbose:
                    self.print_tableau(snap)
                    print(f"{self.var_names[enter_j]} can grow without limit: unbounded")
                return Status.UNBOUNDED
            if self.iter >= self.max_iterations:
                if verbose:
                    print(f"Stopped after {self.iter} iterations without reaching optimality")
                return Status.ITERATION_LIMIT
            snap = self.snapshot(entering=enter_j, leaving=leave_i, ratios=ratios)
            if verbose:
                self.print_tableau(snap)
            self.pivot(leave_i, enter_j)
            self.iter += 1

    def extract_solution(self, original_n: int) -> List[Fraction]:
        # read basic variable values from RHS
        values = [F(0)] * original_n
        for i, col in enumerate(self.basis):
            if 0 <= col < original_n:
                values[col] = self.T[i+1][-1]
        return values
