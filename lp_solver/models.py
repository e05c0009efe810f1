from __future__ import annotations

"""
Problem and solution records exchanged between the solvers and their callers.

Input contract (programmatic API):
- problem_type: "max" or "min"
- objective_function: list[float] objective coefficients (length n)
- constraint_coefficients: list[list[float]] (m x n)
- constraint_signs: list[str] with entries in {"<=", ">=", "="}
- constraint_values: list[float] RHS (length m)
- objective_operator / constraint_operators: optional "+"/"-" toggles
  coming from the form layer

JSON files (CLI, app) use the short keys c, A, b, senses, maximize.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from lp_solver.formatting import Num

LE, EQ, GE = "<=", "=", ">="
SENSES = (LE, EQ, GE)
_SENSE_ALIASES = {"≤": LE, "≥": GE, "==": EQ, "=<": LE, "=>": GE}


class SolveMethod(str, Enum):
    GRAPHICAL = "graphical"
    SIMPLEX = "simplex"
    GENERAL = "general"

    @classmethod
    def parse(cls, value) -> Optional["SolveMethod"]:
        """Return the matching method, or None for anything unrecognised."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class Status(str, Enum):
    OPTIMAL = "optimal"
    INFEASIBLE = "infeasible"
    UNBOUNDED = "unbounded"
    ITERATION_LIMIT = "iteration_limit"
    ERROR = "error"


def normalize_sense(sense: str) -> str:
    s = str(sense).strip()
    s = _SENSE_ALIASES.get(s, s)
    if s not in SENSES:
        raise ValueError("sense must be one of <=, >=, =")
    return s


@dataclass(frozen=True)
class LPProblem:
    problem_type: str
    objective_function: List[Num]
    constraint_coefficients: List[List[Num]]
    constraint_signs: List[str]
    constraint_values: List[Num]
    objective_operator: Optional[str] = None
    constraint_operators: Optional[List[str]] = None

    @property
    def maximize(self) -> bool:
        return self.problem_type == "max"

    @property
    def num_variables(self) -> int:
        return len(self.objective_function)

    @property
    def num_constraints(self) -> int:
        return len(self.constraint_coefficients)

    def senses(self) -> List[str]:
        return [normalize_sense(s) for s in self.constraint_signs]

    def validate(self) -> None:
        if self.problem_type not in ("max", "min"):
            raise ValueError("problem_type must be 'max' or 'min'")
        n = len(self.objective_function)
        if n == 0:
            raise ValueError("objective function must have at least one coefficient")
        m = len(self.constraint_coefficients)
        if len(self.constraint_signs) != m or len(self.constraint_values) != m:
            raise ValueError(
                f"got {m} constraint rows, {len(self.constraint_signs)} signs "
                f"and {len(self.constraint_values)} right-hand sides"
            )
        for i, row in enumerate(self.constraint_coefficients):
            if len(row) != n:
                raise ValueError(f"constraint {i + 1} has {len(row)} coefficients, expected {n}")
        self.senses()

    @classmethod
    def from_dict(cls, cfg: Dict[str, object]) -> "LPProblem":
        maximize = cfg.get("maximize", True)
        return cls(
            problem_type="max" if maximize else "min",
            objective_function=list(cfg["c"]),
            constraint_coefficients=[list(row) for row in cfg["A"]],
            constraint_signs=list(cfg["senses"]),
            constraint_values=list(cfg["b"]),
            objective_operator=cfg.get("objective_operator"),
            constraint_operators=cfg.get("constraint_operators"),
        )


@dataclass
class TableData:
    headers: List[str] = field(default_factory=list)
    rows: List[List[str]] = field(default_factory=list)


@dataclass
class LPSolution:
    is_valid: bool
    coordinates: List[float]
    value: float
    table_data: TableData
    status: Status = Status.OPTIMAL
    method: Optional[SolveMethod] = None
    iterations: int = 0


def invalid_solution(status: Status, method: Optional[SolveMethod] = None, iterations: int = 0) -> LPSolution:
    return LPSolution(
        is_valid=False,
        coordinates=[],
        value=0,
        table_data=TableData(),
        status=status,
        method=method,
        iterations=iterations,
    )
