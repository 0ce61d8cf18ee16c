"""Module s3_solver : Résolution du puzzle (règles + backtracking)."""

from .types import SolverPhase, RuleName, SolverStats, SolverOutput
from .combinations import (
    BitCounter,
    create_line_combinations,
    is_valid_complete_sequence,
    filter_matching_complete_lines,
)
from .ruleset import RulesetPuzzleSolver
from .backtracking import BacktrackingPuzzleSolver
from .composite import CompositePuzzleSolver
from .solver import solve

__all__ = [
    # Types
    "SolverPhase",
    "RuleName",
    "SolverStats",
    "SolverOutput",
    # Solver
    "solve",
    "CompositePuzzleSolver",
    # Composants
    "RulesetPuzzleSolver",
    "BacktrackingPuzzleSolver",
    "BitCounter",
    "create_line_combinations",
    "is_valid_complete_sequence",
    "filter_matching_complete_lines",
]
