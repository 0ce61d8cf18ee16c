"""Types for the s3_solver module."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

from binary_puzzle.lib.s1_surface import SurfacePosition


class SolverPhase(str, Enum):
    """Stage of the pipeline that resolved a cell."""
    RULESET = "RULESET"
    BACKTRACKING = "BACKTRACKING"


class RuleName(str, Enum):
    """Deduction rules, in the order a ruleset pass applies them."""
    BEFORE_AFTER_PAIRS = "before_after_pairs"
    BETWEEN_TRIPLETS = "between_triplets"
    DIGIT_COUNTS = "digit_counts"
    MISSING_SINGLE_DIGIT = "missing_single_digit"
    NO_DUPLICATE_LINES = "no_duplicate_lines"


@dataclass
class SolverStats:
    """Statistiques de résolution."""
    ruleset_passes: int = 0
    rule_hits: Dict[RuleName, int] = field(default_factory=dict)
    ruleset_cells: int = 0
    backtracking_cells: int = 0
    backtracking_nodes: int = 0
    backtracking_used: bool = False
    duration: float = 0.0  # seconds

    @property
    def total_cells(self) -> int:
        return self.ruleset_cells + self.backtracking_cells


@dataclass
class SolverOutput:
    """Output du solver."""
    solved: bool
    stats: SolverStats
    resolved: Dict[SurfacePosition, SolverPhase] = field(default_factory=dict)
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def ruleset_positions(self) -> List[SurfacePosition]:
        return sorted(p for p, phase in self.resolved.items() if phase == SolverPhase.RULESET)

    @property
    def backtracking_positions(self) -> List[SurfacePosition]:
        return sorted(p for p, phase in self.resolved.items() if phase == SolverPhase.BACKTRACKING)
