"""Solver principal : orchestration ruleset + backtracking."""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Iterator, Optional

import numpy as np

from binary_puzzle.config import SOLVER_CONFIG
from binary_puzzle.lib.s1_surface import CellValue, PuzzleSurfaceApi, SurfacePosition, copy_cells
from .backtracking import BacktrackingPuzzleSolver
from .ruleset import RulesetPuzzleSolver
from .types import SolverOutput, SolverPhase, SolverStats

logger = logging.getLogger(__name__)


class CompositePuzzleSolver:
    """
    Runs the rules to their fixpoint, then searches the remaining unknowns.

    The search only runs when the rules leave the surface unsolved and
    ``enable_backtracking`` is on.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self.enable_backtracking = self.config.get("enable_backtracking", SOLVER_CONFIG['enable_backtracking'])

    def solve(self, surface: PuzzleSurfaceApi) -> SolverOutput:
        if surface is None:
            raise TypeError("surface must not be None")

        started = time.perf_counter()
        stats = SolverStats()
        resolved: Dict[SurfacePosition, SolverPhase] = {}
        initial_text = surface.to_string()

        # Phase 1: rules
        before = copy_cells(surface)
        ruleset = RulesetPuzzleSolver(surface)
        ruleset.solve()
        stats.ruleset_passes = ruleset.passes
        stats.rule_hits = dict(ruleset.rule_hits)
        for position in _newly_known(before, copy_cells(surface)):
            resolved[position] = SolverPhase.RULESET
        stats.ruleset_cells = len(resolved)

        # Phase 2: search, only if the rules did not finish the job
        if not surface.is_solved and self.enable_backtracking:
            backtracking = BacktrackingPuzzleSolver()
            backtracking.solve(surface)
            stats.backtracking_used = True
            stats.backtracking_nodes = backtracking.nodes
            stats.backtracking_cells = len(backtracking.resolved_positions)
            for position in backtracking.resolved_positions:
                resolved[position] = SolverPhase.BACKTRACKING

        stats.duration = time.perf_counter() - started
        solved = surface.is_solved
        logger.info(
            "[SOLVER] solved=%s rules=%d cell(s) backtracking=%d cell(s) in %.4fs",
            solved,
            stats.ruleset_cells,
            stats.backtracking_cells,
            stats.duration,
        )

        return SolverOutput(
            solved=solved,
            stats=stats,
            resolved=resolved,
            metadata={
                "line_count": surface.line_count,
                "column_count": surface.column_count,
                "initial": initial_text,
                "final": surface.to_string(),
            },
        )


def _newly_known(before: np.ndarray, after: np.ndarray) -> Iterator[SurfacePosition]:
    changed = (before == CellValue.UNKNOWN) & (after != CellValue.UNKNOWN)
    for line_index, column_index in np.argwhere(changed):
        yield SurfacePosition(int(line_index), int(column_index))
