"""Point d'entrée du solver : résolution + debug optionnel."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

from binary_puzzle.lib.s1_surface import PuzzleSurfaceApi
from .composite import CompositePuzzleSolver
from .types import SolverOutput

if TYPE_CHECKING:
    from binary_puzzle.lib.s7_debug.logger import DebugLogger


def solve(
    surface: PuzzleSurfaceApi,
    *,
    overlay_path: Optional[str] = None,
    debug_logger: Optional["DebugLogger"] = None,
    config: Optional[Dict[str, Any]] = None,
) -> SolverOutput:
    """
    Solve ``surface`` in place.

    Args:
        surface: Surface to solve, mutated in place
        overlay_path: PNG written with cells coloured by resolving phase (optional)
        debug_logger: Receives one structured record for this solve (optional)
        config: Overrides for SOLVER_CONFIG

    Returns:
        SolverOutput; an unsolvable surface is reported with solved=False, not raised
    """
    output = CompositePuzzleSolver(config).solve(surface)

    if debug_logger is not None:
        debug_logger.log_solve(output)

    if overlay_path:
        # s7_debug depends on the solver types
        from binary_puzzle.lib.s7_debug.overlays import render_solver_overlay
        render_solver_overlay(surface, output, overlay_path)
        output.metadata["overlay_path"] = overlay_path

    return output
