"""
Depth-first search over the remaining unknown cells.

Hypotheses are layered as SingleChangeSurface views, so the base surface is
only written once, when a complete valid solution has been found.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from binary_puzzle.lib.s1_surface import (
    CellValue,
    PuzzleSurfaceApi,
    SingleChangeSurface,
    SurfacePosition,
    iter_unknown_positions,
)
from binary_puzzle.lib.s2_validator import SurfaceValidator

logger = logging.getLogger(__name__)


class _Frame:
    """One level of the search: the layered surface and the next value to try below it."""

    __slots__ = ("surface", "next_value")

    def __init__(self, surface: PuzzleSurfaceApi):
        self.surface = surface
        self.next_value: Optional[CellValue] = CellValue.ZERO


class BacktrackingPuzzleSolver:
    """
    Brute-force solver with validation pruning.

    Unknown positions are explored in reverse row-major order; at each
    position ZERO is tried before ONE. Every node is checked with
    SurfaceValidator.try_validate() before going deeper.
    """

    def __init__(self):
        self.nodes = 0
        self.resolved_positions: List[SurfacePosition] = []

    def solve(self, surface: PuzzleSurfaceApi) -> bool:
        """Writes the first solution found into ``surface``. Returns False when none exists."""
        if surface is None:
            raise TypeError("surface must not be None")

        self.nodes = 0
        self.resolved_positions = []

        # Last unknown (row-major) is explored first
        order = list(reversed(list(iter_unknown_positions(surface))))
        logger.info("[BACKTRACK] searching %d unknown cell(s)", len(order))

        solution = self._search(surface, order)
        if solution is None:
            logger.info("[BACKTRACK] no solution after %d node(s)", self.nodes)
            return False

        self._flatten(surface, solution)
        logger.info(
            "[BACKTRACK] solution found after %d node(s), %d cell(s) written",
            self.nodes,
            len(self.resolved_positions),
        )
        return True

    def _search(self, surface: PuzzleSurfaceApi, order: List[SurfacePosition]) -> Optional[PuzzleSurfaceApi]:
        if not self._is_valid(surface):
            return None

        stack = [_Frame(surface)]
        while stack:
            frame = stack[-1]
            depth = len(stack) - 1
            if depth == len(order):
                return frame.surface

            value = frame.next_value
            if value is None:
                # Both values failed below this level
                stack.pop()
                continue

            frame.next_value = CellValue.ONE if value is CellValue.ZERO else None
            candidate = SingleChangeSurface(frame.surface, order[depth], value)
            if self._is_valid(candidate):
                stack.append(_Frame(candidate))

        return None

    def _is_valid(self, surface: PuzzleSurfaceApi) -> bool:
        self.nodes += 1
        return SurfaceValidator(surface).try_validate()

    def _flatten(self, surface: PuzzleSurfaceApi, solution: PuzzleSurfaceApi) -> None:
        for position in list(iter_unknown_positions(surface)):
            surface.set_cell(
                position.line_index,
                position.column_index,
                solution.get_cell(position.line_index, position.column_index),
            )
            self.resolved_positions.append(position)
