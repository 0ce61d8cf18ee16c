"""
Deduction rules for binary puzzles.

Each rule is written for lines only. TrySolve-style wrapping runs it on the
surface and on its RotatedSurface (so columns are covered) until neither
produces a change.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List

from binary_puzzle.lib.s1_surface import CellValue, PuzzleSurfaceApi, RotatedSurface, read_line
from .combinations import Line, create_line_combinations, filter_matching_complete_lines
from .types import RuleName

logger = logging.getLogger(__name__)

RuleBody = Callable[[PuzzleSurfaceApi], None]


class RulesetPuzzleSolver:
    """Applies the five deduction rules until a full pass changes nothing or the grid is solved."""

    def __init__(self, surface: PuzzleSurfaceApi):
        if surface is None:
            raise TypeError("surface must not be None")

        self.surface = surface
        self.rotated = RotatedSurface(surface)
        self.passes = 0
        self.rule_hits: Dict[RuleName, int] = {rule: 0 for rule in RuleName}

    def solve(self) -> None:
        while True:
            self.passes += 1
            # Every rule runs on every pass, no short-circuit
            changes = [
                self.resolve_before_after_pairs(),
                self.resolve_between_triplets(),
                self.resolve_digit_counts(),
                self.resolve_missing_single_digit(),
                self.resolve_no_duplicate_lines(),
            ]
            logger.debug(
                "[RULESET] pass %d: %s",
                self.passes,
                ", ".join(rule.value for rule, changed in zip(RuleName, changes) if changed) or "no change",
            )
            if not any(changes) or self.surface.is_solved:
                break

        logger.info("[RULESET] %d pass(es), solved=%s", self.passes, self.surface.is_solved)

    def resolve_before_after_pairs(self) -> bool:
        """-00 / 00- / -11 / 11- : the cell next to a pair takes the opposite digit."""
        return self._try_solve(RuleName.BEFORE_AFTER_PAIRS, _before_after_pairs)

    def resolve_between_triplets(self) -> bool:
        """0-0 / 1-1 : the cell between two equal digits takes the opposite digit."""
        return self._try_solve(RuleName.BETWEEN_TRIPLETS, _between_triplets)

    def resolve_digit_counts(self) -> bool:
        """Fill a line with the scarcer digit when the count gap equals the unknown count."""
        return self._try_solve(RuleName.DIGIT_COUNTS, _digit_counts)

    def resolve_missing_single_digit(self) -> bool:
        """Enumerate lines one digit short of their quota; apply what every valid completion agrees on."""
        return self._try_solve(RuleName.MISSING_SINGLE_DIGIT, _missing_single_digit)

    def resolve_no_duplicate_lines(self) -> bool:
        """Complete a line when all but one of its valid completions duplicate an existing line."""
        return self._try_solve(RuleName.NO_DUPLICATE_LINES, _no_duplicate_lines)

    def _try_solve(self, rule: RuleName, body: RuleBody) -> bool:
        seen_changes = False
        while True:
            self.surface.accept_changes()
            self.rotated.accept_changes()

            body(self.surface)
            body(self.rotated)

            if not (self.surface.has_changes() or self.rotated.has_changes()):
                break
            seen_changes = True

        if seen_changes:
            self.rule_hits[rule] += 1
        return seen_changes


def _before_after_pairs(surface: PuzzleSurfaceApi) -> None:
    for line_index in range(surface.line_count):
        if surface.is_line_complete(line_index):
            continue

        for column_index in range(surface.column_count - 2):
            if surface.get_cell(line_index, column_index) is CellValue.UNKNOWN:
                second = surface.get_cell(line_index, column_index + 1)
                if second is not CellValue.UNKNOWN and surface.get_cell(line_index, column_index + 2) is second:
                    surface.set_cell(line_index, column_index, second.opposite)

            elif surface.get_cell(line_index, column_index + 2) is CellValue.UNKNOWN:
                first = surface.get_cell(line_index, column_index)
                if surface.get_cell(line_index, column_index + 1) is first:
                    surface.set_cell(line_index, column_index + 2, first.opposite)


def _between_triplets(surface: PuzzleSurfaceApi) -> None:
    for line_index in range(surface.line_count):
        if surface.is_line_complete(line_index):
            continue

        for column_index in range(surface.column_count - 2):
            if surface.get_cell(line_index, column_index + 1) is not CellValue.UNKNOWN:
                continue

            first = surface.get_cell(line_index, column_index)
            if first is not CellValue.UNKNOWN and surface.get_cell(line_index, column_index + 2) is first:
                surface.set_cell(line_index, column_index + 1, first.opposite)


def _digit_counts(surface: PuzzleSurfaceApi) -> None:
    for line_index in range(surface.line_count):
        if surface.is_line_complete(line_index):
            continue

        zero_count = surface.count_in_line(line_index, CellValue.ZERO)
        one_count = surface.count_in_line(line_index, CellValue.ONE)
        if zero_count == one_count:
            continue

        unknown_count = surface.column_count - zero_count - one_count
        if abs(one_count - zero_count) != unknown_count:
            continue

        fill = CellValue.ONE if zero_count > one_count else CellValue.ZERO
        for column_index in range(surface.column_count):
            if surface.get_cell(line_index, column_index) is CellValue.UNKNOWN:
                surface.set_cell(line_index, column_index, fill)


def _missing_single_digit(surface: PuzzleSurfaceApi) -> None:
    almost_half = surface.column_count // 2 - 1
    for line_index in range(surface.line_count):
        if surface.is_line_complete(line_index):
            continue

        if (surface.count_in_line(line_index, CellValue.ZERO) != almost_half
                and surface.count_in_line(line_index, CellValue.ONE) != almost_half):
            continue

        combinations = create_line_combinations(surface, line_index)
        if len(combinations) == 1:
            _apply_line(surface, line_index, combinations[0])
        elif len(combinations) > 1:
            for column_index in range(surface.column_count):
                if surface.get_cell(line_index, column_index) is not CellValue.UNKNOWN:
                    continue

                values = {combination[column_index] for combination in combinations}
                if len(values) == 1:
                    surface.set_cell(line_index, column_index, values.pop())


def _no_duplicate_lines(surface: PuzzleSurfaceApi) -> None:
    complete_lines: List[Line] = [
        read_line(surface, line_index)
        for line_index in range(surface.line_count)
        if surface.is_line_complete(line_index)
    ]
    if not complete_lines:
        return

    for line_index in range(surface.line_count):
        if surface.is_line_complete(line_index):
            continue
        if not filter_matching_complete_lines(complete_lines, surface, line_index):
            continue

        combinations = [
            combination for combination in create_line_combinations(surface, line_index)
            if combination not in complete_lines
        ]
        if len(combinations) == 1:
            _apply_line(surface, line_index, combinations[0])
            complete_lines.append(combinations[0])


def _apply_line(surface: PuzzleSurfaceApi, line_index: int, line: Line) -> None:
    for column_index in range(surface.column_count):
        if surface.get_cell(line_index, column_index) is CellValue.UNKNOWN:
            surface.set_cell(line_index, column_index, line[column_index])
