"""
Rule checks over a (possibly partial) surface.

Every check is written for lines only and runs twice: once on the surface,
once on its RotatedSurface, which covers the columns.
"""

from __future__ import annotations

from typing import Callable, Set, Tuple

from binary_puzzle.lib.s1_surface import CellValue, PuzzleSurfaceApi, RotatedSurface, read_line
from .types import IncorrectPuzzleSurfaceError, LineOrientation, RuleViolation

LineCheck = Callable[[PuzzleSurfaceApi, LineOrientation, bool], bool]


class SurfaceValidator:
    """
    Checks digit counts, run lengths and duplicate lines.

    validate() raises IncorrectPuzzleSurfaceError on the first violation.
    try_validate() returns a boolean and never raises, for use inside the search loop.
    """

    def __init__(self, surface: PuzzleSurfaceApi):
        if surface is None:
            raise TypeError("surface must not be None")

        self.surface = surface
        self.rotated = RotatedSurface(surface)

    def validate(self) -> None:
        self._validate_digit_counts(True)
        self._validate_sequence_lengths(True)
        self._validate_no_duplicates(True)

    def try_validate(self) -> bool:
        return (
            self._validate_digit_counts(False)
            and self._validate_sequence_lengths(False)
            and self._validate_no_duplicates(False)
        )

    def _validate_digit_counts(self, raise_on_error: bool) -> bool:
        return self._run_both_ways(_check_digit_counts, raise_on_error)

    def _validate_sequence_lengths(self, raise_on_error: bool) -> bool:
        return self._run_both_ways(_check_sequence_lengths, raise_on_error)

    def _validate_no_duplicates(self, raise_on_error: bool) -> bool:
        return self._run_both_ways(_check_no_duplicates, raise_on_error)

    def _run_both_ways(self, check: LineCheck, raise_on_error: bool) -> bool:
        return (
            check(self.surface, LineOrientation.LINE, raise_on_error)
            and check(self.rotated, LineOrientation.COLUMN, raise_on_error)
        )


def _fail(
    raise_on_error: bool,
    message: str,
    rule: RuleViolation,
    orientation: LineOrientation,
    line_index: int,
) -> bool:
    if raise_on_error:
        raise IncorrectPuzzleSurfaceError(message, rule, orientation, line_index)
    return False


def _check_digit_counts(surface: PuzzleSurfaceApi, orientation: LineOrientation, raise_on_error: bool) -> bool:
    half = surface.column_count // 2
    for line_index in range(surface.line_count):
        for value in (CellValue.ONE, CellValue.ZERO):
            if surface.count_in_line(line_index, value) > half:
                return _fail(
                    raise_on_error,
                    f"Too many {value.to_char()}s in {orientation.value} {line_index}.",
                    RuleViolation.DIGIT_COUNT,
                    orientation,
                    line_index,
                )
    return True


def _check_sequence_lengths(surface: PuzzleSurfaceApi, orientation: LineOrientation, raise_on_error: bool) -> bool:
    for line_index in range(surface.line_count):
        for column_index in range(surface.column_count - 2):
            first = surface.get_cell(line_index, column_index)
            # Runs of unknowns cannot be judged yet
            if first is CellValue.UNKNOWN:
                continue
            if (surface.get_cell(line_index, column_index + 1) is first
                    and surface.get_cell(line_index, column_index + 2) is first):
                return _fail(
                    raise_on_error,
                    f"Found sequence of three {first.to_char()}s in {orientation.value} {line_index}.",
                    RuleViolation.SEQUENCE_LENGTH,
                    orientation,
                    line_index,
                )
    return True


def _check_no_duplicates(surface: PuzzleSurfaceApi, orientation: LineOrientation, raise_on_error: bool) -> bool:
    complete_lines: Set[Tuple[CellValue, ...]] = set()
    for line_index in range(surface.line_count):
        if not surface.is_line_complete(line_index):
            continue

        line = read_line(surface, line_index)
        if line in complete_lines:
            return _fail(
                raise_on_error,
                f"{orientation.value.capitalize()} {line_index} occurs more than once.",
                RuleViolation.DUPLICATE_LINE,
                orientation,
                line_index,
            )
        complete_lines.add(line)
    return True


# === API fonctionnelle ===

def validate(surface: PuzzleSurfaceApi) -> None:
    SurfaceValidator(surface).validate()


def try_validate(surface: PuzzleSurfaceApi) -> bool:
    return SurfaceValidator(surface).try_validate()
