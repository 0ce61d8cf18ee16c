"""Types for the s2_validator module."""

from __future__ import annotations

from enum import Enum


class RuleViolation(str, Enum):
    """Puzzle rule broken by a surface."""
    DIGIT_COUNT = "DIGIT_COUNT"          # More than half of a line holds the same digit
    SEQUENCE_LENGTH = "SEQUENCE_LENGTH"  # Three equal known digits in a row
    DUPLICATE_LINE = "DUPLICATE_LINE"    # Two complete lines are identical


class LineOrientation(str, Enum):
    """Whether a violation was found on a line or (through rotation) on a column."""
    LINE = "line"
    COLUMN = "column"


class IncorrectPuzzleSurfaceError(ValueError):
    """A surface breaks one of the puzzle rules."""

    def __init__(
        self,
        message: str,
        rule: RuleViolation,
        orientation: LineOrientation,
        line_index: int,
    ):
        super().__init__(message)
        self.rule = rule
        self.orientation = orientation
        self.line_index = line_index
