"""Types for the s1_surface module."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

from binary_puzzle.config import SURFACE_CONFIG

Coord = Tuple[int, int]


class CellValue(IntEnum):
    """Content of a single cell. Stored as int8 in the grid matrix."""

    UNKNOWN = -1
    ZERO = 0
    ONE = 1

    @property
    def is_known(self) -> bool:
        return self is not CellValue.UNKNOWN

    @property
    def opposite(self) -> "CellValue":
        if self is CellValue.ZERO:
            return CellValue.ONE
        if self is CellValue.ONE:
            return CellValue.ZERO
        raise ValueError("UNKNOWN has no opposite value")

    def to_char(self, unknown_char: Optional[str] = None) -> str:
        if self is CellValue.ZERO:
            return "0"
        if self is CellValue.ONE:
            return "1"
        return unknown_char or SURFACE_CONFIG['unknown_char']

    @classmethod
    def from_char(cls, ch: str) -> "CellValue":
        """Raises ValueError for anything other than 0, 1 or the unknown placeholder."""
        if ch == "0":
            return cls.ZERO
        if ch == "1":
            return cls.ONE
        if ch == SURFACE_CONFIG['unknown_char']:
            return cls.UNKNOWN
        raise ValueError(f"Unsupported cell character: {ch!r}")


@dataclass(frozen=True, order=True)
class SurfacePosition:
    """Cell position, ordered by line then column."""

    line_index: int
    column_index: int

    @property
    def coord(self) -> Coord:
        return (self.line_index, self.column_index)

    def __str__(self) -> str:
        return f"({self.line_index},{self.column_index})"
