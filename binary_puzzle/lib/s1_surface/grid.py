"""In-memory storage of the puzzle grid (source of truth)."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

import numpy as np

from binary_puzzle.config import SURFACE_CONFIG
from .errors import SurfaceFormatError
from .helpers import format_surface, is_surface_solved
from .types import CellValue

# (unknown_count, zero_count)
LineCounts = Tuple[int, int]


class PuzzleSurface:
    """Grid of cells backed by an int8 matrix.

    Counts per line and per column are cached and recomputed on first read
    after a write touched that line or column.
    """

    def __init__(self, line_count: int, column_count: int, unknown_char: Optional[str] = None) -> None:
        if line_count <= 0 or line_count % 2 != 0:
            raise SurfaceFormatError("line_count must be even and nonzero.")
        if column_count <= 0 or column_count % 2 != 0:
            raise SurfaceFormatError("column_count must be even and nonzero.")

        self._attach(np.full((line_count, column_count), CellValue.UNKNOWN, dtype=np.int8), unknown_char)

    @classmethod
    def from_cells(cls, cells: np.ndarray, unknown_char: Optional[str] = None) -> "PuzzleSurface":
        """Wrap a prefilled matrix. No validation: the factory or the caller is responsible."""
        surface = cls.__new__(cls)
        surface._attach(np.asarray(cells, dtype=np.int8), unknown_char)
        return surface

    def _attach(self, cells: np.ndarray, unknown_char: Optional[str] = None) -> None:
        self._cells = cells
        self._unknown_char = unknown_char or SURFACE_CONFIG['unknown_char']
        self._has_changes = False
        self._line_counts: Dict[int, LineCounts] = {}
        self._column_counts: Dict[int, LineCounts] = {}

    @property
    def line_count(self) -> int:
        return self._cells.shape[0]

    @property
    def column_count(self) -> int:
        return self._cells.shape[1]

    @property
    def is_solved(self) -> bool:
        return is_surface_solved(self)

    @property
    def unknown_char(self) -> str:
        """Placeholder written for unknown cells by to_string()."""
        return self._unknown_char

    def get_cell(self, line_index: int, column_index: int) -> CellValue:
        # Hot path: indexes are not verified, numpy raises on out-of-range access.
        return CellValue(self._cells[line_index, column_index])

    def set_cell(self, line_index: int, column_index: int, value: CellValue) -> None:
        value = CellValue(value)
        if value is CellValue.UNKNOWN:
            raise ValueError("A cell can only be set to ZERO or ONE.")

        self._cells[line_index, column_index] = value
        self._has_changes = True

        self._line_counts.pop(line_index, None)
        self._column_counts.pop(column_index, None)

    def is_line_complete(self, line_index: int) -> bool:
        return self._ensure_line_counts(line_index)[0] == 0

    def is_column_complete(self, column_index: int) -> bool:
        return self._ensure_column_counts(column_index)[0] == 0

    def count_in_line(self, line_index: int, value: CellValue) -> int:
        unknown_count, zero_count = self._ensure_line_counts(line_index)
        return _select_count(value, unknown_count, zero_count, self.column_count)

    def count_in_column(self, column_index: int, value: CellValue) -> int:
        unknown_count, zero_count = self._ensure_column_counts(column_index)
        return _select_count(value, unknown_count, zero_count, self.line_count)

    def has_changes(self) -> bool:
        return self._has_changes

    def accept_changes(self) -> None:
        self._has_changes = False

    def to_string(self, line_separator: str = SURFACE_CONFIG['line_separator']) -> str:
        return format_surface(self, line_separator, self._unknown_char)

    def __str__(self) -> str:
        return self.to_string()

    def _ensure_line_counts(self, line_index: int) -> LineCounts:
        if not 0 <= line_index < self.line_count:
            raise IndexError(f"line_index {line_index} out of range [0, {self.line_count}).")

        counts = self._line_counts.get(line_index)
        if counts is None:
            counts = _count_cells(self._cells[line_index, :])
            self._line_counts[line_index] = counts
        return counts

    def _ensure_column_counts(self, column_index: int) -> LineCounts:
        if not 0 <= column_index < self.column_count:
            raise IndexError(f"column_index {column_index} out of range [0, {self.column_count}).")

        counts = self._column_counts.get(column_index)
        if counts is None:
            counts = _count_cells(self._cells[:, column_index])
            self._column_counts[column_index] = counts
        return counts


def _count_cells(cells: np.ndarray) -> LineCounts:
    unknown_count = int(np.count_nonzero(cells == CellValue.UNKNOWN))
    zero_count = int(np.count_nonzero(cells == CellValue.ZERO))
    return unknown_count, zero_count


def _select_count(value: CellValue, unknown_count: int, zero_count: int, length: int) -> int:
    if value is CellValue.UNKNOWN:
        return unknown_count
    if value is CellValue.ZERO:
        return zero_count
    return length - unknown_count - zero_count
