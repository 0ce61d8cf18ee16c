"""View that exposes a surface rotated by 90 degrees (lines and columns swapped)."""

from __future__ import annotations

from binary_puzzle.config import SURFACE_CONFIG
from .facade import PuzzleSurfaceApi
from .helpers import format_surface
from .types import CellValue


class RotatedSurface:
    """Transposed view: running line-only logic against it covers the source's columns."""

    def __init__(self, source: PuzzleSurfaceApi) -> None:
        if source is None:
            raise TypeError("source must not be None")
        self._source = source

    @property
    def line_count(self) -> int:
        return self._source.column_count

    @property
    def column_count(self) -> int:
        return self._source.line_count

    @property
    def is_solved(self) -> bool:
        return self._source.is_solved

    @property
    def unknown_char(self) -> str:
        return self._source.unknown_char

    def get_cell(self, line_index: int, column_index: int) -> CellValue:
        return self._source.get_cell(column_index, line_index)

    def set_cell(self, line_index: int, column_index: int, value: CellValue) -> None:
        self._source.set_cell(column_index, line_index, value)

    def is_line_complete(self, line_index: int) -> bool:
        return self._source.is_column_complete(line_index)

    def is_column_complete(self, column_index: int) -> bool:
        return self._source.is_line_complete(column_index)

    def count_in_line(self, line_index: int, value: CellValue) -> int:
        return self._source.count_in_column(line_index, value)

    def count_in_column(self, column_index: int, value: CellValue) -> int:
        return self._source.count_in_line(column_index, value)

    def has_changes(self) -> bool:
        return self._source.has_changes()

    def accept_changes(self) -> None:
        self._source.accept_changes()

    def to_string(self, line_separator: str = SURFACE_CONFIG['line_separator']) -> str:
        return format_surface(self, line_separator, self.unknown_char)

    def __str__(self) -> str:
        return self.to_string()
