"""Read-only view that overrides exactly one cell of its source."""

from __future__ import annotations

from binary_puzzle.config import SURFACE_CONFIG
from .errors import ReadOnlySurfaceError
from .facade import PuzzleSurfaceApi
from .helpers import format_surface, is_surface_solved
from .types import CellValue, SurfacePosition


class SingleChangeSurface:
    """Hypothesis "what if this cell held this value?" layered over a source surface.

    Immutable: every write or change-tracking call is rejected. Counts are
    recomputed only for the line and column of the overridden cell.
    """

    def __init__(self, source: PuzzleSurfaceApi, position: SurfacePosition, value: CellValue) -> None:
        if source is None:
            raise TypeError("source must not be None")
        value = CellValue(value)
        if value is CellValue.UNKNOWN:
            raise ValueError("The overridden value must be ZERO or ONE.")

        self._source = source
        self._position = position
        self._value = value

    @property
    def delta_position(self) -> SurfacePosition:
        return self._position

    @property
    def delta_value(self) -> CellValue:
        return self._value

    @property
    def line_count(self) -> int:
        return self._source.line_count

    @property
    def column_count(self) -> int:
        return self._source.column_count

    @property
    def is_solved(self) -> bool:
        return is_surface_solved(self)

    @property
    def unknown_char(self) -> str:
        return self._source.unknown_char

    def get_cell(self, line_index: int, column_index: int) -> CellValue:
        if line_index == self._position.line_index and column_index == self._position.column_index:
            return self._value
        return self._source.get_cell(line_index, column_index)

    def set_cell(self, line_index: int, column_index: int, value: CellValue) -> None:
        raise ReadOnlySurfaceError("SingleChangeSurface is read-only.")

    def is_line_complete(self, line_index: int) -> bool:
        if line_index == self._position.line_index:
            return self.count_in_line(line_index, CellValue.UNKNOWN) == 0
        return self._source.is_line_complete(line_index)

    def is_column_complete(self, column_index: int) -> bool:
        if column_index == self._position.column_index:
            return self.count_in_column(column_index, CellValue.UNKNOWN) == 0
        return self._source.is_column_complete(column_index)

    def count_in_line(self, line_index: int, value: CellValue) -> int:
        if line_index == self._position.line_index:
            return sum(
                1 for column_index in range(self.column_count)
                if self.get_cell(line_index, column_index) is value
            )
        return self._source.count_in_line(line_index, value)

    def count_in_column(self, column_index: int, value: CellValue) -> int:
        if column_index == self._position.column_index:
            return sum(
                1 for line_index in range(self.line_count)
                if self.get_cell(line_index, column_index) is value
            )
        return self._source.count_in_column(column_index, value)

    def has_changes(self) -> bool:
        raise ReadOnlySurfaceError("SingleChangeSurface does not track changes.")

    def accept_changes(self) -> None:
        raise ReadOnlySurfaceError("SingleChangeSurface does not track changes.")

    def to_string(self, line_separator: str = SURFACE_CONFIG['line_separator']) -> str:
        return format_surface(self, line_separator, self.unknown_char)

    def __str__(self) -> str:
        return self.to_string()
