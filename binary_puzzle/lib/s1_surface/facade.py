from __future__ import annotations

from typing import Protocol

from .types import CellValue


class PuzzleSurfaceApi(Protocol):
    """Read/write/query contract shared by the grid and every view over it."""

    @property
    def line_count(self) -> int: ...

    @property
    def column_count(self) -> int: ...

    @property
    def is_solved(self) -> bool: ...

    @property
    def unknown_char(self) -> str: ...

    def get_cell(self, line_index: int, column_index: int) -> CellValue: ...

    def set_cell(self, line_index: int, column_index: int, value: CellValue) -> None: ...

    def is_line_complete(self, line_index: int) -> bool: ...

    def is_column_complete(self, column_index: int) -> bool: ...

    def count_in_line(self, line_index: int, value: CellValue) -> int: ...

    def count_in_column(self, column_index: int, value: CellValue) -> int: ...

    def has_changes(self) -> bool: ...

    def accept_changes(self) -> None: ...

    def to_string(self, line_separator: str = ...) -> str: ...
