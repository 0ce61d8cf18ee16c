"""Errors raised by surfaces and the surface factory."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .facade import PuzzleSurfaceApi
    from .types import CellValue


class SurfaceFormatError(ValueError):
    """Malformed puzzle text or dimensions."""

    def __init__(
        self,
        message: str,
        line_index: Optional[int] = None,
        column_index: Optional[int] = None,
    ):
        super().__init__(message)
        self.line_index = line_index
        self.column_index = column_index


class IncorrectSurfaceCellValueError(ValueError):
    """A cell value differs from the known answer."""

    def __init__(
        self,
        source: "PuzzleSurfaceApi",
        answer: "PuzzleSurfaceApi",
        line_index: int,
        column_index: int,
        actual: "CellValue",
    ):
        self.source = source
        self.answer = answer
        self.line_index = line_index
        self.column_index = column_index
        self.expected = answer.get_cell(line_index, column_index)
        self.actual = actual
        super().__init__(
            f"Expected {self.expected.to_char()} at cell ({line_index},{column_index}) "
            f"instead of {actual.to_char()}. "
            f"Source: {source.to_string()}; answer: {answer.to_string()}."
        )


class ReadOnlySurfaceError(RuntimeError):
    """Write or change-tracking call on a view that cannot be modified."""
