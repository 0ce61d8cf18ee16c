"""Surface wrapper that checks every assignment against a known answer.

Correctness harness for the solvers: a wrong deduction fails loudly at the
exact cell where it happens instead of surfacing as an unsolved grid later.
"""

from __future__ import annotations

from binary_puzzle.config import SURFACE_CONFIG
from .errors import IncorrectSurfaceCellValueError
from .facade import PuzzleSurfaceApi
from .types import CellValue


class ComparingSurface:
    """Delegates to ``source``; raises IncorrectSurfaceCellValueError when a value disagrees with ``answer``."""

    def __init__(self, source: PuzzleSurfaceApi, answer: PuzzleSurfaceApi) -> None:
        if source is None:
            raise TypeError("source must not be None")
        if answer is None:
            raise TypeError("answer must not be None")

        self._source = source
        self._answer = answer
        self._verify()

    @property
    def source(self) -> PuzzleSurfaceApi:
        return self._source

    @property
    def answer(self) -> PuzzleSurfaceApi:
        return self._answer

    @property
    def line_count(self) -> int:
        return self._source.line_count

    @property
    def column_count(self) -> int:
        return self._source.column_count

    @property
    def is_solved(self) -> bool:
        return self._source.is_solved

    @property
    def unknown_char(self) -> str:
        return self._source.unknown_char

    def get_cell(self, line_index: int, column_index: int) -> CellValue:
        return self._source.get_cell(line_index, column_index)

    def set_cell(self, line_index: int, column_index: int, value: CellValue) -> None:
        value = CellValue(value)
        if self._answer.get_cell(line_index, column_index) is not value:
            raise IncorrectSurfaceCellValueError(self._source, self._answer, line_index, column_index, value)

        self._source.set_cell(line_index, column_index, value)

    def is_line_complete(self, line_index: int) -> bool:
        return self._source.is_line_complete(line_index)

    def is_column_complete(self, column_index: int) -> bool:
        return self._source.is_column_complete(column_index)

    def count_in_line(self, line_index: int, value: CellValue) -> int:
        return self._source.count_in_line(line_index, value)

    def count_in_column(self, column_index: int, value: CellValue) -> int:
        return self._source.count_in_column(column_index, value)

    def has_changes(self) -> bool:
        return self._source.has_changes()

    def accept_changes(self) -> None:
        self._source.accept_changes()

    def to_string(self, line_separator: str = SURFACE_CONFIG['line_separator']) -> str:
        return self._source.to_string(line_separator)

    def __str__(self) -> str:
        return self.to_string()

    def _verify(self) -> None:
        if (self._source.line_count != self._answer.line_count
                or self._source.column_count != self._answer.column_count):
            raise ValueError("The source and answer surfaces must have the same size.")

        for line_index in range(self._source.line_count):
            for column_index in range(self._source.column_count):
                answer_cell = self._answer.get_cell(line_index, column_index)
                if answer_cell is CellValue.UNKNOWN:
                    raise ValueError(f"Missing value in answer surface at ({line_index},{column_index}).")

                source_cell = self._source.get_cell(line_index, column_index)
                if source_cell is not CellValue.UNKNOWN and source_cell is not answer_cell:
                    raise IncorrectSurfaceCellValueError(
                        self._source, self._answer, line_index, column_index, source_cell
                    )
