"""Construction of surfaces from text or dimensions."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from binary_puzzle.config import SURFACE_CONFIG
from .errors import SurfaceFormatError
from .grid import PuzzleSurface
from .types import CellValue


class SurfaceFactory:
    """Builds PuzzleSurface instances. Text input is validated, no coercion."""

    def __init__(self, unknown_char: Optional[str] = None):
        self.unknown_char = unknown_char or SURFACE_CONFIG['unknown_char']

    def create_from_text(self, *lines: str) -> PuzzleSurface:
        """
        One string per line: '0', '1' or the unknown placeholder per cell. The surface
        keeps the placeholder, so to_string() gives back the same text.
        Line count and line length must both be even and nonzero, all lines equal length.
        """
        if not lines:
            raise SurfaceFormatError("At least one line is required.")
        if len(lines) % 2 != 0:
            raise SurfaceFormatError(f"Line count must be even, got {len(lines)}.")

        column_count = self._check_line(lines, 0)
        for line_index in range(1, len(lines)):
            length = self._check_line(lines, line_index)
            if length != column_count:
                raise SurfaceFormatError(
                    f"lines[{line_index}] has length {length}, expected {column_count}.",
                    line_index=line_index,
                )

        cells = np.empty((len(lines), column_count), dtype=np.int8)
        for line_index, line in enumerate(lines):
            for column_index, ch in enumerate(line):
                cells[line_index, column_index] = self._parse_char(ch, line_index, column_index)

        return PuzzleSurface.from_cells(cells, self.unknown_char)

    def create_empty(self, line_count: int, column_count: int) -> PuzzleSurface:
        """All-unknown surface; dimensions are validated by PuzzleSurface."""
        return PuzzleSurface(line_count, column_count, self.unknown_char)

    def _check_line(self, lines: Sequence[str], line_index: int) -> int:
        line = lines[line_index]
        if line is None:
            raise SurfaceFormatError(f"lines[{line_index}] must not be None.", line_index=line_index)
        if len(line) == 0:
            raise SurfaceFormatError(f"lines[{line_index}] must not be empty.", line_index=line_index)
        if len(line) % 2 != 0:
            raise SurfaceFormatError(
                f"lines[{line_index}] length must be even, got {len(line)}.",
                line_index=line_index,
            )
        return len(line)

    def _parse_char(self, ch: str, line_index: int, column_index: int) -> CellValue:
        if ch == "0":
            return CellValue.ZERO
        if ch == "1":
            return CellValue.ONE
        if ch == self.unknown_char:
            return CellValue.UNKNOWN
        raise SurfaceFormatError(
            f"Unsupported character {ch!r} in line {line_index} at position {column_index}.",
            line_index=line_index,
            column_index=column_index,
        )


# === API fonctionnelle ===

_default_factory = SurfaceFactory()


def create_from_text(*lines: str) -> PuzzleSurface:
    return _default_factory.create_from_text(*lines)


def create_empty(line_count: int, column_count: int) -> PuzzleSurface:
    return _default_factory.create_empty(line_count, column_count)
