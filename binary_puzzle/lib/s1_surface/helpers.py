"""Shared helpers working on any PuzzleSurfaceApi."""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

import numpy as np

from .facade import PuzzleSurfaceApi
from .types import CellValue, SurfacePosition


def format_surface(surface: PuzzleSurfaceApi, line_separator: str, unknown_char: Optional[str] = None) -> str:
    """Render each line as 0/1/placeholder characters, lines joined by the separator."""
    lines = []
    for line_index in range(surface.line_count):
        lines.append("".join(
            surface.get_cell(line_index, column_index).to_char(unknown_char)
            for column_index in range(surface.column_count)
        ))
    return line_separator.join(lines)


def is_surface_solved(surface: PuzzleSurfaceApi) -> bool:
    for line_index in range(surface.line_count):
        if not surface.is_line_complete(line_index):
            return False
    return True


def copy_cells(surface: PuzzleSurfaceApi) -> np.ndarray:
    """Copy the visible cell values of a surface (views included) into a new int8 matrix."""
    cells = np.full((surface.line_count, surface.column_count), CellValue.UNKNOWN, dtype=np.int8)
    for line_index in range(surface.line_count):
        for column_index in range(surface.column_count):
            cells[line_index, column_index] = surface.get_cell(line_index, column_index)
    return cells


def read_line(surface: PuzzleSurfaceApi, line_index: int) -> Tuple[CellValue, ...]:
    return tuple(surface.get_cell(line_index, column_index) for column_index in range(surface.column_count))


def iter_unknown_positions(surface: PuzzleSurfaceApi) -> Iterator[SurfacePosition]:
    """Unknown positions in row-major order."""
    for line_index in range(surface.line_count):
        for column_index in range(surface.column_count):
            if surface.get_cell(line_index, column_index) is CellValue.UNKNOWN:
                yield SurfacePosition(line_index, column_index)
