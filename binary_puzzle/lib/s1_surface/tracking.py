"""Grid that records every cell assignment since the last accept."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import numpy as np

from .grid import PuzzleSurface
from .types import CellValue, SurfacePosition


class ChangeTrackingSurface(PuzzleSurface):
    """PuzzleSurface that also remembers which cells were written, and to what."""

    def _attach(self, cells: np.ndarray, unknown_char: Optional[str] = None) -> None:
        super()._attach(cells, unknown_char)
        self._changed_cells: Dict[SurfacePosition, CellValue] = {}

    def set_cell(self, line_index: int, column_index: int, value: CellValue) -> None:
        super().set_cell(line_index, column_index, value)
        self._changed_cells[SurfacePosition(line_index, column_index)] = CellValue(value)

    def accept_changes(self) -> None:
        super().accept_changes()
        self._changed_cells.clear()

    def get_changed_cells(self) -> List[Tuple[SurfacePosition, CellValue]]:
        """Cells written since the last accept_changes(), ordered by position."""
        return sorted(self._changed_cells.items())
