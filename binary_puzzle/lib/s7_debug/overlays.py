"""Génération d'overlays visuels pour le debug."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from binary_puzzle.config import OVERLAY_CONFIG
from binary_puzzle.lib.s1_surface import CellValue, PuzzleSurfaceApi, SurfacePosition
from binary_puzzle.lib.s3_solver.types import SolverOutput, SolverPhase

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]


@dataclass
class OverlayConfig:
    """Configuration des overlays."""
    cell_size: int = OVERLAY_CONFIG['cell_size']
    cell_border: int = OVERLAY_CONFIG['cell_border']
    font_size: int = OVERLAY_CONFIG['font_size']
    colors: Dict[str, Color] = field(default_factory=lambda: dict(OVERLAY_CONFIG['colors']))


class OverlayRenderer:
    """Draws a surface as a grid of squares, coloured by the phase that resolved each cell."""

    def __init__(self, config: Optional[OverlayConfig] = None):
        self.config = config or OverlayConfig()
        self.cell_stride = self.config.cell_size + self.config.cell_border
        self.font = _load_font(self.config.font_size)

    def render_solver_overlay(
        self,
        surface: PuzzleSurfaceApi,
        solver_output: Optional[SolverOutput] = None,
        output_path: Optional[str] = None,
    ) -> Image.Image:
        """Génère un overlay pour les résultats solver."""
        border = self.config.cell_border
        width = surface.column_count * self.cell_stride + border
        height = surface.line_count * self.cell_stride + border
        image = Image.new("RGB", (width, height), self.config.colors["background"])
        draw = ImageDraw.Draw(image)

        resolved = solver_output.resolved if solver_output else {}
        for line_index in range(surface.line_count):
            for column_index in range(surface.column_count):
                cell = surface.get_cell(line_index, column_index)
                phase = resolved.get(SurfacePosition(line_index, column_index))
                self._draw_cell(draw, line_index, column_index, cell, phase)

        if output_path:
            path = Path(output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            image.save(path)
            logger.info("[OVERLAY] saved %s", path)

        return image

    def cell_color(self, cell: CellValue, phase: Optional[SolverPhase]) -> Color:
        if cell is CellValue.UNKNOWN:
            return self.config.colors["unknown"]
        if phase == SolverPhase.RULESET:
            return self.config.colors["ruleset"]
        if phase == SolverPhase.BACKTRACKING:
            return self.config.colors["backtracking"]
        return self.config.colors["given"]

    def _draw_cell(
        self,
        draw: ImageDraw.ImageDraw,
        line_index: int,
        column_index: int,
        cell: CellValue,
        phase: Optional[SolverPhase],
    ) -> None:
        x = self.config.cell_border + column_index * self.cell_stride
        y = self.config.cell_border + line_index * self.cell_stride
        size = self.config.cell_size

        draw.rectangle([x, y, x + size - 1, y + size - 1], fill=self.cell_color(cell, phase))

        if cell is not CellValue.UNKNOWN:
            draw.text(
                (x + size // 3, y + size // 5),
                cell.to_char(),
                fill=self.config.colors["text"],
                font=self.font,
            )


def _load_font(size: int) -> ImageFont.ImageFont:
    try:
        return ImageFont.truetype("DejaVuSans.ttf", size)
    except OSError:
        # Bitmap font shipped with Pillow, fixed size
        return ImageFont.load_default()


# === API fonctionnelle ===

_renderer: Optional[OverlayRenderer] = None


def _get_renderer() -> OverlayRenderer:
    global _renderer
    if _renderer is None:
        _renderer = OverlayRenderer()
    return _renderer


def render_solver_overlay(
    surface: PuzzleSurfaceApi,
    solver_output: Optional[SolverOutput] = None,
    output_path: Optional[str] = None,
) -> Image.Image:
    """Génère un overlay solver."""
    return _get_renderer().render_solver_overlay(surface, solver_output, output_path)
