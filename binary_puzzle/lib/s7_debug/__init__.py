"""Module s7_debug : Debug et overlays visuels."""

from .overlays import OverlayConfig, OverlayRenderer, render_solver_overlay
from .logger import DebugLogger, SolveLog

__all__ = [
    "OverlayConfig",
    "OverlayRenderer",
    "render_solver_overlay",
    "DebugLogger",
    "SolveLog",
]
