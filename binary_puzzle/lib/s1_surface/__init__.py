"""Module s1_surface : grille du puzzle (source de vérité) et vues dérivées."""

from .types import (
    Coord,
    CellValue,
    SurfacePosition,
)
from .facade import PuzzleSurfaceApi
from .errors import SurfaceFormatError, IncorrectSurfaceCellValueError, ReadOnlySurfaceError
from .helpers import (
    format_surface,
    is_surface_solved,
    copy_cells,
    read_line,
    iter_unknown_positions,
)
from .grid import PuzzleSurface
from .tracking import ChangeTrackingSurface
from .rotated import RotatedSurface
from .single_change import SingleChangeSurface
from .comparing import ComparingSurface
from .factory import SurfaceFactory, create_from_text, create_empty

__all__ = [
    # Types
    "Coord",
    "CellValue",
    "SurfacePosition",
    "PuzzleSurfaceApi",
    # Errors
    "SurfaceFormatError",
    "IncorrectSurfaceCellValueError",
    "ReadOnlySurfaceError",
    # Helpers
    "format_surface",
    "is_surface_solved",
    "copy_cells",
    "read_line",
    "iter_unknown_positions",
    # Classes
    "PuzzleSurface",
    "ChangeTrackingSurface",
    "RotatedSurface",
    "SingleChangeSurface",
    "ComparingSurface",
    "SurfaceFactory",
    # Functions
    "create_from_text",
    "create_empty",
]
