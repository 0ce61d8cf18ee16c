"""Binary puzzle (Takuzu) solver engine."""

from binary_puzzle.lib.s1_surface import (
    CellValue,
    SurfacePosition,
    PuzzleSurfaceApi,
    PuzzleSurface,
    ChangeTrackingSurface,
    RotatedSurface,
    SingleChangeSurface,
    ComparingSurface,
    SurfaceFactory,
    SurfaceFormatError,
    IncorrectSurfaceCellValueError,
    ReadOnlySurfaceError,
    create_from_text,
    create_empty,
)
from binary_puzzle.lib.s2_validator import (
    SurfaceValidator,
    IncorrectPuzzleSurfaceError,
    validate,
    try_validate,
)
from binary_puzzle.lib.s3_solver import (
    RulesetPuzzleSolver,
    BacktrackingPuzzleSolver,
    CompositePuzzleSolver,
    SolverOutput,
    SolverPhase,
    SolverStats,
    solve,
)

__version__ = "0.1.0"

__all__ = [
    # Surface
    "CellValue",
    "SurfacePosition",
    "PuzzleSurfaceApi",
    "PuzzleSurface",
    "ChangeTrackingSurface",
    "RotatedSurface",
    "SingleChangeSurface",
    "ComparingSurface",
    "SurfaceFactory",
    "SurfaceFormatError",
    "IncorrectSurfaceCellValueError",
    "ReadOnlySurfaceError",
    "create_from_text",
    "create_empty",
    # Validation
    "SurfaceValidator",
    "IncorrectPuzzleSurfaceError",
    "validate",
    "try_validate",
    # Solver
    "RulesetPuzzleSolver",
    "BacktrackingPuzzleSolver",
    "CompositePuzzleSolver",
    "SolverOutput",
    "SolverPhase",
    "SolverStats",
    "solve",
]
