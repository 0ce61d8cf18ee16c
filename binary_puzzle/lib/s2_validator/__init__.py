"""Module s2_validator : vérification des règles du puzzle sur une surface."""

from .types import (
    RuleViolation,
    LineOrientation,
    IncorrectPuzzleSurfaceError,
)
from .validator import SurfaceValidator, validate, try_validate

__all__ = [
    # Types
    "RuleViolation",
    "LineOrientation",
    "IncorrectPuzzleSurfaceError",
    # Classes
    "SurfaceValidator",
    # Functions
    "validate",
    "try_validate",
]
