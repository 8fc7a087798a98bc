"""Mirroring engine: validation, image generation, field and inductance."""

from .errors import (
    GeometryError,
    InvalidConfigurationError,
    QueryShapeError,
    ValidationError,
)
from .images import MirrorImageGenerator, image_indices
from .model import BoundaryCondition, BoundaryType, ConductorSet, MirrorImageSet
from .physics import FieldInductanceEngine
from .solvers import MirroringSolver
from .validation import Validator

__all__ = [
    "GeometryError",
    "InvalidConfigurationError",
    "QueryShapeError",
    "ValidationError",
    "MirrorImageGenerator",
    "image_indices",
    "BoundaryCondition",
    "BoundaryType",
    "ConductorSet",
    "MirrorImageSet",
    "FieldInductanceEngine",
    "MirroringSolver",
    "Validator",
]
