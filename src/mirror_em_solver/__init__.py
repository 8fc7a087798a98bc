"""Mirroring method (method of images) for 2D magnetostatic problems.

This package computes the magnetic field, the inductance matrix and the stored
energy of round conductors surrounded by planar magnetic boundaries of finite
permeability, together with current-sharing and plotting helpers built on top
of the inductance matrix.
"""

__version__ = "0.1.0"
__author__ = "Awarru"

# Core imports
from .core import (
    BoundaryCondition,
    BoundaryType,
    ConductorSet,
    MirroringSolver,
    ValidationError,
)

# Circuit imports
from .circuit import CurrentGroup, solve_current_sharing, solve_twisting

__all__ = [
    "BoundaryCondition",
    "BoundaryType",
    "ConductorSet",
    "MirroringSolver",
    "ValidationError",
    "CurrentGroup",
    "solve_current_sharing",
    "solve_twisting",
]
