"""Validity checks for mirroring problems and for the queries made on them.

The checks are run once on the problem definition (boundary condition and
conductors) and again on the arguments of every query (evaluation points and
current excitation). Any violation raises immediately; nothing is coerced.
"""

from __future__ import annotations

import numbers
from typing import Tuple

import numpy as np

from .errors import GeometryError, InvalidConfigurationError, QueryShapeError
from .model import BoundaryCondition, BoundaryType, ConductorSet


def _real_scalar(name: str, value) -> float:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise InvalidConfigurationError(f"{name} must be a real number, got {value!r}")
    value = float(value)
    if not np.isfinite(value):
        raise InvalidConfigurationError(f"{name} must be finite, got {value}")
    return value


def _real_vector(name: str, values, error_cls=InvalidConfigurationError) -> np.ndarray:
    array = np.asarray(values)
    if array.ndim != 1:
        raise error_cls(f"{name} must be a 1-D array, got shape {array.shape}")
    if array.size == 0:
        raise error_cls(f"{name} must be non-empty")
    if array.dtype.kind not in "iuf":
        raise InvalidConfigurationError(f"{name} must contain real numbers, got dtype {array.dtype}")
    array = array.astype(np.float64)
    if not np.all(np.isfinite(array)):
        raise InvalidConfigurationError(f"{name} must contain only finite values")
    return array


class Validator:
    """Check the validity of a 2D mirroring problem.

    Parameters
    ----------
    boundary : BoundaryCondition
        Magnetic boundaries, domain and regularization lengths.
    conductors : ConductorSet
        Conductor positions and diameters.
    """

    def __init__(self, boundary: BoundaryCondition, conductors: ConductorSet):
        self.boundary = boundary
        self.conductors = conductors

    def validate_boundary_and_conductors(self) -> None:
        """Check types, ranges, array lengths, placement and overlap.

        Raises
        ------
        InvalidConfigurationError
            Malformed boundary type, bad scalar or conductor array.
        GeometryError
            Conductor outside the domain or overlapping another one.
        """
        self._check_boundary()
        x, y, diameter = self._check_conductor_arrays()
        radius = diameter / 2.0
        self._check_in_domain(x, y, radius, "conductor")
        self._check_overlap(x, y, radius)

    def validate_points(self, x, y) -> Tuple[np.ndarray, np.ndarray]:
        """Check evaluation coordinates and return them as float arrays."""
        x = _real_vector("x", x, QueryShapeError)
        y = _real_vector("y", y, QueryShapeError)
        if x.size != y.size:
            raise QueryShapeError(
                f"x and y must have the same length, got {x.size} and {y.size}"
            )
        self._check_in_domain(x, y, 0.0, "evaluation point")
        return x, y

    def validate_current_matrix(self, currents) -> np.ndarray:
        """Check the current excitation (conductors x operating points)."""
        currents = np.asarray(currents)
        if currents.ndim != 2:
            raise QueryShapeError(
                f"current matrix must be 2-D (conductors x operating points), got shape {currents.shape}"
            )
        if currents.size == 0:
            raise QueryShapeError("current matrix must be non-empty")
        if currents.dtype.kind not in "iufc":
            raise InvalidConfigurationError(
                f"current matrix must be numeric, got dtype {currents.dtype}"
            )
        if not np.all(np.isfinite(currents)):
            raise InvalidConfigurationError("current matrix must contain only finite values")
        n_conductor = self.conductors.n_conductor
        if currents.shape[0] != n_conductor:
            raise QueryShapeError(
                f"current matrix must have {n_conductor} rows (one per conductor), got {currents.shape[0]}"
            )
        return currents

    def _check_boundary(self) -> None:
        bc = self.boundary
        if not isinstance(bc.type, BoundaryType):
            raise InvalidConfigurationError(f"invalid boundary type {bc.type!r}")

        permeability = _real_scalar("permeability", bc.permeability)
        if permeability < 0.0:
            raise InvalidConfigurationError("permeability must be non-negative")

        mirror_order = _real_scalar("mirror_order", bc.mirror_order)
        if mirror_order < 0.0 or not mirror_order.is_integer():
            raise InvalidConfigurationError(
                f"mirror_order must be a non-negative integer, got {bc.mirror_order!r}"
            )

        if _real_scalar("pole_distance", bc.pole_distance) <= 0.0:
            raise InvalidConfigurationError("pole_distance must be positive")
        if _real_scalar("slice_length", bc.slice_length) <= 0.0:
            raise InvalidConfigurationError("slice_length must be positive")

        if _real_scalar("x_min", bc.x_min) >= _real_scalar("x_max", bc.x_max):
            raise InvalidConfigurationError("x_min must be smaller than x_max")
        if _real_scalar("y_min", bc.y_min) >= _real_scalar("y_max", bc.y_max):
            raise InvalidConfigurationError("y_min must be smaller than y_max")

    def _check_conductor_arrays(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        x = _real_vector("conductor x", self.conductors.x)
        y = _real_vector("conductor y", self.conductors.y)
        diameter = _real_vector("conductor diameter", self.conductors.diameter)

        n_conductor = x.size
        if y.size != n_conductor or diameter.size != n_conductor:
            raise InvalidConfigurationError(
                "conductor x, y and diameter must have the same length, "
                f"got {x.size}, {y.size} and {diameter.size}"
            )
        if np.any(diameter < 0.0):
            raise InvalidConfigurationError("conductor diameters must be non-negative")
        return x, y, diameter

    def _check_in_domain(self, x: np.ndarray, y: np.ndarray, r, label: str) -> None:
        bc = self.boundary
        outside = (
            ((x - r) < bc.x_min)
            | ((x + r) > bc.x_max)
            | ((y - r) < bc.y_min)
            | ((y + r) > bc.y_max)
        )
        if np.any(outside):
            idx = np.flatnonzero(outside)
            raise GeometryError(
                f"{label}(s) outside the domain at indices {idx.tolist()}"
            )

    @staticmethod
    def _check_overlap(x: np.ndarray, y: np.ndarray, r: np.ndarray) -> None:
        n_conductor = x.size
        idx_off = ~np.eye(n_conductor, dtype=bool)

        d_square = (x[:, None] - x[None, :]) ** 2 + (y[:, None] - y[None, :]) ** 2
        d_min_square = (r[:, None] + r[None, :]) ** 2

        coincident = idx_off & (d_square <= 0.0)
        if np.any(coincident):
            i, j = np.argwhere(coincident)[0]
            raise GeometryError(f"conductors {i} and {j} are coincident")

        overlap = idx_off & (d_square <= d_min_square)
        if np.any(overlap):
            i, j = np.argwhere(overlap)[0]
            raise GeometryError(f"conductors {i} and {j} overlap")
