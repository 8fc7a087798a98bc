"""Problem definition: magnetic boundaries, conductors and their images."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

import numpy as np

from ..utils.constants import DEFAULT_POLE_DISTANCE, DEFAULT_SLICE_LENGTH
from .errors import InvalidConfigurationError


class BoundaryType(str, Enum):
    """Arrangement of the magnetic boundaries around the rectangular domain.

    ``NONE``
        Conductors in free space.
    ``X_MIN``, ``X_MAX``, ``Y_MIN``, ``Y_MAX``
        A single magnetic boundary on the named side of the domain.
    ``XX``, ``YY``
        Two parallel boundaries (both x sides, or both y sides).
    ``XY``
        A closed box of four boundaries.
    """

    NONE = "none"
    X_MIN = "x_min"
    X_MAX = "x_max"
    Y_MIN = "y_min"
    Y_MAX = "y_max"
    XX = "xx"
    YY = "yy"
    XY = "xy"

    @classmethod
    def parse(cls, value: Union["BoundaryType", str]) -> "BoundaryType":
        """Return the member matching ``value``.

        Accepts a member or its string value, case-insensitive and with or
        without the underscore (``"x_min"``, ``"XMin"``).
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace("_", "")
            for member in cls:
                if member.value.replace("_", "") == key:
                    return member
        valid = ", ".join(member.value for member in cls)
        raise InvalidConfigurationError(
            f"invalid boundary type {value!r}; expected one of: {valid}"
        )


@dataclass(frozen=True)
class BoundaryCondition:
    """Magnetic boundaries and regularization lengths of a 2D problem.

    Parameters
    ----------
    type
        Boundary arrangement (``BoundaryType`` or its string value).
    permeability
        Relative permeability of the magnetic core material.
    x_min, x_max, y_min, y_max
        Bounds of the rectangular domain [m].
    mirror_order
        Number of reflection generations for two- and four-boundary cases.
    pole_distance
        Reference distance regularizing the self-inductance of line currents [m].
    slice_length
        Depth of the 2D cross-section, scales the inductance [m].
    """

    type: BoundaryType
    permeability: float
    x_min: float
    x_max: float
    y_min: float
    y_max: float
    mirror_order: int = 0
    pole_distance: float = DEFAULT_POLE_DISTANCE
    slice_length: float = DEFAULT_SLICE_LENGTH

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", BoundaryType.parse(self.type))

    @property
    def width(self) -> float:
        return float(self.x_max - self.x_min)

    @property
    def height(self) -> float:
        return float(self.y_max - self.y_min)

    @property
    def x_mirror(self) -> float:
        """x coordinate of the vertical midline used as flip axis."""
        return float(0.5 * (self.x_min + self.x_max))

    @property
    def y_mirror(self) -> float:
        """y coordinate of the horizontal midline used as flip axis."""
        return float(0.5 * (self.y_min + self.y_max))

    @property
    def reflection_coefficient(self) -> float:
        """Image weight for one boundary crossing: (mu - 1) / (mu + 1)."""
        mu = float(self.permeability)
        return (mu - 1.0) / (mu + 1.0)


def _frozen_vector(values) -> np.ndarray:
    array = np.array(values, copy=True)
    array.setflags(write=False)
    return array


@dataclass(frozen=True)
class ConductorSet:
    """Ordered round conductors with uniform current density.

    A diameter of zero denotes an idealized line conductor, which is a
    singularity of both the field and the self-inductance.

    Parameters
    ----------
    x, y
        Center coordinates [m].
    diameter
        Conductor diameters [m].
    """

    x: np.ndarray
    y: np.ndarray
    diameter: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", _frozen_vector(self.x))
        object.__setattr__(self, "y", _frozen_vector(self.y))
        object.__setattr__(self, "diameter", _frozen_vector(self.diameter))

    @property
    def n_conductor(self) -> int:
        return int(self.x.size)

    @property
    def radius(self) -> np.ndarray:
        return self.diameter / 2.0


@dataclass(frozen=True)
class MirrorImageSet:
    """Flat list of image conductors.

    ``conductor_index`` holds, for every image, the 0-based index of the
    original conductor it replicates; ``weight`` is its decay weight.
    """

    x: np.ndarray
    y: np.ndarray
    weight: np.ndarray
    conductor_index: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", _frozen_vector(self.x))
        object.__setattr__(self, "y", _frozen_vector(self.y))
        object.__setattr__(self, "weight", _frozen_vector(self.weight))
        object.__setattr__(self, "conductor_index", _frozen_vector(self.conductor_index))

    @property
    def n_image(self) -> int:
        return int(self.x.size)

    @classmethod
    def empty(cls) -> "MirrorImageSet":
        return cls(
            x=np.zeros(0, dtype=np.float64),
            y=np.zeros(0, dtype=np.float64),
            weight=np.zeros(0, dtype=np.float64),
            conductor_index=np.zeros(0, dtype=np.int64),
        )
