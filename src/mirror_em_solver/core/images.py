"""Placement and weighting of the image conductors.

Every magnetic boundary is replaced by virtual conductors. An image is
indexed by the number of reflection steps ``(i, j)`` along x and y; the pair
``(0, 0)`` is the original conductor and is never generated.

Along each axis an even step is a pure translation by ``step * extent`` and an
odd step is a translation combined with a flip around the domain midline:

    even:  pos' = step * extent + pos
    odd:   pos' = step * extent + (2 * mirror_line - pos)

For a finite permeability mu, an image crossing ``max(|i|, |j|)`` boundaries
is weighted by ``((mu - 1) / (mu + 1)) ** max(|i|, |j|)``.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

import numpy as np

from ..utils.constants import IMAGE_MATRIX_WARNING_SIZE
from .errors import InvalidConfigurationError
from .model import BoundaryCondition, BoundaryType, ConductorSet, MirrorImageSet

logger = logging.getLogger(__name__)

_SINGLE_BOUNDARY_STEPS = {
    BoundaryType.X_MIN: (-1, 0),
    BoundaryType.X_MAX: (+1, 0),
    BoundaryType.Y_MIN: (0, -1),
    BoundaryType.Y_MAX: (0, +1),
}


def image_indices(boundary_type: BoundaryType, mirror_order: int) -> List[Tuple[int, int]]:
    """Return the reflection steps ``(i, j)`` of the images to generate.

    Parameters
    ----------
    boundary_type : BoundaryType
        Arrangement of the magnetic boundaries.
    mirror_order : int
        Number of reflection generations (two- and four-boundary cases only).

    Returns
    -------
    list of tuple
        Steps along x and y, without the original ``(0, 0)``.
    """
    if boundary_type == BoundaryType.NONE:
        steps = []
    elif boundary_type in _SINGLE_BOUNDARY_STEPS:
        steps = [_SINGLE_BOUNDARY_STEPS[boundary_type]]
    else:
        n_idx = range(-int(mirror_order), int(mirror_order) + 1)
        if boundary_type == BoundaryType.XX:
            steps = [(i, 0) for i in n_idx]
        elif boundary_type == BoundaryType.YY:
            steps = [(0, j) for j in n_idx]
        elif boundary_type == BoundaryType.XY:
            steps = [(i, j) for i in n_idx for j in n_idx]
        else:
            raise InvalidConfigurationError(f"invalid boundary type {boundary_type!r}")

    return [step for step in steps if step != (0, 0)]


def _mirror_axis(pos: np.ndarray, step: int, extent: float, mirror_line: float) -> np.ndarray:
    shift = step * extent
    if step % 2 == 0:
        return shift + pos
    return shift + (2.0 * mirror_line - pos)


class MirrorImageGenerator:
    """Mirror the conductors with respect to the boundary conditions.

    Parameters
    ----------
    boundary : BoundaryCondition
        Magnetic boundaries (validated).
    conductors : ConductorSet
        Original conductors (validated).
    """

    def __init__(self, boundary: BoundaryCondition, conductors: ConductorSet):
        self.boundary = boundary
        self.conductors = conductors

    def generate(self) -> MirrorImageSet:
        """Build the image set for all reflection steps of the boundary type."""
        bc = self.boundary
        steps = image_indices(bc.type, bc.mirror_order)
        if not steps:
            logger.debug("boundary %s: no image conductors", bc.type.value)
            return MirrorImageSet.empty()

        x = np.asarray(self.conductors.x, dtype=np.float64)
        y = np.asarray(self.conductors.y, dtype=np.float64)
        n_conductor = x.size
        k_base = bc.reflection_coefficient

        x_list, y_list, k_list, idx_list = [], [], [], []
        for i, j in steps:
            x_list.append(_mirror_axis(x, i, bc.width, bc.x_mirror))
            y_list.append(_mirror_axis(y, j, bc.height, bc.y_mirror))
            k_list.append(np.full(n_conductor, k_base ** max(abs(i), abs(j))))
            idx_list.append(np.arange(n_conductor, dtype=np.int64))

        images = MirrorImageSet(
            x=np.concatenate(x_list),
            y=np.concatenate(y_list),
            weight=np.concatenate(k_list),
            conductor_index=np.concatenate(idx_list),
        )

        logger.debug(
            "boundary %s, mirror order %d: %d image conductors for %d conductors",
            bc.type.value,
            int(bc.mirror_order),
            images.n_image,
            n_conductor,
        )
        matrix_size = images.n_image * n_conductor
        if matrix_size > IMAGE_MATRIX_WARNING_SIZE:
            logger.warning(
                "large image set: %d images x %d conductors (mirror order %d); "
                "field and inductance evaluation will be memory intensive",
                images.n_image,
                n_conductor,
                int(bc.mirror_order),
            )
        return images
