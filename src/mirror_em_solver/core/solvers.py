"""
Mirroring method (method of images) for 2D magnetostatic problems.

Conductors surrounded by magnetic materials are modelled by replacing every
magnetic boundary with weighted image conductors. Supported arrangements:
    - no magnetic boundary (free space)
    - a single magnetic boundary
    - two parallel magnetic boundaries
    - a box of four magnetic boundaries

Results:
    - magnetic field (vector or norm) at arbitrary points or conductor centers
    - inductance matrix
    - stored energy

Currents are given as a matrix: rows are conductors, columns are operating
points evaluated together.

Warnings:
    - The energy of a single 2D conductor is infinite (no return path). A pole
      at ``pole_distance`` truncates it, so energy and inductance are only
      meaningful when the currents sum to zero.
    - Line conductors (zero diameter) are singularities: the field diverges
      close to them and their self-inductance is undefined (NaN).
    - Many images may be required; the dense matrices grow with the number of
      images times the number of conductors.

References:
    - Muehlethaler, J. / Modeling and Multi-Objective Optimization of
      Inductive Power Components / ETHZ / 2012
    - Ferreira, J.A. / Electromagnetic Modelling of Power Electronic
      Converters / Kluwer Academic Publishers / 1989
    - Binns, K.J. and Lawrenson, P.J. / Analysis and Computation of Electric
      and Magnetic Field Problems / Elsevier / 1973
"""

from __future__ import annotations

import logging
from typing import Tuple

import numpy as np

from .images import MirrorImageGenerator
from .model import BoundaryCondition, ConductorSet, MirrorImageSet
from .physics import FieldInductanceEngine
from .validation import Validator

logger = logging.getLogger(__name__)


class MirroringSolver:
    """Field, inductance and energy of conductors between magnetic boundaries.

    The problem is validated, mirrored and prepared once at construction;
    every query validates its own arguments before evaluation.

    Parameters
    ----------
    boundary : BoundaryCondition
        Boundary type, permeability, domain and regularization lengths.
    conductors : ConductorSet
        Conductor positions and diameters.

    Raises
    ------
    ValidationError
        If the problem definition is invalid (see ``core.errors``).
    """

    def __init__(self, boundary: BoundaryCondition, conductors: ConductorSet):
        self._boundary = boundary
        self._conductors = conductors

        self._validator = Validator(boundary, conductors)
        self._validator.validate_boundary_and_conductors()

        self._images = MirrorImageGenerator(boundary, conductors).generate()

        self._engine = FieldInductanceEngine(
            conductors,
            self._images,
            pole_distance=boundary.pole_distance,
            slice_length=boundary.slice_length,
        )
        logger.debug(
            "mirroring solver ready: %d conductors, %d images, boundary %s",
            conductors.n_conductor,
            self._images.n_image,
            boundary.type.value,
        )

    @property
    def boundary(self) -> BoundaryCondition:
        return self._boundary

    @property
    def conductors(self) -> ConductorSet:
        return self._conductors

    @property
    def images(self) -> MirrorImageSet:
        return self._images

    @property
    def n_conductor(self) -> int:
        return self._conductors.n_conductor

    def field_at(self, x, y, currents) -> Tuple[np.ndarray, np.ndarray]:
        """Vector magnetic field at the given coordinates.

        Parameters
        ----------
        x, y : array_like
            Evaluation coordinates inside the domain, shape (n_point,).
        currents : array_like
            Current excitation, shape (n_conductor, n_operating).

        Returns
        -------
        tuple[np.ndarray, np.ndarray]
            H_x and H_y [A/m], shape (n_point, n_operating).
        """
        x, y = self._validator.validate_points(x, y)
        currents = self._validator.validate_current_matrix(currents)
        return self._engine.field_at(x, y, currents)

    def field_norm_at(self, x, y, currents) -> np.ndarray:
        """Norm of the magnetic field at the given coordinates [A/m]."""
        H_x, H_y = self.field_at(x, y, currents)
        return np.hypot(np.abs(H_x), np.abs(H_y))

    def field_at_conductors(self, currents) -> Tuple[np.ndarray, np.ndarray]:
        """Vector magnetic field at the center of the conductors.

        Inside a round conductor, the field of that conductor is evaluated at
        its surface. The rows of line conductors are NaN.
        """
        currents = self._validator.validate_current_matrix(currents)
        x = np.asarray(self._conductors.x, dtype=np.float64)
        y = np.asarray(self._conductors.y, dtype=np.float64)
        return self._engine.field_at(x, y, currents)

    def field_norm_at_conductors(self, currents) -> np.ndarray:
        """Norm of the magnetic field at the center of the conductors [A/m]."""
        H_x, H_y = self.field_at_conductors(currents)
        return np.hypot(np.abs(H_x), np.abs(H_y))

    def inductance(self) -> np.ndarray:
        """Inductance matrix between the conductors [H], shape (n, n)."""
        return self._engine.inductance()

    def energy(self, currents) -> np.ndarray:
        """Stored energy for every operating point [J], shape (n_operating,).

        If the inductance matrix holds any NaN entry (line conductors), the
        energy is NaN for every operating point.
        """
        currents = self._validator.validate_current_matrix(currents)
        L = self._engine.inductance()

        if np.any(np.isnan(L)):
            logger.warning("inductance matrix is singular (line conductors): energy is undefined")
            return np.full(currents.shape[1], np.nan)

        return 0.5 * np.einsum("ic,ij,jc->c", currents, L, currents)
