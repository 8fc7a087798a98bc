"""
Magnetic field and inductance of conductors and their images.

For a line current I at displacement (dx, dy) from the evaluation point,
with d² = dx² + dy²:

    H_x = -I * dy / (2π d²)
    H_y = +I * dx / (2π d²)

The partial inductance between two conductors at distance d is regularized
with a pole at distance d_pole (beyond which the energy is discarded):

    L = l_z * μ₀ / (2π) * ½ * ln(d_pole² / d²)

Since an isolated 2D line current stores infinite energy, the inductance
matrix is only meaningful for current patterns summing to zero. The self
term of a round conductor of radius r uses d² = r² * exp(-1/2), which adds
the energy stored inside the conductor. It is undefined (NaN) for line
conductors of zero diameter.

Matrix conventions:
    - geometry matrices: rows are evaluation points, columns are conductors
    - current matrices: rows are conductors, columns are operating points
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from ..utils.constants import INTERNAL_ENERGY_FACTOR, MU_0
from .model import ConductorSet, MirrorImageSet


class FieldInductanceEngine:
    """Field and inductance computation from conductors and images.

    Parameters
    ----------
    conductors : ConductorSet
        Original conductors.
    images : MirrorImageSet
        Image conductors generated from the boundary condition.
    pole_distance : float
        Regularization distance for the inductance [m].
    slice_length : float
        Length of the 2D slice used to scale the inductance [m].
    """

    def __init__(
        self,
        conductors: ConductorSet,
        images: MirrorImageSet,
        pole_distance: float,
        slice_length: float,
    ):
        self.conductors = conductors
        self.images = images
        self.pole_distance = float(pole_distance)
        self.slice_length = float(slice_length)

        self._x = np.asarray(conductors.x, dtype=np.float64)
        self._y = np.asarray(conductors.y, dtype=np.float64)
        self._r_square = (np.asarray(conductors.diameter, dtype=np.float64) / 2.0) ** 2
        self._inductance: Optional[np.ndarray] = None

    @property
    def n_conductor(self) -> int:
        return int(self._x.size)

    def inductance(self) -> np.ndarray:
        """Return the inductance matrix between the original conductors [H].

        Takes the images into account. The diagonal entry of a line conductor
        (zero diameter) is NaN.
        """
        if self._inductance is None:
            L = self._inductance_intern()
            if self.images.n_image > 0:
                L = L + self._inductance_extern()

            idx_zero = np.flatnonzero(self._r_square == 0.0)
            L[idx_zero, idx_zero] = np.nan
            self._inductance = L
        return self._inductance.copy()

    def field_at(self, x: np.ndarray, y: np.ndarray, currents: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """Return the field components (H_x, H_y) at the points (x, y) [A/m].

        Parameters
        ----------
        x, y : np.ndarray
            Evaluation coordinates, shape (n_point,).
        currents : np.ndarray
            Current excitation, shape (n_conductor, n_operating).

        Returns
        -------
        tuple[np.ndarray, np.ndarray]
            H_x and H_y with shape (n_point, n_operating). Rows of points
            located exactly on a line conductor or an image are NaN.
        """
        H_x, H_y = self._field_intern(x, y, currents)
        if self.images.n_image > 0:
            H_x_extern, H_y_extern = self._field_extern(x, y, currents)
            H_x = H_x + H_x_extern
            H_y = H_y + H_y_extern
        return H_x, H_y

    def _inductance_intern(self) -> np.ndarray:
        d_square = (self._x[:, None] - self._x[None, :]) ** 2 + (self._y[:, None] - self._y[None, :]) ** 2

        # correction for the energy stored inside the conductors
        np.fill_diagonal(d_square, self._r_square * INTERNAL_ENERGY_FACTOR)

        return self._inductance_sub(d_square)

    def _inductance_extern(self) -> np.ndarray:
        images = self.images
        x_image = np.asarray(images.x, dtype=np.float64)
        y_image = np.asarray(images.y, dtype=np.float64)

        d_square = (self._x[:, None] - x_image[None, :]) ** 2 + (self._y[:, None] - y_image[None, :]) ** 2
        L_image = self._inductance_sub(d_square)

        # collapse the images of a conductor into one weighted column
        add_image = np.zeros((images.n_image, self.n_conductor), dtype=np.float64)
        add_image[np.arange(images.n_image), images.conductor_index] = images.weight

        return L_image @ add_image

    def _inductance_sub(self, d_square: np.ndarray) -> np.ndarray:
        cst = self.slice_length * (MU_0 / (2.0 * np.pi))
        idx_zero = d_square == 0.0

        with np.errstate(divide="ignore"):
            L = cst * (0.5 * np.log(self.pole_distance ** 2 / d_square))
        L[idx_zero] = 0.0
        return L

    def _field_intern(self, x: np.ndarray, y: np.ndarray, currents: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        dx = x[:, None] - self._x[None, :]
        dy = y[:, None] - self._y[None, :]
        d_square = dx ** 2 + dy ** 2

        # inside a conductor, report the field at its surface
        r_square = np.broadcast_to(self._r_square[None, :], d_square.shape)
        idx = d_square < r_square
        d_square[idx] = r_square[idx]

        return self._field_sub(dx, dy, d_square, currents)

    def _field_extern(self, x: np.ndarray, y: np.ndarray, currents: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        images = self.images
        dx = x[:, None] - np.asarray(images.x, dtype=np.float64)[None, :]
        dy = y[:, None] - np.asarray(images.y, dtype=np.float64)[None, :]
        d_square = dx ** 2 + dy ** 2

        # image currents: back-referenced excitation scaled by the decay weight
        currents_image = images.weight[:, None] * currents[images.conductor_index, :]

        return self._field_sub(dx, dy, d_square, currents_image)

    @staticmethod
    def _field_sub(
        dx: np.ndarray,
        dy: np.ndarray,
        d_square: np.ndarray,
        currents: np.ndarray,
    ) -> Tuple[np.ndarray, np.ndarray]:
        idx_zero = d_square == 0.0
        d_safe = np.where(idx_zero, 1.0, d_square)

        cst = 1.0 / (2.0 * np.pi)
        H_x = (cst * np.where(idx_zero, 0.0, -dy / d_safe)) @ currents
        H_y = (cst * np.where(idx_zero, 0.0, dx / d_safe)) @ currents

        # ill-defined on top of a line conductor
        idx_nan = np.any(idx_zero, axis=1)
        H_x[idx_nan, :] = np.nan
        H_y[idx_nan, :] = np.nan
        return H_x, H_y
