"""Analytical solutions for validating the mirroring method."""

import numpy as np

from .constants import INTERNAL_ENERGY_FACTOR, MU_0


class AnalyticalSolutions:
    """Collection of closed-form 2D magnetostatic solutions."""

    @staticmethod
    def line_current_field(
        x: np.ndarray,
        y: np.ndarray,
        current: float,
        position: tuple = (0.0, 0.0),
    ) -> tuple:
        """Analytical H-field of an infinite line current along z.

        For a current I at (x0, y0):
            H_φ = I / (2πr)

        In Cartesian coordinates:
            H_x = -I * (y - y0) / (2πr²)
            H_y =  I * (x - x0) / (2πr²)

        Parameters
        ----------
        x, y : np.ndarray
            Evaluation coordinates [m]
        current : float
            Current in the line [A]
        position : tuple
            (x0, y0) position of the line [m]

        Returns
        -------
        tuple
            (H_x, H_y) in A/m, same shape as ``x``
        """
        dx = np.asarray(x, dtype=float) - position[0]
        dy = np.asarray(y, dtype=float) - position[1]
        r_square = dx**2 + dy**2

        H_x = -current * dy / (2 * np.pi * r_square)
        H_y = current * dx / (2 * np.pi * r_square)
        return H_x, H_y

    @staticmethod
    def line_current_field_near_plane(
        x: np.ndarray,
        y: np.ndarray,
        current: float,
        position: tuple,
        x_plane: float,
        permeability: float,
    ) -> tuple:
        """H-field of a line current in air next to a magnetic half-space.

        The half-space x < x_plane has relative permeability mu. In the air
        region the field is the one of the original current plus an image at
        (2 x_plane - x0, y0) carrying (mu - 1) / (mu + 1) times the current.
        """
        k = (permeability - 1.0) / (permeability + 1.0)
        image = (2 * x_plane - position[0], position[1])

        H_x, H_y = AnalyticalSolutions.line_current_field(x, y, current, position)
        H_x_image, H_y_image = AnalyticalSolutions.line_current_field(x, y, k * current, image)
        return H_x + H_x_image, H_y + H_y_image

    @staticmethod
    def two_wire_loop_inductance(
        distance: float,
        radius: float,
        length: float = 1.0,
    ) -> float:
        """Inductance of a loop made of two parallel round wires in free space.

        With uniform current density (internal inductance included):
            L = μ₀ l / π * (ln(D / r) + 1/4)

        Parameters
        ----------
        distance : float
            Center-to-center distance D [m]
        radius : float
            Wire radius r [m]
        length : float
            Length of the line l [m]

        Returns
        -------
        float
            Loop inductance [H]
        """
        return MU_0 * length / np.pi * (np.log(distance / radius) + 0.25)

    @staticmethod
    def partial_self_inductance(
        radius: float,
        pole_distance: float,
        length: float = 1.0,
    ) -> float:
        """Self term of a round wire regularized with a pole distance.

            L = μ₀ l / (2π) * ln(d_pole / (r * exp(-1/4)))
        """
        r_square = radius**2 * INTERNAL_ENERGY_FACTOR
        return length * MU_0 / (2 * np.pi) * 0.5 * np.log(pole_distance**2 / r_square)


class ErrorMetrics:
    """Error metrics for comparing numerical and analytical solutions."""

    @staticmethod
    def l2_error(numerical: np.ndarray, analytical: np.ndarray) -> float:
        """Compute discrete L2 norm of the error.

            L2_error = sqrt(sum(|u_num - u_ana|²))
        """
        diff = numerical - analytical
        return np.sqrt(np.sum(np.abs(diff)**2))

    @staticmethod
    def l2_relative_error(numerical: np.ndarray, analytical: np.ndarray) -> float:
        """Compute relative L2 error."""
        l2_err = ErrorMetrics.l2_error(numerical, analytical)
        l2_ana = np.sqrt(np.sum(np.abs(analytical)**2))

        if l2_ana < 1e-15:
            return l2_err

        return l2_err / l2_ana

    @staticmethod
    def max_error(numerical: np.ndarray, analytical: np.ndarray) -> float:
        """Compute maximum absolute error (L∞ norm)."""
        return np.max(np.abs(numerical - analytical))
