"""Figures for mirroring problems: geometry, inductance, field, current sharing.

All functions draw a single operating point. Lengths are shown in mm, fields in
A/mm, inductances in uH and energies in uJ.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from ..circuit import CurrentSharingResult
from ..core import BoundaryCondition, ConductorSet, MirroringSolver


def _axes(ax: Optional[Axes], figsize=(7, 5)) -> tuple[Figure, Axes]:
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
        return fig, ax
    return ax.figure, ax


def _current_column(currents) -> np.ndarray:
    currents = np.asarray(currents)
    if currents.ndim == 1:
        currents = currents[:, None]
    if currents.ndim != 2 or currents.shape[1] != 1:
        raise ValueError(f"plots take a single operating point, got current shape {currents.shape}")
    return currents


def _energy_title(solver: MirroringSolver, currents: np.ndarray) -> str:
    energy = solver.energy(currents)[0]
    return f"Magnetic Field / E = {1e6 * np.real(energy):.2f} uJ"


def plot_geometry(
    boundary: BoundaryCondition,
    conductors: ConductorSet,
    ax: Optional[Axes] = None,
) -> Figure:
    """Domain outline and conductors (mm)."""
    fig, ax = _axes(ax)
    x_box = 1e3 * np.array([boundary.x_min, boundary.x_max, boundary.x_max, boundary.x_min, boundary.x_min])
    y_box = 1e3 * np.array([boundary.y_min, boundary.y_min, boundary.y_max, boundary.y_max, boundary.y_min])
    ax.plot(x_box, y_box, color="r", linewidth=2)

    phi = np.linspace(0.0, 2.0 * np.pi, 100)
    for x, y, d in zip(conductors.x, conductors.y, conductors.diameter):
        if d == 0:
            ax.plot(1e3 * x, 1e3 * y, "o", markeredgecolor="r", markerfacecolor="r", markersize=6)
        else:
            ax.plot(1e3 * (x + 0.5 * d * np.sin(phi)), 1e3 * (y + 0.5 * d * np.cos(phi)), color="r", linewidth=2)

    ax.set_aspect("equal")
    ax.autoscale(tight=True)
    ax.set_xlabel("x [mm]")
    ax.set_ylabel("y [mm]")
    return fig


def plot_inductance_matrix(solver: MirroringSolver, ax: Optional[Axes] = None) -> Figure:
    """Image of the inductance matrix (undefined entries left blank)."""
    fig, ax = _axes(ax)
    L = solver.inductance()

    image = ax.imshow(np.ma.masked_invalid(1e6 * L), interpolation="nearest")
    ax.set_xlabel("conductor [#]")
    ax.set_ylabel("conductor [#]")
    ax.set_xticks([])
    ax.set_yticks([])
    fig.colorbar(image, ax=ax, label="L [uH]")
    ax.set_title("Inductance Matrix")
    return fig


def plot_field_conductor(solver: MirroringSolver, currents, ax: Optional[Axes] = None) -> Figure:
    """Field norm and direction at the conductor centers."""
    fig, ax = _axes(ax)
    currents = _current_column(currents)
    conductors = solver.conductors

    H = solver.field_norm_at_conductors(currents)[:, 0]
    H_x, H_y = solver.field_at_conductors(currents)

    scatter = ax.scatter(1e3 * conductors.x, 1e3 * conductors.y, s=30, c=1e-3 * H)
    ax.quiver(1e3 * conductors.x, 1e3 * conductors.y, 1e-3 * np.real(H_x[:, 0]), 1e-3 * np.real(H_y[:, 0]))

    plot_geometry(solver.boundary, conductors, ax=ax)
    fig.colorbar(scatter, ax=ax, label="H [A/mm]")
    ax.set_title(_energy_title(solver, currents))
    return fig


def plot_field_space(
    solver: MirroringSolver,
    currents,
    n_x: int,
    n_y: int,
    margin: float,
    ax: Optional[Axes] = None,
) -> Figure:
    """Field norm map and direction on a regular grid inside the domain.

    Parameters
    ----------
    n_x, n_y : int
        Number of grid points along x and y.
    margin : float
        Distance kept from the domain boundaries [m].
    """
    if n_x < 2 or n_y < 2:
        raise ValueError("n_x and n_y must be at least 2")
    bc = solver.boundary
    if 2.0 * margin >= min(bc.width, bc.height) or margin < 0.0:
        raise ValueError("margin must be non-negative and smaller than half the domain size")

    fig, ax = _axes(ax)
    currents = _current_column(currents)

    x = np.linspace(bc.x_min + margin, bc.x_max - margin, n_x)
    y = np.linspace(bc.y_min + margin, bc.y_max - margin, n_y)
    x_mat, y_mat = np.meshgrid(x, y)

    H = solver.field_norm_at(x_mat.ravel(), y_mat.ravel(), currents)[:, 0].reshape(x_mat.shape)
    H_x, H_y = solver.field_at(x_mat.ravel(), y_mat.ravel(), currents)
    H_x = np.real(H_x[:, 0]).reshape(x_mat.shape)
    H_y = np.real(H_y[:, 0]).reshape(x_mat.shape)

    contour = ax.contourf(1e3 * x_mat, 1e3 * y_mat, 1e-3 * np.ma.masked_invalid(H), 200)
    ax.quiver(1e3 * x_mat, 1e3 * y_mat, 1e-3 * H_x, 1e-3 * H_y)

    plot_geometry(bc, solver.conductors, ax=ax)
    fig.colorbar(contour, ax=ax, label="H [A/mm]")
    ax.set_title(_energy_title(solver, currents))
    return fig


def plot_current_sharing(result: CurrentSharingResult, title: Optional[str] = None) -> Figure:
    """Amplitude and phase of the conductor currents and voltages."""
    fig, axes = plt.subplots(2, 2, figsize=(12, 8))
    f = result.frequencies
    currents = result.currents.T
    voltages = result.voltages.T

    axes[0, 0].semilogx(f, np.abs(currents))
    axes[0, 0].set_ylabel("I [A]")
    axes[0, 0].set_title("Current Amplitude")

    axes[0, 1].semilogx(f, np.rad2deg(np.unwrap(np.angle(currents), axis=0)))
    axes[0, 1].set_ylabel("phi [deg]")
    axes[0, 1].set_title("Current Phase")

    axes[1, 0].loglog(f, np.abs(voltages))
    axes[1, 0].set_ylabel("V [V]")
    axes[1, 0].set_title("Voltage Amplitude")

    axes[1, 1].semilogx(f, np.rad2deg(np.unwrap(np.angle(voltages), axis=0)))
    axes[1, 1].set_ylabel("phi [deg]")
    axes[1, 1].set_title("Voltage Phase")

    for ax in axes.flat:
        ax.grid(True)
        ax.set_xlabel("f [Hz]")

    if title is not None:
        fig.suptitle(title)
    fig.tight_layout()
    return fig
