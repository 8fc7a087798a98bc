"""Post-processing and visualization."""

from .plotting import (
    plot_current_sharing,
    plot_field_conductor,
    plot_field_space,
    plot_geometry,
    plot_inductance_matrix,
)

__all__ = [
    "plot_current_sharing",
    "plot_field_conductor",
    "plot_field_space",
    "plot_geometry",
    "plot_inductance_matrix",
]
