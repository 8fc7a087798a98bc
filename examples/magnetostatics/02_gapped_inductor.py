"""
Example: Winding of a gapped inductor.

Twelve round conductors sit in the winding window of a magnetic core
(four magnetic boundaries). The two air gaps are modelled as line
conductors placed on the vertical boundaries and carrying the opposite
magnetomotive force.

The line conductors have no self-inductance, so the stored energy is
undefined (NaN) and only the field patterns are meaningful.
"""

import numpy as np
import matplotlib.pyplot as plt

from mirror_em_solver import BoundaryCondition, ConductorSet, MirroringSolver
from mirror_em_solver.post import plot_field_conductor, plot_field_space, plot_inductance_matrix


def main():
    """Run gapped inductor example."""
    print("=" * 60)
    print("Example: Gapped inductor winding")
    print("=" * 60)

    turn_current = 2.0         # Current per turn [A]
    n_turn = 12                # Number of turns

    bc = BoundaryCondition(
        type="xy",
        permeability=25.0,
        x_min=-6e-3,
        x_max=+6e-3,
        y_min=-8e-3,
        y_max=+8e-3,
        mirror_order=5,
    )

    y_turn = np.concatenate([np.linspace(-6e-3, 6e-3, 6), np.linspace(-6e-3, 6e-3, 6)])
    x_turn = np.concatenate([np.full(6, -2e-3), np.full(6, +2e-3)])

    conductors = ConductorSet(
        x=np.concatenate([x_turn, [-6e-3, +6e-3]]),
        y=np.concatenate([y_turn, [0.0, 0.0]]),
        diameter=np.concatenate([np.full(n_turn, 2e-3), np.zeros(2)]),
    )

    solver = MirroringSolver(bc, conductors)
    print(f"\n  Conductors: {solver.n_conductor}, images: {solver.images.n_image}")

    # each gap carries half of the winding magnetomotive force
    I = np.concatenate([np.full(n_turn, turn_current), np.full(2, -n_turn * turn_current / 2)])[:, None]

    H = solver.field_norm_at_conductors(I)[:n_turn, 0]
    print(f"  Field at the turns: {H.min():.1f} ... {H.max():.1f} A/m")
    print(f"  Energy: {solver.energy(I)[0]} J (undefined with line conductors)")

    plot_inductance_matrix(solver).savefig("inductor_inductance.png", dpi=150, bbox_inches="tight")
    plot_field_conductor(solver, I).savefig("inductor_field_conductor.png", dpi=150, bbox_inches="tight")
    plot_field_space(solver, I, 30, 60, 0.5e-3).savefig("inductor_field_space.png", dpi=150, bbox_inches="tight")
    print(f"\n  Plots saved to: inductor_*.png")
    plt.close("all")

    print("\n" + "=" * 60)
    print("Example completed successfully!")
    print("=" * 60)

    return solver


if __name__ == "__main__":
    main()
