"""
Example: Current sharing between two parallel stranded wires.

Two wires made of seven strands each carry opposite currents in free space.
The inductance matrix and the field patterns are computed with a homogeneous
current distribution, then the frequency dependent current sharing between
the strands is solved.
"""

import numpy as np
import matplotlib.pyplot as plt

from mirror_em_solver import (
    BoundaryCondition,
    ConductorSet,
    CurrentGroup,
    MirroringSolver,
    solve_current_sharing,
)
from mirror_em_solver.post import (
    plot_current_sharing,
    plot_field_conductor,
    plot_field_space,
    plot_inductance_matrix,
)


def main():
    """Run parallel wire example."""
    print("=" * 60)
    print("Example: Current sharing between parallel wires")
    print("=" * 60)

    # Problem parameters
    n_strand = 7               # Strands per wire
    strand_diameter = 2e-3     # Strand diameter [m]
    bundle_radius = 2.5e-3     # Radius of the outer strand ring [m]
    wire_offset = 5e-3         # Distance of each wire from the origin [m]
    strand_resistance = 5e-3   # Resistance of one strand [Ohm]
    current = 1.0              # Total current of each wire [A]

    bc = BoundaryCondition(
        type="none",
        permeability=5.0,
        x_min=-10e-3,
        x_max=+10e-3,
        y_min=-6e-3,
        y_max=+6e-3,
        mirror_order=5,
    )

    phi = (np.pi / 3) * np.arange(6)
    x_wire = np.concatenate([[0.0], bundle_radius * np.sin(phi)])
    y_wire = np.concatenate([[0.0], bundle_radius * np.cos(phi)])

    conductors = ConductorSet(
        x=np.concatenate([x_wire + wire_offset, x_wire - wire_offset]),
        y=np.concatenate([y_wire, y_wire]),
        diameter=np.full(2 * n_strand, strand_diameter),
    )

    print(f"\nParameters:")
    print(f"  Strands: 2 x {n_strand} (diameter {strand_diameter*1e3:.1f} mm)")
    print(f"  Wire distance: {2*wire_offset*1e3:.1f} mm")
    print(f"  Strand resistance: {strand_resistance*1e3:.1f} mOhm")

    solver = MirroringSolver(bc, conductors)

    # Homogeneous (DC) sharing
    I = np.concatenate([
        np.full(n_strand, current / n_strand),
        np.full(n_strand, -current / n_strand),
    ])[:, None]

    L = solver.inductance()
    energy = solver.energy(I)[0]
    print(f"\nInductance matrix: {L.shape[0]} x {L.shape[1]}")
    print(f"  Loop inductance (homogeneous sharing): {2*energy/current**2*1e6:.4f} uH")

    H = solver.field_norm_at_conductors(I)[:, 0]
    print(f"  Field at the strands: {H.min():.2f} ... {H.max():.2f} A/m")

    plot_inductance_matrix(solver).savefig("parallel_wire_inductance.png", dpi=150, bbox_inches="tight")
    plot_field_conductor(solver, I).savefig("parallel_wire_field_conductor.png", dpi=150, bbox_inches="tight")
    plot_field_space(solver, I, 60, 30, 0.5e-3).savefig("parallel_wire_field_space.png", dpi=150, bbox_inches="tight")

    # Frequency dependent sharing
    print("\nSolving current sharing...")
    frequencies = np.logspace(0, 5, 100)
    R = strand_resistance * np.eye(2 * n_strand)
    groups = [
        CurrentGroup("wire 1", range(0, n_strand), +current),
        CurrentGroup("wire 2", range(n_strand, 2 * n_strand), -current),
    ]
    result = solve_current_sharing(R, L, groups, frequencies)

    I_strand = np.abs(result.currents[:n_strand, :])
    print(f"  {'f [Hz]':>10} {'I_center [A]':>14} {'I_outer max [A]':>16}")
    for i in [0, 50, 99]:
        print(f"  {frequencies[i]:10.1f} {I_strand[0, i]:14.4f} {I_strand[1:, i].max():16.4f}")

    fig = plot_current_sharing(result, title="current sharing")
    fig.savefig("parallel_wire_current_sharing.png", dpi=150, bbox_inches="tight")
    print(f"\n  Plots saved to: parallel_wire_*.png")
    plt.close("all")

    print("\n" + "=" * 60)
    print("Example completed successfully!")
    print("=" * 60)

    return solver, result


if __name__ == "__main__":
    main()
