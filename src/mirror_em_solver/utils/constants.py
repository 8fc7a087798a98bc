"""Physical constants and numerical settings for the mirroring method."""

import numpy as np

# Physical constants (SI units)
MU_0 = 4 * np.pi * 1e-7          # Permeability of free space [H/m]

# Energy stored inside a round conductor with uniform current density:
# the self term uses an equivalent radius r * exp(-1/4), i.e. r^2 * exp(-1/2)
INTERNAL_ENERGY_FACTOR = np.exp(-1.0 / 2.0)

# Default regularization lengths [m]
DEFAULT_POLE_DISTANCE = 1.0
DEFAULT_SLICE_LENGTH = 1.0

# Above this number of (image, conductor) pairs the dense matrices become
# large enough to be worth a warning (8 bytes per entry, several matrices).
IMAGE_MATRIX_WARNING_SIZE = 5_000_000
