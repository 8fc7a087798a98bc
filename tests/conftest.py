"""Test configuration and fixtures.

Policy:
- tests/unit are lightweight and always run in CI
- all non-unit tests are marked `slow` automatically
  (they sweep mirror orders or draw figures)
- figures are drawn with the non-interactive Agg backend
"""

from __future__ import annotations

from pathlib import Path

import matplotlib
import numpy as np
import pytest

matplotlib.use("Agg")

from mirror_em_solver.core import BoundaryCondition, BoundaryType, ConductorSet


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "slow: compute-intensive test")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    for item in items:
        p = Path(str(item.fspath))
        # Any test outside tests/unit is considered heavy by default.
        if "tests" in p.parts and "unit" not in p.parts:
            item.add_marker(pytest.mark.slow)


@pytest.fixture
def square_domain():
    """Factory for a [-10 mm, 10 mm]^2 boundary condition."""

    def _make(boundary_type=BoundaryType.NONE, permeability=1000.0, mirror_order=0, **kwargs):
        return BoundaryCondition(
            type=boundary_type,
            permeability=permeability,
            x_min=-10e-3,
            x_max=+10e-3,
            y_min=-10e-3,
            y_max=+10e-3,
            mirror_order=mirror_order,
            **kwargs,
        )

    return _make


@pytest.fixture
def wire_pair() -> ConductorSet:
    """Two 2 mm wires, 6 mm apart, off-center inside the square domain."""
    return ConductorSet(
        x=np.array([-3e-3, 3e-3]),
        y=np.array([1e-3, 1e-3]),
        diameter=np.array([2e-3, 2e-3]),
    )
