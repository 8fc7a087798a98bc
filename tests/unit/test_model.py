import numpy as np
import pytest

from mirror_em_solver.core import (
    BoundaryCondition,
    BoundaryType,
    ConductorSet,
    InvalidConfigurationError,
)


def test_boundary_type_parse_accepts_members_and_strings():
    assert BoundaryType.parse(BoundaryType.XY) is BoundaryType.XY
    assert BoundaryType.parse("x_min") is BoundaryType.X_MIN
    assert BoundaryType.parse(" YY ") is BoundaryType.YY


@pytest.mark.parametrize(
    "value, expected",
    [
        ("XMin", BoundaryType.X_MIN),
        ("xmax", BoundaryType.X_MAX),
        ("Y_Min", BoundaryType.Y_MIN),
        ("YMAX", BoundaryType.Y_MAX),
        ("None", BoundaryType.NONE),
        ("XY", BoundaryType.XY),
    ],
)
def test_boundary_type_parse_accepts_names_without_underscore(value, expected):
    assert BoundaryType.parse(value) is expected


def test_boundary_type_parse_rejects_unknown_values():
    with pytest.raises(InvalidConfigurationError, match="invalid boundary type"):
        BoundaryType.parse("zz")
    with pytest.raises(ValueError):
        BoundaryType.parse(3)


def test_boundary_condition_coerces_type_and_derives_geometry():
    bc = BoundaryCondition(
        type="xx",
        permeability=3.0,
        x_min=-2.0,
        x_max=6.0,
        y_min=1.0,
        y_max=3.0,
        mirror_order=4,
    )

    assert bc.type is BoundaryType.XX
    assert bc.width == 8.0
    assert bc.height == 2.0
    assert bc.x_mirror == 2.0
    assert bc.y_mirror == 2.0
    assert bc.reflection_coefficient == pytest.approx(0.5)
    assert bc.pole_distance == 1.0
    assert bc.slice_length == 1.0


def test_boundary_condition_rejects_invalid_type_at_construction():
    with pytest.raises(InvalidConfigurationError):
        BoundaryCondition(type="corner", permeability=1.0, x_min=0.0, x_max=1.0, y_min=0.0, y_max=1.0)


def test_conductor_set_copies_and_freezes_arrays():
    x = np.array([0.0, 1.0])
    conductors = ConductorSet(x=x, y=[0.0, 0.0], diameter=[0.5, 0.0])
    x[0] = 42.0

    assert conductors.n_conductor == 2
    assert conductors.x[0] == 0.0
    np.testing.assert_array_equal(conductors.radius, [0.25, 0.0])

    with pytest.raises(ValueError):
        conductors.x[0] = 1.0
