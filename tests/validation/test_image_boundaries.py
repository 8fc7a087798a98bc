"""Physical checks of the image method against closed-form results."""

import numpy as np
import pytest

from mirror_em_solver import BoundaryType, MirroringSolver
from mirror_em_solver.core import ConductorSet
from mirror_em_solver.utils.analytical import AnalyticalSolutions, ErrorMetrics

from tests.tolerances import CLOSED_FORM_REL_TOL, FIELD_ABS_TOL, INDUCTANCE_ABS_TOL, TRUNCATION_REL_TOL

LOOP = np.array([[1.0], [-1.0]])
ALL_TYPES = list(BoundaryType)


def _loop_inductance(solver: MirroringSolver) -> float:
    return float(2 * solver.energy(LOOP)[0])


def _three_conductors() -> ConductorSet:
    return ConductorSet(
        x=np.array([-3e-3, 3e-3, 1e-3]),
        y=np.array([1e-3, 1e-3, -6e-3]),
        diameter=np.array([2e-3, 2e-3, 1e-3]),
    )


@pytest.mark.parametrize("boundary_type", ALL_TYPES)
def test_unit_permeability_is_free_space(square_domain, boundary_type):
    conductors = _three_conductors()
    free = MirroringSolver(square_domain(BoundaryType.NONE), conductors)
    mirrored = MirroringSolver(square_domain(boundary_type, permeability=1.0, mirror_order=2), conductors)

    np.testing.assert_allclose(mirrored.inductance(), free.inductance(), rtol=CLOSED_FORM_REL_TOL)

    x = np.array([0.0, -8e-3, 7e-3])
    y = np.array([5e-3, -2e-3, 9e-3])
    currents = np.array([[1.0], [-0.5], [2.0]])
    H_x, H_y = mirrored.field_at(x, y, currents)
    H_x_free, H_y_free = free.field_at(x, y, currents)
    np.testing.assert_allclose(H_x, H_x_free, rtol=CLOSED_FORM_REL_TOL, atol=FIELD_ABS_TOL)
    np.testing.assert_allclose(H_y, H_y_free, rtol=CLOSED_FORM_REL_TOL, atol=FIELD_ABS_TOL)


def test_single_boundary_matches_the_half_space_solution(square_domain):
    position = (-4e-3, 2e-3)
    conductors = ConductorSet(x=np.array([position[0]]), y=np.array([position[1]]), diameter=np.array([1e-3]))
    solver = MirroringSolver(square_domain(BoundaryType.X_MIN, permeability=5.0), conductors)

    x = np.array([-10e-3, -6e-3, 0.0, 8e-3])
    y = np.array([0.0, 7e-3, -3e-3, 9e-3])
    H_x, H_y = solver.field_at(x, y, np.array([[2.5]]))
    H_x_ref, H_y_ref = AnalyticalSolutions.line_current_field_near_plane(x, y, 2.5, position, -10e-3, 5.0)

    assert ErrorMetrics.l2_relative_error(H_x[:, 0], H_x_ref) < CLOSED_FORM_REL_TOL * 10
    assert ErrorMetrics.l2_relative_error(H_y[:, 0], H_y_ref) < CLOSED_FORM_REL_TOL * 10


def test_highly_permeable_plane_cancels_the_tangential_field(square_domain):
    conductors = ConductorSet(x=np.array([-4e-3]), y=np.array([1e-3]), diameter=np.array([1e-3]))
    solver = MirroringSolver(square_domain(BoundaryType.X_MIN, permeability=1e9), conductors)

    y = np.linspace(-10e-3, 10e-3, 9)
    H_x, H_y = solver.field_at(np.full(y.size, -10e-3), y, np.array([[1.0]]))

    H_x_free, _ = AnalyticalSolutions.line_current_field(np.full(y.size, -10e-3), y, 1.0, (-4e-3, 1e-3))

    np.testing.assert_allclose(H_y[:, 0], 0.0, atol=1e-6)
    # the normal component doubles
    np.testing.assert_allclose(H_x[:, 0], 2 * H_x_free, rtol=1e-6, atol=FIELD_ABS_TOL)


def test_highly_permeable_walls_cancel_the_tangential_field(square_domain):
    conductors = ConductorSet(x=np.array([-8e-3]), y=np.array([0.0]), diameter=np.array([1e-3]))
    solver = MirroringSolver(square_domain(BoundaryType.XX, permeability=1e9, mirror_order=20), conductors)

    # tangential component on the x_min wall, facing the conductor
    _, H_y = solver.field_at(np.array([-10e-3]), np.array([0.0]), np.array([[1.0]]))
    _, H_y_free = AnalyticalSolutions.line_current_field(np.array([-10e-3]), np.array([0.0]), 1.0, (-8e-3, 0.0))

    assert abs(H_y[0, 0]) < TRUNCATION_REL_TOL * abs(H_y_free[0])


def test_loop_inductance_converges_with_mirror_order(square_domain, wire_pair):
    L_20 = _loop_inductance(MirroringSolver(square_domain(BoundaryType.XX, mirror_order=20), wire_pair))
    L_40 = _loop_inductance(MirroringSolver(square_domain(BoundaryType.XX, mirror_order=40), wire_pair))

    assert abs(L_40 - L_20) < TRUNCATION_REL_TOL * L_40


@pytest.mark.parametrize("boundary_type", ALL_TYPES)
def test_inductance_matrix_is_symmetric(square_domain, boundary_type):
    solver = MirroringSolver(square_domain(boundary_type, permeability=30.0, mirror_order=3), _three_conductors())
    L = solver.inductance()

    np.testing.assert_allclose(L, L.T, rtol=1e-10, atol=INDUCTANCE_ABS_TOL)


@pytest.mark.parametrize("boundary_type", ALL_TYPES)
def test_loop_inductance_does_not_depend_on_the_pole_distance(square_domain, wire_pair, boundary_type):
    near = MirroringSolver(square_domain(boundary_type, permeability=50.0, mirror_order=2, pole_distance=0.1), wire_pair)
    far = MirroringSolver(square_domain(boundary_type, permeability=50.0, mirror_order=2, pole_distance=10.0), wire_pair)

    assert _loop_inductance(near) == pytest.approx(_loop_inductance(far), rel=1e-9)
    assert not np.allclose(near.inductance(), far.inductance())


def test_free_space_loop_matches_two_wire_formula(square_domain, wire_pair):
    solver = MirroringSolver(square_domain(slice_length=0.25), wire_pair)
    expected = AnalyticalSolutions.two_wire_loop_inductance(6e-3, 1e-3, length=0.25)

    assert _loop_inductance(solver) == pytest.approx(expected, rel=CLOSED_FORM_REL_TOL)


def test_magnetic_box_increases_loop_inductance(square_domain, wire_pair):
    air = MirroringSolver(square_domain(BoundaryType.XY, permeability=1.0, mirror_order=5), wire_pair)
    core = MirroringSolver(square_domain(BoundaryType.XY, permeability=1000.0, mirror_order=5), wire_pair)

    assert _loop_inductance(core) > _loop_inductance(air)
