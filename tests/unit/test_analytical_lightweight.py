import numpy as np

from mirror_em_solver.utils.analytical import AnalyticalSolutions, ErrorMetrics
from mirror_em_solver.utils.constants import MU_0


def test_line_current_analytical_direction_and_magnitude():
    current = 1.0
    H_x, H_y = AnalyticalSolutions.line_current_field(np.array([0.01]), np.array([0.0]), current)

    expected_mag = current / (2 * np.pi * 0.01)
    got_mag = np.hypot(H_x[0], H_y[0])

    assert np.isclose(got_mag, expected_mag, rtol=1e-10)
    assert abs(H_x[0]) < 1e-14
    assert H_y[0] > 0


def test_image_of_unit_permeability_plane_vanishes():
    x = np.array([0.02, 0.05])
    y = np.array([0.01, -0.03])

    H_free = AnalyticalSolutions.line_current_field(x, y, 2.0, (0.01, 0.0))
    H_plane = AnalyticalSolutions.line_current_field_near_plane(x, y, 2.0, (0.01, 0.0), 0.0, 1.0)

    np.testing.assert_allclose(H_plane, H_free, rtol=1e-14)


def test_two_wire_loop_matches_partial_inductances():
    distance, radius, length = 0.01, 1e-3, 2.0

    L_self = AnalyticalSolutions.partial_self_inductance(radius, 1.0, length)
    L_mutual = length * MU_0 / (2 * np.pi) * np.log(1.0 / distance)
    L_loop = AnalyticalSolutions.two_wire_loop_inductance(distance, radius, length)

    assert np.isclose(2 * (L_self - L_mutual), L_loop, rtol=1e-12)


def test_error_metrics_are_zero_for_identical_arrays():
    a = np.array([1.0, 2.0, 3.0])
    b = np.array([1.0, 2.0, 3.0])

    assert ErrorMetrics.l2_error(a, b) == 0.0
    assert ErrorMetrics.max_error(a, b) == 0.0
    assert ErrorMetrics.l2_relative_error(a, b) == 0.0
