import math

import numpy as np
import pytest

from stewartplatform.motion import ArcSegment, arc_to_center, cubic_lut, flatten_arc, quadratic_lut
from stewartplatform.motion.curves import angle_between

DEGREE_RADIUS = 180 / math.pi


def test_quadratic_lut_endpoints_and_size():
    points = quadratic_lut((0, 0), (5, 10), (10, 0), 100)

    assert points.shape == (101, 2)
    np.testing.assert_allclose(points[0], [0, 0])
    np.testing.assert_allclose(points[-1], [10, 0])
    np.testing.assert_allclose(points[50], [5, 5])


def test_cubic_lut_endpoints_and_size():
    points = cubic_lut((0, 0), (0, 10), (10, 10), (10, 0), 20)

    assert points.shape == (21, 2)
    np.testing.assert_allclose(points[0], [0, 0])
    np.testing.assert_allclose(points[-1], [10, 0])
    np.testing.assert_allclose(points[10], [5, 7.5])


def test_angle_between_is_signed():
    assert angle_between(1, 0, 0, 1) == pytest.approx(math.pi / 2)
    assert angle_between(1, 0, 0, -1) == pytest.approx(-math.pi / 2)
    # parallel vectors may round outside the acos domain
    assert angle_between(1, 1e-17, 3, 3e-17) == pytest.approx(0)


def test_half_circle_center():
    arc = ArcSegment(rx=5, ry=5, x_axis_rotation=0, large_arc=False, sweep=True, x=10, y=0)
    center = arc_to_center(0, 0, arc)

    assert (center.cx, center.cy) == (pytest.approx(5), pytest.approx(0, abs=1e-12))
    assert center.theta1 == pytest.approx(math.pi)
    assert center.delta_theta == pytest.approx(math.pi)


def test_sweep_flag_chooses_direction():
    arc = ArcSegment(rx=5, ry=5, x_axis_rotation=0, large_arc=False, sweep=False, x=10, y=0)

    assert arc_to_center(0, 0, arc).delta_theta == pytest.approx(-math.pi)


def test_large_arc_point_count_is_one_per_two_degrees():
    # three quarters of a circle around the origin
    arc = ArcSegment(rx=DEGREE_RADIUS, ry=DEGREE_RADIUS, x_axis_rotation=0, large_arc=True, sweep=True,
                     x=0, y=-DEGREE_RADIUS)
    center = arc_to_center(DEGREE_RADIUS, 0, arc)
    points = flatten_arc(DEGREE_RADIUS, 0, arc, 2.0)

    assert math.degrees(center.delta_theta) == pytest.approx(270)
    assert len(points) == math.ceil(abs(math.degrees(center.delta_theta)) / 2)
    np.testing.assert_allclose(points[-1], [0, -DEGREE_RADIUS])


def test_arc_points_lie_on_the_ellipse():
    arc = ArcSegment(rx=DEGREE_RADIUS, ry=DEGREE_RADIUS, x_axis_rotation=0, large_arc=True, sweep=True,
                     x=0, y=-DEGREE_RADIUS)
    points = flatten_arc(DEGREE_RADIUS, 0, arc, 2.0)

    np.testing.assert_allclose(np.hypot(points[:, 0], points[:, 1]), DEGREE_RADIUS, rtol=1e-9)


def test_rotated_ellipse_points():
    arc = ArcSegment(rx=20, ry=10, x_axis_rotation=30, large_arc=False, sweep=True, x=-20, y=0)
    start = np.array([math.cos(math.radians(30)) * 20, math.sin(math.radians(30)) * 20])
    center = arc_to_center(start[0], start[1], arc)
    points = flatten_arc(start[0], start[1], arc, 2.0)

    phi = math.radians(30)
    for x, y in points:
        dx = x - center.cx
        dy = y - center.cy
        u = dx * math.cos(phi) + dy * math.sin(phi)
        v = -dx * math.sin(phi) + dy * math.cos(phi)
        assert (u / center.rx) ** 2 + (v / center.ry) ** 2 == pytest.approx(1, abs=1e-9)


def test_radii_too_small_are_scaled_up():
    arc = ArcSegment(rx=1, ry=1, x_axis_rotation=0, large_arc=False, sweep=True, x=10, y=0)
    center = arc_to_center(0, 0, arc)
    points = flatten_arc(0, 0, arc, 2.0)

    assert center.rx == pytest.approx(5)
    np.testing.assert_allclose(np.hypot(points[:, 0] - 5, points[:, 1]), 5, rtol=1e-9)


def test_coincident_end_points_give_no_points():
    arc = ArcSegment(rx=5, ry=5, x_axis_rotation=0, large_arc=True, sweep=True, x=3, y=4)

    assert len(flatten_arc(3, 4, arc, 2.0)) == 0


def test_zero_radius_is_a_line():
    arc = ArcSegment(rx=0, ry=5, x_axis_rotation=0, large_arc=False, sweep=True, x=10, y=0)

    np.testing.assert_array_equal(flatten_arc(0, 0, arc, 2.0), [[10, 0]])
