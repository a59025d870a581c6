import math

import numpy as np
import pytest

from stewartplatform.configuration import WallProjectionParameters
from stewartplatform.errors import ConfigurationError
from stewartplatform.kinematics.orientation import IDENTITY
from helpers import same_rotation
from stewartplatform.motion import WallProjection


def test_centre_of_the_wall():
    point = WallProjection().project(0, 0, 0)

    assert point.rotation_y == 0
    assert point.rotation_z == 0
    np.testing.assert_allclose(point.translation, 0, atol=1e-12)
    assert point.laser_on
    assert point.extra_laser_length == pytest.approx(0)
    assert same_rotation(point.orientation, IDENTITY)


def test_horizontal_offset_pans_about_z():
    projection = WallProjection(WallProjectionParameters(rotation_axis_offset=30, wall_distance=1000))
    point = projection.project(100, 0, 0)
    alpha = math.atan(100 / 1030)

    assert point.rotation_z == pytest.approx(alpha)
    assert point.rotation_y == pytest.approx(0)
    np.testing.assert_allclose(point.translation, [-(30 - 30 * math.cos(alpha)), 30 * math.sin(alpha), 0], atol=1e-12)
    assert point.extra_laser_length == pytest.approx(1030 / math.cos(alpha) - 1030)


def test_beam_points_at_the_target():
    point = WallProjection().project(100, -50, 0)
    beam = point.orientation.apply([1.0, 0.0, 0.0])

    # the pan lands exactly on the requested offset; the tilt, applied before
    # the pan, stretches the vertical offset by the pan's slant
    scale = 1030 / beam[0]
    alpha = math.atan(100 / 1030)
    np.testing.assert_allclose(beam[1] * scale, 100, rtol=1e-9)
    np.testing.assert_allclose(beam[2] * scale, -50 / math.cos(alpha), rtol=1e-9)


def test_vertical_offset_tilts_about_y():
    point = WallProjection().project(0, 40, 0)
    beta = math.atan(-40 / 1030)

    assert point.rotation_y == pytest.approx(beta)
    assert point.translation[2] == pytest.approx(-30 * math.sin(beta))


def test_laser_is_off_when_lifted():
    assert not WallProjection().project(10, 10, -10).laser_on


def test_to_pose():
    point = WallProjection().project(20, 30, 0)
    pose = point.to_pose()

    np.testing.assert_allclose(pose.translation, point.translation)
    assert pose.laser_on
    assert pose.extra_laser_length == point.extra_laser_length


def test_invalid_rig():
    with pytest.raises(ConfigurationError):
        WallProjection(WallProjectionParameters(rotation_axis_offset=-1))
