import math

import numpy as np
import pytest

from stewartplatform.configuration import CircularPlatformParameters, HexagonalPlatformParameters
from stewartplatform.errors import ConfigurationError
from stewartplatform.kinematics import build_circular_platform, build_hexagonal_platform, build_platform, hexagon_vertices


def _distinct_angles(angles):
    return len({round(angle % (2 * math.pi), 6) for angle in angles})


class TestHexagonVertices:
    def test_six_vertices_on_common_circle(self):
        vertices = hexagon_vertices(80, 110, 0.0)
        apothem = (2 * 80 - 110) / math.sqrt(3)

        assert len(vertices) == 6
        for x, y in vertices:
            assert math.hypot(x, y) == pytest.approx(math.hypot(110, apothem))

    def test_rotation_by_pi_mirrors_vertices(self):
        vertices = np.array(hexagon_vertices(50, 80, 0.0))
        turned = np.array(hexagon_vertices(50, 80, math.pi))

        np.testing.assert_allclose(turned, -vertices, atol=1e-12)


class TestHexagonalPlatform:
    def test_default_platform(self, hexagonal_geometry):
        assert len(hexagonal_geometry.legs) == 6
        assert _distinct_angles(hexagonal_geometry.motor_azimuths) == 6
        assert np.all(np.isfinite(hexagonal_geometry.t0))
        assert hexagonal_geometry.t0[2] == pytest.approx(133.4, abs=0.5)
        assert len(hexagonal_geometry.base_outline) == 6
        assert len(hexagonal_geometry.platform_outline) == 6

    def test_larger_base_with_short_horns(self):
        geometry = build_hexagonal_platform(
            HexagonalPlatformParameters(base_radius=98, base_radius_outer=110, rod_length=130, horn_length=40)
        )

        assert len(geometry.legs) == 6
        assert _distinct_angles(geometry.motor_azimuths) == 6
        assert math.isfinite(geometry.t0[2])
        assert geometry.t0[2] > 0

    def test_joints_lie_in_their_planes(self, hexagonal_geometry):
        assert np.all(hexagonal_geometry.base_joints[:, 2] == 0)
        assert np.all(hexagonal_geometry.platform_joints[:, 2] == 0)

    def test_every_leg_has_same_planar_reach(self, hexagonal_geometry):
        offsets = hexagonal_geometry.platform_joints[:, :2] - hexagonal_geometry.base_joints[:, :2]
        reach = np.linalg.norm(offsets, axis=1)

        np.testing.assert_allclose(reach, reach[0])

    def test_without_platform_turn(self):
        geometry = build_hexagonal_platform(HexagonalPlatformParameters(platform_turn=False))

        assert len(geometry.legs) == 6
        assert math.isfinite(geometry.t0[2])

    def test_horn_direction_flips_azimuth(self):
        default = build_hexagonal_platform(HexagonalPlatformParameters(horn_direction=0))
        flipped = build_hexagonal_platform(HexagonalPlatformParameters(horn_direction=1))

        difference = (flipped.motor_azimuths - default.motor_azimuths) % (2 * math.pi)
        np.testing.assert_allclose(difference, math.pi)

    def test_absolute_height(self):
        geometry = build_hexagonal_platform(HexagonalPlatformParameters(absolute_height=True))

        np.testing.assert_array_equal(geometry.t0, np.zeros(3))

    def test_rods_too_short(self):
        with pytest.raises(ConfigurationError):
            build_hexagonal_platform(HexagonalPlatformParameters(rod_length=10, horn_length=10))

    @pytest.mark.parametrize('parameters', [
        HexagonalPlatformParameters(rod_length=0),
        HexagonalPlatformParameters(horn_length=-1),
        HexagonalPlatformParameters(servo_range=(1.0, -1.0)),
        HexagonalPlatformParameters(horn_direction=2),
        HexagonalPlatformParameters(base_radius=float('nan')),
    ])
    def test_invalid_parameters(self, parameters):
        with pytest.raises(ConfigurationError):
            build_hexagonal_platform(parameters)


class TestCircularPlatform:
    def test_default_platform(self):
        geometry = build_circular_platform(CircularPlatformParameters())

        assert len(geometry.legs) == 6
        assert _distinct_angles(geometry.motor_azimuths) == 6
        assert geometry.t0[2] == pytest.approx(126.845, abs=1e-3)
        np.testing.assert_allclose(np.linalg.norm(geometry.base_joints, axis=1), 80)
        np.testing.assert_allclose(np.linalg.norm(geometry.platform_joints, axis=1), 50)
        assert geometry.base_radius == 80
        assert geometry.platform_radius == 50

    def test_shaft_pairs_are_shaft_distance_apart_along_the_arc(self):
        geometry = build_circular_platform(CircularPlatformParameters(shaft_distance=20))
        angles = np.arctan2(geometry.base_joints[:, 1], geometry.base_joints[:, 0])

        # legs 1 and 2 share the cut at 2pi/3
        assert (angles[2] - angles[1]) * 80 == pytest.approx(20)

    def test_anchor_pairs_are_spaced_along_the_base_circle(self):
        geometry = build_circular_platform(CircularPlatformParameters(anchor_distance=20))
        angles = np.arctan2(geometry.platform_joints[:, 1], geometry.platform_joints[:, 0])

        # legs 0 and 1 share the cut at pi/3
        assert angles[1] - angles[0] == pytest.approx(20 / 80)

    def test_dispatch_on_shape(self):
        geometry = build_platform(CircularPlatformParameters())

        assert geometry.base_radius == 80
        assert geometry.base_outline == ()
