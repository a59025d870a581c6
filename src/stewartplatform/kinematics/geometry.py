"""
Geometry builder for hexagonal and circular Stewart platforms.

Produces the six static legs (base joint, platform joint, motor azimuth) and
the resting height T0 at which every rod fits with a level horn.
"""

from math import atan2, cos, hypot, isfinite, pi, sin, sqrt
from typing import List, Tuple

import numpy as np

from stewartplatform import constants
from stewartplatform.configuration import CircularPlatformParameters, HexagonalPlatformParameters, PlatformShape
from stewartplatform.errors import ConfigurationError
from stewartplatform.logger import Logger

from .models import Leg, PlatformGeometry

log = Logger().setup_logger('Geometry')


# ---------------------------------------------------------------------------
# Plate outlines
# ---------------------------------------------------------------------------


def hexagon_vertices(inner_radius: float, outer_radius: float, rotation: float) -> List[Tuple[float, float]]:
    """
    Vertices of an irregular hexagon with alternating long and short sides.

    The inner radius is the distance from the centre to the middle of the long
    sides, the outer radius the distance to the short sides' vertices.
    """
    apothem = (2 * inner_radius - outer_radius) / sqrt(3)

    vertices = []
    for i in range(6):
        phi = (i - i % 2) / 3 * pi + rotation
        ap = apothem * (-1) ** i
        vertices.append((outer_radius * cos(phi) + ap * sin(phi), outer_radius * sin(phi) - ap * cos(phi)))
    return vertices


# ---------------------------------------------------------------------------
# Leg layouts
# ---------------------------------------------------------------------------


def _hexagonal_legs(parameters: HexagonalPlatformParameters,
                    base_vertices: List[Tuple[float, float]],
                    platform_vertices: List[Tuple[float, float]]) -> List[Leg]:
    base_points = []
    platform_points = []
    motor_angles = []

    for i in range(6):
        # each pair of legs shares one long side, starting at vertex i|1
        k = i | 1
        base_cx, base_cy = base_vertices[k]
        base_nx, base_ny = base_vertices[(k + 1) % 6]
        plat_cx, plat_cy = platform_vertices[k]
        plat_nx, plat_ny = platform_vertices[(k + 1) % 6]

        base_dx = base_nx - base_cx
        base_dy = base_ny - base_cy
        side_length = hypot(base_dx, base_dy)
        base_dx /= side_length
        base_dy /= side_length

        pm = (-1) ** i

        base_mid_x = (base_cx + base_nx) / 2
        base_mid_y = (base_cy + base_ny) / 2
        plat_mid_x = (plat_cx + plat_nx) / 2
        plat_mid_y = (plat_cy + plat_ny) / 2

        base_points.append((
            base_mid_x + base_dx * parameters.shaft_distance * pm,
            base_mid_y + base_dy * parameters.shaft_distance * pm,
            0.0,
        ))
        platform_points.append((
            plat_mid_x + base_dx * parameters.anchor_distance * pm,
            plat_mid_y + base_dy * parameters.anchor_distance * pm,
            0.0,
        ))
        motor_angles.append(atan2(base_dy, base_dx) + ((i + parameters.horn_direction) % 2) * pi)

    platform_index = constants.PLATFORM_TURN_INDEX if parameters.platform_turn else tuple(range(6))

    return [
        Leg(base_joint=base_points[i], platform_joint=platform_points[platform_index[i]], motor_azimuth=motor_angles[i])
        for i in range(6)
    ]


def _circular_legs(parameters: CircularPlatformParameters) -> List[Leg]:
    # both pair spacings are measured as arc lengths on the base circle
    shaft_angle = parameters.shaft_distance / parameters.base_radius
    anchor_angle = parameters.anchor_distance / parameters.base_radius

    legs = []
    for i in range(6):
        pm = (-1) ** i
        phi_cut = (1 + i - i % 2) * pi / 3

        phi_base = (i + i % 2) * pi / 3 + pm * shaft_angle / 2
        phi_platform = phi_cut - pm * anchor_angle / 2

        legs.append(Leg(
            base_joint=(cos(phi_base) * parameters.base_radius, sin(phi_base) * parameters.base_radius, 0.0),
            platform_joint=(
                cos(phi_platform) * parameters.platform_radius,
                sin(phi_platform) * parameters.platform_radius,
                0.0,
            ),
            motor_azimuth=phi_base + ((i + parameters.horn_direction) % 2) * pi + pi / 2,
        ))
    return legs


# ---------------------------------------------------------------------------
# Resting height
# ---------------------------------------------------------------------------


def resting_height(legs: List[Leg], rod_length: float, horn_length: float) -> float:
    """
    Height of the platform at the neutral pose: z0 = sqrt(d^2 + h^2 - dx^2 - dy^2)
    of the first leg.

    Raises:
        ConfigurationError: If the rods are too short for the planar joint offsets.
    """
    dx = legs[0].platform_joint[0] - legs[0].base_joint[0]
    dy = legs[0].platform_joint[1] - legs[0].base_joint[1]
    radicand = rod_length * rod_length + horn_length * horn_length - dx * dx - dy * dy

    if not isfinite(radicand) or radicand < 0:
        log.error(f'Infeasible geometry: rod {rod_length} and horn {horn_length} cannot span offset ({dx:.2f}, {dy:.2f})')
        raise ConfigurationError(
            f"Rod length {rod_length} and horn length {horn_length} are too short "
            f"for a planar joint offset of {hypot(dx, dy):.3f}"
        )
    return sqrt(radicand)


def _finish(parameters, legs: List[Leg], **outline) -> PlatformGeometry:
    if len(legs) != constants.NUM_LEGS:
        raise ConfigurationError(f"A platform needs exactly {constants.NUM_LEGS} legs, got {len(legs)}")

    for leg in legs:
        if not all(isfinite(v) for v in (*leg.base_joint, *leg.platform_joint, leg.motor_azimuth)):
            raise ConfigurationError(f"Geometry produced a non-finite joint: {leg}")

    if parameters.absolute_height:
        t0 = np.zeros(3)
    else:
        t0 = np.array([0.0, 0.0, resting_height(legs, parameters.rod_length, parameters.horn_length)])

    geometry = PlatformGeometry(
        legs=tuple(legs),
        rod_length=float(parameters.rod_length),
        horn_length=float(parameters.horn_length),
        horn_direction=parameters.horn_direction,
        servo_range=(float(parameters.servo_range[0]), float(parameters.servo_range[1])),
        t0=t0,
        **outline,
    )
    log.info(f'Built {parameters.shape.value} platform, T0 = {t0[2]:.3f} mm')
    return geometry


def build_hexagonal_platform(parameters: HexagonalPlatformParameters | None = None) -> PlatformGeometry:
    """Build the legs of a platform with hexagonal base and top plates."""
    parameters = parameters or HexagonalPlatformParameters()
    parameters.validate()

    base_vertices = hexagon_vertices(parameters.base_radius, parameters.base_radius_outer, 0.0)
    platform_vertices = hexagon_vertices(
        parameters.platform_radius, parameters.platform_radius_outer, pi if parameters.platform_turn else 0.0
    )

    legs = _hexagonal_legs(parameters, base_vertices, platform_vertices)
    return _finish(parameters, legs, base_outline=tuple(base_vertices), platform_outline=tuple(platform_vertices))


def build_circular_platform(parameters: CircularPlatformParameters | None = None) -> PlatformGeometry:
    """Build the legs of a platform with circular base and top plates."""
    parameters = parameters or CircularPlatformParameters()
    parameters.validate()

    legs = _circular_legs(parameters)
    return _finish(parameters, legs, base_radius=parameters.base_radius, platform_radius=parameters.platform_radius)


def build_platform(parameters: HexagonalPlatformParameters | CircularPlatformParameters) -> PlatformGeometry:
    """Dispatch on the parameter set's plate shape."""
    if parameters.shape == PlatformShape.CIRCULAR:
        return build_circular_platform(parameters)
    return build_hexagonal_platform(parameters)
