"""
Aiming a platform-mounted laser at a point on a wall.

The laser sits `rotation_axis_offset` in front of the platform's rotation axis
and points along +x at a wall `wall_distance` further away. Tilting the
platform swings the laser source as well, so every aim comes with a
translation that puts the source back on the beam line.
"""

import math
from dataclasses import dataclass

import numpy as np
from scipy.spatial.transform import Rotation

from stewartplatform import constants
from stewartplatform.configuration import WallProjectionParameters
from stewartplatform.kinematics.models import Pose
from stewartplatform.kinematics.orientation import Y_AXIS, Z_AXIS, compose, from_axis_angle


@dataclass(frozen=True, eq=False)
class ProjectedPoint:
    """Platform placement that hits one point on the wall.

    Attributes:
        rotation_y: Tilt about the y axis (radians).
        rotation_z: Pan about the z axis (radians).
        translation: Translation keeping the laser source on the beam line (mm).
        laser_on: Whether the laser is on at this point.
        extra_laser_length: Beam length beyond the straight throw distance (mm).
    """

    rotation_y: float
    rotation_z: float
    translation: np.ndarray
    laser_on: bool
    extra_laser_length: float

    @property
    def rotation_about_y(self) -> Rotation:
        return from_axis_angle(Y_AXIS, self.rotation_y)

    @property
    def rotation_about_z(self) -> Rotation:
        return from_axis_angle(Z_AXIS, self.rotation_z)

    @property
    def orientation(self) -> Rotation:
        return compose(self.rotation_about_z, self.rotation_about_y)

    def to_pose(self) -> Pose:
        return Pose(self.translation.copy(), self.orientation, self.laser_on, self.extra_laser_length)


class WallProjection:
    def __init__(self, parameters: WallProjectionParameters | None = None, draw_depth: float = constants.DRAW_DEPTH):
        self.parameters = parameters or WallProjectionParameters()
        self.parameters.validate()
        self.draw_depth = draw_depth

    def project(self, y: float, z: float, depth: float) -> ProjectedPoint:
        """Aim at (y, z) on the wall; the laser is on only at drawing depth."""
        offset = self.parameters.rotation_axis_offset
        throw = self.parameters.throw_distance

        alpha = math.atan(y / throw)
        beta = math.atan(-z / throw)

        translation = np.array([
            -(offset - offset * math.cos(alpha) * math.cos(beta)),
            offset * math.sin(alpha),
            -offset * math.sin(beta),
        ])
        extra_laser_length = throw / (math.cos(alpha) * math.cos(beta)) - throw

        return ProjectedPoint(
            rotation_y=beta,
            rotation_z=alpha,
            translation=translation,
            laser_on=math.isclose(depth, self.draw_depth, abs_tol=1e-9),
            extra_laser_length=extra_laser_length,
        )
