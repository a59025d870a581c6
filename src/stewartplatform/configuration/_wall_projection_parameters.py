from dataclasses import dataclass

from stewartplatform import constants
from stewartplatform.errors import ConfigurationError


@dataclass(frozen=True)
class WallProjectionParameters:
    """Physical layout of the laser rig.

    Attributes:
        rotation_axis_offset: Distance from the platform rotation axis to the laser source (mm).
        wall_distance: Distance from the laser source to the wall (mm).
    """

    rotation_axis_offset: float = constants.ROTATION_AXIS_OFFSET
    wall_distance: float = constants.WALL_DISTANCE

    @property
    def throw_distance(self) -> float:
        """Distance from the rotation axis to the wall."""
        return self.rotation_axis_offset + self.wall_distance

    def validate(self) -> None:
        if self.rotation_axis_offset < 0:
            raise ConfigurationError(f"rotation_axis_offset must not be negative, got {self.rotation_axis_offset}")
        if self.wall_distance < 0:
            raise ConfigurationError(f"wall_distance must not be negative, got {self.wall_distance}")
        if not self.throw_distance > 0:
            raise ConfigurationError("rotation_axis_offset + wall_distance must be positive")

    @classmethod
    def from_dict(cls, data: dict) -> 'WallProjectionParameters':
        return cls(
            rotation_axis_offset=data.get('rotation_axis_offset', constants.ROTATION_AXIS_OFFSET),
            wall_distance=data.get('wall_distance', constants.WALL_DISTANCE),
        )
