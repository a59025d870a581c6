from dataclasses import dataclass, fields
from enum import Enum
import math
from typing import Tuple

from stewartplatform import constants
from stewartplatform.errors import ConfigurationError


class PlatformShape(Enum):
    """Plate layouts supported by the geometry builder."""

    HEXAGONAL = 'hexagonal'
    CIRCULAR = 'circular'


def _known_fields(cls, data: dict) -> dict:
    names = {f.name for f in fields(cls)}
    values = {key: value for key, value in data.items() if key in names}
    if 'servo_range' in values:
        values['servo_range'] = tuple(values['servo_range'])
    return values


@dataclass(frozen=True)
class _CommonPlatformParameters:
    """Parameters shared by every plate layout.

    Attributes:
        rod_length: Length of the rod between horn tip and platform joint (mm).
        horn_length: Length of the servo horn (mm).
        horn_direction: Parity (0 or 1) deciding which legs get their horn flipped by pi.
        servo_range: Permitted servo angles (min, max) in radians.
        absolute_height: When True the platform height is not offset by the resting height T0.
    """

    rod_length: float = constants.ROD_LENGTH
    horn_length: float = constants.HORN_LENGTH
    horn_direction: int = constants.HORN_DIRECTION
    servo_range: Tuple[float, float] = constants.SERVO_RANGE
    absolute_height: bool = False

    def validate(self) -> None:
        """Raise ConfigurationError if the parameters cannot describe a platform."""
        if not self.rod_length > 0:
            raise ConfigurationError(f"rod_length must be positive, got {self.rod_length}")
        if not self.horn_length > 0:
            raise ConfigurationError(f"horn_length must be positive, got {self.horn_length}")
        if len(self.servo_range) != 2 or not self.servo_range[0] < self.servo_range[1]:
            raise ConfigurationError(f"servo_range must be (min, max) with min < max, got {self.servo_range}")
        if self.horn_direction not in (0, 1):
            raise ConfigurationError(f"horn_direction must be 0 or 1, got {self.horn_direction}")

    @classmethod
    def from_dict(cls, data: dict):
        """Build parameters from a configuration section, ignoring unknown keys."""
        return cls(**_known_fields(cls, data))


@dataclass(frozen=True)
class HexagonalPlatformParameters(_CommonPlatformParameters):
    """Parameters of a platform whose base and top plates are irregular hexagons.

    The inner radius is the distance from the centre to the middle of a long
    side, the outer radius the distance to the vertices of a short side.

    Attributes:
        base_radius: Inner radius of the base hexagon (mm).
        base_radius_outer: Outer radius of the base hexagon (mm).
        platform_radius: Inner radius of the platform hexagon (mm).
        platform_radius_outer: Outer radius of the platform hexagon (mm).
        shaft_distance: Offset of each servo shaft from the middle of its base side (mm).
        anchor_distance: Offset of each rod anchor from the middle of its platform side (mm).
        platform_turn: Rotate the platform plate by pi and reorder its joints.
    """

    base_radius: float = constants.HEX_BASE_RADIUS
    base_radius_outer: float = constants.HEX_BASE_RADIUS_OUTER
    platform_radius: float = constants.HEX_PLATFORM_RADIUS
    platform_radius_outer: float = constants.HEX_PLATFORM_RADIUS_OUTER
    shaft_distance: float = constants.SHAFT_DISTANCE
    anchor_distance: float = constants.ANCHOR_DISTANCE
    platform_turn: bool = True

    @property
    def shape(self) -> PlatformShape:
        return PlatformShape.HEXAGONAL

    def validate(self) -> None:
        super().validate()
        for name in ('base_radius', 'base_radius_outer', 'platform_radius', 'platform_radius_outer'):
            value = getattr(self, name)
            if not (value > 0 and math.isfinite(value)):
                raise ConfigurationError(f"{name} must be positive, got {value}")


@dataclass(frozen=True)
class CircularPlatformParameters(_CommonPlatformParameters):
    """Parameters of a platform with circular base and top plates.

    Attributes:
        base_radius: Radius of the circle carrying the servo shafts (mm).
        platform_radius: Radius of the circle carrying the rod anchors (mm).
        shaft_distance: Arc distance between the two shafts of a pair (mm).
        anchor_distance: Arc distance between the two anchors of a pair (mm).
    """

    base_radius: float = constants.CIRCULAR_BASE_RADIUS
    platform_radius: float = constants.CIRCULAR_PLATFORM_RADIUS
    shaft_distance: float = constants.SHAFT_DISTANCE
    anchor_distance: float = constants.ANCHOR_DISTANCE

    @property
    def shape(self) -> PlatformShape:
        return PlatformShape.CIRCULAR

    def validate(self) -> None:
        super().validate()
        for name in ('base_radius', 'platform_radius'):
            value = getattr(self, name)
            if not (value > 0 and math.isfinite(value)):
                raise ConfigurationError(f"{name} must be positive, got {value}")
