from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

import numpy as np
from scipy.spatial.transform import Rotation

from .orientation import IDENTITY, pose_matrix


@dataclass(frozen=True)
class Leg:
    """Static attachment of one rod + servo assembly.

    Attributes:
        base_joint: Servo shaft position in the base frame (mm).
        platform_joint: Rod anchor position in the platform frame (mm).
        motor_azimuth: Pan angle of the servo shaft in the base plane (radians).
    """

    base_joint: Tuple[float, float, float]
    platform_joint: Tuple[float, float, float]
    motor_azimuth: float


@dataclass(frozen=True, eq=False)
class PlatformGeometry:
    """Invariant geometric description of a platform, consumed by the solver.

    Attributes:
        legs: The six legs, in servo order.
        rod_length: Rod length (mm).
        horn_length: Horn length (mm).
        horn_direction: Horn mounting parity used when the legs were built.
        servo_range: Permitted servo angles (min, max) in radians.
        t0: Offset of the platform origin at the neutral pose (mm).
        base_outline: Plate outline for rendering (hexagon vertices, empty for circles).
        platform_outline: Plate outline for rendering (hexagon vertices, empty for circles).
        base_radius: Plate radius for rendering circular plates.
        platform_radius: Plate radius for rendering circular plates.
    """

    legs: Tuple[Leg, ...]
    rod_length: float
    horn_length: float
    horn_direction: int
    servo_range: Tuple[float, float]
    t0: np.ndarray
    base_outline: Tuple[Tuple[float, float], ...] = ()
    platform_outline: Tuple[Tuple[float, float], ...] = ()
    base_radius: float = 0.0
    platform_radius: float = 0.0

    @property
    def base_joints(self) -> np.ndarray:
        return np.array([leg.base_joint for leg in self.legs], dtype=float)

    @property
    def platform_joints(self) -> np.ndarray:
        return np.array([leg.platform_joint for leg in self.legs], dtype=float)

    @property
    def motor_azimuths(self) -> np.ndarray:
        return np.array([leg.motor_azimuth for leg in self.legs], dtype=float)


@dataclass(eq=False)
class Pose:
    """Placement of the platform relative to its neutral position.

    Attributes:
        translation: Translation vector (mm), relative to T0.
        orientation: Unit rotation of the platform frame.
        laser_on: Laser / pen state of the current instant.
        extra_laser_length: Beam length beyond the nominal throw distance (mm).
    """

    translation: np.ndarray = field(default_factory=lambda: np.zeros(3))
    orientation: Rotation = field(default_factory=lambda: IDENTITY)
    laser_on: bool = False
    extra_laser_length: float = 0.0

    def __post_init__(self):
        self.translation = np.asarray(self.translation, dtype=float).reshape(3)

    def to_matrix(self) -> np.ndarray:
        """Homogeneous transform of the platform frame, for rendering."""
        return pose_matrix(self.translation, self.orientation)


class LegStatus(Enum):
    OK = 'ok'
    # The rod cannot reach the platform joint for any horn angle
    UNREACHABLE = 'unreachable'
    # A solution exists but lies outside the servo range
    OUT_OF_RANGE = 'out_of_range'


@dataclass(frozen=True)
class LegAngle:
    """Servo angle of one leg. `angle` is None unless `status` is OK."""

    angle: float | None
    status: LegStatus

    @property
    def is_valid(self) -> bool:
        return self.status == LegStatus.OK


@dataclass(frozen=True)
class ServoAngles:
    """Servo angles of all legs for one pose."""

    legs: Tuple[LegAngle, ...]

    @property
    def angles(self) -> List[float | None]:
        return [leg.angle for leg in self.legs]

    @property
    def invalid_legs(self) -> List[int]:
        return [index for index, leg in enumerate(self.legs) if not leg.is_valid]

    @property
    def is_valid(self) -> bool:
        return not self.invalid_legs

    def __len__(self) -> int:
        return len(self.legs)

    def __getitem__(self, index: int) -> LegAngle:
        return self.legs[index]


@dataclass(frozen=True, eq=False)
class LegStateSnapshot:
    """Copy of the solver's derived state, safe to keep across ticks.

    Attributes:
        q: Platform joints in the base frame, shape (6, 3).
        l: Vectors from base joint to platform joint, shape (6, 3).
        h: Horn tip positions, shape (6, 3). NaN rows for unreachable legs.
    """

    q: np.ndarray
    l: np.ndarray
    h: np.ndarray


def neutral_pose() -> Pose:
    return Pose(np.zeros(3), IDENTITY)


__all__ = [
    'Leg',
    'LegAngle',
    'LegStateSnapshot',
    'LegStatus',
    'PlatformGeometry',
    'Pose',
    'ServoAngles',
    'neutral_pose',
]
