"""
Inverse kinematics and trajectory engine for 6-DOF rotary-servo Stewart platforms.
"""

from stewartplatform.configuration import (
    CircularPlatformParameters,
    ConfigProvider,
    HexagonalPlatformParameters,
    PlatformShape,
    ServoCalibration,
    TrajectoryParameters,
    WallProjectionParameters,
)
from stewartplatform.errors import ConfigurationError, PathSegmentError, StewartPlatformError, UnknownTrajectoryError
from stewartplatform.kinematics import InverseKinematicsSolver, LegStatus, PlatformGeometry, Pose, ServoAngles
from stewartplatform.servo_table import ServoTable
from stewartplatform.session import StewartSession, TickResult

__version__ = '1.0.0'

__all__ = [
    "CircularPlatformParameters",
    "ConfigProvider",
    "ConfigurationError",
    "HexagonalPlatformParameters",
    "InverseKinematicsSolver",
    "LegStatus",
    "PathSegmentError",
    "PlatformGeometry",
    "PlatformShape",
    "Pose",
    "ServoAngles",
    "ServoCalibration",
    "ServoTable",
    "StewartPlatformError",
    "StewartSession",
    "TickResult",
    "TrajectoryParameters",
    "UnknownTrajectoryError",
    "WallProjectionParameters",
]
