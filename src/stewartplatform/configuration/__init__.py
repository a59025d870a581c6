from ._config_provider import ConfigProvider
from ._platform_parameters import CircularPlatformParameters, HexagonalPlatformParameters, PlatformShape
from ._servo_calibration import ServoCalibration
from ._trajectory_parameters import TrajectoryParameters
from ._wall_projection_parameters import WallProjectionParameters

__all__ = [
    "CircularPlatformParameters",
    "ConfigProvider",
    "HexagonalPlatformParameters",
    "PlatformShape",
    "ServoCalibration",
    "TrajectoryParameters",
    "WallProjectionParameters",
]
