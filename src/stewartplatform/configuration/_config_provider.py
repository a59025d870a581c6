import json
from pathlib import Path
from typing import List

import jmespath  # http://jmespath.org/tutorial.html

from stewartplatform import constants
from stewartplatform.errors import ConfigurationError
from stewartplatform.logger import Logger

from ._platform_parameters import CircularPlatformParameters, HexagonalPlatformParameters, PlatformShape
from ._servo_calibration import ServoCalibration
from ._trajectory_parameters import TrajectoryParameters
from ._wall_projection_parameters import WallProjectionParameters

log = Logger().setup_logger('Configuration')

DEFAULT_CONFIG_PATH = Path.home() / 'stewartplatform.json'


class ConfigProvider:
    """Reads the JSON configuration file and hands out typed parameter sets.

    Every section is looked up with a jmespath search pattern, so the file can
    be extended without touching the lookups.
    """

    PLATFORM = 'platform[0]'
    PLATFORM_SHAPE = 'platform[0].shape'
    TRAJECTORY = 'trajectory[0]'
    WALL_PROJECTION = 'wall_projection[0]'
    SERVO_CALIBRATION = 'servos[0].calibration'

    def __init__(self, path: Path | str | None = None):
        self._path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
        self.values = self._load_config()
        log.info('Detected configuration for the modules: ' + ', '.join(self.values.keys()))

    def _load_config(self) -> dict:
        if not self._path.exists():
            log.error(f"Configuration file {self._path} doesn't exist")
            raise FileNotFoundError(f"Configuration file not found: {self._path}")

        with open(self._path, 'r', encoding='utf-8') as json_file:
            try:
                values = json.load(json_file)
            except json.JSONDecodeError as e:
                log.error(f"Configuration file {self._path} is not valid json")
                raise ConfigurationError(f"Invalid configuration file {self._path}: {e}") from e

        if not isinstance(values, dict):
            raise ConfigurationError(f"Configuration file {self._path} must contain a json object")
        return values

    def get(self, search_pattern: str):
        value = jmespath.search(search_pattern, self.values)
        log.debug(search_pattern + ': ' + str(value))
        return value

    def get_platform_parameters(self) -> HexagonalPlatformParameters | CircularPlatformParameters:
        section = self.get(self.PLATFORM) or {}
        shape = self.get(self.PLATFORM_SHAPE) or PlatformShape.HEXAGONAL.value
        try:
            platform_shape = PlatformShape(shape)
        except ValueError as e:
            raise ConfigurationError(f"Unknown platform shape '{shape}'") from e

        if platform_shape == PlatformShape.CIRCULAR:
            return CircularPlatformParameters.from_dict(section)
        return HexagonalPlatformParameters.from_dict(section)

    def get_trajectory_parameters(self) -> TrajectoryParameters:
        return TrajectoryParameters.from_dict(self.get(self.TRAJECTORY) or {})

    def get_wall_projection_parameters(self) -> WallProjectionParameters | None:
        section = self.get(self.WALL_PROJECTION)
        if section is None:
            return None
        return WallProjectionParameters.from_dict(section)

    def get_servo_calibrations(self) -> List[ServoCalibration]:
        section = self.get(self.SERVO_CALIBRATION)
        if section is None:
            raise ConfigurationError(f"Missing servo calibration ('{self.SERVO_CALIBRATION}') in {self._path}")
        if len(section) != constants.NUM_LEGS:
            raise ConfigurationError(f"Expected {constants.NUM_LEGS} servo calibrations, got {len(section)}")

        calibrations = [ServoCalibration.from_dict(entry) for entry in section]
        for calibration in calibrations:
            calibration.validate()
        return calibrations
