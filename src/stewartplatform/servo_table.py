"""
Per-tick servo command table for offline playback and calibration.

The table keeps the most recent rows only; older rows are dropped as new
ticks are recorded.
"""

from collections import deque
from dataclasses import dataclass
from typing import Deque, Sequence, Tuple

import numpy as np

from stewartplatform import constants
from stewartplatform.configuration import ServoCalibration
from stewartplatform.errors import ConfigurationError
from stewartplatform.kinematics.models import ServoAngles


@dataclass(frozen=True)
class ServoTableRow:
    """Calibrated servo commands of one tick. Invalid legs are None."""

    timestamp: float
    commands: Tuple[float | None, ...]
    laser_on: bool

    @property
    def is_valid(self) -> bool:
        return all(command is not None for command in self.commands)


class ServoTable:
    def __init__(self, calibrations: Sequence[ServoCalibration], max_rows: int = constants.SERVO_TABLE_MAX_ROWS):
        if len(calibrations) != constants.NUM_LEGS:
            raise ConfigurationError(f"Expected {constants.NUM_LEGS} servo calibrations, got {len(calibrations)}")
        if max_rows < 1:
            raise ConfigurationError(f"Servo table needs room for at least one row, got {max_rows}")
        for calibration in calibrations:
            calibration.validate()

        self._calibrations = tuple(calibrations)
        self.rows: Deque[ServoTableRow] = deque(maxlen=max_rows)

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def max_rows(self) -> int:
        return self.rows.maxlen

    def record(self, timestamp: float, servo_angles: ServoAngles, laser_on: bool = False) -> ServoTableRow:
        commands = tuple(
            calibration.to_command(angle) for calibration, angle in zip(self._calibrations, servo_angles.angles)
        )
        row = ServoTableRow(timestamp, commands, laser_on)
        self.rows.append(row)
        return row

    def as_array(self) -> np.ndarray:
        """Rows of (timestamp, laser, command 0..5) with NaN for invalid commands."""
        return np.array(
            [
                [row.timestamp, float(row.laser_on)] + [np.nan if command is None else command for command in row.commands]
                for row in self.rows
            ],
            dtype=float,
        ).reshape(len(self.rows), 2 + constants.NUM_LEGS)
