import numpy as np
import pytest

from stewartplatform.configuration import ServoCalibration
from stewartplatform.errors import ConfigurationError
from stewartplatform.kinematics import LegAngle, LegStatus, ServoAngles
from stewartplatform.servo_table import ServoTable

CALIBRATIONS = [ServoCalibration(midpoint=90, amplitude=10, direction=(-1) ** i) for i in range(6)]
LEVEL = ServoAngles(tuple(LegAngle(0.0, LegStatus.OK) for _ in range(6)))


def test_commands_follow_calibration():
    table = ServoTable(CALIBRATIONS)
    angles = ServoAngles(tuple(LegAngle(0.5, LegStatus.OK) for _ in range(6)))

    row = table.record(0, angles, laser_on=True)

    assert row.commands == (95, 85, 95, 85, 95, 85)
    assert row.laser_on


def test_oldest_rows_are_dropped():
    table = ServoTable(CALIBRATIONS, max_rows=3)

    for timestamp in range(10):
        table.record(timestamp, LEVEL)

    assert len(table) == 3
    assert table.max_rows == 3
    np.testing.assert_array_equal(table.as_array()[:, 0], [7, 8, 9])


def test_empty_table_array_shape():
    assert ServoTable(CALIBRATIONS).as_array().shape == (0, 8)


@pytest.mark.parametrize('calibrations, max_rows', [(CALIBRATIONS[:5], 10), (CALIBRATIONS, 0)])
def test_invalid_tables(calibrations, max_rows):
    with pytest.raises(ConfigurationError):
        ServoTable(calibrations, max_rows=max_rows)
