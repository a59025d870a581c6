import json

import numpy as np
import pytest

from stewartplatform import StewartSession
from stewartplatform.configuration import (
    CircularPlatformParameters,
    ConfigProvider,
    HexagonalPlatformParameters,
    ServoCalibration,
)
from stewartplatform.errors import ConfigurationError, PathSegmentError, UnknownTrajectoryError
from stewartplatform.kinematics import LegStatus
from stewartplatform.kinematics.orientation import IDENTITY
from helpers import same_rotation
from stewartplatform.motion import AnimationKind, BoundingBox, LineSegment, MoveSegment, PeriodicAnimation, animations

CALIBRATIONS = [ServoCalibration(midpoint=90, amplitude=10, direction=(-1) ** i) for i in range(6)]
SQUARE_PATH = [MoveSegment(0, 0), LineSegment(100, 0), LineSegment(100, 100), LineSegment(0, 100), LineSegment(0, 0)]
BOX = BoundingBox(0, 0, 100, 100)


@pytest.fixture
def session(clock):
    return StewartSession(clock=clock)


def test_tick_solves_all_legs(session):
    result = session.tick(now=0)

    assert result.servo_angles.is_valid
    assert len(result.servo_angles.angles) == 6
    assert result.invalid_legs == []


def test_configure_replaces_geometry(session):
    geometry = session.configure(CircularPlatformParameters())

    assert session.geometry is geometry
    assert session.solver.geometry is geometry
    assert session.tick(now=0).servo_angles.is_valid


def test_failed_configure_keeps_previous_platform(session):
    previous = session.geometry

    with pytest.raises(ConfigurationError):
        session.configure(HexagonalPlatformParameters(rod_length=10, horn_length=10))

    assert session.geometry is previous
    assert session.solver.geometry is previous


def test_set_trajectory_by_alias(session):
    descriptor = session.set_trajectory('y', now=0)

    assert descriptor.name == 'lissajous'
    assert session.path_points(10).shape == (11, 3)
    np.testing.assert_allclose(session.path_points(10)[:, 2], session.geometry.t0[2])


def test_unknown_trajectory_keeps_running_one(session):
    with pytest.raises(UnknownTrajectoryError):
        session.set_trajectory('unknown')

    assert session.animator.current.name == 'wobble'


def test_path_trajectory(session):
    descriptor = session.set_trajectory(SQUARE_PATH, BOX, now=0)

    assert descriptor.kind == AnimationKind.WAYPOINT_TABLE
    assert descriptor.next is None
    # the outline closes where the pen was lowered
    result = session.tick(now=descriptor.duration)
    np.testing.assert_allclose(result.pose.translation, [-40, -40, 0], atol=1e-9)
    assert result.laser_on


def test_malformed_path_keeps_running_trajectory(session):
    with pytest.raises(PathSegmentError):
        session.set_trajectory([{'kind': 'bogus'}], BOX)

    assert session.animator.current.name == 'wobble'


def test_path_needs_bounding_box(session):
    with pytest.raises(ConfigurationError):
        session.set_trajectory(SQUARE_PATH)


def test_projected_path_tilts_platform(session):
    descriptor = session.set_trajectory(SQUARE_PATH, BOX, projection=True, now=0)
    result = session.tick(now=descriptor.duration / 2)

    assert not same_rotation(result.pose.orientation, IDENTITY)
    assert result.servo_angles.is_valid


def test_toggle_trajectory_resets_start_time(session):
    session.toggle_trajectory('breathe', now=1234)

    assert session.animator.current.name == 'breathe'
    assert session.animator.start_time == 1234


def test_unreachable_pose_is_reported_not_raised(session):
    session.move_to([0, 0, 200], duration=1000, now=0)
    result = session.tick(now=1000)

    assert result.invalid_legs == [0, 1, 2, 3, 4, 5]
    assert all(leg.status == LegStatus.UNREACHABLE for leg in result.servo_angles.legs)
    assert result.servo_angles.angles == [None] * 6


def test_snapshot_after_tick(session):
    session.tick(now=0)
    snapshot = session.snapshot()

    assert snapshot.q.shape == (6, 3)
    np.testing.assert_array_equal(snapshot.h, session.solver.H)


def test_servo_table_records_ticks(clock):
    session = StewartSession(servo_calibrations=CALIBRATIONS, clock=clock)

    session.tick(now=0)
    session.move_to([0, 0, 200], duration=0, now=10)
    session.tick(now=20)

    table = session.servo_table
    assert len(table) == 2
    assert table.rows[0].is_valid
    assert not table.rows[1].is_valid
    assert table.rows[1].commands == (None,) * 6

    array = table.as_array()
    assert array.shape == (2, 8)
    assert np.all(np.isnan(array[1, 2:]))


def test_servo_commands_use_calibration(clock):
    session = StewartSession(servo_calibrations=CALIBRATIONS, clock=clock)
    result = session.tick(now=0)
    row = session.servo_table.rows[0]

    for index, (angle, command) in enumerate(zip(result.servo_angles.angles, row.commands)):
        assert command == pytest.approx(90 + (-1) ** index * 10 * angle)


def test_wrong_number_of_calibrations():
    with pytest.raises(ConfigurationError):
        StewartSession(servo_calibrations=CALIBRATIONS[:5])


def test_from_config(default_config_path, clock):
    session = StewartSession.from_config(ConfigProvider(default_config_path), clock=clock)

    assert session.animator.current.name == 'wobble'
    assert session.servo_table is not None
    assert session.tick(now=0).servo_angles.is_valid


def test_from_config_without_calibration(tmp_path, clock):
    path = tmp_path / 'platform.json'
    path.write_text(json.dumps({'platform': [{'shape': 'circular', 'base_radius': 90}]}))

    session = StewartSession.from_config(ConfigProvider(path), clock=clock)

    assert session.servo_table is None
    assert session.geometry.base_radius == 90


def test_unknown_successor_is_a_setup_error(session):
    session.toggle_trajectory('breathe', now=0)

    with pytest.raises(UnknownTrajectoryError):
        session.move_to([0, 0, 5], duration=100, next='typo', now=0)
    with pytest.raises(UnknownTrajectoryError):
        session.set_trajectory(PeriodicAnimation(name='intro', duration=100, next='nope', fn=animations.breathe), now=0)

    # ticking past the would-be end keeps the previous animation running
    result = session.tick(now=100)
    assert session.animator.current.name == 'breathe'
    assert result.servo_angles.is_valid


def test_chained_descriptor_hands_over_during_tick(session):
    intro = PeriodicAnimation(name='intro', duration=100, next='wobble', fn=animations.breathe)
    session.set_trajectory(intro, now=0)
    session.tick(now=100)

    assert session.animator.current.name == 'wobble'
    assert session.tick(now=150).servo_angles.is_valid
