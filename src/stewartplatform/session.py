"""
The session object owns the configured platform, its solver and the animator.

A host creates one session, configures it, picks a trajectory and calls
tick() once per frame. Build-time failures leave the previous state in place.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

import numpy as np
from scipy.spatial.transform import Rotation

from stewartplatform import constants
from stewartplatform.configuration import (
    CircularPlatformParameters,
    ConfigProvider,
    HexagonalPlatformParameters,
    ServoCalibration,
    TrajectoryParameters,
    WallProjectionParameters,
)
from stewartplatform.errors import ConfigurationError
from stewartplatform.kinematics import (
    InverseKinematicsSolver,
    LegStateSnapshot,
    PlatformGeometry,
    Pose,
    ServoAngles,
    build_platform,
)
from stewartplatform.kinematics.orientation import IDENTITY
from stewartplatform.logger import Logger
from stewartplatform.motion import (
    PEN_AXES,
    WALL_AXES,
    AnimationDescriptor,
    Animator,
    BoundingBox,
    LiveInput,
    WallProjection,
    WaypointAnimation,
    WaypointTable,
    build_from_path_segments,
)
from stewartplatform.servo_table import ServoTable

log = Logger().setup_logger('Session')

PATH_ANIMATION = 'path'


@dataclass(frozen=True, eq=False)
class TickResult:
    """Outcome of one frame.

    Attributes:
        pose: The pose the platform was solved for.
        servo_angles: Per-leg servo angle or invalid marker.
        laser_on: Laser / pen state of this frame.
    """

    pose: Pose
    servo_angles: ServoAngles
    laser_on: bool

    @property
    def invalid_legs(self):
        return self.servo_angles.invalid_legs


class StewartSession:
    def __init__(self,
                 platform_parameters: HexagonalPlatformParameters | CircularPlatformParameters | None = None,
                 trajectory_parameters: TrajectoryParameters | None = None,
                 wall_projection_parameters: WallProjectionParameters | None = None,
                 servo_calibrations: Sequence[ServoCalibration] | None = None,
                 clock: Callable[[], float] | None = None):
        self.trajectory_parameters = trajectory_parameters or TrajectoryParameters()
        self.trajectory_parameters.validate()
        self.wall_projection_parameters = wall_projection_parameters or WallProjectionParameters()
        self.wall_projection_parameters.validate()

        self.geometry: PlatformGeometry | None = None
        self.solver: InverseKinematicsSolver | None = None
        self.configure(platform_parameters or HexagonalPlatformParameters())

        self.servo_table = ServoTable(servo_calibrations) if servo_calibrations is not None else None
        self.animator = Animator(clock=clock, initial=self.trajectory_parameters.default_animation)

    @classmethod
    def from_config(cls, config: ConfigProvider, clock: Callable[[], float] | None = None) -> 'StewartSession':
        """Create a session from a configuration file. Servo calibration is optional there."""
        try:
            calibrations = config.get_servo_calibrations()
        except ConfigurationError as e:
            log.warning(f'No servo table will be recorded: {e}')
            calibrations = None

        return cls(
            platform_parameters=config.get_platform_parameters(),
            trajectory_parameters=config.get_trajectory_parameters(),
            wall_projection_parameters=config.get_wall_projection_parameters(),
            servo_calibrations=calibrations,
            clock=clock,
        )

    def configure(self, parameters: HexagonalPlatformParameters | CircularPlatformParameters) -> PlatformGeometry:
        """Build a new platform. On failure the previous platform stays active."""
        geometry = build_platform(parameters)
        solver = InverseKinematicsSolver(geometry)

        self.geometry = geometry
        self.solver = solver
        return geometry

    def set_trajectory(self,
                       trajectory: str | AnimationDescriptor | Iterable,
                       bounding_box: BoundingBox | dict | None = None,
                       projection: bool | WallProjection | None = None,
                       now: float | None = None) -> AnimationDescriptor:
        """
        Start an animation by name / alias, a ready descriptor, or path segments.

        Path segments need a bounding box. With projection the drawing is aimed
        at the wall instead of being drawn in the platform plane.
        """
        if isinstance(trajectory, (str, AnimationDescriptor)):
            return self.animator.start(trajectory, now)

        if bounding_box is None:
            raise ConfigurationError("Path trajectories need a bounding box")

        wall_projection = None
        if isinstance(projection, WallProjection):
            wall_projection = projection
        elif projection:
            wall_projection = WallProjection(self.wall_projection_parameters, self.trajectory_parameters.draw_depth)
        axes = WALL_AXES if wall_projection is not None else PEN_AXES

        path = build_from_path_segments(trajectory, bounding_box, self.trajectory_parameters, axes)
        table = WaypointTable(path, wall_projection, axes, self.trajectory_parameters.draw_depth)
        descriptor = WaypointAnimation.from_table(PATH_ANIMATION, table)
        return self.animator.start(descriptor, now)

    def toggle_trajectory(self, name: str, now: float | None = None) -> AnimationDescriptor:
        """Switch to another animation, restarting its clock."""
        descriptor = self.animator.start(name, now)
        log.info(f'Switched trajectory to {descriptor.name}')
        return descriptor

    def move_to(self,
                translation: Sequence[float],
                orientation: Rotation = IDENTITY,
                duration: float = 1000,
                next: str | None = None,
                now: float | None = None) -> AnimationDescriptor:
        return self.animator.move_to(translation, orientation, duration, next, now)

    def tick(self, now: float | None = None, live_input: LiveInput | None = None) -> TickResult:
        """Advance the animation, solve the platform and record the servo table."""
        now = self.animator.clock() if now is None else now
        pose = self.animator.update(now, live_input)
        self.solver.update(pose)
        servo_angles = self.solver.get_servo_angles()

        if self.servo_table is not None:
            self.servo_table.record(now, servo_angles, pose.laser_on)

        return TickResult(pose, servo_angles, pose.laser_on)

    def snapshot(self) -> LegStateSnapshot:
        return self.solver.snapshot()

    def path_points(self, steps: int = constants.PATH_SAMPLE_STEPS) -> np.ndarray:
        """Path of the active animation in the base frame, for the rendering sink."""
        points = self.animator.path_points(steps)
        if len(points) == 0:
            return points
        return points + self.geometry.t0

    def toggle_path_visibility(self) -> bool:
        return self.animator.toggle_path_visibility()
