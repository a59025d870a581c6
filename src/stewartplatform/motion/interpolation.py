import math
from typing import Iterable, List

import numpy as np

from stewartplatform import constants
from stewartplatform.kinematics.models import Pose
from stewartplatform.kinematics.orientation import IDENTITY, compose, slerp

from .models import PEN_AXES, AxisMapping, Waypoint, WaypointPath
from .projection import ProjectedPoint, WallProjection


class WaypointTable:
    """
    Evaluates a waypoint sequence at a progress fraction.

    Each waypoint owns the share t / duration of the progress range. Between
    two waypoints the translation is linear; with a wall projection the two
    tilt rotations are slerped separately and composed afterwards. The laser
    state is that of the waypoint being travelled to.
    """

    def __init__(self,
                 waypoints: WaypointPath | Iterable[Waypoint | dict],
                 projection: WallProjection | None = None,
                 axes: AxisMapping = PEN_AXES,
                 draw_depth: float = constants.DRAW_DEPTH):
        self.waypoints: List[Waypoint] = [
            Waypoint.from_dict(waypoint) if isinstance(waypoint, dict) else waypoint for waypoint in waypoints
        ]
        if not self.waypoints:
            raise ValueError("A waypoint table needs at least one waypoint")

        self.projection = projection
        self.axes = axes

        durations = np.array([waypoint.t for waypoint in self.waypoints[1:]], dtype=float)
        self.duration = float(durations.sum())
        # fraction of the total duration reached at the end of each leg
        self._ends = np.cumsum(durations) / self.duration if self.duration > 0 else np.zeros(len(durations))

        self._laser = [math.isclose(waypoint[axes.depth], draw_depth, abs_tol=1e-9) for waypoint in self.waypoints]
        self._projected: List[ProjectedPoint] | None = None
        if projection is not None:
            self._projected = [
                projection.project(waypoint[axes.horizontal], waypoint[axes.vertical], waypoint[axes.depth])
                for waypoint in self.waypoints
            ]

    def __len__(self) -> int:
        return len(self.waypoints)

    def pose_at_waypoint(self, index: int) -> Pose:
        if self._projected is not None:
            return self._projected[index].to_pose()
        waypoint = self.waypoints[index]
        return Pose(np.array([waypoint.x, waypoint.y, waypoint.z]), IDENTITY, self._laser[index])

    def evaluate(self, progress: float) -> Pose:
        if self.duration <= 0 or len(self.waypoints) == 1:
            return self.pose_at_waypoint(len(self.waypoints) - 1)

        progress = max(progress, 0.0)
        # first leg whose end lies beyond progress
        leg = int(np.searchsorted(self._ends, progress, side='right'))
        if leg >= len(self._ends):
            return self.pose_at_waypoint(len(self.waypoints) - 1)

        start = self._ends[leg - 1] if leg > 0 else 0.0
        end = self._ends[leg]
        scale = (progress - start) / (end - start)

        prev, target = leg, leg + 1
        if self._projected is None:
            return self._interpolate_plain(prev, target, scale)
        return self._interpolate_projected(prev, target, scale)

    def _interpolate_plain(self, prev: int, target: int, scale: float) -> Pose:
        a = self.waypoints[prev]
        b = self.waypoints[target]
        translation = np.array([
            a.x + (b.x - a.x) * scale,
            a.y + (b.y - a.y) * scale,
            a.z + (b.z - a.z) * scale,
        ])
        return Pose(translation, IDENTITY, self._laser[target])

    def _interpolate_projected(self, prev: int, target: int, scale: float) -> Pose:
        a = self._projected[prev]
        b = self._projected[target]

        translation = a.translation + (b.translation - a.translation) * scale
        rotation_y = slerp(a.rotation_about_y, b.rotation_about_y)(scale)
        rotation_z = slerp(a.rotation_about_z, b.rotation_about_z)(scale)
        extra = a.extra_laser_length + (b.extra_laser_length - a.extra_laser_length) * scale

        return Pose(translation, compose(rotation_z, rotation_y), b.laser_on, extra)
