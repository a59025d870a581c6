"""
Turns vector path segments into a timed waypoint path.

Source coordinates are rescaled from the bounding box into a square window
centred on the origin. Moves lift the pen (or switch the laser off), travel,
and lower it again; every other segment is drawn at drawing depth.
"""

import math
from typing import Iterable, List

import numpy as np

from stewartplatform.configuration import TrajectoryParameters
from stewartplatform.errors import PathSegmentError
from stewartplatform.logger import Logger

from .curves import cubic_lut, flatten_arc, quadratic_lut
from .models import (
    PEN_AXES,
    SEGMENT_TYPES,
    ArcSegment,
    AxisMapping,
    BoundingBox,
    CubicSegment,
    LineSegment,
    MoveSegment,
    QuadraticSegment,
    Waypoint,
    WaypointPath,
    segment_from_dict,
)

log = Logger().setup_logger('Path builder')


def normalize_segments(segments: Iterable) -> List:
    """Accept segment objects or dicts; reject anything else before building."""
    normalized = []
    for segment in segments:
        if isinstance(segment, dict):
            segment = segment_from_dict(segment)
        elif type(segment) not in SEGMENT_TYPES.values():
            raise PathSegmentError(f"Unrecognized path segment {segment!r}")
        normalized.append(segment)

    if not normalized:
        raise PathSegmentError("A path needs at least one segment")
    return normalized


class _WaypointWriter:
    """Tracks the current point and emits waypoints with their travel time."""

    def __init__(self, bounding_box: BoundingBox, parameters: TrajectoryParameters, axes: AxisMapping):
        self._box = bounding_box
        self._parameters = parameters
        self._axes = axes

        self.x, self.y = bounding_box.center
        self.depth = parameters.draw_depth
        self.waypoints: List[Waypoint] = []

    def _rescale(self, x: float, y: float):
        size = self._parameters.screen_size
        rel_x = (x - self._box.x) / self._box.width * size - size / 2
        rel_y = (y - self._box.y) / self._box.height * size - size / 2
        return rel_x, rel_y

    def move(self, x: float, y: float, depth: float) -> None:
        rel_x, rel_y = self._rescale(x, y)
        cur_x, cur_y = self._rescale(self.x, self.y)

        distance = math.hypot(rel_x - cur_x, rel_y - cur_y, depth - self.depth)
        t = distance / self._parameters.speed if distance > 0 else 0.0
        if not self.waypoints:
            t = 0.0

        self.waypoints.append(Waypoint(*self._axes.place(rel_x, rel_y, depth), t=t))

        self.x = x
        self.y = y
        self.depth = depth

    def draw_points(self, points: np.ndarray) -> None:
        for x, y in points:
            self.move(float(x), float(y), self._parameters.draw_depth)


def build_from_path_segments(segments: Iterable,
                             bounding_box: BoundingBox | dict,
                             parameters: TrajectoryParameters | None = None,
                             axes: AxisMapping = PEN_AXES) -> WaypointPath:
    """
    Build a waypoint path from move / line / quadratic / cubic / arc segments.

    Raises:
        PathSegmentError: On an unknown or malformed segment, before any waypoint is built.
    """
    parameters = parameters or TrajectoryParameters()
    parameters.validate()
    if isinstance(bounding_box, dict):
        bounding_box = BoundingBox.from_dict(bounding_box)

    segments = normalize_segments(segments)

    lift = parameters.lift_depth
    draw = parameters.draw_depth
    writer = _WaypointWriter(bounding_box, parameters, axes)

    for segment in segments:
        if isinstance(segment, MoveSegment):
            writer.move(writer.x, writer.y, lift)
            writer.move(segment.x, segment.y, lift)
            writer.move(segment.x, segment.y, draw)
        elif isinstance(segment, LineSegment):
            writer.move(segment.x, segment.y, draw)
        elif isinstance(segment, QuadraticSegment):
            writer.draw_points(quadratic_lut(
                (writer.x, writer.y), (segment.x1, segment.y1), (segment.x, segment.y), parameters.bezier_steps
            ))
        elif isinstance(segment, CubicSegment):
            writer.draw_points(cubic_lut(
                (writer.x, writer.y),
                (segment.x1, segment.y1),
                (segment.x2, segment.y2),
                (segment.x, segment.y),
                parameters.bezier_steps,
            ))
        elif isinstance(segment, ArcSegment):
            writer.draw_points(flatten_arc(writer.x, writer.y, segment, parameters.arc_step_length))

    if not writer.waypoints:
        raise PathSegmentError("Path produced no waypoints")

    duration = sum(waypoint.t for waypoint in writer.waypoints[1:])
    log.info(f'Built path of {len(writer.waypoints)} waypoints from {len(segments)} segments, {duration:.0f} ms')
    return WaypointPath(tuple(writer.waypoints), duration)
