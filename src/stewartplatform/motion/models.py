"""
Data types shared by the path builder, the interpolator and the animator.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Sequence, Tuple

from stewartplatform import constants
from stewartplatform.errors import PathSegmentError


@dataclass(frozen=True)
class BoundingBox:
    """Area of the source drawing that is rescaled into the output window."""

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self):
        if not (self.width > 0 and self.height > 0):
            raise PathSegmentError(f"Bounding box needs a positive size, got {self.width} x {self.height}")

    @property
    def center(self) -> Tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2

    @classmethod
    def from_dict(cls, data: dict) -> 'BoundingBox':
        return cls(data['x'], data['y'], data['width'], data['height'])


# ---------------------------------------------------------------------------
# Path segments, absolute source coordinates
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MoveSegment:
    x: float
    y: float

    kind = 'move'


@dataclass(frozen=True)
class LineSegment:
    x: float
    y: float

    kind = 'line'


@dataclass(frozen=True)
class QuadraticSegment:
    x1: float
    y1: float
    x: float
    y: float

    kind = 'quadratic'


@dataclass(frozen=True)
class CubicSegment:
    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float

    kind = 'cubic'


@dataclass(frozen=True)
class ArcSegment:
    """Elliptical arc in SVG endpoint parameterization.

    Attributes:
        rx, ry: Ellipse radii.
        x_axis_rotation: Rotation of the ellipse x axis in degrees.
        large_arc: Take the sweep larger than 180 degrees.
        sweep: Draw in the direction of positive angles.
        x, y: Arc end point.
    """

    rx: float
    ry: float
    x_axis_rotation: float
    large_arc: bool
    sweep: bool
    x: float
    y: float

    kind = 'arc'


SEGMENT_TYPES = {
    segment_type.kind: segment_type
    for segment_type in (MoveSegment, LineSegment, QuadraticSegment, CubicSegment, ArcSegment)
}


def segment_from_dict(data: dict):
    """Build a segment from a mapping with a `kind` key and the segment's fields."""
    kind = data.get('kind')
    segment_type = SEGMENT_TYPES.get(kind)
    if segment_type is None:
        raise PathSegmentError(f"Unknown path segment kind '{kind}'")

    values = {key: value for key, value in data.items() if key != 'kind'}
    try:
        return segment_type(**values)
    except TypeError as e:
        raise PathSegmentError(f"Malformed {kind} segment {data}: {e}") from e


# ---------------------------------------------------------------------------
# Waypoints
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Waypoint:
    """A timed target point.

    Attributes:
        x, y, z: Target translation (mm).
        t: Time to travel here from the previous waypoint (ms).
    """

    x: float
    y: float
    z: float
    t: float = 0.0

    def __getitem__(self, axis: int) -> float:
        return (self.x, self.y, self.z)[axis]

    @classmethod
    def from_dict(cls, data: dict) -> 'Waypoint':
        return cls(data['x'], data['y'], data['z'], data.get('t', 0.0))


@dataclass(frozen=True)
class WaypointPath:
    """Ordered waypoints plus their total duration in ms."""

    waypoints: Tuple[Waypoint, ...]
    duration: float

    def __len__(self) -> int:
        return len(self.waypoints)

    def __iter__(self) -> Iterator[Waypoint]:
        return iter(self.waypoints)

    def __getitem__(self, index: int) -> Waypoint:
        return self.waypoints[index]


@dataclass(frozen=True)
class AxisMapping:
    """Placement of the 2D drawing and its depth axis in the 3D output.

    Attributes:
        horizontal: Output axis receiving the drawing's x coordinate.
        vertical: Output axis receiving the drawing's y coordinate.
        depth: Output axis receiving the pen/laser depth.
        vertical_sign: Factor applied to the drawing's y coordinate.
    """

    horizontal: int
    vertical: int
    depth: int
    vertical_sign: float = 1.0

    def __post_init__(self):
        if sorted((self.horizontal, self.vertical, self.depth)) != [0, 1, 2]:
            raise ValueError(f"Axis mapping must use each of x, y, z once, got {self}")

    def place(self, horizontal: float, vertical: float, depth: float) -> Tuple[float, float, float]:
        point = [0.0, 0.0, 0.0]
        point[self.horizontal] = horizontal
        point[self.vertical] = vertical * self.vertical_sign
        point[self.depth] = depth
        return point[0], point[1], point[2]


# Pen plotter: the drawing lies in the platform's xy plane, z lifts the pen
PEN_AXES = AxisMapping(horizontal=0, vertical=1, depth=2)
# Laser on a wall: the drawing lies in the wall's yz plane, up is +z
WALL_AXES = AxisMapping(horizontal=1, vertical=2, depth=0, vertical_sign=-1.0)


# ---------------------------------------------------------------------------
# Animations
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LiveInput:
    """External input read by the host once per tick.

    Attributes:
        pointer: Pointer position in screen pixels, or None.
        axes: Gamepad stick axes in [-1, 1].
        buttons: Gamepad button values.
    """

    pointer: Tuple[float, float] | None = None
    axes: Sequence[float] = field(default_factory=tuple)
    buttons: Sequence[float] = field(default_factory=tuple)

    @property
    def has_gamepad(self) -> bool:
        return len(self.axes) >= 4

    @property
    def l1_pressed(self) -> bool:
        return len(self.buttons) > constants.GAMEPAD_L1_BUTTON and bool(self.buttons[constants.GAMEPAD_L1_BUTTON])


class AnimationKind(Enum):
    PERIODIC = 'periodic'
    WAYPOINT_TABLE = 'waypoint_table'
    LIVE_INPUT = 'live_input'
    TRANSITION = 'transition'
