from .animations import ALIASES, builtin_animations, resolve_name
from .animator import Animator
from .curves import ArcCenter, arc_to_center, cubic_lut, flatten_arc, quadratic_lut
from .descriptors import (
    AnimationDescriptor,
    LiveInputAnimation,
    PeriodicAnimation,
    TransitionAnimation,
    WaypointAnimation,
)
from .interpolation import WaypointTable
from .models import (
    PEN_AXES,
    WALL_AXES,
    AnimationKind,
    ArcSegment,
    AxisMapping,
    BoundingBox,
    CubicSegment,
    LineSegment,
    LiveInput,
    MoveSegment,
    QuadraticSegment,
    Waypoint,
    WaypointPath,
    segment_from_dict,
)
from .path_builder import build_from_path_segments
from .projection import ProjectedPoint, WallProjection

__all__ = [
    "ALIASES",
    "AnimationDescriptor",
    "AnimationKind",
    "Animator",
    "ArcCenter",
    "ArcSegment",
    "AxisMapping",
    "BoundingBox",
    "CubicSegment",
    "LineSegment",
    "LiveInput",
    "LiveInputAnimation",
    "MoveSegment",
    "PEN_AXES",
    "PeriodicAnimation",
    "ProjectedPoint",
    "QuadraticSegment",
    "TransitionAnimation",
    "WALL_AXES",
    "WallProjection",
    "Waypoint",
    "WaypointAnimation",
    "WaypointPath",
    "WaypointTable",
    "arc_to_center",
    "build_from_path_segments",
    "builtin_animations",
    "cubic_lut",
    "flatten_arc",
    "quadratic_lut",
    "resolve_name",
    "segment_from_dict",
]
