from .geometry import build_circular_platform, build_hexagonal_platform, build_platform, hexagon_vertices
from .models import Leg, LegAngle, LegStateSnapshot, LegStatus, PlatformGeometry, Pose, ServoAngles, neutral_pose
from .solver import InverseKinematicsSolver

__all__ = [
    "InverseKinematicsSolver",
    "Leg",
    "LegAngle",
    "LegStateSnapshot",
    "LegStatus",
    "PlatformGeometry",
    "Pose",
    "ServoAngles",
    "build_circular_platform",
    "build_hexagonal_platform",
    "build_platform",
    "hexagon_vertices",
    "neutral_pose",
]
