from dataclasses import dataclass, fields

from stewartplatform import constants
from stewartplatform.errors import ConfigurationError


@dataclass(frozen=True)
class TrajectoryParameters:
    """Parameters used when turning path segments into waypoints.

    Attributes:
        speed: Drawing speed in mm per ms.
        screen_size: Side of the square window the bounding box is rescaled into (mm).
        draw_depth: Depth coordinate while the pen/laser is drawing.
        lift_depth: Depth coordinate while repositioning.
        bezier_steps: Number of segments a bezier curve is flattened into.
        arc_step_length: Arc length (path units) covered by one arc waypoint.
        default_animation: Animation started when a session is created.
    """

    speed: float = constants.DRAWING_SPEED
    screen_size: float = constants.SCREEN_SIZE
    draw_depth: float = constants.DRAW_DEPTH
    lift_depth: float = constants.LIFT_DEPTH
    bezier_steps: int = constants.BEZIER_STEPS
    arc_step_length: float = constants.ARC_STEP_LENGTH
    default_animation: str = constants.DEFAULT_ANIMATION

    def validate(self) -> None:
        if not self.speed > 0:
            raise ConfigurationError(f"speed must be positive, got {self.speed}")
        if not self.screen_size > 0:
            raise ConfigurationError(f"screen_size must be positive, got {self.screen_size}")
        if self.bezier_steps < 1:
            raise ConfigurationError(f"bezier_steps must be at least 1, got {self.bezier_steps}")
        if not self.arc_step_length > 0:
            raise ConfigurationError(f"arc_step_length must be positive, got {self.arc_step_length}")

    @classmethod
    def from_dict(cls, data: dict) -> 'TrajectoryParameters':
        names = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in names})
