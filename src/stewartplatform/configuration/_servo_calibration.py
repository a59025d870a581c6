from dataclasses import dataclass

from stewartplatform.errors import ConfigurationError


@dataclass(frozen=True)
class ServoCalibration:
    """Hardware calibration of one servo.

    These values are specific to a physical rig and have no defaults; they are
    read from the configuration file.

    Attributes:
        midpoint: Servo command at a horn angle of zero.
        amplitude: Servo command units per radian of horn angle.
        direction: +1 or -1 depending on how the servo is mounted.
    """

    midpoint: float
    amplitude: float
    direction: int

    def to_command(self, angle: float | None) -> float | None:
        """Map a horn angle (radians) to a servo command. Invalid angles stay None."""
        if angle is None:
            return None
        return self.midpoint + self.direction * self.amplitude * angle

    def validate(self) -> None:
        if self.direction not in (-1, 1):
            raise ConfigurationError(f"direction must be 1 or -1, got {self.direction}")
        if self.amplitude == 0:
            raise ConfigurationError("amplitude must not be zero")

    @classmethod
    def from_dict(cls, data: dict) -> 'ServoCalibration':
        try:
            return cls(midpoint=data['midpoint'], amplitude=data['amplitude'], direction=data['direction'])
        except KeyError as e:
            raise ConfigurationError(f"Servo calibration is missing '{e.args[0]}'") from e
