import numpy as np

from stewartplatform.constants import ANGLE_EPSILON
from stewartplatform.logger import Logger

from .models import LegAngle, LegStateSnapshot, LegStatus, PlatformGeometry, Pose, ServoAngles
from .orientation import rotate_vectors

log = Logger().setup_logger('Inverse kinematics')


class InverseKinematicsSolver:
    """
    Closed-form inverse kinematics of a rotary-servo Stewart platform.

    For every leg the horn angle alpha solves e*sin(alpha) + f*cos(alpha) = g,
    which is the condition |q - H| = rod_length for the horn tip
    H = B + h*(cos(alpha)*cos(beta), cos(alpha)*sin(beta), sin(alpha)).

    The derived state (q, l, H) is overwritten on every update. Callers that
    need it beyond the current tick must take a snapshot().
    """

    def __init__(self, geometry: PlatformGeometry):
        self._geometry = geometry

        self._base_joints = geometry.base_joints
        self._platform_joints = geometry.platform_joints
        azimuths = geometry.motor_azimuths
        self._sin_beta = np.sin(azimuths)
        self._cos_beta = np.cos(azimuths)

        self._rod_length = geometry.rod_length
        self._horn_length = geometry.horn_length
        self._t0 = np.asarray(geometry.t0, dtype=float)

        leg_count = len(geometry.legs)
        self.q = np.zeros((leg_count, 3))
        self.l = np.zeros((leg_count, 3))
        self.H = np.zeros((leg_count, 3))
        self._status = [LegStatus.OK] * leg_count

        self.translation = np.zeros(3)
        self.orientation = None

    @property
    def geometry(self) -> PlatformGeometry:
        return self._geometry

    def update(self, pose: Pose) -> None:
        """Recompute q, l and H for a pose. Never raises for unreachable legs."""
        self.translation = np.array(pose.translation, dtype=float)
        self.orientation = pose.orientation

        h = self._horn_length
        d = self._rod_length

        rotated = rotate_vectors(pose.orientation, self._platform_joints)
        self.q[:] = rotated + self.translation + self._t0
        self.l[:] = self.q - self._base_joints

        for i in range(len(self._status)):
            lx, ly, lz = self.l[i]

            g = lx * lx + ly * ly + lz * lz - d * d + h * h
            e = 2 * h * lz
            f = 2 * h * (self._cos_beta[i] * lx + self._sin_beta[i] * ly)

            sq_sum = e * e + f * f
            radicand = 1 - g * g / sq_sum if sq_sum > 0 else -1.0

            if not radicand >= 0:
                self.H[i] = np.nan
                self._status[i] = LegStatus.UNREACHABLE
                continue

            sqrt1 = np.sqrt(radicand)
            sqrt2 = np.sqrt(sq_sum)
            sin_alpha = (g * e) / sq_sum - (f * sqrt1) / sqrt2
            cos_alpha = (g * f) / sq_sum + (e * sqrt1) / sqrt2

            base = self._base_joints[i]
            self.H[i, 0] = base[0] + h * cos_alpha * self._cos_beta[i]
            self.H[i, 1] = base[1] + h * cos_alpha * self._sin_beta[i]
            self.H[i, 2] = base[2] + h * sin_alpha
            self._status[i] = LegStatus.OK

    def get_servo_angles(self) -> ServoAngles:
        """Servo angle per leg, or an invalid marker for unreachable / out of range legs."""
        servo_min, servo_max = self._geometry.servo_range
        legs = []

        for i, status in enumerate(self._status):
            if status == LegStatus.UNREACHABLE:
                legs.append(LegAngle(None, LegStatus.UNREACHABLE))
                continue

            ratio = (self.H[i, 2] - self._base_joints[i, 2]) / self._horn_length
            if abs(ratio) > 1 + ANGLE_EPSILON or not np.isfinite(ratio):
                legs.append(LegAngle(None, LegStatus.UNREACHABLE))
                continue

            angle = float(np.arcsin(np.clip(ratio, -1.0, 1.0)))
            if not servo_min <= angle <= servo_max:
                legs.append(LegAngle(None, LegStatus.OUT_OF_RANGE))
                continue

            legs.append(LegAngle(angle, LegStatus.OK))

        servo_angles = ServoAngles(tuple(legs))
        if not servo_angles.is_valid:
            log.debug(f'Infeasible legs {servo_angles.invalid_legs} for translation {self.translation}')
        return servo_angles

    def get_leg_lengths(self) -> np.ndarray:
        """Distance between horn tip and platform joint per leg (equals rod length when solved)."""
        return np.linalg.norm(self.q - self.H, axis=1)

    def snapshot(self) -> LegStateSnapshot:
        return LegStateSnapshot(q=self.q.copy(), l=self.l.copy(), h=self.H.copy())
