import math
import time
from typing import Callable, Dict, Sequence

import numpy as np
from scipy.spatial.transform import Rotation

from stewartplatform import constants
from stewartplatform.errors import ConfigurationError
from stewartplatform.kinematics.models import Pose, neutral_pose
from stewartplatform.kinematics.orientation import IDENTITY, slerp
from stewartplatform.logger import Logger

from .animations import builtin_animations, resolve_name
from .descriptors import AnimationDescriptor, TransitionAnimation
from .models import LiveInput

log = Logger().setup_logger('Animator')


def monotonic_ms() -> float:
    return time.monotonic() * 1000


class Animator:
    """
    Drives the platform pose from the active animation descriptor.

    The host calls update() once per frame. Progress is the elapsed time over
    the descriptor's duration, clamped to [0, 1]; overshoot is absorbed, never
    extrapolated. When a run completes and the descriptor names a successor,
    the successor starts at progress 0.
    """

    def __init__(self,
                 clock: Callable[[], float] | None = None,
                 animations: Dict[str, AnimationDescriptor] | None = None,
                 initial: str | None = constants.DEFAULT_ANIMATION):
        self._clock = clock or monotonic_ms
        self._animations = dict(animations) if animations is not None else builtin_animations()

        self.current: AnimationDescriptor | None = None
        self.next: str | None = None
        self.start_time = 0.0
        self.pose = neutral_pose()
        self.path_visible = True

        if initial is not None:
            self.start(initial)

    def clock(self) -> float:
        return self._clock()

    @property
    def animations(self) -> Dict[str, AnimationDescriptor]:
        return self._animations

    def register(self, descriptor: AnimationDescriptor) -> None:
        self._animations[descriptor.name] = descriptor

    def resolve(self, name: str) -> AnimationDescriptor:
        return resolve_name(name, self._animations)

    def _check_successor(self, next: str | None, name: str | None = None) -> None:
        # update() starts successors without checking them again
        if next is not None and next != name:
            self.resolve(next)

    def start(self, animation: str | AnimationDescriptor, now: float | None = None) -> AnimationDescriptor:
        """Switch to an animation by name, alias or descriptor and reset its start time.

        Raises UnknownTrajectoryError, leaving the current animation running,
        when the animation or its successor is not registered.
        """
        if isinstance(animation, AnimationDescriptor):
            self._check_successor(animation.next, animation.name)
            self.register(animation)
            descriptor = animation
        else:
            descriptor = self.resolve(animation)
            self._check_successor(descriptor.next, descriptor.name)

        self.current = descriptor
        self.next = descriptor.next
        self.start_time = self.clock() if now is None else now
        log.info(f'Started animation {descriptor.name} ({descriptor.kind.value}, {descriptor.duration:.0f} ms)')
        return descriptor

    def move_to(self,
                translation: Sequence[float],
                orientation: Rotation = IDENTITY,
                duration: float = 1000,
                next: str | None = None,
                now: float | None = None) -> AnimationDescriptor:
        """Glide from the current pose to the given one, then continue with `next`.

        A zero duration jumps to the target on the next update.
        """
        if not (math.isfinite(duration) and duration >= 0):
            raise ConfigurationError(f"Transition duration must be finite and non-negative, got {duration}")
        self._check_successor(next)

        transition = TransitionAnimation(
            name='move_to',
            duration=duration,
            next=next,
            path_visible=False,
            start_translation=self.pose.translation.copy(),
            target_translation=np.asarray(translation, dtype=float).reshape(3),
            rotation_at=slerp(self.pose.orientation, orientation),
        )
        self.current = transition
        self.next = next
        self.start_time = self.clock() if now is None else now
        log.info(f'Moving to {transition.target_translation} over {duration:.0f} ms')
        return transition

    def progress(self, now: float) -> float:
        if self.current.duration == 0:
            return 1.0
        elapsed = (now - self.start_time) / self.current.duration
        return min(max(elapsed, 0.0), 1.0)

    def update(self, now: float | None = None, live_input: LiveInput | None = None) -> Pose:
        """Evaluate the active animation for this frame and return the pose."""
        now = self.clock() if now is None else now
        progress = self.progress(now)

        self.pose = self.current.evaluate(progress, live_input)

        if progress == 1 and self.current.duration != 0 and self.next is not None:
            self.start(self.next, now)

        return self.pose

    def toggle_path_visibility(self) -> bool:
        self.path_visible = not self.path_visible
        return self.path_visible

    def path_points(self, steps: int = constants.PATH_SAMPLE_STEPS) -> np.ndarray:
        """Translations along the active animation for drawing, empty when the path is hidden."""
        if not self.path_visible or self.current is None or not self.current.path_visible:
            return np.empty((0, 3))
        return np.array([self.current.evaluate(i / steps).translation for i in range(steps + 1)])
