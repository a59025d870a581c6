"""
Animation descriptors.

Every animation is one of four kinds, fixed when the descriptor is built:
a closed-form function of progress, a waypoint table, a passthrough of live
input, or a transition towards a target pose.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable

import numpy as np
from scipy.spatial.transform import Rotation

from stewartplatform.kinematics.models import Pose, neutral_pose

from .interpolation import WaypointTable
from .models import AnimationKind, LiveInput


@dataclass(frozen=True, kw_only=True, eq=False)
class AnimationDescriptor(ABC):
    """Common fields of all animations.

    Attributes:
        name: Registry name.
        duration: Length of one run in ms. Zero means driven by live input every tick.
        next: Name of the animation started when this one completes, or None to stop.
        path_visible: Whether the rendering sink should draw the animation's path.
    """

    name: str
    duration: float
    next: str | None = None
    path_visible: bool = False

    @property
    @abstractmethod
    def kind(self) -> AnimationKind:
        pass

    @abstractmethod
    def evaluate(self, progress: float, live_input: LiveInput | None = None) -> Pose:
        pass


@dataclass(frozen=True, kw_only=True, eq=False)
class PeriodicAnimation(AnimationDescriptor):
    fn: Callable[[float], Pose]

    @property
    def kind(self) -> AnimationKind:
        return AnimationKind.PERIODIC

    def evaluate(self, progress: float, live_input: LiveInput | None = None) -> Pose:
        return self.fn(progress)


@dataclass(frozen=True, kw_only=True, eq=False)
class WaypointAnimation(AnimationDescriptor):
    table: WaypointTable

    @classmethod
    def from_table(cls, name: str, table: WaypointTable, next: str | None = None,
                   path_visible: bool = True) -> 'WaypointAnimation':
        return cls(name=name, duration=table.duration, next=next, path_visible=path_visible, table=table)

    @property
    def kind(self) -> AnimationKind:
        return AnimationKind.WAYPOINT_TABLE

    def evaluate(self, progress: float, live_input: LiveInput | None = None) -> Pose:
        return self.table.evaluate(progress)


@dataclass(frozen=True, kw_only=True, eq=False)
class LiveInputAnimation(AnimationDescriptor):
    fn: Callable[[LiveInput], Pose]

    @property
    def kind(self) -> AnimationKind:
        return AnimationKind.LIVE_INPUT

    def evaluate(self, progress: float, live_input: LiveInput | None = None) -> Pose:
        # hold the platform level until the host delivers input
        if live_input is None:
            return neutral_pose()
        return self.fn(live_input)


@dataclass(frozen=True, kw_only=True, eq=False)
class TransitionAnimation(AnimationDescriptor):
    """Linear translation and slerped orientation from one pose to another."""

    start_translation: np.ndarray
    target_translation: np.ndarray
    rotation_at: Callable[[float], Rotation]

    @property
    def kind(self) -> AnimationKind:
        return AnimationKind.TRANSITION

    def evaluate(self, progress: float, live_input: LiveInput | None = None) -> Pose:
        translation = self.start_translation + progress * (self.target_translation - self.start_translation)
        return Pose(translation, self.rotation_at(progress))
