"""
Built-in animations.

All of them are pure functions of the progress fraction, except mouse and
gamepad, which pass live input through every tick.
"""

import math
from typing import Dict

import numpy as np

from stewartplatform import constants
from stewartplatform.errors import UnknownTrajectoryError
from stewartplatform.kinematics.models import Pose
from stewartplatform.kinematics.orientation import IDENTITY, Z_AXIS, from_axis_angle, from_quaternion

from .descriptors import AnimationDescriptor, LiveInputAnimation, PeriodicAnimation, WaypointAnimation
from .interpolation import WaypointTable
from .models import LiveInput, Waypoint


def _wobble_orientation(b: float):
    return from_quaternion(-13, -math.cos(b), math.sin(b), 0)


def _swing(progress: float) -> float:
    # swings back and forth once per run, resting at both ends
    return math.sin(progress * math.pi * 2 - math.pi * 8) ** 5


def rotate(progress: float) -> Pose:
    b = _swing(progress) / 2
    return Pose(np.zeros(3), from_axis_angle(Z_AXIS, b))


def tilt(progress: float) -> Pose:
    """Swing about three horizontal axes 60 degrees apart, then about z."""
    z = 0
    if progress < 1 / 4:
        progress = progress * 4
        a = 0
    elif progress < 1 / 2:
        progress = (progress - 1 / 4) * 4
        a = 1 * math.pi / 3
    elif progress < 3 / 4:
        progress = (progress - 1 / 2) * 4
        a = 2 * math.pi / 3
    else:
        progress = (progress - 3 / 4) * 4
        a = 0
        z = 1

    if z == 0:
        axis = (math.sin(a), -math.cos(a), 0)
    else:
        axis = (0, 0, 1)

    b = _swing(progress) / 3
    return Pose(np.zeros(3), from_axis_angle(axis, b))


def wobble(progress: float) -> Pose:
    b = progress * 2 * math.pi
    translation = np.array([math.cos(-b) * 13, math.sin(-b) * 13, 0.0])
    return Pose(translation, _wobble_orientation(b))


def breathe(progress: float) -> Pose:
    y = math.exp(math.sin(2 * math.pi * progress) - 1) / (math.e * math.e - 1)
    return Pose(np.array([0.0, 0.0, y * 50]), IDENTITY)


def eight(progress: float) -> Pose:
    t = (-0.5 + 2.0 * progress) * math.pi
    return Pose(np.array([math.cos(t) * 30, math.sin(t) * math.cos(t) * 30, 0.0]), IDENTITY)


def lissajous(progress: float) -> Pose:
    return Pose(np.array([math.sin(3 * progress * 2 * math.pi) * 30, math.sin(progress * 2 * 2 * math.pi) * 30, 0.0]),
                IDENTITY)


def helical(progress: float) -> Pose:
    remaining = 1 - progress
    return Pose(
        np.array([
            math.cos(remaining * math.pi * 8) * 20,
            math.sin(remaining * math.pi * 8) * 20,
            remaining * 20,
        ]),
        IDENTITY,
    )


def mouse(live_input: LiveInput) -> Pose:
    if live_input.pointer is None:
        return Pose(np.zeros(3), IDENTITY)

    pointer_x, pointer_y = live_input.pointer
    return Pose(
        np.array([
            (pointer_x - constants.POINTER_CENTER_X) / constants.POINTER_SCALE,
            (pointer_y - constants.POINTER_CENTER_Y) / constants.POINTER_SCALE,
            0.0,
        ]),
        IDENTITY,
    )


def gamepad(live_input: LiveInput) -> Pose:
    """Left stick translates, right stick tilts; with L1 held the right stick rotates about z."""
    if not live_input.has_gamepad:
        return Pose(np.zeros(3), IDENTITY)

    axes = live_input.axes
    if live_input.l1_pressed:
        return Pose(np.zeros(3), from_axis_angle(Z_AXIS, -axes[3] * constants.GAMEPAD_ROTATION))

    b = math.atan2(-axes[3], -axes[2])
    translation = np.array([axes[1] * constants.GAMEPAD_TRANSLATION, axes[0] * constants.GAMEPAD_TRANSLATION, 0.0])
    return Pose(translation, _wobble_orientation(b))


SQUARE_WAYPOINTS = (
    Waypoint(-30, -30, 10, 0),
    Waypoint(-30, 30, 0, 1000),
    Waypoint(30, 30, 10, 1000),
    Waypoint(30, -30, 0, 1000),
    Waypoint(-30, -30, 10, 1000),
)


def builtin_animations() -> Dict[str, AnimationDescriptor]:
    """A fresh registry of the built-in animations, keyed by name."""
    animations = [
        PeriodicAnimation(name='rotate', duration=4000, next='rotate', fn=rotate),
        PeriodicAnimation(name='tilt', duration=7000, next='tilt', fn=tilt),
        WaypointAnimation.from_table('square', WaypointTable(SQUARE_WAYPOINTS), next='square'),
        PeriodicAnimation(name='wobble', duration=3000, next='wobble', fn=wobble),
        PeriodicAnimation(name='breathe', duration=5000, next='breathe', fn=breathe),
        PeriodicAnimation(name='eight', duration=3500, next='eight', path_visible=True, fn=eight),
        PeriodicAnimation(name='lissajous', duration=10000, next='lissajous', path_visible=True, fn=lissajous),
        PeriodicAnimation(name='helical', duration=5000, next=None, path_visible=True, fn=helical),
        LiveInputAnimation(name='mouse', duration=0, fn=mouse),
        LiveInputAnimation(name='gamepad', duration=0, fn=gamepad),
    ]
    return {animation.name: animation for animation in animations}


# Single key shortcuts
ALIASES = {
    'q': 'square',
    'w': 'wobble',
    'e': 'eight',
    'r': 'rotate',
    't': 'tilt',
    'y': 'lissajous',
    'm': 'mouse',
    'g': 'gamepad',
    'b': 'breathe',
    'h': 'helical',
}


def resolve_name(name: str, animations: Dict[str, AnimationDescriptor]) -> AnimationDescriptor:
    """Look up an animation by name or alias."""
    name = ALIASES.get(name, name)
    try:
        return animations[name]
    except KeyError:
        raise UnknownTrajectoryError(name) from None
