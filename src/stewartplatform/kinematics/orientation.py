"""
Rotation helpers shared by the solver and the animations.

Rotations are scipy Rotation objects (unit quaternions). Compositions are
rebuilt from their quaternion so the norm never drifts.
"""

from typing import Callable, Sequence

import numpy as np
from scipy.spatial.transform import Rotation, Slerp

IDENTITY = Rotation.identity()

X_AXIS = np.array([1.0, 0.0, 0.0])
Y_AXIS = np.array([0.0, 1.0, 0.0])
Z_AXIS = np.array([0.0, 0.0, 1.0])


def from_axis_angle(axis: Sequence[float], angle: float) -> Rotation:
    """Rotation of `angle` radians about `axis` (normalized here)."""
    axis = np.asarray(axis, dtype=float)
    norm = np.linalg.norm(axis)
    if norm == 0.0:
        return IDENTITY
    return Rotation.from_rotvec(axis / norm * angle)


def from_quaternion(w: float, x: float, y: float, z: float) -> Rotation:
    """Rotation from scalar-first quaternion components, normalized."""
    return Rotation.from_quat([x, y, z, w])


def normalize(rotation: Rotation) -> Rotation:
    return Rotation.from_quat(rotation.as_quat())


def compose(*rotations: Rotation) -> Rotation:
    """Compose rotations left to right, i.e. compose(a, b) applies b first."""
    result = IDENTITY
    for rotation in rotations:
        result = result * rotation
    return normalize(result)


def slerp(start: Rotation, end: Rotation) -> Callable[[float], Rotation]:
    """Return a function mapping progress in [0, 1] to the spherical interpolation."""
    key_rotations = Rotation.from_quat(np.vstack([start.as_quat(), end.as_quat()]))
    interpolator = Slerp([0.0, 1.0], key_rotations)

    def at(progress: float) -> Rotation:
        return interpolator([min(max(progress, 0.0), 1.0)])[0]

    return at


def rotate_vectors(rotation: Rotation, vectors: np.ndarray) -> np.ndarray:
    """Rotate a single vector or an (n, 3) array of vectors."""
    return rotation.apply(vectors)


def translate_xyz(x: float, y: float, z: float) -> np.ndarray:
    """
    Creates a homogeneous transformation matrix for translation.
    Translates by the given x, y, z offsets.
    """
    return np.array(
        [
            [1, 0, 0, x],
            [0, 1, 0, y],
            [0, 0, 1, z],
            [0, 0, 0, 1],
        ],
        dtype=float,
    )


def to_matrix4(rotation: Rotation) -> np.ndarray:
    """4x4 homogeneous matrix of a rotation."""
    transform = np.eye(4)
    transform[0:3, 0:3] = rotation.as_matrix()
    return transform


def pose_matrix(translation: Sequence[float], rotation: Rotation) -> np.ndarray:
    """Homogeneous transform of the platform frame: translate, then rotate."""
    return translate_xyz(*translation) @ to_matrix4(rotation)
