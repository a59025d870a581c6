import numpy as np
from scipy.spatial.transform import Rotation


def same_rotation(a: Rotation, b: Rotation, atol: float = 1e-9) -> bool:
    """True if both rotations are equal up to the quaternion sign."""
    return np.allclose(a.as_matrix(), b.as_matrix(), atol=atol)
