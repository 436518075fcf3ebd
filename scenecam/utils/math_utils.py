"""
Vector and matrix helpers for the camera.

All matrices use the column-vector convention: a point or direction ``v``
is transformed as ``M @ v``. ``as_gl_uniform`` produces the column-major
float32 layout an OpenGL uniform expects.
"""

import numpy as np
import pyrr

from ..core.exceptions import DegenerateVectorError

__all__ = [
    'EPSILON',
    'to_vec3',
    'is_zero_vector',
    'normalize',
    'axis_rotation_matrix',
    'translation_matrix',
    'transform_direction',
    'as_gl_uniform',
    'format_matrix',
]

# Lengths at or below this are treated as zero
EPSILON = 1e-12


def to_vec3(value) -> np.ndarray:
    """Convert any 3-sequence to a float64 vector."""
    vec = np.array(value, dtype=np.float64).reshape(-1)
    if vec.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {vec.shape}")
    return vec


def is_zero_vector(vec: np.ndarray, eps: float = EPSILON) -> bool:
    return float(np.linalg.norm(vec)) <= eps


def normalize(vec: np.ndarray, name: str = "vector") -> np.ndarray:
    """Return ``vec`` scaled to unit length.

    Raises:
        DegenerateVectorError: if ``vec`` has (near) zero length or is not finite
    """
    length = float(np.linalg.norm(vec))
    if not np.isfinite(length):
        raise DegenerateVectorError(name, "contains NaN or Inf")
    if length <= EPSILON:
        raise DegenerateVectorError(name, "zero length")
    return np.asarray(vec, dtype=np.float64) / length


def axis_rotation_matrix(axis: np.ndarray, degrees: float) -> np.ndarray:
    """
    4x4 rotation of ``degrees`` about ``axis`` through the origin.

    Right-handed (counter-clockwise when looking down the axis toward the
    origin), same as ``glm::rotate``.
    """
    axis = normalize(axis, "axis")
    # pyrr builds row-vector matrices; transpose for M @ v
    rot = pyrr.matrix44.create_from_axis_rotation(axis, np.radians(degrees), dtype=np.float64)
    return np.ascontiguousarray(rot.T)


def translation_matrix(offset: np.ndarray) -> np.ndarray:
    offset = np.asarray(offset, dtype=np.float64)
    mat = pyrr.matrix44.create_from_translation(offset, dtype=np.float64)
    return np.ascontiguousarray(mat.T)


def transform_direction(matrix: np.ndarray, direction: np.ndarray) -> np.ndarray:
    """Apply ``matrix`` to a direction (w = 0); translation is ignored."""
    return (matrix @ np.append(direction, 0.0))[:3]


def as_gl_uniform(matrix: np.ndarray) -> bytes:
    """Pack a 4x4 matrix as column-major float32 bytes for ``glUniformMatrix4fv``."""
    return np.asarray(matrix, dtype='f4').tobytes(order='F')


def format_matrix(matrix: np.ndarray, precision: int = 4) -> str:
    """Multi-line text form of a matrix, one row per line."""
    rows = []
    for row in np.asarray(matrix):
        rows.append(" ".join(f"{value:{precision + 6}.{precision}f}" for value in row))
    return "\n".join(rows)
