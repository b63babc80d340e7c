# metamesh/math.py
import math
from typing import Sequence, Union

import numpy as np

from metamesh.types import Scalar, Vector2, Vector3

VectorLike = Union[Vector2, Vector3, Sequence[float], np.ndarray]

TAU = 2.0 * math.pi


def as_array(v: VectorLike) -> np.ndarray:
    if isinstance(v, (Vector2, Vector3)):
        return v.to_array()
    return np.asarray(v, dtype=np.float64)


# -- Vector Math --
def dot_vec(a: VectorLike, b: VectorLike) -> Scalar:
    return float(np.dot(as_array(a), as_array(b)))


def magnitude_vec(v: VectorLike) -> Scalar:
    return math.sqrt(dot_vec(v, v))


def norm_vec(v: VectorLike) -> np.ndarray:
    a = as_array(v)
    mag = magnitude_vec(a)
    if mag == 0:
        return a
    return a / mag


def cross_vec3(a: VectorLike, b: VectorLike) -> np.ndarray:
    a, b = as_array(a), as_array(b)
    return np.array(
        (
            a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0],
        ),
        dtype=np.float64,
    )


# -- Batched --
def normalize_rows(v: np.ndarray) -> np.ndarray:
    """
    Normalize each row of an (N, K) array.
    Zero-length rows are returned unchanged instead of becoming NaN.
    """
    lengths = np.linalg.norm(v, axis=1, keepdims=True)
    safe = np.where(lengths == 0.0, 1.0, lengths)
    return v / safe


def face_normals(positions: np.ndarray, triangles: np.ndarray) -> np.ndarray:
    """
    Unnormalized face normals, one per triangle.
    positions: (N, 3)
    triangles: (M, 3) vertex indices
    Returns: (M, 3), length equal to twice the triangle area.
    """
    v0 = positions[triangles[:, 0]]
    v1 = positions[triangles[:, 1]]
    v2 = positions[triangles[:, 2]]
    return np.cross(v1 - v0, v2 - v0)


def swizzle_to_axis(v: np.ndarray, axis: int) -> np.ndarray:
    """
    Rotate Y-up data so that +Y points along the given axis (0=X, 1=Y, 2=Z).

    Uses a cyclic permutation of the columns, which is a proper rotation,
    so triangle winding is preserved.
    v: (N, 3)
    """
    if axis == 1:
        return v
    if axis == 2:
        # x' = z, y' = x, z' = y
        return v[:, [2, 0, 1]]
    if axis == 0:
        # x' = y, y' = z, z' = x
        return v[:, [1, 2, 0]]
    raise ValueError(f"axis must be 0, 1 or 2, not {axis}")
