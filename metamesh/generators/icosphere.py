# metamesh/generators/icosphere.py
import math
from typing import Dict, List, Tuple

import numpy as np

from metamesh.buffer import MeshBuilder, RawGeometry
from metamesh.errors import require_at_least, require_positive
from metamesh.math import TAU, normalize_rows
from metamesh.shapes import IcosphereShape

_T = (1.0 + math.sqrt(5.0)) / 2.0

POLE_EPSILON = 1e-9

ICOSAHEDRON_VERTICES: Tuple[Tuple[float, float, float], ...] = (
    (-1.0, _T, 0.0),
    (1.0, _T, 0.0),
    (-1.0, -_T, 0.0),
    (1.0, -_T, 0.0),
    (0.0, -1.0, _T),
    (0.0, 1.0, _T),
    (0.0, -1.0, -_T),
    (0.0, 1.0, -_T),
    (_T, 0.0, -1.0),
    (_T, 0.0, 1.0),
    (-_T, 0.0, -1.0),
    (-_T, 0.0, 1.0),
)

# Counter-clockwise seen from outside.
ICOSAHEDRON_FACES: Tuple[Tuple[int, int, int], ...] = (
    (0, 11, 5),
    (0, 5, 1),
    (0, 1, 7),
    (0, 7, 10),
    (0, 10, 11),
    (1, 5, 9),
    (5, 11, 4),
    (11, 10, 2),
    (10, 7, 6),
    (7, 1, 8),
    (3, 9, 4),
    (3, 4, 2),
    (3, 2, 6),
    (3, 6, 8),
    (3, 8, 9),
    (4, 9, 5),
    (2, 4, 11),
    (6, 2, 10),
    (8, 6, 7),
    (9, 8, 1),
)


def _subdivide(
    vertices: List[np.ndarray], faces: List[Tuple[int, int, int]]
) -> List[Tuple[int, int, int]]:
    """Split every face in four. Edge midpoints are shared and reprojected."""
    cache: Dict[Tuple[int, int], int] = {}

    def midpoint(i: int, j: int) -> int:
        key = (i, j) if i < j else (j, i)
        index = cache.get(key)
        if index is None:
            m = vertices[i] + vertices[j]
            vertices.append(m / np.linalg.norm(m))
            index = len(vertices) - 1
            cache[key] = index
        return index

    out: List[Tuple[int, int, int]] = []
    for a, b, c in faces:
        ab = midpoint(a, b)
        bc = midpoint(b, c)
        ca = midpoint(c, a)
        out.extend(((a, ab, ca), (b, bc, ab), (c, ca, bc), (ab, bc, ca)))
    return out


def _split_seam(
    normals: np.ndarray, uvs: np.ndarray, faces: np.ndarray
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Duplicate vertices so no triangle interpolates across the u = 0/1 seam.

    Triangles spanning more than half the texture get a copy of their
    low-u vertices shifted by +1. Pole vertices get one copy per triangle,
    with u centred between the other two corners.
    """
    normals = list(normals)
    uvs = [np.array(uv) for uv in uvs]
    pole = np.abs(np.array(normals)[:, 1]) > 1.0 - POLE_EPSILON
    original = len(pole)
    wrapped: Dict[int, int] = {}

    def is_pole(i: int) -> bool:
        return i < original and bool(pole[i])

    out: List[Tuple[int, ...]] = []
    for face in faces.tolist():
        us = [uvs[i][0] for i in face if not is_pole(i)]
        if max(us) - min(us) > 0.5:
            for k, i in enumerate(face):
                if is_pole(i) or uvs[i][0] >= 0.5:
                    continue
                if i not in wrapped:
                    normals.append(normals[i])
                    uvs.append(uvs[i] + (1.0, 0.0))
                    wrapped[i] = len(normals) - 1
                face[k] = wrapped[i]

        for k, i in enumerate(face):
            if is_pole(i):
                others = [uvs[j][0] for j in face if j != i]
                normals.append(normals[i])
                uvs.append(np.array((sum(others) / 2.0, uvs[i][1])))
                face[k] = len(normals) - 1
        out.append(tuple(face))

    # Pole originals are replaced by their per-triangle copies.
    used, remap = np.unique(np.array(out, dtype=np.int64), return_inverse=True)
    return (
        np.array(normals)[used],
        np.array(uvs)[used],
        remap.reshape(-1, 3),
    )


def generate_icosphere(shape: IcosphereShape) -> RawGeometry:
    """
    Geodesic sphere: an icosahedron subdivided ``subdivision`` times,
    giving 20 * 4^s triangles. Vertices are shared except along the UV
    seam and at the poles, where they are duplicated.
    """
    require_positive("icosphere.radius", shape.radius)
    require_at_least("icosphere.subdivision", shape.subdivision, 0)

    base = normalize_rows(np.array(ICOSAHEDRON_VERTICES, dtype=np.float64))
    vertices = list(base)
    faces = list(ICOSAHEDRON_FACES)
    for _ in range(shape.subdivision):
        faces = _subdivide(vertices, faces)

    normals = np.array(vertices)
    u = 0.5 - np.arctan2(normals[:, 2], normals[:, 0]) / TAU
    v = 0.5 + np.arcsin(np.clip(normals[:, 1], -1.0, 1.0)) / math.pi
    normals, uvs, triangles = _split_seam(
        normals, np.stack((u, v), 1), np.array(faces, dtype=np.int64)
    )

    builder = MeshBuilder()
    builder.add_vertices(normals * shape.radius, normals, uvs)
    builder.add_triangles(triangles)
    return builder.build()
