import numpy as np
import pytest

from metamesh.buffer import MeshBuffer


def assert_valid_mesh(mesh: MeshBuffer) -> None:
    """Index buffer and attribute invariants every generator must hold."""
    n = mesh.vertex_count
    assert n > 0
    assert mesh.normals.shape == (n, 3)
    assert mesh.uvs.shape == (n, 2)
    assert mesh.index_count % 3 == 0
    assert mesh.indices.dtype == np.uint32
    assert int(mesh.indices.max()) < n
    assert np.all(np.isfinite(mesh.positions))
    assert np.all(np.isfinite(mesh.normals))


def winding_alignment(mesh: MeshBuffer) -> np.ndarray:
    """
    Cosine between each non-degenerate triangle's right-hand face normal
    and the mean of its vertex normals.
    """
    tris = mesh.triangles().astype(np.int64)
    p = mesh.positions.astype(np.float64)
    face = np.cross(p[tris[:, 1]] - p[tris[:, 0]], p[tris[:, 2]] - p[tris[:, 0]])
    area = np.linalg.norm(face, axis=1)
    keep = area > 1e-9

    vertex_normal = mesh.normals[tris].astype(np.float64).mean(axis=1)
    vertex_normal /= np.linalg.norm(vertex_normal, axis=1, keepdims=True)
    return np.sum(face[keep] * vertex_normal[keep], axis=1) / area[keep]


@pytest.fixture
def pole_patch():
    """
    A 16-point patch whose first curve collapses to a single point, so the
    cross-curve derivative vanishes along v = 0.
    """
    curves = [[(0.0, 0.0, 0.0)] * 4]
    for k in (1, 2, 3):
        curves.append([(float(j), 0.0, float(k)) for j in range(4)])
    return np.array(curves, dtype=np.float64).reshape(16, 3)
