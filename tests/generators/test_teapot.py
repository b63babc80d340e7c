import numpy as np
import pytest

from metamesh.dispatch import generate
from metamesh.errors import InvalidParameter
from metamesh.generators.teapot import PATCHES, patch_indices, tessellate_patches
from metamesh.shapes import TeapotShape
from tests.conftest import assert_valid_mesh, winding_alignment


def test_patch_table_shape():
    assert PATCHES.shape == (32, 16, 3)
    assert not PATCHES.flags.writeable


@pytest.mark.parametrize("n", [2, 3, 4, 7])
def test_counts(n):
    mesh = generate(TeapotShape(subdivision=n))

    assert mesh.vertex_count == 32 * n * n
    assert mesh.triangle_count == 32 * (n - 1) * (n - 1) * 2
    assert_valid_mesh(mesh)


def test_four_by_four_scenario():
    mesh = generate(TeapotShape(subdivision=4))

    assert mesh.vertex_count == 512
    assert mesh.triangle_count == 576
    assert mesh.index_count == 1728
    np.testing.assert_allclose(mesh.positions[0], PATCHES[0, 0])
    np.testing.assert_allclose(mesh.positions[0], (1.4, 2.4, 0.0), rtol=1e-6)
    np.testing.assert_allclose(mesh.uvs[0], (0.0, 0.0))


def test_first_patch_index_order():
    np.testing.assert_array_equal(
        patch_indices(3)[:12], [0, 1, 3, 1, 4, 3, 1, 2, 4, 2, 5, 4]
    )
    assert patch_indices(3, offset=9).min() == 9


def test_vertices_are_column_major_per_patch():
    mesh = generate(TeapotShape(subdivision=3))

    # Vertex k of a patch is column k // n (u) and row k % n (v).
    np.testing.assert_allclose(mesh.uvs[:9, 0], np.repeat([0.0, 0.5, 1.0], 3))
    np.testing.assert_allclose(mesh.uvs[:9, 1], np.tile([0.0, 0.5, 1.0], 3))


def test_patch_corners_match_control_points():
    n = 5
    mesh = generate(TeapotShape(subdivision=n))

    for patch in range(32):
        block = mesh.positions[patch * n * n : (patch + 1) * n * n]
        np.testing.assert_allclose(block[0], PATCHES[patch, 0], atol=1e-6)
        np.testing.assert_allclose(block[-1], PATCHES[patch, 15], atol=1e-6)


def test_normals_have_unit_length():
    mesh = generate(TeapotShape(subdivision=6))

    np.testing.assert_allclose(np.linalg.norm(mesh.normals, axis=1), 1.0, atol=1e-5)


@pytest.mark.parametrize("n", [4, 5, 6, 8])
def test_winding_agrees_with_normals(n):
    alignment = winding_alignment(generate(TeapotShape(subdivision=n)))

    assert len(alignment) > 0
    assert np.all(alignment > 0)


@pytest.mark.parametrize("n", [1, 0, -3])
def test_rejects_low_subdivision(n):
    with pytest.raises(InvalidParameter):
        generate(TeapotShape(subdivision=n))


def test_rejects_empty_table():
    with pytest.raises(InvalidParameter, match="empty"):
        tessellate_patches([], 4)


def test_rejects_partial_patch():
    with pytest.raises(InvalidParameter, match="multiple of 16"):
        tessellate_patches(np.zeros((20, 3)), 4)


def test_pole_patch_tessellates_without_nan(pole_patch):
    geometry = tessellate_patches(pole_patch, 4)

    assert np.all(np.isfinite(geometry.normals))
    np.testing.assert_allclose(np.linalg.norm(geometry.normals, axis=1), 1.0)
