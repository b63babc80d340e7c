import numpy as np
import pytest

from metamesh.dispatch import build_geometry, generate
from metamesh.buffer import MeshBuildOptions
from metamesh.errors import InvalidParameter
from metamesh.shapes import (
    Axis,
    BoxShape,
    CylinderShape,
    DiscShape,
    IcosphereShape,
    PlaneShape,
    RingShape,
    RoundedBoxShape,
    SphereShape,
    TeapotShape,
)
from metamesh.types import Vector2, Vector3
from tests.conftest import assert_valid_mesh, winding_alignment

SHAPES = [
    PlaneShape(),
    PlaneShape(size=Vector2(2.0, 3.0), segments=(4, 5), axis=Axis.Z),
    BoxShape(),
    BoxShape(size=Vector3(1.0, 2.0, 3.0), segments=(2, 3, 4)),
    RoundedBoxShape(),
    RoundedBoxShape(size=Vector3(1.0, 2.0, 0.5), radius=0.25, divisions=5),
    SphereShape(),
    SphereShape(radius=2.0, columns=5, rows=2, axis=Axis.X),
    IcosphereShape(subdivision=0),
    IcosphereShape(radius=3.0, subdivision=3),
    CylinderShape(),
    CylinderShape(top_radius=0.2, bottom_radius=0.8, height=2.0, columns=7, rows=3),
    CylinderShape(caps=False, axis=Axis.Z),
    RingShape(),
    RingShape(angle=90.0, segments=5, axis=Axis.X),
    DiscShape(),
    DiscShape(angle=180.0, segments=3),
]


@pytest.mark.parametrize("shape", SHAPES, ids=repr)
def test_mesh_is_well_formed(shape):
    assert_valid_mesh(generate(shape))


@pytest.mark.parametrize("shape", SHAPES, ids=repr)
def test_triangles_face_outward(shape):
    alignment = winding_alignment(generate(shape))

    assert len(alignment) > 0
    assert np.all(alignment > 0)


@pytest.mark.parametrize("shape", SHAPES, ids=repr)
def test_normals_are_unit_length(shape):
    mesh = generate(shape)

    np.testing.assert_allclose(np.linalg.norm(mesh.normals, axis=1), 1.0, atol=1e-5)


def test_generation_is_pure():
    a = generate(SphereShape(columns=8, rows=4))
    b = generate(SphereShape(columns=8, rows=4))

    assert a is not b
    np.testing.assert_array_equal(a.positions, b.positions)
    np.testing.assert_array_equal(a.indices, b.indices)


def test_plane_counts_and_extent():
    mesh = generate(PlaneShape(size=Vector2(2.0, 4.0), segments=(3, 2)))

    assert mesh.vertex_count == 4 * 3
    assert mesh.triangle_count == 3 * 2 * 2
    assert mesh.bounds.as_tuple() == ((-1.0, 0.0, -2.0), (1.0, 0.0, 2.0))
    np.testing.assert_allclose(mesh.normals, np.tile((0.0, 1.0, 0.0), (12, 1)))


@pytest.mark.parametrize(
    "axis, expected", [(Axis.X, (1, 0, 0)), (Axis.Y, (0, 1, 0)), (Axis.Z, (0, 0, 1))]
)
def test_plane_axis(axis, expected):
    mesh = generate(PlaneShape(axis=axis))

    np.testing.assert_allclose(mesh.normals[0], expected)


def test_box_counts():
    sx, sy, sz = 2, 3, 4
    mesh = generate(BoxShape(segments=(sx, sy, sz)))

    faces = (sx + 1) * (sy + 1) + (sy + 1) * (sz + 1) + (sx + 1) * (sz + 1)
    assert mesh.vertex_count == 2 * faces
    assert mesh.triangle_count == 4 * (sx * sy + sy * sz + sx * sz)


def test_rounded_box_surface():
    shape = RoundedBoxShape(size=Vector3(2.0, 1.0, 1.0), radius=0.2, divisions=6)
    mesh = generate(shape)

    half = np.array((1.0, 0.5, 0.5))
    inner = half - shape.radius
    p = mesh.positions.astype(np.float64)
    distance = np.linalg.norm(p - np.clip(p, -inner, inner), axis=1)
    np.testing.assert_allclose(distance, shape.radius, atol=1e-5)
    assert np.all(np.abs(p) <= half + 1e-6)


def test_sphere_vertices_on_radius():
    shape = SphereShape(radius=1.5, columns=10, rows=6)
    mesh = generate(shape)

    np.testing.assert_allclose(np.linalg.norm(mesh.positions, axis=1), 1.5, rtol=1e-6)
    assert mesh.vertex_count == 11 * 7
    assert mesh.triangle_count == 10 * (2 * 6 - 2)


def test_sphere_axis_moves_poles():
    mesh = generate(SphereShape(axis=Axis.Z))

    np.testing.assert_allclose(mesh.positions[0], (0.0, 0.0, 0.5), atol=1e-7)


@pytest.mark.parametrize("s", [0, 1, 2, 3])
def test_icosphere_counts_and_radius(s):
    mesh = generate(IcosphereShape(radius=0.75, subdivision=s))

    assert mesh.vertex_count >= 10 * 4**s + 2
    assert mesh.triangle_count == 20 * 4**s
    np.testing.assert_allclose(np.linalg.norm(mesh.positions, axis=1), 0.75, rtol=1e-6)


@pytest.mark.parametrize("s", [0, 1, 2, 3])
def test_icosphere_uvs_do_not_wrap_across_seam(s):
    mesh = generate(IcosphereShape(subdivision=s))

    u = mesh.uvs[mesh.triangles().astype(np.int64), 0]
    assert np.all(u.max(axis=1) - u.min(axis=1) <= 0.5 + 1e-6)


def test_icosphere_poles_are_split_per_triangle():
    mesh = generate(IcosphereShape(subdivision=2))

    tris = mesh.triangles().astype(np.int64)
    poles = np.flatnonzero(np.abs(mesh.normals[:, 1]) > 1.0 - 1e-6)
    assert len(poles) == 12
    for p in poles:
        assert np.count_nonzero(tris == p) == 1


def test_icosphere_tangents_follow_longitude():
    mesh = generate(
        IcosphereShape(subdivision=2), MeshBuildOptions(recalculate_tangents=True)
    )

    n = mesh.normals.astype(np.float64)
    keep = np.abs(n[:, 1]) < 0.9
    along_u = np.stack((n[:, 2], np.zeros(len(n)), -n[:, 0]), axis=1)[keep]
    along_u /= np.linalg.norm(along_u, axis=1, keepdims=True)

    cosine = np.sum(mesh.tangents[keep, :3] * along_u, axis=1)
    assert np.all(cosine > 0.5)


def test_cylinder_counts():
    mesh = generate(CylinderShape(columns=6, rows=2))

    side = 3 * 7
    caps = 2 * (1 + 7)
    assert mesh.vertex_count == side + caps
    assert mesh.triangle_count == 2 * 2 * 6 + 2 * 6


def test_cone_side_normals_tilt_up():
    geometry = build_geometry(
        CylinderShape(top_radius=0.1, bottom_radius=1.0, caps=False)
    )

    assert np.all(geometry.normals[:, 1] > 0)


def test_ring_counts_and_radii():
    mesh = generate(RingShape(inner_radius=0.3, outer_radius=0.9, segments=8))

    radii = np.linalg.norm(mesh.positions, axis=1)
    assert mesh.vertex_count == 2 * 9
    assert mesh.triangle_count == 2 * 8
    np.testing.assert_allclose(radii[0::2], 0.3, rtol=1e-6)
    np.testing.assert_allclose(radii[1::2], 0.9, rtol=1e-6)


def test_disc_sector():
    mesh = generate(DiscShape(radius=1.0, segments=4, angle=90.0))

    assert mesh.vertex_count == 1 + 5
    assert mesh.triangle_count == 4
    np.testing.assert_allclose(mesh.positions[-1], (0.0, 0.0, -1.0), atol=1e-7)


@pytest.mark.parametrize(
    "shape",
    [
        TeapotShape(subdivision=1),
        PlaneShape(size=Vector2(0.0, 1.0)),
        PlaneShape(segments=(0, 1)),
        BoxShape(size=Vector3(1.0, -1.0, 1.0)),
        BoxShape(segments=(1, 1)),
        RoundedBoxShape(radius=0.0),
        RoundedBoxShape(radius=0.6),
        RoundedBoxShape(divisions=0),
        SphereShape(radius=-1.0),
        SphereShape(columns=2),
        SphereShape(rows=1),
        IcosphereShape(radius=0.0),
        IcosphereShape(subdivision=-1),
        CylinderShape(top_radius=0.0),
        CylinderShape(height=0.0),
        CylinderShape(columns=2),
        CylinderShape(rows=0),
        RingShape(inner_radius=0.5, outer_radius=0.5),
        RingShape(inner_radius=-0.1),
        RingShape(angle=400.0),
        DiscShape(radius=0.0),
        DiscShape(segments=2),
        DiscShape(angle=0.0),
        SphereShape(rows=2.5),
    ],
    ids=repr,
)
def test_invalid_parameters(shape):
    with pytest.raises(InvalidParameter):
        generate(shape)


def test_unknown_descriptor():
    with pytest.raises(InvalidParameter, match="not a known shape"):
        generate(object())


def test_numpy_integer_counts_are_accepted():
    mesh = generate(SphereShape(columns=np.int64(8), rows=np.int32(4)))

    assert mesh.vertex_count == 5 * 9


@pytest.mark.parametrize("count", [True, np.float64(8.0), "8"])
def test_non_integer_counts_are_rejected(count):
    with pytest.raises(InvalidParameter, match="must be an integer"):
        generate(SphereShape(columns=count))
