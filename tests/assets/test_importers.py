import json
import struct

import numpy as np
import pytest

from metamesh.assets.importers.metamesh import MetameshImporter, pack_mesh
from metamesh.assets.types import MeshData
from metamesh.buffer import MeshBuildOptions
from metamesh.dispatch import generate
from metamesh.errors import InvalidParameter
from metamesh.shapes import TeapotShape


def _write(tmp_path, data, name="shape.metamesh"):
    f = tmp_path / name
    f.write_text(json.dumps(data))
    return f


def test_metamesh_importer_teapot(tmp_path):
    f = _write(tmp_path, {"shape": "teapot", "params": {"subdivision": 4}})

    mesh_data = MetameshImporter().import_file(f)

    assert isinstance(mesh_data, MeshData)
    # 512 vertices * (3 pos + 3 norm + 2 uv) * 4 bytes/float
    assert len(mesh_data.vertices) == 512 * 32
    assert mesh_data.vertex_layout.stride_bytes == 32
    assert mesh_data.vertex_layout.format == "3f 3f 2f"
    assert mesh_data.index_count == 1728
    assert len(mesh_data.indices) == 1728 * 4
    assert mesh_data.vertex_count == 512


def test_packed_first_vertex(tmp_path):
    f = _write(tmp_path, {"shape": "teapot", "params": {"subdivision": 4}})

    mesh_data = MetameshImporter().import_file(f)

    px, py, pz, *_ = struct.unpack("<3f 3f 2f", mesh_data.vertices[:32])
    assert (px, py, pz) == pytest.approx((1.4, 2.4, 0.0))


def test_optional_channels_extend_layout(tmp_path):
    f = _write(
        tmp_path,
        {
            "shape": "box",
            "options": {"recalculate_tangents": True, "generate_lightmap_uvs": True},
        },
    )

    importer = MetameshImporter(unwrapper=lambda p, n, i: np.zeros((len(p), 2)))
    mesh_data = importer.import_file(f)

    layout = mesh_data.vertex_layout
    assert layout.attributes == ["in_pos", "in_normal", "in_uv", "in_tangent", "in_uv2"]
    assert layout.format == "3f 3f 2f 4f 2f"
    assert layout.stride_bytes == 14 * 4
    assert mesh_data.vertex_count == 24


def test_lightmap_without_unwrapper_fails(tmp_path):
    f = _write(tmp_path, {"shape": "box", "options": {"generate_lightmap_uvs": True}})

    with pytest.raises(ValueError, match="no unwrapper"):
        MetameshImporter().import_file(f)


def test_invalid_parameters_fail(tmp_path):
    f = _write(tmp_path, {"shape": "teapot", "params": {"subdivision": 1}})

    with pytest.raises(InvalidParameter):
        MetameshImporter().import_file(f)


def test_pack_mesh_aabb_and_indices():
    mesh = generate(TeapotShape(subdivision=3), MeshBuildOptions())

    mesh_data = pack_mesh(mesh)

    assert mesh_data.aabb == mesh.bounds.as_tuple()
    indices = np.frombuffer(mesh_data.indices, dtype="<u4")
    np.testing.assert_array_equal(indices, mesh.indices)


def test_importer_accepts_metamesh_extension(tmp_path):
    importer = MetameshImporter()

    assert importer.accepts(tmp_path / "shape.METAMESH")
    assert not importer.accepts(tmp_path / "shape.obj")
