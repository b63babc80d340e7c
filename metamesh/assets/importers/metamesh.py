# metamesh/assets/importers/metamesh.py
import logging
from pathlib import Path
from typing import List, Optional

import numpy as np

from metamesh.assets.importers.base import AssetImporter
from metamesh.assets.settings import load_settings
from metamesh.assets.types import MeshData, VertexLayout
from metamesh.buffer import LightmapUnwrapper, MeshBuffer
from metamesh.dispatch import generate

logger = logging.getLogger(__name__)

FLOAT_SIZE = 4


def pack_mesh(mesh: MeshBuffer) -> MeshData:
    """
    Interleave a finalized mesh into little-endian float32 vertex bytes.

    Layout is always position, normal, uv; tangent and lightmap uv are
    appended when the mesh carries them.
    """
    columns: List[np.ndarray] = [mesh.positions, mesh.normals, mesh.uvs]
    attributes = ["in_pos", "in_normal", "in_uv"]
    formats = ["3f", "3f", "2f"]

    if mesh.tangents is not None:
        columns.append(mesh.tangents)
        attributes.append("in_tangent")
        formats.append("4f")

    if mesh.lightmap_uvs is not None:
        columns.append(mesh.lightmap_uvs)
        attributes.append("in_uv2")
        formats.append("2f")

    interleaved = np.ascontiguousarray(
        np.concatenate(columns, axis=1), dtype="<f4"
    )

    layout = VertexLayout(
        attributes=attributes,
        format=" ".join(formats),
        stride_bytes=interleaved.shape[1] * FLOAT_SIZE,
    )

    return MeshData(
        vertices=interleaved.tobytes(),
        vertex_layout=layout,
        aabb=mesh.bounds.as_tuple(),
        indices=np.ascontiguousarray(mesh.indices, dtype="<u4").tobytes(),
        index_count=mesh.index_count,
    )


class MetameshImporter(AssetImporter[MeshData]):
    """Generates a mesh from a ``.metamesh`` parameter file."""

    extensions = (".metamesh",)

    def __init__(self, unwrapper: Optional[LightmapUnwrapper] = None) -> None:
        self._unwrapper = unwrapper

    def import_file(self, path: Path) -> MeshData:
        settings = load_settings(path)
        mesh = generate(
            settings.descriptor, settings.options, unwrapper=self._unwrapper
        )
        logger.info(
            "Imported %s as %s: %d vertices, %d triangles",
            path,
            settings.descriptor.kind,
            mesh.vertex_count,
            mesh.triangle_count,
        )
        return pack_mesh(mesh)
