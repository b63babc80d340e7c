from metamesh.assets.importers import AssetImporter, MetameshImporter, pack_mesh
from metamesh.assets.settings import (
    ImportSettings,
    descriptor_from_dict,
    load_settings,
    options_from_dict,
)
from metamesh.assets.types import MeshData, VertexLayout

__all__ = [
    "AssetImporter",
    "MetameshImporter",
    "pack_mesh",
    "ImportSettings",
    "descriptor_from_dict",
    "options_from_dict",
    "load_settings",
    "MeshData",
    "VertexLayout",
]
