from metamesh.assets.importers.base import AssetImporter
from metamesh.assets.importers.metamesh import MetameshImporter, pack_mesh

__all__ = ["AssetImporter", "MetameshImporter", "pack_mesh"]
