# metamesh/assets/importers/base.py
from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar, Generic, Tuple, TypeVar

T = TypeVar("T")  # Type of data produced (MeshData)


class AssetImporter(ABC, Generic[T]):
    extensions: ClassVar[Tuple[str, ...]] = ()

    def accepts(self, path: Path) -> bool:
        return Path(path).suffix.lower() in self.extensions

    @abstractmethod
    def import_file(self, path: Path) -> T:
        """
        Turn an asset file into a CPU-side payload.
        Must not keep references to the result.
        """
