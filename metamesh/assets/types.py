# metamesh/assets/types.py
from dataclasses import dataclass
from typing import List, Optional

from metamesh.types import AABB


@dataclass(frozen=True)
class VertexLayout:
    """Describes vertex attributes for VAO creation."""

    attributes: List[str]  # e.g. ["in_pos", "in_normal", "in_uv"]
    format: str  # moderngl buffer format string e.g. "3f 3f 2f"
    stride_bytes: int  # e.g. 32


@dataclass(frozen=True)
class MeshData:
    """Packed mesh payload, ready for GPU upload."""

    vertices: bytes
    vertex_layout: VertexLayout
    aabb: AABB
    indices: Optional[bytes] = None
    index_count: int = 0
    index_element_size: int = 4  # bytes

    @property
    def vertex_count(self) -> int:
        return len(self.vertices) // self.vertex_layout.stride_bytes
