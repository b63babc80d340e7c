# metamesh/buffer.py
"""
Mesh buffer assembly.

Generators accumulate vertices and triangles in a ``MeshBuilder`` and hand
back a ``RawGeometry``. ``assemble`` validates that geometry, runs the
optional post passes selected by ``MeshBuildOptions`` and freezes the result
into a read-only ``MeshBuffer``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol, Sequence

import numpy as np

from metamesh.errors import MeshAssemblyError
from metamesh.math import face_normals, normalize_rows, swizzle_to_axis
from metamesh.types import AABB, Vector3

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MeshBuildOptions:
    """Post passes applied after a generator runs."""

    recalculate_normals: bool = False
    recalculate_tangents: bool = False
    generate_lightmap_uvs: bool = False


class LightmapUnwrapper(Protocol):
    """
    External packer producing a non-overlapping second UV channel.
    Must return an (N, 2) array aligned with the input vertices.
    """

    def __call__(
        self, positions: np.ndarray, normals: np.ndarray, indices: np.ndarray
    ) -> np.ndarray: ...


@dataclass(frozen=True, slots=True)
class RawGeometry:
    """Unvalidated generator output."""

    positions: np.ndarray  # (N, 3)
    normals: np.ndarray  # (N, 3) or (0, 3)
    uvs: np.ndarray  # (N, 2)
    indices: np.ndarray  # (M,)

    @property
    def vertex_count(self) -> int:
        return len(self.positions)


@dataclass(frozen=True, slots=True)
class Bounds:
    minimum: Vector3
    maximum: Vector3

    @property
    def center(self) -> Vector3:
        return (self.minimum + self.maximum) * 0.5

    @property
    def extents(self) -> Vector3:
        return (self.maximum - self.minimum) * 0.5

    def as_tuple(self) -> AABB:
        return (tuple(self.minimum), tuple(self.maximum))  # type: ignore[return-value]


@dataclass(frozen=True, slots=True)
class MeshBuffer:
    """Finalized indexed triangle mesh. All arrays are read-only."""

    positions: np.ndarray  # (N, 3) float32
    normals: np.ndarray  # (N, 3) float32
    uvs: np.ndarray  # (N, 2) float32
    indices: np.ndarray  # (M,) uint32
    bounds: Bounds
    tangents: Optional[np.ndarray] = None  # (N, 4) float32, w = handedness
    lightmap_uvs: Optional[np.ndarray] = None  # (N, 2) float32

    @property
    def vertex_count(self) -> int:
        return len(self.positions)

    @property
    def index_count(self) -> int:
        return len(self.indices)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    def triangles(self) -> np.ndarray:
        return self.indices.reshape(-1, 3)


class MeshBuilder:
    """Accumulates vertices and triangles for a single generator run."""

    def __init__(self) -> None:
        self._positions: List[np.ndarray] = []
        self._normals: List[np.ndarray] = []
        self._uvs: List[np.ndarray] = []
        self._indices: List[np.ndarray] = []
        self._count = 0

    @property
    def vertex_count(self) -> int:
        return self._count

    def add_vertex(
        self,
        position: Sequence[float],
        normal: Sequence[float],
        uv: Sequence[float],
    ) -> int:
        return self.add_vertices(
            np.reshape(position, (1, 3)),
            np.reshape(normal, (1, 3)),
            np.reshape(uv, (1, 2)),
        )

    def add_vertices(
        self, positions: np.ndarray, normals: np.ndarray, uvs: np.ndarray
    ) -> int:
        """Append a block of vertices. Returns the index of the first one."""
        positions = np.asarray(positions, dtype=np.float64).reshape(-1, 3)
        normals = np.asarray(normals, dtype=np.float64).reshape(-1, 3)
        uvs = np.asarray(uvs, dtype=np.float64).reshape(-1, 2)
        if not len(positions) == len(normals) == len(uvs):
            raise MeshAssemblyError(
                "Vertex block attribute lengths differ: "
                f"{len(positions)} positions, {len(normals)} normals, "
                f"{len(uvs)} uvs"
            )

        base = self._count
        self._positions.append(positions)
        self._normals.append(normals)
        self._uvs.append(uvs)
        self._count += len(positions)
        return base

    def add_triangle(self, a: int, b: int, c: int) -> None:
        self._indices.append(np.array((a, b, c), dtype=np.int64))

    def add_triangles(self, indices: np.ndarray) -> None:
        self._indices.append(np.asarray(indices, dtype=np.int64).reshape(-1))

    def add_grid(
        self,
        origin: Sequence[float],
        axis_u: Sequence[float],
        axis_v: Sequence[float],
        normal: Sequence[float],
        segments_u: int,
        segments_v: int,
    ) -> int:
        """
        Append a flat quad grid spanning ``origin + s*axis_u + t*axis_v``
        for s, t in [0, 1]. ``cross(axis_u, axis_v)`` must point along
        ``normal`` for the triangles to face outward.
        Returns the index of the first grid vertex.
        """
        s = np.linspace(0.0, 1.0, segments_u + 1)
        t = np.linspace(0.0, 1.0, segments_v + 1)
        tt, ss = np.meshgrid(t, s, indexing="ij")  # row-major in v
        ss, tt = ss.ravel(), tt.ravel()

        positions = (
            np.asarray(origin, dtype=np.float64)
            + ss[:, None] * np.asarray(axis_u, dtype=np.float64)
            + tt[:, None] * np.asarray(axis_v, dtype=np.float64)
        )
        normals = np.tile(np.asarray(normal, dtype=np.float64), (len(ss), 1))
        uvs = np.stack((ss, tt), axis=1)

        base = self.add_vertices(positions, normals, uvs)
        self.add_triangles(grid_indices(segments_u, segments_v) + base)
        return base

    def build(self, axis: int = 1) -> RawGeometry:
        """Concatenate everything added so far, rotating +Y onto ``axis``."""
        positions = _concat(self._positions, 3)
        normals = _concat(self._normals, 3)
        uvs = _concat(self._uvs, 2)
        indices = (
            np.concatenate(self._indices)
            if self._indices
            else np.zeros(0, dtype=np.int64)
        )
        return RawGeometry(
            positions=swizzle_to_axis(positions, axis),
            normals=swizzle_to_axis(normals, axis),
            uvs=uvs,
            indices=indices,
        )


def grid_indices(segments_u: int, segments_v: int) -> np.ndarray:
    """
    Triangle indices for a (segments_u + 1) x (segments_v + 1) vertex grid
    stored row-major along v. Winding follows cross(+u, +v).
    """
    stride = segments_u + 1
    cols = np.arange(segments_u)
    rows = np.arange(segments_v)
    a = (rows[:, None] * stride + cols[None, :]).ravel()
    b = a + 1
    c = a + stride
    d = c + 1
    return np.stack((a, b, c, b, d, c), axis=1).reshape(-1)


def _concat(chunks: List[np.ndarray], width: int) -> np.ndarray:
    if not chunks:
        return np.zeros((0, width), dtype=np.float64)
    return np.concatenate(chunks, axis=0)


# -- Post passes --
def compute_normals(positions: np.ndarray, indices: np.ndarray) -> np.ndarray:
    """Area-weighted smooth vertex normals. Unreferenced vertices get zero."""
    triangles = np.asarray(indices).reshape(-1, 3)
    normals = np.zeros_like(positions, dtype=np.float64)
    fn = face_normals(np.asarray(positions, dtype=np.float64), triangles)
    for k in range(3):
        np.add.at(normals, triangles[:, k], fn)
    return normalize_rows(normals)


def compute_tangents(
    positions: np.ndarray,
    normals: np.ndarray,
    uvs: np.ndarray,
    indices: np.ndarray,
) -> np.ndarray:
    """
    Per-vertex tangents from UV gradients (N, 4).
    xyz is orthogonalized against the normal, w is +1 or -1 handedness.
    """
    triangles = np.asarray(indices).reshape(-1, 3)
    p = np.asarray(positions, dtype=np.float64)
    n = np.asarray(normals, dtype=np.float64)
    t = np.asarray(uvs, dtype=np.float64)

    e1 = p[triangles[:, 1]] - p[triangles[:, 0]]
    e2 = p[triangles[:, 2]] - p[triangles[:, 0]]
    d1 = t[triangles[:, 1]] - t[triangles[:, 0]]
    d2 = t[triangles[:, 2]] - t[triangles[:, 0]]

    det = d1[:, 0] * d2[:, 1] - d2[:, 0] * d1[:, 1]
    valid = np.abs(det) > 1e-12
    r = np.where(valid, 1.0 / np.where(valid, det, 1.0), 0.0)[:, None]

    sdir = (e1 * d2[:, 1:2] - e2 * d1[:, 1:2]) * r
    tdir = (e2 * d1[:, 0:1] - e1 * d2[:, 0:1]) * r

    tan1 = np.zeros_like(p)
    tan2 = np.zeros_like(p)
    for k in range(3):
        np.add.at(tan1, triangles[:, k], sdir)
        np.add.at(tan2, triangles[:, k], tdir)

    # Gram-Schmidt against the normal.
    tangent = tan1 - n * np.sum(n * tan1, axis=1, keepdims=True)
    lengths = np.linalg.norm(tangent, axis=1)

    degenerate = lengths < 1e-12
    if np.any(degenerate):
        # Any direction perpendicular to the normal will do.
        helper = np.where(
            np.abs(n[degenerate, 0:1]) < 0.9,
            np.array((1.0, 0.0, 0.0)),
            np.array((0.0, 1.0, 0.0)),
        )
        tangent[degenerate] = np.cross(n[degenerate], helper)
    tangent = normalize_rows(tangent)

    handedness = np.where(
        np.sum(np.cross(n, tangent) * tan2, axis=1) < 0.0, -1.0, 1.0
    )
    return np.concatenate((tangent, handedness[:, None]), axis=1)


def compute_bounds(positions: np.ndarray) -> Bounds:
    lo = np.min(positions, axis=0)
    hi = np.max(positions, axis=0)
    return Bounds(
        minimum=Vector3(float(lo[0]), float(lo[1]), float(lo[2])),
        maximum=Vector3(float(hi[0]), float(hi[1]), float(hi[2])),
    )


def _validate(geometry: RawGeometry) -> None:
    count = geometry.vertex_count
    if count == 0:
        raise MeshAssemblyError("Geometry has no vertices")

    if len(geometry.uvs) != count:
        raise MeshAssemblyError(
            f"UV count {len(geometry.uvs)} does not match vertex count {count}"
        )

    if len(geometry.normals) not in (0, count):
        raise MeshAssemblyError(
            f"Normal count {len(geometry.normals)} does not match "
            f"vertex count {count}"
        )

    indices = geometry.indices
    if len(indices) == 0 or len(indices) % 3 != 0:
        raise MeshAssemblyError(
            f"Index count {len(indices)} is not a positive multiple of 3"
        )

    if indices.min() < 0 or indices.max() >= count:
        raise MeshAssemblyError(
            f"Indices out of range [0, {count}): "
            f"min={int(indices.min())}, max={int(indices.max())}"
        )


def _frozen(array: np.ndarray, dtype: type) -> np.ndarray:
    out = np.array(array, dtype=dtype, copy=True, order="C")
    out.flags.writeable = False
    return out


def assemble(
    geometry: RawGeometry,
    options: Optional[MeshBuildOptions] = None,
    unwrapper: Optional[LightmapUnwrapper] = None,
) -> MeshBuffer:
    """
    Validate raw generator output, apply the requested passes and freeze it.

    Raises:
        MeshAssemblyError: on inconsistent geometry, or when lightmap UVs
            are requested without an unwrapper.
    """
    options = options or MeshBuildOptions()
    _validate(geometry)

    positions = geometry.positions
    indices = geometry.indices
    normals = geometry.normals

    if options.recalculate_normals or len(normals) == 0:
        logger.debug("Recalculating normals for %d vertices", len(positions))
        normals = compute_normals(positions, indices)

    bounds = compute_bounds(positions)

    lightmap_uvs = None
    if options.generate_lightmap_uvs:
        if unwrapper is None:
            raise MeshAssemblyError(
                "Lightmap UVs requested but no unwrapper was supplied"
            )
        logger.debug("Generating lightmap UVs")
        lightmap_uvs = np.asarray(unwrapper(positions, normals, indices))
        if lightmap_uvs.shape != (len(positions), 2):
            raise MeshAssemblyError(
                f"Unwrapper returned shape {lightmap_uvs.shape}, "
                f"expected {(len(positions), 2)}"
            )

    tangents = None
    if options.recalculate_tangents:
        logger.debug("Recalculating tangents")
        tangents = compute_tangents(positions, normals, geometry.uvs, indices)

    return MeshBuffer(
        positions=_frozen(positions, np.float32),
        normals=_frozen(normals, np.float32),
        uvs=_frozen(geometry.uvs, np.float32),
        indices=_frozen(indices, np.uint32),
        bounds=bounds,
        tangents=None if tangents is None else _frozen(tangents, np.float32),
        lightmap_uvs=(
            None if lightmap_uvs is None else _frozen(lightmap_uvs, np.float32)
        ),
    )
