# metamesh/generators/teapot.py
from __future__ import annotations

from typing import Sequence

import numpy as np

from metamesh.bezier import evaluate_row, reduce_patch
from metamesh.buffer import MeshBuilder, RawGeometry
from metamesh.errors import InvalidParameter, require_at_least
from metamesh.generators.teapot_patches import TEAPOT_PATCHES
from metamesh.shapes import TeapotShape

POINTS_PER_PATCH = 16

PATCHES = np.array(TEAPOT_PATCHES, dtype=np.float64).reshape(
    -1, POINTS_PER_PATCH, 3
)
PATCHES.flags.writeable = False


def patch_indices(subdivision: int, offset: int = 0) -> np.ndarray:
    """Two triangles per grid cell of one N x N patch block."""
    n = subdivision
    cells = np.arange(n - 1)
    i0 = (cells[:, None] * n + cells[None, :]).ravel() + offset
    return np.stack(
        (i0, i0 + 1, i0 + n, i0 + 1, i0 + n + 1, i0 + n), axis=1
    ).reshape(-1)


def tessellate_patches(
    control_points: Sequence[Sequence[float]] | np.ndarray, subdivision: int
) -> RawGeometry:
    """
    Tessellate bicubic Bezier patches into an N x N vertex grid each.

    Patches are emitted in table order, each as its own block of
    ``subdivision ** 2`` vertices; shared edges between patches are
    duplicated, not welded.

    Raises:
        InvalidParameter: if subdivision < 2 or the control table is empty
            or not a whole number of 16-point patches.
    """
    require_at_least("teapot.subdivision", subdivision, 2)

    control = np.asarray(control_points, dtype=np.float64)
    if control.size == 0:
        raise InvalidParameter("control_points", 0, "table is empty")
    if control.ndim != 2 or control.shape[1] != 3:
        raise InvalidParameter(
            "control_points", control.shape, "must be a sequence of 3D points"
        )
    if len(control) % POINTS_PER_PATCH != 0:
        raise InvalidParameter(
            "control_points",
            len(control),
            f"length must be a multiple of {POINTS_PER_PATCH}",
        )

    n = subdivision
    patches = control.reshape(-1, POINTS_PER_PATCH, 3)

    builder = MeshBuilder()
    for patch in patches:
        offset = builder.vertex_count
        for col in range(n):
            u = col / (n - 1)
            corners = reduce_patch(patch, u)
            for row in range(n):
                v = row / (n - 1)
                position, normal = evaluate_row(corners, v)
                builder.add_vertex(position, normal, (u, v))
        builder.add_triangles(patch_indices(n, offset))

    return builder.build()


def generate_teapot(shape: TeapotShape) -> RawGeometry:
    """The Utah teapot, 32 patches at ``subdivision`` vertices per side."""
    return tessellate_patches(PATCHES.reshape(-1, 3), shape.subdivision)
