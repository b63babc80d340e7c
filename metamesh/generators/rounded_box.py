# metamesh/generators/rounded_box.py
import numpy as np

from metamesh.buffer import MeshBuilder, RawGeometry
from metamesh.errors import InvalidParameter, require_at_least, require_positive
from metamesh.generators.box import box_faces
from metamesh.math import normalize_rows
from metamesh.shapes import RoundedBoxShape


def generate_rounded_box(shape: RoundedBoxShape) -> RawGeometry:
    """
    Box with edges and corners rounded by ``radius``.

    Starts from a subdivided box and pulls every vertex onto the surface
    at distance ``radius`` from the inner box of half extents
    ``size / 2 - radius``. Vertices on the original face edges land on the
    same rounded point from both faces, so the surface closes.
    """
    width, height, depth = shape.size
    require_positive("rounded_box.size.x", width)
    require_positive("rounded_box.size.y", height)
    require_positive("rounded_box.size.z", depth)
    require_positive("rounded_box.radius", shape.radius)
    require_at_least("rounded_box.divisions", shape.divisions, 1)

    half = 0.5 * np.array((width, height, depth), dtype=np.float64)
    if shape.radius > half.min():
        raise InvalidParameter(
            "rounded_box.radius",
            shape.radius,
            f"must not exceed half the smallest side ({half.min()})",
        )

    d = shape.divisions
    builder = MeshBuilder()
    for origin, axis_u, axis_v, normal, seg_u, seg_v in box_faces(
        width, height, depth, (d, d, d)
    ):
        builder.add_grid(origin, axis_u, axis_v, normal, seg_u, seg_v)
    cube = builder.build()

    inner = half - shape.radius
    core = np.clip(cube.positions, -inner, inner)
    normals = normalize_rows(cube.positions - core)

    return RawGeometry(
        positions=core + normals * shape.radius,
        normals=normals,
        uvs=cube.uvs,
        indices=cube.indices,
    )
