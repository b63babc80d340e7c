# metamesh/generators/box.py
from typing import List, Tuple

from metamesh.buffer import MeshBuilder, RawGeometry
from metamesh.errors import InvalidParameter, require_at_least, require_positive
from metamesh.shapes import BoxShape

Vec = Tuple[float, float, float]
Face = Tuple[Vec, Vec, Vec, Vec, int, int]


def box_faces(
    width: float,
    height: float,
    depth: float,
    segments: Tuple[int, int, int],
) -> List[Face]:
    """
    The six faces of a centered box as (origin, axis_u, axis_v, normal,
    segments_u, segments_v). cross(axis_u, axis_v) points along the normal.
    """
    hw, hh, hd = 0.5 * width, 0.5 * height, 0.5 * depth
    sx, sy, sz = segments
    return [
        # +X
        (
            (hw, -hh, hd),
            (0.0, 0.0, -depth),
            (0.0, height, 0.0),
            (1.0, 0.0, 0.0),
            sz,
            sy,
        ),
        # -X
        (
            (-hw, -hh, -hd),
            (0.0, 0.0, depth),
            (0.0, height, 0.0),
            (-1.0, 0.0, 0.0),
            sz,
            sy,
        ),
        # +Y
        (
            (-hw, hh, hd),
            (width, 0.0, 0.0),
            (0.0, 0.0, -depth),
            (0.0, 1.0, 0.0),
            sx,
            sz,
        ),
        # -Y
        (
            (-hw, -hh, -hd),
            (width, 0.0, 0.0),
            (0.0, 0.0, depth),
            (0.0, -1.0, 0.0),
            sx,
            sz,
        ),
        # +Z
        (
            (-hw, -hh, hd),
            (width, 0.0, 0.0),
            (0.0, height, 0.0),
            (0.0, 0.0, 1.0),
            sx,
            sy,
        ),
        # -Z
        (
            (hw, -hh, -hd),
            (-width, 0.0, 0.0),
            (0.0, height, 0.0),
            (0.0, 0.0, -1.0),
            sx,
            sy,
        ),
    ]


def generate_box(shape: BoxShape) -> RawGeometry:
    """Axis-aligned box with hard edges: every face owns its vertices."""
    width, height, depth = shape.size
    require_positive("box.size.x", width)
    require_positive("box.size.y", height)
    require_positive("box.size.z", depth)
    if len(shape.segments) != 3:
        raise InvalidParameter(
            "box.segments", shape.segments, "must have three entries"
        )
    for i, count in enumerate(shape.segments):
        require_at_least(f"box.segments[{i}]", count, 1)

    builder = MeshBuilder()
    for origin, axis_u, axis_v, normal, seg_u, seg_v in box_faces(
        width, height, depth, shape.segments
    ):
        builder.add_grid(origin, axis_u, axis_v, normal, seg_u, seg_v)
    return builder.build()
