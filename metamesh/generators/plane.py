# metamesh/generators/plane.py
from metamesh.buffer import MeshBuilder, RawGeometry
from metamesh.errors import InvalidParameter, require_at_least, require_positive
from metamesh.shapes import PlaneShape


def generate_plane(shape: PlaneShape) -> RawGeometry:
    """
    Subdivided plane centered at the origin, facing +Y before axis remap.
    size.x spans X, size.y spans Z.
    """
    if len(shape.segments) != 2:
        raise InvalidParameter(
            "plane.segments", shape.segments, "must have two entries"
        )
    width, depth = shape.size
    columns, rows = shape.segments
    require_positive("plane.size.x", width)
    require_positive("plane.size.y", depth)
    require_at_least("plane.segments[0]", columns, 1)
    require_at_least("plane.segments[1]", rows, 1)

    builder = MeshBuilder()
    builder.add_grid(
        origin=(-0.5 * width, 0.0, 0.5 * depth),
        axis_u=(width, 0.0, 0.0),
        axis_v=(0.0, 0.0, -depth),
        normal=(0.0, 1.0, 0.0),
        segments_u=columns,
        segments_v=rows,
    )
    return builder.build(shape.axis)
