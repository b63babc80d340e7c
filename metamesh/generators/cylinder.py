# metamesh/generators/cylinder.py
import numpy as np

from metamesh.buffer import MeshBuilder, RawGeometry
from metamesh.errors import require_at_least, require_positive
from metamesh.math import TAU, normalize_rows
from metamesh.shapes import CylinderShape


def _add_cap(
    builder: MeshBuilder,
    y: float,
    radius: float,
    columns: int,
    facing_up: bool,
) -> None:
    phi = np.linspace(0.0, TAU, columns + 1)
    cos_p, sin_p = np.cos(phi), -np.sin(phi)
    sign = 1.0 if facing_up else -1.0

    ring = np.stack((radius * cos_p, np.full_like(phi, y), radius * sin_p), 1)
    # Planar projection seen from outside the cap.
    ring_uv = np.stack((0.5 + 0.5 * cos_p, 0.5 - 0.5 * sign * sin_p), 1)

    center = builder.add_vertex((0.0, y, 0.0), (0.0, sign, 0.0), (0.5, 0.5))
    first = builder.add_vertices(
        ring, np.tile((0.0, sign, 0.0), (columns + 1, 1)), ring_uv
    )
    for col in range(columns):
        a = first + col
        if facing_up:
            builder.add_triangle(center, a, a + 1)
        else:
            builder.add_triangle(center, a + 1, a)


def generate_cylinder(shape: CylinderShape) -> RawGeometry:
    """
    Cylinder or truncated cone along +Y, centered at the origin.

    The side is a ruled surface between the bottom and top circles with
    normals tilted by the radius slope. Caps are separate fans so the rim
    keeps a hard edge.
    """
    require_positive("cylinder.top_radius", shape.top_radius)
    require_positive("cylinder.bottom_radius", shape.bottom_radius)
    require_positive("cylinder.height", shape.height)
    require_at_least("cylinder.columns", shape.columns, 3)
    require_at_least("cylinder.rows", shape.rows, 1)

    columns, rows, h = shape.columns, shape.rows, shape.height
    r0, r1 = shape.bottom_radius, shape.top_radius

    t = np.linspace(0.0, 1.0, rows + 1)
    phi = np.linspace(0.0, TAU, columns + 1)
    tt, pp = np.meshgrid(t, phi, indexing="ij")
    tt, pp = tt.ravel(), pp.ravel()

    radius = r0 + (r1 - r0) * tt
    cos_p, sin_p = np.cos(pp), -np.sin(pp)
    positions = np.stack((radius * cos_p, (tt - 0.5) * h, radius * sin_p), 1)
    slope = np.full_like(tt, (r0 - r1) / h)
    normals = normalize_rows(np.stack((cos_p, slope, sin_p), 1))
    uvs = np.stack((pp / TAU, tt), 1)

    builder = MeshBuilder()
    builder.add_vertices(positions, normals, uvs)

    stride = columns + 1
    for row in range(rows):
        for col in range(columns):
            a = row * stride + col
            b = a + 1
            c = a + stride
            d = c + 1
            builder.add_triangle(a, b, c)
            builder.add_triangle(b, d, c)

    if shape.caps:
        _add_cap(builder, 0.5 * h, r1, columns, facing_up=True)
        _add_cap(builder, -0.5 * h, r0, columns, facing_up=False)

    return builder.build(shape.axis)
