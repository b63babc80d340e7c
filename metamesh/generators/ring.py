# metamesh/generators/ring.py
import math

import numpy as np

from metamesh.buffer import MeshBuilder, RawGeometry
from metamesh.errors import (
    InvalidParameter,
    require_angle,
    require_at_least,
    require_positive,
)
from metamesh.shapes import RingShape


def generate_ring(shape: RingShape) -> RawGeometry:
    """
    Flat annulus in the XZ plane facing +Y, swept over ``angle`` degrees.
    u runs along the sweep, v from the inner edge (0) to the outer edge (1).
    """
    require_positive("ring.inner_radius", shape.inner_radius)
    require_positive("ring.outer_radius", shape.outer_radius)
    if shape.inner_radius >= shape.outer_radius:
        raise InvalidParameter(
            "ring.inner_radius",
            shape.inner_radius,
            f"must be smaller than outer_radius ({shape.outer_radius})",
        )
    require_at_least("ring.segments", shape.segments, 3)
    require_angle("ring.angle", shape.angle)

    segments = shape.segments
    phi = np.linspace(0.0, math.radians(shape.angle), segments + 1)
    cos_p, sin_p = np.cos(phi), -np.sin(phi)
    zero = np.zeros_like(phi)
    u = np.linspace(0.0, 1.0, segments + 1)

    ri, ro = shape.inner_radius, shape.outer_radius
    inner = np.stack((ri * cos_p, zero, ri * sin_p), 1)
    outer = np.stack((ro * cos_p, zero, ro * sin_p), 1)

    # Interleave: vertex 2j is inner, 2j + 1 is outer.
    positions = np.stack((inner, outer), 1).reshape(-1, 3)
    uvs = np.stack(
        (np.stack((u, zero), 1), np.stack((u, zero + 1.0), 1)), 1
    ).reshape(-1, 2)
    normals = np.tile((0.0, 1.0, 0.0), (len(positions), 1))

    builder = MeshBuilder()
    builder.add_vertices(positions, normals, uvs)
    for j in range(segments):
        i0, o0, i1, o1 = 2 * j, 2 * j + 1, 2 * j + 2, 2 * j + 3
        builder.add_triangle(i0, o0, i1)
        builder.add_triangle(o0, o1, i1)

    return builder.build(shape.axis)
