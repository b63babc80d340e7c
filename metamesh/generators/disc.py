# metamesh/generators/disc.py
import math

import numpy as np

from metamesh.buffer import MeshBuilder, RawGeometry
from metamesh.errors import require_angle, require_at_least, require_positive
from metamesh.shapes import DiscShape


def generate_disc(shape: DiscShape) -> RawGeometry:
    """Triangle fan in the XZ plane facing +Y, swept over ``angle`` degrees."""
    require_positive("disc.radius", shape.radius)
    require_at_least("disc.segments", shape.segments, 3)
    require_angle("disc.angle", shape.angle)

    segments, r = shape.segments, shape.radius
    phi = np.linspace(0.0, math.radians(shape.angle), segments + 1)
    cos_p, sin_p = np.cos(phi), -np.sin(phi)

    rim = np.stack((r * cos_p, np.zeros_like(phi), r * sin_p), 1)
    rim_uv = np.stack((0.5 + 0.5 * cos_p, 0.5 - 0.5 * sin_p), 1)

    builder = MeshBuilder()
    center = builder.add_vertex((0.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.5, 0.5))
    first = builder.add_vertices(
        rim, np.tile((0.0, 1.0, 0.0), (segments + 1, 1)), rim_uv
    )
    for j in range(segments):
        builder.add_triangle(center, first + j, first + j + 1)

    return builder.build(shape.axis)
