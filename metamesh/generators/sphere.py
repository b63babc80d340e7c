# metamesh/generators/sphere.py
import math

import numpy as np

from metamesh.buffer import MeshBuilder, RawGeometry
from metamesh.errors import require_at_least, require_positive
from metamesh.math import TAU
from metamesh.shapes import SphereShape


def generate_sphere(shape: SphereShape) -> RawGeometry:
    """
    UV sphere around +Y.

    Vertex (row, column) sits at polar angle pi * row / rows and azimuth
    2 * pi * column / columns. The seam column and the pole vertices are
    duplicated per column so every vertex has a unique UV. Cells touching
    a pole emit a single triangle.
    """
    require_positive("sphere.radius", shape.radius)
    require_at_least("sphere.columns", shape.columns, 3)
    require_at_least("sphere.rows", shape.rows, 2)

    columns, rows, r = shape.columns, shape.rows, shape.radius

    theta = np.linspace(0.0, math.pi, rows + 1)
    phi = np.linspace(0.0, TAU, columns + 1)
    tt, pp = np.meshgrid(theta, phi, indexing="ij")
    tt, pp = tt.ravel(), pp.ravel()

    normals = np.stack(
        (np.sin(tt) * np.cos(pp), np.cos(tt), -np.sin(tt) * np.sin(pp)), axis=1
    )
    # Pin the poles so they are exact regardless of sin(pi) rounding.
    normals[: columns + 1] = (0.0, 1.0, 0.0)
    normals[-(columns + 1) :] = (0.0, -1.0, 0.0)

    uvs = np.stack((pp / TAU, 1.0 - tt / math.pi), axis=1)

    builder = MeshBuilder()
    builder.add_vertices(normals * r, normals, uvs)

    stride = columns + 1
    for row in range(rows):
        for col in range(columns):
            a = row * stride + col
            b = a + 1
            c = a + stride
            d = c + 1
            if row != 0:
                builder.add_triangle(a, c, b)
            if row != rows - 1:
                builder.add_triangle(b, c, d)

    return builder.build(shape.axis)
