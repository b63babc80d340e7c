# metamesh/dispatch.py
import logging
from typing import Optional

from metamesh.buffer import (
    LightmapUnwrapper,
    MeshBuffer,
    MeshBuildOptions,
    RawGeometry,
    assemble,
)
from metamesh.errors import InvalidParameter
from metamesh.generators import (
    generate_box,
    generate_cylinder,
    generate_disc,
    generate_icosphere,
    generate_plane,
    generate_ring,
    generate_rounded_box,
    generate_sphere,
    generate_teapot,
)
from metamesh.shapes import (
    BoxShape,
    CylinderShape,
    DiscShape,
    IcosphereShape,
    PlaneShape,
    RingShape,
    RoundedBoxShape,
    ShapeDescriptor,
    SphereShape,
    TeapotShape,
)

logger = logging.getLogger(__name__)


def build_geometry(descriptor: ShapeDescriptor) -> RawGeometry:
    """Run the one generator that matches the descriptor's variant."""
    match descriptor:
        case PlaneShape():
            return generate_plane(descriptor)
        case BoxShape():
            return generate_box(descriptor)
        case RoundedBoxShape():
            return generate_rounded_box(descriptor)
        case SphereShape():
            return generate_sphere(descriptor)
        case IcosphereShape():
            return generate_icosphere(descriptor)
        case CylinderShape():
            return generate_cylinder(descriptor)
        case RingShape():
            return generate_ring(descriptor)
        case DiscShape():
            return generate_disc(descriptor)
        case TeapotShape():
            return generate_teapot(descriptor)
        case _:
            raise InvalidParameter(
                "descriptor",
                type(descriptor).__name__,
                "is not a known shape descriptor",
            )


def generate(
    descriptor: ShapeDescriptor,
    options: Optional[MeshBuildOptions] = None,
    *,
    unwrapper: Optional[LightmapUnwrapper] = None,
) -> MeshBuffer:
    """
    Build a finalized mesh from a shape descriptor.

    Each call allocates a fresh buffer; nothing is cached between calls.

    Raises:
        InvalidParameter: if the descriptor's parameters are out of range.
        MeshAssemblyError: if lightmap UVs are requested without an unwrapper.
    """
    geometry = build_geometry(descriptor)
    mesh = assemble(geometry, options, unwrapper)
    logger.debug(
        "Generated %s: %d vertices, %d triangles",
        descriptor.kind,
        mesh.vertex_count,
        mesh.triangle_count,
    )
    return mesh
