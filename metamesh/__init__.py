from metamesh.bezier import (
    bezier,
    bezier_derivative,
    evaluate_curve,
    evaluate_patch,
)
from metamesh.buffer import (
    Bounds,
    LightmapUnwrapper,
    MeshBuffer,
    MeshBuilder,
    MeshBuildOptions,
    RawGeometry,
    assemble,
)
from metamesh.dispatch import build_geometry, generate
from metamesh.errors import InvalidParameter, MeshAssemblyError, MetameshError
from metamesh.shapes import (
    Axis,
    BoxShape,
    CylinderShape,
    DiscShape,
    IcosphereShape,
    PlaneShape,
    RingShape,
    RoundedBoxShape,
    ShapeDescriptor,
    ShapeKind,
    SphereShape,
    TeapotShape,
)
from metamesh.types import Vector2, Vector3

__all__ = [
    "generate",
    "build_geometry",
    "assemble",
    "MeshBuffer",
    "MeshBuilder",
    "MeshBuildOptions",
    "RawGeometry",
    "Bounds",
    "LightmapUnwrapper",
    "bezier",
    "bezier_derivative",
    "evaluate_curve",
    "evaluate_patch",
    "MetameshError",
    "InvalidParameter",
    "MeshAssemblyError",
    "ShapeKind",
    "ShapeDescriptor",
    "Axis",
    "PlaneShape",
    "BoxShape",
    "RoundedBoxShape",
    "SphereShape",
    "IcosphereShape",
    "CylinderShape",
    "RingShape",
    "DiscShape",
    "TeapotShape",
    "Vector2",
    "Vector3",
]
