# metamesh/shapes.py
"""
Shape descriptors.

Each shape is an immutable parameter record tagged with its ``ShapeKind``.
Exactly one descriptor is handed to ``metamesh.generate``. Descriptors do
not validate on construction; the generators guard their own inputs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, StrEnum
from typing import ClassVar, Tuple, Union

from metamesh.types import Vector2, Vector3


class ShapeKind(StrEnum):
    PLANE = "plane"
    BOX = "box"
    ROUNDED_BOX = "rounded_box"
    SPHERE = "sphere"
    ICOSPHERE = "icosphere"
    CYLINDER = "cylinder"
    RING = "ring"
    DISC = "disc"
    TEAPOT = "teapot"


class Axis(IntEnum):
    """Direction a shape's local +Y is mapped to."""

    X = 0
    Y = 1
    Z = 2


@dataclass(frozen=True, slots=True)
class PlaneShape:
    kind: ClassVar[ShapeKind] = ShapeKind.PLANE

    size: Vector2 = field(default_factory=Vector2.one)  # width, depth
    segments: Tuple[int, int] = (1, 1)  # columns, rows
    axis: Axis = Axis.Y


@dataclass(frozen=True, slots=True)
class BoxShape:
    kind: ClassVar[ShapeKind] = ShapeKind.BOX

    size: Vector3 = field(default_factory=Vector3.one)
    segments: Tuple[int, int, int] = (1, 1, 1)


@dataclass(frozen=True, slots=True)
class RoundedBoxShape:
    kind: ClassVar[ShapeKind] = ShapeKind.ROUNDED_BOX

    size: Vector3 = field(default_factory=Vector3.one)
    radius: float = 0.1
    divisions: int = 8  # grid segments per face edge


@dataclass(frozen=True, slots=True)
class SphereShape:
    kind: ClassVar[ShapeKind] = ShapeKind.SPHERE

    radius: float = 0.5
    columns: int = 24  # longitude segments
    rows: int = 12  # latitude segments
    axis: Axis = Axis.Y


@dataclass(frozen=True, slots=True)
class IcosphereShape:
    kind: ClassVar[ShapeKind] = ShapeKind.ICOSPHERE

    radius: float = 0.5
    subdivision: int = 2


@dataclass(frozen=True, slots=True)
class CylinderShape:
    kind: ClassVar[ShapeKind] = ShapeKind.CYLINDER

    top_radius: float = 0.5
    bottom_radius: float = 0.5
    height: float = 1.0
    columns: int = 24
    rows: int = 1
    caps: bool = True
    axis: Axis = Axis.Y


@dataclass(frozen=True, slots=True)
class RingShape:
    kind: ClassVar[ShapeKind] = ShapeKind.RING

    inner_radius: float = 0.25
    outer_radius: float = 0.5
    segments: int = 32
    angle: float = 360.0  # degrees
    axis: Axis = Axis.Y


@dataclass(frozen=True, slots=True)
class DiscShape:
    kind: ClassVar[ShapeKind] = ShapeKind.DISC

    radius: float = 0.5
    segments: int = 32
    angle: float = 360.0  # degrees
    axis: Axis = Axis.Y


@dataclass(frozen=True, slots=True)
class TeapotShape:
    kind: ClassVar[ShapeKind] = ShapeKind.TEAPOT

    subdivision: int = 10


ShapeDescriptor = Union[
    PlaneShape,
    BoxShape,
    RoundedBoxShape,
    SphereShape,
    IcosphereShape,
    CylinderShape,
    RingShape,
    DiscShape,
    TeapotShape,
]

SHAPE_TYPES: dict[ShapeKind, type] = {
    cls.kind: cls
    for cls in (
        PlaneShape,
        BoxShape,
        RoundedBoxShape,
        SphereShape,
        IcosphereShape,
        CylinderShape,
        RingShape,
        DiscShape,
        TeapotShape,
    )
}
