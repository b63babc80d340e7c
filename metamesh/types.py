# metamesh/types.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple, TypeAlias

import numpy as np

Scalar: TypeAlias = float

AABB = Tuple[Tuple[float, float, float], Tuple[float, float, float]]


@dataclass(frozen=True, slots=True)
class Vector2:
    x: Scalar
    y: Scalar

    @staticmethod
    def one() -> Vector2:
        return Vector2(1.0, 1.0)

    def __iter__(self) -> Iterator[Scalar]:
        yield self.x
        yield self.y

    def to_array(self) -> np.ndarray:
        return np.array((self.x, self.y), dtype=np.float64)


@dataclass(frozen=True, slots=True)
class Vector3:
    x: Scalar
    y: Scalar
    z: Scalar

    @staticmethod
    def one() -> Vector3:
        return Vector3(1.0, 1.0, 1.0)

    def __iter__(self) -> Iterator[Scalar]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def to_array(self) -> np.ndarray:
        return np.array((self.x, self.y, self.z), dtype=np.float64)
