"""Lightweight 3D vector math utilities.

Terrain vertices and renderer-side normals are plain immutable vectors so
that every step of a mesh build can be compared exactly in tests. Only the
operations the sandbox needs are implemented.
"""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Tuple


@dataclass(frozen=True)
class Vector3:
    """Immutable 3D vector with a handful of math helpers."""

    x: float
    y: float
    z: float

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __truediv__(self, scalar: float) -> "Vector3":
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalized(self) -> "Vector3":
        length = self.length()
        if length == 0.0:
            raise ValueError("Cannot normalize zero-length vector")
        return self / length

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @staticmethod
    def zero() -> "Vector3":
        return Vector3(0.0, 0.0, 0.0)

    @staticmethod
    def unit_y() -> "Vector3":
        return Vector3(0.0, 1.0, 0.0)


def face_normal(a: Vector3, b: Vector3, c: Vector3) -> Vector3:
    """Return the unnormalized normal of triangle ``(a, b, c)``.

    The length of the result equals twice the triangle area, which lets
    callers accumulate area-weighted vertex normals by simple summation.
    Triangles wound like the terrain grid produce a normal pointing to +y.
    """

    return (b - a).cross(c - a)
