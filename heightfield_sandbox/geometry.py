"""Data structures describing the generated terrain geometry."""
from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from typing import Iterable, Tuple

from .gradient import Color, inverse_lerp
from .vector import Vector3


class InvalidGridError(ValueError):
    """Raised when a grid has a non-positive or non-integer dimension."""


@dataclass(frozen=True)
class GridSpec:
    """Regular grid of ``x_size * z_size`` quads.

    Vertices are laid out row-major with ``z`` as the outer loop and ``x``
    as the inner loop, so vertex ``(x, z)`` lives at ``z * row_width + x``.
    The index and color buffers rely on this ordering.
    """

    x_size: int
    z_size: int

    def __post_init__(self) -> None:
        for name in ("x_size", "z_size"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise InvalidGridError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise InvalidGridError(f"{name} must be positive, got {value}")
            # Store plain ints so counts and indices never carry numpy scalar types.
            object.__setattr__(self, name, int(value))

    @property
    def row_width(self) -> int:
        return self.x_size + 1

    @property
    def vertex_count(self) -> int:
        return (self.x_size + 1) * (self.z_size + 1)

    @property
    def quad_count(self) -> int:
        return self.x_size * self.z_size

    @property
    def index_count(self) -> int:
        return self.quad_count * 6

    def vertex_index(self, x: int, z: int) -> int:
        if not (0 <= x <= self.x_size and 0 <= z <= self.z_size):
            raise IndexError(f"Grid coordinate ({x}, {z}) outside {self.x_size}x{self.z_size}")
        return z * self.row_width + x


@dataclass(frozen=True)
class ElevationExtrema:
    """Lowest and highest elevation observed during a single build."""

    min: float
    max: float

    @classmethod
    def from_heights(cls, heights: Iterable[float]) -> "ElevationExtrema":
        # The first sample seeds both ends of the range.
        iterator = iter(heights)
        try:
            first = next(iterator)
        except StopIteration:
            raise ValueError("Cannot compute extrema of an empty height set") from None
        low = high = first
        for y in iterator:
            if y < low:
                low = y
            if y > high:
                high = y
        return cls(min=low, max=high)

    @property
    def relief(self) -> float:
        return self.max - self.min

    @property
    def is_flat(self) -> bool:
        return self.min == self.max

    def normalize(self, y: float) -> float:
        return inverse_lerp(self.min, self.max, y)


@dataclass(frozen=True)
class Mesh:
    """Vertex, triangle index and color buffers of one terrain build.

    The buffers are tuples so a renderer can hold a read reference without
    being able to change what the builder produced.
    """

    vertices: Tuple[Vector3, ...]
    indices: Tuple[int, ...]
    colors: Tuple[Color, ...]
    extrema: ElevationExtrema

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    def triangles(self) -> Iterable[Tuple[int, int, int]]:
        indices = self.indices
        for start in range(0, len(indices), 3):
            yield indices[start], indices[start + 1], indices[start + 2]

    def summary(self) -> str:
        return (
            f"Terrain mesh: vertices={self.vertex_count}, triangles={self.triangle_count}, "
            f"elevation range=({self.extrema.min:.2f}, {self.extrema.max:.2f})"
        )
