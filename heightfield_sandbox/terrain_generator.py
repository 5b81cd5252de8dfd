"""High-level terrain mesh generation entry point."""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional, Sequence, Tuple

from .geometry import ElevationExtrema, GridSpec, InvalidGridError, Mesh
from .gradient import Color, Gradient
from .noise import DEFAULT_FIELD, NoiseField, NoiseParams
from .vector import Vector3

LOGGER = logging.getLogger(__name__)


def grid_triangle_indices(grid: GridSpec) -> List[int]:
    """Return the triangle index buffer for ``grid``.

    Each quad with lower-left vertex ``v`` yields ``(v, v + w, v + 1)`` and
    ``(v + 1, v + w, v + w + 1)`` where ``w`` is the row width, which winds
    both triangles clockwise when seen from above. The buffer only depends
    on the grid dimensions.
    """

    width = grid.row_width
    indices: List[int] = []
    vert = 0
    for _ in range(grid.z_size):
        for _ in range(grid.x_size):
            indices.extend([
                vert,
                vert + width,
                vert + 1,
                vert + 1,
                vert + width,
                vert + width + 1,
            ])
            vert += 1
        # Skip the last vertex of the row so the next quad starts on the next row.
        vert += 1
    return indices


class TerrainMeshBuilder:
    """Builds colored heightfield meshes from layered noise."""

    def __init__(self, field: Optional[NoiseField] = None) -> None:
        self._field = field or DEFAULT_FIELD

    def build(self, grid: GridSpec, params: NoiseParams, gradient: Gradient) -> Mesh:
        _check_grid(grid)
        vertices, extrema = self.build_vertices(grid, params)
        colors = self.build_colors(vertices, extrema, gradient)
        indices = self.build_indices(grid)
        LOGGER.debug(
            "Built %dx%d terrain: %d vertices, %d indices, elevation %.3f..%.3f",
            grid.x_size,
            grid.z_size,
            len(vertices),
            len(indices),
            extrema.min,
            extrema.max,
        )
        return Mesh(
            vertices=tuple(vertices),
            indices=tuple(indices),
            colors=tuple(colors),
            extrema=extrema,
        )

    def build_vertices(
        self, grid: GridSpec, params: NoiseParams
    ) -> Tuple[List[Vector3], ElevationExtrema]:
        _check_grid(grid)
        vertices: List[Vector3] = []
        for z in range(grid.z_size + 1):
            for x in range(grid.x_size + 1):
                y = self._field.sample(float(x), float(z), params)
                vertices.append(Vector3(float(x), y, float(z)))
        return vertices, ElevationExtrema.from_heights(vertex.y for vertex in vertices)

    def build_indices(self, grid: GridSpec) -> List[int]:
        _check_grid(grid)
        return grid_triangle_indices(grid)

    def build_colors(
        self,
        vertices: Sequence[Vector3],
        extrema: ElevationExtrema,
        gradient: Gradient,
    ) -> List[Color]:
        if extrema.is_flat:
            LOGGER.debug("Flat terrain at elevation %.3f, using gradient start color", extrema.min)
        return [gradient.evaluate(extrema.normalize(vertex.y)) for vertex in vertices]

    def color_mesh(self, mesh: Mesh, gradient: Gradient) -> Mesh:
        """Recolor ``mesh`` from its own vertex array.

        Extrema are recomputed from the vertices so repeated calls never
        depend on state left over from an earlier build.
        """

        extrema = ElevationExtrema.from_heights(vertex.y for vertex in mesh.vertices)
        colors = self.build_colors(mesh.vertices, extrema, gradient)
        return replace(mesh, colors=tuple(colors), extrema=extrema)


def _check_grid(grid: GridSpec) -> None:
    if not isinstance(grid, GridSpec):
        raise InvalidGridError(f"Expected GridSpec, got {type(grid).__name__}")
