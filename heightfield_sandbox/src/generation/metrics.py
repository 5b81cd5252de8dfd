"""Metrics export for verifying generated terrain statistics."""
from __future__ import annotations

import json
from dataclasses import dataclass
from statistics import mean
from typing import List, Sequence

from ...geometry import ElevationExtrema, Mesh


# //1.- Encapsulate summary statistics derived from a single terrain mesh.
@dataclass(frozen=True)
class TerrainMetrics:
    vertex_count: int
    triangle_count: int
    min_elevation: float
    max_elevation: float
    mean_elevation: float
    relief: float
    band_occupancy: Sequence[float]

    @property
    def is_flat(self) -> bool:
        return self.relief == 0.0


# //2.- Count the share of vertices whose normalized elevation falls in each band.
def _band_occupancy(mesh: Mesh, extrema: ElevationExtrema, bands: int) -> List[float]:
    counts = [0] * bands
    for vertex in mesh.vertices:
        t = extrema.normalize(vertex.y)
        counts[min(int(t * bands), bands - 1)] += 1
    total = len(mesh.vertices)
    return [count / total for count in counts]


# //3.- Compute metrics for one mesh, recomputing extrema from its vertices.
def collect_terrain_metrics(mesh: Mesh, *, bands: int = 4) -> TerrainMetrics:
    if bands < 1:
        raise ValueError("bands must be >= 1")
    heights = [vertex.y for vertex in mesh.vertices]
    extrema = ElevationExtrema.from_heights(heights)
    return TerrainMetrics(
        vertex_count=mesh.vertex_count,
        triangle_count=mesh.triangle_count,
        min_elevation=extrema.min,
        max_elevation=extrema.max,
        mean_elevation=mean(heights),
        relief=extrema.relief,
        band_occupancy=tuple(_band_occupancy(mesh, extrema, bands)),
    )


# //4.- Export metrics to JSON for CI validation or dashboards.
def export_terrain_metrics(
    metrics: TerrainMetrics,
    *,
    filepath: str,
) -> None:
    payload = {
        "vertex_count": metrics.vertex_count,
        "triangle_count": metrics.triangle_count,
        "min_elevation": metrics.min_elevation,
        "max_elevation": metrics.max_elevation,
        "mean_elevation": metrics.mean_elevation,
        "relief": metrics.relief,
        "band_occupancy": list(metrics.band_occupancy),
    }
    with open(filepath, "w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2)
