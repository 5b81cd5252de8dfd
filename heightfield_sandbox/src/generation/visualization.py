"""Lightweight visualization helpers for terrain color inspection."""
from __future__ import annotations

import csv
from dataclasses import dataclass
from typing import Iterable, Iterator

from ...geometry import Mesh
from ...gradient import Color


# //1.- Dataclass capturing one vertex with its normalized elevation and color.
@dataclass
class ElevationSample:
    index: int
    x: float
    y: float
    z: float
    t: float
    color: Color


# //2.- Walk the vertex array in row-major order pairing each vertex with its color.
def sample_mesh_elevation(mesh: Mesh) -> Iterator[ElevationSample]:
    for index, (vertex, color) in enumerate(zip(mesh.vertices, mesh.colors)):
        yield ElevationSample(
            index=index,
            x=vertex.x,
            y=vertex.y,
            z=vertex.z,
            t=mesh.extrema.normalize(vertex.y),
            color=color,
        )


# //3.- Export sampled rows to CSV for manual visualization.
def export_vertex_csv(
    samples: Iterable[ElevationSample],
    filepath: str,
) -> None:
    with open(filepath, "w", newline="") as handle:
        writer = csv.writer(handle)
        writer.writerow(["index", "x", "y", "z", "t", "r", "g", "b", "a"])
        for sample in samples:
            writer.writerow([sample.index, sample.x, sample.y, sample.z, sample.t, *sample.color.as_tuple()])
