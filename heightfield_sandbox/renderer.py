"""Renderer-side mesh buffers that consume finished terrain meshes."""
from __future__ import annotations

from typing import Dict, List, Optional, Protocol

import numpy as np

from .geometry import Mesh
from .gradient import Color
from .vector import Vector3, face_normal


class MeshRenderer(Protocol):
    def upload(self, mesh: Mesh) -> None:
        ...


class MeshBuffer:
    """In-process stand-in for a GPU mesh.

    ``upload`` replaces every buffer wholesale and recalculates normals from
    face geometry; the terrain builder itself never produces normals.
    """

    def __init__(self) -> None:
        self.vertices: List[Vector3] = []
        self.triangles: List[int] = []
        self.colors: List[Color] = []
        self.normals: List[Vector3] = []
        self.upload_count = 0
        self._source: Optional[Mesh] = None

    @property
    def source(self) -> Optional[Mesh]:
        """The mesh most recently uploaded, held as a read reference."""

        return self._source

    def clear(self) -> None:
        self.vertices = []
        self.triangles = []
        self.colors = []
        self.normals = []
        self._source = None

    def upload(self, mesh: Mesh) -> None:
        self.clear()
        self.vertices = list(mesh.vertices)
        self.triangles = list(mesh.indices)
        self.colors = list(mesh.colors)
        self._source = mesh
        self.recalculate_normals()
        self.upload_count += 1

    def recalculate_normals(self) -> None:
        """Area-weighted vertex normals accumulated from every triangle."""

        sums = [Vector3.zero() for _ in self.vertices]
        tris = self.triangles
        for start in range(0, len(tris) - 2, 3):
            a, b, c = tris[start], tris[start + 1], tris[start + 2]
            normal = face_normal(self.vertices[a], self.vertices[b], self.vertices[c])
            sums[a] = sums[a] + normal
            sums[b] = sums[b] + normal
            sums[c] = sums[c] + normal
        normals: List[Vector3] = []
        for total in sums:
            if total.length() < 1e-12:
                normals.append(Vector3.unit_y())
            else:
                normals.append(total.normalized())
        self.normals = normals

    def as_arrays(self) -> Dict[str, np.ndarray]:
        """Pack the buffers into contiguous arrays for a graphics API."""

        return {
            "positions": np.array([v.as_tuple() for v in self.vertices], dtype=np.float32).reshape(-1, 3),
            "normals": np.array([n.as_tuple() for n in self.normals], dtype=np.float32).reshape(-1, 3),
            "colors": np.array([c.as_tuple() for c in self.colors], dtype=np.float32).reshape(-1, 4),
            "indices": np.array(self.triangles, dtype=np.uint32),
        }
