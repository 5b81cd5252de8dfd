"""Heightfield terrain sandbox package.

Builds colored terrain meshes from layered coherent noise: a noise field
samples elevations on a regular grid, the mesh builder turns them into
vertex, triangle index and color buffers, and a small host component hands
the result to a renderer.
"""

from .vector import Vector3
from .noise import NoiseField, NoiseParams, noise2, perlin01, sample_elevation
from .gradient import Color, Gradient, GradientStop, default_terrain_gradient, inverse_lerp
from .geometry import ElevationExtrema, GridSpec, InvalidGridError, Mesh
from .terrain_generator import TerrainMeshBuilder, grid_triangle_indices
from .renderer import MeshBuffer, MeshRenderer
from .component import TerrainComponent

__all__ = [
    "Vector3",
    "NoiseField",
    "NoiseParams",
    "noise2",
    "perlin01",
    "sample_elevation",
    "Color",
    "Gradient",
    "GradientStop",
    "default_terrain_gradient",
    "inverse_lerp",
    "ElevationExtrema",
    "GridSpec",
    "InvalidGridError",
    "Mesh",
    "TerrainMeshBuilder",
    "grid_triangle_indices",
    "MeshBuffer",
    "MeshRenderer",
    "TerrainComponent",
]
