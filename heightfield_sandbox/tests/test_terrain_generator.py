"""Tests for terrain mesh vertex, index and color passes."""
from __future__ import annotations

import math

import pytest

from heightfield_sandbox.geometry import ElevationExtrema, GridSpec, InvalidGridError
from heightfield_sandbox.gradient import Color, Gradient, GradientStop, default_terrain_gradient
from heightfield_sandbox.noise import NoiseField, NoiseParams
from heightfield_sandbox.terrain_generator import TerrainMeshBuilder, grid_triangle_indices
from heightfield_sandbox.vector import face_normal

ROLLING = NoiseParams(amp1=0.07, amp2=0.23, amp3=0.013, scale1=6.0, scale2=1.5, scale3=4.0)
GREYSCALE = Gradient([GradientStop(0.0, Color(0.0, 0.0, 0.0)), GradientStop(1.0, Color(1.0, 1.0, 1.0))])


@pytest.mark.parametrize("x_size, z_size", [(1, 1), (2, 2), (5, 3), (1, 7), (16, 9)])
def test_buffer_sizes_match_grid(x_size: int, z_size: int) -> None:
    grid = GridSpec(x_size=x_size, z_size=z_size)
    mesh = TerrainMeshBuilder().build(grid, ROLLING, GREYSCALE)
    assert len(mesh.vertices) == (x_size + 1) * (z_size + 1)
    assert len(mesh.indices) == x_size * z_size * 6
    assert len(mesh.colors) == len(mesh.vertices)


def test_vertices_sit_on_integer_grid_in_row_major_order() -> None:
    grid = GridSpec(x_size=4, z_size=3)
    mesh = TerrainMeshBuilder().build(grid, ROLLING, GREYSCALE)
    for z in range(grid.z_size + 1):
        for x in range(grid.x_size + 1):
            vertex = mesh.vertices[grid.vertex_index(x, z)]
            assert vertex.x == float(x)
            assert vertex.z == float(z)


@pytest.mark.parametrize("x_size, z_size", [(1, 1), (3, 1), (1, 4), (6, 5)])
def test_indices_in_range_and_cover_every_vertex(x_size: int, z_size: int) -> None:
    grid = GridSpec(x_size=x_size, z_size=z_size)
    indices = grid_triangle_indices(grid)
    assert all(0 <= index < grid.vertex_count for index in indices)
    assert set(indices) == set(range(grid.vertex_count))


def test_first_quad_winding_for_small_grid() -> None:
    indices = grid_triangle_indices(GridSpec(x_size=2, z_size=2))
    assert len(indices) == 24
    assert indices[:3] == [0, 3, 1]
    assert indices[3:6] == [1, 3, 4]
    # The second row starts on vertex 3, not on the seam vertex 2.
    assert indices[12:15] == [3, 6, 4]


def test_every_triangle_faces_up() -> None:
    grid = GridSpec(x_size=6, z_size=4)
    mesh = TerrainMeshBuilder().build(grid, ROLLING, GREYSCALE)
    for a, b, c in mesh.triangles():
        normal = face_normal(mesh.vertices[a], mesh.vertices[b], mesh.vertices[c])
        assert normal.y > 0.0


def test_triangles_share_quad_diagonal() -> None:
    grid = GridSpec(x_size=3, z_size=3)
    indices = grid_triangle_indices(grid)
    for start in range(0, len(indices), 6):
        first = set(indices[start:start + 3])
        second = set(indices[start + 3:start + 6])
        assert len(first & second) == 2


def test_index_pass_ignores_elevation() -> None:
    grid = GridSpec(x_size=4, z_size=4)
    builder = TerrainMeshBuilder()
    flat = builder.build(grid, NoiseParams(), GREYSCALE)
    hilly = builder.build(grid, ROLLING, GREYSCALE)
    assert flat.indices == hilly.indices


def test_normalized_heights_stay_in_unit_range() -> None:
    mesh = TerrainMeshBuilder().build(GridSpec(x_size=12, z_size=12), ROLLING, GREYSCALE)
    values = [mesh.extrema.normalize(vertex.y) for vertex in mesh.vertices]
    assert all(0.0 <= t <= 1.0 for t in values)
    assert min(values) == 0.0
    assert max(values) == 1.0


def test_extrema_match_vertex_heights() -> None:
    mesh = TerrainMeshBuilder().build(GridSpec(x_size=10, z_size=8), ROLLING, GREYSCALE)
    heights = [vertex.y for vertex in mesh.vertices]
    assert mesh.extrema.min == min(heights)
    assert mesh.extrema.max == max(heights)


def test_extrema_not_clipped_by_zero_for_negative_terrain() -> None:
    field = NoiseField(primitive=lambda seed, x, z: -1.0 - 0.01 * x - 0.02 * z)
    mesh = TerrainMeshBuilder(field).build(GridSpec(x_size=3, z_size=3), NoiseParams(), GREYSCALE)
    assert mesh.extrema.max == pytest.approx(-5.0)
    assert mesh.extrema.min == pytest.approx(-5.0 - 0.15 - 0.3)
    assert mesh.colors[0] == Color(1.0, 1.0, 1.0)


def test_vertex_pass_extrema_seeded_above_zero() -> None:
    field = NoiseField(primitive=lambda seed, x, z: 2.0 + 0.1 * x + 0.05 * z)
    vertices, extrema = TerrainMeshBuilder(field).build_vertices(GridSpec(x_size=4, z_size=2), NoiseParams())
    assert extrema == ElevationExtrema.from_heights(vertex.y for vertex in vertices)
    assert extrema.min == pytest.approx(10.0)
    assert extrema.max == pytest.approx(10.0 + 2.0 + 0.5)


def test_flat_terrain_uses_gradient_start_without_nan() -> None:
    gradient = default_terrain_gradient()
    mesh = TerrainMeshBuilder().build(GridSpec(x_size=4, z_size=4), NoiseParams(), gradient)
    assert mesh.extrema.is_flat
    assert mesh.extrema.min == 2.5
    for color in mesh.colors:
        assert color == gradient.evaluate(0.0)
        assert not any(math.isnan(channel) for channel in color.as_tuple())


def test_colors_follow_elevation() -> None:
    mesh = TerrainMeshBuilder().build(GridSpec(x_size=8, z_size=8), ROLLING, GREYSCALE)
    lowest = min(range(mesh.vertex_count), key=lambda i: mesh.vertices[i].y)
    highest = max(range(mesh.vertex_count), key=lambda i: mesh.vertices[i].y)
    assert mesh.colors[lowest] == Color(0.0, 0.0, 0.0)
    assert mesh.colors[highest] == Color(1.0, 1.0, 1.0)


def test_repeated_builds_are_identical() -> None:
    builder = TerrainMeshBuilder()
    grid = GridSpec(x_size=7, z_size=5)
    first = builder.build(grid, ROLLING, GREYSCALE)
    second = builder.build(grid, ROLLING, GREYSCALE)
    assert first.vertices == second.vertices
    assert first.indices == second.indices
    assert first.colors == second.colors
    assert first == second


def test_color_mesh_keeps_geometry_and_swaps_colors() -> None:
    builder = TerrainMeshBuilder()
    mesh = builder.build(GridSpec(x_size=5, z_size=5), ROLLING, GREYSCALE)
    recolored = builder.color_mesh(mesh, GREYSCALE)
    assert recolored.vertices is mesh.vertices
    assert recolored.colors == mesh.colors
    red = Gradient([GradientStop(0.0, Color(1.0, 0.0, 0.0))])
    repainted = builder.color_mesh(mesh, red)
    assert set(repainted.colors) == {Color(1.0, 0.0, 0.0)}
    assert repainted.indices == mesh.indices


def test_zero_dimension_rejected_before_build() -> None:
    builder = TerrainMeshBuilder()
    with pytest.raises(InvalidGridError):
        builder.build(GridSpec(x_size=1, z_size=0), ROLLING, GREYSCALE)
    with pytest.raises(InvalidGridError):
        builder.build((2, 2), ROLLING, GREYSCALE)  # type: ignore[arg-type]
