"""Generation utilities for the heightfield terrain sandbox."""
from .settings import TerrainSettings, load_terrain_settings, parse_gradient
from .config import GenerationOverrides, apply_overrides, load_generation_config
from .metrics import TerrainMetrics, collect_terrain_metrics, export_terrain_metrics
from .visualization import ElevationSample, export_vertex_csv, sample_mesh_elevation

__all__ = [
    "TerrainSettings",
    "load_terrain_settings",
    "parse_gradient",
    "GenerationOverrides",
    "apply_overrides",
    "load_generation_config",
    "TerrainMetrics",
    "collect_terrain_metrics",
    "export_terrain_metrics",
    "ElevationSample",
    "export_vertex_csv",
    "sample_mesh_elevation",
]
