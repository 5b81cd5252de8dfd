"""Small demonstration harness for the heightfield sandbox."""
from __future__ import annotations

import logging

from .component import TerrainComponent
from .renderer import MeshBuffer
from .src.generation import (
    apply_overrides,
    collect_terrain_metrics,
    load_generation_config,
    load_terrain_settings,
)


def main(ticks: int = 3) -> None:
    logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s %(message)s")
    settings = apply_overrides(load_terrain_settings(), load_generation_config())
    buffer = MeshBuffer()
    component = TerrainComponent(settings, buffer)
    mesh = component.start()
    print(mesh.summary())

    for _ in range(ticks):
        component.update()
    print("Uploads:", buffer.upload_count)

    metrics = collect_terrain_metrics(mesh)
    print("Mean elevation:", round(metrics.mean_elevation, 3))
    print("Band occupancy:", ", ".join(f"{share:.2f}" for share in metrics.band_occupancy))
    print("First normal:", buffer.normals[0])


if __name__ == "__main__":
    main()
