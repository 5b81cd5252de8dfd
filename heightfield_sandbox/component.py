"""Host-driven lifecycle wrapper around :class:`TerrainMeshBuilder`."""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from .geometry import GridSpec, Mesh
from .gradient import Gradient
from .noise import NoiseParams
from .renderer import MeshRenderer
from .src.generation.settings import TerrainSettings
from .terrain_generator import TerrainMeshBuilder

LOGGER = logging.getLogger(__name__)


class TerrainComponent:
    """Owns the current terrain mesh and hands it to a renderer.

    The host's scheduling loop calls :meth:`start` once and :meth:`update`
    on every tick. Geometry is only rebuilt on :meth:`start` and
    :meth:`reconfigure`; ticks recolor the existing vertex array.
    """

    def __init__(
        self,
        settings: TerrainSettings,
        renderer: MeshRenderer,
        *,
        builder: Optional[TerrainMeshBuilder] = None,
    ) -> None:
        # //1.- Persist configuration and collaborators; nothing is built until start().
        self._settings = settings
        self._renderer = renderer
        self._builder = builder or TerrainMeshBuilder()
        self._mesh: Optional[Mesh] = None

    @property
    def settings(self) -> TerrainSettings:
        return self._settings

    @property
    def mesh(self) -> Optional[Mesh]:
        return self._mesh

    @property
    def started(self) -> bool:
        return self._mesh is not None

    def start(self) -> Mesh:
        # //1.- Build geometry and colors from scratch, then publish the result.
        settings = self._settings
        mesh = self._builder.build(settings.grid, settings.noise, settings.gradient)
        LOGGER.info(
            "Terrain started: %dx%d grid, %d vertices", settings.grid.x_size, settings.grid.z_size, mesh.vertex_count
        )
        return self._publish(mesh)

    def update(self) -> Mesh:
        # //1.- Ticks only refresh colors so gradient edits show up without moving vertices.
        return self.rebuild_colors()

    def rebuild_colors(self, gradient: Optional[Gradient] = None) -> Mesh:
        # //1.- Refuse to recolor before the first geometry build exists.
        if self._mesh is None:
            raise RuntimeError("TerrainComponent.start() must run before recoloring")
        # //2.- Adopt a new gradient when one is supplied so later ticks keep using it.
        if gradient is not None:
            self._settings = replace(self._settings, gradient=gradient)
        mesh = self._builder.color_mesh(self._mesh, self._settings.gradient)
        return self._publish(mesh)

    def reconfigure(
        self,
        *,
        grid: Optional[GridSpec] = None,
        noise: Optional[NoiseParams] = None,
        gradient: Optional[Gradient] = None,
    ) -> Optional[Mesh]:
        # //1.- Merge the supplied fields into the current settings bundle.
        changes = {}
        if grid is not None:
            changes["grid"] = grid
        if noise is not None:
            changes["noise"] = noise
        if gradient is not None:
            changes["gradient"] = gradient
        self._settings = replace(self._settings, **changes)
        # //2.- A running component rebuilds everything; an idle one waits for start().
        if self._mesh is None:
            return None
        LOGGER.debug("Reconfigured terrain fields: %s", ", ".join(sorted(changes)) or "none")
        return self.start()

    def _publish(self, mesh: Mesh) -> Mesh:
        self._mesh = mesh
        self._renderer.upload(mesh)
        return mesh
