"""Structured loader for terrain generation settings."""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import List

from ...geometry import GridSpec
from ...gradient import Color, Gradient, GradientStop, default_terrain_gradient
from ...noise import NoiseParams

LOGGER = logging.getLogger(__name__)


# //1.- Aggregate everything a terrain build needs into one immutable bundle.
@dataclass(frozen=True)
class TerrainSettings:
    grid: GridSpec
    noise: NoiseParams = field(default_factory=NoiseParams)
    gradient: Gradient = field(default_factory=default_terrain_gradient)


# //2.- Resolve the bundled configuration directory next to the package modules.
def _default_config_directory() -> str:
    base_dir = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
    return os.path.join(base_dir, "config")


# //3.- Load a single JSON configuration file and coerce to dictionary.
def _read_json_config(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as handle:
        return json.load(handle)


# //4.- Build the grid spec; GridSpec itself rejects non-positive sizes.
def _load_grid(config_dir: str) -> GridSpec:
    payload = _read_json_config(os.path.join(config_dir, "grid.json"))
    return GridSpec(x_size=int(payload["x_size"]), z_size=int(payload["z_size"]))


# //5.- Read octave amplitudes and scales, defaulting missing octaves to zero.
def _load_noise(config_dir: str) -> NoiseParams:
    payload = _read_json_config(os.path.join(config_dir, "noise.json"))
    return NoiseParams(
        amp1=float(payload.get("amp1", 0.0)),
        amp2=float(payload.get("amp2", 0.0)),
        amp3=float(payload.get("amp3", 0.0)),
        scale1=float(payload.get("scale1", 0.0)),
        scale2=float(payload.get("scale2", 0.0)),
        scale3=float(payload.get("scale3", 0.0)),
        seed=int(payload.get("seed", 0)),
    )


# //6.- Parse gradient stops given either as hex strings or channel lists.
def parse_gradient(payload: dict) -> Gradient:
    stops: List[GradientStop] = []
    for entry in payload["stops"]:
        raw_color = entry["color"]
        if isinstance(raw_color, str):
            color = Color.from_hex(raw_color)
        else:
            color = Color.from_iter(raw_color)
        stops.append(GradientStop(position=float(entry["position"]), color=color))
    mode = str(payload.get("mode", "blend")).strip().lower()
    return Gradient(stops, mode=mode)


def _load_gradient(config_dir: str) -> Gradient:
    path = os.path.join(config_dir, "gradient.json")
    if not os.path.exists(path):
        LOGGER.debug("No gradient.json in %s, using default terrain gradient", config_dir)
        return default_terrain_gradient()
    return parse_gradient(_read_json_config(path))


# //7.- Public helper assembling the full settings bundle.
def load_terrain_settings(config_dir: str | None = None) -> TerrainSettings:
    directory = config_dir or _default_config_directory()
    LOGGER.debug("Loading terrain settings from %s", directory)
    grid = _load_grid(directory)
    noise = _load_noise(directory)
    gradient = _load_gradient(directory)
    return TerrainSettings(grid=grid, noise=noise, gradient=gradient)
