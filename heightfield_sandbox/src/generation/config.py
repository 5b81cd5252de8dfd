"""Configuration overrides for deterministic terrain generation."""
from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Dict, Mapping, Optional

from ...geometry import GridSpec
from .settings import TerrainSettings

_FLOAT_KEYS = ("amp1", "amp2", "amp3", "scale1", "scale2", "scale3")
_INT_KEYS = ("seed", "x_size", "z_size")


# //1.- Define dataclass holding optional overrides for a loaded settings bundle.
@dataclass(frozen=True)
class GenerationOverrides:
    """Values that replace the bundled configuration when present."""

    amp1: Optional[float] = None
    amp2: Optional[float] = None
    amp3: Optional[float] = None
    scale1: Optional[float] = None
    scale2: Optional[float] = None
    scale3: Optional[float] = None
    seed: Optional[int] = None
    x_size: Optional[int] = None
    z_size: Optional[int] = None

    # //2.- Provide helper to build overrides from a plain mapping.
    @classmethod
    def from_mapping(cls, payload: Optional[Mapping[str, object]] = None) -> "GenerationOverrides":
        if not payload:
            return cls()
        values: Dict[str, object] = {}
        for key in _FLOAT_KEYS:
            if payload.get(key) is not None:
                values[key] = float(payload[key])  # type: ignore[arg-type]
        for key in _INT_KEYS:
            if payload.get(key) is not None:
                values[key] = int(payload[key])  # type: ignore[arg-type]
        return cls(**values)

    # //3.- Allow overriding parameters through environment variables for integration tests.
    @classmethod
    def from_environment(
        cls, prefix: str = "HEIGHTFIELD", environ: Optional[Mapping[str, str]] = None
    ) -> "GenerationOverrides":
        source = environ if environ is not None else os.environ
        mapping: Dict[str, str] = {}
        for key in _FLOAT_KEYS + _INT_KEYS:
            value = source.get(f"{prefix}_{key.upper()}")
            if value is not None:
                mapping[key] = value
        return cls.from_mapping(mapping)

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    # //4.- Produce a new settings bundle with every present override applied.
    def apply(self, settings: TerrainSettings) -> TerrainSettings:
        noise_changes = {
            key: getattr(self, key)
            for key in _FLOAT_KEYS + ("seed",)
            if getattr(self, key) is not None
        }
        noise = replace(settings.noise, **noise_changes)
        grid = settings.grid
        if self.x_size is not None or self.z_size is not None:
            grid = GridSpec(
                x_size=self.x_size if self.x_size is not None else grid.x_size,
                z_size=self.z_size if self.z_size is not None else grid.z_size,
            )
        return replace(settings, grid=grid, noise=noise)


# //5.- Provide canonical configuration accessor used across modules.
def load_generation_config(
    mapping: Optional[Mapping[str, object]] = None,
    *,
    env_prefix: str = "HEIGHTFIELD",
) -> GenerationOverrides:
    if mapping is not None:
        return GenerationOverrides.from_mapping(mapping)
    return GenerationOverrides.from_environment(prefix=env_prefix)


def apply_overrides(settings: TerrainSettings, overrides: GenerationOverrides) -> TerrainSettings:
    return overrides.apply(settings)
