"""Deterministic coherent noise and the layered terrain elevation field."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Tuple

# Largest magnitude classic 2D gradient noise can reach with unit gradients.
_PERLIN2_EXTENT = math.sqrt(0.5)

NoisePrimitive = Callable[[int, float, float], float]


@dataclass(frozen=True)
class NoiseParams:
    """Amplitudes and scales of the three octaves stacked on the base noise.

    A larger amplitude samples the noise at a higher frequency (rougher
    terrain); a larger scale multiplies the octave's contribution (taller
    relief). ``seed`` selects the gradient lattice and defaults to ``0``.
    """

    amp1: float = 0.0
    amp2: float = 0.0
    amp3: float = 0.0
    scale1: float = 0.0
    scale2: float = 0.0
    scale3: float = 0.0
    seed: int = 0


# -- Hash helpers ---------------------------------------------------------

def _hash2(seed: int, x: int, z: int) -> int:
    value = seed ^ (x * 374761393) ^ (z * 668265263)
    value = (value ^ (value >> 13)) * 1274126177
    value = value ^ (value >> 16)
    return value & 0xFFFFFFFF


def _gradient(seed: int, x: int, z: int) -> Tuple[float, float]:
    h = _hash2(seed, x, z)
    # Use the low bits to generate a normalized gradient vector.
    gx = ((h >> 0) & 0xFF) / 255.0 * 2.0 - 1.0
    gz = ((h >> 8) & 0xFF) / 255.0 * 2.0 - 1.0
    length = math.sqrt(gx * gx + gz * gz) or 1.0
    return gx / length, gz / length


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


# -- Noise evaluators -----------------------------------------------------

def noise2(seed: int, x: float, z: float) -> float:
    """Classic Perlin-style gradient noise in 2D.

    Returns values in ``[-sqrt(0.5), sqrt(0.5)]`` and exactly ``0.0`` on
    integer lattice points.
    """

    xi = math.floor(x)
    zi = math.floor(z)

    xf = x - xi
    zf = z - zi

    dot_vals = {}
    for dx in (0, 1):
        for dz in (0, 1):
            gx, gz = _gradient(seed, xi + dx, zi + dz)
            dot_vals[(dx, dz)] = (xf - dx) * gx + (zf - dz) * gz

    u = _fade(xf)
    v = _fade(zf)

    x1 = _lerp(dot_vals[(0, 0)], dot_vals[(1, 0)], u)
    x2 = _lerp(dot_vals[(0, 1)], dot_vals[(1, 1)], u)
    return _lerp(x1, x2, v)


def perlin01(seed: int, x: float, z: float) -> float:
    """Gradient noise remapped to ``[0, 1]``, ``0.5`` on lattice points."""

    value = 0.5 + 0.5 * noise2(seed, x, z) / _PERLIN2_EXTENT
    return min(1.0, max(0.0, value))


class NoiseField:
    """Layered elevation field: a fixed base term plus three octaves.

    The second octave is subtracted and the third doubled; together with the
    base weight of ``5`` this gives the terrain its silhouette, so the
    constants are part of the output contract.
    """

    BASE_WEIGHT = 5.0

    def __init__(self, primitive: NoisePrimitive = perlin01) -> None:
        self._primitive = primitive

    def base(self, x: float, z: float, seed: int = 0) -> float:
        return self._primitive(seed, x, z)

    def octave(self, x: float, z: float, amp: float, seed: int = 0) -> float:
        return self._primitive(seed, x * amp, z * amp)

    def sample(self, x: float, z: float, params: NoiseParams) -> float:
        seed = params.seed
        noise = self.base(x, z, seed) * self.BASE_WEIGHT
        noise += self.octave(x, z, params.amp1, seed) * params.scale1
        noise -= self.octave(x, z, params.amp2, seed) * params.scale2
        noise += self.octave(x, z, params.amp3, seed) * params.scale3 * 2
        return noise


DEFAULT_FIELD = NoiseField()


def sample_elevation(x: float, z: float, params: NoiseParams) -> float:
    """Sample the default :class:`NoiseField` at ``(x, z)``."""

    return DEFAULT_FIELD.sample(x, z, params)
