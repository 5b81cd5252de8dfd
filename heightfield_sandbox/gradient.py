"""Color ramps mapping normalized elevation to vertex colors."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

GRADIENT_MODES = ("blend", "fixed")


def clamp01(value: float) -> float:
    return min(1.0, max(0.0, value))


def inverse_lerp(a: float, b: float, value: float) -> float:
    """Return where ``value`` sits between ``a`` and ``b`` clamped to ``[0, 1]``.

    An empty range (``a == b``) maps every value to ``0.0``.
    """

    if a == b:
        return 0.0
    return clamp01((value - a) / (b - a))


@dataclass(frozen=True)
class Color:
    """Linear RGBA color with float channels in ``[0, 1]``."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def lerp(self, other: "Color", t: float) -> "Color":
        return Color(
            self.r + (other.r - self.r) * t,
            self.g + (other.g - self.g) * t,
            self.b + (other.b - self.b) * t,
            self.a + (other.a - self.a) * t,
        )

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)

    def to_rgba8(self) -> Tuple[int, int, int, int]:
        return tuple(int(round(clamp01(c) * 255.0)) for c in self.as_tuple())  # type: ignore[return-value]

    @staticmethod
    def from_hex(hex_s: str, alpha: float = 1.0) -> "Color":
        hex_s = hex_s.strip().lstrip("#")
        if len(hex_s) not in (6, 8):
            raise ValueError(f"Expected #RRGGBB or #RRGGBBAA, got '{hex_s}'")
        r = int(hex_s[0:2], 16) / 255.0
        g = int(hex_s[2:4], 16) / 255.0
        b = int(hex_s[4:6], 16) / 255.0
        if len(hex_s) == 8:
            alpha = int(hex_s[6:8], 16) / 255.0
        return Color(r, g, b, alpha)

    @staticmethod
    def from_iter(values: Iterable[float]) -> "Color":
        channels = [float(c) for c in values]
        if len(channels) == 3:
            channels.append(1.0)
        if len(channels) != 4:
            raise ValueError("Color needs 3 or 4 channels")
        return Color(*channels)


@dataclass(frozen=True)
class GradientStop:
    position: float
    color: Color


class Gradient:
    """Ordered color stops evaluated over ``[0, 1]``.

    ``"blend"`` interpolates linearly between the two stops surrounding
    ``t``; ``"fixed"`` returns the color of the first stop at or after
    ``t``. Outside the covered range the nearest end stop wins.
    """

    def __init__(self, stops: Sequence[GradientStop], mode: str = "blend") -> None:
        if not stops:
            raise ValueError("Gradient needs at least one color stop")
        if mode not in GRADIENT_MODES:
            raise ValueError(f"Unknown gradient mode '{mode}'")
        for stop in stops:
            if not 0.0 <= stop.position <= 1.0:
                raise ValueError(f"Stop position {stop.position} outside [0, 1]")
        self._stops: Tuple[GradientStop, ...] = tuple(sorted(stops, key=lambda s: s.position))
        self._mode = mode

    @property
    def stops(self) -> Tuple[GradientStop, ...]:
        return self._stops

    @property
    def mode(self) -> str:
        return self._mode

    @classmethod
    def from_hex(cls, stops: Iterable[Tuple[float, str]], mode: str = "blend") -> "Gradient":
        return cls([GradientStop(float(pos), Color.from_hex(c)) for pos, c in stops], mode=mode)

    def evaluate(self, t: float) -> Color:
        t = clamp01(t)
        stops = self._stops
        if t <= stops[0].position:
            return stops[0].color
        for lower, upper in zip(stops, stops[1:]):
            if t <= upper.position:
                if self._mode == "fixed":
                    return upper.color
                span = upper.position - lower.position
                if span <= 0.0:
                    return upper.color
                return lower.color.lerp(upper.color, (t - lower.position) / span)
        return stops[-1].color

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Gradient):
            return NotImplemented
        return self._stops == other._stops and self._mode == other._mode

    def __repr__(self) -> str:
        return f"Gradient(stops={len(self._stops)}, mode={self._mode!r})"


def default_terrain_gradient() -> Gradient:
    """Water, sand, grass, rock and snow spread over the elevation range."""

    return Gradient.from_hex(
        [
            (0.0, "#1f4e8c"),
            (0.2, "#d8c48a"),
            (0.45, "#4f8f3a"),
            (0.75, "#7a6a58"),
            (1.0, "#f4f4f4"),
        ]
    )
