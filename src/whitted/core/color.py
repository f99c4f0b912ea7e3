"""Unclamped RGB color used for all radiance accumulation.

Channels are stored on the 0-255 display scale but are never clamped here:
light may accumulate beyond the displayable range, and clamping is the
image writer's responsibility when a pixel is finally written out.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar

from whitted.core.double3 import Double3
from whitted.core.errors import ConfigurationError


@dataclass(frozen=True)
class Color:
    """An RGB triple of non-negative reals.

    Attributes:
        r: Red channel.
        g: Green channel.
        b: Blue channel.
    """

    r: float
    g: float
    b: float

    BLACK: ClassVar[Color]

    def __post_init__(self) -> None:
        if self.r < 0.0 or self.g < 0.0 or self.b < 0.0:
            raise ConfigurationError(f"Color channels must be non-negative: {self!r}")

    @classmethod
    def of(cls, value: Color | tuple[float, float, float] | list[float]) -> Color:
        """Build a color from an existing color or three channel values."""
        if isinstance(value, Color):
            return value
        channels = tuple(float(c) for c in value)
        if len(channels) != 3:
            raise ConfigurationError(f"A color needs 3 channels, got {len(channels)}")
        return cls(*channels)

    def __iter__(self) -> Iterator[float]:
        return iter((self.r, self.g, self.b))

    def __add__(self, other: Color) -> Color:
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def add(self, *colors: Color) -> Color:
        """Sum this color with any number of others."""
        r, g, b = self.r, self.g, self.b
        for c in colors:
            r += c.r
            g += c.g
            b += c.b
        return Color(r, g, b)

    def scale(self, k: float | Double3) -> Color:
        """Scale by a scalar or per channel by a Double3 of coefficients."""
        if isinstance(k, Double3):
            return Color(self.r * k.d1, self.g * k.d2, self.b * k.d3)
        return Color(self.r * k, self.g * k, self.b * k)

    def reduce(self, n: int) -> Color:
        """Divide every channel by ``n`` (used to average sample colors)."""
        return Color(self.r / n, self.g / n, self.b / n)


Color.BLACK = Color(0.0, 0.0, 0.0)
