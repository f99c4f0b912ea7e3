"""Point light with distance attenuation."""

from __future__ import annotations

from dataclasses import dataclass

from whitted.core.color import Color
from whitted.core.errors import ConfigurationError
from whitted.core.vector import Point, Vector
from whitted.lighting.light_source import LightSource


@dataclass(frozen=True)
class PointLight(LightSource):
    """An omni-directional light at a position.

    Intensity falls off as ``I0 / (kc + kl*d + kq*d^2)``.

    Attributes:
        intensity: Intensity at the light position (``I0``).
        position: Light position.
        kc: Constant attenuation factor.
        kl: Linear attenuation factor.
        kq: Quadratic attenuation factor.
    """

    intensity: Color
    position: Point
    kc: float = 1.0
    kl: float = 0.0
    kq: float = 0.0

    def __post_init__(self) -> None:
        if self.kc < 0.0 or self.kl < 0.0 or self.kq < 0.0:
            raise ConfigurationError("Attenuation factors must be non-negative")
        if self.kc == 0.0 and self.kl == 0.0 and self.kq == 0.0:
            raise ConfigurationError("At least one attenuation factor must be positive")

    def get_intensity(self, point: Point) -> Color:
        d_squared = self.position.distance_squared(point)
        d = self.position.distance(point)
        return self.intensity.scale(1.0 / (self.kc + self.kl * d + self.kq * d_squared))

    def get_l(self, point: Point) -> Vector:
        return (point - self.position).normalize()

    def get_distance(self, point: Point) -> float:
        return self.position.distance(point)
