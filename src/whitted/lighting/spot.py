"""Spot light: a point light narrowed around a direction."""

from __future__ import annotations

from whitted.core.color import Color
from whitted.core.errors import ConfigurationError
from whitted.core.util import align_zero
from whitted.core.vector import Point, Vector
from whitted.lighting.light_source import LightSource
from whitted.lighting.point import PointLight


class SpotLight(LightSource):
    """A point light whose intensity is scaled by ``max(0, dir . l)``.

    The falloff and light direction come from an inner :class:`PointLight`;
    ``narrow_beam`` raises the cosine factor to a power to tighten the cone.

    Attributes:
        point_light: The attenuated point light this spot is built on.
        direction: The spot axis (normalized).
        narrow_beam: Exponent applied to the cosine factor (>= 1).
    """

    def __init__(
        self,
        intensity: Color,
        position: Point,
        direction: Vector,
        kc: float = 1.0,
        kl: float = 0.0,
        kq: float = 0.0,
        narrow_beam: float = 1.0,
    ) -> None:
        if narrow_beam < 1.0:
            raise ConfigurationError(f"narrow_beam must be >= 1, got {narrow_beam}")
        self.point_light = PointLight(intensity, position, kc, kl, kq)
        self.direction = direction.normalize()
        self.narrow_beam = float(narrow_beam)

    @property
    def position(self) -> Point:
        return self.point_light.position

    def get_intensity(self, point: Point) -> Color:
        if point.coincides(self.position):
            return Color.BLACK
        cos = align_zero(self.direction.dot(self.get_l(point)))
        if cos <= 0.0:
            return Color.BLACK
        return self.point_light.get_intensity(point).scale(cos**self.narrow_beam)

    def get_l(self, point: Point) -> Vector:
        return self.point_light.get_l(point)

    def get_distance(self, point: Point) -> float:
        return self.point_light.get_distance(point)

    def __repr__(self) -> str:
        return (
            f"SpotLight(position={self.position!r}, direction={self.direction!r}, "
            f"narrow_beam={self.narrow_beam})"
        )
