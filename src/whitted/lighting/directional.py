"""Directional light, such as sunlight."""

from __future__ import annotations

import math
from dataclasses import dataclass

from whitted.core.color import Color
from whitted.core.vector import Point, Vector
from whitted.lighting.light_source import LightSource


@dataclass(frozen=True)
class DirectionalLight(LightSource):
    """Light arriving from infinitely far away along a fixed direction.

    Attributes:
        intensity: Intensity everywhere in the scene.
        direction: Direction the light travels (normalized on construction).
    """

    intensity: Color
    direction: Vector

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", self.direction.normalize())

    def get_intensity(self, point: Point) -> Color:
        return self.intensity

    def get_l(self, point: Point) -> Vector:
        return self.direction

    def get_distance(self, point: Point) -> float:
        return math.inf
