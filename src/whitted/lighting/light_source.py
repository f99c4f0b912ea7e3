"""Interface of a light that illuminates surface points."""

from __future__ import annotations

from abc import ABC, abstractmethod

from whitted.core.color import Color
from whitted.core.vector import Point, Vector


class LightSource(ABC):
    """A light whose contribution depends on the lit point."""

    @abstractmethod
    def get_intensity(self, point: Point) -> Color:
        """Return the light intensity arriving at a point."""

    @abstractmethod
    def get_l(self, point: Point) -> Vector:
        """Return the unit direction from the light toward a point."""

    @abstractmethod
    def get_distance(self, point: Point) -> float:
        """Return the distance from the light to a point (may be infinite)."""
