"""Base class for a single renderable shape."""

from __future__ import annotations

from abc import abstractmethod

from whitted.core.color import Color
from whitted.core.vector import Point, Vector
from whitted.geometry.intersectable import Intersectable
from whitted.materials.material import Material


class Geometry(Intersectable):
    """A shape with a surface material and an emission color.

    Attributes:
        emission: Light the surface emits by itself (black by default).
        material: Reflectance coefficients of the surface.
    """

    def __init__(self) -> None:
        self.emission: Color = Color.BLACK
        self.material: Material = Material()

    def set_emission(self, emission: Color) -> Geometry:
        """Set the emission color and return the shape for chaining."""
        self.emission = emission
        return self

    def set_material(self, material: Material) -> Geometry:
        """Set the material and return the shape for chaining."""
        self.material = material
        return self

    @abstractmethod
    def get_normal(self, point: Point) -> Vector:
        """Return the unit surface normal at a point on the surface."""
