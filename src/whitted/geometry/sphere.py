"""Sphere primitive with geometric ray-sphere intersection.

The intersection uses the projection of the center onto the ray rather
than the raw quadratic: ``t_m`` is the distance along the ray to the point
closest to the center and ``d`` the distance between that point and the
center. A ray that only touches the sphere (``d == r``) does not hit it.

Example:
    >>> sphere = Sphere(1.0, Point(0.0, 0.0, -3.0))
    >>> ray = Ray(Point.ZERO, Vector(0.0, 0.0, -1.0))
    >>> [p.z for p in sphere.find_intersections(ray)]
    [-2.0, -4.0]
"""

from __future__ import annotations

import math

from whitted.core.errors import ConfigurationError
from whitted.core.ray import Ray
from whitted.core.util import align_zero
from whitted.core.vector import Point, Vector
from whitted.geometry.geometry import Geometry
from whitted.geometry.intersectable import GeoPoint


class Sphere(Geometry):
    """A sphere defined by its radius and center point.

    Attributes:
        radius: The sphere radius (positive).
        center: The center point.
    """

    def __init__(self, radius: float, center: Point) -> None:
        super().__init__()
        if radius <= 0.0:
            raise ConfigurationError(f"Sphere radius must be positive, got {radius}")
        self.radius = float(radius)
        self.center = center

    def get_normal(self, point: Point) -> Vector:
        return (point - self.center).normalize()

    def _find_geo_intersections_helper(self, ray: Ray) -> list[GeoPoint]:
        head = ray.head
        if head.coincides(self.center):
            return [GeoPoint(self, ray.get_point(self.radius))]

        u = self.center - head
        tm = align_zero(ray.direction.dot(u))
        d_squared = max(u.length_squared() - tm * tm, 0.0)
        if align_zero(math.sqrt(d_squared) - self.radius) >= 0.0:
            return []

        th = math.sqrt(self.radius * self.radius - d_squared)
        hits = []
        for t in (align_zero(tm - th), align_zero(tm + th)):
            if t > 0.0:
                hits.append(GeoPoint(self, ray.get_point(t)))
        return hits

    def __repr__(self) -> str:
        return f"Sphere(radius={self.radius}, center={self.center!r})"
