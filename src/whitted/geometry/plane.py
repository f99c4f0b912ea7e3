"""Infinite plane primitive."""

from __future__ import annotations

from whitted.core.ray import Ray
from whitted.core.util import align_zero
from whitted.core.vector import Point, Vector
from whitted.geometry.geometry import Geometry
from whitted.geometry.intersectable import GeoPoint


class Plane(Geometry):
    """A plane given by a reference point and a normal.

    Attributes:
        q: A reference point on the plane.
        normal: The unit normal (normalized on construction).
    """

    def __init__(self, q: Point, normal: Vector) -> None:
        super().__init__()
        self.q = q
        self.normal = normal.normalize()

    @classmethod
    def from_points(cls, p1: Point, p2: Point, p3: Point) -> Plane:
        """Build the plane through three points.

        The normal is ``(p2 - p1) x (p3 - p1)``, normalized.

        Raises:
            ZeroVectorError: If two points coincide or all three are collinear.
        """
        return cls(p1, (p2 - p1).cross(p3 - p1))

    def get_normal(self, point: Point | None = None) -> Vector:
        return self.normal

    def intersect_point(self, ray: Ray) -> Point | None:
        """Return the single point where a ray crosses the plane, if any.

        A ray parallel to the plane, or starting at its reference point or
        anywhere on it, does not cross it.
        """
        if self.q.coincides(ray.head):
            return None
        nv = align_zero(self.normal.dot(ray.direction))
        if nv == 0.0:
            return None
        t = align_zero(self.normal.dot(self.q - ray.head) / nv)
        if t <= 0.0:
            return None
        return ray.get_point(t)

    def _find_geo_intersections_helper(self, ray: Ray) -> list[GeoPoint]:
        point = self.intersect_point(ray)
        return [] if point is None else [GeoPoint(self, point)]

    def __repr__(self) -> str:
        return f"Plane(q={self.q!r}, normal={self.normal!r})"
