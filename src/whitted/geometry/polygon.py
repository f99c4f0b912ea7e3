"""Convex polygon primitive.

:func:`plane_of_vertices` validates a vertex list and derives its plane;
both :class:`Polygon` and :class:`~whitted.geometry.triangle.Triangle` hold
such a plane rather than inheriting from each other.
"""

from __future__ import annotations

from collections.abc import Sequence

from whitted.core.errors import ConfigurationError
from whitted.core.ray import Ray
from whitted.core.util import align_zero, is_zero
from whitted.core.vector import Point, Vector
from whitted.geometry.geometry import Geometry
from whitted.geometry.intersectable import GeoPoint
from whitted.geometry.plane import Plane


def plane_of_vertices(vertices: Sequence[Point]) -> Plane:
    """Validate an ordered vertex list and return the plane it lies in.

    Args:
        vertices: At least three points, in edge order.

    Returns:
        The plane through the first three vertices.

    Raises:
        ConfigurationError: If there are fewer than three vertices, they are
            not coplanar, or the polygon is not convex and consistently
            ordered. Coincident or collinear consecutive vertices raise a
            :class:`~whitted.core.errors.ZeroVectorError`.
    """
    size = len(vertices)
    if size < 3:
        raise ConfigurationError("A polygon can't have less than 3 vertices")

    plane = Plane.from_points(vertices[0], vertices[1], vertices[2])
    if size == 3:
        return plane

    n = plane.normal
    edge1 = vertices[size - 1] - vertices[size - 2]
    edge2 = vertices[0] - vertices[size - 1]
    positive = edge1.cross(edge2).dot(n) > 0
    for i in range(1, size):
        if not is_zero((vertices[i] - vertices[0]).dot(n)):
            raise ConfigurationError("All vertices of a polygon must lay in the same plane")
        edge1 = edge2
        edge2 = vertices[i] - vertices[i - 1]
        if positive != (edge1.cross(edge2).dot(n) > 0):
            raise ConfigurationError("All vertices must be ordered and the polygon must be convex")
    return plane


class Polygon(Geometry):
    """A convex planar polygon.

    Attributes:
        vertices: The ordered vertices.
        plane: The plane the polygon lies in.
    """

    def __init__(self, *vertices: Point) -> None:
        super().__init__()
        self.plane = plane_of_vertices(vertices)
        self.vertices: tuple[Point, ...] = tuple(vertices)

    def get_normal(self, point: Point | None = None) -> Vector:
        return self.plane.normal

    def _find_geo_intersections_helper(self, ray: Ray) -> list[GeoPoint]:
        point = self.plane.intersect_point(ray)
        if point is None:
            return []

        n = self.plane.normal
        size = len(self.vertices)
        sign = 0.0
        for i in range(size):
            p1 = self.vertices[i]
            p2 = self.vertices[(i + 1) % size]
            if point.coincides(p1):
                return []
            # Edge direction x plane normal is the outward (or inward) edge normal
            side = align_zero((point - p1).dot((p2 - p1).cross(n)))
            if side == 0.0 or side * sign < 0.0:
                return []
            sign = side
        return [GeoPoint(self, point)]

    def __repr__(self) -> str:
        return f"Polygon({', '.join(repr(v) for v in self.vertices)})"
