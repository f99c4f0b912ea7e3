"""Triangle primitive."""

from __future__ import annotations

from whitted.core.ray import Ray
from whitted.core.util import align_zero
from whitted.core.vector import Point, Vector
from whitted.geometry.geometry import Geometry
from whitted.geometry.intersectable import GeoPoint
from whitted.geometry.polygon import plane_of_vertices


class Triangle(Geometry):
    """A triangle given by three vertices.

    The hit test first crosses the triangle's plane, then checks that the
    ray passes on the same side of all three faces of the tetrahedron the
    ray head forms with the vertices.

    Attributes:
        vertices: The three vertices.
        plane: The plane the triangle lies in.
    """

    def __init__(self, p1: Point, p2: Point, p3: Point) -> None:
        super().__init__()
        self.vertices: tuple[Point, Point, Point] = (p1, p2, p3)
        self.plane = plane_of_vertices(self.vertices)

    def get_normal(self, point: Point | None = None) -> Vector:
        return self.plane.normal

    def _find_geo_intersections_helper(self, ray: Ray) -> list[GeoPoint]:
        point = self.plane.intersect_point(ray)
        if point is None:
            return []

        # The head is off the plane here, so no edge vector below is zero
        head = ray.head
        v = ray.direction
        edges = [vertex - head for vertex in self.vertices]
        signs = [
            align_zero(v.dot(edges[i].cross(edges[(i + 1) % 3]).normalize()))
            for i in range(3)
        ]
        if all(s > 0.0 for s in signs) or all(s < 0.0 for s in signs):
            return [GeoPoint(self, point)]
        return []

    def __repr__(self) -> str:
        return f"Triangle({', '.join(repr(v) for v in self.vertices)})"
