"""Ray with a head point and a unit direction.

A ray is built either directly from a head and a direction, or biased off
a surface: :meth:`Ray.biased` nudges the head a small distance along the
surface normal (toward the side the ray leaves through) so that a
secondary ray does not immediately re-intersect the surface it was spawned
from.

Example:
    >>> ray = Ray(Point(0.0, 0.0, 0.0), Vector(0.0, 0.0, -2.0))
    >>> ray.get_point(5.0)
    Point(x=0.0, y=0.0, z=-5.0)
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from whitted.core.util import is_zero
from whitted.core.vector import Point, Vector

if TYPE_CHECKING:
    from whitted.geometry.intersectable import GeoPoint

# Default head offset for rays spawned from a surface, in scene units
DEFAULT_DELTA = 0.1


class Ray:
    """A half-line starting at ``head`` going along a unit ``direction``.

    Attributes:
        head: The starting point of the ray.
        direction: The unit direction of the ray (normalized on construction).
    """

    __slots__ = ("_head", "_direction")

    def __init__(self, head: Point, direction: Vector) -> None:
        self._head = head
        self._direction = direction.normalize()

    @classmethod
    def biased(
        cls,
        head: Point,
        direction: Vector,
        normal: Vector,
        delta: float = DEFAULT_DELTA,
    ) -> Ray:
        """Build a ray whose head is offset along a surface normal.

        The head moves by ``delta`` along ``normal`` when the direction points
        to the same side as the normal, against it when it points to the
        opposite side, and stays in place when the two are orthogonal.

        Args:
            head: The point on the surface the ray leaves from.
            direction: The direction of the new ray.
            normal: The surface normal at ``head``.
            delta: The offset distance.

        Returns:
            A new ray with a biased head.
        """
        nd = normal.dot(direction)
        if is_zero(nd):
            return cls(head, direction)
        return cls(head.translate(normal, delta if nd > 0 else -delta), direction)

    @property
    def head(self) -> Point:
        return self._head

    @property
    def direction(self) -> Vector:
        return self._direction

    def get_point(self, t: float) -> Point:
        """Return the point at parametric distance ``t`` along the ray."""
        if is_zero(t):
            return self._head
        return self._head.translate(self._direction, t)

    def find_closest_point(self, points: Iterable[Point]) -> Point | None:
        """Return the point nearest to the head, or None for no points."""
        closest = None
        closest_distance = float("inf")
        for point in points:
            distance = self._head.distance_squared(point)
            if distance < closest_distance:
                closest_distance = distance
                closest = point
        return closest

    def find_closest_geo_point(self, geo_points: Iterable[GeoPoint]) -> GeoPoint | None:
        """Return the hit nearest to the head, or None for no hits."""
        closest = None
        closest_distance = float("inf")
        for geo_point in geo_points:
            distance = self._head.distance_squared(geo_point.point)
            if distance < closest_distance:
                closest_distance = distance
                closest = geo_point
        return closest

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ray):
            return NotImplemented
        return self._head == other._head and self._direction == other._direction

    def __hash__(self) -> int:
        return hash((self._head, self._direction))

    def __repr__(self) -> str:
        return f"Ray(head={self._head!r}, direction={self._direction!r})"
