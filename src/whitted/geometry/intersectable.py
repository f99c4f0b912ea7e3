"""Ray intersection interface shared by every shape and shape collection.

Intersection queries never raise for a miss: an empty list is the "no
intersection" result. Subclasses implement
:meth:`Intersectable._find_geo_intersections_helper`; the public
:meth:`Intersectable.find_geo_intersections` adds the distance filter used
by shadow rays.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from whitted.core.ray import Ray
    from whitted.core.vector import Point
    from whitted.geometry.geometry import Geometry


@dataclass(frozen=True)
class GeoPoint:
    """A hit record: the shape that was hit and where.

    Attributes:
        geometry: The shape the ray intersected.
        point: The intersection point.
    """

    geometry: Geometry
    point: Point


class Intersectable(ABC):
    """Anything a ray can be intersected with."""

    def find_geo_intersections(self, ray: Ray, max_distance: float = math.inf) -> list[GeoPoint]:
        """Find the hits of a ray closer to its head than ``max_distance``.

        Args:
            ray: The ray to intersect.
            max_distance: Exclusive upper bound on the distance between the
                ray head and a returned hit.

        Returns:
            Hits in the order the shape produces them; empty when none.
        """
        hits = self._find_geo_intersections_helper(ray)
        if not hits or math.isinf(max_distance):
            return hits
        head = ray.head
        return [gp for gp in hits if head.distance(gp.point) < max_distance]

    def find_intersections(self, ray: Ray) -> list[Point]:
        """Find the intersection points of a ray, without shape references."""
        return [gp.point for gp in self.find_geo_intersections(ray)]

    @abstractmethod
    def _find_geo_intersections_helper(self, ray: Ray) -> list[GeoPoint]:
        """Return every hit strictly in front of the ray head."""
