"""Composite collection of intersectables."""

from __future__ import annotations

from collections.abc import Iterator

from whitted.core.ray import Ray
from whitted.geometry.intersectable import GeoPoint, Intersectable


class Geometries(Intersectable):
    """An ordered, growable group of shapes queried as one.

    Members may be single shapes or other :class:`Geometries`. A query
    concatenates every member's hits without sorting or de-duplication;
    picking the closest hit is the caller's job.
    """

    def __init__(self, *members: Intersectable) -> None:
        self._members: list[Intersectable] = list(members)

    def add(self, *members: Intersectable) -> Geometries:
        """Append members and return the collection for chaining."""
        self._members.extend(members)
        return self

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Intersectable]:
        return iter(self._members)

    def find_geo_intersections(self, ray: Ray, max_distance: float = float("inf")) -> list[GeoPoint]:
        hits: list[GeoPoint] = []
        for member in self._members:
            hits.extend(member.find_geo_intersections(ray, max_distance))
        return hits

    def _find_geo_intersections_helper(self, ray: Ray) -> list[GeoPoint]:
        hits: list[GeoPoint] = []
        for member in self._members:
            hits.extend(member._find_geo_intersections_helper(ray))
        return hits

    def __repr__(self) -> str:
        return f"Geometries({len(self._members)} members)"
