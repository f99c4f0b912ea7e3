"""Infinite tube and finite cylinder primitives.

A tube is the set of points at distance ``radius`` from an axis line. Ray
intersection works on the components of the ray direction and of the
head offset that are orthogonal to the axis, which turns the problem into
a 2D circle quadratic ``a t^2 + b t + c = 0``.

Orthogonal components are kept as plain float triples: they are zero
whenever the ray runs along the axis, and a :class:`Vector` can never be.
"""

from __future__ import annotations

import math

from whitted.core.errors import ConfigurationError
from whitted.core.ray import Ray
from whitted.core.util import align_zero, is_zero
from whitted.core.vector import Point, Vector
from whitted.geometry.geometry import Geometry
from whitted.geometry.intersectable import GeoPoint
from whitted.geometry.plane import Plane


def _orthogonal_part(x: float, y: float, z: float, axis: Vector) -> tuple[float, float, float]:
    """Remove from ``(x, y, z)`` its component along the unit ``axis``."""
    k = align_zero(x * axis.x + y * axis.y + z * axis.z)
    return x - k * axis.x, y - k * axis.y, z - k * axis.z


def _dot(a: tuple[float, float, float], b: tuple[float, float, float]) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


class Tube(Geometry):
    """An infinite circular tube around an axis ray.

    Attributes:
        radius: The tube radius (positive).
        axis: The axis; its head is the origin of the axial coordinate.
    """

    def __init__(self, radius: float, axis: Ray) -> None:
        super().__init__()
        if radius <= 0.0:
            raise ConfigurationError(f"Tube radius must be positive, got {radius}")
        self.radius = float(radius)
        self.axis = axis

    def axial_distance(self, point: Point) -> float:
        """Signed distance of a point's projection along the axis from its head."""
        if point.coincides(self.axis.head):
            return 0.0
        return align_zero((point - self.axis.head).dot(self.axis.direction))

    def get_normal(self, point: Point) -> Vector:
        t = self.axial_distance(point)
        head = self.axis.head
        if t == 0.0:
            return (point - head).normalize()
        o = self.axis.get_point(t)
        # A point on the axis has no radial direction
        if point.coincides(o):
            return (point - head).normalize()
        return (point - o).normalize()

    def _find_geo_intersections_helper(self, ray: Ray) -> list[GeoPoint]:
        va = self.axis.direction
        v = ray.direction
        v_orth = _orthogonal_part(v.x, v.y, v.z, va)
        a = _dot(v_orth, v_orth)
        if is_zero(a):
            return []

        dp = ray.head - self.axis.head if not ray.head.coincides(self.axis.head) else Point.ZERO
        dp_orth = _orthogonal_part(dp.x, dp.y, dp.z, va)
        b = 2.0 * _dot(v_orth, dp_orth)
        c = _dot(dp_orth, dp_orth) - self.radius * self.radius

        discriminant = align_zero(b * b - 4.0 * a * c)
        if discriminant <= 0.0:
            return []

        root = math.sqrt(discriminant)
        hits = []
        for t in (align_zero((-b - root) / (2.0 * a)), align_zero((-b + root) / (2.0 * a))):
            if t > 0.0:
                hits.append(GeoPoint(self, ray.get_point(t)))
        return hits

    def __repr__(self) -> str:
        return f"Tube(radius={self.radius}, axis={self.axis!r})"


class Cylinder(Geometry):
    """A tube section of finite height closed by two cap discs.

    The near cap lies at the axis head and the far cap at ``height`` along
    the axis direction. The lateral surface is delegated to a :class:`Tube`.

    Attributes:
        radius: The cylinder radius.
        axis: The axis ray.
        height: Distance between the caps (positive).
    """

    def __init__(self, radius: float, axis: Ray, height: float) -> None:
        super().__init__()
        if height <= 0.0:
            raise ConfigurationError(f"Cylinder height must be positive, got {height}")
        self.tube = Tube(radius, axis)
        self.height = float(height)
        self._caps = (
            Plane(axis.head, axis.direction),
            Plane(axis.get_point(self.height), axis.direction),
        )

    @property
    def radius(self) -> float:
        return self.tube.radius

    @property
    def axis(self) -> Ray:
        return self.tube.axis

    def get_normal(self, point: Point) -> Vector:
        t = self.tube.axial_distance(point)
        if align_zero(t) <= 0.0:
            return -self.axis.direction
        if align_zero(t - self.height) >= 0.0:
            return self.axis.direction
        return self.tube.get_normal(point)

    def _find_geo_intersections_helper(self, ray: Ray) -> list[GeoPoint]:
        hits = []
        for gp in self.tube.find_geo_intersections(ray):
            t = self.tube.axial_distance(gp.point)
            if 0.0 < t and align_zero(t - self.height) < 0.0:
                hits.append(GeoPoint(self, gp.point))

        radius_squared = self.radius * self.radius
        for cap in self._caps:
            point = cap.intersect_point(ray)
            if point is not None and align_zero(point.distance_squared(cap.q) - radius_squared) < 0.0:
                hits.append(GeoPoint(self, point))

        head = ray.head
        hits.sort(key=lambda gp: head.distance_squared(gp.point))
        return hits

    def __repr__(self) -> str:
        return f"Cylinder(radius={self.radius}, axis={self.axis!r}, height={self.height})"
