"""Immutable 3D points and non-zero direction vectors.

A :class:`Point` is a location; a :class:`Vector` is a point additionally
constrained to be non-zero and is used for directions and displacements.
Subtracting two points yields a vector, adding a vector to a point yields a
point. Every operation returns a new value.

Example:
    >>> p = Point(1.0, 2.0, 3.0)
    >>> v = Vector(0.0, 0.0, 2.0).normalize()
    >>> p + v
    Point(x=1.0, y=2.0, z=4.0)
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar

from whitted.core.errors import ZeroVectorError
from whitted.core.util import is_zero


@dataclass(frozen=True)
class Point:
    """A point in 3D Cartesian space.

    Attributes:
        x: The x coordinate.
        y: The y coordinate.
        z: The z coordinate.
    """

    x: float
    y: float
    z: float

    ZERO: ClassVar[Point]

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __add__(self, vector: Vector) -> Point:
        return Point(self.x + vector.x, self.y + vector.y, self.z + vector.z)

    def __sub__(self, other: Point) -> Vector:
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def translate(self, vector: Vector, scale: float = 1.0) -> Point:
        """Move the point by ``scale * vector``.

        Unlike ``self + vector.scale(scale)`` this never builds the scaled
        vector, so a zero ``scale`` simply returns an equal point.
        """
        return Point(
            self.x + vector.x * scale,
            self.y + vector.y * scale,
            self.z + vector.z * scale,
        )

    def distance_squared(self, other: Point) -> float:
        """Squared Euclidean distance to another point."""
        dx = other.x - self.x
        dy = other.y - self.y
        dz = other.z - self.z
        return dx * dx + dy * dy + dz * dz

    def distance(self, other: Point) -> float:
        """Euclidean distance to another point."""
        return math.sqrt(self.distance_squared(other))

    def coincides(self, other: Point) -> bool:
        """Check whether two points are the same within tolerance."""
        return is_zero(self.distance_squared(other))


Point.ZERO = Point(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Vector(Point):
    """A non-zero direction or displacement in 3D space.

    Raises:
        ZeroVectorError: On construction when all three components are zero
            within tolerance.
    """

    def __post_init__(self) -> None:
        if is_zero(self.x) and is_zero(self.y) and is_zero(self.z):
            raise ZeroVectorError("Can not create zero vector")

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __mul__(self, factor: float) -> Vector:
        return self.scale(factor)

    __rmul__ = __mul__

    def scale(self, factor: float) -> Vector:
        """Multiply the vector by a scalar.

        Raises:
            ZeroVectorError: If ``factor`` is zero.
        """
        return Vector(self.x * factor, self.y * factor, self.z * factor)

    def dot(self, other: Point) -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        """Cross product with another vector.

        Raises:
            ZeroVectorError: If the vectors are parallel.
        """
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> Vector:
        """Return the unit vector with the same direction."""
        length = self.length()
        return Vector(self.x / length, self.y / length, self.z / length)

    def create_normal(self) -> Vector:
        """Return some unit vector orthogonal to this one."""
        if is_zero(self.x) and is_zero(self.y):
            return Vector(0.0, -self.z, self.y).normalize()
        return Vector(-self.y, self.x, 0.0).normalize()
