"""Immutable real triples used as per-channel coefficients."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import ClassVar, Union

Coefficient = Union[float, "Double3", Sequence[float]]


@dataclass(frozen=True)
class Double3:
    """A triple of reals combined component-wise.

    Material coefficients (diffuse, specular, transparency, reflectivity)
    and the running attenuation of the shading engine are Double3 values,
    one component per color channel.

    Attributes:
        d1: First component (red channel for coefficients).
        d2: Second component (green channel).
        d3: Third component (blue channel).
    """

    d1: float
    d2: float
    d3: float

    ZERO: ClassVar[Double3]
    ONE: ClassVar[Double3]

    @classmethod
    def of(cls, value: Coefficient) -> Double3:
        """Coerce a scalar, a sequence of three numbers or a Double3.

        A scalar is broadcast to all three components.

        Raises:
            ValueError: If a sequence does not have exactly three items.
        """
        if isinstance(value, Double3):
            return value
        if isinstance(value, (int, float)):
            return cls(float(value), float(value), float(value))
        items = tuple(float(v) for v in value)
        if len(items) != 3:
            raise ValueError(f"Expected 3 components, got {len(items)}")
        return cls(*items)

    def __iter__(self) -> Iterator[float]:
        return iter((self.d1, self.d2, self.d3))

    def __add__(self, other: Double3) -> Double3:
        return Double3(self.d1 + other.d1, self.d2 + other.d2, self.d3 + other.d3)

    def __sub__(self, other: Double3) -> Double3:
        return Double3(self.d1 - other.d1, self.d2 - other.d2, self.d3 - other.d3)

    def __mul__(self, other: float | Double3) -> Double3:
        if isinstance(other, Double3):
            return self.product(other)
        return self.scale(other)

    __rmul__ = __mul__

    def scale(self, factor: float) -> Double3:
        """Multiply every component by a scalar."""
        return Double3(self.d1 * factor, self.d2 * factor, self.d3 * factor)

    def product(self, other: Double3) -> Double3:
        """Multiply component-wise."""
        return Double3(self.d1 * other.d1, self.d2 * other.d2, self.d3 * other.d3)

    def lower_than(self, k: float) -> bool:
        """Check whether all three components are strictly below ``k``."""
        return self.d1 < k and self.d2 < k and self.d3 < k

    def is_zero(self) -> bool:
        """Check whether all three components are exactly zero."""
        return self.d1 == 0.0 and self.d2 == 0.0 and self.d3 == 0.0


Double3.ZERO = Double3(0.0, 0.0, 0.0)
Double3.ONE = Double3(1.0, 1.0, 1.0)
