"""Unit tests for points, vectors and the tolerance helpers.

Tests cover:
- Near-zero alignment
- Point arithmetic and distances
- Vector construction, zero-vector rejection and products
- Normalization and orthogonal normal creation
"""

import pytest


class TestTolerance:
    """Tests for is_zero and align_zero."""

    def test_align_zero_rounds_noise(self):
        """Values below the threshold become exactly zero."""
        from whitted.core import align_zero

        assert align_zero(1e-12) == 0.0
        assert align_zero(-1e-12) == 0.0
        assert align_zero(0.5) == 0.5
        assert align_zero(-0.5) == -0.5

    def test_is_zero(self):
        """is_zero uses the shared threshold."""
        from whitted.core import ZERO_THRESHOLD, is_zero

        assert is_zero(ZERO_THRESHOLD / 2)
        assert not is_zero(ZERO_THRESHOLD * 2)


class TestPoint:
    """Tests for Point operations."""

    def test_add_vector(self):
        """Adding a vector moves the point."""
        from whitted.core import Point, Vector

        p = Point(1.0, 2.0, 3.0) + Vector(-1.0, -2.0, -3.0)
        assert p == Point(0.0, 0.0, 0.0)
        assert type(p) is Point

    def test_subtract_points_gives_vector(self):
        """Subtracting points yields the vector between them."""
        from whitted.core import Point, Vector

        v = Point(2.0, 3.0, 4.0) - Point(1.0, 2.0, 3.0)
        assert v == Vector(1.0, 1.0, 1.0)

    def test_subtract_same_point_raises(self):
        """A point minus itself would be a zero vector."""
        from whitted.core import Point, ZeroVectorError

        with pytest.raises(ZeroVectorError):
            Point(1.0, 2.0, 3.0) - Point(1.0, 2.0, 3.0)

    def test_distances(self):
        """Distance and squared distance agree."""
        from whitted.core import Point

        p1 = Point(1.0, 2.0, 3.0)
        p2 = Point(1.0, 5.0, 7.0)
        assert p1.distance_squared(p2) == pytest.approx(25.0)
        assert p1.distance(p2) == pytest.approx(5.0)

    def test_translate_with_zero_scale(self):
        """Translating by a zero multiple leaves the point in place."""
        from whitted.core import Point, Vector

        p = Point(1.0, 2.0, 3.0)
        assert p.translate(Vector(1.0, 0.0, 0.0), 0.0) == p


class TestVector:
    """Tests for Vector operations."""

    def test_zero_vector_rejected(self):
        """Constructing the zero vector fails."""
        from whitted.core import ConfigurationError, Vector, ZeroVectorError

        with pytest.raises(ZeroVectorError):
            Vector(0.0, 0.0, 0.0)
        # ZeroVectorError is a configuration error
        with pytest.raises(ConfigurationError):
            Vector(1e-12, 0.0, -1e-12)

    def test_add_and_negate(self):
        """Vector addition and negation."""
        from whitted.core import Vector

        v = Vector(1.0, 2.0, 3.0)
        assert v + Vector(-2.0, -4.0, -6.0) == -v
        with pytest.raises(ValueError):
            v + (-v)

    def test_scale(self):
        """Scaling multiplies every component."""
        from whitted.core import Vector, ZeroVectorError

        v = Vector(1.0, 2.0, 3.0)
        assert v.scale(2.0) == Vector(2.0, 4.0, 6.0)
        assert 2.0 * v == v * 2.0
        with pytest.raises(ZeroVectorError):
            v.scale(0.0)

    def test_dot_product(self):
        """Dot products of orthogonal and parallel vectors."""
        from whitted.core import Vector

        v1 = Vector(1.0, 2.0, 3.0)
        assert v1.dot(Vector(0.0, 3.0, -2.0)) == pytest.approx(0.0)
        assert v1.dot(Vector(-2.0, -4.0, -6.0)) == pytest.approx(-28.0)

    def test_cross_product(self):
        """Cross product is orthogonal to both operands with the expected length."""
        from whitted.core import Vector

        v1 = Vector(1.0, 2.0, 3.0)
        v3 = Vector(0.0, 3.0, -2.0)
        vr = v1.cross(v3)
        assert vr.length() == pytest.approx(v1.length() * v3.length())
        assert vr.dot(v1) == pytest.approx(0.0)
        assert vr.dot(v3) == pytest.approx(0.0)

    def test_cross_product_of_parallel_vectors_raises(self):
        """Parallel vectors have a zero cross product."""
        from whitted.core import Vector, ZeroVectorError

        v1 = Vector(1.0, 2.0, 3.0)
        with pytest.raises(ZeroVectorError):
            v1.cross(Vector(-2.0, -4.0, -6.0))

    def test_lengths(self):
        """Length and squared length."""
        from whitted.core import Vector

        v = Vector(1.0, 2.0, 2.0)
        assert v.length_squared() == pytest.approx(9.0)
        assert v.length() == pytest.approx(3.0)

    def test_normalize(self):
        """Normalization keeps the direction and gives unit length."""
        from whitted.core import Vector

        v = Vector(0.0, 3.0, 4.0)
        u = v.normalize()
        assert u.length() == pytest.approx(1.0)
        assert tuple(u) == pytest.approx((0.0, 0.6, 0.8))
        assert v.dot(u) > 0

    @pytest.mark.parametrize(
        "components",
        [(1.0, 2.0, 3.0), (0.0, 0.0, 5.0), (0.0, -2.0, 0.0), (1e-12, 0.0, -3.0)],
    )
    def test_create_normal(self, components):
        """create_normal returns a unit vector orthogonal to the input."""
        from whitted.core import Vector

        v = Vector(*components)
        n = v.create_normal()
        assert n.length() == pytest.approx(1.0)
        assert abs(n.dot(v)) < 1e-9


class TestDouble3:
    """Tests for coefficient triples."""

    def test_of_broadcasts_scalars(self):
        """A scalar is copied to all three components."""
        from whitted.core import Double3

        assert Double3.of(0.5) == Double3(0.5, 0.5, 0.5)
        assert Double3.of([0.1, 0.2, 0.3]) == Double3(0.1, 0.2, 0.3)
        with pytest.raises(ValueError):
            Double3.of([1.0, 2.0])

    def test_arithmetic(self):
        """Component-wise product and scalar scaling."""
        from whitted.core import Double3

        a = Double3(1.0, 2.0, 3.0)
        b = Double3(2.0, 0.5, 0.0)
        assert a * b == Double3(2.0, 1.0, 0.0)
        assert a * 2.0 == Double3(2.0, 4.0, 6.0)
        assert a + b == Double3(3.0, 2.5, 3.0)
        assert a - b == Double3(-1.0, 1.5, 3.0)

    def test_lower_than(self):
        """lower_than requires every component to be below the bound."""
        from whitted.core import Double3

        assert Double3(0.0001, 0.0, 0.0005).lower_than(0.001)
        assert not Double3(0.0001, 0.01, 0.0).lower_than(0.001)
        assert Double3.ZERO.lower_than(1e-12)
