"""Unit tests for tubes and cylinders.

Tests cover:
- Radial normals, the on-axis case and cap normals
- Rays crossing, starting inside and starting on the surface
- Rays parallel to the axis and tangent rays
- Height clipping and cap discs of finite cylinders
"""

import pytest


def _points(points):
    return [tuple(p) for p in points]


class TestTubeNormal:
    """Tests for Tube.get_normal."""

    def test_radial_normal(self):
        """The normal points from the nearest axis point to the surface point."""
        from whitted.core import Point, Ray, Vector
        from whitted.geometry import Tube

        tube = Tube(2.0, Ray(Point(0, 0, 0), Vector(1, 0, 0)))
        assert tube.get_normal(Point(2, 2, 0)) == Vector(0, 1, 0)
        assert tube.get_normal(Point(0, 2, 0)) == Vector(0, 1, 0)

    def test_point_on_axis(self):
        """A point on the axis gets the unit vector from the axis head."""
        from whitted.core import Point, Ray, Vector
        from whitted.geometry import Tube

        tube = Tube(2.0, Ray(Point(0, 0, 0), Vector(1, 0, 0)))
        assert tube.get_normal(Point(3, 0, 0)) == Vector(1, 0, 0)


class TestTubeIntersections:
    """Tests for ray-tube intersection."""

    @pytest.fixture
    def tube(self):
        from whitted.core import Point, Ray, Vector
        from whitted.geometry import Tube

        return Tube(1.0, Ray(Point(0, 0, 1), Vector(0, 0, 1)))

    def test_ray_crosses_tube(self, tube):
        """A ray crossing the tube hits twice, nearest first."""
        from whitted.core import Point, Ray, Vector

        result = tube.find_intersections(Ray(Point(-2, 0, 2), Vector(1, 0, 0)))
        assert _points(result) == [pytest.approx((-1, 0, 2)), pytest.approx((1, 0, 2))]

    def test_ray_starts_inside(self, tube):
        """A ray from inside hits once."""
        from whitted.core import Point, Ray, Vector

        result = tube.find_intersections(Ray(Point(0.5, 0, 2), Vector(1, 0, 0)))
        assert _points(result) == [pytest.approx((1, 0, 2))]

    def test_ray_starts_on_surface_outward(self, tube):
        """A ray leaving from the surface has no hits."""
        from whitted.core import Point, Ray, Vector

        assert tube.find_intersections(Ray(Point(1, 0, 2), Vector(1, 0, 0))) == []

    def test_ray_starts_on_surface_inward(self, tube):
        """A ray entering from the surface hits the far side only."""
        from whitted.core import Point, Ray, Vector

        result = tube.find_intersections(Ray(Point(1, 0, 2), Vector(-1, 0, 0)))
        assert _points(result) == [pytest.approx((-1, 0, 2))]

    def test_ray_outside(self, tube):
        """A ray pointing away from the tube has no hits."""
        from whitted.core import Point, Ray, Vector

        assert tube.find_intersections(Ray(Point(-2, 0, 2), Vector(-1, 0, 0))) == []
        assert tube.find_intersections(Ray(Point(2, 0, 2), Vector(1, 1, 0))) == []

    @pytest.mark.parametrize("head", [(2, 0, 2), (0.5, 0, 2), (1, 0, 2), (0, 0, 1)])
    def test_ray_parallel_to_axis(self, tube, head):
        """Rays parallel to the axis have no hits."""
        from whitted.core import Point, Ray, Vector

        assert tube.find_intersections(Ray(Point(*head), Vector(0, 0, 1))) == []

    @pytest.mark.parametrize("head", [(-1, 1, 2), (0, 1, 2), (1, 1, 2)])
    def test_tangent_ray(self, tube, head):
        """Tangent rays have no hits."""
        from whitted.core import Point, Ray, Vector

        assert tube.find_intersections(Ray(Point(*head), Vector(2, 0, 0))) == []

    def test_oblique_ray(self, tube):
        """An oblique ray hits at points at distance radius from the axis."""
        import math

        from whitted.core import Point, Ray, Vector

        result = tube.find_intersections(Ray(Point(-3, 0.5, -4), Vector(1, 0, 1)))
        assert len(result) == 2
        for p in result:
            assert math.hypot(p.x, p.y) == pytest.approx(1.0)


class TestCylinder:
    """Tests for finite cylinders."""

    def test_normals(self):
        """Side points get radial normals, cap points get axis normals."""
        from whitted.core import Point, Ray, Vector
        from whitted.geometry import Cylinder

        cylinder = Cylinder(2.0, Ray(Point(0, 0, 0), Vector(1, 0, 0)), 10.0)
        assert cylinder.get_normal(Point(2, 2, 0)) == Vector(0, 1, 0)
        assert cylinder.get_normal(Point(10, 0, 0)) == Vector(1, 0, 0)
        assert cylinder.get_normal(Point(0, 1, 0)) == Vector(-1, 0, 0)
        assert cylinder.get_normal(Point(10, 2, 0)) == Vector(1, 0, 0)

    def test_invalid_height(self):
        """A cylinder needs a positive height."""
        from whitted.core import ConfigurationError, Point, Ray, Vector
        from whitted.geometry import Cylinder

        with pytest.raises(ConfigurationError):
            Cylinder(1.0, Ray(Point(0, 0, 0), Vector(0, 0, 1)), 0.0)

    @pytest.fixture
    def cylinder(self):
        from whitted.core import Point, Ray, Vector
        from whitted.geometry import Cylinder

        return Cylinder(1.0, Ray(Point(0, 0, 0), Vector(0, 0, 1)), 2.0)

    def test_ray_crosses_side(self, cylinder):
        """A ray crossing the side within the height hits twice."""
        from whitted.core import Point, Ray, Vector

        result = cylinder.find_geo_intersections(Ray(Point(-2, 0, 1), Vector(3, 0, 0)))
        assert _points(gp.point for gp in result) == [
            pytest.approx((-1, 0, 1)),
            pytest.approx((1, 0, 1)),
        ]
        assert all(gp.geometry is cylinder for gp in result)

    def test_ray_starts_inside(self, cylinder):
        """A ray from inside hits the side once."""
        from whitted.core import Point, Ray, Vector

        result = cylinder.find_intersections(Ray(Point(0.5, 0, 1), Vector(1, 0, 0)))
        assert _points(result) == [pytest.approx((1, 0, 1))]

    def test_ray_above_height(self, cylinder):
        """A ray crossing the infinite tube beyond the height misses."""
        from whitted.core import Point, Ray, Vector

        assert cylinder.find_intersections(Ray(Point(-2, 0, 3), Vector(1, 0, 0))) == []
        assert cylinder.find_intersections(Ray(Point(-2, 0, -1), Vector(1, 0, 0))) == []

    @pytest.mark.parametrize("head", [(-1, 1, 1), (0, 1, 1), (1, 1, 1)])
    def test_tangent_ray(self, cylinder, head):
        """Tangent rays have no hits."""
        from whitted.core import Point, Ray, Vector

        assert cylinder.find_intersections(Ray(Point(*head), Vector(2, 0, 0))) == []

    def test_ray_along_axis_hits_caps(self, cylinder):
        """A ray along the axis from below crosses both caps."""
        from whitted.core import Point, Ray, Vector

        result = cylinder.find_intersections(Ray(Point(0.5, 0, -1), Vector(0, 0, 1)))
        assert _points(result) == [pytest.approx((0.5, 0, 0)), pytest.approx((0.5, 0, 2))]

    def test_ray_inside_parallel_to_axis(self, cylinder):
        """A ray inside, parallel to the axis, leaves through the far cap."""
        from whitted.core import Point, Ray, Vector

        result = cylinder.find_intersections(Ray(Point(0.5, 0, 1), Vector(0, 0, 1)))
        assert _points(result) == [pytest.approx((0.5, 0, 2))]

    def test_ray_parallel_outside_or_on_surface(self, cylinder):
        """Parallel rays outside the caps or on their rim have no hits."""
        from whitted.core import Point, Ray, Vector

        assert cylinder.find_intersections(Ray(Point(2, 0, 1), Vector(0, 0, 1))) == []
        assert cylinder.find_intersections(Ray(Point(1, 0, 1), Vector(0, 0, 1))) == []

    def test_oblique_ray_side_and_cap(self, cylinder):
        """A ray entering through the side and leaving through a cap hits both."""
        from whitted.core import Point, Ray, Vector

        result = cylinder.find_intersections(Ray(Point(-2, 0, 0.5), Vector(1, 0, 1)))
        assert _points(result) == [pytest.approx((-1, 0, 1.5)), pytest.approx((-0.5, 0, 2))]

    def test_far_cap_normal_on_oblique_cylinder(self):
        """Far-cap hits on a tilted cylinder get the axis normal despite rounding."""
        from whitted.core import Point, Ray, Vector
        from whitted.geometry import Cylinder

        axis = Ray(Point(0.3, -0.7, 0.1), Vector(1, 2, 3))
        cylinder = Cylinder(1.0, axis, 2.7)
        direction = axis.direction
        u = direction.create_normal()
        v = direction.cross(u)
        far_center = axis.get_point(2.7)

        offsets = [-0.9, -0.55, -0.2, 0.15, 0.45, 0.8]
        for a in offsets:
            for b in offsets:
                if a * a + b * b >= 0.95:
                    continue
                on_cap = far_center.translate(u, a).translate(v, b)
                assert tuple(cylinder.get_normal(on_cap)) == pytest.approx(tuple(direction))

                # Ray from beyond the far cap, slightly tilted toward the base
                head = on_cap.translate(direction, 3.0).translate(u, 0.05)
                ray = Ray(head, on_cap - head)
                hit = ray.find_closest_geo_point(cylinder.find_geo_intersections(ray))
                assert hit is not None
                normal = cylinder.get_normal(hit.point)
                assert abs(normal.dot(direction)) == pytest.approx(1.0)
