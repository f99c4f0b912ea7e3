"""Pytest configuration for ray tracer tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session before any
image writer allocates its pixel field.
"""

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls which can cause
    segmentation faults due to Taichi runtime conflicts.
    """
    ti.init(arch=ti.cpu, random_seed=42)
    yield


@pytest.fixture
def basic_scene():
    """An empty scene with a dark blue background and no ambient light."""
    from whitted.core import Color
    from whitted.scene import Scene

    return Scene("test").set_background(Color(0.0, 0.0, 50.0))


@pytest.fixture
def camera_builder():
    """A camera builder at the origin looking down -z with a 3x3 view plane."""
    from whitted.core import Point, Vector
    from whitted.preview import ImageWriter
    from whitted.renderer import Camera, SimpleRayTracer
    from whitted.scene import Scene

    return (
        Camera.builder()
        .set_location(Point(0.0, 0.0, 0.0))
        .set_direction(Vector(0.0, 0.0, -1.0), Vector(0.0, 1.0, 0.0))
        .set_vp_size(3.0, 3.0)
        .set_vp_distance(1.0)
        .set_image_writer(ImageWriter("test", 3, 3))
        .set_ray_tracer(SimpleRayTracer(Scene("test")))
    )
