"""Recursive Whitted-style ray tracer.

This package renders scenes made of analytic surfaces lit by ambient,
directional, point and spot lights, following light transport through
direct illumination, shadows, mirror reflection and transparency.

Subpackages:
    core: Tolerance helpers, points, vectors, rays, colors and errors
    geometry: Intersectable shapes and the geometry aggregator
    materials: Surface reflectance coefficients
    lighting: Light source models
    scene: Scene container and configuration loading
    renderer: Shading engine, beam sampling and camera
    preview: Pixel buffer and PNG export
"""

__version__ = "0.1.0"
