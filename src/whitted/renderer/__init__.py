"""Shading engine and camera.

Components:
    config: TracerConfig recursion and sampling settings
    ray_tracer: RayTracerBase and the recursive SimpleRayTracer
    beam: Ray bundle sampling for blurred reflection and refraction
    camera: Camera, its builder and the per-pixel render loop
"""

from .beam import generate_beam
from .camera import Camera
from .config import MAX_CALC_COLOR_LEVEL, MIN_CALC_COLOR_K, TracerConfig
from .ray_tracer import RayTracerBase, SimpleRayTracer

__all__ = [
    "Camera",
    "MAX_CALC_COLOR_LEVEL",
    "MIN_CALC_COLOR_K",
    "RayTracerBase",
    "SimpleRayTracer",
    "TracerConfig",
    "generate_beam",
]
