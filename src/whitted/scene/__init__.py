"""Scene container and configuration loading.

Components:
    scene: The Scene dataclass read by the ray tracer
    loader: Builds scenes, tracer settings and camera builders from dictionaries
"""

from .loader import (
    camera_builder_from_config,
    geometry_from_config,
    light_from_config,
    load_scene,
    material_from_config,
    read_config,
    scene_from_config,
    tracer_config_from_config,
)
from .scene import Scene

__all__ = [
    "Scene",
    "camera_builder_from_config",
    "geometry_from_config",
    "light_from_config",
    "load_scene",
    "material_from_config",
    "read_config",
    "scene_from_config",
    "tracer_config_from_config",
]
