"""Light sources.

Components:
    light_source: The LightSource interface
    ambient: Uniform ambient light
    directional: Light from an infinitely distant source
    point: Point light with distance attenuation
    spot: Point light narrowed around a direction
"""

from .ambient import AmbientLight
from .directional import DirectionalLight
from .light_source import LightSource
from .point import PointLight
from .spot import SpotLight

__all__ = [
    "AmbientLight",
    "DirectionalLight",
    "LightSource",
    "PointLight",
    "SpotLight",
]
