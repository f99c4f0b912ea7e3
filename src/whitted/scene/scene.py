"""Scene container handed to the ray tracer."""

from __future__ import annotations

from dataclasses import dataclass, field

from whitted.core.color import Color
from whitted.geometry.geometries import Geometries
from whitted.lighting.ambient import AmbientLight
from whitted.lighting.light_source import LightSource


@dataclass
class Scene:
    """Everything a render needs apart from the camera.

    A scene is assembled once and then treated as read-only while rays
    are traced through it.

    Attributes:
        name: Scene name, also used as the default image name.
        background: Color returned for rays that hit nothing.
        ambient_light: Light added once to every visible point.
        geometries: All shapes in the scene.
        lights: Non-ambient lights, in evaluation order.
    """

    name: str
    background: Color = Color.BLACK
    ambient_light: AmbientLight = AmbientLight.NONE
    geometries: Geometries = field(default_factory=Geometries)
    lights: list[LightSource] = field(default_factory=list)

    def set_background(self, background: Color) -> Scene:
        self.background = background
        return self

    def set_ambient_light(self, ambient_light: AmbientLight) -> Scene:
        self.ambient_light = ambient_light
        return self

    def set_geometries(self, geometries: Geometries) -> Scene:
        self.geometries = geometries
        return self

    def set_lights(self, lights: list[LightSource]) -> Scene:
        self.lights = list(lights)
        return self
