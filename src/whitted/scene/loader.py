"""Build scenes, tracer settings and cameras from plain dictionaries.

Scene files are JSON documents of the following shape (every section but
``geometries`` is optional)::

    {
        "name": "spheres",
        "background": [0, 0, 0],
        "ambient": {"intensity": [255, 255, 255], "ka": 0.1},
        "geometries": [
            {"type": "sphere", "radius": 1, "center": [0, 0, -3],
             "emission": [0, 0, 100],
             "material": {"kd": 0.5, "ks": 0.5, "shininess": 30}}
        ],
        "lights": [
            {"type": "point", "intensity": [500, 300, 0],
             "position": [0, 5, 0], "kl": 0.0005, "kq": 0.0005}
        ],
        "camera": {"location": [0, 0, 5], "to": [0, 0, -1], "up": [0, 1, 0],
                   "vp_size": [3, 3], "vp_distance": 2},
        "tracer": {"max_level": 10, "min_k": 0.001}
    }

Vectors and colors are written as three-number lists. Unknown types and
malformed entries raise :class:`~whitted.core.errors.ConfigurationError`
naming the offending entry.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any

from whitted.core.color import Color
from whitted.core.errors import ConfigurationError
from whitted.core.ray import Ray
from whitted.core.vector import Point, Vector
from whitted.geometry.geometries import Geometries
from whitted.geometry.geometry import Geometry
from whitted.geometry.plane import Plane
from whitted.geometry.polygon import Polygon
from whitted.geometry.sphere import Sphere
from whitted.geometry.triangle import Triangle
from whitted.geometry.tube import Cylinder, Tube
from whitted.lighting.ambient import AmbientLight
from whitted.lighting.directional import DirectionalLight
from whitted.lighting.light_source import LightSource
from whitted.lighting.point import PointLight
from whitted.lighting.spot import SpotLight
from whitted.materials.material import Material
from whitted.scene.scene import Scene

if TYPE_CHECKING:
    from whitted.renderer.camera import Camera
    from whitted.renderer.config import TracerConfig

logger = logging.getLogger(__name__)

SceneConfig = dict[str, Any]


def _point(value: Any) -> Point:
    x, y, z = (float(c) for c in value)
    return Point(x, y, z)


def _vector(value: Any) -> Vector:
    x, y, z = (float(c) for c in value)
    return Vector(x, y, z)


def _axis(config: SceneConfig) -> Ray:
    axis = config["axis"]
    return Ray(_point(axis["head"]), _vector(axis["direction"]))


def _sphere(config: SceneConfig) -> Geometry:
    return Sphere(float(config.get("radius", 1.0)), _point(config["center"]))


def _plane(config: SceneConfig) -> Geometry:
    if "points" in config:
        return Plane.from_points(*(_point(p) for p in config["points"]))
    return Plane(_point(config["point"]), _vector(config["normal"]))


def _triangle(config: SceneConfig) -> Geometry:
    vertices = config["vertices"]
    if len(vertices) != 3:
        raise ConfigurationError(f"A triangle needs 3 vertices, got {len(vertices)}")
    return Triangle(*(_point(v) for v in vertices))


def _polygon(config: SceneConfig) -> Geometry:
    return Polygon(*(_point(v) for v in config["vertices"]))


def _tube(config: SceneConfig) -> Geometry:
    return Tube(float(config["radius"]), _axis(config))


def _cylinder(config: SceneConfig) -> Geometry:
    return Cylinder(float(config["radius"]), _axis(config), float(config["height"]))


_GEOMETRY_FACTORIES: dict[str, Callable[[SceneConfig], Geometry]] = {
    "sphere": _sphere,
    "plane": _plane,
    "triangle": _triangle,
    "polygon": _polygon,
    "tube": _tube,
    "cylinder": _cylinder,
}


def material_from_config(config: SceneConfig) -> Material:
    """Build a material; every coefficient defaults to zero."""
    return Material(
        kd=config.get("kd", 0.0),
        ks=config.get("ks", 0.0),
        kt=config.get("kt", 0.0),
        kr=config.get("kr", 0.0),
        shininess=config.get("shininess", 0),
    )


def geometry_from_config(config: SceneConfig) -> Geometry:
    """Build one shape, with its optional emission and material."""
    geo_type = str(config.get("type", "")).lower()
    factory = _GEOMETRY_FACTORIES.get(geo_type)
    if factory is None:
        raise ConfigurationError(f"Unknown geometry type: {geo_type!r}")
    geometry = factory(config)
    if "emission" in config:
        geometry.set_emission(Color.of(config["emission"]))
    if "material" in config:
        geometry.set_material(material_from_config(config["material"]))
    return geometry


def light_from_config(config: SceneConfig) -> LightSource:
    """Build one directional, point or spot light."""
    light_type = str(config.get("type", "")).lower()
    intensity = Color.of(config["intensity"])
    if light_type == "directional":
        return DirectionalLight(intensity, _vector(config["direction"]))
    attenuation = {
        "kc": float(config.get("kc", 1.0)),
        "kl": float(config.get("kl", 0.0)),
        "kq": float(config.get("kq", 0.0)),
    }
    if light_type == "point":
        return PointLight(intensity, _point(config["position"]), **attenuation)
    if light_type == "spot":
        return SpotLight(
            intensity,
            _point(config["position"]),
            _vector(config["direction"]),
            narrow_beam=float(config.get("narrow_beam", 1.0)),
            **attenuation,
        )
    raise ConfigurationError(f"Unknown light type: {light_type!r}")


def _build_entry(kind: str, index: int, config: Any, build: Callable[[SceneConfig], Any]) -> Any:
    """Run a builder, reporting any failure against the entry it came from."""
    label = f"{kind}[{index}]"
    if not isinstance(config, dict):
        raise ConfigurationError(f"{label}: expected an object, got {type(config).__name__}")
    try:
        return build(config)
    except ConfigurationError as exc:
        raise ConfigurationError(f"{label} ({config.get('type', '?')}): {exc}") from exc
    except (KeyError, TypeError, ValueError) as exc:
        raise ConfigurationError(
            f"{label} ({config.get('type', '?')}): malformed entry: {exc!r}"
        ) from exc


def scene_from_config(config: SceneConfig) -> Scene:
    """Build a :class:`Scene` from a configuration dictionary.

    Args:
        config: Scene dictionary (see the module docstring for the layout).

    Returns:
        The populated scene.

    Raises:
        ConfigurationError: If any section or entry is invalid.
    """
    scene = Scene(str(config.get("name", "scene")))
    try:
        if "background" in config:
            scene.set_background(Color.of(config["background"]))
        if "ambient" in config:
            ambient = config["ambient"]
            scene.set_ambient_light(
                AmbientLight(Color.of(ambient["intensity"]), ambient.get("ka", 1.0))
            )
    except (KeyError, TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid background or ambient light: {exc!r}") from exc

    geometries = Geometries()
    for i, geo_config in enumerate(config.get("geometries", [])):
        geometries.add(_build_entry("geometries", i, geo_config, geometry_from_config))
    scene.set_geometries(geometries)

    scene.set_lights(
        [
            _build_entry("lights", i, light_config, light_from_config)
            for i, light_config in enumerate(config.get("lights", []))
        ]
    )

    logger.info(
        "Loaded scene %r: %d geometries, %d lights",
        scene.name,
        len(scene.geometries),
        len(scene.lights),
    )
    return scene


def tracer_config_from_config(config: SceneConfig) -> TracerConfig:
    """Build a :class:`~whitted.renderer.config.TracerConfig` from the ``tracer`` section."""
    from whitted.renderer.config import TracerConfig

    try:
        return TracerConfig(**config)
    except TypeError as exc:
        raise ConfigurationError(f"Invalid tracer settings: {exc}") from exc


def camera_builder_from_config(config: SceneConfig) -> Camera.Builder:
    """Start a camera builder from the ``camera`` section.

    Location, direction, view-plane size and distance are set from the
    dictionary; the image writer and ray tracer are left to the caller.

    Raises:
        ConfigurationError: If a required camera field is missing or malformed.
    """
    from whitted.renderer.camera import Camera

    try:
        builder = (
            Camera.builder()
            .set_location(_point(config.get("location", [0.0, 0.0, 0.0])))
            .set_direction(_vector(config["to"]), _vector(config["up"]))
            .set_vp_size(*(float(v) for v in config["vp_size"]))
            .set_vp_distance(float(config["vp_distance"]))
        )
        if "anti_aliasing" in config:
            builder.set_anti_aliasing(int(config["anti_aliasing"]))
    except ConfigurationError:
        raise
    except (KeyError, TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid camera settings: {exc!r}") from exc
    return builder


def load_scene(path: str | Path) -> Scene:
    """Load a scene from a JSON file."""
    return scene_from_config(read_config(path))


def read_config(path: str | Path) -> SceneConfig:
    """Read a JSON scene file into a dictionary.

    Raises:
        ConfigurationError: If the file is not valid JSON or not an object.
    """
    path = Path(path)
    logger.debug("Reading scene file %s", path)
    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"{path}: invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path}: top level must be an object")
    return data
