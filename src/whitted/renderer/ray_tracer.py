"""Recursive Whitted-style shading engine.

The engine computes the color seen along a ray as the local Phong
illumination at the closest hit (emission, diffuse and specular terms for
every unshadowed light) plus, recursively, the colors seen along the
mirror-reflected and the refracted rays. Recursion stops at
``TracerConfig.max_level`` or once a branch's accumulated attenuation
``k`` falls below ``TracerConfig.min_k``.

Ambient light is added once, for the primary hit only.

Example:
    >>> scene = Scene("demo")
    >>> scene.geometries.add(Sphere(1.0, Point(0.0, 0.0, -3.0)))
    >>> tracer = SimpleRayTracer(scene)
    >>> tracer.trace_ray(Ray(Point.ZERO, Vector(1.0, 0.0, 0.0)))
    Color(r=0.0, g=0.0, b=0.0)
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from whitted.core.color import Color
from whitted.core.double3 import Double3
from whitted.core.ray import Ray
from whitted.core.util import align_zero, is_zero
from whitted.core.vector import Vector
from whitted.geometry.intersectable import GeoPoint
from whitted.lighting.light_source import LightSource
from whitted.materials.material import Material
from whitted.renderer.beam import generate_beam
from whitted.renderer.config import TracerConfig
from whitted.scene.scene import Scene

# Keeps ray hashes non-negative for SeedSequence entropy
_HASH_MASK = (1 << 64) - 1


class RayTracerBase(ABC):
    """Maps a ray to the color seen along it in a scene.

    Attributes:
        scene: The scene to trace; never modified.
        config: Recursion and sampling settings.
    """

    def __init__(self, scene: Scene, config: TracerConfig | None = None) -> None:
        self.scene = scene
        self.config = config if config is not None else TracerConfig()

    @abstractmethod
    def trace_ray(self, ray: Ray) -> Color:
        """Return the color seen along a ray."""


class SimpleRayTracer(RayTracerBase):
    """Exhaustive ray tracer: every ray is tested against every shape.

    The tracer holds no mutable state. Beam sampling draws from a generator
    derived from the configured seed and the primary ray, so a pixel's color
    does not depend on the order pixels are traced in.
    """

    def trace_ray(self, ray: Ray) -> Color:
        closest = self._find_closest_intersection(ray)
        if closest is None:
            return self.scene.background
        color = self._calc_color(
            closest, ray, self.config.max_level, Double3.ONE, self._beam_rng(ray)
        )
        return color + self.scene.ambient_light.intensity

    def _beam_rng(self, ray: Ray) -> np.random.Generator | None:
        """Return the beam sampler for one primary ray, or None without beams."""
        if not self.config.beam_enabled:
            return None
        if self.config.seed is None:
            return np.random.default_rng()
        return np.random.default_rng([self.config.seed, hash(ray) & _HASH_MASK])

    def _find_closest_intersection(self, ray: Ray) -> GeoPoint | None:
        return ray.find_closest_geo_point(self.scene.geometries.find_geo_intersections(ray))

    def _calc_color(
        self,
        gp: GeoPoint,
        ray: Ray,
        level: int,
        k: Double3,
        rng: np.random.Generator | None,
    ) -> Color:
        color = self._calc_local_effects(gp, ray, k)
        if level == 1:
            return color
        return color + self._calc_global_effects(gp, ray, level, k, rng)

    # ------------------------------------------------------------------
    # Local effects
    # ------------------------------------------------------------------

    def _calc_local_effects(self, gp: GeoPoint, ray: Ray, k: Double3) -> Color:
        geometry = gp.geometry
        color = geometry.emission
        v = ray.direction
        n = geometry.get_normal(gp.point)
        nv = align_zero(n.dot(v))
        if nv == 0.0:
            return color

        material = geometry.material
        for light in self.scene.lights:
            l = light.get_l(gp.point)
            nl = align_zero(n.dot(l))
            if nl * nv <= 0.0:
                continue
            ktr = self._transparency(gp, light, l, n)
            if (ktr * k).lower_than(self.config.min_k):
                continue
            il = light.get_intensity(gp.point).scale(ktr)
            color = color.add(
                self._calc_diffusive(material, nl, il),
                self._calc_specular(material, n, l, nl, v, il),
            )
        return color

    def _transparency(self, gp: GeoPoint, light: LightSource, l: Vector, n: Vector) -> Double3:
        """Return the per-channel fraction of a light reaching a hit point.

        The product of ``kT`` over every shape between the point and the
        light; one when nothing is in the way, zero behind an opaque shape.
        """
        light_ray = Ray.biased(gp.point, -l, n, self.config.delta)
        light_distance = light.get_distance(light_ray.head)
        ktr = Double3.ONE
        for hit in self.scene.geometries.find_geo_intersections(light_ray, light_distance):
            ktr = ktr * hit.geometry.material.kt
            if ktr.lower_than(self.config.min_k):
                return Double3.ZERO
        return ktr

    @staticmethod
    def _calc_diffusive(material: Material, nl: float, il: Color) -> Color:
        return il.scale(material.kd * abs(nl))

    @staticmethod
    def _calc_specular(
        material: Material, n: Vector, l: Vector, nl: float, v: Vector, il: Color
    ) -> Color:
        r = l - n.scale(2.0 * nl)
        minus_vr = -align_zero(v.dot(r))
        if minus_vr <= 0.0:
            return Color.BLACK
        return il.scale(material.ks * (minus_vr**material.shininess))

    # ------------------------------------------------------------------
    # Global effects
    # ------------------------------------------------------------------

    def _calc_global_effects(
        self,
        gp: GeoPoint,
        ray: Ray,
        level: int,
        k: Double3,
        rng: np.random.Generator | None,
    ) -> Color:
        material = gp.geometry.material
        n = gp.geometry.get_normal(gp.point)
        color = Color.BLACK
        branches = (
            (material.kr, self._construct_reflected_ray),
            (material.kt, self._construct_refracted_ray),
        )
        for kx, construct in branches:
            kkx = k * kx
            if kkx.lower_than(self.config.min_k):
                continue
            ideal = construct(gp, ray.direction, n)
            color = color + self._calc_global_effect(ideal, n, level, kx, kkx, rng)
        return color

    def _calc_global_effect(
        self,
        ideal: Ray,
        n: Vector,
        level: int,
        kx: Double3,
        kkx: Double3,
        rng: np.random.Generator | None,
    ) -> Color:
        if rng is not None:
            rays = generate_beam(
                n,
                ideal,
                self.config.beam_rays,
                self.config.beam_radius,
                self.config.beam_distance,
                rng,
            )
        else:
            rays = [ideal]

        total = Color.BLACK
        for secondary in rays:
            total = total + self._trace_secondary(secondary, level, kx, kkx, rng)
        return total.reduce(len(rays))

    def _trace_secondary(
        self,
        ray: Ray,
        level: int,
        kx: Double3,
        kkx: Double3,
        rng: np.random.Generator | None,
    ) -> Color:
        gp = self._find_closest_intersection(ray)
        if gp is None:
            return self.scene.background.scale(kx)
        if is_zero(gp.geometry.get_normal(gp.point).dot(ray.direction)):
            return Color.BLACK
        return self._calc_color(gp, ray, level - 1, kkx, rng).scale(kx)

    def _construct_reflected_ray(self, gp: GeoPoint, v: Vector, n: Vector) -> Ray:
        vn = align_zero(v.dot(n))
        if vn == 0.0:
            return Ray.biased(gp.point, v, n, self.config.delta)
        r = v - n.scale(2.0 * vn)
        return Ray.biased(gp.point, r, n, self.config.delta)

    def _construct_refracted_ray(self, gp: GeoPoint, v: Vector, n: Vector) -> Ray:
        return Ray.biased(gp.point, v, n, self.config.delta)
