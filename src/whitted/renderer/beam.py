"""Sampling of ray bundles around an ideal reflected or refracted ray.

A beam keeps the ideal ray and adds rays from the same head through random
points of a disc centered ``distance`` along the ideal ray, perpendicular
to it. Sampled rays that would leave through the other side of the
surface than the ideal ray are rejected and redrawn.
"""

from __future__ import annotations

import math

import numpy as np

from whitted.core.ray import Ray
from whitted.core.util import align_zero, is_zero
from whitted.core.vector import Vector

# Draws allowed per requested ray before giving up on a grazing beam
MAX_ATTEMPTS_PER_RAY = 10


def generate_beam(
    normal: Vector,
    ray: Ray,
    count: int,
    radius: float,
    distance: float,
    rng: np.random.Generator,
) -> list[Ray]:
    """Generate up to ``count`` rays around ``ray``.

    Args:
        normal: Surface normal at the ray head.
        ray: The ideal ray; always the first ray returned.
        count: Total number of rays wanted, including the ideal ray.
        radius: Radius of the sampling disc.
        distance: Distance from the ray head to the disc center.
        rng: Random generator used for the disc samples.

    Returns:
        The ideal ray followed by the accepted samples. Fewer than ``count``
        rays come back when the ideal ray grazes the surface.
    """
    rays = [ray]
    if count <= 1 or is_zero(radius):
        return rays

    direction = ray.direction
    head = ray.head
    nv = align_zero(normal.dot(direction))
    if nv == 0.0:
        return rays

    vx = direction.create_normal()
    vy = direction.cross(vx)
    center = ray.get_point(distance)

    attempts = 0
    max_attempts = MAX_ATTEMPTS_PER_RAY * count
    while len(rays) < count and attempts < max_attempts:
        attempts += 1
        u, w = rng.random(2)
        r = radius * math.sqrt(u)
        theta = 2.0 * math.pi * w
        point = center.translate(vx, r * math.cos(theta)).translate(vy, r * math.sin(theta))
        if point.coincides(head):
            continue
        sample = (point - head).normalize()
        if align_zero(normal.dot(sample)) * nv > 0.0:
            rays.append(Ray(head, sample))
    return rays
