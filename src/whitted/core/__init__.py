"""Core value types for ray tracing.

Components:
    util: The near-zero tolerance helpers used before every sign test
    double3: Per-channel coefficient triples
    vector: Immutable points and non-zero direction vectors
    ray: Rays with unit direction and surface-biased construction
    color: Unclamped RGB color
    errors: Configuration error types

Every type here is immutable, so values can be shared freely between
shapes, lights and concurrently traced rays.
"""

from .color import Color
from .double3 import Double3
from .errors import ConfigurationError, ZeroVectorError
from .ray import DEFAULT_DELTA, Ray
from .util import ZERO_THRESHOLD, align_zero, is_zero
from .vector import Point, Vector

__all__ = [
    "Color",
    "Double3",
    "ConfigurationError",
    "ZeroVectorError",
    "Ray",
    "DEFAULT_DELTA",
    "Point",
    "Vector",
    "ZERO_THRESHOLD",
    "align_zero",
    "is_zero",
]
