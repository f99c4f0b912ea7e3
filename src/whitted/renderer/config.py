"""Tracer settings captured by a ray tracer at construction."""

from __future__ import annotations

from dataclasses import dataclass

from whitted.core.errors import ConfigurationError
from whitted.core.ray import DEFAULT_DELTA

# Default recursion depth for reflected and refracted rays
MAX_CALC_COLOR_LEVEL = 10

# Attenuation below which a contribution is treated as negligible
MIN_CALC_COLOR_K = 0.001


@dataclass(frozen=True)
class TracerConfig:
    """Recursion limits, tolerances and beam sampling parameters.

    Attributes:
        max_level: Maximum recursion depth (1 means local effects only).
        min_k: Attenuation floor; branches weighted below it are skipped.
        delta: Head offset for shadow, reflected and refracted rays.
        beam_rays: Rays per reflection/refraction branch (1 disables beams).
        beam_radius: Radius of the disc beam rays are sampled in.
        beam_distance: Distance along the ideal ray to the sampling disc.
        seed: Seed for the beam sampler; None draws fresh entropy.
    """

    max_level: int = MAX_CALC_COLOR_LEVEL
    min_k: float = MIN_CALC_COLOR_K
    delta: float = DEFAULT_DELTA
    beam_rays: int = 1
    beam_radius: float = 0.0
    beam_distance: float = 1.0
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.max_level < 1:
            raise ConfigurationError(f"max_level must be >= 1, got {self.max_level}")
        if not 0.0 <= self.min_k < 1.0:
            raise ConfigurationError(f"min_k must be in [0, 1), got {self.min_k}")
        if self.delta < 0.0:
            raise ConfigurationError(f"delta must be non-negative, got {self.delta}")
        if self.beam_rays < 1:
            raise ConfigurationError(f"beam_rays must be >= 1, got {self.beam_rays}")
        if self.beam_radius < 0.0:
            raise ConfigurationError(f"beam_radius must be non-negative, got {self.beam_radius}")
        if self.beam_distance <= 0.0:
            raise ConfigurationError(f"beam_distance must be positive, got {self.beam_distance}")

    @property
    def beam_enabled(self) -> bool:
        """Whether global effects trace a bundle of rays instead of one."""
        return self.beam_rays > 1 and self.beam_radius > 0.0
