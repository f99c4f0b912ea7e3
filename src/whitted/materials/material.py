"""Surface material coefficients for the Phong shading model.

Example:
    >>> glass = Material(kd=0.2, ks=0.2, kt=0.6, shininess=30)
    >>> glass.kt
    Double3(d1=0.6, d2=0.6, d3=0.6)
"""

from __future__ import annotations

from dataclasses import dataclass, field

from whitted.core.double3 import Coefficient, Double3
from whitted.core.errors import ConfigurationError


@dataclass(frozen=True)
class Material:
    """Reflectance properties of a surface.

    Scalars and 3-sequences are accepted for every coefficient and coerced
    to :class:`Double3` (a scalar applies to all three channels).

    Attributes:
        kd: Diffuse coefficient.
        ks: Specular coefficient.
        kt: Transparency coefficient; zero is fully opaque.
        kr: Reflectivity coefficient; zero is not a mirror at all.
        shininess: Specular exponent (integer >= 0).
    """

    kd: Coefficient = field(default=Double3.ZERO)
    ks: Coefficient = field(default=Double3.ZERO)
    kt: Coefficient = field(default=Double3.ZERO)
    kr: Coefficient = field(default=Double3.ZERO)
    shininess: int = 0

    def __post_init__(self) -> None:
        for name in ("kd", "ks", "kt", "kr"):
            try:
                value = Double3.of(getattr(self, name))
            except (TypeError, ValueError) as exc:
                raise ConfigurationError(f"Invalid material coefficient {name}: {exc}") from exc
            if min(value) < 0.0:
                raise ConfigurationError(f"Material coefficient {name} must be non-negative")
            object.__setattr__(self, name, value)
        if int(self.shininess) != self.shininess:
            raise ConfigurationError(f"Shininess must be an integer, got {self.shininess}")
        if self.shininess < 0:
            raise ConfigurationError(f"Shininess must be >= 0, got {self.shininess}")
        object.__setattr__(self, "shininess", int(self.shininess))
