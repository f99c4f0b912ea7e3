"""Uniform ambient light."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from whitted.core.color import Color
from whitted.core.double3 import Coefficient, Double3


@dataclass(frozen=True, init=False)
class AmbientLight:
    """Constant light added once to every visible surface point.

    Attributes:
        intensity: The effective intensity, ``ia`` already scaled by ``ka``.
    """

    intensity: Color

    NONE: ClassVar[AmbientLight]

    def __init__(self, intensity: Color, ka: Coefficient = 1.0) -> None:
        object.__setattr__(self, "intensity", intensity.scale(Double3.of(ka)))


AmbientLight.NONE = AmbientLight(Color.BLACK, 0.0)
