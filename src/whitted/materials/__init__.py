"""Material definitions for the Phong reflectance model."""

from .material import Material

__all__ = ["Material"]
