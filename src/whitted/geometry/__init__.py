"""Intersectable geometry primitives.

Components:
    intersectable: The Intersectable interface and GeoPoint hit record
    geometry: Base class for shapes with material and emission
    sphere, plane, polygon, triangle, tube: Closed-form primitives
    geometries: Composite shape collection
"""

from .geometries import Geometries
from .geometry import Geometry
from .intersectable import GeoPoint, Intersectable
from .plane import Plane
from .polygon import Polygon, plane_of_vertices
from .sphere import Sphere
from .triangle import Triangle
from .tube import Cylinder, Tube

__all__ = [
    "Geometries",
    "Geometry",
    "GeoPoint",
    "Intersectable",
    "Plane",
    "Polygon",
    "plane_of_vertices",
    "Sphere",
    "Triangle",
    "Tube",
    "Cylinder",
]
