"""
Coordinates Module

CRS identifiers, CRS-space coordinates and bounding extents.
"""

from .bounding_box import BoundingBox
from .coordinate import Coordinate, CrsCoordinate
from .crs import CoordinateReferenceSystem

__all__ = [
    "BoundingBox",
    "Coordinate",
    "CrsCoordinate",
    "CoordinateReferenceSystem"
]
