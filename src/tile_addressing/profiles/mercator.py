"""
Mercator profiles.

Both the spherical (Web Mercator, EPSG:3857) and the ellipsoidal (World
Mercator, EPSG:3395) projections are tiled over the same square extent of
plus/minus half the equatorial circumference on each axis, so the zoom level
0 tile is square.
"""

import math

from ..coordinates.bounding_box import BoundingBox
from ..coordinates.crs import CoordinateReferenceSystem
from .base import CrsProfile

EARTH_EQUATORIAL_RADIUS = 6378137.0
EARTH_EQUATORIAL_CIRCUMFERENCE = 2.0 * math.pi * EARTH_EQUATORIAL_RADIUS

_HALF_EXTENT = math.pi * EARTH_EQUATORIAL_RADIUS


class SphericalMercatorCrsProfile(CrsProfile):
    """Web Mercator, the projection used by XYZ and TMS web map tiles."""

    CRS = CoordinateReferenceSystem("EPSG", 3857)
    BOUNDS = BoundingBox(-_HALF_EXTENT, -_HALF_EXTENT, _HALF_EXTENT, _HALF_EXTENT, CRS)

    @property
    def crs(self) -> CoordinateReferenceSystem:
        return self.CRS

    @property
    def bounds(self) -> BoundingBox:
        return self.BOUNDS

    @property
    def name(self) -> str:
        return "Web Mercator"

    @property
    def description(self) -> str:
        return "Spherical Mercator"

    @property
    def precision(self) -> int:
        return 2


class EllipsoidalMercatorCrsProfile(CrsProfile):
    """World Mercator on the WGS 84 ellipsoid."""

    CRS = CoordinateReferenceSystem("EPSG", 3395)
    BOUNDS = BoundingBox(-_HALF_EXTENT, -_HALF_EXTENT, _HALF_EXTENT, _HALF_EXTENT, CRS)

    @property
    def crs(self) -> CoordinateReferenceSystem:
        return self.CRS

    @property
    def bounds(self) -> BoundingBox:
        return self.BOUNDS

    @property
    def name(self) -> str:
        return "World Mercator"

    @property
    def description(self) -> str:
        return "World (Ellipsoidal) Mercator"

    @property
    def precision(self) -> int:
        return 2
