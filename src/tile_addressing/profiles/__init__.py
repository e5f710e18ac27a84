"""
CRS Profiles Module

Coordinate reference system profiles used to lay tile matrices over the
globe, and a factory that picks one by CRS.
"""

from .base import GLOBAL_GEODETIC_CRS, CrsProfile
from .factory import create_profile, supported_crs
from .geodetic import GlobalGeodeticCrsProfile
from .mercator import (
    EARTH_EQUATORIAL_CIRCUMFERENCE,
    EARTH_EQUATORIAL_RADIUS,
    EllipsoidalMercatorCrsProfile,
    SphericalMercatorCrsProfile,
)

__all__ = [
    "GLOBAL_GEODETIC_CRS",
    "CrsProfile",
    "create_profile",
    "supported_crs",
    "GlobalGeodeticCrsProfile",
    "EARTH_EQUATORIAL_CIRCUMFERENCE",
    "EARTH_EQUATORIAL_RADIUS",
    "EllipsoidalMercatorCrsProfile",
    "SphericalMercatorCrsProfile"
]
