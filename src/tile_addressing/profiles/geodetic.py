"""Global geodetic (EPSG:4326) profile: longitude/latitude degrees."""

from ..coordinates.bounding_box import BoundingBox
from ..coordinates.crs import CoordinateReferenceSystem
from .base import GLOBAL_GEODETIC_CRS, CrsProfile


class GlobalGeodeticCrsProfile(CrsProfile):
    """WGS 84 longitude/latitude with x = longitude, y = latitude."""

    BOUNDS = BoundingBox(-180.0, -90.0, 180.0, 90.0, GLOBAL_GEODETIC_CRS)

    @property
    def crs(self) -> CoordinateReferenceSystem:
        return GLOBAL_GEODETIC_CRS

    @property
    def bounds(self) -> BoundingBox:
        return self.BOUNDS

    @property
    def name(self) -> str:
        return "Global Geodetic"

    @property
    def description(self) -> str:
        return "World Geodetic System 1984 longitude/latitude"

    @property
    def precision(self) -> int:
        return 7
