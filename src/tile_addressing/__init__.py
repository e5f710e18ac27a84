"""
Tile Addressing

Tile matrix addressing and CRS <-> tile coordinate conversion for tile
stores: TMS directories, GeoPackage tile tables and map viewers all number
their tiles through this package.

- Tile origins and the transform between corner conventions
- Tile matrix dimensions and zoom-level schemes (``ZoomTimesTwo``)
- Conversion between CRS coordinates and tile coordinates
- CRS profiles for EPSG:4326, EPSG:3857 and EPSG:3395
"""

__version__ = "1.0.0"

from .conversion import crs_to_tile, tile_bounds, tile_to_crs
from .coordinates import BoundingBox, Coordinate, CoordinateReferenceSystem, CrsCoordinate
from .exceptions import (
    CoordinateOutOfBoundsError,
    CrsMismatchError,
    InvalidBoundingBoxError,
    InvalidDimensionError,
    InvalidZoomLevelError,
    InvalidZoomRangeError,
    MissingArgumentError,
    TileAddressingError,
    TileNumberingOverflowError,
    TileOutOfRangeError,
    UnsupportedCrsError,
    ZoomLevelOutOfRangeError,
)
from .grid import TileGrid, TileRange
from .profiles import (
    CrsProfile,
    EllipsoidalMercatorCrsProfile,
    GlobalGeodeticCrsProfile,
    SphericalMercatorCrsProfile,
    create_profile,
)
from .tiles import (
    AbsoluteTileCoordinate,
    TileCoordinate,
    TileMatrixDimensions,
    TileOrigin,
    TileScheme,
    ZoomTimesTwo,
    transform,
)

__all__ = [
    "crs_to_tile",
    "tile_bounds",
    "tile_to_crs",
    "BoundingBox",
    "Coordinate",
    "CoordinateReferenceSystem",
    "CrsCoordinate",
    "CoordinateOutOfBoundsError",
    "CrsMismatchError",
    "InvalidBoundingBoxError",
    "InvalidDimensionError",
    "InvalidZoomLevelError",
    "InvalidZoomRangeError",
    "MissingArgumentError",
    "TileAddressingError",
    "TileNumberingOverflowError",
    "TileOutOfRangeError",
    "UnsupportedCrsError",
    "ZoomLevelOutOfRangeError",
    "TileGrid",
    "TileRange",
    "CrsProfile",
    "EllipsoidalMercatorCrsProfile",
    "GlobalGeodeticCrsProfile",
    "SphericalMercatorCrsProfile",
    "create_profile",
    "AbsoluteTileCoordinate",
    "TileCoordinate",
    "TileMatrixDimensions",
    "TileOrigin",
    "TileScheme",
    "ZoomTimesTwo",
    "transform"
]
