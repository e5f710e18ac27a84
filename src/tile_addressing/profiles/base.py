"""
CRS Profiles

A CRS profile binds a coordinate reference system to its global extent and
to the CRS <-> tile conversions a tile store needs. Every profile shipped
here is proportional: tile rows and columns are evenly spaced in CRS units
across the extent.
"""

from abc import ABC, abstractmethod
from typing import Optional

import structlog
from pyproj import Transformer

from ..conversion import crs_to_tile, tile_bounds, tile_to_crs
from ..coordinates.bounding_box import BoundingBox
from ..coordinates.coordinate import Coordinate, CrsCoordinate
from ..coordinates.crs import CoordinateReferenceSystem
from ..exceptions import CrsMismatchError, MissingArgumentError
from ..tiles.coordinate import TileCoordinate
from ..tiles.dimensions import TileMatrixDimensions
from ..tiles.origin import TileOrigin

GLOBAL_GEODETIC_CRS = CoordinateReferenceSystem("EPSG", 4326)


class CrsProfile(ABC):
    """
    Abstract base class for CRS profiles.

    Subclasses supply the CRS, its global bounds and descriptive metadata;
    conversions are shared.
    """

    def __init__(self):
        self.logger = structlog.get_logger(profile_type=self.__class__.__name__, crs=str(self.crs))

        if self.crs == GLOBAL_GEODETIC_CRS:
            self._to_geodetic = None
            self._from_geodetic = None
        else:
            self._to_geodetic = Transformer.from_crs(
                self.crs.to_pyproj(),
                GLOBAL_GEODETIC_CRS.to_pyproj(),
                always_xy=True
            )
            self._from_geodetic = Transformer.from_crs(
                GLOBAL_GEODETIC_CRS.to_pyproj(),
                self.crs.to_pyproj(),
                always_xy=True
            )

    @property
    @abstractmethod
    def crs(self) -> CoordinateReferenceSystem:
        pass

    @property
    @abstractmethod
    def bounds(self) -> BoundingBox:
        """Global extent of the CRS, tagged with the CRS."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        pass

    @property
    @abstractmethod
    def precision(self) -> int:
        """Number of decimal places that are significant in this CRS's units."""
        pass

    @property
    def well_known_text(self) -> str:
        return self.crs.to_pyproj().to_wkt()

    def resolve_bounds(self, bounds: Optional[BoundingBox]) -> BoundingBox:
        if bounds is None:
            return self.bounds
        if bounds.crs is None:
            return bounds.with_crs(self.crs)
        if bounds.crs != self.crs:
            raise CrsMismatchError(bounds.crs, self.crs)
        return bounds

    def crs_to_tile(
        self,
        coordinate: CrsCoordinate,
        dimensions: TileMatrixDimensions,
        origin: TileOrigin,
        bounds: Optional[BoundingBox] = None
    ) -> TileCoordinate:
        """
        Find the tile containing a coordinate of this profile's CRS.

        Args:
            coordinate: Position in this profile's CRS
            dimensions: Tile matrix dimensions
            origin: Corner the result is numbered from
            bounds: Extent covered by the matrix; defaults to the global bounds

        Returns:
            Column and row of the containing tile
        """
        if coordinate is None:
            raise MissingArgumentError("coordinate", "Coordinate may not be None")
        if coordinate.crs != self.crs:
            raise CrsMismatchError(coordinate.crs, self.crs)

        return crs_to_tile(coordinate, self.resolve_bounds(bounds), dimensions, origin)

    def tile_to_crs(
        self,
        column: int,
        row: int,
        dimensions: TileMatrixDimensions,
        origin: TileOrigin,
        bounds: Optional[BoundingBox] = None,
        corner: Optional[TileOrigin] = None
    ) -> CrsCoordinate:
        """Get a corner of a tile (the origin-facing one by default) in this profile's CRS."""
        return tile_to_crs(column, row, self.resolve_bounds(bounds), dimensions, origin, corner)

    def tile_bounds(
        self,
        column: int,
        row: int,
        dimensions: TileMatrixDimensions,
        origin: TileOrigin,
        bounds: Optional[BoundingBox] = None
    ) -> BoundingBox:
        return tile_bounds(column, row, self.resolve_bounds(bounds), dimensions, origin)

    def to_global_geodetic(self, coordinate: Coordinate) -> Coordinate:
        """Convert an (x, y) position in this CRS to (longitude, latitude) degrees."""
        if coordinate is None:
            raise MissingArgumentError("coordinate", "Coordinate may not be None")
        if self._to_geodetic is None:
            return Coordinate(coordinate.x, coordinate.y)

        longitude, latitude = self._to_geodetic.transform(coordinate.x, coordinate.y)
        return Coordinate(longitude, latitude)

    def from_global_geodetic(self, coordinate: Coordinate) -> Coordinate:
        """Convert (longitude, latitude) degrees to an (x, y) position in this CRS."""
        if coordinate is None:
            raise MissingArgumentError("coordinate", "Coordinate may not be None")
        if self._from_geodetic is None:
            return Coordinate(coordinate.x, coordinate.y)

        x, y = self._from_geodetic.transform(coordinate.x, coordinate.y)
        return Coordinate(x, y)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.crs})"
