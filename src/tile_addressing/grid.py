"""
Tile Grid

A tile grid is what a tile store holds on to: a CRS profile, a tile scheme
and the extent the scheme's matrices cover. Covering the profile's global
bounds gives absolute tile numbering (TMS, XYZ); covering a smaller extent
gives relative numbering, as GeoPackage tile matrix sets do.
"""

import math
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, TypeVar, Union

import structlog

from .coordinates.bounding_box import BoundingBox
from .coordinates.coordinate import CrsCoordinate
from .coordinates.crs import CoordinateReferenceSystem
from .exceptions import MissingArgumentError, TileAddressingError
from .monitoring.metrics import MetricsCollector
from .profiles.base import CrsProfile
from .profiles.factory import create_profile
from .tiles.coordinate import TileCoordinate
from .tiles.dimensions import TileMatrixDimensions
from .tiles.origin import TileOrigin
from .tiles.scheme import TileScheme, ZoomTimesTwo
from .utils.config import Config
from .utils.log import configure_logging

T = TypeVar("T")


@dataclass(frozen=True)
class TileRange:
    """Inclusive block of tiles at one zoom level, numbered from ``origin``."""
    min_column: int
    min_row: int
    max_column: int
    max_row: int
    zoom_level: int
    origin: TileOrigin

    @property
    def width(self) -> int:
        return self.max_column - self.min_column + 1

    @property
    def height(self) -> int:
        return self.max_row - self.min_row + 1

    def __len__(self) -> int:
        return self.width * self.height

    def __iter__(self) -> Iterator[TileCoordinate]:
        for column in range(self.min_column, self.max_column + 1):
            for row in range(self.min_row, self.max_row + 1):
                yield TileCoordinate(column, row)

    def __contains__(self, tile) -> bool:
        column, row = tile
        return self.min_column <= column <= self.max_column and self.min_row <= row <= self.max_row


class TileGrid:
    """
    Tile matrices of a scheme laid over an extent of a CRS.

    Tile coordinates are numbered from the scheme's origin unless a method is
    given another ``origin``.
    """

    def __init__(
        self,
        profile: CrsProfile,
        scheme: TileScheme,
        bounds: Optional[BoundingBox] = None,
        metrics: Optional[MetricsCollector] = None
    ):
        """
        Initialize the tile grid.

        Args:
            profile: CRS profile of the grid
            scheme: Tile scheme giving matrix dimensions per zoom level
            bounds: Extent covered by every zoom level; defaults to the
                profile's global bounds
            metrics: Optional metrics collector counting conversions
        """
        if profile is None:
            raise MissingArgumentError("profile", "CRS profile may not be None")
        if scheme is None:
            raise MissingArgumentError("scheme", "Tile scheme may not be None")

        self.profile = profile
        self.scheme = scheme
        self.bounds = profile.resolve_bounds(bounds)
        self.metrics = metrics

        self.logger = structlog.get_logger(grid_type=self.__class__.__name__, crs=str(profile.crs))

        if self.metrics:
            self.metrics.set_gauge(
                'tile_scheme_zoom_levels',
                len(scheme.zoom_levels),
                labels={'crs': str(profile.crs)}
            )

        self.logger.info(
            "Tile grid initialized",
            bounds=self.bounds.to_tuple(),
            origin=scheme.origin.name,
            zoom_levels=(scheme.minimum_zoom_level, scheme.maximum_zoom_level),
            absolute=self.is_absolute
        )

    @classmethod
    def tms(
        cls,
        crs: Union[CoordinateReferenceSystem, str] = "EPSG:3857",
        metrics: Optional[MetricsCollector] = None
    ) -> "TileGrid":
        """Absolute grid numbered the TMS way: one tile at zoom 0, lower-left origin."""
        return cls(
            create_profile(crs),
            ZoomTimesTwo(0, 31, 1, 1, TileOrigin.LOWER_LEFT),
            metrics=metrics
        )

    @classmethod
    def from_config(cls, config: Config, metrics: Optional[MetricsCollector] = None) -> "TileGrid":
        """Build the grid described by a configuration object, applying its logging settings."""
        configure_logging(config.log_level, config.log_format)

        settings = config.tile_scheme
        profile = create_profile(settings.crs)

        if metrics is None and config.enable_metrics:
            metrics = MetricsCollector()

        bounds = None
        if settings.bounds is not None:
            bounds = BoundingBox.from_tuple(settings.bounds, profile.crs)

        return cls(
            profile,
            ZoomTimesTwo(
                settings.minimum_zoom_level,
                settings.maximum_zoom_level,
                settings.initial_width,
                settings.initial_height,
                settings.origin
            ),
            bounds=bounds,
            metrics=metrics
        )

    @property
    def crs(self) -> CoordinateReferenceSystem:
        return self.profile.crs

    @property
    def origin(self) -> TileOrigin:
        return self.scheme.origin

    @property
    def is_absolute(self) -> bool:
        """True if the grid covers the whole extent of its CRS."""
        return self.bounds == self.profile.bounds

    def dimensions(self, zoom_level: int) -> TileMatrixDimensions:
        return self.scheme.dimensions(zoom_level)

    def _run(self, operation: str, call: Callable[[], T], **context) -> T:
        try:
            result = call()
        except TileAddressingError as e:
            self.logger.warning(
                "Tile conversion rejected",
                operation=operation,
                error_type=type(e).__name__,
                error=str(e),
                **context
            )
            if self.metrics:
                self.metrics.increment_counter(
                    'tile_conversion_errors_total',
                    labels={'operation': operation, 'error': type(e).__name__}
                )
            raise

        if self.metrics:
            self.metrics.increment_counter(
                'tile_conversions_total',
                labels={'operation': operation, 'crs': str(self.crs)}
            )
        return result

    def crs_to_tile(
        self,
        coordinate: CrsCoordinate,
        zoom_level: int,
        origin: Optional[TileOrigin] = None
    ) -> TileCoordinate:
        """
        Find the tile containing a coordinate at a zoom level.

        Args:
            coordinate: Position in the grid's CRS
            zoom_level: Zoom level of the tile matrix
            origin: Corner to number the result from; defaults to the scheme origin

        Returns:
            Column and row of the containing tile
        """
        return self._run(
            'crs_to_tile',
            lambda: self.profile.crs_to_tile(
                coordinate,
                self.scheme.dimensions(zoom_level),
                origin or self.origin,
                self.bounds
            ),
            coordinate=str(coordinate),
            zoom_level=zoom_level
        )

    def tile_to_crs(
        self,
        column: int,
        row: int,
        zoom_level: int,
        origin: Optional[TileOrigin] = None,
        corner: Optional[TileOrigin] = None
    ) -> CrsCoordinate:
        """
        Get the CRS position of a tile corner.

        Args:
            column: Tile column
            row: Tile row
            zoom_level: Zoom level of the tile matrix
            origin: Corner column and row are numbered from; defaults to the scheme origin
            corner: Tile corner to return; defaults to the one facing ``origin``

        Returns:
            The corner position in the grid's CRS
        """
        return self._run(
            'tile_to_crs',
            lambda: self.profile.tile_to_crs(
                column,
                row,
                self.scheme.dimensions(zoom_level),
                origin or self.origin,
                self.bounds,
                corner
            ),
            column=column,
            row=row,
            zoom_level=zoom_level
        )

    def tile_bounds(
        self,
        column: int,
        row: int,
        zoom_level: int,
        origin: Optional[TileOrigin] = None
    ) -> BoundingBox:
        """Get the CRS extent of a tile."""
        return self._run(
            'tile_bounds',
            lambda: self.profile.tile_bounds(
                column,
                row,
                self.scheme.dimensions(zoom_level),
                origin or self.origin,
                self.bounds
            ),
            column=column,
            row=row,
            zoom_level=zoom_level
        )

    def transform(self, column: int, row: int, zoom_level: int, to_origin: TileOrigin) -> TileCoordinate:
        """Renumber a tile of this grid from the scheme origin to ``to_origin``."""
        return self._run(
            'transform',
            lambda: self.origin.transform(to_origin, column, row, self.scheme.dimensions(zoom_level)),
            column=column,
            row=row,
            zoom_level=zoom_level
        )

    def tiles_in_bounds(
        self,
        bounds: BoundingBox,
        zoom_level: int,
        origin: Optional[TileOrigin] = None
    ) -> Optional[TileRange]:
        """
        Get the block of tiles that covers an extent.

        Args:
            bounds: Extent to cover, in the grid's CRS
            zoom_level: Zoom level of the tile matrix
            origin: Corner to number the result from; defaults to the scheme origin

        Returns:
            Inclusive tile range clipped to the grid, or None if ``bounds``
            does not overlap the grid. An extent that only touches the
            grid's outline covers no tile.
        """
        origin = origin or self.origin

        def compute() -> Optional[TileRange]:
            if bounds is None:
                raise MissingArgumentError("bounds", "Bounds may not be None")

            dimensions = self.scheme.dimensions(zoom_level)
            overlap = self.bounds.intersection(self.profile.resolve_bounds(bounds))
            if overlap is None or self._touches_edge_only(overlap):
                return None

            # Upper-left numbering first, then renumber the two corner tiles
            first_column = _clamp(
                math.floor((overlap.min_x - self.bounds.min_x) * dimensions.width / self.bounds.width),
                dimensions.width
            )
            last_column = _clamp(
                math.ceil((overlap.max_x - self.bounds.min_x) * dimensions.width / self.bounds.width) - 1,
                dimensions.width
            )
            first_row = _clamp(
                math.floor((self.bounds.max_y - overlap.max_y) * dimensions.height / self.bounds.height),
                dimensions.height
            )
            last_row = _clamp(
                math.ceil((self.bounds.max_y - overlap.min_y) * dimensions.height / self.bounds.height) - 1,
                dimensions.height
            )
            last_column = max(first_column, last_column)
            last_row = max(first_row, last_row)

            start = TileOrigin.UPPER_LEFT.transform(origin, first_column, first_row, dimensions)
            end = TileOrigin.UPPER_LEFT.transform(origin, last_column, last_row, dimensions)

            return TileRange(
                min_column=min(start.column, end.column),
                min_row=min(start.row, end.row),
                max_column=max(start.column, end.column),
                max_row=max(start.row, end.row),
                zoom_level=zoom_level,
                origin=origin
            )

        return self._run('tiles_in_bounds', compute, bounds=str(bounds), zoom_level=zoom_level)

    def _touches_edge_only(self, overlap: BoundingBox) -> bool:
        # Zero-width or zero-height overlap lying on the grid outline
        on_vertical_edge = overlap.width == 0 and overlap.min_x in (self.bounds.min_x, self.bounds.max_x)
        on_horizontal_edge = overlap.height == 0 and overlap.min_y in (self.bounds.min_y, self.bounds.max_y)
        return on_vertical_edge or on_horizontal_edge

    def __repr__(self) -> str:
        return f"TileGrid(profile={self.profile!r}, scheme={self.scheme!r}, bounds={self.bounds})"


def _clamp(index: int, count: int) -> int:
    return min(max(int(index), 0), count - 1)
