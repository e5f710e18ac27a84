"""
Tile Schemes

A tile scheme maps each zoom level of a tile pyramid to the dimensions of its
tile matrix. ``ZoomTimesTwo`` is the quad-tree scheme used by TMS, XYZ and
most GeoPackage tile sets: every zoom level has twice the columns and twice
the rows of the previous one, starting from a configurable base matrix at the
minimum zoom level.
"""

from abc import ABC, abstractmethod
from typing import Tuple

import structlog

from ..exceptions import (
    InvalidDimensionError,
    InvalidZoomLevelError,
    InvalidZoomRangeError,
    MissingArgumentError,
    TileNumberingOverflowError,
    ZoomLevelOutOfRangeError,
)
from ._validation import is_int
from .dimensions import TileMatrixDimensions
from .origin import TileOrigin

# Tile stores number tiles with signed 32-bit integers
MAX_TILE_NUMBER = 2**31 - 1


def _overflows(initial: int, maximum_zoom_level: int) -> bool:
    # Bit lengths first; the shift below only ever sees small values
    if initial.bit_length() + maximum_zoom_level > MAX_TILE_NUMBER.bit_length() + 1:
        return True
    return (initial << maximum_zoom_level) - 1 > MAX_TILE_NUMBER


class TileScheme(ABC):
    """
    Abstract mapping of zoom level to tile matrix dimensions.

    Subclasses must provide ``dimensions`` and expose the scheme's zoom range
    and the matrix corner tiles are numbered from.
    """

    def __init__(self, minimum_zoom_level: int, maximum_zoom_level: int, origin: TileOrigin):
        self._minimum_zoom_level = minimum_zoom_level
        self._maximum_zoom_level = maximum_zoom_level
        self._origin = origin

    @abstractmethod
    def dimensions(self, zoom_level: int) -> TileMatrixDimensions:
        """
        Get the tile matrix dimensions of a zoom level.

        Args:
            zoom_level: Zoom level inside the scheme's range

        Returns:
            Width and height of the tile matrix at that zoom level
        """
        pass

    @property
    def origin(self) -> TileOrigin:
        return self._origin

    @property
    def minimum_zoom_level(self) -> int:
        return self._minimum_zoom_level

    @property
    def maximum_zoom_level(self) -> int:
        return self._maximum_zoom_level

    @property
    def zoom_levels(self) -> range:
        return range(self._minimum_zoom_level, self._maximum_zoom_level + 1)

    def __contains__(self, zoom_level) -> bool:
        return is_int(zoom_level) and self._minimum_zoom_level <= zoom_level <= self._maximum_zoom_level


class ZoomTimesTwo(TileScheme):
    """
    Quad-tree tile scheme: matrix width and height double at each zoom level.

    All zoom levels are computed once at construction, so a single instance
    can be shared freely between threads.
    """

    def __init__(
        self,
        minimum_zoom_level: int,
        maximum_zoom_level: int,
        initial_width: int,
        initial_height: int,
        origin: TileOrigin
    ):
        """
        Initialize the tile scheme.

        Args:
            minimum_zoom_level: Lowest zoom level, at least 0
            maximum_zoom_level: Highest zoom level, greater than the minimum
            initial_width: Matrix width (columns) at the minimum zoom level
            initial_height: Matrix height (rows) at the minimum zoom level
            origin: Corner tiles are numbered from

        Raises:
            InvalidDimensionError: initial width or height below 1
            InvalidZoomLevelError: negative or non-integer zoom level
            InvalidZoomRangeError: minimum zoom level not below the maximum
            MissingArgumentError: origin is None
            TileNumberingOverflowError: width or height would overflow tile
                numbering at the maximum zoom level
        """
        if not is_int(initial_width) or initial_width < 1:
            raise InvalidDimensionError("width", initial_width, "The initial width must be an integer greater than 0")
        if not is_int(initial_height) or initial_height < 1:
            raise InvalidDimensionError("height", initial_height, "The initial height must be an integer greater than 0")

        self._check_zoom_bound("minimum", minimum_zoom_level)
        self._check_zoom_bound("maximum", maximum_zoom_level)

        if minimum_zoom_level >= maximum_zoom_level:
            raise InvalidZoomRangeError(minimum_zoom_level, maximum_zoom_level)

        if origin is None:
            raise MissingArgumentError("origin", "Tile origin may not be None")

        # Tiles are numbered as if the matrix had been doubling since zoom
        # level 0, so the check uses the absolute maximum zoom level.
        if _overflows(initial_width, maximum_zoom_level):
            raise TileNumberingOverflowError("width", initial_width, maximum_zoom_level)
        if _overflows(initial_height, maximum_zoom_level):
            raise TileNumberingOverflowError("height", initial_height, maximum_zoom_level)

        super().__init__(minimum_zoom_level, maximum_zoom_level, origin)

        self.initial_width = initial_width
        self.initial_height = initial_height

        self._zoom_level_dimensions: Tuple[TileMatrixDimensions, ...] = tuple(
            TileMatrixDimensions(initial_width << level, initial_height << level)
            for level in range(maximum_zoom_level - minimum_zoom_level + 1)
        )

        self.logger = structlog.get_logger(scheme_type=self.__class__.__name__)
        self.logger.debug(
            "Tile scheme initialized",
            minimum_zoom_level=minimum_zoom_level,
            maximum_zoom_level=maximum_zoom_level,
            initial_width=initial_width,
            initial_height=initial_height,
            origin=origin.name
        )

    @staticmethod
    def _check_zoom_bound(which: str, zoom_level) -> None:
        if not is_int(zoom_level):
            raise InvalidZoomLevelError(
                f"{which}_type",
                f"The {which} zoom level must be an integer (got {zoom_level!r})"
            )
        if zoom_level < 0:
            raise InvalidZoomLevelError(
                f"{which}_negative",
                f"The {which} zoom level must be at least 0 (got {zoom_level})"
            )

    def dimensions(self, zoom_level: int) -> TileMatrixDimensions:
        if not is_int(zoom_level):
            raise InvalidZoomLevelError("type", f"Zoom level must be an integer (got {zoom_level!r})")
        if zoom_level < self._minimum_zoom_level or zoom_level > self._maximum_zoom_level:
            raise ZoomLevelOutOfRangeError(zoom_level, self._minimum_zoom_level, self._maximum_zoom_level)

        return self._zoom_level_dimensions[zoom_level - self._minimum_zoom_level]

    def __repr__(self) -> str:
        return (
            f"ZoomTimesTwo(minimum_zoom_level={self._minimum_zoom_level}, "
            f"maximum_zoom_level={self._maximum_zoom_level}, "
            f"initial_width={self.initial_width}, initial_height={self.initial_height}, "
            f"origin=TileOrigin.{self._origin.name})"
        )
