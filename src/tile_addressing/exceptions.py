"""
Tile Addressing Errors

Every failure raised by the package derives from ``TileAddressingError``,
which is a ``ValueError``: all of them describe an invalid argument handed to
an otherwise pure computation. Subclasses carry the attribute needed to tell
related failures apart (which dimension overflowed, which argument was
missing, ...).
"""

from typing import Optional


class TileAddressingError(ValueError):
    """Base class for invalid-argument failures."""


class MissingArgumentError(TileAddressingError):
    """A required argument was ``None``."""

    def __init__(self, argument: str, message: Optional[str] = None):
        self.argument = argument
        super().__init__(message or f"{argument} may not be None")


class InvalidDimensionError(TileAddressingError):
    """A matrix width or height is smaller than one."""

    def __init__(self, dimension: str, value, message: Optional[str] = None):
        self.dimension = dimension
        self.value = value
        super().__init__(message or f"The {dimension} must be an integer greater than 0 (got {value!r})")


class InvalidZoomLevelError(TileAddressingError):
    """A zoom level is negative or not an integer."""

    def __init__(self, reason: str, message: str):
        self.reason = reason
        super().__init__(message)


class InvalidZoomRangeError(TileAddressingError):
    """The minimum zoom level is not strictly below the maximum."""

    def __init__(self, minimum_zoom_level: int, maximum_zoom_level: int):
        self.minimum_zoom_level = minimum_zoom_level
        self.maximum_zoom_level = maximum_zoom_level
        super().__init__(
            f"Minimum zoom level ({minimum_zoom_level}) must be less than "
            f"the maximum zoom level ({maximum_zoom_level})"
        )


class ZoomLevelOutOfRangeError(TileAddressingError):
    """A zoom level outside the range a tile scheme was built for."""

    def __init__(self, zoom_level: int, minimum_zoom_level: int, maximum_zoom_level: int):
        self.zoom_level = zoom_level
        self.minimum_zoom_level = minimum_zoom_level
        self.maximum_zoom_level = maximum_zoom_level
        super().__init__(
            f"Zoom level {zoom_level} must be in the range "
            f"[{minimum_zoom_level}, {maximum_zoom_level}]"
        )


class TileNumberingOverflowError(TileAddressingError, OverflowError):
    """Tile numbers at the maximum zoom level would not fit a signed 32-bit int."""

    def __init__(self, dimension: str, initial_value: int, maximum_zoom_level: int):
        self.dimension = dimension
        self.initial_value = initial_value
        self.maximum_zoom_level = maximum_zoom_level
        super().__init__(
            f"This combination of initial {dimension} ({initial_value}) and maximum zoom "
            f"level ({maximum_zoom_level}) will cause an integer overflow for tile numbering"
        )


class CrsMismatchError(TileAddressingError):
    """A coordinate is expressed in a different CRS than the one expected."""

    def __init__(self, actual, expected):
        self.actual = actual
        self.expected = expected
        super().__init__(
            f"Coordinate reference system {actual} does not match {expected}"
        )


class CoordinateOutOfBoundsError(TileAddressingError):
    """A CRS coordinate lies outside the extent of a tile matrix."""


class TileOutOfRangeError(TileAddressingError):
    """A column/row pair lies outside a tile matrix."""

    def __init__(self, column: int, row: int, dimensions):
        self.column = column
        self.row = row
        self.dimensions = dimensions
        super().__init__(
            f"Tile ({column}, {row}) is outside the tile matrix of "
            f"{dimensions.width}x{dimensions.height} tiles"
        )


class InvalidBoundingBoxError(TileAddressingError):
    """A bounding box whose minimum exceeds its maximum on some axis."""


class UnsupportedCrsError(TileAddressingError):
    """No CRS profile is registered for a coordinate reference system."""
