"""
CRS <-> Tile Coordinate Conversion

Maps positions in a coordinate reference system onto the tiles of a matrix
laid over a bounding extent, and maps tiles back to CRS positions.

Forward conversion measures a coordinate's fractional distance from the
extent corner the matrix is numbered from, scales it by the matrix dimensions
and floors it; a position within rounding error of a tile edge counts as
lying on that edge. Measuring from the origin's corner means a coordinate lying
exactly on a tile boundary belongs to the tile whose origin-facing edge it
touches, whichever corner the matrix is numbered from.

Inverse conversion returns a tile corner. Unless another corner is requested,
that is the corner facing the matrix origin: the upper-left corner of the
tile for an upper-left numbered matrix, the lower-left corner for a
lower-left (TMS) numbered one, and so on. With that convention a tile's
returned corner converts back to the same tile.
"""

import math
from typing import Optional

from .coordinates.bounding_box import BoundingBox
from .coordinates.coordinate import CrsCoordinate
from .exceptions import (
    CoordinateOutOfBoundsError,
    CrsMismatchError,
    MissingArgumentError,
    TileOutOfRangeError,
)
from .tiles.coordinate import TileCoordinate
from .tiles.dimensions import TileMatrixDimensions
from .tiles.origin import TileOrigin

# In tiles; far below the precision of any CRS coordinate
_EDGE_TOLERANCE = 1e-9


def _check_matrix_arguments(crs_bounds, dimensions, origin) -> None:
    if crs_bounds is None:
        raise MissingArgumentError("crs_bounds", "Bounds may not be None")
    if crs_bounds.crs is None:
        raise MissingArgumentError("crs_bounds.crs", "Bounds must declare their coordinate reference system")
    if dimensions is None:
        raise MissingArgumentError("dimensions", "Tile matrix dimensions may not be None")
    if origin is None:
        raise MissingArgumentError("origin", "Origin may not be None")


def _index(distance: float, extent: float, count: int) -> int:
    position = distance * count / extent
    # Positions within rounding error of a tile edge belong to the tile
    # starting at that edge
    nearest = round(position)
    if math.isclose(position, nearest, rel_tol=0.0, abs_tol=_EDGE_TOLERANCE):
        index = nearest
    else:
        index = math.floor(position)
    return min(int(index), count - 1)


def _offset(index: int, extent: float, count: int) -> float:
    return index * extent / count


def crs_to_tile(
    coordinate: CrsCoordinate,
    crs_bounds: BoundingBox,
    dimensions: TileMatrixDimensions,
    origin: TileOrigin
) -> TileCoordinate:
    """
    Find the tile containing a CRS coordinate.

    Args:
        coordinate: Position to locate, in the CRS of ``crs_bounds``
        crs_bounds: Extent covered by the tile matrix, tagged with its CRS
        dimensions: Tile matrix dimensions
        origin: Corner the resulting tile coordinate is numbered from

    Returns:
        Column and row of the tile, numbered from ``origin``

    Raises:
        MissingArgumentError: an argument (or the bounds' CRS) is missing
        CrsMismatchError: the coordinate's CRS differs from the bounds' CRS
        CoordinateOutOfBoundsError: the coordinate is outside the extent, or
            on one of the extent edges facing away from ``origin``
    """
    if coordinate is None:
        raise MissingArgumentError("coordinate", "Coordinate may not be None")
    _check_matrix_arguments(crs_bounds, dimensions, origin)

    if coordinate.crs != crs_bounds.crs:
        raise CrsMismatchError(coordinate.crs, crs_bounds.crs)

    if not crs_bounds.contains_for_origin(coordinate.x, coordinate.y, origin):
        raise CoordinateOutOfBoundsError(
            f"Coordinate ({coordinate.x}, {coordinate.y}) is outside the bounds {crs_bounds} "
            f"of a tile matrix numbered from {origin.name}"
        )

    corner = crs_bounds.corner(origin)

    return TileCoordinate(
        column=_index(abs(coordinate.x - corner.x), crs_bounds.width, dimensions.width),
        row=_index(abs(coordinate.y - corner.y), crs_bounds.height, dimensions.height)
    )


def tile_to_crs(
    column: int,
    row: int,
    crs_bounds: BoundingBox,
    dimensions: TileMatrixDimensions,
    origin: TileOrigin,
    corner: Optional[TileOrigin] = None
) -> CrsCoordinate:
    """
    Get the CRS position of a corner of a tile.

    Args:
        column: Tile column, numbered from ``origin``
        row: Tile row, numbered from ``origin``
        crs_bounds: Extent covered by the tile matrix, tagged with its CRS
        dimensions: Tile matrix dimensions
        origin: Corner the tile coordinate is numbered from
        corner: Which corner of the tile to return; defaults to ``origin``

    Returns:
        The tile corner, in the CRS of ``crs_bounds``
    """
    _check_matrix_arguments(crs_bounds, dimensions, origin)

    if not dimensions.contains(column, row):
        raise TileOutOfRangeError(column, row, dimensions)

    x, y = _corner_position(column, row, crs_bounds, dimensions, origin, corner or origin)
    return CrsCoordinate(x, y, crs_bounds.crs)


def tile_bounds(
    column: int,
    row: int,
    crs_bounds: BoundingBox,
    dimensions: TileMatrixDimensions,
    origin: TileOrigin
) -> BoundingBox:
    """Get the CRS extent of a single tile."""
    _check_matrix_arguments(crs_bounds, dimensions, origin)

    if not dimensions.contains(column, row):
        raise TileOutOfRangeError(column, row, dimensions)

    opposite = TileOrigin((-origin.delta_x, -origin.delta_y))
    near_x, near_y = _corner_position(column, row, crs_bounds, dimensions, origin, origin)
    far_x, far_y = _corner_position(column, row, crs_bounds, dimensions, origin, opposite)

    return BoundingBox(
        min(near_x, far_x),
        min(near_y, far_y),
        max(near_x, far_x),
        max(near_y, far_y),
        crs_bounds.crs
    )


def _corner_position(
    column: int,
    row: int,
    crs_bounds: BoundingBox,
    dimensions: TileMatrixDimensions,
    origin: TileOrigin,
    corner: TileOrigin
):
    # Walk from the extent corner the matrix is numbered from, the same frame
    # crs_to_tile measures in
    start = crs_bounds.corner(origin)

    x_index = column + (0 if corner.is_right == origin.is_right else 1)
    y_index = row + (0 if corner.is_upper == origin.is_upper else 1)

    return (
        start.x + origin.delta_x * _offset(x_index, crs_bounds.width, dimensions.width),
        start.y + origin.delta_y * _offset(y_index, crs_bounds.height, dimensions.height)
    )
