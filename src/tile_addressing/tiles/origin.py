"""
Tile Origin

Enumerates the four corners of a tile matrix that may be numbered (0, 0) and
converts tile coordinates between any two of those conventions.

Each corner carries two signed unit deltas describing the CRS-space direction
that increasing column and row numbers move away from it: columns grow
eastward (+1) from a left corner and westward (-1) from a right corner; rows
grow southward (-1) from an upper corner and northward (+1) from a lower one.
An axis has to be flipped when converting between two corners exactly when
their deltas on that axis have opposite signs.
"""

from enum import Enum

from ..exceptions import MissingArgumentError
from .coordinate import TileCoordinate
from .dimensions import TileMatrixDimensions


class TileOrigin(Enum):
    """Corner of a tile matrix that is numbered (0, 0)."""

    UPPER_LEFT = (1, -1)
    UPPER_RIGHT = (-1, -1)
    LOWER_LEFT = (1, 1)
    LOWER_RIGHT = (-1, 1)

    @property
    def delta_x(self) -> int:
        return self.value[0]

    @property
    def delta_y(self) -> int:
        return self.value[1]

    @property
    def is_upper(self) -> bool:
        return self.delta_y < 0

    @property
    def is_right(self) -> bool:
        return self.delta_x < 0

    def transform(
        self,
        to_origin: "TileOrigin",
        column: int,
        row: int,
        dimensions: TileMatrixDimensions
    ) -> TileCoordinate:
        """
        Convert a tile coordinate numbered from this corner to ``to_origin``.

        Args:
            to_origin: Corner the result is numbered from
            column: Column relative to this origin
            row: Row relative to this origin
            dimensions: Dimensions of the tile matrix both coordinates address

        Returns:
            The same tile, numbered from ``to_origin``

        Column and row are not range checked; use
        ``TileMatrixDimensions.contains`` for that.
        """
        if to_origin is None:
            raise MissingArgumentError("to_origin", "Requested tile origin may not be None")
        if dimensions is None:
            raise MissingArgumentError("dimensions", "Tile matrix dimensions may not be None")

        return TileCoordinate(
            column=_flip(self.delta_x, to_origin.delta_x, column, dimensions.width),
            row=_flip(self.delta_y, to_origin.delta_y, row, dimensions.height)
        )


def _flip(from_delta: int, to_delta: int, value: int, extent: int) -> int:
    if from_delta * to_delta < 0:
        return extent - 1 - value
    return value


def transform(
    from_origin: TileOrigin,
    to_origin: TileOrigin,
    column: int,
    row: int,
    dimensions: TileMatrixDimensions
) -> TileCoordinate:
    """Convert (column, row) from ``from_origin`` numbering to ``to_origin`` numbering."""
    if from_origin is None:
        raise MissingArgumentError("from_origin", "Source tile origin may not be None")
    return from_origin.transform(to_origin, column, row, dimensions)
