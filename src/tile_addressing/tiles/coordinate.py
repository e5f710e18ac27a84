"""
Tile coordinate value types.

``TileCoordinate`` is the single (column, row) type used across the package;
it only has meaning together with the dimensions and origin of the matrix it
was computed against. ``AbsoluteTileCoordinate`` carries its own zoom level
and origin for globally numbered schemes (TMS/XYZ), where the matrix at zoom
level ``z`` is ``2**z`` tiles on a side.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

from ..exceptions import InvalidZoomLevelError, MissingArgumentError
from ._validation import is_int
from .dimensions import TileMatrixDimensions

if TYPE_CHECKING:
    from .origin import TileOrigin


@dataclass(frozen=True)
class TileCoordinate:
    """A (column, row) pair."""
    column: int
    row: int

    def __iter__(self) -> Iterator[int]:
        # Allows ``column, row = coordinate``
        yield self.column
        yield self.row

    def __str__(self) -> str:
        return f"({self.column}, {self.row})"


@dataclass(frozen=True)
class AbsoluteTileCoordinate:
    """A tile address in a scheme with a single tile at zoom level 0."""
    column: int
    row: int
    zoom_level: int
    origin: "TileOrigin"

    def __post_init__(self):
        if self.origin is None:
            raise MissingArgumentError("origin")
        if not is_int(self.zoom_level):
            raise InvalidZoomLevelError("type", f"Zoom level must be an integer (got {self.zoom_level!r})")
        if self.zoom_level < 0:
            raise InvalidZoomLevelError("negative", "Zoom level must be at least 0")

    @property
    def dimensions(self) -> TileMatrixDimensions:
        side = 1 << self.zoom_level
        return TileMatrixDimensions(side, side)

    @property
    def tile_id(self) -> str:
        """Get unique tile identifier."""
        return f"{self.zoom_level}/{self.column}/{self.row}"

    def transform(self, to_origin: "TileOrigin") -> "AbsoluteTileCoordinate":
        """Re-express this tile address relative to another matrix corner."""
        transformed = self.origin.transform(to_origin, self.column, self.row, self.dimensions)
        return AbsoluteTileCoordinate(transformed.column, transformed.row, self.zoom_level, to_origin)
