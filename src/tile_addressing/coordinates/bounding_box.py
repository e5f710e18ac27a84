"""
Bounding Box

Axis-aligned extent in CRS units. A bounding box may carry the CRS its values
are expressed in; conversions between CRS and tile coordinates require it so
they can reject coordinates from a different CRS.
"""

from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union

from shapely.geometry import Polygon, box

from ..exceptions import InvalidBoundingBoxError, MissingArgumentError
from ..tiles.origin import TileOrigin
from .coordinate import Coordinate
from .crs import CoordinateReferenceSystem


@dataclass(frozen=True)
class BoundingBox:
    """Extent given as (min_x, min_y, max_x, max_y), optionally tagged with a CRS."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float
    crs: Optional[CoordinateReferenceSystem] = None

    def __post_init__(self):
        if self.min_x > self.max_x:
            raise InvalidBoundingBoxError("Min x cannot be greater than max x")
        if self.min_y > self.max_y:
            raise InvalidBoundingBoxError("Min y cannot be greater than max y")
        if isinstance(self.crs, str):
            object.__setattr__(self, "crs", CoordinateReferenceSystem.parse(self.crs))

    @classmethod
    def from_tuple(
        cls,
        bounds: Tuple[float, float, float, float],
        crs: Union[CoordinateReferenceSystem, str, None] = None
    ) -> "BoundingBox":
        """Build from a (minx, miny, maxx, maxy) tuple, as shapely's ``bounds`` returns."""
        min_x, min_y, max_x, max_y = bounds
        return cls(min_x, min_y, max_x, max_y, crs)

    def with_crs(self, crs: Union[CoordinateReferenceSystem, str]) -> "BoundingBox":
        return replace(self, crs=crs)

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Coordinate:
        return Coordinate((self.max_x + self.min_x) / 2.0, (self.max_y + self.min_y) / 2.0)

    @property
    def top_left(self) -> Coordinate:
        return Coordinate(self.min_x, self.max_y)

    @property
    def top_right(self) -> Coordinate:
        return Coordinate(self.max_x, self.max_y)

    @property
    def bottom_left(self) -> Coordinate:
        return Coordinate(self.min_x, self.min_y)

    @property
    def bottom_right(self) -> Coordinate:
        return Coordinate(self.max_x, self.min_y)

    def corner(self, origin: TileOrigin) -> Coordinate:
        """The corner of this extent that a tile matrix with ``origin`` is numbered from."""
        if origin is None:
            raise MissingArgumentError("origin", "Origin may not be None")

        x = self.max_x if origin.is_right else self.min_x
        y = self.max_y if origin.is_upper else self.min_y
        return Coordinate(x, y)

    def contains(self, x: float, y: float) -> bool:
        """Closed containment test; points on any edge are inside."""
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def contains_for_origin(self, x: float, y: float, origin: TileOrigin) -> bool:
        """
        Half-open containment test relative to a tile matrix origin.

        Points on the two edges touching the origin's corner are inside; points
        on the two far edges are not, since no tile of a matrix numbered from
        ``origin`` starts there.
        """
        if origin is None:
            raise MissingArgumentError("origin", "Origin may not be None")
        if not self.contains(x, y):
            return False

        far_x = self.min_x if origin.is_right else self.max_x
        far_y = self.min_y if origin.is_upper else self.max_y
        return x != far_x and y != far_y

    def intersection(self, other: "BoundingBox") -> Optional["BoundingBox"]:
        """Overlap of two extents, or None when they do not overlap."""
        min_x = max(self.min_x, other.min_x)
        min_y = max(self.min_y, other.min_y)
        max_x = min(self.max_x, other.max_x)
        max_y = min(self.max_y, other.max_y)

        if min_x > max_x or min_y > max_y:
            return None
        return BoundingBox(min_x, min_y, max_x, max_y, self.crs)

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    def to_polygon(self) -> Polygon:
        return box(self.min_x, self.min_y, self.max_x, self.max_y)

    def __str__(self) -> str:
        return f"({self.min_x}, {self.min_y}, {self.max_x}, {self.max_y})"
