"""CRS-space coordinate types. Arguments are always ordered (x, y)."""

from dataclasses import dataclass
from typing import Iterator, Union

from ..exceptions import MissingArgumentError
from .crs import CoordinateReferenceSystem


@dataclass(frozen=True)
class Coordinate:
    """A plain (x, y) position with no attached CRS."""
    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass(frozen=True)
class CrsCoordinate:
    """An (x, y) position in a named coordinate reference system."""
    x: float
    y: float
    crs: CoordinateReferenceSystem

    def __post_init__(self):
        if self.crs is None:
            raise MissingArgumentError("crs", "Coordinate reference system may not be None")
        if isinstance(self.crs, str):
            object.__setattr__(self, "crs", CoordinateReferenceSystem.parse(self.crs))

    @classmethod
    def from_coordinate(
        cls,
        coordinate: Coordinate,
        crs: Union[CoordinateReferenceSystem, str]
    ) -> "CrsCoordinate":
        return cls(coordinate.x, coordinate.y, crs)

    def to_coordinate(self) -> Coordinate:
        return Coordinate(self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y}) {self.crs}"
