"""Row/column extent of a single zoom level's tile matrix."""

from dataclasses import dataclass

from ..exceptions import InvalidDimensionError
from ._validation import is_int


@dataclass(frozen=True)
class TileMatrixDimensions:
    """Width (column count) and height (row count) of a tile matrix."""
    width: int
    height: int

    def __post_init__(self):
        if not is_int(self.width) or self.width < 1:
            raise InvalidDimensionError("width", self.width)
        if not is_int(self.height) or self.height < 1:
            raise InvalidDimensionError("height", self.height)

    def contains(self, column: int, row: int) -> bool:
        """True if (column, row) addresses a tile inside this matrix."""
        return 0 <= column < self.width and 0 <= row < self.height

    @property
    def tile_count(self) -> int:
        return self.width * self.height

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"
