"""
Tile Matrix Module

Tile origins, matrix dimensions and the zoom-level schemes built from them.
"""

from .coordinate import AbsoluteTileCoordinate, TileCoordinate
from .dimensions import TileMatrixDimensions
from .origin import TileOrigin, transform
from .scheme import MAX_TILE_NUMBER, TileScheme, ZoomTimesTwo

__all__ = [
    "AbsoluteTileCoordinate",
    "TileCoordinate",
    "TileMatrixDimensions",
    "TileOrigin",
    "transform",
    "MAX_TILE_NUMBER",
    "TileScheme",
    "ZoomTimesTwo"
]
