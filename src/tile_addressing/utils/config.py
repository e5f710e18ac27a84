"""
Configuration

Dataclass-based settings describing the tile grid a tile store uses. Values
come from code, from a mapping (e.g. parsed JSON) or from ``TILE_ADDRESSING_*``
environment variables. Defaults describe TMS numbering over Web Mercator.
"""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from ..exceptions import TileAddressingError
from ..tiles.origin import TileOrigin

ENV_PREFIX = "TILE_ADDRESSING_"


def parse_origin(value) -> TileOrigin:
    """Accept a TileOrigin or its name in any case, e.g. ``"lower_left"``."""
    if isinstance(value, TileOrigin):
        return value
    try:
        return TileOrigin[str(value).strip().upper().replace("-", "_")]
    except KeyError:
        raise TileAddressingError(
            f"Unknown tile origin {value!r}; expected one of {', '.join(o.name for o in TileOrigin)}"
        ) from None


def parse_bounds(value) -> Optional[Tuple[float, float, float, float]]:
    """Accept None, a 4-sequence or ``"minx,miny,maxx,maxy"`` text."""
    if value is None or value == "":
        return None
    if isinstance(value, str):
        value = value.split(",")
    try:
        bounds = tuple(float(v) for v in value)
    except (TypeError, ValueError):
        raise TileAddressingError(f"Bounds must be four numbers, got {value!r}") from None
    if len(bounds) != 4:
        raise TileAddressingError(f"Bounds must be four numbers, got {len(bounds)}")
    return bounds


def _parse_bool(value: str) -> bool:
    return str(value).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class TileSchemeSettings:
    """Tile grid parameters."""
    crs: str = "EPSG:3857"
    minimum_zoom_level: int = 0
    maximum_zoom_level: int = 31
    initial_width: int = 1
    initial_height: int = 1
    origin: TileOrigin = TileOrigin.LOWER_LEFT
    bounds: Optional[Tuple[float, float, float, float]] = None

    def __post_init__(self):
        self.origin = parse_origin(self.origin)
        self.bounds = parse_bounds(self.bounds)


@dataclass
class Config:
    """Top level configuration object."""
    tile_scheme: TileSchemeSettings = field(default_factory=TileSchemeSettings)
    log_level: str = "INFO"
    log_format: str = "json"
    enable_metrics: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Config":
        """
        Build a configuration from a mapping.

        Args:
            data: Mapping with optional ``tile_scheme`` (itself a mapping of
                ``TileSchemeSettings`` fields), ``log_level``, ``log_format``
                and ``enable_metrics`` keys

        Returns:
            Configuration object
        """
        data = dict(data or {})
        scheme_data = data.pop("tile_scheme", None) or {}

        unknown = set(data) - {"log_level", "log_format", "enable_metrics"}
        if unknown:
            raise TileAddressingError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

        try:
            tile_scheme = TileSchemeSettings(**scheme_data)
        except TypeError as e:
            raise TileAddressingError(f"Invalid tile scheme settings: {e}") from e

        return cls(tile_scheme=tile_scheme, **data)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Build a configuration from ``TILE_ADDRESSING_*`` environment variables."""
        environ = os.environ if environ is None else environ

        def getenv(name: str, default: str) -> str:
            return environ.get(ENV_PREFIX + name, default)

        try:
            tile_scheme = TileSchemeSettings(
                crs=getenv("CRS", "EPSG:3857"),
                minimum_zoom_level=int(getenv("MIN_ZOOM", "0")),
                maximum_zoom_level=int(getenv("MAX_ZOOM", "31")),
                initial_width=int(getenv("INITIAL_WIDTH", "1")),
                initial_height=int(getenv("INITIAL_HEIGHT", "1")),
                origin=getenv("ORIGIN", "LOWER_LEFT"),
                bounds=getenv("BOUNDS", "") or None
            )
        except ValueError as e:
            if isinstance(e, TileAddressingError):
                raise
            raise TileAddressingError(f"Invalid tile scheme environment setting: {e}") from e

        return cls(
            tile_scheme=tile_scheme,
            log_level=getenv("LOG_LEVEL", "INFO"),
            log_format=getenv("LOG_FORMAT", "json"),
            enable_metrics=_parse_bool(getenv("ENABLE_METRICS", "false"))
        )

    def to_dict(self) -> Dict[str, Any]:
        scheme = self.tile_scheme
        return {
            "tile_scheme": {
                "crs": scheme.crs,
                "minimum_zoom_level": scheme.minimum_zoom_level,
                "maximum_zoom_level": scheme.maximum_zoom_level,
                "initial_width": scheme.initial_width,
                "initial_height": scheme.initial_height,
                "origin": scheme.origin.name,
                "bounds": list(scheme.bounds) if scheme.bounds else None
            },
            "log_level": self.log_level,
            "log_format": self.log_format,
            "enable_metrics": self.enable_metrics
        }
