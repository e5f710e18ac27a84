"""Configuration and logging utilities."""

from .config import Config, TileSchemeSettings, parse_bounds, parse_origin
from .log import configure_logging

__all__ = [
    "Config",
    "TileSchemeSettings",
    "parse_bounds",
    "parse_origin",
    "configure_logging"
]
