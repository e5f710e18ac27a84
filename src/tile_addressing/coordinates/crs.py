"""
Coordinate reference system identifiers.

A CRS is identified by an authority (``EPSG``) and a numeric code. Two CRS
objects are equal when authority and code match; the optional display name
is informational only.
"""

from functools import total_ordering
from typing import Optional

import pyproj

from ..exceptions import TileAddressingError


@total_ordering
class CoordinateReferenceSystem:
    """Authority + identifier pair, e.g. EPSG:3857."""

    __slots__ = ("_authority", "_identifier", "_name")

    def __init__(self, authority: str, identifier: int, name: Optional[str] = None):
        if name is not None and not name:
            raise TileAddressingError("A non-None name may not be empty")
        if not authority:
            raise TileAddressingError("Authority string may not be None or empty")
        if isinstance(identifier, bool) or not isinstance(identifier, int):
            raise TileAddressingError(f"CRS identifier must be an integer (got {identifier!r})")

        self._authority = authority.upper()
        self._identifier = identifier
        self._name = name

    @classmethod
    def parse(cls, text: str) -> "CoordinateReferenceSystem":
        """Build a CRS from ``"AUTHORITY:CODE"`` text such as ``"epsg:4326"``."""
        if not text:
            raise TileAddressingError("CRS text may not be None or empty")

        authority, separator, code = text.strip().partition(":")
        if not separator or not code.strip().isdigit():
            raise TileAddressingError(f"Expected 'AUTHORITY:CODE', got {text!r}")

        return cls(authority.strip(), int(code))

    @property
    def authority(self) -> str:
        return self._authority

    @property
    def identifier(self) -> int:
        return self._identifier

    @property
    def name(self) -> Optional[str]:
        return self._name

    def to_pyproj(self) -> pyproj.CRS:
        """Resolve this identifier against the PROJ database."""
        return pyproj.CRS.from_authority(self._authority, str(self._identifier))

    def __str__(self) -> str:
        short_name = f"{self._authority}:{self._identifier}"
        if self._name is None:
            return short_name
        return f"{short_name} - {self._name}"

    def __repr__(self) -> str:
        return f"CoordinateReferenceSystem({self._authority!r}, {self._identifier!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, CoordinateReferenceSystem):
            return NotImplemented
        return self._authority == other._authority and self._identifier == other._identifier

    def __lt__(self, other) -> bool:
        if not isinstance(other, CoordinateReferenceSystem):
            return NotImplemented
        return (self._authority, self._identifier) < (other._authority, other._identifier)

    def __hash__(self) -> int:
        return hash((self._authority, self._identifier))
