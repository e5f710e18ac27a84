"""Lookup of the CRS profile for a coordinate reference system."""

from typing import Callable, Dict, Union

from ..coordinates.crs import CoordinateReferenceSystem
from ..exceptions import MissingArgumentError, UnsupportedCrsError
from .base import CrsProfile
from .geodetic import GlobalGeodeticCrsProfile
from .mercator import EllipsoidalMercatorCrsProfile, SphericalMercatorCrsProfile

_PROFILES: Dict[CoordinateReferenceSystem, Callable[[], CrsProfile]] = {
    CoordinateReferenceSystem("EPSG", 4326): GlobalGeodeticCrsProfile,
    CoordinateReferenceSystem("EPSG", 3857): SphericalMercatorCrsProfile,
    CoordinateReferenceSystem("EPSG", 3395): EllipsoidalMercatorCrsProfile,
}


def supported_crs():
    return sorted(_PROFILES)


def create_profile(crs: Union[CoordinateReferenceSystem, str]) -> CrsProfile:
    """
    Create the profile for a CRS.

    Args:
        crs: CRS object or ``"AUTHORITY:CODE"`` text

    Returns:
        A new profile instance

    Raises:
        UnsupportedCrsError: no profile exists for ``crs``
    """
    if crs is None:
        raise MissingArgumentError("crs", "Coordinate reference system may not be None")
    if isinstance(crs, str):
        crs = CoordinateReferenceSystem.parse(crs)

    try:
        profile_type = _PROFILES[crs]
    except KeyError:
        raise UnsupportedCrsError(
            f"No profile for {crs}; supported: {', '.join(str(c) for c in supported_crs())}"
        ) from None

    return profile_type()
