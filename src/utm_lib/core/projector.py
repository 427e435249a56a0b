"""Projection utilities for converting WGS84 coordinates to UTM."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

from pyproj import CRS, Transformer
from pyproj.exceptions import CRSError, ProjError

from utm_lib.core.definitions import (
    MAX_ZONE,
    UTM_NORTH_EPSG_BASE,
    UTM_SOUTH_EPSG_BASE,
    WGS84_EPSG,
    ZONE_WIDTH_DEG,
    is_valid_zone,
)
from utm_lib.core.exceptions import ProjectionError


def utm_epsg(zone: int, south: bool) -> int:
    """Return the EPSG code of a WGS84 / UTM zone."""
    return (UTM_SOUTH_EPSG_BASE if south else UTM_NORTH_EPSG_BASE) + zone


@dataclass(frozen=True)
class Projector:
    """Transforms WGS84 coordinates into a single UTM zone and hemisphere."""

    zone: int
    south: bool
    fwd: Transformer

    @staticmethod
    @lru_cache(maxsize=None)
    def for_zone(zone: int, south: bool = False) -> Projector:
        """
        Create (or reuse) the Projector for a UTM zone.

        Args:
            zone: UTM zone in the range 1 - 60
            south: Use the southern hemisphere false northing

        Returns:
            A Projector locked to the zone

        Raises:
            ProjectionError: If the zone is invalid or projection setup fails
        """
        if not is_valid_zone(zone):
            raise ProjectionError(f"UTM zone {zone} is outside the permitted range 1 - 60")
        try:
            wgs84 = CRS.from_epsg(WGS84_EPSG)
            local = CRS.from_epsg(utm_epsg(zone, south))
            return Projector(zone, south, Transformer.from_crs(wgs84, local, always_xy=True))
        except CRSError as e:
            raise ProjectionError(f"Failed to create projector for zone {zone}: {e}") from e

    def project(self, lat: float, lon: float) -> Tuple[float, float]:
        """Transform a latitude/longitude pair to (easting, northing)."""
        try:
            easting, northing = self.fwd.transform(lon, lat, errcheck=True)
        except ProjError as e:
            raise ProjectionError(
                f"Failed to project ({lat}, {lon}) to UTM zone {self.zone}: {e}"
            ) from e
        if not (math.isfinite(easting) and math.isfinite(northing)):
            raise ProjectionError(f"Projection of ({lat}, {lon}) to UTM zone {self.zone} diverged")
        return easting, northing


def natural_zone(lon: float) -> int:
    """Zone a longitude falls in, with the antimeridian folded into zone 60."""
    return min(int(math.floor((lon + 180) / ZONE_WIDTH_DEG)) + 1, MAX_ZONE)


def utm_coordinates(lat: float, lon: float, zone: int = 0) -> Tuple[float, float]:
    """
    Convert latitude and longitude to UTM easting and northing.

    Args:
        lat: Latitude in the range -90 to 90
        lon: Longitude in the range -180 to 180
        zone: UTM zone to lock the conversion to. Values outside 1 - 60 leave
            the point in its own zone.

    Returns:
        (easting, northing) in metres. Points south of the equator use the
        southern hemisphere false northing.

    Raises:
        ProjectionError: If PROJ cannot transform the coordinate
    """
    if not is_valid_zone(zone):
        zone = natural_zone(lon)
    return Projector.for_zone(zone, lat < 0).project(lat, lon)
