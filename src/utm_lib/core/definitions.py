"""Core definitions for utm-lib.

This module contains the zone constants and enumeration types shared by the
query and conversion modules.

Classes:
    Axis: Enum for the three geospatial axes of a Point.
"""

from enum import Enum

# Zone sentinels returned by the zone resolver on soft failures
NULL_ZONE = -1
UNKNOWN_ZONE = 0

# Zone hint meaning "resolve from the geometry"
AUTO_ZONE = 0

MIN_ZONE = 1
MAX_ZONE = 60

# Width of a UTM zone in degrees of longitude
ZONE_WIDTH_DEG = 6.0

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0

WGS84_EPSG = 4326
UTM_NORTH_EPSG_BASE = 32600
UTM_SOUTH_EPSG_BASE = 32700


class Axis(str, Enum):
    """Geospatial axes of a Point.

    Attributes:
        Longitude: East-west position in degrees.
        Latitude: North-south position in degrees.
        Altitude: Height above sea level in metres.
    """

    Longitude = "Longitude"
    Latitude = "Latitude"
    Altitude = "Altitude"


def is_valid_zone(zone: int) -> bool:
    """Return True if ``zone`` is a real UTM zone number."""
    return MIN_ZONE <= zone <= MAX_ZONE
