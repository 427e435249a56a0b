"""Zone, bounding box and domain queries on geospatial elements."""

from utm_lib.query.bounding_box import bounding_box_of, points_bounding_box, union
from utm_lib.query.domain import domain
from utm_lib.query.zone import zone_of

__all__ = [
    "zone_of",
    "bounding_box_of",
    "points_bounding_box",
    "union",
    "domain",
]
