"""utm-lib: convert WGS84 geospatial elements to Universal Transverse Mercator geometry."""

__version__ = "0.1.0"

from .config import UTMConfig, get_config, set_config
from .convert import UTMBoundingBox, point_to_utm, project_to_utm
from .core.diagnostics import Diagnostics, capture_diagnostics, get_diagnostics
from .elements import (
    BoundingBox,
    Circle,
    Domain,
    Feature,
    FeatureCollection,
    GeometryCollection,
    Geospatial,
    LineString,
    LineStringRadius,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from .query import bounding_box_of, domain, union, zone_of

__all__ = [
    "__version__",
    "UTMConfig",
    "get_config",
    "set_config",
    "project_to_utm",
    "point_to_utm",
    "UTMBoundingBox",
    "zone_of",
    "bounding_box_of",
    "union",
    "domain",
    "Diagnostics",
    "capture_diagnostics",
    "get_diagnostics",
    "Geospatial",
    "Point",
    "BoundingBox",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "Circle",
    "LineStringRadius",
    "Feature",
    "FeatureCollection",
    "GeometryCollection",
    "Domain",
]
