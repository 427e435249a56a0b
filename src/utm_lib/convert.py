"""Conversion of geospatial elements to Universal Transverse Mercator geometry.

The converted geometry may be far from the origin: coordinates are eastings and
northings in metres, with altitude carried through unchanged as z.

Zone handling:
    A zone hint of 0 resolves the zone from the element being converted. The
    resolved zone is then passed explicitly to every child, so an element is
    never split across zones even when a child on its own would resolve to a
    different one.

Output shapes:
    Point               -> shapely Point(easting, northing, altitude)
    MultiPoint          -> GeometryCollection of Points
    LineString          -> LineString, or the lone Point if only one converts
    MultiLineString     -> GeometryCollection of LineStrings
    Polygon             -> GeometryCollection of LineStrings, one per ring
    MultiPolygon        -> GeometryCollection of the Polygon collections
    BoundingBox         -> UTMBoundingBox of the two projected corners
    Circle              -> projected centre buffered by the radius
    LineStringRadius    -> projected line buffered by the radius
    Feature             -> the converted geometry; properties are dropped
    FeatureCollection   -> GeometryCollection of the converted features
    GeometryCollection  -> GeometryCollection of the converted geometries

Children that fail to convert are reported and left out of their parent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial, singledispatch
from typing import Optional, Tuple

from shapely.errors import GEOSException
from shapely.geometry import GeometryCollection as UTMCollection
from shapely.geometry import LineString as UTMLineString
from shapely.geometry import Point as UTMPoint
from shapely.geometry.base import BaseGeometry

from utm_lib.core.definitions import (
    AUTO_ZONE,
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
    is_valid_zone,
)
from utm_lib.core.diagnostics import record_error
from utm_lib.core.exceptions import ProjectionError
from utm_lib.core.parallel import map_ordered
from utm_lib.core.projector import utm_coordinates
from utm_lib.elements import (
    BoundingBox,
    Circle,
    Feature,
    FeatureCollection,
    GeometryCollection,
    LineString,
    LineStringRadius,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from utm_lib.query.zone import zone_of

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UTMBoundingBox:
    """
    The two corners of a geospatial BoundingBox in UTM coordinates.

    This is not the bounding box of the projected region: UTM does not keep
    lines of longitude straight, so other points of the region can project
    outside the box spanned by these corners.
    """

    min: UTMPoint
    max: UTMPoint


def project_to_utm(geospatial, zone_hint: int = AUTO_ZONE):
    """
    Convert a geospatial element to geometry in the UTM projection.

    Args:
        geospatial: Geospatial element to convert
        zone_hint: UTM zone to lock the conversion to, in the range 1 - 60. If 0
            the zone is resolved from the element; elements spanning several
            zones use the average zone.

    Returns:
        The converted geometry (see the module docstring for the shapes), or
        None if the element could not be converted.
    """
    if geospatial is None:
        record_error("Cannot convert a null geospatial object.")
        return None
    if zone_hint != AUTO_ZONE and not is_valid_zone(zone_hint):
        record_error(f"UTM zone {zone_hint} is outside the permitted range 1 - 60.")
        return None
    return _to_utm(geospatial, zone_hint)


def _resolve(geospatial, zone: int) -> int:
    if zone == AUTO_ZONE:
        zone = zone_of(geospatial)
        logger.debug(f"Resolved UTM zone {zone} for {type(geospatial).__name__}")
    return zone


def _in_range(lat: float, lon: float) -> bool:
    if MIN_LATITUDE <= lat <= MAX_LATITUDE and MIN_LONGITUDE <= lon <= MAX_LONGITUDE:
        return True
    record_error("One or more Point coordinates was outside the permitted ranges.")
    return False


def _project(lat: float, lon: float, zone: int) -> Optional[Tuple[float, float]]:
    try:
        return utm_coordinates(lat, lon, zone)
    except ProjectionError as e:
        record_error(str(e))
        return None


def point_to_utm(lat: float, lon: float, zone: int = AUTO_ZONE) -> Optional[UTMPoint]:
    """
    Convert latitude and longitude to a 2D point in UTM coordinates.

    Args:
        lat: Latitude in the range -90 to 90
        lon: Longitude in the range -180 to 180
        zone: UTM zone to lock the conversion to; 0 uses the point's own zone

    Returns:
        Point(easting, northing), or None if the coordinates are out of range
        or cannot be projected.
    """
    if not _in_range(lat, lon):
        return None
    projected = _project(lat, lon, zone)
    if projected is None:
        return None
    return UTMPoint(*projected)


@singledispatch
def _to_utm(geospatial, zone: int = AUTO_ZONE):
    record_error(
        f"Unable to convert {type(geospatial).__name__} to Universal Transverse Mercator Coordinates."
    )
    return None


@_to_utm.register(type(None))
def _(geospatial: None, zone: int = AUTO_ZONE):
    record_error("Cannot convert a null geospatial object.")
    return None


@_to_utm.register(Point)
def _(geospatial: Point, zone: int = AUTO_ZONE) -> Optional[UTMPoint]:
    # range check comes before zone resolution
    if not _in_range(geospatial.latitude, geospatial.longitude):
        return None
    zone = _resolve(geospatial, zone)
    projected = _project(geospatial.latitude, geospatial.longitude, zone)
    if projected is None:
        return None
    easting, northing = projected
    return UTMPoint(easting, northing, geospatial.altitude)


@_to_utm.register(MultiPoint)
def _(geospatial: MultiPoint, zone: int = AUTO_ZONE) -> UTMCollection:
    zone = _resolve(geospatial, zone)
    points = map_ordered(partial(_to_utm, zone=zone), geospatial.points)
    return UTMCollection(points)


@_to_utm.register(LineString)
def _(geospatial: LineString, zone: int = AUTO_ZONE) -> BaseGeometry:
    zone = _resolve(geospatial, zone)
    points = map_ordered(partial(_to_utm, zone=zone), geospatial.points)
    if len(points) == 1:
        # shapely lines need two coordinates
        return points[0]
    return UTMLineString(points)


@_to_utm.register(MultiLineString)
def _(geospatial: MultiLineString, zone: int = AUTO_ZONE) -> UTMCollection:
    zone = _resolve(geospatial, zone)
    return UTMCollection(map_ordered(partial(_to_utm, zone=zone), geospatial.line_strings))


@_to_utm.register(Polygon)
def _(geospatial: Polygon, zone: int = AUTO_ZONE) -> UTMCollection:
    zone = _resolve(geospatial, zone)
    return UTMCollection(map_ordered(partial(_to_utm, zone=zone), geospatial.rings))


@_to_utm.register(MultiPolygon)
def _(geospatial: MultiPolygon, zone: int = AUTO_ZONE) -> UTMCollection:
    zone = _resolve(geospatial, zone)
    return UTMCollection(map_ordered(partial(_to_utm, zone=zone), geospatial.polygons))


@_to_utm.register(BoundingBox)
def _(geospatial: BoundingBox, zone: int = AUTO_ZONE) -> Optional[UTMBoundingBox]:
    zone = _resolve(geospatial, zone)
    corner_max = _to_utm(geospatial.max, zone)
    corner_min = _to_utm(geospatial.min, zone)
    if corner_min is None or corner_max is None:
        return None
    return UTMBoundingBox(min=corner_min, max=corner_max)


@_to_utm.register(Circle)
def _(geospatial: Circle, zone: int = AUTO_ZONE) -> Optional[BaseGeometry]:
    if geospatial.radius < 0:
        record_error(f"Cannot convert a Circle with negative radius {geospatial.radius}.")
        return None
    zone = _resolve(geospatial, zone)
    centre = _to_utm(geospatial.centre, zone)
    if centre is None:
        return None
    return _buffer(centre, geospatial.radius)


@_to_utm.register(LineStringRadius)
def _(geospatial: LineStringRadius, zone: int = AUTO_ZONE) -> Optional[BaseGeometry]:
    if geospatial.radius < 0:
        record_error(f"Cannot convert a LineStringRadius with negative radius {geospatial.radius}.")
        return None
    zone = _resolve(geospatial, zone)
    line = _to_utm(geospatial.line_string, zone)
    if line is None:
        return None
    return _buffer(line, geospatial.radius)


@_to_utm.register(Feature)
def _(geospatial: Feature, zone: int = AUTO_ZONE):
    if geospatial.geometry is None:
        record_error("Cannot convert a Feature with a null geometry.")
        return None
    zone = _resolve(geospatial, zone)
    return _to_utm(geospatial.geometry, zone)


@_to_utm.register(FeatureCollection)
def _(geospatial: FeatureCollection, zone: int = AUTO_ZONE) -> UTMCollection:
    zone = _resolve(geospatial, zone)
    converted = map_ordered(partial(_to_utm, zone=zone), geospatial.features)
    return _collection(converted)


@_to_utm.register(GeometryCollection)
def _(geospatial: GeometryCollection, zone: int = AUTO_ZONE) -> UTMCollection:
    zone = _resolve(geospatial, zone)
    converted = map_ordered(partial(_to_utm, zone=zone), geospatial.geometries)
    return _collection(converted)


def _collection(converted: list) -> UTMCollection:
    members = []
    for item in converted:
        if isinstance(item, UTMBoundingBox):
            # shapely collections only hold geometries
            members.append(UTMCollection([item.min, item.max]))
        else:
            members.append(item)
    return UTMCollection(members)


def _buffer(geometry: BaseGeometry, radius: float) -> Optional[BaseGeometry]:
    if radius == 0:
        return geometry
    try:
        return geometry.buffer(radius)
    except GEOSException as e:
        record_error(f"Failed to buffer UTM geometry by {radius}: {e}")
        return None
