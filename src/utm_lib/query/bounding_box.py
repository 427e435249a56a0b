"""Geospatial bounding box queries."""

from __future__ import annotations

from functools import reduce, singledispatch
from itertools import chain
from typing import Iterable, Optional

from pyproj import Geod

from utm_lib.core.diagnostics import record_error
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

_GEOD = Geod(ellps="WGS84")

# North, east, south, west
_CARDINAL_AZIMUTHS = (0.0, 90.0, 180.0, 270.0)


def union(a: Optional[BoundingBox], b: Optional[BoundingBox]) -> Optional[BoundingBox]:
    """Union of two boxes; None if either is None."""
    if a is None or b is None:
        return None
    return a + b


def points_bounding_box(points: Iterable[Point], kind: str = "point collection") -> Optional[BoundingBox]:
    """
    Bounding box of a sequence of points.

    The three axes are reduced together in a single pass, so ``points`` may
    be a one-shot iterator.

    Args:
        points: Points to bound
        kind: Name of the element being bounded, used in the error message

    Returns:
        The bounding box, or None if there are no points
    """
    iterator = iter(points)
    first = next(iterator, None)
    if first is None:
        record_error(f"Cannot query the bounding box of an empty {kind}.")
        return None

    min_lon = max_lon = first.longitude
    min_lat = max_lat = first.latitude
    min_alt = max_alt = first.altitude
    for p in iterator:
        if p.longitude < min_lon:
            min_lon = p.longitude
        elif p.longitude > max_lon:
            max_lon = p.longitude
        if p.latitude < min_lat:
            min_lat = p.latitude
        elif p.latitude > max_lat:
            max_lat = p.latitude
        if p.altitude < min_alt:
            min_alt = p.altitude
        elif p.altitude > max_alt:
            max_alt = p.altitude

    return BoundingBox(
        min=Point(longitude=min_lon, latitude=min_lat, altitude=min_alt),
        max=Point(longitude=max_lon, latitude=max_lat, altitude=max_alt),
    )


def _collection_bounding_box(children: Iterable, kind: str) -> Optional[BoundingBox]:
    boxes = [bounding_box_of(child) for child in children]
    if not boxes:
        record_error(f"Cannot query the bounding box of an empty {kind}.")
        return None
    return reduce(union, boxes)


@singledispatch
def bounding_box_of(geospatial) -> Optional[BoundingBox]:
    """
    Query a geospatial element for its bounding box.

    Args:
        geospatial: Geospatial element to query

    Returns:
        The BoundingBox, or None for a null, unrecognised or empty element.
        A composite with any child that has no bounding box has none either.
    """
    record_error(f"BoundingBox could not be found for {type(geospatial).__name__}.")
    return None


@bounding_box_of.register(type(None))
def _(geospatial: None) -> Optional[BoundingBox]:
    record_error("Cannot query a null geospatial object.")
    return None


@bounding_box_of.register(Point)
def _(geospatial: Point) -> Optional[BoundingBox]:
    return BoundingBox(min=geospatial, max=geospatial)


@bounding_box_of.register(BoundingBox)
def _(geospatial: BoundingBox) -> Optional[BoundingBox]:
    return geospatial


@bounding_box_of.register(MultiPoint)
def _(geospatial: MultiPoint) -> Optional[BoundingBox]:
    return points_bounding_box(geospatial.points, "MultiPoint")


@bounding_box_of.register(LineString)
def _(geospatial: LineString) -> Optional[BoundingBox]:
    return points_bounding_box(geospatial.points, "LineString")


@bounding_box_of.register(MultiLineString)
def _(geospatial: MultiLineString) -> Optional[BoundingBox]:
    points = chain.from_iterable(line.points for line in geospatial.line_strings)
    return points_bounding_box(points, "MultiLineString")


@bounding_box_of.register(Polygon)
def _(geospatial: Polygon) -> Optional[BoundingBox]:
    points = chain.from_iterable(ring.points for ring in geospatial.rings)
    return points_bounding_box(points, "Polygon")


@bounding_box_of.register(MultiPolygon)
def _(geospatial: MultiPolygon) -> Optional[BoundingBox]:
    points = (
        p for polygon in geospatial.polygons for ring in polygon.rings for p in ring.points
    )
    return points_bounding_box(points, "MultiPolygon")


@bounding_box_of.register(Circle)
def _(geospatial: Circle) -> Optional[BoundingBox]:
    return _circle_bounding_box(geospatial.centre, geospatial.radius)


@bounding_box_of.register(LineStringRadius)
def _(geospatial: LineStringRadius) -> Optional[BoundingBox]:
    points = geospatial.line_string.points
    if not points:
        record_error("Cannot query the bounding box of an empty LineStringRadius.")
        return None
    return reduce(union, (_circle_bounding_box(p, geospatial.radius) for p in points))


@bounding_box_of.register(Feature)
def _(geospatial: Feature) -> Optional[BoundingBox]:
    return bounding_box_of(geospatial.geometry)


@bounding_box_of.register(FeatureCollection)
def _(geospatial: FeatureCollection) -> Optional[BoundingBox]:
    return _collection_bounding_box(geospatial.features, "FeatureCollection")


@bounding_box_of.register(GeometryCollection)
def _(geospatial: GeometryCollection) -> Optional[BoundingBox]:
    return _collection_bounding_box(geospatial.geometries, "GeometryCollection")


def _circle_bounding_box(centre: Point, radius: float) -> Optional[BoundingBox]:
    if radius < 0:
        record_error(f"Cannot query the bounding box of a circle with negative radius {radius}.")
        return None
    if radius == 0:
        return BoundingBox(min=centre, max=centre)
    if not -90 <= centre.latitude <= 90:
        record_error(f"Circle centre latitude {centre.latitude} is outside the permitted range.")
        return None

    n = len(_CARDINAL_AZIMUTHS)
    lons, lats, _ = _GEOD.fwd(
        [centre.longitude] * n,
        [centre.latitude] * n,
        list(_CARDINAL_AZIMUTHS),
        [radius] * n,
    )
    return BoundingBox(
        min=Point(longitude=min(lons), latitude=min(lats), altitude=centre.altitude),
        max=Point(longitude=max(lons), latitude=max(lats), altitude=centre.altitude),
    )
