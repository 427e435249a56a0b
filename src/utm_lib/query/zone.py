"""UTM zone queries.

Composite elements report the truncated integer average of their children's
zones. The average is taken level by level: a nested composite is reduced to a
single zone before it is summed into its parent, so the result can differ from
a flat average over every point.
"""

from __future__ import annotations

import math
from functools import singledispatch
from typing import Iterable

from utm_lib.core.definitions import NULL_ZONE, UNKNOWN_ZONE, ZONE_WIDTH_DEG
from utm_lib.core.diagnostics import record_error, record_warning
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


@singledispatch
def zone_of(geospatial) -> int:
    """
    Query a geospatial element, or a longitude, for its UTM zone.

    Args:
        geospatial: Geospatial element or longitude in degrees

    Returns:
        The UTM zone. Elements spanning several zones return the average zone.
        -1 for a null input, 0 for an unrecognised or empty element.
    """
    record_warning(f"UTM zone could not be found for {type(geospatial).__name__}.")
    return UNKNOWN_ZONE


@zone_of.register(type(None))
def _(geospatial: None) -> int:
    record_error("Cannot query a null geospatial object.")
    return NULL_ZONE


@zone_of.register(int)
@zone_of.register(float)
def _(longitude) -> int:
    if not math.isfinite(longitude):
        record_error(f"Cannot find the UTM zone of longitude {longitude}.")
        return UNKNOWN_ZONE
    # Not clamped: a longitude of exactly 180 gives zone 61
    return int(math.floor((longitude + 180) / ZONE_WIDTH_DEG)) + 1


def _average_zone(children: Iterable, kind: str) -> int:
    total = 0
    count = 0
    for child in children:
        total += zone_of(child)
        count += 1
    if count == 0:
        record_error(f"Cannot query the UTM zone of an empty {kind}.")
        return UNKNOWN_ZONE
    # truncate toward zero, not floor
    return int(total / count)


@zone_of.register(Point)
def _(geospatial: Point) -> int:
    return zone_of(geospatial.longitude)


@zone_of.register(BoundingBox)
def _(geospatial: BoundingBox) -> int:
    return int((zone_of(geospatial.min) + zone_of(geospatial.max)) / 2.0)


@zone_of.register(MultiPoint)
def _(geospatial: MultiPoint) -> int:
    return _average_zone(geospatial.points, "MultiPoint")


@zone_of.register(LineString)
def _(geospatial: LineString) -> int:
    return _average_zone(geospatial.points, "LineString")


@zone_of.register(MultiLineString)
def _(geospatial: MultiLineString) -> int:
    return _average_zone(geospatial.line_strings, "MultiLineString")


@zone_of.register(Polygon)
def _(geospatial: Polygon) -> int:
    return _average_zone(geospatial.rings, "Polygon")


@zone_of.register(MultiPolygon)
def _(geospatial: MultiPolygon) -> int:
    return _average_zone(geospatial.polygons, "MultiPolygon")


@zone_of.register(Circle)
def _(geospatial: Circle) -> int:
    return zone_of(geospatial.centre)


@zone_of.register(LineStringRadius)
def _(geospatial: LineStringRadius) -> int:
    return zone_of(geospatial.line_string)


@zone_of.register(Feature)
def _(geospatial: Feature) -> int:
    return zone_of(geospatial.geometry)


@zone_of.register(FeatureCollection)
def _(geospatial: FeatureCollection) -> int:
    return _average_zone(geospatial.features, "FeatureCollection")


@zone_of.register(GeometryCollection)
def _(geospatial: GeometryCollection) -> int:
    return _average_zone(geospatial.geometries, "GeometryCollection")
