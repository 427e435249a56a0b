"""Geospatial elements in the World Geodetic System (WGS 1984, EPSG:4326).

Every element is an immutable value. Composite elements hold their children in
tuples and carry no state of their own; any iterable passed to a composite
constructor is converted to a tuple.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple


def _freeze(obj: Any, name: str) -> None:
    # frozen dataclasses only allow assignment through object.__setattr__
    object.__setattr__(obj, name, tuple(getattr(obj, name)))


class Geospatial:
    """Base class of every geospatial element."""

    __slots__ = ()


@dataclass(frozen=True, order=True)
class Point(Geospatial):
    """
    A geospatial point.

    Equality and ordering are lexicographic by (longitude, latitude, altitude).
    Coordinate ranges are not enforced here; conversion to UTM reports points
    outside them.

    Attributes:
        longitude: East-west position in degrees, valid range -180 to 180
        latitude: North-south position in degrees, valid range -90 to 90
        altitude: Height above sea level in metres
    """

    longitude: float = 0.0
    latitude: float = 0.0
    altitude: float = 0.0


@dataclass(frozen=True)
class BoundingBox(Geospatial):
    """
    Axis-aligned geospatial extent.

    ``a + b`` returns the union of two boxes. Adding None on either side
    yields None.
    """

    min: Point = field(default_factory=Point)
    max: Point = field(default_factory=Point)

    def __add__(self, other: Optional[BoundingBox]) -> Optional[BoundingBox]:
        if other is None:
            return None
        if not isinstance(other, BoundingBox):
            return NotImplemented
        return BoundingBox(
            min=Point(
                longitude=min(self.min.longitude, other.min.longitude),
                latitude=min(self.min.latitude, other.min.latitude),
                altitude=min(self.min.altitude, other.min.altitude),
            ),
            max=Point(
                longitude=max(self.max.longitude, other.max.longitude),
                latitude=max(self.max.latitude, other.max.latitude),
                altitude=max(self.max.altitude, other.max.altitude),
            ),
        )

    def __radd__(self, other: Optional[BoundingBox]) -> Optional[BoundingBox]:
        if other is None:
            return None
        return NotImplemented


@dataclass(frozen=True)
class MultiPoint(Geospatial):
    """An unordered set of points."""

    points: Tuple[Point, ...] = ()

    def __post_init__(self):
        _freeze(self, "points")


@dataclass(frozen=True)
class LineString(Geospatial):
    """An ordered path of points."""

    points: Tuple[Point, ...] = ()

    def __post_init__(self):
        _freeze(self, "points")


@dataclass(frozen=True)
class MultiLineString(Geospatial):
    line_strings: Tuple[LineString, ...] = ()

    def __post_init__(self):
        _freeze(self, "line_strings")


@dataclass(frozen=True)
class Polygon(Geospatial):
    """A polygon; the first ring is the outer boundary, the rest are holes."""

    rings: Tuple[LineString, ...] = ()

    def __post_init__(self):
        _freeze(self, "rings")


@dataclass(frozen=True)
class MultiPolygon(Geospatial):
    polygons: Tuple[Polygon, ...] = ()

    def __post_init__(self):
        _freeze(self, "polygons")


@dataclass(frozen=True)
class Circle(Geospatial):
    """A circle around a centre point. The radius is in metres."""

    centre: Point = field(default_factory=Point)
    radius: float = 0.0


@dataclass(frozen=True)
class LineStringRadius(Geospatial):
    """A line string with thickness. The radius is in metres."""

    line_string: LineString = field(default_factory=LineString)
    radius: float = 0.0


@dataclass(frozen=True)
class Feature(Geospatial):
    """
    A geometry with attached properties.

    Properties are opaque: they take no part in equality, hashing, or any
    query or conversion.
    """

    geometry: Optional[Geospatial] = None
    properties: Mapping[str, Any] = field(default_factory=dict, compare=False, hash=False)


@dataclass(frozen=True)
class FeatureCollection(Geospatial):
    features: Tuple[Feature, ...] = ()

    def __post_init__(self):
        _freeze(self, "features")


@dataclass(frozen=True)
class GeometryCollection(Geospatial):
    """A heterogeneous, ordered collection of geometries."""

    geometries: Tuple[Geospatial, ...] = ()

    def __post_init__(self):
        _freeze(self, "geometries")


@dataclass(frozen=True)
class Domain:
    """A closed numeric interval."""

    min: float
    max: float

    def __contains__(self, value: float) -> bool:
        return self.min <= value <= self.max
