"""Tests for the geospatial element model."""

import dataclasses

import pytest

from utm_lib.elements import (
    BoundingBox,
    Domain,
    Feature,
    GeometryCollection,
    LineString,
    MultiPoint,
    Point,
    Polygon,
)


class TestPoint:
    """Test the Point value type."""

    def test_point_defaults(self):
        """Test Point defaults to the origin at sea level."""
        point = Point()

        assert point.longitude == 0.0
        assert point.latitude == 0.0
        assert point.altitude == 0.0

    def test_point_equality_by_value(self):
        """Test two points with the same coordinates are equal and hash alike."""
        a = Point(-0.12, 51.5, 10.0)
        b = Point(-0.12, 51.5, 10.0)

        assert a == b
        assert hash(a) == hash(b)

    def test_point_ordering_is_lexicographic(self):
        """Test ordering compares longitude, then latitude, then altitude."""
        points = [Point(1, 0, 0), Point(0, 5, 0), Point(0, 1, 9), Point(0, 1, 2)]

        assert sorted(points) == [Point(0, 1, 2), Point(0, 1, 9), Point(0, 5, 0), Point(1, 0, 0)]

    def test_point_is_immutable(self):
        """Test a Point cannot be modified in place."""
        point = Point(1, 2, 3)

        with pytest.raises(dataclasses.FrozenInstanceError):
            point.longitude = 5

    def test_point_out_of_range_allowed_at_construction(self):
        """Test ranges are checked on conversion, not construction."""
        point = Point(longitude=200, latitude=-95)

        assert point.longitude == 200


class TestBoundingBoxUnion:
    """Test the BoundingBox union operator."""

    def test_union_is_component_wise(self):
        """Test union takes the per-axis min of minima and max of maxima."""
        a = BoundingBox(Point(0, 10, 5), Point(2, 12, 6))
        b = BoundingBox(Point(-1, 11, 0), Point(1, 15, 4))

        result = a + b

        assert result.min == Point(-1, 10, 0)
        assert result.max == Point(2, 15, 6)

    def test_union_with_none_is_none(self):
        """Test adding None on either side propagates absence."""
        box = BoundingBox(Point(0, 0, 0), Point(1, 1, 1))

        assert (box + None) is None
        assert (None + box) is None

    def test_union_with_other_type_raises(self):
        """Test adding a non-box is a type error."""
        box = BoundingBox(Point(0, 0, 0), Point(1, 1, 1))

        with pytest.raises(TypeError):
            box + 5


class TestComposites:
    """Test composite element construction."""

    def test_sequences_stored_as_tuples(self):
        """Test lists passed to composites are frozen into tuples."""
        line = LineString([Point(0, 0), Point(1, 1)])
        polygon = Polygon([line])

        assert isinstance(line.points, tuple)
        assert isinstance(polygon.rings, tuple)
        assert polygon.rings[0] is line

    def test_generators_accepted(self):
        """Test any iterable can populate a composite."""
        multi = MultiPoint(Point(i, i) for i in range(3))

        assert len(multi.points) == 3

    def test_composites_are_hashable(self):
        """Test composites of hashable children are hashable values."""
        a = GeometryCollection([Point(1, 2), LineString([Point(0, 0), Point(1, 1)])])
        b = GeometryCollection([Point(1, 2), LineString([Point(0, 0), Point(1, 1)])])

        assert a == b
        assert len({a, b}) == 1

    def test_feature_properties_ignored_in_equality(self):
        """Test properties take no part in Feature equality or hashing."""
        a = Feature(Point(1, 2), {"name": "a"})
        b = Feature(Point(1, 2), {"name": "b"})

        assert a == b
        assert hash(a) == hash(b)
        assert a.properties["name"] == "a"


class TestDomain:
    """Test the Domain interval."""

    def test_domain_contains(self):
        """Test membership is inclusive at both ends."""
        domain = Domain(1.0, 3.0)

        assert 1.0 in domain
        assert 3.0 in domain
        assert 2.0 in domain
        assert 3.5 not in domain
