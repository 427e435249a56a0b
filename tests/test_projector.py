"""Tests for the WGS84 to UTM projection primitive."""

import math
from unittest.mock import MagicMock

import pytest
from pyproj import Transformer
from pyproj.exceptions import ProjError

from utm_lib.core.exceptions import ProjectionError
from utm_lib.core.projector import Projector, natural_zone, utm_coordinates, utm_epsg


def _reference(lat, lon, epsg):
    return Transformer.from_crs("EPSG:4326", f"EPSG:{epsg}", always_xy=True).transform(lon, lat)


class TestProjector:
    """Tests for Projector class."""

    def test_for_zone_northern_hemisphere(self):
        """Test projector creation for a northern hemisphere zone."""
        projector = Projector.for_zone(30)

        assert projector.zone == 30
        assert projector.south is False
        assert projector.fwd is not None

    def test_for_zone_southern_hemisphere(self):
        """Test projector creation for a southern hemisphere zone."""
        projector = Projector.for_zone(56, True)

        assert projector.south is True
        assert projector.fwd is not None

    def test_for_zone_is_cached(self):
        """Test the same projector is reused for a zone."""
        assert Projector.for_zone(31) is Projector.for_zone(31)

    @pytest.mark.parametrize("zone", [0, -1, 61])
    def test_for_zone_rejects_invalid_zone(self, zone):
        """Test zones outside 1 - 60 cannot be locked."""
        with pytest.raises(ProjectionError):
            Projector.for_zone(zone)

    def test_project_wraps_proj_errors(self):
        """Test PROJ failures surface as ProjectionError."""
        fwd = MagicMock()
        fwd.transform.side_effect = ProjError("boom")
        projector = Projector(30, False, fwd)

        with pytest.raises(ProjectionError):
            projector.project(51.5, -0.12)

    def test_project_rejects_non_finite_output(self):
        """Test an infinite result is treated as a failure."""
        fwd = MagicMock()
        fwd.transform.return_value = (math.inf, 0.0)
        projector = Projector(30, False, fwd)

        with pytest.raises(ProjectionError):
            projector.project(51.5, -0.12)


class TestUTMCoordinates:
    """Tests for utm_coordinates."""

    def test_utm_epsg(self):
        """Test EPSG codes for both hemispheres."""
        assert utm_epsg(30, False) == 32630
        assert utm_epsg(56, True) == 32756

    def test_london_matches_pyproj(self):
        """Test London in zone 30 agrees with a direct pyproj transform."""
        easting, northing = utm_coordinates(51.5, -0.12, 30)
        ref_e, ref_n = _reference(51.5, -0.12, 32630)

        assert easting == pytest.approx(ref_e)
        assert northing == pytest.approx(ref_n)
        # east of the zone 30 central meridian at 3 W
        assert 500_000 < easting < 800_000
        assert 5_700_000 < northing < 5_720_000

    def test_sydney_uses_southern_false_northing(self):
        """Test points south of the equator use the southern hemisphere CRS."""
        easting, northing = utm_coordinates(-33.8688, 151.2093, 56)
        ref_e, ref_n = _reference(-33.8688, 151.2093, 32756)

        assert easting == pytest.approx(ref_e)
        assert northing == pytest.approx(ref_n)
        assert northing > 6_000_000

    def test_locked_zone(self):
        """Test locking London to zone 31 places it west of that zone's meridian."""
        easting, _ = utm_coordinates(51.5, -0.12, 31)

        assert easting < 500_000

    @pytest.mark.parametrize("zone", [0, -1, 61])
    def test_invalid_zone_uses_own_zone(self, zone):
        """Test a zone outside 1 - 60 leaves the point in its own zone."""
        assert utm_coordinates(51.5, -0.12, zone) == utm_coordinates(51.5, -0.12, 30)

    def test_natural_zone_folds_antimeridian(self):
        """Test longitude 180 maps to zone 60."""
        assert natural_zone(180.0) == 60
        assert natural_zone(-180.0) == 1
        assert natural_zone(-0.12) == 30
