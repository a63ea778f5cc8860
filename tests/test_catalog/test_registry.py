"""
Tests for the coordinate system catalog.
"""

import pytest

from koordinater.core.catalog import registry
from koordinater.models.coordinates import AxisKind, CoordinateSystemId, ValueOrder


class TestCatalogContents:
    """Tests for the static catalog."""

    def test_catalog_has_25_options(self) -> None:
        """Test total number of options."""
        assert len(registry.list_options()) == 25

    def test_wkids_are_unique(self) -> None:
        """Test that no WKID appears twice."""
        wkids = [option.wkid for option in registry.list_options()]
        assert len(wkids) == len(set(wkids))

    def test_system_order(self) -> None:
        """Test catalog system order."""
        systems = [entry.id for entry in registry.COORDINATE_SYSTEM_CATALOG]
        assert systems == [
            CoordinateSystemId.SWEREF99,
            CoordinateSystemId.RT90,
            CoordinateSystemId.WGS84,
            CoordinateSystemId.ETRS89,
            CoordinateSystemId.ITRF,
        ]

    def test_group_sizes(self) -> None:
        """Test number of options per system."""
        sizes = {entry.id: len(entry.options) for entry in registry.COORDINATE_SYSTEM_CATALOG}
        assert sizes == {
            CoordinateSystemId.SWEREF99: 14,
            CoordinateSystemId.RT90: 6,
            CoordinateSystemId.WGS84: 3,
            CoordinateSystemId.ETRS89: 1,
            CoordinateSystemId.ITRF: 1,
        }

    def test_sweref_zone_coverage(self) -> None:
        """Test that all 13 SWEREF 99 projected zones are present."""
        assert registry.validate_sweref_zone_coverage() is True
        assert [zone.wkid for zone in registry.SWEREF_ZONES] == list(range(3006, 3019))

    def test_sweref_geodetic_option(self) -> None:
        """Test SWEREF 99 geographic option."""
        option = registry.get_option(4619)
        assert option is not None
        assert option.system == CoordinateSystemId.SWEREF99
        assert option.is_geodetic

    def test_default_sweref_wkids(self) -> None:
        """Test default enabled WKIDs cover the SWEREF 99 group."""
        assert registry.DEFAULT_SWEREF_WKIDS == tuple(range(3006, 3019)) + (4619,)


class TestAxisOrder:
    """Tests for axis presentation order."""

    @pytest.mark.parametrize("wkid", list(range(3006, 3019)))
    def test_sweref_zones_are_northing_first(self, wkid: int) -> None:
        """Test SWEREF 99 zones present northing before easting."""
        option = registry.get_option(wkid)
        assert option.axis_kinds == (AxisKind.NORTHING, AxisKind.EASTING)
        assert option.value_order == ValueOrder.YX

    @pytest.mark.parametrize("wkid", list(range(3020, 3026)))
    def test_rt90_zones_are_easting_first(self, wkid: int) -> None:
        """Test RT 90 zones present easting before northing."""
        option = registry.get_option(wkid)
        assert option.axis_kinds == (AxisKind.EASTING, AxisKind.NORTHING)
        assert option.value_order == ValueOrder.XY

    @pytest.mark.parametrize("wkid", [4619, 4326, 4258, 7912])
    def test_geodetic_options_are_latitude_first(self, wkid: int) -> None:
        """Test geodetic options present latitude before longitude."""
        option = registry.get_option(wkid)
        assert option.axis_kinds == (AxisKind.LATITUDE, AxisKind.LONGITUDE)
        assert option.value_order == ValueOrder.YX
        assert option.is_geodetic

    @pytest.mark.parametrize("wkid", [3857, 32633])
    def test_wgs84_projected_options_are_xy(self, wkid: int) -> None:
        """Test Web Mercator and UTM present x first."""
        option = registry.get_option(wkid)
        assert option.value_order == ValueOrder.XY
        assert not option.is_geodetic


class TestProjectionParameters:
    """Tests for zone projection parameters."""

    def test_sweref_99_tm_parameters(self) -> None:
        """Test the national SWEREF 99 TM zone definition."""
        params = registry.get_projection_parameters(3006)
        assert params.central_meridian == 15.0
        assert params.scale_factor == 0.9996
        assert params.false_easting == 500000.0
        assert params.false_northing == 0.0
        assert params.ellipsoid == "GRS80"

    def test_sweref_local_zone_parameters(self) -> None:
        """Test a local SWEREF 99 zone definition."""
        params = registry.get_projection_parameters(3012)
        assert params.central_meridian == pytest.approx(14.25)
        assert params.scale_factor == 1.0
        assert params.false_easting == 150000.0
        assert params.ellipsoid == "GRS80"

    def test_rt90_parameters(self) -> None:
        """Test RT 90 zone meridians are 2.25 degrees apart."""
        base = registry.get_projection_parameters(3022)
        west = registry.get_projection_parameters(3020)
        assert base.central_meridian == pytest.approx(15.808278, abs=1e-6)
        assert west.central_meridian == pytest.approx(15.808278 - 4.5, abs=1e-6)
        assert base.false_easting == 1500000.0
        assert base.ellipsoid == "Bessel 1841"

    def test_geodetic_options_have_no_parameters(self) -> None:
        """Test geodetic options carry no projection parameters."""
        assert registry.get_projection_parameters(4326) is None

    def test_unknown_wkid_has_no_parameters(self) -> None:
        """Test unknown WKID."""
        assert registry.get_projection_parameters(99999) is None


class TestLookups:
    """Tests for lookup and scope functions."""

    def test_get_option_unknown(self) -> None:
        """Test unknown WKID lookup."""
        assert registry.get_option(12345) is None

    def test_default_wkids(self) -> None:
        """Test default WKID per system."""
        assert registry.get_default_wkid(CoordinateSystemId.SWEREF99) == 3006
        assert registry.get_default_wkid(CoordinateSystemId.RT90) == 3022
        assert registry.get_default_wkid(CoordinateSystemId.WGS84) == 4326
        assert registry.get_default_wkid(CoordinateSystemId.ETRS89) == 4258
        assert registry.get_default_wkid(CoordinateSystemId.ITRF) == 7912

    def test_is_coordinate_system_id(self) -> None:
        """Test system id validation."""
        assert registry.is_coordinate_system_id("rt90")
        assert registry.is_coordinate_system_id(CoordinateSystemId.ITRF)
        assert not registry.is_coordinate_system_id("nad83")
        assert not registry.is_coordinate_system_id(None)

    def test_options_for_scope(self) -> None:
        """Test core and extended scopes."""
        core = registry.options_for_scope(False)
        extended = registry.options_for_scope(True)
        assert len(core) == 14
        assert all(option.system == CoordinateSystemId.SWEREF99 for option in core)
        assert len(extended) == 25

    def test_compute_allowed_zones_keeps_catalog_order(self) -> None:
        """Test enabled WKIDs are returned in catalog order."""
        allowed = registry.compute_allowed_zones([4326, 3021, 3006])
        assert [option.wkid for option in allowed] == [3006, 3021, 4326]

    def test_compute_allowed_zones_falls_back(self) -> None:
        """Test empty or unknown WKIDs fall back to SWEREF 99."""
        assert len(registry.compute_allowed_zones([])) == 14
        assert len(registry.compute_allowed_zones([99999])) == 14
        assert len(registry.compute_allowed_zones(None)) == 14

    def test_resolve_effective_wkid(self) -> None:
        """Test WKID resolution with fallback."""
        assert registry.resolve_effective_wkid(3022) == 3022
        assert registry.resolve_effective_wkid(99999) == 3006
