"""
Unit Tests for Zone and Distance Resolution

Run with: pytest rating/tests/test_zones.py -v
"""

import math

import polars as pl
import pytest

from rating.models import Address
from rating.pipeline.zones import (
    derive_zone,
    estimate_region_distance,
    haversine_miles,
    region_from_postal,
    resolve_route,
)


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def toronto():
    return Address(postal_code="M5V 2T6", latitude=43.6532, longitude=-79.3832)


@pytest.fixture
def montreal():
    return Address(postal_code="H3B 1A1", latitude=45.5017, longitude=-73.5673)


# =============================================================================
# ZONES
# =============================================================================

class TestRegionFromPostal:
    """Tests for postal prefix mapping."""

    def test_mapped_prefix(self):
        assert region_from_postal("M5V 2T6") == "ON"
        assert region_from_postal("T2P 1J9") == "AB"

    def test_lowercase_prefix(self):
        assert region_from_postal("v6b 1a1") == "BC"

    def test_unmapped_prefix_uses_first_three(self):
        """US zip codes are not in the Canadian table."""
        assert region_from_postal("90210") == "902"

    def test_custom_mapping(self):
        regions = pl.DataFrame({"prefix": ["9"], "region": ["CA"]})
        assert region_from_postal("90210", regions) == "CA"


class TestDeriveZone:
    """Tests for address zone priority."""

    def test_province_wins(self):
        address = Address(province="AB", state="WA", postal_code="M5V 2T6")
        assert derive_zone(address) == "AB"

    def test_state_before_postal(self):
        assert derive_zone(Address(state="NY", postal_code="M5V 2T6")) == "NY"

    def test_postal_fallback(self):
        assert derive_zone(Address(postal_code="H3B 1A1")) == "QC"

    def test_unknown(self):
        assert derive_zone(Address()) == "UNKNOWN"
        assert derive_zone(None) == "UNKNOWN"


# =============================================================================
# DISTANCE
# =============================================================================

class TestDistance:
    """Tests for distance estimation."""

    def test_same_region(self):
        assert estimate_region_distance("ON", "ON") == 200

    def test_pair_is_symmetric(self):
        assert estimate_region_distance("ON", "QC") == 250
        assert estimate_region_distance("QC", "ON") == 250

    def test_unknown_pair_default(self):
        assert estimate_region_distance("NS", "YT") == 500

    def test_haversine_same_point(self, toronto):
        assert haversine_miles(toronto, toronto) == pytest.approx(0.0)

    def test_haversine_toronto_montreal(self, toronto, montreal):
        """Roughly 313 great-circle miles."""
        assert 300 < haversine_miles(toronto, montreal) < 330

    def test_haversine_antipodal(self):
        """Half the earth's circumference, not a math domain error."""
        origin = Address(latitude=-6.377647337239125, longitude=-146.93007968748378)
        destination = Address(latitude=6.377647337239125, longitude=33.06992031251622)
        assert haversine_miles(origin, destination) == pytest.approx(3959 * math.pi, rel=1e-6)


class TestResolveRoute:
    """Tests for the combined route and distance."""

    def test_coordinates_preferred(self, toronto, montreal):
        route, distance = resolve_route(toronto, montreal)
        assert route.route_key == "ON-QC"
        assert 300 < distance < 330
        assert isinstance(distance, int)

    def test_postal_estimate_without_coordinates(self):
        route, distance = resolve_route(
            Address(postal_code="V6B 1A1"),
            Address(postal_code="T2P 1J9"),
        )
        assert route.route_key == "BC-AB"
        assert distance == 350

    def test_province_drives_estimate(self):
        """Estimate uses the same zones as the route."""
        route, distance = resolve_route(
            Address(province="MB", postal_code="M5V 2T6"),
            Address(postal_code="M4B 1B3"),
        )
        assert route.route_key == "MB-ON"
        assert distance == 450

    def test_missing_postal_is_zero(self):
        route, distance = resolve_route(Address(province="ON"), Address(postal_code="H3B"))
        assert distance == 0

    def test_missing_address_is_zero(self):
        route, distance = resolve_route(None, Address(postal_code="H3B 1A1"))
        assert route.route_key == "UNKNOWN-QC"
        assert distance == 0

    def test_reverse_key(self):
        route, _ = resolve_route(Address(province="ON"), Address(province="QC"))
        assert route.reverse_key == "QC-ON"
