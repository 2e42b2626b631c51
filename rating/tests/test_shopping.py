"""
Unit Tests for Multi-Carrier Shopping

Run with: pytest rating/tests/test_shopping.py -v
"""

from datetime import datetime, timezone

import pytest

from rating.data.loaders import InMemoryStore
from rating.models import ShipmentDescription
from rating.shopping import compare_quotes, shop_rates

NOW = datetime(2026, 1, 20, tzinfo=timezone.utc)


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def shipment():
    return ShipmentDescription.model_validate({
        "packages": [{"weight": 200, "length": 48, "width": 40, "height": 40}],
        "origin": {"postalCode": "M5V 2T6"},
        "destination": {"postalCode": "H3B 1A1"},
    })


@pytest.fixture
def store():
    """
    cheap-co   flat $100, 2-3 business days
    fast-co    zone $500, 1 business day
    heavy-co   rejects anything over 100 lbs
    empty-co   no rate cards
    """
    return InMemoryStore.from_document({
        "carriers": [
            {"id": "cheap-co"},
            {"id": "fast-co"},
            {"id": "heavy-co"},
            {"id": "empty-co"},
        ],
        "rateCards": [
            {"id": "cheap", "carrierId": "cheap-co", "rateStructure": "flat_rate", "flatRate": 100},
            {
                "id": "fast",
                "carrierId": "fast-co",
                "rateStructure": "zone_matrix",
                "zoneMatrix": [
                    {"originZone": "ON", "destinationZone": "QC", "rate": 500, "transitDays": "1"},
                ],
            },
            {"id": "heavy", "carrierId": "heavy-co", "rateStructure": "flat_rate"},
        ],
        "weightRules": [{"carrierId": "heavy-co", "maxWeight": 100, "enabled": True}],
    })


# =============================================================================
# TESTS
# =============================================================================

class TestShopRates:
    """Tests for concurrent carrier rating."""

    @pytest.mark.asyncio
    async def test_quotes_sorted_by_total(self, store, shipment):
        result = await shop_rates(["fast-co", "cheap-co"], shipment, store, now=NOW)
        assert [quote.carrier.id for quote in result.quotes] == ["cheap-co", "fast-co"]
        assert [quote.final_total for quote in result.quotes] == [100.00, 500.00]

    @pytest.mark.asyncio
    async def test_failures_isolated(self, store, shipment):
        """One carrier's error or rejection never stops the others."""
        result = await shop_rates(
            ["empty-co", "cheap-co", "heavy-co", "ghost-co", "fast-co"],
            shipment, store, now=NOW,
        )
        assert [quote.carrier.id for quote in result.quotes] == ["cheap-co", "fast-co"]
        assert [r.carrier_id for r in result.ineligible] == ["heavy-co"]
        assert result.ineligible[0].reasons == ["Weight exceeds maximum: 100 lbs"]
        assert [(f.carrier_id, f.error) for f in result.failures] == [
            ("empty-co", "No applicable rate card found for carrier empty-co"),
            ("ghost-co", "Carrier not found: ghost-co"),
        ]

    @pytest.mark.asyncio
    async def test_comparison(self, store, shipment):
        """Cheap wins on price, fast on speed; speed is weighted higher."""
        result = await shop_rates(["cheap-co", "fast-co"], shipment, store, now=NOW)
        comparison = result.comparison
        assert comparison.cheapest.carrier.id == "cheap-co"
        assert comparison.fastest.carrier.id == "fast-co"
        assert comparison.recommended.carrier.id == "fast-co"
        assert comparison.price_range.min == pytest.approx(100.00)
        assert comparison.price_range.max == pytest.approx(500.00)
        assert comparison.price_range.average == pytest.approx(300.00)

    @pytest.mark.asyncio
    async def test_single_quote_is_everything(self, store, shipment):
        result = await shop_rates(["cheap-co"], shipment, store, now=NOW)
        comparison = result.comparison
        assert comparison.cheapest is comparison.fastest is comparison.recommended
        assert comparison.price_range.average == pytest.approx(100.00)

    @pytest.mark.asyncio
    async def test_no_quotes(self, store, shipment):
        result = await shop_rates(["heavy-co", "empty-co"], shipment, store, now=NOW)
        assert result.quotes == []
        assert result.comparison.cheapest is None
        assert result.comparison.price_range is None

    @pytest.mark.asyncio
    async def test_to_dict(self, store, shipment):
        data = (await shop_rates(["cheap-co", "fast-co"], shipment, store, now=NOW)).to_dict()
        assert data["quotes"][0]["calculated_at"] == NOW.isoformat()
        assert data["comparison"]["recommended"]["carrier"]["id"] == "fast-co"
        assert data["comparison"]["price_range"]["max"] == 500.00


class TestCompareQuotes:
    def test_empty(self):
        comparison = compare_quotes([])
        assert comparison.cheapest is None
        assert comparison.recommended is None
