"""
Unit Tests for Rate Card Selection

Recency scoring is pinned with a fixed "now" throughout.

Run with: pytest rating/tests/test_selection.py -v
"""

from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest

from rating.errors import NoApplicableRateCardError
from rating.models import RateCard, ShipmentDescription
from rating.pipeline import score_rate_card, select_rate_card
from rating.pipeline.selection import recency_bonus
from rating.results import Route, ShipmentMetrics

NOW = datetime(2026, 1, 20, tzinfo=timezone.utc)


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def metrics():
    return ShipmentMetrics(
        total_weight=500.0,
        dimensional_weight=400.0,
        chargeable_weight=500.0,
        total_volume=66400.0,
        skid_equivalents=2,
        max_length=48.0,
        max_width=48.0,
        max_height=40.0,
        total_pieces=2,
        package_count=1,
        distance=250,
        route=Route("ON", "QC", "ON-QC"),
        dim_factor=166,
        unit_system="imperial",
    )


@pytest.fixture
def shipment():
    return ShipmentDescription(service_level="standard")


def card(card_id: str, **fields) -> RateCard:
    return RateCard(id=card_id, rate_structure=fields.pop("rate_structure", "flat_rate"), **fields)


# =============================================================================
# SCORING
# =============================================================================

class TestScoring:
    """Tests for individual score components."""

    def test_service_level_match(self, metrics, shipment):
        assert score_rate_card(card("a", service_level="Standard"), metrics, shipment, NOW) == 50

    def test_skid_fit(self, metrics, shipment):
        assert score_rate_card(card("a", rate_structure="skid_based"), metrics, shipment, NOW) == 30

    def test_skid_fit_from_rate_type(self, metrics, shipment):
        """Cards typed only by rateType get the bonus their dispatch implies."""
        typed = RateCard(id="a", rate_type="skid_based")
        assert score_rate_card(typed, metrics, shipment, NOW) == 30

    def test_skid_fit_over_truckload(self, metrics, shipment):
        big = replace(metrics, skid_equivalents=27)
        assert score_rate_card(card("a", rate_structure="skid_based"), big, shipment, NOW) == 0

    def test_weight_fit(self, metrics, shipment):
        assert score_rate_card(card("a", max_weight=1000), metrics, shipment, NOW) == 20
        assert score_rate_card(card("a", max_weight=100), metrics, shipment, NOW) == 0

    def test_recency_bonus(self):
        assert recency_bonus(NOW - timedelta(days=5), NOW) == pytest.approx(15.0)
        assert recency_bonus(NOW - timedelta(days=30), NOW) == 0
        assert recency_bonus(None, NOW) == 0

    def test_future_card_clamped(self):
        assert recency_bonus(NOW + timedelta(days=3), NOW) == pytest.approx(20.0)


# =============================================================================
# SELECTION
# =============================================================================

class TestSelectRateCard:
    """Tests for best-card selection."""

    def test_no_cards(self, metrics, shipment):
        with pytest.raises(NoApplicableRateCardError):
            select_rate_card([], metrics, shipment, NOW)

    def test_matching_service_level_preferred(self, metrics, shipment):
        cards = [card("generic"), card("standard", service_level="standard")]
        assert select_rate_card(cards, metrics, shipment, NOW).id == "standard"

    def test_mismatched_service_level_filtered(self, metrics, shipment):
        """An express card cannot win a standard shipment while others remain."""
        cards = [
            card("express", service_level="express", rate_structure="skid_based", max_weight=1000),
            card("generic"),
        ]
        assert select_rate_card(cards, metrics, shipment, NOW).id == "generic"

    def test_all_filtered_uses_every_card(self, metrics, shipment):
        cards = [
            card("express", service_level="express"),
            card("economy", service_level="economy", rate_structure="skid_based"),
        ]
        assert select_rate_card(cards, metrics, shipment, NOW).id == "economy"

    def test_newer_card_wins(self, metrics, shipment):
        cards = [
            card("old", created_at=NOW - timedelta(days=60)),
            card("new", created_at=NOW - timedelta(days=2)),
        ]
        assert select_rate_card(cards, metrics, shipment, NOW).id == "new"

    def test_tie_keeps_input_order(self, metrics, shipment):
        cards = [card("first"), card("second"), card("third")]
        assert select_rate_card(cards, metrics, shipment, NOW).id == "first"

    def test_naive_now_treated_as_utc(self, metrics, shipment):
        cards = [
            card("old", created_at="2025-01-01T00:00:00Z"),
            card("new", created_at="2026-01-18T00:00:00Z"),
        ]
        naive = datetime(2026, 1, 20)
        assert select_rate_card(cards, metrics, shipment, naive).id == "new"
