"""
Unit Tests for Additional Services

Run with: pytest rating/tests/test_accessorials.py -v
"""

import pytest

from rating.accessorials import (
    ALL,
    Liftgate,
    Residential,
    calculate_additional_services,
    find_accessorial,
)
from rating.models import RateCard


@pytest.fixture
def card():
    return RateCard(id="card-1", currency="CAD")


class TestCalculateAdditionalServices:
    """Tests for ACC line generation."""

    def test_liftgate_and_residential(self, card):
        """$75 + $25 on a $300 base."""
        lines = calculate_additional_services(["liftgate", "residential"], 300.0, card)
        assert [(line.code, line.charge_name, line.charge) for line in lines] == [
            ("ACC", "Liftgate Service", 75.00),
            ("ACC", "Residential Delivery", 25.00),
        ]
        assert sum(line.charge for line in lines) == pytest.approx(100.00)

    @pytest.mark.parametrize("code, expected", [
        ("residential", 25.00),
        ("residential_delivery", 25.00),
        ("liftgate", 75.00),
        ("liftgate_delivery", 75.00),
        ("inside_delivery", 50.00),
        ("appointment", 35.00),
        ("appointment_delivery", 35.00),
        ("tailgate", 45.00),
    ])
    def test_price_table(self, card, code, expected):
        [line] = calculate_additional_services([code], 300.0, card)
        assert line.charge == expected

    def test_case_insensitive(self, card):
        [line] = calculate_additional_services(["LiftGate"], 300.0, card)
        assert line.charge_name == "Liftgate Service"
        assert line.charge == 75.00

    def test_unknown_code_default_price(self, card):
        [line] = calculate_additional_services(["white_glove"], 300.0, card)
        assert line.charge_name == "white_glove"
        assert line.charge == 25.00
        assert line.cost == 17.50

    def test_cost_and_source(self, card):
        [line] = calculate_additional_services(["liftgate"], 300.0, card)
        assert line.cost == 52.50
        assert line.source == "additional_service"
        assert line.currency == "CAD"

    def test_currency_from_card(self):
        [line] = calculate_additional_services(["tailgate"], 0.0, RateCard(currency="USD"))
        assert line.currency == "USD"

    def test_no_services(self, card):
        assert calculate_additional_services([], 300.0, card) == []


class TestRegistry:
    def test_find_accessorial(self):
        assert find_accessorial("residential_delivery") is Residential
        assert find_accessorial(" LIFTGATE ") is Liftgate
        assert find_accessorial("hazmat") is None

    def test_codes_unique(self):
        codes = [code for a in ALL for code in a.codes]
        assert len(codes) == len(set(codes))
