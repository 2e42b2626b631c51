"""
Unit Tests for Shipment Pre-Validation

Run with: pytest rating/tests/test_validation.py -v
"""

from rating.models import ShipmentDescription
from rating.validation import validate_shipment_for_rating


def make_shipment(**fields) -> ShipmentDescription:
    document = {
        "shipFrom": {"postalCode": "M5V 2T6"},
        "shipTo": {"postalCode": "H3B 1A1"},
        "packages": [{"weight": 100, "length": 48, "width": 40, "height": 40}],
    }
    document.update(fields)
    return ShipmentDescription.model_validate(document)


class TestValidateShipment:
    """Tests for advisory validation messages."""

    def test_complete_shipment(self):
        report = validate_shipment_for_rating(make_shipment())
        assert report.is_valid is True
        assert report.errors == []

    def test_missing_postal_codes(self):
        report = validate_shipment_for_rating(make_shipment(shipFrom={"city": "Toronto"}, shipTo=None))
        assert report.is_valid is False
        assert report.errors == [
            "Ship From postal code is required",
            "Ship To postal code is required",
        ]

    def test_no_packages(self):
        report = validate_shipment_for_rating(make_shipment(packages=[]))
        assert report.errors == ["At least one package is required"]

    def test_package_fields(self):
        report = validate_shipment_for_rating(make_shipment(packages=[
            {"weight": 100, "length": 48, "width": 40, "height": 40},
            {"weight": 0, "length": "", "width": 40},
        ]))
        assert report.errors == [
            "Package 2: Weight is required",
            "Package 2: Length is required",
            "Package 2: Height is required",
        ]

    def test_blank_postal_code(self):
        report = validate_shipment_for_rating(make_shipment(shipTo={"postalCode": "   "}))
        assert report.errors == ["Ship To postal code is required"]
