"""
Shipment Pre-Validation

Advisory checks a caller can run before rating. The engine itself coerces
missing values rather than rejecting them.
"""

from dataclasses import dataclass, field

from .models import ShipmentDescription

PACKAGE_FIELDS = [
    ("Weight", "weight"),
    ("Length", "length"),
    ("Width", "width"),
    ("Height", "height"),
]


@dataclass(frozen=True)
class ValidationReport:
    is_valid: bool
    errors: list[str] = field(default_factory=list)


def validate_shipment_for_rating(shipment: ShipmentDescription) -> ValidationReport:
    """Report every missing address or package field, in document order."""
    errors = []

    if shipment.origin is None or not shipment.origin.postal_code:
        errors.append("Ship From postal code is required")
    if shipment.destination is None or not shipment.destination.postal_code:
        errors.append("Ship To postal code is required")

    if not shipment.packages:
        errors.append("At least one package is required")

    for number, package in enumerate(shipment.packages, start=1):
        for label, attribute in PACKAGE_FIELDS:
            if getattr(package, attribute) <= 0:
                errors.append(f"Package {number}: {label} is required")

    return ValidationReport(is_valid=not errors, errors=errors)


__all__ = [
    "ValidationReport",
    "validate_shipment_for_rating",
]
