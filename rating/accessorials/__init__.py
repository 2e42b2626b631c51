"""
Accessorials Package

Flat-fee additional services appended after the base freight charge.
Service codes match case-insensitively; an unrecognized code is still
charged at the default accessorial price under its own label.

Usage:
    from rating.accessorials import calculate_additional_services
"""

from ..accessors import resolve_currency
from ..data.reference.pricing import COST_RATIO, DEFAULT_ACCESSORIAL_PRICE
from ..models import RateCard
from ..results import RateBreakdownLine
from .appointment import Appointment
from .base import Accessorial
from .inside_delivery import InsideDelivery
from .liftgate import Liftgate
from .residential import Residential
from .tailgate import Tailgate

SOURCE = "additional_service"


ALL: list[type[Accessorial]] = [
    Residential, Liftgate, InsideDelivery, Appointment, Tailgate,
]


# =============================================================================
# VALIDATION
# =============================================================================

def validate_accessorials() -> None:
    """
    Validate accessorial configuration integrity.

    Raises ValueError if any configuration issues are found.
    Called at import time to fail fast on configuration errors.
    """
    errors = []
    owners: dict[str, str] = {}

    for a in ALL:
        if not a.codes:
            errors.append(f"{a.name}: no service codes")
        for code in a.codes:
            if code != code.lower():
                errors.append(f"{a.name}: code '{code}' must be lowercase")
            if code in owners:
                errors.append(f"{a.name}: code '{code}' already used by {owners[code]}")
            owners[code] = a.name
        if a.list_price < 0:
            errors.append(f"{a.name}: list_price must not be negative")

    if errors:
        raise ValueError("Accessorial configuration errors:\n  " + "\n  ".join(errors))


# Run validation at import time
validate_accessorials()


# =============================================================================
# CALCULATION
# =============================================================================

def find_accessorial(code: str) -> type[Accessorial] | None:
    for a in ALL:
        if a.matches(code):
            return a
    return None


def calculate_additional_services(
    services: list[str],
    base_total: float,
    card: RateCard,
) -> list[RateBreakdownLine]:
    """
    One ACC line per requested service, in request order.

    Args:
        services: Requested service codes
        base_total: Strategy base total
        card: Selected rate card (currency only)
    """
    currency = resolve_currency(card)
    lines = []
    for code in services:
        accessorial = find_accessorial(code)
        if accessorial is not None:
            charge_name = accessorial.charge_name
            charge = accessorial.charge(base_total)
            cost = accessorial.cost(base_total)
        else:
            charge_name = code
            charge = DEFAULT_ACCESSORIAL_PRICE
            cost = charge * COST_RATIO

        lines.append(RateBreakdownLine(
            code="ACC",
            charge_name=charge_name,
            cost=round(cost, 2),
            charge=round(charge, 2),
            currency=currency,
            source=SOURCE,
        ))
    return lines


__all__ = [
    # Base
    "Accessorial",
    # Accessorial classes
    "Appointment",
    "InsideDelivery",
    "Liftgate",
    "Residential",
    "Tailgate",
    # Lists
    "ALL",
    # Helpers
    "find_accessorial",
    "calculate_additional_services",
]
