"""
Prioritized Accessors

Rate card documents carry the same concept under different keys depending
on who entered them. Each function here owns the lookup order for one
concept, so the priority lives in exactly one place.
"""

import re

from .data.reference.pricing import DEFAULT_CURRENCY
from .data.reference.transit import (
    DEFAULT_TRANSIT_DAYS,
    LONG_HAUL_TRANSIT,
    TRANSIT_BANDS,
)
from .models import RateCard, RateStructureType, SkidRate, ZoneRate


def resolve_structure(card: RateCard) -> RateStructureType:
    """rateStructure, then rateType; unrecognized values map to OTHER."""
    return RateStructureType.parse(card.rate_structure or card.rate_type)


def resolve_skid_rate_amount(entry: SkidRate) -> float:
    """rate, then sell, then 0. A zero rate falls through to sell."""
    for amount in (entry.rate, entry.sell):
        if amount:
            return amount
    return 0.0


def resolve_fuel_percent(
    entry: SkidRate | ZoneRate,
    card: RateCard,
    default: float,
) -> float:
    """
    Fuel surcharge percent for a table entry.

    Entry value, then card value, then the structure default. An explicit
    0 is honored (no fuel line).
    """
    if entry.fuel_surcharge is not None:
        return entry.fuel_surcharge
    if card.fuel_surcharge is not None:
        return card.fuel_surcharge
    return default


def resolve_currency(card: RateCard) -> str:
    return card.currency or DEFAULT_CURRENCY


def default_transit_time(distance: float) -> str:
    """Business-day estimate from distance bands."""
    for upper_bound, label in TRANSIT_BANDS:
        if distance < upper_bound:
            return label
    return LONG_HAUL_TRANSIT


def resolve_transit_time(transit_days: str | None, distance: float) -> str:
    """
    Configured transit text if present, else the distance-band estimate.

    A bare number of days ("3") is expanded to "3 business days".
    """
    if not transit_days:
        return default_transit_time(distance)
    if transit_days.isdigit():
        days = int(transit_days)
        return f"{days} business day" if days == 1 else f"{days} business days"
    return transit_days


def parse_transit_days(transit_time: str | None) -> int:
    """First integer in a transit text ("5-7 business days" -> 5)."""
    if not transit_time:
        return DEFAULT_TRANSIT_DAYS
    match = re.search(r"\d+", transit_time)
    return int(match.group()) if match else DEFAULT_TRANSIT_DAYS


__all__ = [
    "resolve_structure",
    "resolve_skid_rate_amount",
    "resolve_fuel_percent",
    "resolve_currency",
    "default_transit_time",
    "resolve_transit_time",
    "parse_transit_days",
]
