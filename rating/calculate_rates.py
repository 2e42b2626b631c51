"""
Universal Carrier Rate Calculator

Shipment in, priced response out, for one carrier. Carrier records come
from any store implementing the three lookups in rating.data.loaders
(carrier profile, enabled rate cards, eligibility rules).

PIPELINE
--------
    1. Fetch carrier profile, rate cards and eligibility rules (concurrently)
    2. calculate_metrics()       - weights, volume, skids, route, distance
    3. check_eligibility()       - ineligible carriers return IneligibleResult
    4. select_rate_card()        - best-fit card for the shipment
    5. calculate_by_structure()  - FRT/FSC or component lines from the card
    6. calculate_additional_services() - ACC lines
    7. assemble_response()       - totals, identity, timestamp, version

OUTCOMES
--------
    RatingResponse      - priced shipment
    IneligibleResult    - carrier rules reject the shipment (not an error)
    CarrierNotFoundError, RateConfigurationError - raised

USAGE
-----
    from rating.calculate_rates import calculate_rates
    response = await calculate_rates("carrier-1", shipment, store)
"""

import asyncio
import logging
from datetime import datetime

import polars as pl

from .accessorials import calculate_additional_services
from .accessors import resolve_currency, resolve_structure
from .data.loaders import RatingStore
from .data.reference.pricing import DEFAULT_SERVICE_LEVEL
from .errors import CarrierNotFoundError, NoApplicableRateCardError
from .models import CarrierProfile, EligibilityRuleSet, RateCard, ShipmentDescription
from .pipeline import calculate_metrics, check_eligibility, select_rate_card
from .pipeline.selection import as_utc
from .results import (
    CarrierSummary,
    IneligibleResult,
    RateBreakdownLine,
    RateCalculationResult,
    RateCardSummary,
    RatingResponse,
    ShipmentMetrics,
)
from .structures import calculate_by_structure
from .version import VERSION

LOGGER = logging.getLogger(__name__)


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

async def calculate_rates(
    carrier_id: str,
    shipment: ShipmentDescription,
    store: RatingStore,
    now: datetime | None = None,
) -> RatingResponse | IneligibleResult:
    """
    Rate a shipment for one carrier.

    Args:
        carrier_id: Carrier to rate
        shipment: Shipment to price
        store: Source of carrier records
        now: Pinned clock for rate card recency and the response timestamp

    Returns:
        RatingResponse, or IneligibleResult if the carrier's rules reject it

    Raises:
        CarrierNotFoundError: no profile for carrier_id
        NoApplicableRateCardError: carrier has no enabled rate cards
        RateConfigurationError: selected card cannot price the shipment
    """
    carrier, rate_cards, rules = await asyncio.gather(
        store.get_carrier_profile(carrier_id),
        store.list_rate_cards(carrier_id),
        store.get_eligibility_rules(carrier_id),
    )
    if carrier is None:
        raise CarrierNotFoundError(carrier_id)

    return rate_shipment(carrier, rate_cards, rules, shipment, now=now)


def rate_shipment(
    carrier: CarrierProfile,
    rate_cards: list[RateCard],
    rules: EligibilityRuleSet,
    shipment: ShipmentDescription,
    now: datetime | None = None,
    postal_regions: pl.DataFrame | None = None,
    region_distances: pl.DataFrame | None = None,
) -> RatingResponse | IneligibleResult:
    """
    Synchronous rating pipeline over already-fetched carrier records.

    Args:
        carrier: Carrier profile
        rate_cards: Enabled rate cards for the carrier
        rules: Carrier eligibility rules
        shipment: Shipment to price
        now: Pinned clock (current UTC time if not provided)
        postal_regions: Postal prefix mapping (loaded if not provided)
        region_distances: Inter-region distances (loaded if not provided)
    """
    now = as_utc(now)
    LOGGER.info("Calculating rates for carrier %s", carrier.id)

    metrics = calculate_metrics(shipment, postal_regions, region_distances)

    verdict = check_eligibility(metrics, rules)
    if not verdict.eligible:
        LOGGER.warning("Carrier %s ineligible: %s", carrier.id, "; ".join(verdict.reasons))
        return IneligibleResult(carrier_id=carrier.id, reasons=verdict.reasons)

    if not rate_cards:
        LOGGER.warning("No rate cards found for carrier %s", carrier.id)
        raise NoApplicableRateCardError(carrier.id)

    card = select_rate_card(rate_cards, metrics, shipment, now)
    calculation = calculate_by_structure(card, metrics)
    additional = calculate_additional_services(
        shipment.additional_services,
        calculation.base_total,
        card,
    )

    response = assemble_response(carrier, card, metrics, calculation, additional, now)
    LOGGER.info(
        "Carrier %s rated with card %s (%s): %.2f %s",
        carrier.id,
        card.id,
        response.rate_card.structure,
        response.final_total,
        response.currency,
    )
    return response


# =============================================================================
# RESULT ASSEMBLY
# =============================================================================

def assemble_response(
    carrier: CarrierProfile,
    card: RateCard,
    metrics: ShipmentMetrics,
    calculation: RateCalculationResult,
    additional: list[RateBreakdownLine],
    now: datetime,
) -> RatingResponse:
    """Strategy lines first, then accessorials; final = strategy final + accessorials."""
    additional_total = round(sum(line.charge for line in additional), 2)

    return RatingResponse(
        carrier=CarrierSummary(id=carrier.id, name=carrier.name, logo=carrier.logo),
        rate_card=RateCardSummary(
            id=card.id,
            name=card.rate_card_name,
            type=card.rate_type,
            structure=resolve_structure(card).value,
        ),
        shipment_metrics=metrics,
        rate_breakdown=[*calculation.rate_breakdown, *additional],
        base_total=calculation.base_total,
        additional_services_total=additional_total,
        final_total=round(calculation.final_total + additional_total, 2),
        currency=resolve_currency(card),
        transit_time=calculation.transit_time,
        service_level=card.service_level or DEFAULT_SERVICE_LEVEL,
        notes=calculation.notes,
        calculated_at=now,
        calculator_version=VERSION,
    )


__all__ = [
    "calculate_rates",
    "rate_shipment",
    "assemble_response",
]
