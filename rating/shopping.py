"""
Multi-Carrier Rate Shopping

Rates one shipment against several carriers concurrently. Each carrier is
independent: an ineligible carrier or a configuration error for one never
stops the others.

COMPARISON
----------
    cheapest     - lowest final_total
    fastest      - fewest transit days (first integer in transit_time)
    recommended  - highest 0.4 * price_score + 0.6 * speed_score,
                   each score normalized to [0, 1] across the quotes
    price_range  - min, max, average final_total
"""

import asyncio
import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any

from .accessors import parse_transit_days
from .calculate_rates import calculate_rates
from .data.loaders import RatingStore
from .models import ShipmentDescription
from .results import IneligibleResult, RatingResponse

LOGGER = logging.getLogger(__name__)

PRICE_WEIGHT = 0.4
SPEED_WEIGHT = 0.6


@dataclass(frozen=True)
class CarrierFailure:
    carrier_id: str
    error: str


@dataclass(frozen=True)
class PriceRange:
    min: float
    max: float
    average: float


@dataclass(frozen=True)
class RateComparison:
    cheapest: RatingResponse | None = None
    fastest: RatingResponse | None = None
    recommended: RatingResponse | None = None
    price_range: PriceRange | None = None


@dataclass(frozen=True)
class ShoppingResult:
    """Quotes sorted by final_total, plus carriers that produced none."""

    quotes: list[RatingResponse]
    ineligible: list[IneligibleResult]
    failures: list[CarrierFailure]
    comparison: RateComparison = field(default_factory=RateComparison)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        for quote, raw in zip(self.quotes, data["quotes"]):
            raw["calculated_at"] = quote.calculated_at.isoformat()
        for key in ("cheapest", "fastest", "recommended"):
            quote = getattr(self.comparison, key)
            if quote is not None:
                data["comparison"][key] = quote.to_dict()
        return data


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

async def shop_rates(
    carrier_ids: list[str],
    shipment: ShipmentDescription,
    store: RatingStore,
    now: datetime | None = None,
) -> ShoppingResult:
    """
    Rate a shipment with every carrier concurrently.

    Args:
        carrier_ids: Carriers to rate
        shipment: Shipment to price
        store: Source of carrier records
        now: Pinned clock shared by every carrier

    Returns:
        ShoppingResult with quotes, ineligible carriers and failures
    """
    outcomes = await asyncio.gather(
        *(calculate_rates(carrier_id, shipment, store, now=now) for carrier_id in carrier_ids),
        return_exceptions=True,
    )

    quotes, ineligible, failures = [], [], []
    for carrier_id, outcome in zip(carrier_ids, outcomes):
        if isinstance(outcome, BaseException):
            if not isinstance(outcome, Exception):
                raise outcome
            LOGGER.warning("Rating failed for carrier %s: %s", carrier_id, outcome)
            failures.append(CarrierFailure(carrier_id=carrier_id, error=str(outcome)))
        elif isinstance(outcome, IneligibleResult):
            ineligible.append(outcome)
        else:
            quotes.append(outcome)

    quotes.sort(key=lambda quote: quote.final_total)
    LOGGER.info(
        "Shopped %d carriers: %d quotes, %d ineligible, %d failed",
        len(carrier_ids), len(quotes), len(ineligible), len(failures),
    )

    return ShoppingResult(
        quotes=quotes,
        ineligible=ineligible,
        failures=failures,
        comparison=compare_quotes(quotes),
    )


# =============================================================================
# COMPARISON
# =============================================================================

def _normalized_inverse(values: list[float]) -> list[float]:
    """Lowest value scores 1, highest scores 0; all equal scores 1."""
    low, high = min(values), max(values)
    if high == low:
        return [1.0 for _ in values]
    return [(high - value) / (high - low) for value in values]


def compare_quotes(quotes: list[RatingResponse]) -> RateComparison:
    """Cheapest, fastest and recommended quote. Ties keep input order."""
    if not quotes:
        return RateComparison()

    prices = [quote.final_total for quote in quotes]
    days = [parse_transit_days(quote.transit_time) for quote in quotes]

    price_scores = _normalized_inverse(prices)
    speed_scores = _normalized_inverse([float(d) for d in days])
    combined = [
        PRICE_WEIGHT * price + SPEED_WEIGHT * speed
        for price, speed in zip(price_scores, speed_scores)
    ]

    indexes = range(len(quotes))
    return RateComparison(
        cheapest=quotes[min(indexes, key=lambda i: prices[i])],
        fastest=quotes[min(indexes, key=lambda i: days[i])],
        recommended=quotes[max(indexes, key=lambda i: combined[i])],
        price_range=PriceRange(
            min=min(prices),
            max=max(prices),
            average=round(sum(prices) / len(prices), 2),
        ),
    )


__all__ = [
    "shop_rates",
    "compare_quotes",
    "ShoppingResult",
    "RateComparison",
    "PriceRange",
    "CarrierFailure",
]
