"""
Rate Card Selection

Picks the single best-fit rate card for a shipment.

    1. Keep cards whose service level matches the request (case-insensitive)
       or that declare none; if that leaves nothing, keep every card
    2. Score each card (see data/reference/scoring.py)
    3. Highest score wins; ties keep input order
"""

import logging
from datetime import datetime, timezone

from ..accessors import resolve_structure
from ..data.reference.scoring import (
    MAX_TRUCKLOAD_SKIDS,
    RECENCY_DAYS,
    SERVICE_LEVEL_MATCH,
    SKID_FIT,
    WEIGHT_FIT,
)
from ..errors import NoApplicableRateCardError
from ..models import RateCard, RateStructureType, ShipmentDescription
from ..results import ShipmentMetrics

LOGGER = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400


def as_utc(now: datetime | None) -> datetime:
    """Current time when not pinned; naive values are taken as UTC."""
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now


def recency_bonus(created_at: datetime | None, now: datetime) -> float:
    """max(0, 20 - age in days). Undated cards get nothing."""
    if created_at is None:
        return 0.0
    age_days = max(0.0, (now - created_at).total_seconds() / SECONDS_PER_DAY)
    return max(0.0, RECENCY_DAYS - age_days)


def score_rate_card(
    card: RateCard,
    metrics: ShipmentMetrics,
    shipment: ShipmentDescription,
    now: datetime,
) -> float:
    score = 0.0

    if card.service_level and card.service_level.lower() == shipment.service_level.lower():
        score += SERVICE_LEVEL_MATCH

    if (
        resolve_structure(card) is RateStructureType.SKID_BASED
        and metrics.skid_equivalents <= MAX_TRUCKLOAD_SKIDS
    ):
        score += SKID_FIT

    if card.max_weight and metrics.chargeable_weight <= card.max_weight:
        score += WEIGHT_FIT

    return score + recency_bonus(card.created_at, now)


def select_rate_card(
    rate_cards: list[RateCard],
    metrics: ShipmentMetrics,
    shipment: ShipmentDescription,
    now: datetime | None = None,
) -> RateCard:
    """
    Select the best rate card for a shipment.

    Raises:
        NoApplicableRateCardError: rate_cards is empty
    """
    if not rate_cards:
        raise NoApplicableRateCardError()

    now = as_utc(now)
    requested = shipment.service_level.lower()

    candidates = [
        card for card in rate_cards
        if not card.service_level or card.service_level.lower() == requested
    ]
    if not candidates:
        candidates = list(rate_cards)

    scores = [score_rate_card(card, metrics, shipment, now) for card in candidates]
    best_index = max(range(len(candidates)), key=lambda i: scores[i])

    LOGGER.debug(
        "Rate card scores: %s",
        {card.id: round(score, 2) for card, score in zip(candidates, scores)},
    )
    return candidates[best_index]


__all__ = [
    "as_utc",
    "recency_bonus",
    "score_rate_card",
    "select_rate_card",
]
