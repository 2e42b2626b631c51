"""Flat Rates - one fixed amount regardless of the shipment."""

from ..data.reference.pricing import FLAT_RATE, FLAT_RATE_TRANSIT
from ..models import RateCard, RateStructureType
from ..results import RateCalculationResult, ShipmentMetrics
from .base import RateStructure


class FlatRate(RateStructure):
    """Card flat rate (default 100.00)."""

    structure = RateStructureType.FLAT_RATE
    source = "flat_rate"

    @classmethod
    def price(cls, card: RateCard, metrics: ShipmentMetrics) -> RateCalculationResult:
        flat_rate = card.flat_rate or FLAT_RATE
        return cls.result(
            [cls.line("FRT", "Flat Rate", flat_rate, card)],
            base_total=flat_rate,
            final_total=flat_rate,
            transit_time=FLAT_RATE_TRANSIT,
            notes="Flat rate pricing",
        )
