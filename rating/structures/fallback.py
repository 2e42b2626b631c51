"""
Fallback Estimate

Used for cards whose structure is not recognized:

    estimate = max(200.00, chargeable_weight * 0.65)
"""

from ..accessors import default_transit_time
from ..data.reference.pricing import FALLBACK_MINIMUM, FALLBACK_RATE
from ..models import RateCard, RateStructureType
from ..results import RateCalculationResult, ShipmentMetrics
from .base import RateStructure


class Fallback(RateStructure):
    """Weight-based estimate with a floor."""

    structure = RateStructureType.OTHER
    source = "fallback"

    @classmethod
    def price(cls, card: RateCard, metrics: ShipmentMetrics) -> RateCalculationResult:
        estimate = max(FALLBACK_MINIMUM, metrics.chargeable_weight * FALLBACK_RATE)
        return cls.result(
            [cls.line("FRT", "Estimated Freight", estimate, card)],
            base_total=estimate,
            final_total=estimate,
            transit_time=default_transit_time(metrics.distance),
            notes="Estimated rate (no specific rate card configuration found)",
        )
