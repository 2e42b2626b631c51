"""
Dimensional Weight Rates

    base_rate = max(chargeable_weight * dim_weight_rate, minimum_charge)

Defaults: 0.65 per weight unit, 150.00 minimum.
"""

from ..accessors import default_transit_time
from ..data.reference.pricing import DIM_WEIGHT_MINIMUM, DIM_WEIGHT_RATE
from ..models import RateCard, RateStructureType
from ..results import RateCalculationResult, ShipmentMetrics, format_number
from .base import RateStructure


class DimensionalWeight(RateStructure):
    """Per-unit rate on chargeable weight with a minimum."""

    structure = RateStructureType.DIMENSIONAL_WEIGHT
    source = "dimensional_weight"

    @classmethod
    def price(cls, card: RateCard, metrics: ShipmentMetrics) -> RateCalculationResult:
        rate = card.dim_weight_rate or DIM_WEIGHT_RATE
        minimum_charge = card.minimum_charge or DIM_WEIGHT_MINIMUM
        weight = metrics.chargeable_weight
        unit = metrics.weight_unit

        base_rate = max(weight * rate, minimum_charge)

        lines = [
            cls.line(
                "FRT",
                f"Dimensional Weight - {format_number(weight)} {unit} (DIM: {metrics.dim_factor})",
                base_rate,
                card,
            ),
        ]

        return cls.result(
            lines,
            base_total=base_rate,
            final_total=base_rate,
            transit_time=default_transit_time(metrics.distance),
            notes=(
                f"Chargeable weight: {format_number(weight)} {unit} "
                f"(actual: {format_number(metrics.total_weight)}, "
                f"dim: {format_number(metrics.dimensional_weight)})"
            ),
        )
