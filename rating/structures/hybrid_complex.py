"""
Hybrid Rates

Sum of independent components, each itemized on its own line:

    BASE  base_rate (default 200.00)            always present
    SKD   skid_rate * skid_equivalents          when > 0
    WGT   weight_rate * chargeable_weight       when > 0
    DST   distance_rate * distance              when > 0
"""

from ..accessors import default_transit_time
from ..data.reference.pricing import HYBRID_BASE_RATE
from ..models import RateCard, RateStructureType
from ..results import RateCalculationResult, ShipmentMetrics, format_number
from .base import RateStructure


class HybridComplex(RateStructure):
    """Base + per-skid + per-weight + per-distance components."""

    structure = RateStructureType.HYBRID_COMPLEX
    source = "hybrid_base"

    @classmethod
    def price(cls, card: RateCard, metrics: ShipmentMetrics) -> RateCalculationResult:
        base_rate = card.base_rate or HYBRID_BASE_RATE
        skid_charge = (card.skid_rate or 0.0) * metrics.skid_equivalents
        weight_charge = (card.weight_rate or 0.0) * metrics.chargeable_weight
        distance_charge = (card.distance_rate or 0.0) * metrics.distance

        skids = metrics.skid_equivalents
        weight = f"{format_number(metrics.chargeable_weight)} {metrics.weight_unit}"

        lines = [cls.line("BASE", "Base Rate", base_rate, card)]
        if skid_charge > 0:
            lines.append(cls.line(
                "SKD", f"Skid Charge ({skids} skid{'s' if skids != 1 else ''})",
                skid_charge, card, source="hybrid_skid",
            ))
        if weight_charge > 0:
            lines.append(cls.line(
                "WGT", f"Weight Charge ({weight})",
                weight_charge, card, source="hybrid_weight",
            ))
        if distance_charge > 0:
            lines.append(cls.line(
                "DST", f"Distance Charge ({metrics.distance} miles)",
                distance_charge, card, source="hybrid_distance",
            ))

        total = sum(line.charge for line in lines)

        return cls.result(
            lines,
            base_total=total,
            final_total=total,
            transit_time=default_transit_time(metrics.distance),
            notes="Hybrid rate calculation",
        )
