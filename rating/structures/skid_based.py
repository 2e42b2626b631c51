"""
Skid-Based Rates

Prices by floor space: one rate per skid count.

SKID ENTRY SELECTION
--------------------
1. Entry whose skid_count equals the shipment's skid equivalents
2. Lowest entry with skid_count above it
3. Highest entry available

Fuel is a percentage of the skid rate (entry, then card, then 15.5%).
"""

import polars as pl

from ..accessors import (
    resolve_currency,
    resolve_fuel_percent,
    resolve_skid_rate_amount,
    resolve_transit_time,
)
from ..data.reference.fuel import SKID_FUEL_PERCENT
from ..errors import RateConfigurationError
from ..models import RateCard, RateStructureType, SkidRate
from ..results import RateCalculationResult, ShipmentMetrics, format_number
from .base import RateStructure


def lookup_skid_rate(skid_rates: list[SkidRate], skid_count: int) -> SkidRate:
    """Pick the skid entry for a skid count (see module docstring)."""
    table = (
        pl.DataFrame(
            {"skid_count": [entry.skid_count for entry in skid_rates]},
            schema={"skid_count": pl.Int64},
        )
        .with_row_index("_row_id")
        .filter(pl.col("skid_count").is_not_null())
    )

    match = table.filter(pl.col("skid_count") == skid_count)
    if match.is_empty():
        match = (
            table
            .filter(pl.col("skid_count") >= skid_count)
            .sort("skid_count", maintain_order=True)
        )
    if match.is_empty():
        match = table.sort("skid_count", descending=True, maintain_order=True)
    if match.is_empty():
        raise RateConfigurationError(f"No skid rate configuration found for {skid_count} skids")

    return skid_rates[match["_row_id"][0]]


class SkidBased(RateStructure):
    """Skid count rate plus fuel."""

    structure = RateStructureType.SKID_BASED
    source = "skid_based"

    required_table = "skid_rates"
    table_label = "skid rates"

    @classmethod
    def price(cls, card: RateCard, metrics: ShipmentMetrics) -> RateCalculationResult:
        skid_count = max(1, metrics.skid_equivalents)
        entry = lookup_skid_rate(card.skid_rates, skid_count)

        base_rate = resolve_skid_rate_amount(entry)
        fuel_percent = resolve_fuel_percent(entry, card, SKID_FUEL_PERCENT)
        fuel = base_rate * (fuel_percent / 100)

        plural = "s" if skid_count > 1 else ""
        weight = f"{format_number(metrics.chargeable_weight)} {metrics.weight_unit}"
        lines = [
            cls.line("FRT", f"Freight - {skid_count} Skid{plural} ({weight})", base_rate, card),
        ]
        if fuel > 0:
            lines.append(cls.fuel_line(fuel, fuel_percent, card))

        return cls.result(
            lines,
            base_total=base_rate,
            final_total=base_rate + fuel,
            transit_time=resolve_transit_time(entry.transit_days, metrics.distance),
            notes=(
                f"{skid_count} skid{plural} @ {format_number(base_rate)} "
                f"{resolve_currency(card)}"
            ),
        )
