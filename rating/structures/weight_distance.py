"""
Weight + Distance Rates

Per-weight-unit rate from a weight break, scaled by distance.

    distance_multiplier = max(1, distance / 100 * distance_factor)   (1 if distance is 0)
    base_rate           = max(chargeable_weight * rate_per_lb * distance_multiplier,
                              minimum_charge)

Weight breaks are inclusive on both ends; a missing or zero max_weight is
open-ended. On overlap the break with the lowest min_weight wins.
"""

import polars as pl

from ..accessors import default_transit_time
from ..errors import RateConfigurationError
from ..models import RateCard, RateStructureType, WeightBreak
from ..results import RateCalculationResult, ShipmentMetrics, format_number
from .base import RateStructure


def lookup_weight_break(weight_breaks: list[WeightBreak], weight: float) -> WeightBreak:
    """Weight break containing a chargeable weight."""
    table = pl.DataFrame(
        {
            "min_weight": [entry.min_weight for entry in weight_breaks],
            "max_weight": [entry.max_weight for entry in weight_breaks],
        },
        schema={"min_weight": pl.Float64, "max_weight": pl.Float64},
    ).with_row_index("_row_id")

    match = (
        table
        .with_columns([
            pl.col("min_weight").fill_null(0.0).alias("_lower"),
            pl.when(pl.col("max_weight").fill_null(0.0) > 0)
            .then(pl.col("max_weight"))
            .otherwise(pl.lit(float("inf")))
            .alias("_upper"),
        ])
        .filter((pl.col("_lower") <= weight) & (pl.col("_upper") >= weight))
        .sort("_lower", maintain_order=True)
    )
    if match.is_empty():
        raise RateConfigurationError(f"No weight break found for {format_number(weight)}")

    return weight_breaks[match["_row_id"][0]]


class WeightDistance(RateStructure):
    """Weight break rate scaled by distance, with a minimum charge."""

    structure = RateStructureType.WEIGHT_DISTANCE
    source = "weight_distance"

    required_table = "weight_breaks"
    table_label = "weight breaks"

    @classmethod
    def price(cls, card: RateCard, metrics: ShipmentMetrics) -> RateCalculationResult:
        weight = metrics.chargeable_weight
        distance = metrics.distance
        entry = lookup_weight_break(card.weight_breaks, weight)

        rate_per_lb = entry.rate_per_lb or 0.0
        minimum_charge = entry.minimum_charge or 0.0
        distance_factor = entry.distance_factor or 1.0

        distance_multiplier = max(1.0, (distance / 100) * distance_factor) if distance > 0 else 1.0
        base_rate = max(weight * rate_per_lb * distance_multiplier, minimum_charge)

        unit = metrics.weight_unit
        lines = [
            cls.line(
                "FRT",
                f"Freight - {format_number(weight)} {unit} @ {distance} miles",
                base_rate,
                card,
            ),
        ]

        return cls.result(
            lines,
            base_total=base_rate,
            final_total=base_rate,
            transit_time=default_transit_time(distance),
            notes=(
                f"{format_number(weight)} {unit} x ${format_number(rate_per_lb)}/{unit} "
                f"x {distance_multiplier:.2f} distance factor"
            ),
        )
