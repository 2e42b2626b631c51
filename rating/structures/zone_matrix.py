"""
Zone Matrix Rates

Flat rate per (origin zone, destination zone) pair.

ZONE PAIR MATCHING
------------------
1. Exact (origin_zone, destination_zone)
2. Reversed pair
3. route_key in either direction ("ON-QC" or "QC-ON")

No match in any direction is a configuration error. Fuel is a percentage
of the zone rate (entry, then card, then 0%).
"""

import polars as pl

from ..accessors import resolve_fuel_percent, resolve_transit_time
from ..data.reference.fuel import ZONE_FUEL_PERCENT
from ..errors import RateConfigurationError
from ..models import RateCard, RateStructureType, ZoneRate
from ..results import RateCalculationResult, Route, ShipmentMetrics
from .base import RateStructure


def lookup_zone_rate(zone_matrix: list[ZoneRate], route: Route) -> ZoneRate:
    """Zone matrix entry for a route, matched in either direction."""
    table = pl.DataFrame(
        {
            "origin_zone": [entry.origin_zone for entry in zone_matrix],
            "destination_zone": [entry.destination_zone for entry in zone_matrix],
            "route_key": [entry.route_key for entry in zone_matrix],
        },
        schema={"origin_zone": pl.Utf8, "destination_zone": pl.Utf8, "route_key": pl.Utf8},
    ).with_row_index("_row_id")

    origin = pl.col("origin_zone")
    destination = pl.col("destination_zone")
    conditions = [
        (origin == route.origin_zone) & (destination == route.destination_zone),
        (origin == route.destination_zone) & (destination == route.origin_zone),
        pl.col("route_key").is_in([route.route_key, route.reverse_key]),
    ]

    for condition in conditions:
        match = table.filter(condition)
        if not match.is_empty():
            return zone_matrix[match["_row_id"][0]]

    raise RateConfigurationError(
        f"No zone rate found for route {route.origin_zone} to {route.destination_zone}"
    )


class ZoneMatrix(RateStructure):
    """Zone pair rate plus fuel."""

    structure = RateStructureType.ZONE_MATRIX
    source = "zone_matrix"

    required_table = "zone_matrix"
    table_label = "zone matrix"

    @classmethod
    def price(cls, card: RateCard, metrics: ShipmentMetrics) -> RateCalculationResult:
        route = metrics.route
        entry = lookup_zone_rate(card.zone_matrix, route)

        base_rate = entry.rate or 0.0
        fuel_percent = resolve_fuel_percent(entry, card, ZONE_FUEL_PERCENT)
        fuel = base_rate * (fuel_percent / 100)

        lines = [
            cls.line(
                "FRT",
                f"Freight - {route.origin_zone} to {route.destination_zone}",
                base_rate,
                card,
            ),
        ]
        if fuel > 0:
            lines.append(cls.fuel_line(fuel, fuel_percent, card))

        return cls.result(
            lines,
            base_total=base_rate,
            final_total=base_rate + fuel,
            transit_time=resolve_transit_time(entry.transit_days, metrics.distance),
            notes=f"Zone route: {route.origin_zone} to {route.destination_zone}",
        )
