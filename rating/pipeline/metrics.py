"""
Shipment Metrics

Derives the physical facts every later step prices against. Packages are
loaded into a DataFrame, measured per row, then aggregated to one row.

PER PACKAGE (multiplied by quantity)
------------------------------------
    line_weight     = weight * quantity
    line_volume     = length * width * height * quantity
    line_footprint  = length * width * quantity
                      (missing length/width -> one skid side)

AGGREGATES
----------
    total_weight, total_volume, total_pieces
    max_length/width/height   - largest single package, not multiplied
    skid_equivalents          - ceil(total_footprint / skid_footprint)
    dimensional_weight        - total_volume / dim_factor
    chargeable_weight         - max(total_weight, dimensional_weight)

All figures are rounded to 2 decimals except distance (whole miles).
"""

import logging
import math

import polars as pl

from ..data.reference.billable_weight import (
    COURIER_EXPRESS_DIM_FACTOR,
    COURIER_SHIPMENT_TYPE,
    EXPRESS_SERVICE_LEVEL,
    SKID_SIDE,
    STANDARD_DIM_FACTOR,
)
from ..models import ShipmentDescription
from ..results import ShipmentMetrics
from .zones import resolve_route

LOGGER = logging.getLogger(__name__)


PACKAGE_SCHEMA = {
    "weight": pl.Float64,
    "length": pl.Float64,
    "width": pl.Float64,
    "height": pl.Float64,
    "quantity": pl.Int64,
}


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def calculate_metrics(
    shipment: ShipmentDescription,
    postal_regions: pl.DataFrame | None = None,
    region_distances: pl.DataFrame | None = None,
) -> ShipmentMetrics:
    """
    Calculate shipment metrics.

    Args:
        shipment: Shipment to measure
        postal_regions: Postal prefix mapping (loaded if not provided)
        region_distances: Inter-region distances (loaded if not provided)

    Returns:
        ShipmentMetrics for this shipment
    """
    skid_side = SKID_SIDE[shipment.unit_system]

    df = packages_frame(shipment)
    df = _add_package_measures(df, skid_side)
    totals = _aggregate(df)

    skid_equivalents = math.ceil(round(totals["total_footprint"] / (skid_side * skid_side), 6))
    dim_factor = dimensional_factor(shipment.shipment_type, shipment.service_level)
    dimensional_weight = totals["total_volume"] / dim_factor
    chargeable_weight = max(totals["total_weight"], dimensional_weight)

    route, distance = resolve_route(
        shipment.origin,
        shipment.destination,
        postal_regions,
        region_distances,
    )

    metrics = ShipmentMetrics(
        total_weight=round(totals["total_weight"], 2),
        dimensional_weight=round(dimensional_weight, 2),
        chargeable_weight=round(chargeable_weight, 2),
        total_volume=round(totals["total_volume"], 2),
        skid_equivalents=skid_equivalents,
        max_length=round(totals["max_length"] or 0.0, 2),
        max_width=round(totals["max_width"] or 0.0, 2),
        max_height=round(totals["max_height"] or 0.0, 2),
        total_pieces=int(totals["total_pieces"]),
        package_count=int(totals["package_count"]),
        distance=distance,
        route=route,
        dim_factor=dim_factor,
        unit_system=shipment.unit_system,
    )
    LOGGER.debug("Shipment metrics calculated: %s", metrics)
    return metrics


def dimensional_factor(shipment_type: str | None, service_level: str | None) -> int:
    """139 for courier express, 166 for everything else."""
    if (shipment_type or "").lower() == COURIER_SHIPMENT_TYPE:
        if (service_level or "").lower() == EXPRESS_SERVICE_LEVEL:
            return COURIER_EXPRESS_DIM_FACTOR
    return STANDARD_DIM_FACTOR


# =============================================================================
# PACKAGE FRAME
# =============================================================================

def packages_frame(shipment: ShipmentDescription) -> pl.DataFrame:
    """One row per package line, typed even when there are no packages."""
    return pl.DataFrame(
        {
            column: [getattr(package, column) for package in shipment.packages]
            for column in PACKAGE_SCHEMA
        },
        schema=PACKAGE_SCHEMA,
    )


def _add_package_measures(df: pl.DataFrame, skid_side: float) -> pl.DataFrame:
    """Add weight, volume and floor footprint per package line."""
    return df.with_columns([
        (pl.col("weight") * pl.col("quantity"))
        .alias("line_weight"),

        (pl.col("length") * pl.col("width") * pl.col("height") * pl.col("quantity"))
        .alias("line_volume"),

        # Missing length/width occupy a full skid side
        (
            pl.when(pl.col("length") > 0).then(pl.col("length")).otherwise(pl.lit(skid_side)) *
            pl.when(pl.col("width") > 0).then(pl.col("width")).otherwise(pl.lit(skid_side)) *
            pl.col("quantity")
        ).alias("line_footprint"),
    ])


def _aggregate(df: pl.DataFrame) -> dict:
    """Collapse package lines to shipment totals."""
    return df.select([
        pl.col("line_weight").sum().alias("total_weight"),
        pl.col("line_volume").sum().alias("total_volume"),
        pl.col("line_footprint").sum().alias("total_footprint"),
        pl.col("quantity").sum().alias("total_pieces"),
        pl.col("length").max().alias("max_length"),
        pl.col("width").max().alias("max_width"),
        pl.col("height").max().alias("max_height"),
        pl.len().alias("package_count"),
    ]).row(0, named=True)


__all__ = [
    "calculate_metrics",
    "dimensional_factor",
    "packages_frame",
]
