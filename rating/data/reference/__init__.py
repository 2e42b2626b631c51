"""
Reference Data

Static reference data for dim factors, fuel, pricing defaults, scoring,
transit bands and distance estimation.
"""

from .billable_weight import (
    COURIER_EXPRESS_DIM_FACTOR,
    STANDARD_DIM_FACTOR,
    SKID_SIDE,
    WEIGHT_UNITS,
    DIMENSION_UNITS,
    DEFAULT_UNIT_SYSTEM,
)
from .fuel import SKID_FUEL_PERCENT, ZONE_FUEL_PERCENT
from .pricing import COST_RATIO, DEFAULT_CURRENCY, DEFAULT_SERVICE_LEVEL
from .transit import TRANSIT_BANDS, LONG_HAUL_TRANSIT, DEFAULT_TRANSIT_DAYS
from .distance import (
    EARTH_RADIUS_MI,
    SAME_REGION_MI,
    DEFAULT_INTER_REGION_MI,
    UNKNOWN_ZONE,
)

__all__ = [
    "COURIER_EXPRESS_DIM_FACTOR",
    "STANDARD_DIM_FACTOR",
    "SKID_SIDE",
    "WEIGHT_UNITS",
    "DIMENSION_UNITS",
    "DEFAULT_UNIT_SYSTEM",
    "SKID_FUEL_PERCENT",
    "ZONE_FUEL_PERCENT",
    "COST_RATIO",
    "DEFAULT_CURRENCY",
    "DEFAULT_SERVICE_LEVEL",
    "TRANSIT_BANDS",
    "LONG_HAUL_TRANSIT",
    "DEFAULT_TRANSIT_DAYS",
    "EARTH_RADIUS_MI",
    "SAME_REGION_MI",
    "DEFAULT_INTER_REGION_MI",
    "UNKNOWN_ZONE",
]
