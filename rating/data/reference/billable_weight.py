"""
Billable Weight Configuration

HOW DIM WEIGHT WORKS
--------------------
Chargeable weight = max(actual_weight, dim_weight), always.

    dim_weight = total_volume / dim_factor

The dim factor depends on shipment type and service level:
- Courier express uses the tighter 139 divisor
- Everything else (courier standard, LTL) uses the standard 166 divisor

SKID FOOTPRINT
--------------
One skid equivalent is a standard 48" x 48" pallet (121.92 cm per side in
metric). Packages without a length or width are assumed to occupy a full
skid side in that direction.
"""

COURIER_EXPRESS_DIM_FACTOR = 139    # Cubic units per weight unit
STANDARD_DIM_FACTOR = 166           # Standard LTL divisor

COURIER_SHIPMENT_TYPE = "courier"
EXPRESS_SERVICE_LEVEL = "express"

# Skid side length by unit system
SKID_SIDE = {
    "imperial": 48.0,               # inches
    "metric": 121.92,               # centimeters
}

WEIGHT_UNITS = {"imperial": "lbs", "metric": "kg"}
DIMENSION_UNITS = {"imperial": "in", "metric": "cm"}

DEFAULT_UNIT_SYSTEM = "imperial"
