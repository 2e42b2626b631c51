"""
Transit Time Bands

Coarse business-day estimate by distance (miles). Each band applies when
distance is strictly below its upper bound.
"""

TRANSIT_BANDS = [
    (100, "1 business day"),
    (300, "2 business days"),
    (600, "3 business days"),
    (1000, "4 business days"),
    (1500, "5 business days"),
]

LONG_HAUL_TRANSIT = "5-7 business days"
DEFAULT_TRANSIT_DAYS = 5            # Assumed when a transit text has no number
