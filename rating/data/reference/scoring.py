"""
Rate Card Scoring

Points awarded when choosing between a carrier's rate cards. Highest total
wins; ties keep input order.
"""

SERVICE_LEVEL_MATCH = 50            # Card service level == requested
SKID_FIT = 30                       # skid_based card and shipment fits a truckload
WEIGHT_FIT = 20                     # chargeable weight <= card max weight
RECENCY_DAYS = 20                   # Bonus = max(0, RECENCY_DAYS - age_in_days)

MAX_TRUCKLOAD_SKIDS = 26            # Standard 53' trailer floor capacity
