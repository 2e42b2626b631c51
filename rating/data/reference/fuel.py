"""
Fuel Surcharge Defaults

Fuel is a percentage of the base freight charge, configured per rate entry
or per rate card. These defaults apply only when neither says anything.
"""

SKID_FUEL_PERCENT = 15.5            # Skid tables without a fuel figure
ZONE_FUEL_PERCENT = 0.0             # Zone matrices bill no fuel unless configured
