"""
Pricing Defaults

Structure-level defaults used when a rate card leaves a field empty, plus
the assumed carrier cost ratio reported on every breakdown line.
"""

# Informational carrier cost on every line = charge * COST_RATIO
COST_RATIO = 0.70

DEFAULT_CURRENCY = "CAD"
DEFAULT_SERVICE_LEVEL = "Standard"

# dimensional_weight
DIM_WEIGHT_RATE = 0.65              # Per chargeable weight unit
DIM_WEIGHT_MINIMUM = 150.00

# hybrid_complex
HYBRID_BASE_RATE = 200.00

# flat_rate
FLAT_RATE = 100.00
FLAT_RATE_TRANSIT = "2-3 business days"

# fallback (unknown structure)
FALLBACK_MINIMUM = 200.00
FALLBACK_RATE = 0.65

# additional services without a configured price
DEFAULT_ACCESSORIAL_PRICE = 25.00
