"""
Universal Carrier Rating

Prices a freight shipment against a carrier's configured rate cards.
"""

from .calculate_rates import calculate_rates, rate_shipment
from .data.loaders import InMemoryStore, RatingStore, load_store
from .errors import (
    CarrierNotFoundError,
    NoApplicableRateCardError,
    RateConfigurationError,
    RatingError,
)
from .models import RateCard, RateStructureType, ShipmentDescription
from .results import IneligibleResult, RatingResponse
from .shopping import shop_rates
from .validation import validate_shipment_for_rating
from .version import VERSION

__all__ = [
    "calculate_rates",
    "rate_shipment",
    "shop_rates",
    "validate_shipment_for_rating",
    "InMemoryStore",
    "RatingStore",
    "load_store",
    "RateCard",
    "RateStructureType",
    "ShipmentDescription",
    "RatingResponse",
    "IneligibleResult",
    "RatingError",
    "CarrierNotFoundError",
    "RateConfigurationError",
    "NoApplicableRateCardError",
    "VERSION",
]
