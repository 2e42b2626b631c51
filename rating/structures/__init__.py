"""
Rate Structures Package

One class per pricing algorithm a rate card can declare. Dispatch is by
RateStructureType; every member of the enum maps to exactly one class and
OTHER (any unrecognized structure) maps to the fallback estimate.

Usage:
    from rating.structures import calculate_by_structure
"""

import logging

from ..accessors import resolve_structure
from ..models import RateCard, RateStructureType
from ..results import RateCalculationResult, ShipmentMetrics
from .base import RateStructure
from .dimensional_weight import DimensionalWeight
from .fallback import Fallback
from .flat_rate import FlatRate
from .hybrid_complex import HybridComplex
from .skid_based import SkidBased, lookup_skid_rate
from .weight_distance import WeightDistance, lookup_weight_break
from .zone_matrix import ZoneMatrix, lookup_zone_rate

LOGGER = logging.getLogger(__name__)


ALL: list[type[RateStructure]] = [
    SkidBased, WeightDistance, ZoneMatrix, DimensionalWeight,
    HybridComplex, FlatRate, Fallback,
]

REGISTRY: dict[RateStructureType, type[RateStructure]] = {s.structure: s for s in ALL}


# =============================================================================
# VALIDATION
# =============================================================================

def validate_structures() -> None:
    """
    Validate rate structure registry integrity.

    Raises ValueError if any configuration issues are found.
    Called at import time to fail fast on configuration errors.
    """
    errors = []

    missing = [member.value for member in RateStructureType if member not in REGISTRY]
    if missing:
        errors.append(f"no rate structure registered for: {', '.join(missing)}")

    seen = set()
    for s in ALL:
        if s.structure in seen:
            errors.append(f"{s.__name__}: structure '{s.structure.value}' registered twice")
        seen.add(s.structure)

        if s.required_table is not None:
            if s.required_table not in RateCard.model_fields:
                errors.append(f"{s.__name__}: required_table '{s.required_table}' is not a RateCard field")
            if s.table_label is None:
                errors.append(f"{s.__name__}: required_table requires table_label")

        if s.price.__func__ is RateStructure.price.__func__:
            errors.append(f"{s.__name__}: price() not implemented")

    if errors:
        raise ValueError("Rate structure configuration errors:\n  " + "\n  ".join(errors))


# Run validation at import time
validate_structures()


# =============================================================================
# DISPATCH
# =============================================================================

def get_structure(card: RateCard) -> type[RateStructure]:
    """Rate structure class for a card, fallback for unrecognized structures."""
    structure = resolve_structure(card)
    if structure is RateStructureType.OTHER:
        LOGGER.warning(
            "Unrecognized rate structure %r on rate card %s, using fallback estimate",
            card.rate_structure or card.rate_type,
            card.id,
        )
    return REGISTRY[structure]


def calculate_by_structure(card: RateCard, metrics: ShipmentMetrics) -> RateCalculationResult:
    """
    Price a shipment with the card's declared rate structure.

    Raises:
        RateConfigurationError: the structure's required table is missing
            or has no entry for this shipment
    """
    return get_structure(card).calculate(card, metrics)


__all__ = [
    # Base
    "RateStructure",
    # Structure classes
    "DimensionalWeight",
    "Fallback",
    "FlatRate",
    "HybridComplex",
    "SkidBased",
    "WeightDistance",
    "ZoneMatrix",
    # Lookups
    "lookup_skid_rate",
    "lookup_weight_break",
    "lookup_zone_rate",
    # Registry
    "ALL",
    "REGISTRY",
    # Dispatch
    "calculate_by_structure",
    "get_structure",
]
