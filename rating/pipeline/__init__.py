"""
Pipeline Package

Core rating steps (store-agnostic):
- metrics: Measure the shipment (weights, volume, skids, route, distance)
- zones: Resolve zones and distance between two addresses
- eligibility: Accept or reject a carrier for the shipment
- selection: Pick the best-fit rate card
"""

from .metrics import calculate_metrics, dimensional_factor
from .zones import resolve_route, derive_zone
from .eligibility import check_eligibility
from .selection import select_rate_card, score_rate_card

__all__ = [
    "calculate_metrics",
    "dimensional_factor",
    "resolve_route",
    "derive_zone",
    "check_eligibility",
    "select_rate_card",
    "score_rate_card",
]
