"""
Result Values

Everything the engine derives or returns. All values are created fresh for
one calculation and never mutated afterwards.
"""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any

from .data.reference.billable_weight import DIMENSION_UNITS, WEIGHT_UNITS


def format_number(value: float) -> str:
    """Render a quantity without trailing zeros (96.0 -> "96", 2.50 -> "2.5")."""
    value = round(float(value), 2)
    if value.is_integer():
        return str(int(value))
    return f"{value:.2f}".rstrip("0")


# =============================================================================
# METRICS
# =============================================================================

@dataclass(frozen=True)
class Route:
    origin_zone: str
    destination_zone: str
    route_key: str

    @property
    def reverse_key(self) -> str:
        return f"{self.destination_zone}-{self.origin_zone}"


@dataclass(frozen=True)
class ShipmentMetrics:
    """Physical facts about one shipment, derived once per calculation."""

    total_weight: float
    dimensional_weight: float
    chargeable_weight: float
    total_volume: float
    skid_equivalents: int
    max_length: float
    max_width: float
    max_height: float
    total_pieces: int
    package_count: int
    distance: int
    route: Route
    dim_factor: int
    unit_system: str

    @property
    def weight_unit(self) -> str:
        return WEIGHT_UNITS[self.unit_system]

    @property
    def dimension_unit(self) -> str:
        return DIMENSION_UNITS[self.unit_system]


# =============================================================================
# ELIGIBILITY
# =============================================================================

@dataclass(frozen=True)
class EligibilityVerdict:
    eligible: bool
    reasons: list[str] = field(default_factory=list)


# =============================================================================
# CHARGES
# =============================================================================

@dataclass(frozen=True)
class RateBreakdownLine:
    """
    One itemized charge.

    Attributes:
        code        - Short tag (FRT, FSC, BASE, SKD, WGT, DST, ACC)
        charge_name - Human label
        cost        - Carrier's own cost (informational)
        charge      - Amount billed
        currency    - Currency code
        source      - Strategy or service that produced the line
    """

    code: str
    charge_name: str
    cost: float
    charge: float
    currency: str
    source: str


@dataclass(frozen=True)
class RateCalculationResult:
    """Output of one calculation strategy, before additional services."""

    rate_breakdown: list[RateBreakdownLine]
    base_total: float
    final_total: float
    transit_time: str
    notes: str


# =============================================================================
# RESPONSES
# =============================================================================

@dataclass(frozen=True)
class CarrierSummary:
    id: str
    name: str | None
    logo: str | None


@dataclass(frozen=True)
class RateCardSummary:
    id: str
    name: str | None
    type: str | None
    structure: str


@dataclass(frozen=True)
class RatingResponse:
    """A priced shipment for one carrier."""

    carrier: CarrierSummary
    rate_card: RateCardSummary
    shipment_metrics: ShipmentMetrics
    rate_breakdown: list[RateBreakdownLine]
    base_total: float
    additional_services_total: float
    final_total: float
    currency: str
    transit_time: str
    service_level: str
    notes: str
    calculated_at: datetime
    calculator_version: str
    eligible: bool = True

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["calculated_at"] = self.calculated_at.isoformat()
        return data


@dataclass(frozen=True)
class IneligibleResult:
    """The carrier cannot handle the shipment. Not an error."""

    carrier_id: str
    reasons: list[str]
    eligible: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


__all__ = [
    "format_number",
    "Route",
    "ShipmentMetrics",
    "EligibilityVerdict",
    "RateBreakdownLine",
    "RateCalculationResult",
    "CarrierSummary",
    "RateCardSummary",
    "RatingResponse",
    "IneligibleResult",
]
