"""
Record Schemas

Inputs to the rating engine: the shipment description supplied by the
caller and the carrier records read from the document store.

Documents arrive with camelCase keys and loosely typed values (numbers as
strings, empty strings, missing fields). Every numeric field is coerced
rather than rejected:

    optional bounds/rates   -> None when missing or unparseable
    weights/dimensions      -> 0.0 when missing, unparseable or negative
    quantities              -> 1 when missing or below 1
"""

import math
from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .data.reference.billable_weight import DEFAULT_UNIT_SYSTEM, SKID_SIDE


# =============================================================================
# COERCION HELPERS
# =============================================================================

def _to_float(value: Any) -> float | None:
    """Parse a loosely typed number; None when it isn't one."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _to_measure(value: Any) -> float:
    number = _to_float(value)
    return number if number is not None and number > 0 else 0.0


def _to_quantity(value: Any) -> int:
    number = _to_float(value)
    return int(number) if number is not None and number >= 1 else 1


def _to_int(value: Any) -> int | None:
    number = _to_float(value)
    return int(number) if number is not None else None


def _to_text(value: Any) -> str | None:
    """Normalize text fields; numbers (e.g. zip codes) become strings."""
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    text = str(value).strip()
    return text or None


def _text_or(default: str):
    def coerce(value: Any) -> str:
        return _to_text(value) or default
    return coerce


def _to_list(value: Any) -> list:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _to_unit_system(value: Any) -> str:
    text = (_to_text(value) or DEFAULT_UNIT_SYSTEM).lower()
    return text if text in SKID_SIDE else DEFAULT_UNIT_SYSTEM


def _to_service_codes(value: Any) -> list[str]:
    """Accept plain codes or mappings carrying a code/name."""
    codes = []
    for item in _to_list(value):
        if isinstance(item, dict):
            item = item.get("code") or item.get("name")
        code = _to_text(item)
        if code:
            codes.append(code)
    return codes


def _to_datetime(value: Any) -> datetime | None:
    """
    Parse a creation timestamp.

    Accepts datetimes, ISO strings, epoch seconds (or milliseconds) and
    document-store timestamp mappings. Naive values are taken as UTC.
    """
    if isinstance(value, dict):
        value = value.get("_seconds", value.get("seconds"))
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        seconds = _to_float(value)
        if seconds is None:
            return None
        if seconds > 1e11:
            seconds = seconds / 1000
        try:
            parsed = datetime.fromtimestamp(seconds, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


OptionalFloat = Annotated[float | None, BeforeValidator(_to_float)]
OptionalInt = Annotated[int | None, BeforeValidator(_to_int)]
OptionalText = Annotated[str | None, BeforeValidator(_to_text)]
Measure = Annotated[float, BeforeValidator(_to_measure)]
Quantity = Annotated[int, BeforeValidator(_to_quantity)]
Timestamp = Annotated[datetime | None, BeforeValidator(_to_datetime)]


class Record(BaseModel):
    """Immutable document record accepting camelCase or snake_case keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


# =============================================================================
# RATE STRUCTURES
# =============================================================================

class RateStructureType(str, Enum):
    """Pricing algorithm a rate card declares. Anything unrecognized is OTHER."""

    SKID_BASED = "skid_based"
    WEIGHT_DISTANCE = "weight_distance"
    ZONE_MATRIX = "zone_matrix"
    DIMENSIONAL_WEIGHT = "dimensional_weight"
    HYBRID_COMPLEX = "hybrid_complex"
    FLAT_RATE = "flat_rate"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str | None) -> "RateStructureType":
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.OTHER


# =============================================================================
# SHIPMENT DESCRIPTION
# =============================================================================

class Package(Record):
    weight: Measure = 0.0
    length: Measure = 0.0
    width: Measure = 0.0
    height: Measure = 0.0
    quantity: Quantity = 1


class Address(Record):
    postal_code: OptionalText = Field(
        default=None,
        validation_alias=AliasChoices("postalCode", "postal_code", "zipCode", "zip"),
    )
    province: OptionalText = None
    state: OptionalText = None
    city: OptionalText = None
    country: OptionalText = None
    latitude: OptionalFloat = Field(
        default=None, validation_alias=AliasChoices("latitude", "lat")
    )
    longitude: OptionalFloat = Field(
        default=None, validation_alias=AliasChoices("longitude", "lng", "lon")
    )

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None


class ShipmentDescription(Record):
    """A freight shipment to be rated. Immutable for one calculation."""

    packages: Annotated[list[Package], BeforeValidator(_to_list)] = Field(default_factory=list)
    origin: Address | None = Field(
        default=None, validation_alias=AliasChoices("origin", "shipFrom", "ship_from")
    )
    destination: Address | None = Field(
        default=None, validation_alias=AliasChoices("destination", "shipTo", "ship_to")
    )
    unit_system: Annotated[str, BeforeValidator(_to_unit_system)] = DEFAULT_UNIT_SYSTEM
    service_level: Annotated[str, BeforeValidator(_text_or("standard"))] = "standard"
    shipment_type: OptionalText = None
    additional_services: Annotated[list[str], BeforeValidator(_to_service_codes)] = Field(
        default_factory=list
    )


# =============================================================================
# CARRIER RECORDS
# =============================================================================

class CarrierProfile(Record):
    id: Annotated[str, BeforeValidator(_text_or(""))] = ""
    name: OptionalText = None
    logo: OptionalText = None


class WeightRule(Record):
    """Weight window a carrier accepts. Rules without enabled=True are ignored."""

    id: OptionalText = None
    min_weight: OptionalFloat = None
    max_weight: OptionalFloat = None
    weight_unit: Annotated[str, BeforeValidator(_text_or("lbs"))] = "lbs"
    enabled: bool = False


class DimensionRule(Record):
    """Largest single-package dimensions a carrier accepts."""

    id: OptionalText = None
    max_length: OptionalFloat = None
    max_width: OptionalFloat = None
    max_height: OptionalFloat = None
    dimension_unit: Annotated[str, BeforeValidator(_text_or("in"))] = "in"
    enabled: bool = False


class EligibilityRuleSet(Record):
    weight_rules: Annotated[list[WeightRule], BeforeValidator(_to_list)] = Field(default_factory=list)
    dimension_rules: Annotated[list[DimensionRule], BeforeValidator(_to_list)] = Field(
        default_factory=list
    )


# -----------------------------------------------------------------------------
# Rate card tables
# -----------------------------------------------------------------------------

class SkidRate(Record):
    skid_count: OptionalInt = None
    rate: OptionalFloat = None
    sell: OptionalFloat = None
    fuel_surcharge: OptionalFloat = None
    transit_days: OptionalText = None


class WeightBreak(Record):
    min_weight: OptionalFloat = None
    max_weight: OptionalFloat = None
    rate_per_lb: OptionalFloat = None
    minimum_charge: OptionalFloat = None
    distance_factor: OptionalFloat = None


class ZoneRate(Record):
    origin_zone: OptionalText = None
    destination_zone: OptionalText = None
    route_key: OptionalText = None
    rate: OptionalFloat = None
    fuel_surcharge: OptionalFloat = None
    transit_days: OptionalText = None


class RateCard(Record):
    """
    One pricing configuration belonging to a carrier.

    Common fields identify the card and drive selection; the remaining
    fields are read only by the structure named in rate_structure.
    """

    # Identity
    id: Annotated[str, BeforeValidator(_text_or(""))] = ""
    carrier_id: OptionalText = None
    carrier_name: OptionalText = None
    rate_card_name: OptionalText = None
    rate_type: OptionalText = None
    rate_structure: OptionalText = None

    # Selection
    currency: OptionalText = None
    service_level: OptionalText = None
    max_weight: OptionalFloat = None
    created_at: Timestamp = None
    enabled: bool = True

    # Tables
    skid_rates: Annotated[list[SkidRate], BeforeValidator(_to_list)] = Field(default_factory=list)
    weight_breaks: Annotated[list[WeightBreak], BeforeValidator(_to_list)] = Field(
        default_factory=list
    )
    zone_matrix: Annotated[list[ZoneRate], BeforeValidator(_to_list)] = Field(default_factory=list)

    # Scalar rates
    dim_weight_rate: OptionalFloat = None
    minimum_charge: OptionalFloat = None
    base_rate: OptionalFloat = None
    skid_rate: OptionalFloat = None
    weight_rate: OptionalFloat = None
    distance_rate: OptionalFloat = None
    flat_rate: OptionalFloat = None
    fuel_surcharge: OptionalFloat = Field(
        default=None,
        validation_alias=AliasChoices("fuelSurcharge", "fuelSurchargePercent", "fuel_surcharge"),
    )


__all__ = [
    "RateStructureType",
    "Package",
    "Address",
    "ShipmentDescription",
    "CarrierProfile",
    "WeightRule",
    "DimensionRule",
    "EligibilityRuleSet",
    "SkidRate",
    "WeightBreak",
    "ZoneRate",
    "RateCard",
]
