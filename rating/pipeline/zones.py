"""
Distance & Zone Resolution

Classifies both ends of a shipment into zones and estimates the distance
between them.

ZONE PRIORITY (per address)
---------------------------
1. Explicit province, then state
2. First postal character mapped through postal_regions.csv
3. First three postal characters verbatim
4. "UNKNOWN"

DISTANCE
--------
1. Both addresses have coordinates -> haversine great-circle miles
2. Both addresses have postal codes -> zone-level estimate
   (same zone 200 mi, else region_distances.csv, else 500 mi)
3. Otherwise 0 (unknown)
"""

import math

import polars as pl

from ..data import load_postal_regions, load_region_distances
from ..data.reference.distance import (
    DEFAULT_INTER_REGION_MI,
    EARTH_RADIUS_MI,
    POSTAL_FALLBACK_LENGTH,
    SAME_REGION_MI,
    UNKNOWN_ZONE,
)
from ..models import Address
from ..results import Route


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


# =============================================================================
# ZONES
# =============================================================================

def region_from_postal(
    postal_code: str,
    postal_regions: pl.DataFrame | None = None,
) -> str:
    """Region for a postal code, or its first three characters if unmapped."""
    if postal_regions is None:
        postal_regions = load_postal_regions()

    prefix = postal_code[:1].upper()
    match = postal_regions.filter(pl.col("prefix") == prefix)
    if match.is_empty():
        return postal_code[:POSTAL_FALLBACK_LENGTH]
    return match["region"][0]


def derive_zone(
    address: Address | None,
    postal_regions: pl.DataFrame | None = None,
) -> str:
    if address is None:
        return UNKNOWN_ZONE
    if address.province:
        return address.province
    if address.state:
        return address.state
    if address.postal_code:
        return region_from_postal(address.postal_code, postal_regions)
    return UNKNOWN_ZONE


# =============================================================================
# DISTANCE
# =============================================================================

def haversine_miles(origin: Address, destination: Address) -> float:
    """Great-circle distance between two coordinate pairs, in miles."""
    lat1 = math.radians(origin.latitude)
    lat2 = math.radians(destination.latitude)
    d_lat = lat2 - lat1
    d_lon = math.radians(destination.longitude - origin.longitude)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    )
    # Rounding can push a just past 1 for antipodal points
    a = min(1.0, max(0.0, a))
    return EARTH_RADIUS_MI * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def estimate_region_distance(
    origin_zone: str,
    destination_zone: str,
    region_distances: pl.DataFrame | None = None,
) -> float:
    """Zone-level distance estimate; pairs match in either direction."""
    if origin_zone == destination_zone:
        return SAME_REGION_MI

    if region_distances is None:
        region_distances = load_region_distances()

    match = region_distances.filter(
        ((pl.col("region_a") == origin_zone) & (pl.col("region_b") == destination_zone)) |
        ((pl.col("region_a") == destination_zone) & (pl.col("region_b") == origin_zone))
    )
    if match.is_empty():
        return DEFAULT_INTER_REGION_MI
    return match["distance_mi"][0]


# =============================================================================
# ROUTE
# =============================================================================

def resolve_route(
    origin: Address | None,
    destination: Address | None,
    postal_regions: pl.DataFrame | None = None,
    region_distances: pl.DataFrame | None = None,
) -> tuple[Route, int]:
    """
    Zone pair and estimated distance for a shipment.

    Returns:
        (route, distance) with distance rounded to the nearest mile
    """
    origin_zone = derive_zone(origin, postal_regions)
    destination_zone = derive_zone(destination, postal_regions)
    route = Route(
        origin_zone=origin_zone,
        destination_zone=destination_zone,
        route_key=f"{origin_zone}-{destination_zone}",
    )

    if origin is None or destination is None:
        distance = 0.0
    elif origin.has_coordinates and destination.has_coordinates:
        distance = haversine_miles(origin, destination)
    elif origin.postal_code and destination.postal_code:
        distance = estimate_region_distance(origin_zone, destination_zone, region_distances)
    else:
        distance = 0.0

    return route, round_half_up(distance)


__all__ = [
    "region_from_postal",
    "derive_zone",
    "haversine_miles",
    "estimate_region_distance",
    "resolve_route",
]
