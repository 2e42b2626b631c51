"""
Rating Data

Reference data and loaders for regions, distances and configuration.

Structure:
    - reference/: Static reference data (postal regions, distances, config)
    - loaders/: Record sources (carriers, rate cards, eligibility rules),
                imported explicitly from rating.data.loaders
"""

from functools import lru_cache
from pathlib import Path

import polars as pl


REFERENCE_DIR = Path(__file__).parent / "reference"


@lru_cache(maxsize=1)
def load_postal_regions() -> pl.DataFrame:
    """
    Load the postal prefix to region mapping.

    Returns:
        DataFrame with columns:
            - prefix: Single leading postal character (uppercase)
            - region: Region code (e.g., "ON", "BC")
    """
    return pl.read_csv(
        REFERENCE_DIR / "postal_regions.csv",
        schema_overrides={"prefix": pl.Utf8, "region": pl.Utf8},
    )


@lru_cache(maxsize=1)
def load_region_distances() -> pl.DataFrame:
    """
    Load inter-region distance estimates.

    Pairs are unordered: each pair is stored once and looked up in both
    directions.

    Returns:
        DataFrame with columns: region_a, region_b, distance_mi
    """
    return pl.read_csv(
        REFERENCE_DIR / "region_distances.csv",
        schema_overrides={
            "region_a": pl.Utf8,
            "region_b": pl.Utf8,
            "distance_mi": pl.Float64,
        },
    )


__all__ = [
    # Reference data loaders
    "load_postal_regions",
    "load_region_distances",
    "REFERENCE_DIR",
]
