"""
Loaders Package

Sources for carrier profiles, rate cards and eligibility rules.
"""

from .store import (
    RatingStore,
    InMemoryStore,
    load_store,
)

__all__ = [
    "RatingStore",
    "InMemoryStore",
    "load_store",
]
