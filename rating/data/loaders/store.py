"""
Record Store

The engine reads three things per carrier, all keyed by carrier id:

    get_carrier_profile(carrier_id)   -> CarrierProfile | None
    list_rate_cards(carrier_id)       -> enabled RateCards, newest first
    get_eligibility_rules(carrier_id) -> EligibilityRuleSet

Any object with these three coroutines can be passed to calculate_rates.
InMemoryStore serves them from a JSON document with the collections

    carriers, rateCards, weightRules, dimensionRules

where every rate card and rule carries a carrierId.
"""

import json
from collections import defaultdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Protocol

from ...models import CarrierProfile, EligibilityRuleSet, RateCard


_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


class RatingStore(Protocol):
    """Read-only lookups the rating engine depends on."""

    async def get_carrier_profile(self, carrier_id: str) -> CarrierProfile | None:
        ...

    async def list_rate_cards(self, carrier_id: str) -> list[RateCard]:
        ...

    async def get_eligibility_rules(self, carrier_id: str) -> EligibilityRuleSet:
        ...


class InMemoryStore:
    """RatingStore over records held in memory."""

    def __init__(
        self,
        carriers: list[CarrierProfile] | None = None,
        rate_cards: list[RateCard] | None = None,
        eligibility_rules: dict[str, EligibilityRuleSet] | None = None,
    ):
        self._carriers = {carrier.id: carrier for carrier in carriers or []}
        self._rate_cards = list(rate_cards or [])
        self._eligibility_rules = dict(eligibility_rules or {})

    async def get_carrier_profile(self, carrier_id: str) -> CarrierProfile | None:
        return self._carriers.get(carrier_id)

    async def list_rate_cards(self, carrier_id: str) -> list[RateCard]:
        cards = [
            card for card in self._rate_cards
            if card.carrier_id == carrier_id and card.enabled
        ]
        return sorted(cards, key=lambda card: card.created_at or _OLDEST, reverse=True)

    async def get_eligibility_rules(self, carrier_id: str) -> EligibilityRuleSet:
        return self._eligibility_rules.get(carrier_id, EligibilityRuleSet())

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "InMemoryStore":
        """Build a store from a document of camelCase record collections."""
        carriers = [CarrierProfile.model_validate(doc) for doc in document.get("carriers", [])]
        rate_cards = [RateCard.model_validate(doc) for doc in document.get("rateCards", [])]

        grouped: dict[str, dict[str, list]] = defaultdict(
            lambda: {"weight_rules": [], "dimension_rules": []}
        )
        for key, target in (("weightRules", "weight_rules"), ("dimensionRules", "dimension_rules")):
            for doc in document.get(key, []):
                carrier_id = doc.get("carrierId") or doc.get("carrier_id")
                if carrier_id:
                    grouped[carrier_id][target].append(doc)

        rules = {
            carrier_id: EligibilityRuleSet.model_validate(collections)
            for carrier_id, collections in grouped.items()
        }
        return cls(carriers, rate_cards, rules)


def load_store(path: str | Path) -> InMemoryStore:
    """Load an InMemoryStore from a JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        return InMemoryStore.from_document(json.load(f))


__all__ = [
    "RatingStore",
    "InMemoryStore",
    "load_store",
]
