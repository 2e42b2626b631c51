"""
Accessorial Base Class

Shared base class for flat-fee additional services.
"""

from abc import ABC

from ..data.reference.pricing import COST_RATIO


class Accessorial(ABC):
    """
    Base class for all accessorials.

    Attributes:
        IDENTITY
            name        - Short name (e.g., "LIFTGATE")
            codes       - Service codes that request it (matched case-insensitively)
            charge_name - Label on the breakdown line

        PRICING
            list_price  - Flat charge per shipment
    """

    # -------------------------------------------------------------------------
    # IDENTITY
    # -------------------------------------------------------------------------
    name: str
    codes: tuple[str, ...]
    charge_name: str

    # -------------------------------------------------------------------------
    # PRICING
    # -------------------------------------------------------------------------
    list_price: float

    # -------------------------------------------------------------------------
    # METHODS
    # -------------------------------------------------------------------------

    @classmethod
    def matches(cls, code: str) -> bool:
        return code.strip().lower() in cls.codes

    @classmethod
    def charge(cls, base_total: float) -> float:
        """Flat fee. base_total is accepted for percentage-priced services."""
        return cls.list_price

    @classmethod
    def cost(cls, base_total: float) -> float:
        return cls.charge(base_total) * COST_RATIO
