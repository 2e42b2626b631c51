"""
Rate Structure Base Class

Shared base class for every pricing algorithm a rate card can declare.
"""

from abc import ABC

from ..accessors import resolve_currency
from ..data.reference.pricing import COST_RATIO
from ..errors import RateConfigurationError
from ..models import RateCard, RateStructureType
from ..results import (
    RateBreakdownLine,
    RateCalculationResult,
    ShipmentMetrics,
    format_number,
)


class RateStructure(ABC):
    """
    Base class for all rate structures.

    Attributes:
        IDENTITY
            structure       - RateStructureType this class prices
            source          - Tag written on each breakdown line

        CONFIGURATION
            required_table  - RateCard table that must have entries, or None
            table_label     - Human name of that table for error messages
    """

    # -------------------------------------------------------------------------
    # IDENTITY
    # -------------------------------------------------------------------------
    structure: RateStructureType
    source: str

    # -------------------------------------------------------------------------
    # CONFIGURATION
    # -------------------------------------------------------------------------
    required_table: str | None = None
    table_label: str | None = None

    # -------------------------------------------------------------------------
    # METHODS
    # -------------------------------------------------------------------------

    @classmethod
    def calculate(cls, card: RateCard, metrics: ShipmentMetrics) -> RateCalculationResult:
        """
        Price a shipment with this structure.

        Raises:
            RateConfigurationError: the card's required table is empty
        """
        if cls.required_table is not None and not getattr(card, cls.required_table):
            raise RateConfigurationError(
                f"Rate card {card.id or '(unnamed)'} has no {cls.table_label} configured"
            )
        return cls.price(card, metrics)

    @classmethod
    def price(cls, card: RateCard, metrics: ShipmentMetrics) -> RateCalculationResult:
        """Structure-specific pricing. Override in every subclass."""
        raise NotImplementedError(f"{cls.__name__} does not implement price()")

    @classmethod
    def line(
        cls,
        code: str,
        charge_name: str,
        charge: float,
        card: RateCard,
        source: str | None = None,
    ) -> RateBreakdownLine:
        """Breakdown line with cost at the fixed cost ratio."""
        return RateBreakdownLine(
            code=code,
            charge_name=charge_name,
            cost=round(charge * COST_RATIO, 2),
            charge=round(charge, 2),
            currency=resolve_currency(card),
            source=source or cls.source,
        )

    @classmethod
    def fuel_line(cls, fuel: float, fuel_percent: float, card: RateCard) -> RateBreakdownLine:
        return cls.line("FSC", f"Fuel Surcharge ({format_number(fuel_percent)}%)", fuel, card)

    @staticmethod
    def result(
        lines: list[RateBreakdownLine],
        base_total: float,
        final_total: float,
        transit_time: str,
        notes: str,
    ) -> RateCalculationResult:
        return RateCalculationResult(
            rate_breakdown=lines,
            base_total=round(base_total, 2),
            final_total=round(final_total, 2),
            transit_time=transit_time,
            notes=notes,
        )
