"""
Rating Errors

Hard failures that abort a calculation for one carrier. An ineligible
carrier is not an error (see results.IneligibleResult).
"""


class RatingError(Exception):
    """Base class for rating failures."""


class CarrierNotFoundError(RatingError, LookupError):
    """The carrier id has no profile in the store."""

    def __init__(self, carrier_id: str):
        self.carrier_id = carrier_id
        super().__init__(f"Carrier not found: {carrier_id}")


class RateConfigurationError(RatingError, ValueError):
    """A rate card cannot be computed as configured."""


class NoApplicableRateCardError(RateConfigurationError):
    """The carrier has no rate card to choose from."""

    def __init__(self, carrier_id: str | None = None):
        self.carrier_id = carrier_id
        suffix = f" for carrier {carrier_id}" if carrier_id else ""
        super().__init__(f"No applicable rate card found{suffix}")


__all__ = [
    "RatingError",
    "CarrierNotFoundError",
    "RateConfigurationError",
    "NoApplicableRateCardError",
]
