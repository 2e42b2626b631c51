"""
Carrier Eligibility

Weight and dimension rules a carrier places on the freight it accepts.
Every enabled rule is checked and every violation is reported; failing any
one rule disqualifies the carrier. Never raises.

    weight rules     - chargeable_weight within [min_weight, max_weight]
    dimension rules  - largest single package within max length/width/height

A bound that is missing or zero is not enforced.
"""

from ..models import EligibilityRuleSet
from ..results import EligibilityVerdict, ShipmentMetrics, format_number


# (label, rule field, metrics field)
DIMENSION_CHECKS = [
    ("Length", "max_length", "max_length"),
    ("Width", "max_width", "max_width"),
    ("Height", "max_height", "max_height"),
]


def check_eligibility(
    metrics: ShipmentMetrics,
    rules: EligibilityRuleSet,
) -> EligibilityVerdict:
    """
    Check a shipment against a carrier's eligibility rules.

    Returns:
        EligibilityVerdict with one reason per violated bound
    """
    reasons = []

    for rule in rules.weight_rules:
        if not rule.enabled:
            continue
        if rule.min_weight and metrics.chargeable_weight < rule.min_weight:
            reasons.append(
                f"Weight below minimum: {format_number(rule.min_weight)} {rule.weight_unit}"
            )
        if rule.max_weight and metrics.chargeable_weight > rule.max_weight:
            reasons.append(
                f"Weight exceeds maximum: {format_number(rule.max_weight)} {rule.weight_unit}"
            )

    for rule in rules.dimension_rules:
        if not rule.enabled:
            continue
        for label, rule_field, metrics_field in DIMENSION_CHECKS:
            limit = getattr(rule, rule_field)
            if limit and getattr(metrics, metrics_field) > limit:
                reasons.append(
                    f"{label} exceeds maximum: {format_number(limit)} {rule.dimension_unit}"
                )

    return EligibilityVerdict(eligible=not reasons, reasons=reasons)


__all__ = [
    "check_eligibility",
]
