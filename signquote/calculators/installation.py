"""
Installation cost calculator.

Trip fee, height-tiered labor, lift rental and flat extras, then a
contingency on the pre-contingency sum. Line items come out in that
order; contingency is always last.
"""

import logging
from typing import NamedTuple, Sequence, Tuple

from .base import fmt_percent, fmt_rate, validate_measure
from ..errors import InvariantViolation, PricingConfigError
from ..schemas import InstallationConfig, LiftType, LineItem

logger = logging.getLogger(__name__)


class InstallationSection(NamedTuple):
    cost: float
    items: Tuple[LineItem, ...]
    labor: float
    lift: float


def select_height_tier(height_feet: float, tiers: Sequence):
    """
    First tier whose max_feet >= height_feet (inclusive).
    Above every ceiling, the last tier is used.
    """
    if not tiers:
        raise PricingConfigError("Installation height_tiers is empty")
    for tier in tiers:
        if height_feet <= tier.max_feet:
            return tier
    return tiers[-1]


class InstallationCalculator:
    """Prices the site visit from an InstallationConfig."""

    EXTRAS = (
        ("electrical_work", "electrical", "Electrical Hookup"),
        ("permit", "permit", "Permit Allowance"),
        ("hard_access", "hard_access", "Hard Access/Parking"),
    )

    def __init__(self, rules):
        self.rules = rules.installation

    def lift_cost(self, lift_type) -> float:
        try:
            lift_type = LiftType(lift_type)
        except ValueError:
            raise InvariantViolation(f"Unknown lift type: {lift_type!r}") from None
        if lift_type is LiftType.NONE:
            return 0.0
        if lift_type not in self.rules.lift:
            raise PricingConfigError(f"No lift cost configured for {lift_type.value}")
        return self.rules.lift[lift_type]

    def calculate(self, config: InstallationConfig) -> InstallationSection:
        rules = self.rules
        height_feet = validate_measure("height_feet", config.height_feet)
        items = []

        items.append(LineItem(label="Base Trip Fee", amount=rules.base_trip))

        tier = select_height_tier(height_feet, rules.height_tiers)
        labor_cost = tier.labor_hours * rules.labor_rate
        items.append(LineItem(
            label=f"Labor ({fmt_rate(tier.labor_hours)}hrs @ ${fmt_rate(rules.labor_rate)}/hr)",
            amount=labor_cost,
        ))

        lift_cost = self.lift_cost(config.lift_type)
        if lift_cost > 0:
            items.append(LineItem(label=f"{LiftType(config.lift_type).value} Lift", amount=lift_cost))

        extras = 0.0
        for flag, rate_field, label in self.EXTRAS:
            if getattr(config, flag):
                amount = getattr(rules, rate_field)
                extras += amount
                items.append(LineItem(label=label, amount=amount))

        pre_contingency = rules.base_trip + labor_cost + lift_cost + extras
        contingency = pre_contingency * rules.contingency_percent
        items.append(LineItem(label=f"Contingency ({fmt_percent(rules.contingency_percent)})", amount=contingency))

        logger.debug("Installation: %.1f ft -> tier %.0f ft, %.2f before contingency",
                     height_feet, tier.max_feet, pre_contingency)
        return InstallationSection(pre_contingency + contingency, tuple(items), labor_cost, lift_cost)
