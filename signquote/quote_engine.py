"""
Quote engine — sign details + design variant + install config -> QuoteResult.

Pure math, single pass, no state between calls:
1. Fabrication (per-category calculator, floored at the category minimum)
2. Rush surcharge (on the floored fabrication cost)
3. Installation (trip, tiered labor, lift, extras, contingency)
4. Totals (subtotal, tax, total)

Line items are kept in the order costs are incurred; the on-screen summary
and the PDF print them verbatim.
"""

import logging
from typing import Optional

from .calculators.base import CostSection, fmt_percent, validate_measure
from .calculators.installation import InstallationCalculator, InstallationSection
from .calculators.registry import get_calculator
from .pricing_rules import PricingRuleTable, get_pricing_rules
from .schemas import (
    DesignVariant,
    Dimensions,
    InstallationConfig,
    LineItem,
    QuoteRequest,
    QuoteResult,
    SignCategory,
)

logger = logging.getLogger(__name__)

DEFAULT_LIGHTBOX_DEPTH = 4.0


def compute_fabrication(category: SignCategory, dimensions: Dimensions, text: str,
                        variant: DesignVariant, lightbox_depth: float = DEFAULT_LIGHTBOX_DEPTH,
                        has_lamination: bool = False,
                        rules: Optional[PricingRuleTable] = None) -> CostSection:
    """Floored fabrication cost and its line items for one sign category."""
    rules = rules or get_pricing_rules()
    calculator = get_calculator(category, rules)
    # Checked for every category, not only the one that prices depth
    lightbox_depth = validate_measure("lightbox_depth", lightbox_depth)
    return calculator.calculate(dimensions, text, variant, lightbox_depth, has_lamination)


def apply_rush(section: CostSection, is_rush: bool,
               rules: Optional[PricingRuleTable] = None) -> CostSection:
    """
    Add the rush surcharge to an already-floored fabrication section.
    Returns the section unchanged when is_rush is False.
    """
    if not is_rush:
        return section
    rules = rules or get_pricing_rules()
    rush_fee = section.cost * rules.rush_percent
    item = LineItem(label=f"Rush Order (+{fmt_percent(rules.rush_percent)})", amount=rush_fee)
    return CostSection(section.cost + rush_fee, section.items + (item,))


def compute_installation(config: InstallationConfig,
                         rules: Optional[PricingRuleTable] = None) -> InstallationSection:
    """Installation cost including contingency, with labor and lift broken out."""
    return InstallationCalculator(rules or get_pricing_rules()).calculate(config)


def compute_quote(
    category: SignCategory,
    dimensions: Dimensions,
    text: str,
    variant: DesignVariant,
    install_config: InstallationConfig,
    is_rush: bool,
    has_lamination: bool = False,
    lightbox_depth: float = DEFAULT_LIGHTBOX_DEPTH,
    rules: Optional[PricingRuleTable] = None,
) -> QuoteResult:
    """
    Full itemized quote for one sign.

    Args:
        category: which fabrication rule set applies
        dimensions: sign width/height in inches
        text: sign copy (letter count for channel letters)
        variant: chosen design; only lighting and rounded_backer are priced
        install_config: site height, lift and extras
        is_rush: add the rush surcharge to fabrication
        has_lamination: window vinyl only
        lightbox_depth: cabinet depth in inches, lightbox only
        rules: rate table; defaults to the process-wide table

    Raises:
        QuoteValidationError: a measurement is NaN, infinite, negative,
            or zero for an area-priced category
        InvariantViolation: unknown category or lift type
        PricingConfigError: the rule table can't price this request
    """
    rules = rules or get_pricing_rules()

    fabrication = compute_fabrication(
        category, dimensions, text, variant, lightbox_depth, has_lamination, rules,
    )
    fabrication = apply_rush(fabrication, is_rush, rules)
    installation = compute_installation(install_config, rules)

    subtotal = fabrication.cost + installation.cost
    tax = subtotal * rules.tax_rate
    total = subtotal + tax

    logger.debug("Quote %s: fabrication=%.2f installation=%.2f total=%.2f",
                 getattr(category, "value", category), fabrication.cost, installation.cost, total)

    return QuoteResult(
        fabrication_cost=fabrication.cost,
        installation_cost=installation.cost,
        subtotal=subtotal,
        tax=tax,
        total=total,
        fabrication_items=fabrication.items,
        installation_items=installation.items,
        install_labor=installation.labor,
        install_lift=installation.lift,
    )


def compute_quote_from_request(request: QuoteRequest,
                               rules: Optional[PricingRuleTable] = None) -> QuoteResult:
    """compute_quote for a QuoteRequest body."""
    return compute_quote(
        request.category,
        request.dimensions,
        request.text,
        request.variant,
        request.install_config,
        request.is_rush,
        has_lamination=request.has_lamination,
        lightbox_depth=request.lightbox_depth,
        rules=rules,
    )
