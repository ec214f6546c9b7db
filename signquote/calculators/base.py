"""
Abstract base class for the per-category fabrication calculators.

Input: dimensions, sign text, design variant, lightbox depth, lamination flag
Output: CostSection(cost, items), floored at the category minimum
"""

import math
from abc import ABC, abstractmethod
from typing import List, NamedTuple, Tuple

from ..errors import QuoteValidationError
from ..schemas import DesignVariant, Dimensions, LineItem


class CostSection(NamedTuple):
    cost: float
    items: Tuple[LineItem, ...]


def validate_measure(field: str, value, allow_zero: bool = True) -> float:
    """
    Reject NaN, infinite and negative measurements (and zero when not allowed).
    Never clamps: bad input is the caller's to fix.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise QuoteValidationError(field, value, "must be a number")
    if not math.isfinite(value):
        raise QuoteValidationError(field, value, "must be finite")
    if value < 0:
        raise QuoteValidationError(field, value, "must not be negative")
    if value == 0 and not allow_zero:
        raise QuoteValidationError(field, value, "must be greater than zero")
    return float(value)


def fmt_rate(value: float) -> str:
    """Render a rate the way a person would type it: 45, 2.5, 0.75."""
    return f"{value:g}"


def fmt_percent(fraction: float) -> str:
    """0.12 -> '12%'"""
    return f"{fraction * 100:g}%"


class BaseFabricationCalculator(ABC):
    """All fabrication calculators inherit from this."""

    # Categories priced by face area need a real rectangle
    AREA_BASED = False

    def __init__(self, rules):
        self.rules = rules

    @abstractmethod
    def calculate(self, dimensions: Dimensions, text: str, variant: DesignVariant,
                  lightbox_depth: float, has_lamination: bool) -> CostSection:
        """Returns the floored fabrication cost and its line items in computation order."""

    # --- Helper methods for all calculators ---

    def validate_dimensions(self, dimensions: Dimensions) -> Tuple[float, float]:
        width = validate_measure("width_in", dimensions.width_in, allow_zero=not self.AREA_BASED)
        height = validate_measure("height_in", dimensions.height_in, allow_zero=not self.AREA_BASED)
        return width, height

    def sq_ft_from_dimensions(self, width_in: float, height_in: float) -> float:
        """Calculate square footage from dimensions in inches."""
        return (width_in * height_in) / 144.0

    def apply_floor(self, raw_cost: float, min_price: float, items: List[LineItem],
                    itemize: bool = True) -> float:
        """
        Floor raw_cost at min_price. When the floor binds (strictly below the
        minimum) and itemize is set, a 'Minimum Pricing Applied' item is added.
        """
        if raw_cost < min_price:
            if itemize:
                items.append(LineItem(label="Minimum Pricing Applied", amount=min_price))
            return min_price
        return raw_cost
