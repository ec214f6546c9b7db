"""
Window vinyl calculator.

Area x per-sqft rate, optional lamination as a percentage of the
pre-lamination cost. The minimum price applies but is not itemized.
"""

from .base import BaseFabricationCalculator, CostSection, fmt_percent, fmt_rate
from ..schemas import LineItem


class WindowVinylCalculator(BaseFabricationCalculator):

    AREA_BASED = True

    def calculate(self, dimensions, text, variant, lightbox_depth, has_lamination):
        rules = self.rules.window_vinyl
        width_in, height_in = self.validate_dimensions(dimensions)
        items = []

        sqft = self.sq_ft_from_dimensions(width_in, height_in)
        raw_cost = sqft * rules.per_sqft
        items.append(LineItem(
            label=f"Size {sqft:.1f} sqft @ ${fmt_rate(rules.per_sqft)}",
            amount=raw_cost,
        ))

        if has_lamination:
            lam_cost = raw_cost * rules.lamination_percent
            items.append(LineItem(label=f"Lamination (+{fmt_percent(rules.lamination_percent)})", amount=lam_cost))
            raw_cost += lam_cost

        cost = self.apply_floor(raw_cost, rules.min_price, items, itemize=False)
        return CostSection(cost, tuple(items))
