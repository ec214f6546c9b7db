"""
Lightbox (cabinet) calculator.

Face area x per-sqft rate, plus a per-inch adder for cabinets deeper
than the included depth. Front-lit illumination is a flat adder that
does not scale with area.
"""

from .base import BaseFabricationCalculator, CostSection, fmt_rate, validate_measure
from ..schemas import LightingType, LineItem


class LightboxCalculator(BaseFabricationCalculator):

    AREA_BASED = True

    def calculate(self, dimensions, text, variant, lightbox_depth, has_lamination):
        rules = self.rules.lightbox
        width_in, height_in = self.validate_dimensions(dimensions)
        depth_in = validate_measure("lightbox_depth", lightbox_depth)
        items = []

        sqft = self.sq_ft_from_dimensions(width_in, height_in)
        raw_cost = sqft * rules.per_sqft
        items.append(LineItem(
            label=f"Size {sqft:.1f} sqft @ ${fmt_rate(rules.per_sqft)}",
            amount=raw_cost,
        ))

        if depth_in > rules.depth_base:
            depth_excess = depth_in - rules.depth_base
            depth_cost = depth_excess * rules.depth_adder_per_inch
            items.append(LineItem(label=f'Depth Adder ({fmt_rate(depth_excess)}" extra)', amount=depth_cost))
            raw_cost += depth_cost

        # Back-lit cabinets are priced as non-lit
        if variant.lighting is LightingType.FRONT_LIT:
            items.append(LineItem(label="Internal Illumination", amount=rules.lighting_adder_front_lit))
            raw_cost += rules.lighting_adder_front_lit

        cost = self.apply_floor(raw_cost, rules.min_price, items)
        return CostSection(cost, tuple(items))
