"""
Channel letter calculator.

Priced per letter: base + height adder + lighting upgrade, plus a flat
raceway/backer. Whitespace doesn't count as a letter; an empty string
prices at zero and lands on the minimum.
"""

from .base import BaseFabricationCalculator, CostSection, fmt_rate
from ..schemas import LightingType, LineItem

LIGHTING_LABELS = {
    LightingType.FRONT_LIT: "Front Lit Upgrade",
    LightingType.BACK_LIT: "Back Lit Upgrade",
}


def count_letters(text: str) -> int:
    """Number of non-whitespace characters."""
    return sum(1 for ch in (text or "") if not ch.isspace())


class ChannelLettersCalculator(BaseFabricationCalculator):

    def calculate(self, dimensions, text, variant, lightbox_depth, has_lamination):
        rules = self.rules.channel_letters
        _, height_in = self.validate_dimensions(dimensions)
        letter_count = count_letters(text)
        items = []

        base_cost = letter_count * rules.base_per_letter
        items.append(LineItem(
            label=f"{letter_count} Letters Base @ ${fmt_rate(rules.base_per_letter)}",
            amount=base_cost,
        ))
        raw_cost = base_cost

        height_cost = letter_count * height_in * rules.per_inch_height
        items.append(LineItem(label=f'Height Adder ({fmt_rate(height_in)}")', amount=height_cost))
        raw_cost += height_cost

        if variant.lighting is not LightingType.NON_LIT:
            lit_cost = letter_count * rules.lighting_adder[variant.lighting.value]
            items.append(LineItem(label=LIGHTING_LABELS[variant.lighting], amount=lit_cost))
            raw_cost += lit_cost

        if variant.rounded_backer:
            items.append(LineItem(label="Raceway/Backer", amount=rules.backer_adder))
            raw_cost += rules.backer_adder

        cost = self.apply_floor(raw_cost, rules.min_price, items)
        return CostSection(cost, tuple(items))
