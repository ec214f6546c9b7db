"""
Calculator registry — maps SignCategory to fabrication calculator classes.

Every SignCategory must have an entry; test_registry_covers_every_category
keeps it that way when a category is added.
"""

from .base import BaseFabricationCalculator
from .channel_letters import ChannelLettersCalculator
from .lightbox import LightboxCalculator
from .window_vinyl import WindowVinylCalculator
from ..errors import InvariantViolation
from ..schemas import SignCategory

CALCULATOR_REGISTRY: dict[SignCategory, type] = {
    SignCategory.CHANNEL_LETTERS: ChannelLettersCalculator,
    SignCategory.LIGHTBOX: LightboxCalculator,
    SignCategory.WINDOW_VINYL: WindowVinylCalculator,
}


def get_calculator(category, rules) -> BaseFabricationCalculator:
    """Returns a calculator for the category, or raises InvariantViolation."""
    try:
        return CALCULATOR_REGISTRY[SignCategory(category)](rules)
    except (KeyError, ValueError):
        raise InvariantViolation(
            f"No fabrication calculator for sign category: {category!r}. "
            f"Available: {[c.value for c in CALCULATOR_REGISTRY]}"
        ) from None


def list_calculators() -> list[str]:
    """List all registered sign categories."""
    return [c.value for c in CALCULATOR_REGISTRY]
