"""
Pricing rule table — every rate the quote engine reads.

Loaded once per process (get_pricing_rules) and never mutated afterwards.
DEFAULT_RULES is the shipped rate sheet; a JSON file named by
settings.PRICING_RULES_PATH can override any subset of it:

    {"channel_letters": {"min_price": 1500}, "tax_rate": 0.13}

Table problems surface here as PricingConfigError, at load time,
rather than in the middle of a quote.
"""

import copy
import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .config import settings
from .errors import PricingConfigError
from .schemas import LiftType

logger = logging.getLogger(__name__)


DEFAULT_RULES = {
    "channel_letters": {
        "base_per_letter": 45.00,
        "per_inch_height": 2.50,      # per letter, per inch of letter height
        "lighting_adder": {
            "FRONT_LIT": 35.00,       # per letter
            "BACK_LIT": 45.00,        # per letter (halo)
        },
        "backer_adder": 350.00,       # raceway / rounded backer, flat
        "min_price": 1200.00,
    },
    "lightbox": {
        "per_sqft": 85.00,
        "depth_base": 4.0,            # inches included in per_sqft
        "depth_adder_per_inch": 25.00,
        "lighting_adder_front_lit": 160.00,  # flat, not scaled by area
        "min_price": 900.00,
    },
    "window_vinyl": {
        "per_sqft": 12.00,
        "lamination_percent": 0.25,
        "min_price": 150.00,
    },
    "rush_percent": 0.12,
    "installation": {
        "base_trip": 150.00,
        "labor_rate": 95.00,
        "height_tiers": [
            {"max_feet": 10, "labor_hours": 3},
            {"max_feet": 15, "labor_hours": 4},
            {"max_feet": 20, "labor_hours": 6},
            {"max_feet": 30, "labor_hours": 8},   # also used above 30'
        ],
        "lift": {
            "SCISSOR": 350.00,
            "BOOM": 650.00,
        },
        "electrical": 250.00,
        "permit": 300.00,
        "hard_access": 150.00,
        "contingency_percent": 0.10,
    },
    "tax_rate": 0.05,                 # GST
}


class _Rules(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class ChannelLetterRules(_Rules):
    base_per_letter: float = Field(ge=0)
    per_inch_height: float = Field(ge=0)
    lighting_adder: Dict[str, float]
    backer_adder: float = Field(ge=0)
    min_price: float = Field(ge=0)

    @field_validator("lighting_adder")
    @classmethod
    def _lit_modes_priced(cls, value):
        missing = {"FRONT_LIT", "BACK_LIT"} - set(value)
        if missing:
            raise ValueError(f"lighting_adder missing {sorted(missing)}")
        if any(v < 0 for v in value.values()):
            raise ValueError("lighting_adder rates must be >= 0")
        return value


class LightboxRules(_Rules):
    per_sqft: float = Field(ge=0)
    depth_base: float = Field(ge=0)
    depth_adder_per_inch: float = Field(ge=0)
    lighting_adder_front_lit: float = Field(ge=0)
    min_price: float = Field(ge=0)


class WindowVinylRules(_Rules):
    per_sqft: float = Field(ge=0)
    lamination_percent: float = Field(ge=0)
    min_price: float = Field(ge=0)


class HeightTier(_Rules):
    max_feet: float = Field(gt=0)
    labor_hours: float = Field(ge=0)


class InstallationRules(_Rules):
    base_trip: float = Field(ge=0)
    labor_rate: float = Field(ge=0)
    height_tiers: List[HeightTier] = Field(min_length=1)
    lift: Dict[LiftType, float]
    electrical: float = Field(ge=0)
    permit: float = Field(ge=0)
    hard_access: float = Field(ge=0)
    contingency_percent: float = Field(ge=0)

    @field_validator("height_tiers")
    @classmethod
    def _tiers_ascending(cls, tiers):
        ceilings = [t.max_feet for t in tiers]
        if ceilings != sorted(ceilings) or len(set(ceilings)) != len(ceilings):
            raise ValueError(f"height_tiers must be strictly ascending by max_feet, got {ceilings}")
        return tiers

    @model_validator(mode="after")
    def _lifts_priced(self):
        missing = [lt.value for lt in LiftType if lt is not LiftType.NONE and lt not in self.lift]
        if missing:
            raise ValueError(f"lift table missing {missing}")
        if any(v < 0 for v in self.lift.values()):
            raise ValueError("lift costs must be >= 0")
        return self


class PricingRuleTable(_Rules):
    channel_letters: ChannelLetterRules
    lightbox: LightboxRules
    window_vinyl: WindowVinylRules
    rush_percent: float = Field(ge=0)
    installation: InstallationRules
    tax_rate: float = Field(ge=0)


def _merge(base: dict, override: dict) -> dict:
    """Recursively overlay `override` on a copy of `base`. Lists are replaced whole."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def build_pricing_rules(overrides: Optional[dict] = None) -> PricingRuleTable:
    """Validate DEFAULT_RULES with optional overrides into a PricingRuleTable."""
    data = _merge(DEFAULT_RULES, overrides or {})
    try:
        return PricingRuleTable.model_validate(data)
    except ValidationError as e:
        logger.error("Invalid pricing rule table: %s", e)
        raise PricingConfigError(f"Invalid pricing rule table: {e}") from e


def load_pricing_rules(path: Optional[str] = None) -> PricingRuleTable:
    """
    Load the rule table, overlaying the JSON file at `path` if given.

    Raises PricingConfigError if the file can't be read, isn't a JSON
    object, or produces an invalid table.
    """
    if path is None:
        return build_pricing_rules()

    try:
        overrides = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Could not read pricing rules from %s: %s", path, e)
        raise PricingConfigError(f"Could not read pricing rules from {path}: {e}") from e

    if not isinstance(overrides, dict):
        raise PricingConfigError(f"Pricing rules in {path} must be a JSON object")

    rules = build_pricing_rules(overrides)
    logger.info("Loaded pricing rule overrides from %s", path)
    return rules


DEFAULT_PRICING_RULES = build_pricing_rules()


@lru_cache(maxsize=1)
def get_pricing_rules() -> PricingRuleTable:
    """Process-wide rule table, loaded on first use."""
    return load_pricing_rules(settings.PRICING_RULES_PATH)
