"""
Pricing rule table tests — defaults, JSON overrides, load-time validation.
"""

import copy
import json

import pytest
from pydantic import ValidationError

from signquote.errors import PricingConfigError
from signquote.pricing_rules import (
    DEFAULT_PRICING_RULES,
    DEFAULT_RULES,
    PricingRuleTable,
    build_pricing_rules,
    get_pricing_rules,
    load_pricing_rules,
)
from signquote.schemas import LiftType


def test_default_table_shape():
    rules = DEFAULT_PRICING_RULES
    assert rules.rush_percent == 0.12
    assert rules.tax_rate == 0.05
    assert rules.window_vinyl.lamination_percent == 0.25
    assert rules.lightbox.lighting_adder_front_lit == 160.0
    assert rules.installation.contingency_percent == 0.10
    ceilings = [t.max_feet for t in rules.installation.height_tiers]
    assert ceilings == sorted(ceilings)
    assert rules.installation.lift[LiftType.SCISSOR] > 0
    assert rules.installation.lift[LiftType.BOOM] > rules.installation.lift[LiftType.SCISSOR]


def test_overrides_merge_over_defaults():
    rules = build_pricing_rules({"channel_letters": {"min_price": 1500}, "tax_rate": 0.13})
    assert rules.channel_letters.min_price == 1500
    assert rules.channel_letters.base_per_letter == DEFAULT_RULES["channel_letters"]["base_per_letter"]
    assert rules.tax_rate == 0.13
    # DEFAULT_RULES itself untouched
    assert DEFAULT_RULES["channel_letters"]["min_price"] == 1200.00


def test_tier_list_is_replaced_not_merged():
    rules = build_pricing_rules({"installation": {"height_tiers": [{"max_feet": 50, "labor_hours": 5}]}})
    assert len(rules.installation.height_tiers) == 1
    assert rules.installation.labor_rate == DEFAULT_RULES["installation"]["labor_rate"]


@pytest.mark.parametrize("overrides", [
    {"installation": {"height_tiers": []}},
    {"installation": {"height_tiers": [{"max_feet": 20, "labor_hours": 6}, {"max_feet": 10, "labor_hours": 3}]}},
    {"installation": {"height_tiers": [{"max_feet": 10, "labor_hours": 3}, {"max_feet": 10, "labor_hours": 4}]}},
    {"installation": {"lift": {"BOOM": -1}}},
    {"channel_letters": {"lighting_adder": {"FRONT_LIT": -5}}},
    {"lightbox": {"per_sqft": -1}},
    {"tax_rate": "lots"},
    {"window_vinyl": {"per_sqft_typo": 12}},
])
def test_invalid_tables_raise_config_error(overrides):
    with pytest.raises(PricingConfigError):
        build_pricing_rules(overrides)


def test_table_must_price_every_lift_and_lit_mode():
    data = copy.deepcopy(DEFAULT_RULES)
    del data["installation"]["lift"]["BOOM"]
    with pytest.raises(ValidationError):
        PricingRuleTable.model_validate(data)

    data = copy.deepcopy(DEFAULT_RULES)
    del data["channel_letters"]["lighting_adder"]["BACK_LIT"]
    with pytest.raises(ValidationError):
        PricingRuleTable.model_validate(data)


def test_load_from_json_file(tmp_path):
    path = tmp_path / "rules.json"
    path.write_text(json.dumps({"rush_percent": 0.2, "installation": {"labor_rate": 110}}))
    rules = load_pricing_rules(str(path))
    assert rules.rush_percent == 0.2
    assert rules.installation.labor_rate == 110


def test_load_without_path_returns_defaults():
    assert load_pricing_rules() == DEFAULT_PRICING_RULES


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]"])
def test_load_rejects_bad_files(tmp_path, content):
    path = tmp_path / "rules.json"
    path.write_text(content)
    with pytest.raises(PricingConfigError):
        load_pricing_rules(str(path))


def test_load_missing_file(tmp_path):
    with pytest.raises(PricingConfigError):
        load_pricing_rules(str(tmp_path / "nope.json"))


def test_rule_table_is_immutable():
    with pytest.raises(ValidationError):
        DEFAULT_PRICING_RULES.tax_rate = 0.5


def test_get_pricing_rules_is_cached():
    assert get_pricing_rules() is get_pricing_rules()
