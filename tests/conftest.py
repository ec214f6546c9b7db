"""
Shared test fixtures — rule tables, design variants, install configs, test client.
"""

import pytest
from fastapi.testclient import TestClient

from signquote.main import app
from signquote.pricing_rules import DEFAULT_PRICING_RULES, build_pricing_rules
from signquote.schemas import DesignVariant, InstallationConfig, LightingType, LiftType


@pytest.fixture
def rules():
    """The shipped default rate table."""
    return DEFAULT_PRICING_RULES


@pytest.fixture
def no_minimum_rules():
    """Default rates with every fabrication minimum removed."""
    return build_pricing_rules({
        "channel_letters": {"min_price": 0},
        "lightbox": {"min_price": 0},
        "window_vinyl": {"min_price": 0},
    })


@pytest.fixture
def non_lit():
    return DesignVariant(name="Clean", lighting=LightingType.NON_LIT)


@pytest.fixture
def front_lit():
    return DesignVariant(name="Bold", lighting=LightingType.FRONT_LIT)


@pytest.fixture
def back_lit():
    return DesignVariant(name="Halo", lighting=LightingType.BACK_LIT)


@pytest.fixture
def ground_install():
    """Low mount, no lift, no extras."""
    return InstallationConfig(height_feet=8, lift_type=LiftType.NONE)


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)
