"""
Output tests — PDF generation and sign summary.

Tests:
1-3.  PDF generation (bytes, multi-category, no client metadata)
4-6.  Sign summary wording
"""

from datetime import date
from unittest.mock import patch

import pytest

from signquote import pdf_generator
from signquote.pdf_generator import _fmt, _safe, generate_quote_pdf, generate_sign_summary, tax_label
from signquote.pricing_rules import build_pricing_rules
from signquote.quote_engine import compute_quote_from_request
from signquote.schemas import (
    DesignVariant,
    Dimensions,
    InstallationConfig,
    LightingType,
    LiftType,
    QuoteRequest,
    SignCategory,
)


def _channel_letter_request(**overrides):
    data = dict(
        category=SignCategory.CHANNEL_LETTERS,
        dimensions=Dimensions(width_in=96, height_in=18),
        text="OPEN",
        variant=DesignVariant(name="Bold Modern", lighting=LightingType.FRONT_LIT, rounded_backer=True),
        install_config=InstallationConfig(
            height_feet=14, lift_type=LiftType.SCISSOR,
            electrical_work=True, permit=True,
            address="123 Main St", client_name="Corner Cafe",
        ),
        is_rush=True,
    )
    data.update(overrides)
    return QuoteRequest(**data)


def test_pdf_is_generated(rules):
    request = _channel_letter_request()
    result = compute_quote_from_request(request, rules)
    pdf_bytes = generate_quote_pdf(request, result, quote_date=date(2026, 3, 1))
    assert isinstance(pdf_bytes, bytes)
    assert pdf_bytes.startswith(b"%PDF")
    assert len(pdf_bytes) > 1000


@pytest.mark.parametrize("category", list(SignCategory))
def test_pdf_for_every_category(rules, category):
    request = _channel_letter_request(
        category=category,
        dimensions=Dimensions(width_in=48, height_in=36),
        has_lamination=category is SignCategory.WINDOW_VINYL,
    )
    result = compute_quote_from_request(request, rules)
    assert generate_quote_pdf(request, result, company={"name": "Test Signs"}).startswith(b"%PDF")


def test_pdf_without_client_metadata(rules):
    request = _channel_letter_request(install_config=InstallationConfig(height_feet=8))
    result = compute_quote_from_request(request, rules)
    assert generate_quote_pdf(request, result).startswith(b"%PDF")


def test_sign_summary_channel_letters():
    summary = generate_sign_summary(_channel_letter_request())
    assert summary == (
        '96" x 18" Channel Letters, reading "OPEN", front-lit, on raceway/backer. '
        "Design: Bold Modern. Rush production."
    )


def test_sign_summary_lightbox_and_vinyl():
    lightbox = _channel_letter_request(
        category=SignCategory.LIGHTBOX, variant=DesignVariant(), is_rush=False, lightbox_depth=6,
    )
    assert generate_sign_summary(lightbox) == '96" x 18" Lightbox, 6" deep, non-lit.'

    vinyl = _channel_letter_request(
        category=SignCategory.WINDOW_VINYL, variant=DesignVariant(), is_rush=False, has_lamination=True,
    )
    assert generate_sign_summary(vinyl) == '96" x 18" Window Vinyl, laminated.'


def test_money_and_text_helpers():
    assert _fmt(1234.5) == "$1,234.50"
    assert _fmt(None) == "$0.00"
    assert _safe("Café — “OPEN”") == 'Café  -  "OPEN"'


def test_tax_label_uses_configured_rate():
    assert tax_label(0.05) == "GST (5%)"
    assert tax_label(0.055) == "GST (5.5%)"
    assert tax_label(0.13) == "GST (13%)"


def test_pdf_tax_label_comes_from_rule_table():
    rules = build_pricing_rules({"tax_rate": 0.055})
    request = _channel_letter_request()
    result = compute_quote_from_request(request, rules)
    with patch.object(pdf_generator, "tax_label", wraps=tax_label) as label:
        assert generate_quote_pdf(request, result, rules=rules).startswith(b"%PDF")
    label.assert_called_once_with(0.055)
