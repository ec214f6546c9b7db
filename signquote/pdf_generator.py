"""
PDF Quote Generator.

Generates the customer-facing sign quote from a QuoteRequest and its
QuoteResult. Uses fpdf2 (pure Python, no system dependencies).

Sections, always in this order:
1. Header (company, quote date, validity, client)
2. Sign summary
3. Fabrication line items
4. Installation line items
5. Totals (subtotal, tax, total)

Line items are printed verbatim and never reordered.
"""

from datetime import date
from typing import Optional

from fpdf import FPDF

from .calculators.base import fmt_percent
from .config import settings
from .pricing_rules import PricingRuleTable, get_pricing_rules
from .schemas import LightingType, QuoteRequest, QuoteResult, SignCategory

LIGHTING_NAMES = {
    LightingType.NON_LIT: "Non-lit",
    LightingType.FRONT_LIT: "Front-lit",
    LightingType.BACK_LIT: "Back-lit (halo)",
}


def generate_sign_summary(request: QuoteRequest) -> str:
    """One-line plain-language description of the sign being quoted."""
    dims = request.dimensions
    parts = [f'{dims.width_in:g}" x {dims.height_in:g}" {request.category.value}']

    if request.category is SignCategory.CHANNEL_LETTERS and request.text.strip():
        parts.append(f'reading "{request.text.strip()}"')
    if request.category is SignCategory.LIGHTBOX:
        parts.append(f'{request.lightbox_depth:g}" deep')
    if request.category is not SignCategory.WINDOW_VINYL:
        parts.append(LIGHTING_NAMES[request.variant.lighting].lower())
    if request.variant.rounded_backer:
        parts.append("on raceway/backer")
    if request.has_lamination:
        parts.append("laminated")

    summary = ", ".join(parts)
    if request.variant.name:
        summary += f". Design: {request.variant.name}"
    if request.is_rush:
        summary += ". Rush production"
    return summary + "."


def tax_label(tax_rate: float) -> str:
    """0.05 -> 'GST (5%)'; 0.055 -> 'GST (5.5%)'"""
    return f"GST ({fmt_percent(tax_rate)})"


def _fmt(amount) -> str:
    """Format a number as $X,XXX.XX"""
    try:
        return f"${float(amount):,.2f}"
    except (ValueError, TypeError):
        return "$0.00"


def _safe(text: str) -> str:
    """Replace Unicode chars that can't be rendered by built-in PDF fonts (latin-1)."""
    if not text:
        return ""
    return (
        text
        .replace("•", "-")    # bullet
        .replace("—", " - ")  # em dash
        .replace("–", "-")    # en dash
        .replace("“", '"')    # left double quote
        .replace("”", '"')    # right double quote
        .replace("‘", "'")    # left single quote
        .replace("’", "'")    # right single quote
        .encode("latin-1", errors="replace")
        .decode("latin-1")
    )


class QuotePDF(FPDF):
    """Custom PDF class for sign quote documents."""

    def __init__(self):
        super().__init__()
        self.set_auto_page_break(auto=True, margin=20)

    def footer(self):
        self.set_y(-15)
        self.set_font("Helvetica", "I", 8)
        self.set_text_color(150, 150, 150)
        self.cell(0, 10, f"Page {self.page_no()}/{{nb}}", align="C")

    def section_header(self, title):
        """Render a section header bar."""
        self.set_font("Helvetica", "B", 11)
        self.set_fill_color(45, 55, 72)
        self.set_text_color(255, 255, 255)
        self.cell(0, 8, f"  {title}", fill=True, new_x="LMARGIN", new_y="NEXT")
        self.set_text_color(0, 0, 0)
        self.ln(2)

    def line_item_row(self, label, amount):
        self.set_font("Helvetica", "", 9)
        self.cell(140, 5.5, _safe(f"  {label}"))
        self.cell(50, 5.5, _fmt(amount), align="R")
        self.ln()

    def subtotal_row(self, label, amount):
        """Render a subtotal row spanning the full width."""
        self.set_font("Helvetica", "B", 9)
        self.cell(140, 6, label, align="R", border="T")
        self.cell(50, 6, _fmt(amount), align="R", border="T")
        self.ln(8)


def generate_quote_pdf(request: QuoteRequest, result: QuoteResult,
                       company: Optional[dict] = None,
                       quote_date: Optional[date] = None,
                       rules: Optional[PricingRuleTable] = None) -> bytes:
    """
    Generate a PDF quote document.

    Args:
        request: the inputs that were quoted (client, address, sign details)
        result: compute_quote output for that request
        company: optional {"name", "address", "phone", "email"}; defaults to settings
        quote_date: defaults to today
        rules: rate table the quote was priced with; defaults to the process-wide table

    Returns:
        PDF bytes
    """
    company = company or {
        "name": settings.COMPANY_NAME,
        "address": settings.COMPANY_ADDRESS,
        "phone": settings.COMPANY_PHONE,
        "email": settings.COMPANY_EMAIL,
    }
    quote_date = quote_date or date.today()
    rules = rules or get_pricing_rules()
    install = request.install_config

    pdf = QuotePDF()
    pdf.alias_nb_pages()
    pdf.add_page()

    # ── SECTION 1: Header ──
    pdf.set_font("Helvetica", "B", 20)
    pdf.cell(0, 10, _safe(company.get("name") or "Sign Quote"), new_x="LMARGIN", new_y="NEXT")

    contact = " | ".join(p for p in (company.get("address"), company.get("phone"), company.get("email")) if p)
    if contact:
        pdf.set_font("Helvetica", "", 9)
        pdf.set_text_color(100, 100, 100)
        pdf.cell(0, 5, _safe(contact), new_x="LMARGIN", new_y="NEXT")
        pdf.set_text_color(0, 0, 0)
    pdf.ln(4)

    pdf.set_font("Helvetica", "B", 14)
    pdf.cell(0, 8, "SIGN QUOTE", new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("Helvetica", "", 10)
    pdf.cell(0, 5, f"Date: {quote_date.strftime('%B %d, %Y')}", new_x="LMARGIN", new_y="NEXT")
    pdf.cell(0, 5, f"Valid for: {settings.QUOTE_VALID_DAYS} days", new_x="LMARGIN", new_y="NEXT")
    if install.client_name:
        pdf.cell(0, 5, _safe(f"Prepared for: {install.client_name}"), new_x="LMARGIN", new_y="NEXT")
    if install.address:
        pdf.cell(0, 5, _safe(f"Site: {install.address}"), new_x="LMARGIN", new_y="NEXT")
    pdf.ln(4)

    # ── SECTION 2: Sign summary ──
    pdf.set_font("Helvetica", "B", 11)
    pdf.cell(0, 6, f"Sign: {request.category.value}", new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("Helvetica", "", 9)
    pdf.multi_cell(0, 4.5, _safe(generate_sign_summary(request)))
    pdf.ln(6)

    # ── SECTION 3: Fabrication ──
    pdf.section_header("FABRICATION")
    for item in result.fabrication_items:
        pdf.line_item_row(item.label, item.amount)
    pdf.subtotal_row("Fabrication Subtotal", result.fabrication_cost)

    # ── SECTION 4: Installation ──
    pdf.section_header("INSTALLATION")
    pdf.set_font("Helvetica", "I", 8)
    pdf.cell(0, 5, f"  Mounting height: {install.height_feet:g} ft", new_x="LMARGIN", new_y="NEXT")
    for item in result.installation_items:
        pdf.line_item_row(item.label, item.amount)
    pdf.subtotal_row("Installation Subtotal", result.installation_cost)

    # ── SECTION 5: Totals ──
    pdf.section_header("PROJECT TOTAL")
    pdf.set_font("Helvetica", "", 10)
    for label, amount in (("Subtotal", result.subtotal), (tax_label(rules.tax_rate), result.tax)):
        pdf.cell(130, 6, label)
        pdf.cell(60, 6, _fmt(amount), align="R")
        pdf.ln()

    pdf.ln(1)
    pdf.set_fill_color(45, 55, 72)
    pdf.set_text_color(255, 255, 255)
    pdf.set_font("Helvetica", "B", 13)
    pdf.cell(130, 10, "  QUOTE TOTAL", fill=True)
    pdf.cell(60, 10, f"{_fmt(result.total)}  ", fill=True, align="R")
    pdf.set_text_color(0, 0, 0)
    pdf.ln(14)

    pdf.set_font("Helvetica", "I", 8)
    pdf.set_text_color(100, 100, 100)
    pdf.cell(0, 4, "Estimate only. Final pricing subject to site survey.", new_x="LMARGIN", new_y="NEXT")
    pdf.set_text_color(0, 0, 0)

    return bytes(pdf.output())
