"""
Quote engine data model.

Inputs (Dimensions, DesignVariant, InstallationConfig) arrive from the
host UI and are frozen: the engine never mutates caller-owned data.
QuoteResult keeps unrounded numbers; rounding happens only at display time.
"""

import enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict


class SignCategory(str, enum.Enum):
    CHANNEL_LETTERS = "Channel Letters"
    LIGHTBOX = "Lightbox"
    WINDOW_VINYL = "Window Vinyl"


class LightingType(str, enum.Enum):
    NON_LIT = "NON_LIT"
    FRONT_LIT = "FRONT_LIT"
    BACK_LIT = "BACK_LIT"


class LiftType(str, enum.Enum):
    NONE = "NONE"
    SCISSOR = "SCISSOR"
    BOOM = "BOOM"


class Dimensions(BaseModel):
    model_config = ConfigDict(frozen=True)

    width_in: float
    height_in: float


class DesignVariant(BaseModel):
    """
    One design option from the variant generator.

    Only `lighting` and `rounded_backer` affect price; the rest is
    passed through for rendering.
    """
    model_config = ConfigDict(frozen=True)

    lighting: LightingType = LightingType.NON_LIT
    rounded_backer: bool = False
    name: str = ""
    font_family: str = ""
    letter_spacing: str = ""
    stroke: bool = False
    stroke_width: str = ""
    recommended_letter_height_in: Optional[float] = None
    color: Optional[str] = None
    background_color: Optional[str] = None
    description: Optional[str] = None


class InstallationConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    height_feet: float
    lift_type: LiftType = LiftType.NONE
    electrical_work: bool = False
    permit: bool = False
    hard_access: bool = False
    # Customer metadata, printed on the PDF only
    address: str = ""
    client_name: str = ""


class LineItem(BaseModel):
    """A labeled cost contribution. Emission order is meaningful."""
    model_config = ConfigDict(frozen=True)

    label: str
    amount: float

    def display(self) -> str:
        """Customer-facing text, e.g. 'Base Trip Fee: $150.00'."""
        return f"{self.label}: ${self.amount:,.2f}"


class QuoteResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    fabrication_cost: float
    installation_cost: float
    subtotal: float
    tax: float
    total: float
    fabrication_items: Tuple[LineItem, ...] = ()
    installation_items: Tuple[LineItem, ...] = ()
    install_labor: float = 0.0
    install_lift: float = 0.0

    def fabrication_lines(self) -> list:
        return [item.display() for item in self.fabrication_items]

    def installation_lines(self) -> list:
        return [item.display() for item in self.installation_items]


class QuoteRequest(BaseModel):
    """Everything compute_quote needs, as one JSON-able body."""
    model_config = ConfigDict(frozen=True)

    category: SignCategory
    dimensions: Dimensions
    text: str = ""
    variant: DesignVariant = DesignVariant()
    install_config: InstallationConfig
    is_rush: bool = False
    has_lamination: bool = False
    lightbox_depth: float = 4.0
