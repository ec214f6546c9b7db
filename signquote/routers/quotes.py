"""
Quote endpoints — recompute on every input change in the host UI.

POST /api/quotes/calculate — QuoteRequest -> QuoteResult + display lines
POST /api/quotes/pdf       — QuoteRequest -> application/pdf
"""

import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from ..errors import InvariantViolation, PricingConfigError, QuoteValidationError
from ..pdf_generator import generate_quote_pdf
from ..quote_engine import compute_quote_from_request
from ..schemas import QuoteRequest, QuoteResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quotes", tags=["quotes"])


def _run_quote(request: QuoteRequest) -> QuoteResult:
    """compute_quote with engine errors mapped to HTTP status codes."""
    try:
        return compute_quote_from_request(request)
    except QuoteValidationError as e:
        raise HTTPException(status_code=422, detail={"field": e.field, "message": str(e)})
    except (InvariantViolation, PricingConfigError) as e:
        logger.error("Quote engine failure: %s", e)
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/calculate")
def calculate_quote(request: QuoteRequest):
    """Itemized fabrication + installation + tax estimate."""
    result = _run_quote(request)
    return {
        **result.model_dump(mode="json"),
        "fabrication_lines": result.fabrication_lines(),
        "installation_lines": result.installation_lines(),
    }


@router.post("/pdf")
def download_pdf(request: QuoteRequest):
    """Customer-facing PDF for the quote."""
    result = _run_quote(request)
    pdf_bytes = generate_quote_pdf(request, result)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="sign_quote.pdf"'},
    )
