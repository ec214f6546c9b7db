from fastapi import APIRouter

from ..calculators.registry import list_calculators
from ..pricing_rules import get_pricing_rules

router = APIRouter(prefix="/pricing", tags=["pricing"])


@router.get("/rules")
def pricing_rules():
    """The active rate table, so the UI can show rates next to options."""
    return get_pricing_rules().model_dump(mode="json")


@router.get("/categories")
def sign_categories():
    return list_calculators()
