import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .pricing_rules import get_pricing_rules
from .routers import pricing, quotes

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("signquote")

app = FastAPI(
    title="Sign Quote Engine",
    description="Storefront sign fabrication + installation quoting",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(quotes.router, prefix="/api")
app.include_router(pricing.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "signquote"}


@app.on_event("startup")
def load_rules():
    """Load the pricing table at startup so a bad table fails the boot, not a quote."""
    rules = get_pricing_rules()
    logger.info("Pricing rules ready: %d install height tiers, tax %.2f%%",
                len(rules.installation.height_tiers), rules.tax_rate * 100)
