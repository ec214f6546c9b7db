from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    COMPANY_NAME: str = "Storefront Sign Co."
    COMPANY_EMAIL: str = ""
    COMPANY_PHONE: str = ""
    COMPANY_ADDRESS: str = ""
    QUOTE_VALID_DAYS: int = 30
    LOG_LEVEL: str = "INFO"

    # Optional JSON file overriding DEFAULT_RULES in pricing_rules.py
    PRICING_RULES_PATH: Optional[str] = None

    class Config:
        env_file = ".env"


settings = Settings()
