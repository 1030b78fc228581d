"""
Application configuration using Pydantic Settings.
"""

import os
from functools import lru_cache
from pydantic_settings import BaseSettings


def get_env_file() -> str:
    """Determine which env file to use based on environment."""
    env = os.getenv("APP_ENV", "development")
    if env == "production":
        return ".env.production"
    return ".env.development"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App settings
    app_name: str = "Sale & Investment Calculator"
    debug: bool = False
    log_level: str = "INFO"
    app_env: str = "development"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Default sale scenario
    default_sale_price: float = 300000
    default_purchase_price: float = 200000
    default_years_held: float = 5
    default_outstanding_mortgage: float = 60000

    # Default sale fee rates (whole-number percentages)
    default_municipal_gain_tax_pct: float = 7
    default_income_tax_pct: float = 19
    default_agency_fee_pct: float = 4
    default_notary_pct: float = 0.3
    default_registry_pct: float = 0.15
    default_agency_management_pct: float = 0.5
    default_other_pct: float = 1.2

    # Template for newly added portfolio properties
    default_property_purchase_price: float = 150000
    default_property_down_payment_pct: float = 20
    default_property_mortgage_term_years: float = 25
    default_property_annual_interest_rate_pct: float = 3.5
    default_property_purchase_fees_pct: float = 12
    default_property_renovation_cost: float = 0
    default_property_num_rooms: float = 3
    default_property_rent_per_room: float = 400
    default_property_monthly_expenses: float = 150
    default_property_vacancy_pct: float = 8

    class Config:
        env_file = get_env_file()
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
