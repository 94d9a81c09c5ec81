"""
Configuration for the cupcake order core.

Prices and display settings are loaded from environment variables
(prefixed ``CUPCAKE_``) or a local ``.env`` file. The order store reads them
once at construction; they are not changeable through the store's API.
"""

from decimal import Decimal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Number of consecutive pickup days offered, starting today.
PICKUP_DAYS = 4


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CUPCAKE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Pricing
    unit_price: Decimal = Field(
        default=Decimal("2.00"), ge=0, description="Price for a single cupcake"
    )
    same_day_surcharge: Decimal = Field(
        default=Decimal("3.00"), ge=0, description="Additional cost for same day pickup"
    )
    currency_symbol: str = Field(default="$", min_length=1)

    # Pickup calendar
    pickup_days: int = Field(default=PICKUP_DAYS, description="Offered pickup dates")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    @field_validator("pickup_days")
    @classmethod
    def _fixed_pickup_days(cls, v: int) -> int:
        if v != PICKUP_DAYS:
            raise ValueError(f"pickup_days must be {PICKUP_DAYS}")
        return v

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, v: str) -> str:
        return v.upper()


settings = Settings()
