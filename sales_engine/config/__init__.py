"""
Engine configuration settings.

Values are read from environment variables prefixed with SALES_ENGINE_
(e.g. SALES_ENGINE_TOP_PRODUCTS_LIMIT=5) or from a local .env file.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="SALES_ENGINE_",
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Report shape
    TOP_PRODUCTS_LIMIT: int = Field(10, ge=1)
    MONEY_DECIMALS: int = Field(2, ge=0)

    # Default bonus policy (share of profit by rank)
    BONUS_RATE_FIRST: float = 0.15     # rank 0
    BONUS_RATE_PODIUM: float = 0.10    # ranks 1 and 2
    BONUS_RATE_DEFAULT: float = 0.05   # everyone else except the last


# Create settings instance
settings = Settings()
