"""
Service configuration.

Loaded from environment variables prefixed with MONTANT_RDC_ (or a .env
file). Library functions never read it: they take explicit arguments. Only
the HTTP service and the demo script pick their defaults from here.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Defaults for formatting and narration in the service."""

    model_config = SettingsConfigDict(
        env_prefix="MONTANT_RDC_",
        env_file=".env",
        extra="ignore",
    )

    currency_symbol: str = Field(default="FC", description="Suffix of formatted amounts")
    currency_name: str = Field(
        default="francs congolais", description="Currency named after narrated amounts"
    )
    decimals: int = Field(default=2, ge=0, le=6)
    log_level: str = Field(default="INFO")


@lru_cache
def get_settings() -> Settings:
    return Settings()
