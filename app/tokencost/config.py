"""Centralized configuration loaded from environment."""

from __future__ import annotations

from decimal import Decimal
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import Locale, Variant


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    days_per_month: int = Field(default=30, alias="TOKENCOST_DAYS_PER_MONTH")
    usd_to_jpy_rate: Decimal = Field(
        default=Decimal(150), alias="TOKENCOST_USD_TO_JPY_RATE"
    )
    default_variant: Variant = Field(
        default=Variant.JAPANESE, alias="TOKENCOST_DEFAULT_VARIANT"
    )
    default_locale: Locale = Field(default=Locale.JA, alias="TOKENCOST_DEFAULT_LOCALE")
    default_tier: str = Field(default="gemini-2.0-flash", alias="TOKENCOST_DEFAULT_TIER")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
