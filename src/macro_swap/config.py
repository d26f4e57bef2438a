"""Application configuration."""

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    catalog_path: Path | None = None
    search_max_results: int = Field(default=6, ge=1)
    search_cache_size: int = Field(default=256, ge=0)
    consent_store_path: Path = Path(".macro_swap_consent.json")
    consent_ttl_days: int = Field(default=30, ge=1)
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="MACRO_SWAP_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
