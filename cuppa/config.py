"""
Application settings
Load from environment variables (prefix CUPPA_) or a .env file
"""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment"""

    model_config = SettingsConfigDict(
        env_prefix="CUPPA_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "Cuppa Calculator"
    log_level: str = "INFO"

    # Frontends allowed to call /api/*
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]

    currency_symbol: str = "$"


@lru_cache
def get_settings() -> Settings:
    return Settings()
