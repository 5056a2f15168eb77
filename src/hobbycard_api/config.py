"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "HobbyCard API"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:8000"]

    # Photo API (Unsplash proxy)
    photo_api_url: str = "https://apis.scrimba.com/unsplash/photos/random"
    photo_count: int = 1
    http_timeout: float | None = None  # None disables the client timeout

    # Attribution
    unsplash_url: str = "https://unsplash.com"
    utm_source: str = "scrimba_degree"
    utm_medium: str = "referral"

    # Card defaults
    default_name: str = "Renato"
    default_hobby: str = "Paint"

    # Event log (JSON lines); empty keeps events on the standard logging tree only
    event_log_file: str = ""


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
