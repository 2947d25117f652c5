"""Application configuration."""

import json

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "info"

    # Upper bound on records per batch mask request
    max_batch_size: int = 1000

    # CORS configuration
    frontend_url: str = "http://localhost:8081"
    cors_origins: list[str] = [
        "http://localhost:8081",
        "http://localhost:19006",
    ]

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, value):
        """Accept a JSON list or a comma-separated string of origins."""
        if not isinstance(value, str):
            return value
        try:
            origins = json.loads(value)
        except json.JSONDecodeError:
            origins = None
        if isinstance(origins, list):
            return origins
        return [origin.strip() for origin in value.split(",") if origin.strip()]


settings = Settings()
