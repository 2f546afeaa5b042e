"""Configuration management for the GymBro matching service."""

from typing import Any

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application Configuration
    APP_NAME: str = "GymBro Matching"
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"
    DEBUG: bool = Field(default=None)

    # Storage Configuration
    DATA_FILE: str = "data/storage.json"
    DEFAULT_IMAGE_URL: str = "/images/default.jpg"

    # API Configuration
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8080

    # Sentry Configuration
    SENTRY_DSN: str | None = None

    @field_validator("DEBUG", mode="before")
    @classmethod
    def set_debug(cls, v: Any, info: ValidationInfo) -> bool:
        """Enable debug mode if ENVIRONMENT is development."""
        if isinstance(v, bool):
            return v
        if isinstance(v, str) and v.strip():
            return v.strip().lower() in ("1", "true", "yes", "on")
        return bool(info.data.get("ENVIRONMENT", "").lower() == "development")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore", validate_default=True
    )


# Create a global settings instance
settings = Settings()
