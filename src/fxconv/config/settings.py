# src/fxconv/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Every field has a default, so the converter runs with no configuration at all;
environment variables (or a local .env file) only override behaviour.

Files that USE this module:
- fxconv.app (loads settings for logging and wiring)
- fxconv.adapters.providers.frankfurter (API URL and HTTP timeout)
- fxconv.application.session (retry delay after invalid input)
- fxconv.adapters.console.prompter (screen clearing)

Files that this module USES:
- fxconv.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from fxconv.shared.validators import (
    validate_api_url,  # Validate HTTP(S) endpoint format
    validate_log_level,  # Validate logging level name
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Exchange-rate API ---
    api_url: str = Field(default="https://api.frankfurter.app/latest", alias="FXCONV_API_URL")

    # --- HTTP Settings ---
    # None keeps the HTTP client's default (no timeout)
    http_timeout_seconds: Optional[int] = Field(default=None, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)

    # --- Console behaviour ---
    retry_delay_seconds: float = Field(default=2.0, alias="FXCONV_RETRY_DELAY_SECONDS", ge=0.0, le=30.0)
    clear_screen: bool = Field(default=True, alias="FXCONV_CLEAR_SCREEN")

    # --- Logging ---
    log_level: str = Field(default="WARNING", alias="FXCONV_LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=False, alias="FXCONV_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Validate API URL format."""
        if not validate_api_url(v):
            raise ValueError("FXCONV_API_URL must be an http:// or https:// URL")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalise the log level name."""
        if not validate_log_level(v):
            raise ValueError("FXCONV_LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return v.upper()


# Global settings instance
settings = Settings()


# ============================================================================
# Usage
# ============================================================================
#
# 1. Run the converter:
#    fxconv
#
#    Or without installing the console script:
#    python -m fxconv
#
# 2. Keep a debug log while using it:
#    FXCONV_LOG_LEVEL=DEBUG LOG_DIR=./logs fxconv
#
# 3. Point at a self-hosted Frankfurter instance:
#    FXCONV_API_URL=http://localhost:8080/latest fxconv
#
# ============================================================================
