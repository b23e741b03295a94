"""Configuration for the Bolibro Rental client."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings loaded from environment."""

    api_url: str = "http://localhost:5001/api"
    api_timeout: float = 30.0
    environment: str = "development"

    geocoding_provider: str = "nominatim"
    nominatim_url: str = "https://nominatim.openstreetmap.org"
    nominatim_user_agent: str = "bolibro-rental"
    nominatim_email: str | None = None
    geocoding_country_codes: str = "us"
    geocoding_limit: int = Field(default=5, ge=1, le=50)
    geocoding_accept_language: str = "en-US,en"
    geocoding_timeout: float = 10.0
    address_debounce_seconds: float = Field(default=0.3, ge=0.0)

    session_file: Path = Field(default=Path("~/.bolibro/session.json"), validate_default=True)

    model_config = SettingsConfigDict(env_prefix="BOLIBRO_", env_file=".env", extra="ignore")

    @field_validator("api_url", "nominatim_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("session_file")
    @classmethod
    def _expand_session_file(cls, value: Path) -> Path:
        return value.expanduser()
