"""Application configuration."""

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "nosh"

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


def default_data_dir() -> Path:
    """Return the XDG data directory for the ledger."""
    data_home = os.getenv("XDG_DATA_HOME")
    base = Path(data_home) if data_home else Path.home() / ".local" / "share"
    return base / APP_NAME


class Settings(BaseSettings):
    """Ledger settings loaded from NOSH_* environment variables."""

    data_dir: Path = Field(default_factory=default_data_dir)
    fdc_api_key: str = "DEMO_KEY"
    fdc_base_url: str = "https://api.nal.usda.gov/fdc/v1"
    search_page_size: int = 10
    log_level: str = "WARNING"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="NOSH_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
