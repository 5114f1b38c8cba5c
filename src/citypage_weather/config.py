"""
Application settings.

Loaded from environment variables (``CITYPAGE_`` prefix) and an optional
``.env`` file. Example::

    CITYPAGE_SITE_CODE=s0000458
    CITYPAGE_PROV_CODE=ON
    CITYPAGE_UNITS=imperial
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from citypage_weather.schemas import UnitSystem

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    """Runtime configuration for the citypage weather poller."""

    app_name: str = "citypage-weather"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Environment Canada site, see site_list_en.csv on dd.weather.gc.ca
    site_code: str = Field(default="s0000458", pattern=r"^s\d{7}$")
    prov_code: str = Field(default="ON", min_length=2, max_length=2)
    base_url: str = "https://dd.weather.gc.ca/citypage_weather/xml"

    # Units: ``units`` covers precipitation amounts, temperature/wind are independent
    units: UnitSystem = UnitSystem.METRIC
    temperature_units: UnitSystem = UnitSystem.METRIC
    wind_units: UnitSystem = UnitSystem.METRIC

    show_feels_like: bool = True
    show_precipitation_amount: bool = False

    poll_interval_minutes: int = Field(default=10, ge=1)
    data_dir: Path = Path("data")
    persist_cache: bool = False

    model_config = SettingsConfigDict(
        env_prefix="CITYPAGE_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (read once)."""
    return Settings()


def configure_logging(level: str | int | None = None) -> None:
    """Configure root logging for CLI and flow runs."""
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logging.basicConfig(level=level, format=LOG_FORMAT)
