"""
Domain models for citypage weather.

Pydantic models for the canonical output of the normalization engine.
These define the canonical schema - datasources normalize feed documents to these.
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field, model_validator

# =============================================================================
# Units
# =============================================================================


class UnitSystem(StrEnum):
    """Unit system for temperature, wind and precipitation amounts."""

    METRIC = "metric"
    IMPERIAL = "imperial"


class PrecipitationUnit(StrEnum):
    """Unit attached to a precipitation value."""

    PERCENT = "%"
    INCH = "in"
    MILLIMETRE = "mm"
    CENTIMETRE = "cm"

    @property
    def is_probability(self) -> bool:
        """True for a probability (POP/LOP), False for an accumulation."""
        return self is PrecipitationUnit.PERCENT


# =============================================================================
# Weather records
# =============================================================================


class WeatherRecord(BaseModel):
    """A canonical weather record: current conditions, one day, or one hour.

    Daily records carry ``min_temperature``/``max_temperature``; the
    current-conditions record carries ``temperature``, wind, humidity,
    ``feels_like_temperature`` and sunrise/sunset; hourly records carry
    ``temperature``. Precipitation is either a probability (``%``) or an
    accumulated amount, never both.
    """

    timestamp: datetime
    temperature: float | None = None
    min_temperature: float | None = None
    max_temperature: float | None = None
    wind_speed: float | None = None
    wind_direction: float | None = Field(default=None, description="Bearing in degrees")
    humidity: float | None = Field(default=None, description="Relative humidity (%)")
    feels_like_temperature: float | None = None
    precipitation_value: float | None = None
    precipitation_unit: PrecipitationUnit | None = None
    weather_type: str = "unknown"
    sunrise: datetime | None = None
    sunset: datetime | None = None

    @model_validator(mode="after")
    def _precipitation_pair(self) -> WeatherRecord:
        if (self.precipitation_value is None) != (self.precipitation_unit is None):
            msg = "precipitation_value and precipitation_unit must be set together"
            raise ValueError(msg)
        return self


class NormalizedFeed(BaseModel):
    """Output of one normalization cycle over a single feed document.

    ``errors`` maps a pass name (``current``, ``daily``, ``hourly``) to the
    reason that pass produced no output. The other passes are unaffected.
    """

    current: WeatherRecord | None = None
    daily: list[WeatherRecord] = Field(default_factory=list)
    hourly: list[WeatherRecord] = Field(default_factory=list)
    errors: dict[str, str] = Field(default_factory=dict)
    show_precipitation_amount: bool = False
    # No POP exists for "now", so the current record never shows an amount.
    current_show_precipitation_amount: bool = False

    @property
    def ok(self) -> bool:
        """True when every pass produced output."""
        return not self.errors
