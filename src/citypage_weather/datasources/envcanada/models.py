"""Typed views of the citypage XML elements the engine reads.

Every field is optional: the feed is never assumed complete.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime


@dataclass(frozen=True)
class CurrentConditions:
    """``siteData/currentConditions``. Temperatures in Celsius, wind in km/h."""

    observed_at: datetime | None = None
    temperature: float | None = None
    wind_speed: float | None = None
    wind_bearing: float | None = None
    relative_humidity: float | None = None
    icon_code: str | None = None
    wind_chill: float | None = None
    humidex: float | None = None


@dataclass(frozen=True)
class ForecastSegment:
    """One ``forecastGroup/forecast`` element: a daytime or nighttime half-day."""

    period_label: str | None = None
    temperature: float | None = None
    temperature_class: str | None = None  # "low" or "high"
    icon_code: str | None = None
    pop: float | None = None
    pop_units: str | None = None
    accumulation_amount: float | None = None
    accumulation_units: str | None = None


@dataclass(frozen=True)
class HourlySlot:
    """One ``hourlyForecastGroup/hourlyForecast`` element."""

    utc_time: datetime | None = None
    temperature: float | None = None
    icon_code: str | None = None
    lop: float | None = None
    lop_units: str | None = None
