"""Current conditions record."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from citypage_weather.errors import NoDataAvailable
from citypage_weather.normalize.icons import icon_to_weather_type
from citypage_weather.normalize.options import NormalizationOptions
from citypage_weather.normalize.units import convert_temperature, convert_wind
from citypage_weather.schemas import WeatherRecord

if TYPE_CHECKING:
    from collections.abc import Sequence

    from citypage_weather.datasources.envcanada.models import CurrentConditions
    from citypage_weather.normalize.cache import TemperatureCache
    from citypage_weather.schemas import UnitSystem

logger = logging.getLogger(__name__)

# Positions in riseSet/dateTime: {sunrise UTC, sunrise local, sunset UTC, sunset local}
SUNRISE_INDEX = 1
SUNSET_INDEX = 3


def current_temperature(
    conditions: CurrentConditions, cache: TemperatureCache, system: UnitSystem
) -> float:
    """
    Current temperature in output units, falling back to the cached value.

    A reading from the feed refreshes the cache.

    Raises:
        NoDataAvailable: No reading in the feed and nothing cached yet.
    """
    temperature = convert_temperature(conditions.temperature, system)
    if temperature is not None:
        cache.remember_current(temperature)
        return temperature
    if cache.cached_current_temperature is not None:
        logger.warning(
            "Current temperature missing, using cached %.1f", cache.cached_current_temperature
        )
        return cache.cached_current_temperature
    msg = "current temperature missing and nothing cached yet"
    raise NoDataAvailable(msg)


def feels_like(
    temperature: float, conditions: CurrentConditions, system: UnitSystem
) -> float:
    """Wind chill or humidex if reported, else the temperature itself.

    Wind chill and humidex should not both appear; if they do, humidex wins.
    """
    result: float | None = temperature
    if conditions.wind_chill is not None:
        result = convert_temperature(conditions.wind_chill, system)
    if conditions.humidex is not None:
        result = convert_temperature(conditions.humidex, system)
    return temperature if result is None else result


def _at(values: Sequence[datetime | None], index: int) -> datetime | None:
    return values[index] if index < len(values) else None


def extract_current(
    conditions: CurrentConditions,
    rise_set: Sequence[datetime | None],
    cache: TemperatureCache,
    options: NormalizationOptions | None = None,
    now: datetime | None = None,
) -> WeatherRecord:
    """
    Build the current-conditions record.

    Args:
        conditions: Current conditions block.
        rise_set: Rise/set timestamps in feed order.
        cache: Temperature cache, refreshed with a fresh reading.
        options: Unit systems and the feels-like flag.
        now: Record timestamp when the feed has no observation time.

    Raises:
        NoDataAvailable: See ``current_temperature``.
    """
    options = options or NormalizationOptions()
    temperature = current_temperature(conditions, cache, options.temperature_units)

    timestamp = conditions.observed_at or now or datetime.now()
    sunrise = _at(rise_set, SUNRISE_INDEX)
    sunset = _at(rise_set, SUNSET_INDEX)
    if sunrise is None or sunset is None:
        logger.debug("Rise/set list incomplete (%d entries)", len(rise_set))

    return WeatherRecord(
        timestamp=timestamp,
        temperature=temperature,
        wind_speed=convert_wind(conditions.wind_speed, options.wind_units),
        wind_direction=conditions.wind_bearing,
        humidity=conditions.relative_humidity,
        feels_like_temperature=(
            feels_like(temperature, conditions, options.temperature_units)
            if options.show_feels_like
            else None
        ),
        weather_type=icon_to_weather_type(conditions.icon_code),
        sunrise=sunrise,
        sunset=sunset,
    )
