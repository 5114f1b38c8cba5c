"""Day-by-day forecast from the rolling half-day window."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from citypage_weather.errors import MalformedWindow, MissingField
from citypage_weather.normalize.icons import icon_to_weather_type
from citypage_weather.normalize.options import NormalizationOptions
from citypage_weather.normalize.precipitation import resolve_precipitation
from citypage_weather.normalize.units import convert_temperature
from citypage_weather.normalize.window import classify_window
from citypage_weather.schemas import UnitSystem, WeatherRecord

if TYPE_CHECKING:
    from collections.abc import Sequence

    from citypage_weather.datasources.envcanada.models import ForecastSegment
    from citypage_weather.normalize.cache import TemperatureCache

logger = logging.getLogger(__name__)

LOW = "low"
HIGH = "high"


def tagged_temperature(
    segment: ForecastSegment, system: UnitSystem, where: str = ""
) -> tuple[float | None, str]:
    """
    Return a segment's converted temperature and its ``low``/``high`` tag.

    Raises:
        MissingField: The temperature or a recognised tag is absent.
    """
    if segment.temperature is None:
        raise MissingField("temperature", where)
    if segment.temperature_class not in (LOW, HIGH):
        raise MissingField("temperature class", where)
    return convert_temperature(segment.temperature, system), segment.temperature_class


def pair_extremes(
    first: ForecastSegment, second: ForecastSegment, system: UnitSystem, where: str = ""
) -> tuple[float | None, float | None]:
    """
    Min/max for a day/night pair.

    The low-tagged segment gives the minimum and the high-tagged one the
    maximum, whichever half of the day carries which tag.
    """
    minimum: float | None = None
    maximum: float | None = None
    for segment in (first, second):
        try:
            value, tag = tagged_temperature(segment, system, where)
        except MissingField as exc:
            logger.warning("Forecast %s", exc)
            continue
        if tag == LOW:
            minimum = value
        else:
            maximum = value
    return minimum, maximum


def _record(
    timestamp: datetime,
    segment: ForecastSegment,
    minimum: float | None,
    maximum: float | None,
    options: NormalizationOptions,
) -> WeatherRecord:
    precipitation = resolve_precipitation(segment, options.units)
    return WeatherRecord(
        timestamp=timestamp,
        min_temperature=minimum,
        max_temperature=maximum,
        weather_type=icon_to_weather_type(segment.icon_code),
        precipitation_value=precipitation.value if precipitation else None,
        precipitation_unit=precipitation.unit if precipitation else None,
    )


def aggregate_daily(
    segments: Sequence[ForecastSegment],
    issue_time: datetime | None,
    current_temperature: float | None,
    cache: TemperatureCache,
    options: NormalizationOptions | None = None,
) -> list[WeatherRecord]:
    """
    Build one record per day from the forecast window.

    Args:
        segments: Forecast segments in feed order.
        issue_time: Local forecast issue time; its date is day 0.
        current_temperature: Current temperature in output units, used for
            today's extremes when nothing is cached.
        cache: Temperature cache; updated from a full day-0 pair.
        options: Unit systems.

    Returns:
        Six records for a complete window, fewer if the window is truncated.

    Raises:
        MalformedWindow: Segment 0 is not a recognised current-day half.
    """
    options = options or NormalizationOptions()
    layout = classify_window(segments)
    system = options.temperature_units

    if issue_time is None:
        logger.warning("Forecast issue time missing, dating forecast from today")
        issue_time = datetime.now()
    day = issue_time.replace(hour=0, minute=0, second=0, microsecond=0)

    # Day 0
    if layout.full_day:
        if len(segments) < 2:
            msg = "daytime window is missing tonight's segment"
            raise MalformedWindow(msg)
        minimum, maximum = pair_extremes(segments[0], segments[1], system, "day 0")
        cache.remember_today(minimum, maximum)
    elif cache.has_cached_today:
        minimum, maximum = cache.cached_today_min, cache.cached_today_max
        logger.debug("Today's daytime segment rolled off, using cached extremes")
    else:
        logger.info("No cached extremes for today, falling back to current temperature")
        minimum = maximum = current_temperature
    if minimum is None:
        minimum = current_temperature
    if maximum is None:
        maximum = current_temperature

    days = [_record(day, segments[0], minimum, maximum, options)]

    for step in range(layout.next_day_offset, layout.last_index, 2):
        if step + 1 >= len(segments):
            logger.warning(
                "Forecast window truncated at segment %d (%d segments)", step, len(segments)
            )
            break
        day += timedelta(days=1)
        minimum, maximum = pair_extremes(
            segments[step], segments[step + 1], system, f"segment {step}"
        )
        days.append(_record(day, segments[step], minimum, maximum, options))

    return days
