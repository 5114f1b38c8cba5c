"""Rolling 24-hour forecast.

Slot 0 is the next on-the-hour slot. Slots are self-contained: no window
or cache logic applies.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import TYPE_CHECKING

from citypage_weather.normalize.icons import icon_to_weather_type
from citypage_weather.normalize.options import NormalizationOptions
from citypage_weather.normalize.units import convert_temperature
from citypage_weather.schemas import PrecipitationUnit, WeatherRecord

if TYPE_CHECKING:
    from collections.abc import Sequence

    from citypage_weather.datasources.envcanada.models import HourlySlot

logger = logging.getLogger(__name__)

HOURLY_SLOTS = 24


def extract_hourly(
    slots: Sequence[HourlySlot],
    utc_offset: float | None,
    options: NormalizationOptions | None = None,
    hours: int = HOURLY_SLOTS,
) -> list[WeatherRecord]:
    """
    Build hourly records in local time.

    Args:
        slots: Hourly slots in feed order.
        utc_offset: Hours to add to each slot's UTC time (e.g. ``-4`` for EDT).
        options: Unit systems.
        hours: Maximum number of slots to read.

    Returns:
        One record per slot that carries a timestamp.
    """
    options = options or NormalizationOptions()
    if utc_offset is None:
        logger.warning("Hourly UTC offset missing, hourly times stay in UTC")
        utc_offset = 0.0
    offset = timedelta(hours=utc_offset)

    if len(slots) < hours:
        logger.debug("Hourly forecast has %d of %d slots", len(slots), hours)

    records: list[WeatherRecord] = []
    for index, slot in enumerate(slots[:hours]):
        if slot.utc_time is None:
            logger.warning("Hourly slot %d has no timestamp, skipping", index)
            continue
        temperature = convert_temperature(slot.temperature, options.temperature_units)
        if temperature is None:
            logger.debug("Hourly slot %d has no temperature", index)

        precipitation_value = None
        precipitation_unit = None
        if slot.lop is not None and slot.lop > 0:
            precipitation_value = slot.lop
            precipitation_unit = PrecipitationUnit.PERCENT

        records.append(
            WeatherRecord(
                timestamp=slot.utc_time + offset,
                temperature=temperature,
                precipitation_value=precipitation_value,
                precipitation_unit=precipitation_unit,
                weather_type=icon_to_weather_type(slot.icon_code),
            )
        )
    return records
