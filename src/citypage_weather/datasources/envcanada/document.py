"""Optional-field access layer over a citypage XML document.

``CitypageDocument`` wraps the parsed ``siteData`` tree and exposes each
block the engine needs as a typed dataclass. Absent elements, absent
attributes and empty text all read as ``None``; nothing here raises once
the XML itself has parsed.
"""

from __future__ import annotations

import logging
from datetime import datetime
from xml.etree import ElementTree as ET

from citypage_weather.datasources.envcanada.models import (
    CurrentConditions,
    ForecastSegment,
    HourlySlot,
)

logger = logging.getLogger(__name__)

# EC writes local timestamps as YYYYMMDDhhmmss and hourly UTC stamps as YYYYMMDDhhmm.
# strptime accepts single-digit fields, so the format is picked by length.
_TIMESTAMP_FORMATS = {14: "%Y%m%d%H%M%S", 12: "%Y%m%d%H%M"}


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an EC timestamp string, or return None if absent or unreadable."""
    if not value:
        return None
    fmt = _TIMESTAMP_FORMATS.get(len(value))
    if fmt is not None:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            pass
    logger.debug("Unparseable timestamp %r", value)
    return None


def _text(elem: ET.Element | None) -> str | None:
    if elem is None or elem.text is None:
        return None
    text = elem.text.strip()
    return text or None


def _float(value: str | None) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        logger.debug("Non-numeric value %r", value)
        return None


def _attr(elem: ET.Element | None, name: str) -> str | None:
    if elem is None:
        return None
    value = elem.get(name)
    if value is None:
        return None
    return value.strip() or None


def _local_timestamp(stamps: list[ET.Element]) -> datetime | None:
    # dateTime pairs list UTC first, then local time
    if len(stamps) < 2:
        return None
    return parse_timestamp(_text(stamps[1].find("timeStamp")))


class CitypageDocument:
    """Queryable view of one citypage ``siteData`` document."""

    def __init__(self, root: ET.Element) -> None:
        self.root = root

    # Current conditions -------------------------------------------------
    def current_conditions(self) -> CurrentConditions:
        cc = self.root.find("currentConditions")
        if cc is None:
            return CurrentConditions()
        return CurrentConditions(
            observed_at=_local_timestamp(cc.findall("dateTime")),
            temperature=_float(_text(cc.find("temperature"))),
            wind_speed=_float(_text(cc.find("wind/speed"))),
            wind_bearing=_float(_text(cc.find("wind/bearing"))),
            relative_humidity=_float(_text(cc.find("relativeHumidity"))),
            icon_code=_text(cc.find("iconCode")),
            wind_chill=_float(_text(cc.find("windChill"))),
            humidex=_float(_text(cc.find("humidex"))),
        )

    def rise_set_times(self) -> list[datetime | None]:
        """All ``riseSet/dateTime`` timestamps in document order.

        The feed lists each event in UTC then local time, so a complete list
        reads {sunrise UTC, sunrise local, sunset UTC, sunset local}.
        """
        return [
            parse_timestamp(_text(dt.find("timeStamp")))
            for dt in self.root.findall("riseSet/dateTime")
        ]

    # Daily forecast -----------------------------------------------------
    def forecast_issue_time(self) -> datetime | None:
        """Local issue time of the forecast group (its second ``dateTime``)."""
        return _local_timestamp(self.root.findall("forecastGroup/dateTime"))

    def forecast_segments(self) -> list[ForecastSegment]:
        return [self._segment(f) for f in self.root.findall("forecastGroup/forecast")]

    @staticmethod
    def _segment(forecast: ET.Element) -> ForecastSegment:
        temp = forecast.find("temperatures/temperature")
        pop = forecast.find("abbreviatedForecast/pop")
        amount = forecast.find("precipitation/accumulation/amount")
        return ForecastSegment(
            period_label=_attr(forecast.find("period"), "textForecastName"),
            temperature=_float(_text(temp)),
            temperature_class=_attr(temp, "class"),
            icon_code=_text(forecast.find("abbreviatedForecast/iconCode")),
            pop=_float(_text(pop)),
            pop_units=_attr(pop, "units"),
            accumulation_amount=_float(_text(amount)),
            accumulation_units=_attr(amount, "units"),
        )

    # Hourly forecast ----------------------------------------------------
    def hourly_utc_offset(self) -> float | None:
        """UTC offset (hours) declared on the hourly group's local ``dateTime``."""
        stamps = self.root.findall("hourlyForecastGroup/dateTime")
        if len(stamps) < 2:
            return None
        return _float(_attr(stamps[1], "UTCOffset"))

    def hourly_slots(self) -> list[HourlySlot]:
        slots = []
        for hour in self.root.findall("hourlyForecastGroup/hourlyForecast"):
            lop = hour.find("lop")
            slots.append(
                HourlySlot(
                    utc_time=parse_timestamp(_attr(hour, "dateTimeUTC")),
                    temperature=_float(_text(hour.find("temperature"))),
                    icon_code=_text(hour.find("iconCode")),
                    lop=_float(_text(lop)),
                    lop_units=_attr(lop, "units"),
                )
            )
        return slots


def parse_citypage(xml: str | bytes) -> CitypageDocument:
    """
    Parse a citypage XML payload.

    Raises:
        ValueError: If the payload is not well-formed XML or not a ``siteData`` document.
    """
    try:
        root = ET.fromstring(xml)
    except ET.ParseError as exc:
        msg = f"Invalid citypage XML: {exc}"
        raise ValueError(msg) from exc
    if root.tag != "siteData":
        msg = f"Expected <siteData> root, got <{root.tag}>"
        raise ValueError(msg)
    return CitypageDocument(root)
