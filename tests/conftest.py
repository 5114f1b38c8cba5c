"""Shared fixtures: citypage XML documents built from small parameter sets."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Any

import pytest

from citypage_weather.datasources.envcanada import CitypageDocument, parse_citypage

ISSUE_LOCAL = "20261019113000"
HOURLY_START_UTC = datetime(2026, 10, 19, 16)  # 12:00 EDT

DAY_NAMES = ["Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def daytime_segments() -> list[dict[str, Any]]:
    """Morning window: Today/Tonight then five full day/night pairs."""
    segments: list[dict[str, Any]] = [
        {"label": "Today", "temp": 15, "cls": "high", "icon": "02", "pop": 30},
        {"label": "Tonight", "temp": 5, "cls": "low", "icon": "30"},
    ]
    for i, name in enumerate(DAY_NAMES[:5], start=1):
        segments.append({"label": name, "temp": 15 + i, "cls": "high", "icon": "03"})
        segments.append({"label": f"{name} night", "temp": 5 + i, "cls": "low", "icon": "31"})
    return segments


def nighttime_segments() -> list[dict[str, Any]]:
    """Evening window: Tonight, five full pairs, then a lone daytime half."""
    segments: list[dict[str, Any]] = [
        {"label": "Tonight", "temp": 4, "cls": "low", "icon": "36", "pop": 60},
    ]
    for i, name in enumerate(DAY_NAMES[:5], start=1):
        segments.append({"label": name, "temp": 15 + i, "cls": "high", "icon": "03"})
        segments.append({"label": f"{name} night", "temp": 5 + i, "cls": "low", "icon": "31"})
    segments.append({"label": DAY_NAMES[5], "temp": 99, "cls": "high", "icon": "12"})
    return segments


def _segment_xml(seg: dict[str, Any]) -> str:
    pop = seg.get("pop")
    pop_xml = f'<pop units="%">{pop}</pop>' if pop is not None else '<pop units="%"/>'
    temp = seg.get("temp")
    temp_xml = (
        f'<temperature unitType="metric" units="C" class="{seg["cls"]}">{temp}</temperature>'
        if temp is not None
        else ""
    )
    precip_xml = ""
    if seg.get("amount") is not None:
        precip_xml = (
            "<precipitation><textSummary/><precipType/>"
            "<accumulation><name>rain</name>"
            f'<amount unitType="metric" units="{seg.get("amount_units", "mm")}">{seg["amount"]}</amount>'
            "</accumulation></precipitation>"
        )
    return (
        "<forecast>"
        f'<period textForecastName="{seg["label"]}">{seg["label"]}</period>'
        "<textSummary>Forecast text.</textSummary>"
        "<abbreviatedForecast>"
        f'<iconCode format="gif">{seg.get("icon", "02")}</iconCode>'
        f"{pop_xml}<textSummary>Summary</textSummary>"
        "</abbreviatedForecast>"
        f"<temperatures><textSummary/>{temp_xml}</temperatures>"
        f"{precip_xml}"
        "</forecast>"
    )


def _hourly_xml(count: int, utc_offset: str | None) -> str:
    offset_attr = f' UTCOffset="{utc_offset}"' if utc_offset is not None else ""
    slots = []
    for i in range(count):
        stamp = (HOURLY_START_UTC + timedelta(hours=i)).strftime("%Y%m%d%H%M")
        lop = 40 if i % 2 else 0
        slots.append(
            f'<hourlyForecast dateTimeUTC="{stamp}">'
            "<condition>Cloudy</condition>"
            f'<iconCode format="png">{"10" if i % 2 else "02"}</iconCode>'
            f'<temperature unitType="metric" units="C">{10 + i % 5}</temperature>'
            f'<lop category="Low" units="%">{lop}</lop>'
            "</hourlyForecast>"
        )
    return (
        "<hourlyForecastGroup>"
        '<dateTime name="forecastIssue" zone="UTC" UTCOffset="0">'
        "<timeStamp>20261019150000</timeStamp></dateTime>"
        f'<dateTime name="forecastIssue" zone="EDT"{offset_attr}>'
        "<timeStamp>20261019110000</timeStamp></dateTime>"
        f"{''.join(slots)}"
        "</hourlyForecastGroup>"
    )


def build_citypage_xml(
    *,
    segments: list[dict[str, Any]] | None = None,
    current_temp: str | None = "8.3",
    wind_chill: str | None = None,
    humidex: str | None = None,
    icon: str = "02",
    hourly_count: int = 24,
    utc_offset: str | None = "-4",
    rise_set: bool = True,
    issue_local: str | None = ISSUE_LOCAL,
) -> bytes:
    """Build a citypage ``siteData`` document."""
    if segments is None:
        segments = daytime_segments()
    extras = ""
    if wind_chill is not None:
        extras += f'<windChill unitType="metric">{wind_chill}</windChill>'
    if humidex is not None:
        extras += f'<humidex unitType="metric">{humidex}</humidex>'
    current = (
        "<currentConditions>"
        "<station code=\"yyz\">Toronto Pearson Int'l Airport</station>"
        '<dateTime name="observation" zone="UTC" UTCOffset="0">'
        "<timeStamp>20261019150000</timeStamp></dateTime>"
        '<dateTime name="observation" zone="EDT" UTCOffset="-4">'
        "<timeStamp>20261019110000</timeStamp></dateTime>"
        "<condition>Mostly Cloudy</condition>"
        f'<iconCode format="gif">{icon}</iconCode>'
        f'<temperature unitType="metric" units="C">{current_temp or ""}</temperature>'
        '<relativeHumidity units="%">71</relativeHumidity>'
        '<wind><speed unitType="metric" units="km/h">18</speed>'
        "<direction>WNW</direction>"
        '<bearing units="degrees">292.0</bearing></wind>'
        f"{extras}"
        "</currentConditions>"
    )
    issue = ""
    if issue_local is not None:
        issue = (
            '<dateTime name="forecastIssue" zone="UTC" UTCOffset="0">'
            "<timeStamp>20261019153000</timeStamp></dateTime>"
            '<dateTime name="forecastIssue" zone="EDT" UTCOffset="-4">'
            f"<timeStamp>{issue_local}</timeStamp></dateTime>"
        )
    forecast = f"<forecastGroup>{issue}{''.join(_segment_xml(s) for s in segments)}</forecastGroup>"
    riseset = ""
    if rise_set:
        riseset = (
            "<riseSet><disclaimer>Sunrise/sunset</disclaimer>"
            '<dateTime name="sunrise" zone="UTC" UTCOffset="0"><timeStamp>20261019112600</timeStamp></dateTime>'
            '<dateTime name="sunrise" zone="EDT" UTCOffset="-4"><timeStamp>20261019072600</timeStamp></dateTime>'
            '<dateTime name="sunset" zone="UTC" UTCOffset="0"><timeStamp>20261019221000</timeStamp></dateTime>'
            '<dateTime name="sunset" zone="EDT" UTCOffset="-4"><timeStamp>20261019181000</timeStamp></dateTime>'
            "</riseSet>"
        )
    xml = (
        '<?xml version="1.0" encoding="ISO-8859-1"?>'
        "<siteData>"
        '<location><name code="s0000458">Toronto</name><province code="ON">Ontario</province></location>'
        f"{current}{forecast}{_hourly_xml(hourly_count, utc_offset)}{riseset}"
        "</siteData>"
    )
    return xml.encode("iso-8859-1")


@pytest.fixture()
def make_citypage() -> Callable[..., CitypageDocument]:
    """Factory: keyword arguments of ``build_citypage_xml`` → parsed document."""

    def _make(**kwargs: Any) -> CitypageDocument:
        return parse_citypage(build_citypage_xml(**kwargs))

    return _make


@pytest.fixture()
def daytime_doc(make_citypage: Callable[..., CitypageDocument]) -> CitypageDocument:
    return make_citypage(segments=daytime_segments())


@pytest.fixture()
def nighttime_doc(make_citypage: Callable[..., CitypageDocument]) -> CitypageDocument:
    return make_citypage(segments=nighttime_segments())


@pytest.fixture()
def daytime_xml() -> bytes:
    return build_citypage_xml(segments=daytime_segments())


@pytest.fixture()
def daytime_window() -> list[dict[str, Any]]:
    """Fresh, mutable copy of the morning segment list."""
    return daytime_segments()


@pytest.fixture()
def nighttime_window() -> list[dict[str, Any]]:
    """Fresh, mutable copy of the evening segment list."""
    return nighttime_segments()


@pytest.fixture()
def make_citypage_xml() -> Callable[..., bytes]:
    """Factory: keyword arguments of ``build_citypage_xml`` → raw XML bytes."""
    return build_citypage_xml
