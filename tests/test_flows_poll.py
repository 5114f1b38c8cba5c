"""
Tests for the poll flow module.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from citypage_weather.config import get_settings
from citypage_weather.flows import poll
from citypage_weather.store import DataStore

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path


@pytest.fixture(autouse=True)
def fresh_normalizer() -> Iterator[None]:
    """Each test starts with an empty temperature cache."""
    poll.get_normalizer.cache_clear()
    yield
    poll.get_normalizer.cache_clear()


def _xml_response(content: bytes) -> Mock:
    mock_response = Mock()
    mock_response.content = content
    mock_response.raise_for_status = Mock()
    return mock_response


class TestFetchFeed:
    """Test downloading the citypage XML."""

    @patch("citypage_weather.datasources.envcanada.citypage.session.get")
    def test_fetch_feed(self, mock_get: Mock, daytime_xml: bytes) -> None:
        """Fetches the English citypage file for the site."""
        mock_get.return_value = _xml_response(daytime_xml)

        result = poll.fetch_feed("on", "s0000458")

        assert result == daytime_xml
        mock_get.assert_called_once_with(
            "https://dd.weather.gc.ca/citypage_weather/xml/ON/s0000458_e.xml"
        )


class TestNormalizeFeed:
    """Test normalizing one document into JSON-compatible records."""

    def test_normalize_feed(self, daytime_xml: bytes) -> None:
        result = poll.normalize_feed(daytime_xml)

        assert result["current"]["temperature"] == 8.3
        assert len(result["daily"]) == 6
        assert len(result["hourly"]) == 24
        assert result["errors"] == {}
        json.dumps(result)

    def test_cache_survives_between_polls(
        self, daytime_xml: bytes, make_citypage_xml: Callable[..., bytes]
    ) -> None:
        """A later feed missing the reading falls back to the earlier one."""
        poll.normalize_feed(daytime_xml)
        result = poll.normalize_feed(make_citypage_xml(current_temp=None))
        assert result["current"]["temperature"] == 8.3
        assert result["errors"] == {}

    def test_invalid_xml(self) -> None:
        with pytest.raises(ValueError, match="Invalid citypage XML"):
            poll.normalize_feed(b"<siteData>")


class TestSaveWeather:
    """Test saving normalized weather to the store."""

    def test_save_weather(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(poll, "store", DataStore(tmp_path))
        weather = {"current": None, "daily": [], "hourly": [], "errors": {}}

        result = poll.save_weather(weather, "s0000458", 10)

        assert result == tmp_path / "live" / "weather.json"
        saved = json.loads(result.read_text())
        assert saved["meta"]["source"] == "dd.weather.gc.ca"
        assert saved["meta"]["site_code"] == "s0000458"
        assert "valid_until" in saved["meta"]
        assert saved["data"] == weather


class TestTemperatureCacheSnapshot:
    """Test saving and restoring the temperature cache."""

    def test_save_cache(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(poll, "store", DataStore(tmp_path))
        poll.get_normalizer().cache.remember_current(4.5)

        result = poll.save_cache()

        assert result == tmp_path / "state" / "temperature_cache.json"
        saved = json.loads(result.read_text())
        assert saved["data"]["current_temperature"] == 4.5
        assert saved["data"]["has_cached_today"] is False
        assert saved["data"]["temperature_units"] == "metric"

    def test_restored_when_persisting(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        store = DataStore(tmp_path)
        monkeypatch.setattr(poll, "store", store)
        store.write(
            poll.CACHE_PATH,
            {"current_temperature": 3.0, "today_min": 1.0, "today_max": 9.0, "has_cached_today": True},
            source="test",
        )

        monkeypatch.setenv("CITYPAGE_PERSIST_CACHE", "true")
        get_settings.cache_clear()
        try:
            cache = poll.get_normalizer().cache
        finally:
            get_settings.cache_clear()

        assert cache.cached_current_temperature == 3.0
        assert cache.has_cached_today
        assert cache.cached_today_max == 9.0

    def test_restored_in_new_units(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Switching temperature units between restarts converts the snapshot."""
        store = DataStore(tmp_path)
        monkeypatch.setattr(poll, "store", store)
        store.write(
            poll.CACHE_PATH,
            {
                "current_temperature": 10.0,
                "today_min": 5.0,
                "today_max": 15.0,
                "has_cached_today": True,
                "temperature_units": "metric",
            },
            source="test",
        )

        monkeypatch.setenv("CITYPAGE_PERSIST_CACHE", "true")
        monkeypatch.setenv("CITYPAGE_TEMPERATURE_UNITS", "imperial")
        get_settings.cache_clear()
        try:
            cache = poll.get_normalizer().cache
        finally:
            get_settings.cache_clear()

        assert cache.temperature_units == "imperial"
        assert cache.cached_current_temperature == pytest.approx(50)
        assert cache.cached_today_min == pytest.approx(41)
        assert cache.cached_today_max == pytest.approx(59)

    def test_not_restored_by_default(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        store = DataStore(tmp_path)
        monkeypatch.setattr(poll, "store", store)
        store.write(poll.CACHE_PATH, {"current_temperature": 3.0}, source="test")

        assert poll.get_normalizer().cache.cached_current_temperature is None


class TestPollFlow:
    """Test the full poll flow."""

    @patch("citypage_weather.datasources.envcanada.citypage.session.get")
    def test_poll_citypage(
        self,
        mock_get: Mock,
        daytime_xml: bytes,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr(poll, "store", DataStore(tmp_path))
        mock_get.return_value = _xml_response(daytime_xml)

        result = poll.poll_citypage(prov_code="ON", site_code="s0000458")

        assert result["current"] is True
        assert result["daily_days"] == 6
        assert result["hourly_hours"] == 24
        assert result["errors"] == {}
        assert (tmp_path / "live" / "weather.json").exists()
        assert not (tmp_path / "state" / "temperature_cache.json").exists()

    @patch("citypage_weather.datasources.envcanada.citypage.session.get")
    def test_poll_reports_pass_errors(
        self,
        mock_get: Mock,
        make_citypage_xml: Callable[..., bytes],
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr(poll, "store", DataStore(tmp_path))
        mock_get.return_value = _xml_response(make_citypage_xml(current_temp=None))

        result = poll.poll_citypage(prov_code="ON", site_code="s0000458")

        assert result["current"] is False
        assert set(result["errors"]) == {"current"}
        assert result["daily_days"] == 6
        saved = json.loads((tmp_path / "live" / "weather.json").read_text())
        assert saved["data"]["current"] is None
