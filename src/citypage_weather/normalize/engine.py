"""Feed normalizer: one document in, current/daily/hourly records out.

The three passes are independent. A ``NormalizationError`` in one pass is
logged and recorded on the result; the other passes still run. Only the
temperature cache is shared, and the normalizer holds its lock for the whole
cycle so at most one pass mutates it at a time.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Protocol

from citypage_weather.errors import NoDataAvailable, NormalizationError
from citypage_weather.normalize.cache import TemperatureCache
from citypage_weather.normalize.current import extract_current
from citypage_weather.normalize.daily import aggregate_daily
from citypage_weather.normalize.hourly import extract_hourly
from citypage_weather.normalize.options import NormalizationOptions
from citypage_weather.normalize.units import convert_temperature
from citypage_weather.schemas import NormalizedFeed

if TYPE_CHECKING:
    from citypage_weather.datasources.envcanada.models import (
        CurrentConditions,
        ForecastSegment,
        HourlySlot,
    )

logger = logging.getLogger(__name__)


class FeedDocument(Protocol):
    """What the normalizer reads from a feed document."""

    def current_conditions(self) -> CurrentConditions: ...
    def rise_set_times(self) -> list[datetime | None]: ...
    def forecast_issue_time(self) -> datetime | None: ...
    def forecast_segments(self) -> list[ForecastSegment]: ...
    def hourly_utc_offset(self) -> float | None: ...
    def hourly_slots(self) -> list[HourlySlot]: ...


class FeedNormalizer:
    """Normalizes successive polls of one feed, carrying a temperature cache."""

    def __init__(
        self,
        options: NormalizationOptions | None = None,
        cache: TemperatureCache | None = None,
    ) -> None:
        self.options = options or NormalizationOptions()
        self.cache = cache or TemperatureCache()
        with self.cache.lock:
            self.cache.convert_to(self.options.temperature_units)

    def normalize(self, document: FeedDocument, now: datetime | None = None) -> NormalizedFeed:
        """Run the current, daily and hourly passes over one document."""
        feed = NormalizedFeed(show_precipitation_amount=self.options.show_precipitation_amount)
        with self.cache.lock:
            conditions = document.current_conditions()
            try:
                feed.current = extract_current(
                    conditions, document.rise_set_times(), self.cache, self.options, now=now
                )
            except NormalizationError as exc:
                self._fail(feed, "current", exc)

            try:
                feed.daily = aggregate_daily(
                    document.forecast_segments(),
                    document.forecast_issue_time(),
                    self._fallback_temperature(conditions),
                    self.cache,
                    self.options,
                )
            except NormalizationError as exc:
                self._fail(feed, "daily", exc)

        try:
            feed.hourly = extract_hourly(
                document.hourly_slots(), document.hourly_utc_offset(), self.options
            )
        except NormalizationError as exc:
            self._fail(feed, "hourly", exc)

        logger.info(
            "Normalized feed: current=%s daily=%d hourly=%d errors=%s",
            feed.current is not None,
            len(feed.daily),
            len(feed.hourly),
            sorted(feed.errors),
        )
        return feed

    def _fallback_temperature(self, conditions: CurrentConditions) -> float | None:
        temperature = convert_temperature(conditions.temperature, self.options.temperature_units)
        if temperature is None:
            return self.cache.cached_current_temperature
        return temperature

    @staticmethod
    def _fail(feed: NormalizedFeed, pass_name: str, exc: NormalizationError) -> None:
        level = logging.WARNING if isinstance(exc, NoDataAvailable) else logging.ERROR
        logger.log(level, "%s pass failed: %s", pass_name.capitalize(), exc)
        feed.errors[pass_name] = str(exc)
