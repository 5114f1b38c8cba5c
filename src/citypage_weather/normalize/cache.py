"""Cross-poll temperature cache.

The feed occasionally omits the current temperature, and once today's
daytime segment rolls off it no longer carries both of today's extremes.
``TemperatureCache`` keeps the last good values for the lifetime of a
``FeedNormalizer``. It is mutated in place, so every pass that touches it
must run while holding ``lock``.

Values are held in output units. ``temperature_units`` records which, so a
snapshot restored under different settings is converted rather than misread.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any

from citypage_weather.normalize.units import convert_temperature, fahrenheit_to_celsius
from citypage_weather.schemas import UnitSystem

logger = logging.getLogger(__name__)


@dataclass
class TemperatureCache:
    """Last known current temperature and today's min/max (output units)."""

    cached_current_temperature: float | None = None
    cached_today_min: float | None = None
    cached_today_max: float | None = None
    has_cached_today: bool = False
    temperature_units: UnitSystem | None = None
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def remember_current(self, temperature: float) -> None:
        self.cached_current_temperature = temperature

    def remember_today(self, minimum: float | None, maximum: float | None) -> None:
        """Store today's extremes from a full day/night pair.

        A missing value keeps whatever was cached for it before.
        """
        if minimum is not None:
            self.cached_today_min = minimum
        if maximum is not None:
            self.cached_today_max = maximum
        self.has_cached_today = True

    def convert_to(self, units: UnitSystem) -> None:
        """Re-express cached values in ``units``.

        A cache with no recorded units is taken to be in ``units`` already.
        """
        source = self.temperature_units
        self.temperature_units = units
        if source is None or source is units:
            return
        logger.info("Converting cached temperatures from %s to %s", source, units)

        def _convert(value: float | None) -> float | None:
            if value is None:
                return None
            celsius = fahrenheit_to_celsius(value) if source is UnitSystem.IMPERIAL else value
            return convert_temperature(celsius, units)

        self.cached_current_temperature = _convert(self.cached_current_temperature)
        self.cached_today_min = _convert(self.cached_today_min)
        self.cached_today_max = _convert(self.cached_today_max)

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible snapshot."""
        return {
            "current_temperature": self.cached_current_temperature,
            "today_min": self.cached_today_min,
            "today_max": self.cached_today_max,
            "has_cached_today": self.has_cached_today,
            "temperature_units": (
                str(self.temperature_units) if self.temperature_units is not None else None
            ),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TemperatureCache:
        """Rebuild a cache from ``to_dict`` output; missing keys read as empty."""
        units = data.get("temperature_units")
        return cls(
            cached_current_temperature=data.get("current_temperature"),
            cached_today_min=data.get("today_min"),
            cached_today_max=data.get("today_max"),
            has_cached_today=bool(data.get("has_cached_today", False)),
            temperature_units=UnitSystem(units) if units is not None else None,
        )
