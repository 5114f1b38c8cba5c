"""Weather feed normalization engine.

Turns one rolling citypage document into canonical records:

  - current: current-conditions record (cache fallback, feels-like, sun times)
  - daily: six day records from the half-day window (window classification,
           temperature cache, precipitation precedence)
  - hourly: 24 hourly records in local time

Leaf modules (units, icons, precipitation, window) are pure. ``cache`` is
the only state and ``engine.FeedNormalizer`` owns it.
"""

from citypage_weather.normalize.cache import TemperatureCache
from citypage_weather.normalize.current import extract_current, feels_like
from citypage_weather.normalize.daily import aggregate_daily, pair_extremes
from citypage_weather.normalize.engine import FeedDocument, FeedNormalizer
from citypage_weather.normalize.hourly import HOURLY_SLOTS, extract_hourly
from citypage_weather.normalize.icons import UNKNOWN_WEATHER_TYPE, icon_to_weather_type
from citypage_weather.normalize.options import NormalizationOptions
from citypage_weather.normalize.precipitation import Precipitation, resolve_precipitation
from citypage_weather.normalize.units import (
    convert_accumulation,
    convert_temperature,
    convert_wind,
    fahrenheit_to_celsius,
    mph_to_kmh,
)
from citypage_weather.normalize.window import WindowLayout, classify_window

__all__ = [
    "HOURLY_SLOTS",
    "UNKNOWN_WEATHER_TYPE",
    "FeedDocument",
    "FeedNormalizer",
    "NormalizationOptions",
    "Precipitation",
    "TemperatureCache",
    "WindowLayout",
    "aggregate_daily",
    "classify_window",
    "convert_accumulation",
    "convert_temperature",
    "convert_wind",
    "extract_current",
    "extract_hourly",
    "fahrenheit_to_celsius",
    "feels_like",
    "icon_to_weather_type",
    "mph_to_kmh",
    "pair_extremes",
    "resolve_precipitation",
]
