"""Citypage Weather - normalized Environment Canada weather for dashboards.

Architecture::

    datasources/   Citypage XML fetch + optional-field document view
    normalize/     Engine: window classification, temperature cache,
                   unit conversion, precipitation precedence, extractors
    store.py       Enveloped JSON output with TTL (live/, state/)
    flows/         Prefect orchestration (one poll: fetch → normalize → save)
    services/      Shared utilities (HTTP client with retry)

Data flow: datasources → normalize (cache) → store → presentation layer

Extension points - see each package's docstring:
  - New data source:   datasources/__init__.py
"""

__version__ = "0.1.0"

from citypage_weather.config import Settings
from citypage_weather.schemas import NormalizedFeed, WeatherRecord

__all__ = ["NormalizedFeed", "Settings", "WeatherRecord", "__version__"]
