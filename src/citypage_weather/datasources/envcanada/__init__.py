"""Environment Canada citypage weather data source.

Fetches the citypage XML for one site and exposes it through a typed,
optional-field document view.

Public API:
  - citypage: fetch_citypage, fetch_citypage_xml
  - document: CitypageDocument, parse_citypage, parse_timestamp
  - models: CurrentConditions, ForecastSegment, HourlySlot
  - client: URL builder and period label constants
"""

from citypage_weather.datasources.envcanada.citypage import fetch_citypage, fetch_citypage_xml
from citypage_weather.datasources.envcanada.client import (
    CITYPAGE_BASE_URL,
    DAYTIME_CURRENT_LABEL,
    NIGHTTIME_CURRENT_LABEL,
    build_citypage_url,
)
from citypage_weather.datasources.envcanada.document import (
    CitypageDocument,
    parse_citypage,
    parse_timestamp,
)
from citypage_weather.datasources.envcanada.models import (
    CurrentConditions,
    ForecastSegment,
    HourlySlot,
)

__all__ = [
    "CITYPAGE_BASE_URL",
    "DAYTIME_CURRENT_LABEL",
    "NIGHTTIME_CURRENT_LABEL",
    "CitypageDocument",
    "CurrentConditions",
    "ForecastSegment",
    "HourlySlot",
    "build_citypage_url",
    "fetch_citypage",
    "fetch_citypage_xml",
    "parse_citypage",
    "parse_timestamp",
]
