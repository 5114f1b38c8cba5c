"""Environment Canada MSC Datamart client constants.

Docs:
  - Schema: https://dd.weather.gc.ca/citypage_weather/schema/
  - Datamart: https://eccc-msc.github.io/open-data/msc-datamart/readme_en/
  - Site list: https://dd.weather.gc.ca/citypage_weather/docs/site_list_en.csv

Access is anonymous; Canadian locations only.
"""

from __future__ import annotations

CITYPAGE_BASE_URL = "https://dd.weather.gc.ca/citypage_weather/xml"

# Period labels of forecast segment 0
DAYTIME_CURRENT_LABEL = "Today"
NIGHTTIME_CURRENT_LABEL = "Tonight"


def build_citypage_url(prov_code: str, site_code: str, base_url: str = CITYPAGE_BASE_URL) -> str:
    """
    Build the English citypage XML URL for a site.

    Args:
        prov_code: Two-letter province code (e.g. ``ON``).
        site_code: Site identifier (e.g. ``s0000458`` for Toronto).
        base_url: Datamart root, overridable for mirrors/proxies.
    """
    return f"{base_url.rstrip('/')}/{prov_code.upper()}/{site_code}_e.xml"
