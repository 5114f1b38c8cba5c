"""Citypage XML download."""

from __future__ import annotations

from citypage_weather.datasources.envcanada.client import CITYPAGE_BASE_URL, build_citypage_url
from citypage_weather.datasources.envcanada.document import CitypageDocument, parse_citypage
from citypage_weather.services.http import session


def fetch_citypage_xml(
    prov_code: str = "ON",
    site_code: str = "s0000458",
    *,
    base_url: str = CITYPAGE_BASE_URL,
) -> bytes:
    """
    Download the raw citypage XML for a site.

    Args:
        prov_code: Two-letter province code (default: Ontario).
        site_code: Site identifier (default: Toronto).
        base_url: Datamart root URL.

    Returns:
        Raw XML bytes.

    Raises:
        requests.HTTPError: If the request fails after retries.
    """
    resp = session.get(build_citypage_url(prov_code, site_code, base_url))
    resp.raise_for_status()
    return resp.content


def fetch_citypage(
    prov_code: str = "ON",
    site_code: str = "s0000458",
    *,
    base_url: str = CITYPAGE_BASE_URL,
) -> CitypageDocument:
    """Download and parse the citypage document for a site."""
    return parse_citypage(fetch_citypage_xml(prov_code, site_code, base_url=base_url))
