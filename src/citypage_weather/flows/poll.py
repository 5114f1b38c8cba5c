"""
Prefect flow for one poll of the citypage feed.

fetch XML → normalize (current, daily, hourly) → save to the store.

Run locally:
    python -m citypage_weather.flows.poll

Run with Prefect dashboard:
    prefect server start &
    python -m citypage_weather.flows.poll
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from functools import lru_cache
from pathlib import Path
from typing import Any

from prefect import flow, task

from citypage_weather.config import get_settings
from citypage_weather.datasources import envcanada
from citypage_weather.normalize import FeedNormalizer, NormalizationOptions, TemperatureCache
from citypage_weather.store import DataStore

store = DataStore(get_settings().data_dir)

WEATHER_PATH = Path("live/weather.json")
CACHE_PATH = Path("state/temperature_cache.json")
SOURCE = "dd.weather.gc.ca"


@lru_cache
def get_normalizer() -> FeedNormalizer:
    """Process-wide normalizer, so the temperature cache survives between polls.

    With ``persist_cache`` the cache starts from the last saved snapshot.
    """
    settings = get_settings()
    cache = None
    if settings.persist_cache:
        snapshot = store.read(CACHE_PATH)
        if snapshot:
            cache = TemperatureCache.from_dict(snapshot)
    return FeedNormalizer(NormalizationOptions.from_settings(settings), cache)


@task(name="fetch-citypage", retries=2, retry_delay_seconds=10)
def fetch_feed(prov_code: str, site_code: str, base_url: str = envcanada.CITYPAGE_BASE_URL) -> bytes:
    """Download the citypage XML for a site."""
    return envcanada.fetch_citypage_xml(prov_code, site_code, base_url=base_url)


@task(name="normalize-feed")
def normalize_feed(xml: bytes) -> dict[str, Any]:
    """Parse and normalize one feed document into JSON-compatible records."""
    document = envcanada.parse_citypage(xml)
    feed = get_normalizer().normalize(document)
    return feed.model_dump(mode="json")


@task(name="save-weather")
def save_weather(weather: dict[str, Any], site_code: str, valid_minutes: int) -> Path:
    """Save normalized weather via store, valid until the next poll is due."""
    return store.write(
        WEATHER_PATH,
        weather,
        source=SOURCE,
        valid_until=datetime.now(UTC) + timedelta(minutes=valid_minutes),
        site_code=site_code,
    )


@task(name="save-temperature-cache")
def save_cache() -> Path:
    """Snapshot the temperature cache so a restart does not start empty."""
    normalizer = get_normalizer()
    with normalizer.cache.lock:
        snapshot = normalizer.cache.to_dict()
    return store.write(CACHE_PATH, snapshot, source="citypage-weather")


@flow(name="poll-citypage", log_prints=True)
def poll_citypage(prov_code: str | None = None, site_code: str | None = None) -> dict[str, Any]:
    """
    Fetch, normalize and store one citypage poll.

    Defaults to the site configured in settings.
    """
    settings = get_settings()
    prov_code = prov_code or settings.prov_code
    site_code = site_code or settings.site_code

    print(f"Fetching citypage {prov_code}/{site_code}...")
    xml = fetch_feed(prov_code, site_code, settings.base_url)
    weather = normalize_feed(xml)
    output_path = save_weather(weather, site_code, settings.poll_interval_minutes)
    print(
        f"Saved {len(weather['daily'])} days and {len(weather['hourly'])} hours "
        f"of weather to {output_path}"
    )
    if weather["errors"]:
        print(f"Passes with errors: {', '.join(sorted(weather['errors']))}")

    if settings.persist_cache:
        save_cache()

    return {
        "current": weather["current"] is not None,
        "daily_days": len(weather["daily"]),
        "hourly_hours": len(weather["hourly"]),
        "errors": weather["errors"],
        "output": str(output_path),
    }


if __name__ == "__main__":
    result = poll_citypage()
    print(f"Flow complete: {result}")
