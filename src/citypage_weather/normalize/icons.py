"""EC condition icon codes to canonical weather types."""

from __future__ import annotations

UNKNOWN_WEATHER_TYPE = "unknown"

# Codes 00-29 are daytime/neutral, 30-39 nighttime, 40-48 severe/other.
WEATHER_TYPES: dict[int, str] = {
    0: "day-sunny",
    1: "day-sunny",
    2: "day-sunny-overcast",
    3: "day-cloudy",
    4: "day-cloudy",
    5: "day-cloudy",
    6: "day-sprinkle",
    7: "day-showers",
    8: "day-snow",
    9: "day-thunderstorm",
    10: "cloud",
    11: "showers",
    12: "rain",
    13: "rain",
    14: "sleet",
    15: "sleet",
    16: "snow",
    17: "snow",
    18: "snow",
    19: "thunderstorm",
    20: "cloudy",
    21: "cloudy",
    22: "day-cloudy",
    23: "day-haze",
    24: "fog",
    25: "snow-wind",
    26: "sleet",
    27: "sleet",
    28: "rain",
    29: "na",
    30: "night-clear",
    31: "night-clear",
    32: "night-partly-cloudy",
    33: "night-alt-cloudy",
    34: "night-alt-cloudy",
    35: "night-partly-cloudy",
    36: "night-alt-showers",
    37: "night-rain-mix",
    38: "night-alt-snow",
    39: "night-thunderstorm",
    40: "snow-wind",
    41: "tornado",
    42: "tornado",
    43: "windy",
    44: "smoke",
    45: "sandstorm",
    46: "thunderstorm",
    47: "thunderstorm",
    48: "tornado",
}


def icon_to_weather_type(code: str | int | None) -> str:
    """Map an icon code (``"02"`` or ``2``) to a weather type, or ``"unknown"``."""
    if code is None or isinstance(code, bool):
        return UNKNOWN_WEATHER_TYPE
    if isinstance(code, str):
        code = code.strip()
        if not code.isdigit():
            return UNKNOWN_WEATHER_TYPE
        code = int(code)
    return WEATHER_TYPES.get(code, UNKNOWN_WEATHER_TYPE)
