"""Unit conversion.

The feed reports Celsius, km/h and cm/mm. Conversions are linear and do not
round, except precipitation amounts which round to 2 decimals. Presentation
rounding is left to the consumer.
"""

from __future__ import annotations

from citypage_weather.schemas import PrecipitationUnit, UnitSystem

KM_PER_MILE = 1.609344
CM_TO_IN = 0.394
MM_TO_IN = 0.0394


def convert_temperature(celsius: float | None, system: UnitSystem) -> float | None:
    """Convert a Celsius reading to the configured system."""
    if celsius is None:
        return None
    if system is UnitSystem.IMPERIAL:
        return 1.8 * celsius + 32
    return celsius


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Inverse of the imperial temperature conversion."""
    return (fahrenheit - 32) / 1.8


def convert_wind(kmh: float | None, system: UnitSystem) -> float | None:
    """Convert a km/h wind speed to the configured system (mph for imperial)."""
    if kmh is None:
        return None
    if system is UnitSystem.IMPERIAL:
        return kmh / KM_PER_MILE
    return kmh


def mph_to_kmh(mph: float) -> float:
    """Inverse of the imperial wind conversion."""
    return mph * KM_PER_MILE


def convert_accumulation(
    amount: float, unit: str | None, system: UnitSystem
) -> tuple[float, PrecipitationUnit | None]:
    """
    Convert an accumulation amount for the configured system.

    Imperial converts cm and mm to inches, rounded to 2 decimals. Metric, or a
    unit other than cm/mm, passes the amount through unchanged.

    Returns:
        ``(value, unit)``; unit is None when the feed's unit is unrecognised.
    """
    feed_unit = _length_unit(unit)
    if system is UnitSystem.IMPERIAL:
        if feed_unit is PrecipitationUnit.CENTIMETRE:
            return round(amount * CM_TO_IN, 2), PrecipitationUnit.INCH
        if feed_unit is PrecipitationUnit.MILLIMETRE:
            return round(amount * MM_TO_IN, 2), PrecipitationUnit.INCH
    return amount, feed_unit


def _length_unit(unit: str | None) -> PrecipitationUnit | None:
    if unit is None:
        return None
    try:
        parsed = PrecipitationUnit(unit.strip().lower())
    except ValueError:
        return None
    return None if parsed.is_probability else parsed
