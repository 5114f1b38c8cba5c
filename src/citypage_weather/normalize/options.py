"""Engine options derived from application settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from citypage_weather.schemas import UnitSystem

if TYPE_CHECKING:
    from citypage_weather.config import Settings


@dataclass(frozen=True)
class NormalizationOptions:
    """Unit systems and display flags consumed by the extractors."""

    units: UnitSystem = UnitSystem.METRIC
    temperature_units: UnitSystem = UnitSystem.METRIC
    wind_units: UnitSystem = UnitSystem.METRIC
    show_feels_like: bool = True
    show_precipitation_amount: bool = False

    @classmethod
    def from_settings(cls, settings: Settings) -> NormalizationOptions:
        return cls(
            units=settings.units,
            temperature_units=settings.temperature_units,
            wind_units=settings.wind_units,
            show_feels_like=settings.show_feels_like,
            show_precipitation_amount=settings.show_precipitation_amount,
        )
