"""Precipitation reporting for a forecast segment.

EC reports precipitation either as a probability (POP) or as an accumulation
amount. A POP above zero wins; otherwise the accumulation is shown.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NamedTuple

from citypage_weather.normalize.units import convert_accumulation
from citypage_weather.schemas import PrecipitationUnit, UnitSystem

if TYPE_CHECKING:
    from citypage_weather.datasources.envcanada.models import ForecastSegment

logger = logging.getLogger(__name__)


class Precipitation(NamedTuple):
    value: float
    unit: PrecipitationUnit


def resolve_precipitation(
    segment: ForecastSegment, units: UnitSystem = UnitSystem.METRIC
) -> Precipitation | None:
    """
    Pick the precipitation value to report for one segment.

    Args:
        segment: Forecast segment.
        units: System for accumulation amounts (imperial converts to inches).

    Returns:
        The POP as a percentage if it is above zero, else the (converted)
        accumulation amount, else None.
    """
    result: Precipitation | None = None

    if segment.accumulation_amount is not None:
        value, unit = convert_accumulation(
            segment.accumulation_amount, segment.accumulation_units, units
        )
        if unit is None:
            logger.debug("Ignoring accumulation with unit %r", segment.accumulation_units)
        else:
            result = Precipitation(value, unit)

    if segment.pop is not None and segment.pop > 0:
        result = Precipitation(segment.pop, PrecipitationUnit.PERCENT)

    return result
