"""Rolling forecast window classification.

The forecast group holds up to 12 half-day segments. Segment 0 is always
relative to now: in the morning it is today's daytime half ("Today") and
segment 1 is tonight, so 6 full day/night pairs fill elements 0-11. From
late afternoon "Today" has rolled off, segment 0 is "Tonight", the next
five days sit at 1/2 .. 9/10, and element 11 holds a lone daytime half
for a sixth day which is ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from citypage_weather.datasources.envcanada.client import (
    DAYTIME_CURRENT_LABEL,
    NIGHTTIME_CURRENT_LABEL,
)
from citypage_weather.errors import MalformedWindow

if TYPE_CHECKING:
    from collections.abc import Sequence

    from citypage_weather.datasources.envcanada.models import ForecastSegment


@dataclass(frozen=True)
class WindowLayout:
    """Where today ends and the following day/night pairs sit."""

    full_day: bool
    next_day_offset: int
    last_index: int


DAYTIME_LAYOUT = WindowLayout(full_day=True, next_day_offset=2, last_index=12)
NIGHTTIME_LAYOUT = WindowLayout(full_day=False, next_day_offset=1, last_index=11)


def classify_window(segments: Sequence[ForecastSegment]) -> WindowLayout:
    """
    Classify the window by segment 0's period label.

    Raises:
        MalformedWindow: No segments, or segment 0 is neither "Today" nor "Tonight".
    """
    if not segments:
        msg = "forecast window has no segments"
        raise MalformedWindow(msg)
    label = segments[0].period_label
    if label == DAYTIME_CURRENT_LABEL:
        return DAYTIME_LAYOUT
    if label == NIGHTTIME_CURRENT_LABEL:
        return NIGHTTIME_LAYOUT
    msg = f"unrecognised period label for segment 0: {label!r}"
    raise MalformedWindow(msg)
