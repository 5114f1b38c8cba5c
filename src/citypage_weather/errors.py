"""Errors raised by the normalization engine."""

from __future__ import annotations


class NormalizationError(Exception):
    """Base class for engine errors that fail a single normalization pass."""


class MalformedWindow(NormalizationError):
    """Forecast segment 0 is neither the daytime nor the nighttime half of today."""


class MissingField(NormalizationError):
    """A field with no fallback rule is absent from a segment or slot.

    Extractors recover from this locally by leaving the output value unset.
    """

    def __init__(self, field: str, where: str = "") -> None:
        self.field = field
        self.where = where
        super().__init__(f"{field} missing{f' in {where}' if where else ''}")


class NoDataAvailable(NormalizationError):
    """No current temperature in the feed and nothing cached yet. Retry next poll."""
