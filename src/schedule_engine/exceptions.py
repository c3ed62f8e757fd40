"""Custom exception hierarchy for the schedule engine."""

from __future__ import annotations

from collections.abc import Sequence


class ScheduleEngineError(Exception):
    """Base exception for all schedule_engine errors."""


class MalformedTemplateError(ScheduleEngineError):
    """Template day numbers are duplicated or not contiguous from 1.

    Positional completion matching depends on day numbers, so the engine
    refuses to reindex a broken template.
    """

    def __init__(self, message: str, day_numbers: Sequence[int] = ()) -> None:
        super().__init__(message)
        self.day_numbers = tuple(day_numbers)


class InvalidScheduleConfigError(ScheduleEngineError):
    """User schedule configuration is unusable (e.g. weekday outside 1-7)."""


class CatalogError(ScheduleEngineError):
    """A program-catalog payload is missing keys or has wrongly typed values."""
