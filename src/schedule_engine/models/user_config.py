"""User schedule configuration: enrollment date and preferred weekdays."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime

from schedule_engine.exceptions import InvalidScheduleConfigError
from schedule_engine.models.enums import FALLBACK_PREFERRED_DAYS, ISO_WEEKDAYS


def as_date(value: date | datetime) -> date:
    """Drop any time-of-day component."""
    if isinstance(value, datetime):
        return value.date()
    return value


def normalize_preferred_days(days: Iterable[int] | None) -> frozenset[int]:
    """Deduplicate weekday numbers and substitute the fallback for an empty set.

    Raises:
        InvalidScheduleConfigError: If any value is outside 1-7.
    """
    normalized = frozenset(int(d) for d in days or ())
    invalid = sorted(normalized - ISO_WEEKDAYS)
    if invalid:
        raise InvalidScheduleConfigError(
            f"Preferred days must be ISO weekdays 1-7, got {invalid}"
        )
    return normalized or FALLBACK_PREFERRED_DAYS


@dataclass(frozen=True)
class UserScheduleConfig:
    """Caller-owned schedule settings.

    ``preferred_days`` holds ISO weekday numbers (Mon=1 ... Sun=7) and is
    normalized on construction, so an empty input becomes the Tue/Thu/Sun
    fallback. A datetime start date is truncated to its date.
    """

    start_date: date
    preferred_days: frozenset[int] = FALLBACK_PREFERRED_DAYS

    def __post_init__(self) -> None:
        object.__setattr__(self, "start_date", as_date(self.start_date))
        object.__setattr__(
            self, "preferred_days", normalize_preferred_days(self.preferred_days)
        )

    @classmethod
    def create(
        cls, start_date: date | datetime, preferred_days: Iterable[int] | None = None
    ) -> UserScheduleConfig:
        """Build from loosely typed inputs (any iterable of weekdays, or None)."""
        return cls(start_date=start_date, preferred_days=frozenset(preferred_days or ()))
