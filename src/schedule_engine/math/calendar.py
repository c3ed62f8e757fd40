"""Calendar math: training-day scanning and calendar-relative week numbers.

All weekday numbers are ISO (Monday=1 ... Sunday=7), matching
``date.isoweekday()``.
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date, timedelta

from schedule_engine.exceptions import InvalidScheduleConfigError
from schedule_engine.models.enums import DAYS_PER_WEEK


def is_training_day(day: date, preferred_days: frozenset[int]) -> bool:
    return day.isoweekday() in preferred_days


def next_training_day(on_or_after: date, preferred_days: frozenset[int]) -> date:
    """Return the first preferred weekday on or after *on_or_after*.

    Raises:
        InvalidScheduleConfigError: If *preferred_days* names no weekday.
    """
    for offset in range(DAYS_PER_WEEK):
        candidate = on_or_after + timedelta(days=offset)
        if is_training_day(candidate, preferred_days):
            return candidate
    raise InvalidScheduleConfigError("No preferred training days configured")


def iter_training_days(start: date, preferred_days: frozenset[int]) -> Iterator[date]:
    """Yield every preferred weekday from *start* (inclusive) onwards, forever."""
    current = next_training_day(start, preferred_days)
    while True:
        yield current
        current = next_training_day(current + timedelta(days=1), preferred_days)


def week_number_for(start_date: date, on_date: date) -> int:
    """1-indexed calendar week of *on_date* counted from *start_date*."""
    return (on_date - start_date).days // DAYS_PER_WEEK + 1
