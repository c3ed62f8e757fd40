"""Shared test fixtures: templates, schedule configs, completion logs."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime, time, timedelta
from typing import Callable

import pytest

from schedule_engine.models.completion import CompletionRecord
from schedule_engine.models.enums import WorkoutType
from schedule_engine.models.template import ProgramTemplate, WorkoutTemplateEntry
from schedule_engine.models.user_config import UserScheduleConfig

PROGRAM_ID = "prog-1"


@pytest.fixture
def monday() -> date:
    """Monday 2 March 2026: enrollment date for most scenarios."""
    return date(2026, 3, 2)


@pytest.fixture
def template_factory() -> Callable[..., ProgramTemplate]:
    """Factory fixture for ProgramTemplate instances.

    Usage:
        template = template_factory(7, rest_days={7})
    """

    def factory(
        count: int = 7,
        rest_days: Iterable[int] = (),
        program_id: str = PROGRAM_ID,
        distance_miles: float | None = 3.0,
    ) -> ProgramTemplate:
        rest = set(rest_days)
        entries = tuple(
            WorkoutTemplateEntry(
                day_number=day,
                workout_type=WorkoutType.REST if day in rest else WorkoutType.STANDARD,
                workout_id=f"w{day}",
                distance_miles=None if day in rest else distance_miles,
            )
            for day in range(1, count + 1)
        )
        return ProgramTemplate(program_id=program_id, title="Test Plan", entries=entries)

    return factory


@pytest.fixture
def seven_day_template(template_factory: Callable[..., ProgramTemplate]) -> ProgramTemplate:
    """Days 1-6 standard rucks, day 7 rest."""
    return template_factory(7, rest_days={7})


@pytest.fixture
def tue_thu_sun_config(monday: date) -> UserScheduleConfig:
    return UserScheduleConfig(start_date=monday, preferred_days=frozenset({2, 4, 7}))


@pytest.fixture
def completion_factory() -> Callable[..., list[CompletionRecord]]:
    """Factory fixture for completion logs.

    Usage:
        records = completion_factory(days=[1, 2, 4], first=date(2026, 3, 3))
    """

    def factory(
        days: Iterable[int] = (),
        positional: int = 0,
        first: date = date(2026, 3, 3),
        program_id: str | None = PROGRAM_ID,
    ) -> list[CompletionRecord]:
        records: list[CompletionRecord] = []
        stamp = datetime.combine(first, time(7, 30))
        for day in days:
            records.append(
                CompletionRecord(program_id=program_id, date=stamp, program_workout_day=day)
            )
            stamp += timedelta(days=1)
        for _ in range(positional):
            records.append(CompletionRecord(program_id=program_id, date=stamp))
            stamp += timedelta(days=1)
        return records

    return factory
