"""SCHEDULING rule: move overdue sessions forward so nothing unfinished is in the past.

When real life falls behind the nominal cadence, the first unfinished
session lands on the next preferred weekday on or after today and every
later session follows on successive preferred weekdays. Sessions are
never pulled earlier than their generated date, so a user who is ahead
of schedule keeps their plan as generated. A session completed out of
order after an unfinished one is re-dated just past its predecessor.
"""

from __future__ import annotations

import dataclasses
import re
from datetime import date, timedelta

from schedule_engine.adaptation.base import AdaptationRule
from schedule_engine.math.calendar import next_training_day, week_number_for
from schedule_engine.models.adaptation import AdaptationContext
from schedule_engine.models.enums import Priority
from schedule_engine.models.scheduled_workout import ScheduledWorkout
from schedule_engine.models.user_config import normalize_preferred_days

_WEEK_PREFIX = re.compile(r"^Week \d+ - ")


def _retitle(title: str, week: int) -> str:
    if _WEEK_PREFIX.match(title):
        return _WEEK_PREFIX.sub(f"Week {week} - ", title, count=1)
    return title


class OverdueShiftRule(AdaptationRule):
    """Shifts unfinished sessions out of the past, preserving order and cadence."""

    rule_id = "overdue_shift"
    version = "1.0.0"
    priority = Priority.SCHEDULING
    required_context: list[str] = []

    def apply(
        self,
        schedule: tuple[ScheduledWorkout, ...],
        context: AdaptationContext,
    ) -> tuple[ScheduledWorkout, ...] | None:
        preferred_days = normalize_preferred_days(context.preferred_days)
        adapted = list(schedule)
        previous: date | None = None
        moved = 0

        for index, workout in enumerate(schedule):
            if index < context.completed_count:
                previous = workout.date
                continue

            if workout.is_completed:
                # Done out of order: only move as far as ordering requires.
                if previous is None or workout.date > previous:
                    target = workout.date
                else:
                    target = next_training_day(previous + timedelta(days=1), preferred_days)
            else:
                floor = context.today
                if previous is not None:
                    floor = max(floor, previous + timedelta(days=1))
                target = max(workout.date, next_training_day(floor, preferred_days))

            if target != workout.date:
                week = week_number_for(context.start_date, target)
                adapted[index] = dataclasses.replace(
                    workout,
                    date=target,
                    week_number=week,
                    title=_retitle(workout.title, week),
                )
                moved += 1
            previous = target

        if moved == 0:
            return None
        return tuple(adapted)
