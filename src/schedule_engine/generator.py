"""Schedule Generator: maps a program template onto calendar dates.

Entries are placed one per preferred weekday, in day-number order,
starting on the enrollment date itself when that date is a training day.
Generation is a pure function of its inputs: it never reads the clock.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from schedule_engine.exceptions import MalformedTemplateError
from schedule_engine.math.calendar import iter_training_days, week_number_for
from schedule_engine.models.scheduled_workout import ScheduledWorkout
from schedule_engine.models.template import ProgramTemplate, WorkoutTemplateEntry
from schedule_engine.models.user_config import UserScheduleConfig


def validate_template(
    entries: Sequence[WorkoutTemplateEntry],
) -> tuple[WorkoutTemplateEntry, ...]:
    """Check day numbers are unique and contiguous from 1; return entries in day order.

    Raises:
        MalformedTemplateError: On duplicate, missing or non-positive day numbers.
    """
    day_numbers = [e.day_number for e in entries]
    if len(set(day_numbers)) != len(day_numbers):
        duplicates = sorted({d for d in day_numbers if day_numbers.count(d) > 1})
        raise MalformedTemplateError(
            f"Duplicate template day numbers: {duplicates}", day_numbers
        )
    expected = list(range(1, len(entries) + 1))
    if sorted(day_numbers) != expected:
        raise MalformedTemplateError(
            f"Template day numbers must run 1..{len(entries)} without gaps, "
            f"got {sorted(day_numbers)}",
            day_numbers,
        )
    return tuple(sorted(entries, key=lambda e: e.day_number))


def generate_schedule(
    template: ProgramTemplate | Sequence[WorkoutTemplateEntry],
    config: UserScheduleConfig,
) -> tuple[ScheduledWorkout, ...]:
    """Expand a template into dated sessions.

    Args:
        template: A ProgramTemplate or an ordered sequence of entries.
        config: Enrollment date and preferred weekdays.

    Returns:
        One ScheduledWorkout per template entry, strictly increasing by date.
        An empty template yields an empty tuple.

    Raises:
        MalformedTemplateError: If the template's day numbers are broken.
    """
    entries = template.entries if isinstance(template, ProgramTemplate) else template
    if not entries:
        return ()

    ordered = validate_template(entries)
    training_days = iter_training_days(config.start_date, config.preferred_days)

    schedule: list[ScheduledWorkout] = []
    for entry, day in zip(ordered, training_days):
        schedule.append(build_scheduled_workout(entry, day, config))
    return tuple(schedule)


def build_scheduled_workout(
    entry: WorkoutTemplateEntry, day: date, config: UserScheduleConfig
) -> ScheduledWorkout:
    """Place a single template entry on *day*."""
    week = week_number_for(config.start_date, day)
    return ScheduledWorkout(
        date=day,
        week_number=week,
        title=workout_title(week, entry),
        description=workout_description(entry),
        workout_type=entry.workout_type.value,
        workout_id=entry.workout_id,
        day_number=entry.day_number,
        distance_miles=entry.distance_miles,
    )


def workout_title(week: int, entry: WorkoutTemplateEntry) -> str:
    label = entry.title or entry.workout_type.value
    return f"Week {week} - {label.title()}"


def workout_description(entry: WorkoutTemplateEntry) -> str:
    if entry.distance_miles is not None:
        return f"Target: {entry.distance_miles} miles"
    return entry.instructions
