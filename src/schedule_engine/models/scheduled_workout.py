"""ScheduledWorkout: a template entry placed on a calendar date."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from schedule_engine.models.enums import WorkoutType


@dataclass(frozen=True)
class ScheduledWorkout:
    """A dated session in a user's schedule.

    Created fresh by every generation run. The adaptation and progress
    stages return modified copies (``dataclasses.replace``) rather than
    mutating in place.
    """

    date: date
    week_number: int
    title: str
    description: str
    workout_type: str
    workout_id: str | None = None
    day_number: int | None = None
    distance_miles: float | None = None
    is_completed: bool = False
    is_locked: bool = False
    is_deloaded: bool = False
    completed_on: date | None = None

    @property
    def is_rest(self) -> bool:
        return self.workout_type.lower() == WorkoutType.REST.value
