"""Program templates: the calendar-free definition of a training program."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from schedule_engine.models.enums import DAYS_PER_WEEK, WorkoutType


@dataclass(frozen=True)
class WorkoutTemplateEntry:
    """One planned session in a program template.

    ``day_number`` is the 1-based position of the session in the whole
    program (not within a week) and is what completion records join on.
    """

    day_number: int
    workout_type: WorkoutType
    workout_id: str | None = None
    title: str = ""
    distance_miles: float | None = None
    target_pace_minutes: float | None = None
    instructions: str = ""

    @property
    def week_number(self) -> int:
        return math.ceil(self.day_number / DAYS_PER_WEEK)

    @property
    def is_rest(self) -> bool:
        return self.workout_type == WorkoutType.REST


@dataclass(frozen=True)
class ProgramTemplate:
    """A named, ordered list of template entries."""

    program_id: str
    title: str
    entries: tuple[WorkoutTemplateEntry, ...] = field(default_factory=tuple)
    difficulty: str = "intermediate"

    @property
    def total_workouts(self) -> int:
        """Count of non-rest entries."""
        return sum(1 for e in self.entries if not e.is_rest)

    @property
    def duration_weeks(self) -> int:
        if not self.entries:
            return 0
        return max(e.week_number for e in self.entries)
