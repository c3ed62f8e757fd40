"""Progress summary and full pipeline result."""

from __future__ import annotations

from dataclasses import dataclass, field

from schedule_engine.models.adaptation import AdaptationTrace
from schedule_engine.models.scheduled_workout import ScheduledWorkout


@dataclass(frozen=True)
class ProgressSummary:
    """Headline progress numbers for one enrolled program."""

    total_workouts: int
    completed_workouts: int
    current_week: int
    next_workout: ScheduledWorkout | None = None

    @property
    def progress_fraction(self) -> float:
        """Completed share of non-rest workouts, 0.0-1.0."""
        if self.total_workouts <= 0:
            return 0.0
        return min(1.0, self.completed_workouts / self.total_workouts)

    @property
    def is_finished(self) -> bool:
        return self.total_workouts > 0 and self.completed_workouts >= self.total_workouts


@dataclass(frozen=True)
class ScheduleResult:
    """Output of ScheduleEngine.build(): annotated schedule + trace + summary."""

    program_id: str
    workouts: tuple[ScheduledWorkout, ...] = field(default_factory=tuple)
    trace: AdaptationTrace = field(default_factory=AdaptationTrace)
    summary: ProgressSummary | None = None
