"""Data models for the schedule engine."""

from schedule_engine.models.adaptation import (
    AdaptationContext,
    AdaptationTrace,
    RuleResult,
    RuleStatus,
)
from schedule_engine.models.completion import CompletionRecord, records_for_program
from schedule_engine.models.enums import (
    ExperienceLevel,
    Priority,
    RuckingGoal,
    WorkoutState,
    WorkoutType,
    parse_workout_type,
)
from schedule_engine.models.feedback import SessionFeedback
from schedule_engine.models.progress import ProgressSummary, ScheduleResult
from schedule_engine.models.scheduled_workout import ScheduledWorkout
from schedule_engine.models.template import ProgramTemplate, WorkoutTemplateEntry
from schedule_engine.models.user_config import UserScheduleConfig

__all__ = [
    "AdaptationContext",
    "AdaptationTrace",
    "CompletionRecord",
    "ExperienceLevel",
    "Priority",
    "ProgramTemplate",
    "ProgressSummary",
    "RuckingGoal",
    "RuleResult",
    "RuleStatus",
    "ScheduleResult",
    "ScheduledWorkout",
    "SessionFeedback",
    "UserScheduleConfig",
    "WorkoutState",
    "WorkoutTemplateEntry",
    "WorkoutType",
    "parse_workout_type",
    "records_for_program",
]
