"""LOAD rule: deload upcoming sessions after a hard or painful session.

If the latest feedback is at most a week old and reports RPE >= 8 or
soreness, every upcoming unfinished session with a distance target is
cut by 10% (never below one mile). Deloaded sessions are flagged so a
second pass leaves them alone.
"""

from __future__ import annotations

import dataclasses

from schedule_engine.adaptation.base import AdaptationRule
from schedule_engine.models.adaptation import AdaptationContext
from schedule_engine.models.enums import (
    DELOAD_DISTANCE_FACTOR,
    DELOAD_MIN_DISTANCE_MILES,
    Priority,
)
from schedule_engine.models.scheduled_workout import ScheduledWorkout


class FeedbackDeloadRule(AdaptationRule):
    """Trims upcoming distances when recent feedback signals fatigue."""

    rule_id = "feedback_deload"
    version = "1.0.0"
    priority = Priority.LOAD
    required_context = ["feedback"]

    def apply(
        self,
        schedule: tuple[ScheduledWorkout, ...],
        context: AdaptationContext,
    ) -> tuple[ScheduledWorkout, ...] | None:
        feedback = context.feedback  # guaranteed not None by required_context
        if not feedback.is_recent(context.today) or not feedback.calls_for_deload:  # type: ignore[union-attr]
            return None

        adapted: list[ScheduledWorkout] = []
        changed = 0
        for index, workout in enumerate(schedule):
            if (
                index < context.completed_count
                or workout.is_completed
                or workout.is_rest
                or workout.is_deloaded
                or workout.distance_miles is None
                or workout.date < context.today
            ):
                adapted.append(workout)
                continue

            miles = max(DELOAD_MIN_DISTANCE_MILES, workout.distance_miles * DELOAD_DISTANCE_FACTOR)
            adapted.append(
                dataclasses.replace(
                    workout,
                    distance_miles=miles,
                    description=f"Target: {miles:.1f} miles (deload)",
                    is_deloaded=True,
                )
            )
            changed += 1

        if changed == 0:
            return None
        return tuple(adapted)
