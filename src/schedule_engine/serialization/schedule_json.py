"""Annotated schedule → plain JSON-ready dicts.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json

from schedule_engine.models.progress import ScheduleResult
from schedule_engine.models.scheduled_workout import ScheduledWorkout


def scheduled_workout_to_dict(workout: ScheduledWorkout) -> dict:
    return {
        "date": workout.date.isoformat(),
        "week_number": workout.week_number,
        "day_number": workout.day_number,
        "workout_id": workout.workout_id,
        "title": workout.title,
        "description": workout.description,
        "workout_type": workout.workout_type,
        "distance_miles": workout.distance_miles,
        "is_completed": workout.is_completed,
        "is_locked": workout.is_locked,
        "is_deloaded": workout.is_deloaded,
        "completed_on": workout.completed_on.isoformat() if workout.completed_on else None,
    }


def schedule_to_dict(result: ScheduleResult) -> dict:
    """Convert a ScheduleResult to a dict with ISO dates."""
    summary = result.summary
    return {
        "program_id": result.program_id,
        "workouts": [scheduled_workout_to_dict(w) for w in result.workouts],
        "applied_rules": list(result.trace.applied_rule_ids),
        "summary": None
        if summary is None
        else {
            "total_workouts": summary.total_workouts,
            "completed_workouts": summary.completed_workouts,
            "progress_fraction": round(summary.progress_fraction, 3),
            "current_week": summary.current_week,
            "is_finished": summary.is_finished,
            "next_workout_day": summary.next_workout.day_number
            if summary.next_workout
            else None,
        },
    }


def schedule_to_json_string(result: ScheduleResult, indent: int = 2) -> str:
    return json.dumps(schedule_to_dict(result), indent=indent)
