"""Progress Tracker: overlays completion and lock state onto a schedule.

Completion is joined by position, never by calendar date: a user who
logs "day 3" a week late is still credited with day 3.

Matching:
    * Records from other programs are ignored (treated as no progress).
    * Records are taken in ascending date order.
    * A record whose ``program_workout_day`` names a schedule entry
      completes that entry.
    * A record without a usable day completes the next unfinished
      non-rest entry, so the Nth such workout fills the Nth slot.

Locking (positions counted over non-rest entries only):
    An entry is unlocked iff it is a rest entry, it is completed, or its
    workout position <= completed workouts + 1.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Sequence
from datetime import date

from schedule_engine.models.completion import CompletionRecord, records_for_program
from schedule_engine.models.enums import WorkoutState
from schedule_engine.models.progress import ProgressSummary
from schedule_engine.models.scheduled_workout import ScheduledWorkout
from schedule_engine.models.user_config import as_date

logger = logging.getLogger(__name__)


def _position_order(schedule: Sequence[ScheduledWorkout]) -> list[int]:
    """Indices of *schedule* in template day-number order (undated entries last)."""
    return sorted(
        range(len(schedule)),
        key=lambda i: (schedule[i].day_number is None, schedule[i].day_number or 0, i),
    )


def match_completions(
    schedule: Sequence[ScheduledWorkout],
    records: Sequence[CompletionRecord],
) -> dict[int, date]:
    """Map schedule indices to the date of the record that completed them.

    *records* must already be filtered to one program and sorted by date.
    """
    order = _position_order(schedule)
    by_day = {
        w.day_number: i for i, w in enumerate(schedule) if w.day_number is not None
    }
    completed: dict[int, date] = {}

    for record in records:
        index = by_day.get(record.program_workout_day)
        if index is None:
            index = next(
                (i for i in order if i not in completed and not schedule[i].is_rest),
                None,
            )
            if index is None:
                logger.debug("Ignoring surplus completion record from %s", record.date)
                continue
        if index in completed:
            logger.debug(
                "Day %s already completed, ignoring duplicate record",
                schedule[index].day_number,
            )
            continue
        completed[index] = as_date(record.date)

    return completed


def settled_prefix_length(schedule: Sequence[ScheduledWorkout]) -> int:
    """Number of leading entries that are completed or rest days."""
    count = 0
    for workout in schedule:
        if not (workout.is_completed or workout.is_rest):
            break
        count += 1
    return count


def workout_state(workout: ScheduledWorkout) -> WorkoutState:
    """Derive the Locked -> Unlocked -> Completed state of an annotated entry."""
    if workout.is_completed:
        return WorkoutState.COMPLETED
    if workout.is_locked:
        return WorkoutState.LOCKED
    return WorkoutState.UNLOCKED


def today_view(
    schedule: Sequence[ScheduledWorkout], today: date
) -> tuple[ScheduledWorkout, ...]:
    """Entries to surface on *today*.

    Everything dated today or later; once the plan has run out, the
    entries completed today instead, so the list is not empty between
    finishing a plan and enrolling in the next one.
    """
    upcoming = tuple(w for w in schedule if w.date >= today)
    if upcoming:
        return upcoming
    return tuple(w for w in schedule if w.is_completed and w.completed_on == today)


class ProgressTracker:
    """Annotates schedules with completion and lock flags.

    Usage:
        tracker = ProgressTracker()
        annotated = tracker.annotate(schedule, records, program_id)
        summary = tracker.summarize(annotated)
    """

    def annotate(
        self,
        schedule: Sequence[ScheduledWorkout],
        completions: Iterable[CompletionRecord],
        program_id: str,
    ) -> tuple[ScheduledWorkout, ...]:
        """Return *schedule* with ``is_completed``/``is_locked``/``completed_on`` set.

        Args:
            schedule: Adapted schedule in template order.
            completions: Completion log snapshot; may contain other programs.
            program_id: Program the schedule was generated for.

        Returns:
            A new tuple of the same length.
        """
        all_records = list(completions)
        records = records_for_program(all_records, program_id)
        if len(records) != len(all_records):
            logger.debug(
                "Ignoring %d completion records not belonging to program %s",
                len(all_records) - len(records),
                program_id,
            )

        completed = match_completions(schedule, records)
        workout_indices = [i for i in _position_order(schedule) if not schedule[i].is_rest]
        completed_workouts = sum(1 for i in workout_indices if i in completed)
        workout_rank = {index: rank for rank, index in enumerate(workout_indices, start=1)}

        annotated: list[ScheduledWorkout] = []
        for index, workout in enumerate(schedule):
            is_completed = index in completed
            if workout.is_rest or is_completed:
                is_locked = False
            else:
                is_locked = workout_rank[index] > completed_workouts + 1
            annotated.append(
                dataclasses.replace(
                    workout,
                    is_completed=is_completed,
                    is_locked=is_locked,
                    completed_on=completed.get(index),
                )
            )
        return tuple(annotated)

    def today_view(
        self, schedule: Sequence[ScheduledWorkout], today: date
    ) -> tuple[ScheduledWorkout, ...]:
        return today_view(schedule, today)

    def summarize(self, schedule: Sequence[ScheduledWorkout]) -> ProgressSummary:
        """Headline numbers for an annotated schedule."""
        workouts = [w for w in schedule if not w.is_rest]
        next_workout = next(
            (w for w in workouts if not w.is_completed and not w.is_locked), None
        )
        if next_workout is not None:
            current_week = next_workout.week_number
        elif schedule:
            current_week = schedule[-1].week_number
        else:
            current_week = 0

        return ProgressSummary(
            total_workouts=len(workouts),
            completed_workouts=sum(1 for w in workouts if w.is_completed),
            current_week=current_week,
            next_workout=next_workout,
        )
