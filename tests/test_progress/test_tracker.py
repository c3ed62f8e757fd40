"""Tests for ProgressTracker: positional completion matching and lock gating."""

from __future__ import annotations

from datetime import date, datetime
from typing import Callable

import pytest

from schedule_engine.generator import generate_schedule
from schedule_engine.models.completion import CompletionRecord
from schedule_engine.models.enums import WorkoutState
from schedule_engine.models.scheduled_workout import ScheduledWorkout
from schedule_engine.models.template import ProgramTemplate
from schedule_engine.models.user_config import UserScheduleConfig
from schedule_engine.progress.tracker import (
    ProgressTracker,
    settled_prefix_length,
    today_view,
    workout_state,
)

RecordFactory = Callable[..., list[CompletionRecord]]


@pytest.fixture
def schedule(
    seven_day_template: ProgramTemplate, tue_thu_sun_config: UserScheduleConfig
) -> tuple[ScheduledWorkout, ...]:
    return generate_schedule(seven_day_template, tue_thu_sun_config)


def _by_day(annotated: tuple[ScheduledWorkout, ...]) -> dict[int, ScheduledWorkout]:
    return {w.day_number: w for w in annotated}


class TestAnnotate:
    def test_no_completions_unlocks_first_workout_and_rest(self, schedule) -> None:
        annotated = _by_day(ProgressTracker().annotate(schedule, [], "prog-1"))
        assert not annotated[1].is_locked
        assert all(annotated[d].is_locked for d in (2, 3, 4, 5, 6))
        assert not annotated[7].is_locked
        assert not any(w.is_completed for w in annotated.values())

    def test_day_matched_completion_is_non_contiguous(
        self,
        template_factory: Callable[..., ProgramTemplate],
        tue_thu_sun_config: UserScheduleConfig,
        completion_factory: RecordFactory,
    ) -> None:
        schedule = generate_schedule(template_factory(5), tue_thu_sun_config)
        records = completion_factory(days=[1, 2, 4])
        annotated = _by_day(ProgressTracker().annotate(schedule, records, "prog-1"))
        assert [d for d, w in annotated.items() if w.is_completed] == [1, 2, 4]
        assert not annotated[3].is_locked
        assert annotated[5].is_locked

    def test_positional_records_fill_in_order(
        self, schedule, completion_factory: RecordFactory
    ) -> None:
        annotated = _by_day(
            ProgressTracker().annotate(schedule, completion_factory(positional=2), "prog-1")
        )
        assert annotated[1].is_completed and annotated[2].is_completed
        assert not annotated[3].is_completed and not annotated[3].is_locked
        assert annotated[4].is_locked

    def test_completion_independent_of_calendar_date(
        self, schedule, completion_factory: RecordFactory
    ) -> None:
        # Logged three weeks after the scheduled date, still credited to day 1.
        late = completion_factory(days=[1], first=date(2026, 3, 24))
        annotated = ProgressTracker().annotate(schedule, late, "prog-1")
        assert annotated[0].is_completed
        assert annotated[0].completed_on == date(2026, 3, 24)

    def test_mixed_day_and_positional_records(
        self, schedule, completion_factory: RecordFactory
    ) -> None:
        records = completion_factory(days=[3], positional=1)
        annotated = _by_day(ProgressTracker().annotate(schedule, records, "prog-1"))
        assert annotated[3].is_completed
        assert annotated[1].is_completed
        assert not annotated[2].is_completed and not annotated[2].is_locked
        assert annotated[4].is_locked

    def test_out_of_range_day_is_positional(
        self, schedule, completion_factory: RecordFactory
    ) -> None:
        annotated = ProgressTracker().annotate(schedule, completion_factory(days=[99]), "prog-1")
        assert annotated[0].is_completed

    def test_duplicate_record_counted_once(
        self, schedule, completion_factory: RecordFactory
    ) -> None:
        annotated = ProgressTracker().annotate(
            schedule, completion_factory(days=[1, 1]), "prog-1"
        )
        assert sum(w.is_completed for w in annotated) == 1
        assert annotated[0].completed_on == date(2026, 3, 3)

    def test_surplus_records_ignored(
        self, schedule, completion_factory: RecordFactory
    ) -> None:
        annotated = ProgressTracker().annotate(
            schedule, completion_factory(positional=10), "prog-1"
        )
        assert sum(w.is_completed for w in annotated) == 6
        assert not annotated[6].is_completed
        assert not any(w.is_locked for w in annotated)

    def test_other_program_records_ignored(
        self, schedule, completion_factory: RecordFactory
    ) -> None:
        records = completion_factory(positional=3, program_id="other")
        records += completion_factory(positional=1, program_id=None)
        annotated = ProgressTracker().annotate(schedule, records, "prog-1")
        assert not any(w.is_completed for w in annotated)

    def test_records_taken_in_date_order(self, schedule) -> None:
        later = CompletionRecord("prog-1", datetime(2026, 3, 10, 8, 0))
        earlier = CompletionRecord("prog-1", datetime(2026, 3, 4, 8, 0))
        annotated = ProgressTracker().annotate(schedule, [later, earlier], "prog-1")
        assert annotated[0].completed_on == date(2026, 3, 4)
        assert annotated[1].completed_on == date(2026, 3, 10)

    def test_preserves_length_and_dates(
        self, schedule, completion_factory: RecordFactory
    ) -> None:
        annotated = ProgressTracker().annotate(schedule, completion_factory(positional=3), "prog-1")
        assert len(annotated) == len(schedule)
        assert [w.date for w in annotated] == [w.date for w in schedule]

    def test_reannotation_replaces_previous_flags(
        self, schedule, completion_factory: RecordFactory
    ) -> None:
        tracker = ProgressTracker()
        first = tracker.annotate(schedule, completion_factory(positional=3), "prog-1")
        second = tracker.annotate(first, [], "prog-1")
        assert second == tracker.annotate(schedule, [], "prog-1")


class TestWorkoutState:
    def test_states(self, schedule, completion_factory: RecordFactory) -> None:
        annotated = ProgressTracker().annotate(schedule, completion_factory(positional=1), "prog-1")
        assert workout_state(annotated[0]) == WorkoutState.COMPLETED
        assert workout_state(annotated[1]) == WorkoutState.UNLOCKED
        assert workout_state(annotated[2]) == WorkoutState.LOCKED


class TestSettledPrefix:
    def test_counts_leading_completed_and_rest(
        self, tue_thu_sun_config: UserScheduleConfig, template_factory, completion_factory: RecordFactory
    ) -> None:
        schedule = generate_schedule(template_factory(5, rest_days={2}), tue_thu_sun_config)
        annotated = ProgressTracker().annotate(schedule, completion_factory(days=[1, 4]), "prog-1")
        assert settled_prefix_length(annotated) == 2

    def test_empty(self) -> None:
        assert settled_prefix_length(()) == 0


class TestSummarize:
    def test_fresh_schedule(self, schedule) -> None:
        tracker = ProgressTracker()
        summary = tracker.summarize(tracker.annotate(schedule, [], "prog-1"))
        assert summary.total_workouts == 6
        assert summary.completed_workouts == 0
        assert summary.progress_fraction == 0.0
        assert summary.next_workout is not None
        assert summary.next_workout.day_number == 1
        assert summary.current_week == 1

    def test_partway(self, schedule, completion_factory: RecordFactory) -> None:
        tracker = ProgressTracker()
        annotated = tracker.annotate(schedule, completion_factory(days=[1, 2, 3]), "prog-1")
        summary = tracker.summarize(annotated)
        assert summary.completed_workouts == 3
        assert summary.progress_fraction == pytest.approx(0.5)
        assert summary.next_workout.day_number == 4
        assert summary.current_week == 2

    def test_finished(self, schedule, completion_factory: RecordFactory) -> None:
        tracker = ProgressTracker()
        summary = tracker.summarize(
            tracker.annotate(schedule, completion_factory(positional=6), "prog-1")
        )
        assert summary.is_finished
        assert summary.next_workout is None
        assert summary.current_week == 3

    def test_empty_schedule(self) -> None:
        summary = ProgressTracker().summarize(())
        assert summary.total_workouts == 0
        assert summary.current_week == 0
        assert summary.progress_fraction == 0.0
        assert not summary.is_finished


class TestTodayView:
    def test_upcoming_entries(self, schedule) -> None:
        visible = today_view(schedule, date(2026, 3, 10))
        assert [w.day_number for w in visible] == [4, 5, 6, 7]

    def test_includes_today(self, schedule) -> None:
        assert today_view(schedule, date(2026, 3, 17))[0].day_number == 7

    def test_finished_plan_shows_todays_completions(self, schedule) -> None:
        records = [
            CompletionRecord("prog-1", datetime(2026, 3, 20, hour))
            for hour in range(6, 12)
        ]
        annotated = ProgressTracker().annotate(schedule, records, "prog-1")
        visible = ProgressTracker().today_view(annotated, date(2026, 3, 20))
        assert len(visible) == 6
        assert all(w.is_completed for w in visible)
        assert today_view(annotated, date(2026, 3, 21)) == ()
