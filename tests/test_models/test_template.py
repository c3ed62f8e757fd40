"""Tests for WorkoutTemplateEntry and ProgramTemplate."""

from __future__ import annotations

from typing import Callable

import pytest

from schedule_engine.models.enums import WorkoutType
from schedule_engine.models.template import ProgramTemplate, WorkoutTemplateEntry


class TestWorkoutTemplateEntry:
    @pytest.mark.parametrize(
        ("day", "week"), [(1, 1), (7, 1), (8, 2), (14, 2), (15, 3), (28, 4)]
    )
    def test_week_number_is_ceil_of_day_over_seven(self, day: int, week: int) -> None:
        entry = WorkoutTemplateEntry(day_number=day, workout_type=WorkoutType.PACE)
        assert entry.week_number == week

    def test_rest_flag(self) -> None:
        assert WorkoutTemplateEntry(3, WorkoutType.REST).is_rest
        assert not WorkoutTemplateEntry(3, WorkoutType.RECOVERY).is_rest

    def test_frozen(self) -> None:
        entry = WorkoutTemplateEntry(day_number=1, workout_type=WorkoutType.PACE)
        with pytest.raises(AttributeError):
            entry.day_number = 2  # type: ignore[misc]


class TestProgramTemplate:
    def test_total_workouts_excludes_rest(
        self, seven_day_template: ProgramTemplate
    ) -> None:
        assert seven_day_template.total_workouts == 6

    def test_duration_weeks(self, template_factory: Callable[..., ProgramTemplate]) -> None:
        assert template_factory(7).duration_weeks == 1
        assert template_factory(15).duration_weeks == 3

    def test_empty_template(self) -> None:
        template = ProgramTemplate(program_id="empty", title="Nothing")
        assert template.total_workouts == 0
        assert template.duration_weeks == 0
