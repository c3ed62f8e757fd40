"""Tests for profile JSON → schedule config, completions and feedback."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from schedule_engine.exceptions import CatalogError, InvalidScheduleConfigError
from schedule_engine.models.enums import FALLBACK_PREFERRED_DAYS
from schedule_engine.serialization import (
    completions_from_json,
    config_from_json,
    feedback_from_json,
)


class TestConfigFromJson:
    def test_parses(self) -> None:
        config = config_from_json({"start_date": "2026-03-02", "preferred_days": [1, 3, 3]})
        assert config.start_date == date(2026, 3, 2)
        assert config.preferred_days == frozenset({1, 3})

    def test_missing_days_use_fallback(self) -> None:
        config = config_from_json({"start_date": "2026-03-02"})
        assert config.preferred_days == FALLBACK_PREFERRED_DAYS

    def test_missing_start_raises(self) -> None:
        with pytest.raises(CatalogError):
            config_from_json({"preferred_days": [2]})

    def test_bad_start_raises(self) -> None:
        with pytest.raises(CatalogError):
            config_from_json({"start_date": "March 2nd"})

    def test_bad_weekday_raises(self) -> None:
        with pytest.raises(InvalidScheduleConfigError):
            config_from_json({"start_date": "2026-03-02", "preferred_days": [0, 8]})


class TestCompletionsFromJson:
    def test_parses(self) -> None:
        records = completions_from_json(
            [
                {"program_id": "p", "date": "2026-03-03T07:30:00", "program_workout_day": 2},
                {"program_id": "p", "date": "2026-03-05T18:00:00"},
            ]
        )
        assert records[0].date == datetime(2026, 3, 3, 7, 30)
        assert records[0].program_workout_day == 2
        assert records[1].program_workout_day == 0

    def test_mixed_offsets_normalized_to_naive_utc(self) -> None:
        records = completions_from_json(
            [
                {"program_id": "p", "date": "2026-03-03T07:30:00+02:00"},
                {"program_id": "p", "date": "2026-03-05T07:30:00"},
            ]
        )
        assert records[0].date == datetime(2026, 3, 3, 5, 30)
        assert records[0].date.tzinfo is None
        assert sorted(records, key=lambda r: r.date) == records

    def test_missing_program_id_is_none(self) -> None:
        records = completions_from_json([{"date": "2026-03-03T07:30:00"}])
        assert records[0].program_id is None

    def test_missing_date_raises(self) -> None:
        with pytest.raises(CatalogError):
            completions_from_json([{"program_id": "p"}])

    def test_bad_date_raises(self) -> None:
        with pytest.raises(CatalogError):
            completions_from_json([{"program_id": "p", "date": "yesterday"}])


class TestFeedbackFromJson:
    def test_none_or_empty(self) -> None:
        assert feedback_from_json(None) is None
        assert feedback_from_json({}) is None

    def test_parses(self) -> None:
        feedback = feedback_from_json(
            {"rpe": "8", "soreness": True, "timestamp": "2026-03-10T19:00:00"}
        )
        assert feedback.rpe == 8
        assert feedback.soreness
        assert feedback.timestamp == datetime(2026, 3, 10, 19, 0)

    def test_missing_rpe_raises(self) -> None:
        with pytest.raises(CatalogError):
            feedback_from_json({"timestamp": "2026-03-10T19:00:00"})
