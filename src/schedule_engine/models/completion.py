"""Completion records: real logged workouts owned by the persistence layer."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CompletionRecord:
    """One logged workout attributed to a program.

    ``program_workout_day`` matches a template ``day_number``; 0 means the
    workout was logged without a day and is matched by position instead.
    """

    program_id: str | None
    date: datetime
    program_workout_day: int = 0


def records_for_program(
    records: Iterable[CompletionRecord], program_id: str
) -> list[CompletionRecord]:
    """Filter *records* to one program, sorted by date ascending."""
    return sorted(
        (r for r in records if r.program_id == program_id),
        key=lambda r: r.date,
    )
