"""Profile JSON → schedule config, completion records and feedback.

Dates are ISO-8601 strings. Completion records look like
``{"program_id": "...", "date": "2026-03-03T07:30:00", "program_workout_day": 1}``;
``program_workout_day`` may be omitted (matched by position).
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any

from schedule_engine.exceptions import CatalogError
from schedule_engine.models.completion import CompletionRecord
from schedule_engine.models.feedback import SessionFeedback
from schedule_engine.models.user_config import UserScheduleConfig


def _parse_datetime(value: Any, where: str) -> datetime:
    """Parse an ISO timestamp; a UTC offset is converted to naive UTC."""
    try:
        parsed = datetime.fromisoformat(str(value))
    except ValueError as exc:
        raise CatalogError(f"Invalid timestamp {value!r} in {where}") from exc
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def config_from_json(payload: dict[str, Any]) -> UserScheduleConfig:
    try:
        start = date.fromisoformat(str(payload["start_date"]))
    except KeyError as exc:
        raise CatalogError("Missing 'start_date' in profile") from exc
    except ValueError as exc:
        raise CatalogError(f"Invalid start_date {payload['start_date']!r}") from exc
    return UserScheduleConfig.create(start, payload.get("preferred_days") or ())


def completions_from_json(items: list[dict[str, Any]]) -> list[CompletionRecord]:
    records: list[CompletionRecord] = []
    for item in items:
        if "date" not in item:
            raise CatalogError("Missing 'date' in completion record")
        records.append(
            CompletionRecord(
                program_id=item.get("program_id"),
                date=_parse_datetime(item["date"], "completion record"),
                program_workout_day=int(item.get("program_workout_day") or 0),
            )
        )
    return records


def feedback_from_json(payload: dict[str, Any] | None) -> SessionFeedback | None:
    if not payload:
        return None
    if "rpe" not in payload or "timestamp" not in payload:
        raise CatalogError("Feedback needs 'rpe' and 'timestamp'")
    return SessionFeedback(
        rpe=int(payload["rpe"]),
        soreness=bool(payload.get("soreness", False)),
        timestamp=_parse_datetime(payload["timestamp"], "feedback"),
    )
