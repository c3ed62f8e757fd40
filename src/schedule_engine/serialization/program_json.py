"""Program-catalog JSON → ProgramTemplate.

The bundled catalog stores programs as weeks of workouts, with day
numbers restarting in every week::

    {
      "id": "...", "title": "...", "difficulty": "beginner",
      "weeks": [
        {"week_number": 1, "workouts": [
          {"id": "...", "day_number": 1, "workout_type": "ruck",
           "distance_miles": 3.0, "target_pace_minutes": 16.0,
           "instructions": "..."}
        ]}
      ]
    }

Weeks are flattened in week order and workouts in per-week day order,
giving template day numbers 1..N. All functions are pure (no I/O).
"""

from __future__ import annotations

from typing import Any

from schedule_engine.exceptions import CatalogError
from schedule_engine.models.enums import parse_workout_type
from schedule_engine.models.template import ProgramTemplate, WorkoutTemplateEntry


def _require(mapping: dict[str, Any], key: str, where: str) -> Any:
    if not isinstance(mapping, dict) or key not in mapping:
        raise CatalogError(f"Missing '{key}' in {where}")
    return mapping[key]


def _optional_float(value: Any, where: str) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise CatalogError(f"Expected a number in {where}, got {value!r}") from exc


def template_from_program_json(payload: dict[str, Any]) -> ProgramTemplate:
    """Build a ProgramTemplate from one catalog program.

    Raises:
        CatalogError: On missing keys or wrongly typed values.
    """
    program_id = str(_require(payload, "id", "program"))
    weeks = _require(payload, "weeks", f"program {program_id}")
    if not isinstance(weeks, list):
        raise CatalogError(f"'weeks' of program {program_id} must be a list")

    def week_key(week: dict[str, Any]) -> int:
        return int(_require(week, "week_number", f"program {program_id} week"))

    entries: list[WorkoutTemplateEntry] = []
    for week in sorted(weeks, key=week_key):
        where = f"program {program_id} week {week_key(week)}"
        workouts = _require(week, "workouts", where)
        ordered = sorted(
            workouts, key=lambda w: int(_require(w, "day_number", f"{where} workout"))
        )
        for workout in ordered:
            label = str(_require(workout, "workout_type", f"{where} workout"))
            entries.append(
                WorkoutTemplateEntry(
                    day_number=len(entries) + 1,
                    workout_type=parse_workout_type(label),
                    workout_id=str(workout["id"]) if workout.get("id") else None,
                    title=label,
                    distance_miles=_optional_float(workout.get("distance_miles"), where),
                    target_pace_minutes=_optional_float(
                        workout.get("target_pace_minutes"), where
                    ),
                    instructions=workout.get("instructions") or "",
                )
            )

    return ProgramTemplate(
        program_id=program_id,
        title=str(payload.get("title") or "Personalized Plan"),
        entries=tuple(entries),
        difficulty=str(payload.get("difficulty") or "intermediate"),
    )
