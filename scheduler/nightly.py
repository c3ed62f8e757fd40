"""Nightly scheduler: rebuilds the enrolled plan and writes the annotated schedule.

Usage:
    python -m scheduler.nightly --once      # single run (for cron)
    python -m scheduler.nightly --daemon    # APScheduler loop

The profile JSON holds the user's settings, completion log and the
program to schedule::

    {
      "start_date": "2026-03-02",
      "preferred_days": [2, 4, 7],
      "march_goal": "hiking",            # or "program": {catalog JSON}
      "completions": [{"program_id": "...", "date": "...", "program_workout_day": 1}],
      "feedback": {"rpe": 8, "soreness": false, "timestamp": "..."}
    }
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path

from schedule_engine.catalog.march import build_march_template
from schedule_engine.collaborators import (
    InMemoryCompletionLog,
    InMemoryTemplateCatalog,
    StaticFeedbackSource,
    StaticScheduleConfig,
)
from schedule_engine.engine import ScheduleEngine
from schedule_engine.exceptions import ScheduleEngineError
from schedule_engine.models.enums import ExperienceLevel, RuckingGoal
from schedule_engine.models.template import ProgramTemplate
from schedule_engine.serialization import (
    completions_from_json,
    config_from_json,
    feedback_from_json,
    schedule_to_dict,
    template_from_program_json,
)

from scheduler.config import NIGHTLY_HOUR, NIGHTLY_MINUTE, OUTPUT_PATH, PROFILE_PATH

logger = logging.getLogger(__name__)


def _load_profile(path: Path) -> dict:
    """Load the schedule profile from disk."""
    with open(path) as f:
        return json.load(f)


def template_from_profile(profile: dict) -> ProgramTemplate:
    """Pick the program described by the profile: catalog JSON or a MARCH goal."""
    if "program" in profile:
        return template_from_program_json(profile["program"])
    return build_march_template(
        RuckingGoal(profile.get("march_goal", RuckingGoal.LONGEVITY.value)),
        ExperienceLevel(profile.get("experience", ExperienceLevel.INTERMEDIATE.value)),
        base_weight_lbs=float(profile.get("base_weight_lbs", 20.0)),
        baseline_pace_minutes=float(profile.get("baseline_pace_minutes", 16.0)),
    )


def build_engine(profile: dict) -> tuple[ScheduleEngine, str]:
    """Wire a ScheduleEngine to in-memory collaborators loaded from *profile*."""
    template = template_from_profile(profile)
    engine = ScheduleEngine(
        catalog=InMemoryTemplateCatalog([template]),
        config_source=StaticScheduleConfig(config_from_json(profile)),
        completion_log=InMemoryCompletionLog(
            completions_from_json(profile.get("completions", []))
        ),
        feedback_source=StaticFeedbackSource(feedback_from_json(profile.get("feedback"))),
    )
    return engine, template.program_id


def nightly_job(
    profile_path: Path = PROFILE_PATH,
    output_path: Path = OUTPUT_PATH,
    today: date | None = None,
) -> bool:
    """Execute one nightly cycle: load profile, rebuild schedule, write JSON.

    Returns:
        True if a schedule was written.
    """
    logger.info("Starting nightly job")
    today = today or date.today()

    try:
        profile = _load_profile(profile_path)
    except FileNotFoundError:
        logger.error("Profile not found at %s", profile_path)
        return False
    except json.JSONDecodeError as exc:
        logger.error("Profile at %s is not valid JSON: %s", profile_path, exc)
        return False

    try:
        engine, program_id = build_engine(profile)
        result = engine.refresh(program_id, today)
    except (ScheduleEngineError, ValueError) as exc:
        logger.error("Failed to build schedule: %s", exc)
        return False

    if result is None or result.summary is None:
        logger.warning("No plan selected, nothing written")
        return False

    summary = result.summary
    visible = engine.tracker.today_view(result.workouts, today)
    logger.info(
        "Week %d: %d/%d workouts done, %d entries visible today",
        summary.current_week,
        summary.completed_workouts,
        summary.total_workouts,
        len(visible),
    )

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            json.dump(schedule_to_dict(result), f, indent=2)
    except OSError as exc:
        logger.error("Failed to write schedule to %s: %s", output_path, exc)
        return False

    logger.info("Nightly job complete, wrote %s", output_path)
    return True


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    parser = argparse.ArgumentParser(description="Program schedule nightly refresh")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--once", action="store_true", help="Run once and exit")
    group.add_argument("--daemon", action="store_true", help="Run as APScheduler daemon")
    args = parser.parse_args()

    if args.once:
        sys.exit(0 if nightly_job() else 1)
    else:
        from apscheduler.schedulers.blocking import BlockingScheduler

        scheduler = BlockingScheduler()
        scheduler.add_job(
            nightly_job,
            "cron",
            hour=NIGHTLY_HOUR,
            minute=NIGHTLY_MINUTE,
            id="nightly_job",
        )
        logger.info(
            "Scheduler started: nightly job at %02d:%02d",
            NIGHTLY_HOUR,
            NIGHTLY_MINUTE,
        )
        try:
            scheduler.start()
        except (KeyboardInterrupt, SystemExit):
            logger.info("Scheduler stopped")


if __name__ == "__main__":
    main()
