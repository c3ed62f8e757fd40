"""Progress tracking: completion matching, lock gating, today view."""

from schedule_engine.progress.tracker import (
    ProgressTracker,
    match_completions,
    settled_prefix_length,
    today_view,
    workout_state,
)

__all__ = [
    "ProgressTracker",
    "match_completions",
    "settled_prefix_length",
    "today_view",
    "workout_state",
]
