"""Post-session effort feedback used by the deload adaptation rule."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from schedule_engine.models.enums import DELOAD_FEEDBACK_WINDOW_DAYS, DELOAD_RPE_THRESHOLD


@dataclass(frozen=True)
class SessionFeedback:
    """How the most recent session felt.

    ``rpe`` is the 1-10 rating of perceived exertion.
    """

    rpe: int
    soreness: bool
    timestamp: datetime

    @property
    def calls_for_deload(self) -> bool:
        return self.rpe >= DELOAD_RPE_THRESHOLD or self.soreness

    def is_recent(self, today: date) -> bool:
        """True if the feedback is no older than the deload window."""
        age_days = (today - self.timestamp.date()).days
        return age_days <= DELOAD_FEEDBACK_WINDOW_DAYS
