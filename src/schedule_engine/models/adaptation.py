"""Adaptation context and trace: inputs to and audit trail of the adaptation stage."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import auto, IntEnum

from schedule_engine.models.enums import FALLBACK_PREFERRED_DAYS
from schedule_engine.models.feedback import SessionFeedback


@dataclass(frozen=True)
class AdaptationContext:
    """Everything an adaptation rule may consult besides the schedule itself.

    ``completed_count`` is the number of leading schedule positions the
    user has already finished; those entries are never moved.
    """

    today: date
    start_date: date
    preferred_days: frozenset[int] = FALLBACK_PREFERRED_DAYS
    completed_count: int = 0
    feedback: SessionFeedback | None = None


class RuleStatus(IntEnum):
    """Whether a rule changed the schedule, left it alone, or could not run."""

    APPLIED = auto()
    SKIPPED = auto()
    NOT_APPLICABLE = auto()
    DISCARDED = auto()


@dataclass(frozen=True)
class RuleResult:
    """Record of a single rule's evaluation during an adaptation pass."""

    rule_id: str
    status: RuleStatus
    changed_entries: int = 0
    explanation: str = ""


@dataclass(frozen=True)
class AdaptationTrace:
    """Complete audit trail for one AdaptationEngine.adapt() call."""

    rule_results: tuple[RuleResult, ...] = field(default_factory=tuple)

    @property
    def applied_rule_ids(self) -> tuple[str, ...]:
        return tuple(
            r.rule_id for r in self.rule_results if r.status == RuleStatus.APPLIED
        )

    @property
    def changed(self) -> bool:
        return bool(self.applied_rule_ids)
