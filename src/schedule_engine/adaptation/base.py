"""Abstract base class for all schedule adaptation rules."""

from __future__ import annotations

from abc import ABC, abstractmethod

from schedule_engine.models.adaptation import AdaptationContext
from schedule_engine.models.enums import Priority
from schedule_engine.models.scheduled_workout import ScheduledWorkout


class AdaptationRule(ABC):
    """Base class for rules that rebalance a generated schedule.

    Each rule encapsulates one adjustment policy. Rules are discovered
    automatically by the AdaptationRuleRegistry and run by the
    AdaptationEngine in priority order, each seeing the previous rule's
    output.

    Subclasses must define:
        rule_id: unique identifier (e.g. "overdue_shift")
        version: semantic version string
        priority: Priority tier (SCHEDULING, LOAD)
        required_context: AdaptationContext field names that must be set
        apply(): the rule's adjustment logic

    A rule must be idempotent: applying it to its own output changes
    nothing. It must keep the schedule's length and entry order and may
    never move an entry to an earlier date.
    """

    rule_id: str
    version: str
    priority: Priority
    required_context: list[str] = []

    def has_required_context(self, context: AdaptationContext) -> bool:
        """Check that all required AdaptationContext fields are not None."""
        return all(
            getattr(context, field_name, None) is not None
            for field_name in self.required_context
        )

    @abstractmethod
    def apply(
        self,
        schedule: tuple[ScheduledWorkout, ...],
        context: AdaptationContext,
    ) -> tuple[ScheduledWorkout, ...] | None:
        """Return an adjusted copy of *schedule*, or None if nothing applies."""
        ...
