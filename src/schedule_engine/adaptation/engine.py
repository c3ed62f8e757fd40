"""AdaptationEngine: runs adaptation rules over a generated schedule."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from schedule_engine.adaptation.registry import AdaptationRuleRegistry
from schedule_engine.models.adaptation import (
    AdaptationContext,
    AdaptationTrace,
    RuleResult,
    RuleStatus,
)
from schedule_engine.models.scheduled_workout import ScheduledWorkout

logger = logging.getLogger(__name__)


def _is_strictly_increasing(schedule: Sequence[ScheduledWorkout]) -> bool:
    return all(a.date < b.date for a, b in zip(schedule, schedule[1:]))


def invariant_violation(
    before: Sequence[ScheduledWorkout], after: Sequence[ScheduledWorkout]
) -> str | None:
    """Describe how *after* breaks the adaptation invariants, or None if it holds them."""
    if len(before) != len(after):
        return f"length changed from {len(before)} to {len(after)}"
    if [w.day_number for w in before] != [w.day_number for w in after]:
        return "entry order changed"
    for old, new in zip(before, after):
        if new.date < old.date:
            return f"day {old.day_number} moved earlier ({old.date} -> {new.date})"
    if _is_strictly_increasing(before) and not _is_strictly_increasing(after):
        return "dates are no longer strictly increasing"
    return None


class AdaptationEngine:
    """Applies every registered AdaptationRule in priority order.

    The engine never fails and never drops entries: output that breaks
    the invariants is discarded and the rule's input is kept. When no
    rule changes anything the input is returned as-is, so adapting an
    already adapted schedule is a no-op.

    Usage:
        engine = AdaptationEngine()
        adapted, trace = engine.adapt(schedule, context)
    """

    def __init__(self, registry: AdaptationRuleRegistry | None = None) -> None:
        self.registry = registry or AdaptationRuleRegistry()

        # Auto-discover rules if using default registry
        if registry is None:
            self.registry.discover_rules()

    def adapt(
        self,
        schedule: Sequence[ScheduledWorkout],
        context: AdaptationContext,
    ) -> tuple[tuple[ScheduledWorkout, ...], AdaptationTrace]:
        """Run all rules over *schedule*.

        Args:
            schedule: Output of the Schedule Generator (or of a previous adapt()).
            context: Clock, preferences, completion count and feedback.

        Returns:
            A tuple of (adapted schedule, AdaptationTrace).
        """
        current = tuple(schedule)
        results: list[RuleResult] = []

        for rule in self.registry.get_all_rules():
            if not rule.has_required_context(context):
                results.append(
                    RuleResult(
                        rule_id=rule.rule_id,
                        status=RuleStatus.NOT_APPLICABLE,
                        explanation=f"Missing required context: {rule.required_context}",
                    )
                )
                continue

            adapted = rule.apply(current, context)
            if adapted is None or adapted == current:
                results.append(
                    RuleResult(
                        rule_id=rule.rule_id,
                        status=RuleStatus.SKIPPED,
                        explanation="Rule made no changes.",
                    )
                )
                continue

            violation = invariant_violation(current, adapted)
            if violation is not None:
                logger.warning(
                    "Discarding output of adaptation rule %s: %s", rule.rule_id, violation
                )
                results.append(
                    RuleResult(
                        rule_id=rule.rule_id,
                        status=RuleStatus.DISCARDED,
                        explanation=violation,
                    )
                )
                continue

            changed = sum(1 for old, new in zip(current, adapted) if old != new)
            logger.debug("Adaptation rule %s changed %d entries", rule.rule_id, changed)
            results.append(
                RuleResult(
                    rule_id=rule.rule_id,
                    status=RuleStatus.APPLIED,
                    changed_entries=changed,
                    explanation=f"Adjusted {changed} of {len(current)} entries.",
                )
            )
            current = adapted

        return current, AdaptationTrace(rule_results=tuple(results))
