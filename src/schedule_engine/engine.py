"""ScheduleEngine: the orchestrator that runs generation, adaptation and tracking."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date

from schedule_engine.adaptation.engine import AdaptationEngine
from schedule_engine.collaborators import (
    CompletionLog,
    FeedbackSource,
    ScheduleConfigSource,
    TemplateCatalog,
)
from schedule_engine.generator import generate_schedule
from schedule_engine.models.adaptation import AdaptationContext
from schedule_engine.models.completion import CompletionRecord
from schedule_engine.models.feedback import SessionFeedback
from schedule_engine.models.progress import ScheduleResult
from schedule_engine.models.template import ProgramTemplate
from schedule_engine.models.user_config import UserScheduleConfig
from schedule_engine.progress.tracker import ProgressTracker, settled_prefix_length

logger = logging.getLogger(__name__)


class ScheduleEngine:
    """Builds an annotated schedule for one enrolled program.

    ``build()`` takes every input explicitly. ``refresh()`` pulls them from
    the injected collaborators, which must all be supplied to use it.

    Usage:
        engine = ScheduleEngine()
        result = engine.build(template, config, completions, today=date.today())
        visible = engine.tracker.today_view(result.workouts, date.today())
    """

    def __init__(
        self,
        adaptation: AdaptationEngine | None = None,
        tracker: ProgressTracker | None = None,
        catalog: TemplateCatalog | None = None,
        config_source: ScheduleConfigSource | None = None,
        completion_log: CompletionLog | None = None,
        feedback_source: FeedbackSource | None = None,
    ) -> None:
        self.adaptation = adaptation or AdaptationEngine()
        self.tracker = tracker or ProgressTracker()
        self.catalog = catalog
        self.config_source = config_source
        self.completion_log = completion_log
        self.feedback_source = feedback_source

    def build(
        self,
        template: ProgramTemplate,
        config: UserScheduleConfig,
        completions: Iterable[CompletionRecord],
        today: date,
        feedback: SessionFeedback | None = None,
    ) -> ScheduleResult:
        """Run generate -> adapt -> track for one program.

        Args:
            template: The program to schedule.
            config: Enrollment date and preferred weekdays.
            completions: Completion log snapshot (other programs are ignored).
            today: The caller's current date; the engine never reads the clock.
            feedback: Latest session feedback, if any.

        Returns:
            ScheduleResult with the annotated workouts, adaptation trace and
            progress summary. An empty template gives an empty result.

        Raises:
            MalformedTemplateError: If the template's day numbers are broken.
        """
        records = list(completions)
        generated = generate_schedule(template, config)

        # Completion is positional, so it can be matched before dates move.
        tracked = self.tracker.annotate(generated, records, template.program_id)
        settled = settled_prefix_length(tracked)
        context = AdaptationContext(
            today=today,
            start_date=config.start_date,
            preferred_days=config.preferred_days,
            completed_count=settled,
            feedback=feedback,
        )
        adapted, trace = self.adaptation.adapt(tracked, context)
        annotated = self.tracker.annotate(adapted, records, template.program_id)
        summary = self.tracker.summarize(annotated)

        logger.info(
            "Built schedule for %s: %d entries, %d/%d workouts completed, rules applied: %s",
            template.program_id,
            len(annotated),
            summary.completed_workouts,
            summary.total_workouts,
            ", ".join(trace.applied_rule_ids) or "none",
        )
        return ScheduleResult(
            program_id=template.program_id,
            workouts=annotated,
            trace=trace,
            summary=summary,
        )

    def refresh(self, program_id: str, today: date) -> ScheduleResult | None:
        """Rebuild the schedule for *program_id* from the injected collaborators.

        Returns:
            The ScheduleResult, or None when the catalog does not know the
            program (the "no plan selected" state).

        Raises:
            RuntimeError: If a required collaborator was not injected.
        """
        if self.catalog is None or self.config_source is None or self.completion_log is None:
            raise RuntimeError(
                "refresh() needs a catalog, config_source and completion_log"
            )

        template = self.catalog.template_for(program_id)
        if template is None:
            logger.info("No template for program %s", program_id)
            return None

        feedback = (
            self.feedback_source.latest_feedback() if self.feedback_source else None
        )
        return self.build(
            template,
            self.config_source.schedule_config(),
            self.completion_log.completions_for(program_id),
            today=today,
            feedback=feedback,
        )
