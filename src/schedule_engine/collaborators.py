"""Collaborator interfaces injected into ScheduleEngine, plus in-memory implementations.

The engine owns no storage. Completion logs, user settings, the program
catalog and session feedback all belong to the surrounding application
and are handed in through these interfaces.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

from schedule_engine.models.completion import CompletionRecord, records_for_program
from schedule_engine.models.feedback import SessionFeedback
from schedule_engine.models.template import ProgramTemplate
from schedule_engine.models.user_config import UserScheduleConfig


class CompletionLog(ABC):
    """Read-only view of logged workouts."""

    @abstractmethod
    def completions_for(self, program_id: str) -> Sequence[CompletionRecord]:
        """Records for *program_id*, sorted by date ascending."""
        ...


class ScheduleConfigSource(ABC):
    @abstractmethod
    def schedule_config(self) -> UserScheduleConfig:
        ...


class TemplateCatalog(ABC):
    @abstractmethod
    def template_for(self, program_id: str) -> ProgramTemplate | None:
        """Return the program's template, or None for an unknown program."""
        ...


class FeedbackSource(ABC):
    @abstractmethod
    def latest_feedback(self) -> SessionFeedback | None:
        ...


class InMemoryCompletionLog(CompletionLog):
    """Append-only in-memory completion log."""

    def __init__(self, records: Iterable[CompletionRecord] = ()) -> None:
        self._records: list[CompletionRecord] = list(records)

    def append(self, record: CompletionRecord) -> None:
        self._records.append(record)

    def completions_for(self, program_id: str) -> Sequence[CompletionRecord]:
        return records_for_program(self._records, program_id)

    def __len__(self) -> int:
        return len(self._records)


class StaticScheduleConfig(ScheduleConfigSource):
    def __init__(self, config: UserScheduleConfig) -> None:
        self._config = config

    def schedule_config(self) -> UserScheduleConfig:
        return self._config


class InMemoryTemplateCatalog(TemplateCatalog):
    def __init__(self, templates: Iterable[ProgramTemplate] = ()) -> None:
        self._templates = {t.program_id: t for t in templates}

    def add(self, template: ProgramTemplate) -> None:
        self._templates[template.program_id] = template

    def template_for(self, program_id: str) -> ProgramTemplate | None:
        return self._templates.get(program_id)


class StaticFeedbackSource(FeedbackSource):
    def __init__(self, feedback: SessionFeedback | None = None) -> None:
        self._feedback = feedback

    def latest_feedback(self) -> SessionFeedback | None:
        return self._feedback
