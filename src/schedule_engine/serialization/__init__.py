"""Serialization module: catalog/profile loaders and schedule export."""

from schedule_engine.serialization.profile_json import (
    completions_from_json,
    config_from_json,
    feedback_from_json,
)
from schedule_engine.serialization.program_json import template_from_program_json
from schedule_engine.serialization.schedule_json import (
    schedule_to_dict,
    schedule_to_json_string,
)

__all__ = [
    "completions_from_json",
    "config_from_json",
    "feedback_from_json",
    "schedule_to_dict",
    "schedule_to_json_string",
    "template_from_program_json",
]
