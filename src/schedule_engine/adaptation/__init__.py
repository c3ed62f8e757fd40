"""Adaptation stage: rule base class, registry and engine."""

from schedule_engine.adaptation.base import AdaptationRule
from schedule_engine.adaptation.engine import AdaptationEngine
from schedule_engine.adaptation.registry import AdaptationRuleRegistry

__all__ = ["AdaptationEngine", "AdaptationRule", "AdaptationRuleRegistry"]
