"""Adaptation rules, auto-discovered by AdaptationRuleRegistry."""
