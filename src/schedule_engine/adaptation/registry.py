"""Rule registry with auto-discovery of AdaptationRule subclasses."""

from __future__ import annotations

import importlib
import logging
import pkgutil

from schedule_engine.adaptation.base import AdaptationRule

logger = logging.getLogger(__name__)


class AdaptationRuleRegistry:
    """Discovers and manages all AdaptationRule implementations.

    Auto-discovers rules by scanning the adaptation.rules package tree for
    concrete subclasses of AdaptationRule. New rules are added by placing
    a .py file in the appropriate subdirectory.
    """

    def __init__(self) -> None:
        self._rules: dict[str, AdaptationRule] = {}

    def discover_rules(self) -> None:
        """Scan the rules package tree and register all AdaptationRule subclasses."""
        import schedule_engine.adaptation.rules as rules_pkg

        self._scan_package(rules_pkg.__name__, list(rules_pkg.__path__))

    def _scan_package(self, package_name: str, package_path: list[str]) -> None:
        """Recursively import all modules under a package and register rules."""
        for _importer, module_name, _is_pkg in pkgutil.walk_packages(
            package_path, prefix=package_name + "."
        ):
            try:
                module = importlib.import_module(module_name)
            except ImportError:
                logger.warning("Skipping adaptation rule module %s", module_name)
                continue

            for attr_name in dir(module):
                attr = getattr(module, attr_name)
                if (
                    isinstance(attr, type)
                    and issubclass(attr, AdaptationRule)
                    and attr is not AdaptationRule
                    and not getattr(attr, "__abstractmethods__", set())
                ):
                    self.register(attr())

    def register(self, rule: AdaptationRule) -> None:
        """Register a rule instance by its rule_id."""
        self._rules[rule.rule_id] = rule

    def get(self, rule_id: str) -> AdaptationRule | None:
        return self._rules.get(rule_id)

    def get_all_rules(self) -> list[AdaptationRule]:
        """Return all registered rules sorted by priority, then rule_id."""
        return sorted(self._rules.values(), key=lambda r: (r.priority, r.rule_id))

    @property
    def rule_ids(self) -> list[str]:
        return list(self._rules.keys())
