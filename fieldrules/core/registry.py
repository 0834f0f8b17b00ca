"""
Rule registry system.

Provides decorator-based registration for check functions and retrieval
functions. This keeps the rule set open for extension without modifying
core code.
"""

from typing import Dict, List, Optional

from fieldrules.core.base import CheckFunction
from fieldrules.core.exceptions import ConfigurationError, UnknownRuleError
from fieldrules.core.parser import RULE_PARAM_SEPARATOR
from shared.utils.logger import setup_logger

logger = setup_logger(__name__)


class RuleRegistry:
    """
    Mapping from rule name to check function.

    Registration happens during setup; the engine only reads from the
    registry while validating.
    """

    def __init__(self, rules: Optional[Dict[str, CheckFunction]] = None):
        self._rules: Dict[str, CheckFunction] = dict(rules or {})

    def register(self, name: str, check: CheckFunction) -> CheckFunction:
        """
        Register a check function under a rule name.

        Args:
            name: Rule name used in rule specifications
            check: Callable taking (FieldValue, params) and returning a CheckResult

        Returns:
            The check function, so this can back a decorator

        Raises:
            ConfigurationError: If the name is empty or contains ':'
        """
        if not name or RULE_PARAM_SEPARATOR in name:
            raise ConfigurationError(f"fieldrules: invalid rule name '{name}'")
        if not callable(check):
            raise ConfigurationError(f"fieldrules: check for rule '{name}' is not callable")

        if name in self._rules:
            logger.warning(
                f"Rule '{name}' is already registered. "
                f"Overwriting with {getattr(check, '__name__', repr(check))}"
            )

        self._rules[name] = check
        logger.debug(f"Registered rule: {name} -> {getattr(check, '__name__', repr(check))}")
        return check

    def get(self, name: str) -> Optional[CheckFunction]:
        """
        Get check function by rule name.

        Returns:
            Check function or None if not found
        """
        return self._rules.get(name)

    def require(self, name: str) -> CheckFunction:
        """
        Get check function by rule name, failing if it is unknown.

        Raises:
            UnknownRuleError: If no rule is registered under the name
        """
        check = self._rules.get(name)
        if check is None:
            raise UnknownRuleError(name)
        return check

    def is_registered(self, name: str) -> bool:
        return name in self._rules

    def list_rules(self) -> List[str]:
        """List all registered rule names, sorted"""
        return sorted(self._rules)

    def copy(self) -> "RuleRegistry":
        """Independent registry with the same rules, for local extension"""
        return RuleRegistry(self._rules)

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __len__(self) -> int:
        return len(self._rules)


# Global registry holding the built-in rules
RULE_REGISTRY = RuleRegistry()


def register_rule(name: str):
    """
    Decorator to register a check function in the global registry.

    Usage:
        @register_rule("even")
        def check_even(value: FieldValue, params: List[str]) -> CheckResult:
            ...

    Args:
        name: Unique rule name (used in rule specifications)

    Returns:
        Decorator function
    """
    def decorator(check: CheckFunction) -> CheckFunction:
        return RULE_REGISTRY.register(name, check)

    return decorator


def get_rule(name: str) -> Optional[CheckFunction]:
    """Get check function by name from the global registry"""
    return RULE_REGISTRY.get(name)


def is_registered(name: str) -> bool:
    """Check if a rule is registered in the global registry"""
    return RULE_REGISTRY.is_registered(name)
