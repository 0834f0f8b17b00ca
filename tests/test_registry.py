"""
Tests for the rule registry.
"""

import logging

import pytest

from fieldrules import RULE_REGISTRY, CheckResult, ConfigurationError, RuleRegistry, UnknownRuleError
from fieldrules.core.registry import get_rule, is_registered


def check_even(value, params):
    if value.as_text() is not None and value.as_text().isdigit() and int(value.as_text()) % 2 == 0:
        return CheckResult.ok()
    return CheckResult.fail("The {field} field must be even")


BUILT_IN_RULES = [
    "required", "alpha", "alpha_num", "alpha_dash", "alpha_space", "bool",
    "between", "date", "digits", "digits_between", "email", "float", "in",
    "ip", "ip_v4", "ip_v6", "json", "lat", "len", "lon", "mac_address",
    "max", "min", "not_in", "numeric", "numeric_between", "regex", "url", "uuid",
]


def test_built_in_rules_are_registered():
    for name in BUILT_IN_RULES:
        assert is_registered(name), name
        assert get_rule(name) is not None


def test_register_and_require(registry):
    registry.register("even", check_even)

    assert registry.is_registered("even")
    assert "even" in registry
    assert registry.require("even") is check_even
    assert "even" in registry.list_rules()


def test_copy_does_not_touch_global_registry(registry):
    registry.register("even", check_even)

    assert not RULE_REGISTRY.is_registered("even")
    assert len(registry) == len(RULE_REGISTRY) + 1


def test_require_unknown_rule_raises():
    with pytest.raises(UnknownRuleError) as exc_info:
        RuleRegistry().require("nope")

    assert exc_info.value.rule == "nope"
    assert isinstance(exc_info.value, ConfigurationError)


def test_get_unknown_rule_returns_none():
    assert RuleRegistry().get("nope") is None


@pytest.mark.parametrize("name", ["", "digits:4"])
def test_invalid_rule_name_is_rejected(name):
    with pytest.raises(ConfigurationError):
        RuleRegistry().register(name, check_even)


def test_non_callable_check_is_rejected():
    with pytest.raises(ConfigurationError):
        RuleRegistry().register("even", "not a function")


def test_overwrite_logs_warning(caplog):
    registry = RuleRegistry()
    registry.register("even", check_even)

    with caplog.at_level(logging.WARNING, logger="fieldrules.core.registry"):
        registry.register("even", lambda value, params: CheckResult.ok())

    assert "already registered" in caplog.text
    assert registry.get("even") is not check_even
