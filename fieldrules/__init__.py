"""
Declarative field validation.

Main components:
- Validator: Main orchestrator for validation
- RuleRegistry: Rule name -> check function
- Built-in rules: presence, string, numeric and format rules

Usage:
    from fieldrules import Options, Validator

    v = Validator(Options(
        request={"name": "John Doe", "zip": "8233"},
        rules={"name": ["required"], "zip": ["digits:4"]},
        messages={"zip": ["digits:Zip must be 4 digits"]},
    ))
    errors = v.validate()

    for field, messages in errors.items():
        print(f"{field}: {', '.join(messages)}")
"""

from fieldrules.engine import Options, Validator, new
from fieldrules.core.base import CheckResult, FieldValue, MapData, ValueKind
from fieldrules.core.config_loader import RuleSetConfig, RuleSetConfigLoader
from fieldrules.core.exceptions import (
    ConfigurationError,
    FieldRulesException,
    RequestDecodeError,
    UnknownRuleError,
    ValidateArgsMismatchError,
)
from fieldrules.core.registry import RULE_REGISTRY, RuleRegistry, register_rule

__all__ = [
    'Options',
    'Validator',
    'new',
    'CheckResult',
    'FieldValue',
    'MapData',
    'ValueKind',
    'RuleSetConfig',
    'RuleSetConfigLoader',
    'ConfigurationError',
    'FieldRulesException',
    'RequestDecodeError',
    'UnknownRuleError',
    'ValidateArgsMismatchError',
    'RULE_REGISTRY',
    'RuleRegistry',
    'register_rule',
]
