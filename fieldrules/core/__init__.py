"""
Rule engine core module.

Contains base types, parsing, the rule registry and the resolvers the
validator is built from.
"""

from fieldrules.core.base import CheckFunction, CheckResult, FieldValue, MapData, RuleSpec, ValueKind
from fieldrules.core.exceptions import (
    ConfigurationError,
    FieldRulesException,
    RequestDecodeError,
    UnknownRuleError,
    ValidateArgsMismatchError,
)
from fieldrules.core.messages import get_custom_message
from fieldrules.core.parser import parse_rule, rule_name
from fieldrules.core.registry import RULE_REGISTRY, RuleRegistry, get_rule, is_registered, register_rule
from fieldrules.core.required import get_non_required_fields

__all__ = [
    'CheckFunction',
    'CheckResult',
    'FieldValue',
    'MapData',
    'RuleSpec',
    'ValueKind',
    'ConfigurationError',
    'FieldRulesException',
    'RequestDecodeError',
    'UnknownRuleError',
    'ValidateArgsMismatchError',
    'get_custom_message',
    'parse_rule',
    'rule_name',
    'RULE_REGISTRY',
    'RuleRegistry',
    'get_rule',
    'is_registered',
    'register_rule',
    'get_non_required_fields',
]
