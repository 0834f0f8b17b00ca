"""
Rules module.

Contains all built-in rules organized by category:
- presence_rules: required
- string_rules: Character classes, membership, regex, JSON
- numeric_rules: Booleans, numbers, digits and size bounds
- format_rules: Email, URL, network addresses, UUID, dates

All rules are automatically registered via decorators.
"""

# Import all rules to trigger registration
from fieldrules.rules import presence_rules
from fieldrules.rules import string_rules
from fieldrules.rules import numeric_rules
from fieldrules.rules import format_rules

__all__ = ['presence_rules', 'string_rules', 'numeric_rules', 'format_rules']
