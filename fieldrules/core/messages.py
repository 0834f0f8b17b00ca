"""
Custom message resolution.

Overrides are declared per field as ``rule:custom message text``.
"""

from typing import Optional

from fieldrules.core.base import MapData
from fieldrules.core.parser import RULE_PARAM_SEPARATOR, rule_name


def get_custom_message(messages: Optional[MapData], field: str, rule: str) -> Optional[str]:
    """
    Return the custom message for a field and rule, if one is declared.

    Parameters are stripped from ``rule`` before matching, so an override
    for ``between`` applies to ``between:3,5``. The first matching override
    wins.

    Args:
        messages: Field -> override list, may be None
        field: Field name
        rule: Rule specification, with or without params

    Returns:
        Override text, or None to use the default message
    """
    if not messages:
        return None

    name = rule_name(rule)
    for override in messages.get(field, ()):
        override_name, sep, text = override.partition(RULE_PARAM_SEPARATOR)
        if sep and override_name == name:
            return text
    return None
