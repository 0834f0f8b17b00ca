"""
Rule specification parsing.

A rule specification is ``name`` or ``name:param1,param2``. Parameters are
kept as strings; each check converts them to what it needs.
"""

from fieldrules.core.base import RuleSpec

RULE_PARAM_SEPARATOR = ":"
PARAM_LIST_SEPARATOR = ","


def rule_name(spec: str) -> str:
    """Return the bare rule name of a specification (``between:3,5`` -> ``between``)"""
    return spec.split(RULE_PARAM_SEPARATOR, 1)[0]


def parse_rule(spec: str) -> RuleSpec:
    """
    Parse a rule specification.

    Splits on the first ``:`` only. An empty parameter section
    (``min:``) yields no parameters.

    Args:
        spec: Rule specification string

    Returns:
        RuleSpec with name and params

    Example:
        >>> parse_rule("between:5,16")
        RuleSpec(raw='between:5,16', name='between', params=['5', '16'])
    """
    name, _, param_str = spec.partition(RULE_PARAM_SEPARATOR)
    params = param_str.split(PARAM_LIST_SEPARATOR) if param_str else []
    return RuleSpec(raw=spec, name=name, params=params)
