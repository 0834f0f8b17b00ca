"""
Resolution of fields exempt from validation.
"""

from typing import Any, Mapping, Sequence, Set

REQUIRED_RULE = "required"


def has_required_rule(rules: Sequence[str]) -> bool:
    """True if the rule list contains the bare ``required`` rule"""
    return REQUIRED_RULE in rules


def get_non_required_fields(
    rules: Mapping[str, Sequence[str]],
    request: Mapping[str, Any],
    required_default: bool
) -> Set[str]:
    """
    Compute the fields skipped entirely for one validation pass.

    A field is skipped when fields are optional by default, it is absent
    from the request and it carries no ``required`` rule. A field that is
    present with a null value is not skipped.

    Args:
        rules: Field -> rule specifications
        request: Field -> value
        required_default: Whether every declared field is required

    Returns:
        Set of exempt field names
    """
    if required_default:
        return set()

    return {
        field
        for field, field_rules in rules.items()
        if field not in request and not has_required_rule(field_rules)
    }
