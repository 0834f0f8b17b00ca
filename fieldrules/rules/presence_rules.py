"""
Presence rules.

- required: Field is present and not empty
"""

from typing import List

from fieldrules.core.base import CheckResult, FieldValue, ValueKind
from fieldrules.core.registry import register_rule


@register_rule("required")
def check_required(value: FieldValue, params: List[str]) -> CheckResult:
    """
    Fail for absent and null values, empty strings and empty lists/objects.

    Zero and False are present values.
    """
    if value.is_missing:
        return CheckResult.fail("The {field} field is required")
    if value.kind in (ValueKind.STRING, ValueKind.LIST, ValueKind.OBJECT) and len(value.raw) == 0:
        return CheckResult.fail("The {field} field is required")
    return CheckResult.ok()
