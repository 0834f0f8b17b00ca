"""
String rules.

Contains rules that inspect the text of a value:
- alpha, alpha_num, alpha_dash, alpha_space: Character classes
- in, not_in: Membership in the parameter list
- regex: Full match against a pattern
- json: Text is a JSON document
"""

import json
import re
from typing import List, Optional

from fieldrules.core.base import CheckResult, FieldValue, ValueKind
from fieldrules.core.registry import register_rule
from fieldrules.rules.common import invalid_params

ALPHA_DASH_PATTERN = re.compile(r'[\w-]+')
ALPHA_SPACE_PATTERN = re.compile(r'[\w\- ]+')


def _text(value: FieldValue) -> Optional[str]:
    # Character class rules only apply to strings
    return value.raw if value.kind == ValueKind.STRING else None


@register_rule("alpha")
def check_alpha(value: FieldValue, params: List[str]) -> CheckResult:
    text = _text(value)
    if text is None or not text.isalpha():
        return CheckResult.fail("The {field} may only contain letters")
    return CheckResult.ok()


@register_rule("alpha_num")
def check_alpha_num(value: FieldValue, params: List[str]) -> CheckResult:
    text = _text(value)
    if text is None or not text.isalnum():
        return CheckResult.fail("The {field} may only contain letters and numbers")
    return CheckResult.ok()


@register_rule("alpha_dash")
def check_alpha_dash(value: FieldValue, params: List[str]) -> CheckResult:
    text = _text(value)
    if text is None or not ALPHA_DASH_PATTERN.fullmatch(text):
        return CheckResult.fail("The {field} may only contain letters, numbers, dashes and underscores")
    return CheckResult.ok()


@register_rule("alpha_space")
def check_alpha_space(value: FieldValue, params: List[str]) -> CheckResult:
    text = _text(value)
    if text is None or not ALPHA_SPACE_PATTERN.fullmatch(text):
        return CheckResult.fail("The {field} may only contain letters, numbers, dashes, underscores and spaces")
    return CheckResult.ok()


@register_rule("in")
def check_in(value: FieldValue, params: List[str]) -> CheckResult:
    if not params:
        return invalid_params("in")
    text = value.as_text()
    if text is None or text not in params:
        return CheckResult.fail(f"The {{field}} field must be one of {', '.join(params)}")
    return CheckResult.ok()


@register_rule("not_in")
def check_not_in(value: FieldValue, params: List[str]) -> CheckResult:
    if not params:
        return invalid_params("not_in")
    text = value.as_text()
    if text is None or text in params:
        return CheckResult.fail(f"The {{field}} field must not be any of {', '.join(params)}")
    return CheckResult.ok()


@register_rule("regex")
def check_regex(value: FieldValue, params: List[str]) -> CheckResult:
    """
    Full match against the pattern.

    The parser splits params on commas, so they are joined back to
    restore patterns such as ``^[0-9]{2,4}$``.
    """
    if not params:
        return invalid_params("regex")
    pattern = ",".join(params)
    try:
        compiled = re.compile(pattern)
    except re.error:
        return invalid_params("regex")

    text = value.as_text()
    if text is None or not compiled.fullmatch(text):
        return CheckResult.fail("The {field} field format is invalid")
    return CheckResult.ok()


@register_rule("json")
def check_json(value: FieldValue, params: List[str]) -> CheckResult:
    text = _text(value)
    if text is None:
        return CheckResult.fail("The {field} must be a valid JSON string")
    try:
        json.loads(text)
    except (json.JSONDecodeError, RecursionError):
        # Deeply nested documents exhaust the decoder stack
        return CheckResult.fail("The {field} must be a valid JSON string")
    return CheckResult.ok()
