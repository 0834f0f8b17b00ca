"""
Numeric and size rules.

Contains rules that interpret values as numbers or sizes:
- bool, numeric, float: Type-like checks that accept form strings
- digits, digits_between: Digit counts of integer values
- len, min, max, between: Length / size / value bounds
- numeric_between, lat, lon: Numeric ranges
"""

from decimal import Decimal
from typing import List, Optional

from fieldrules.core.base import CheckResult, FieldValue, ValueKind
from fieldrules.core.registry import register_rule
from fieldrules.rules.common import (
    DIGITS_PATTERN,
    FLOAT_PATTERN,
    INTEGER_PATTERN,
    int_params,
    invalid_params,
    length_of,
    numeric_value,
    size_of,
    to_number,
)

BOOL_STRINGS = {"true", "false", "1", "0"}


@register_rule("bool")
def check_bool(value: FieldValue, params: List[str]) -> CheckResult:
    """Booleans pass; so do the form strings true, false, 1 and 0"""
    if value.kind == ValueKind.BOOLEAN:
        return CheckResult.ok()
    if value.kind == ValueKind.STRING and value.raw.lower() in BOOL_STRINGS:
        return CheckResult.ok()
    return CheckResult.fail("The {field} may only contain boolean value, string or int 0, 1")


@register_rule("numeric")
def check_numeric(value: FieldValue, params: List[str]) -> CheckResult:
    """Integers and integer strings"""
    text = value.as_text() if value.kind in (ValueKind.NUMBER, ValueKind.STRING) else None
    if text is None or not INTEGER_PATTERN.fullmatch(text):
        return CheckResult.fail("The {field} must be numeric")
    return CheckResult.ok()


@register_rule("float")
def check_float(value: FieldValue, params: List[str]) -> CheckResult:
    if value.kind == ValueKind.NUMBER and to_number(str(value.raw)) is not None:
        return CheckResult.ok()
    if value.kind == ValueKind.STRING and FLOAT_PATTERN.fullmatch(value.raw):
        return CheckResult.ok()
    return CheckResult.fail("The {field} must be a float number")


def _digit_text(value: FieldValue) -> Optional[str]:
    text = value.as_text() if value.kind in (ValueKind.NUMBER, ValueKind.STRING) else None
    if text is None or not DIGITS_PATTERN.fullmatch(text):
        return None
    return text


@register_rule("digits")
def check_digits(value: FieldValue, params: List[str]) -> CheckResult:
    bounds = int_params(params, 1)
    if bounds is None:
        return invalid_params("digits")
    (count,) = bounds

    text = _digit_text(value)
    if text is None or len(text) != count:
        return CheckResult.fail(f"The {{field}} field must be {count} digits")
    return CheckResult.ok()


@register_rule("digits_between")
def check_digits_between(value: FieldValue, params: List[str]) -> CheckResult:
    bounds = int_params(params, 2)
    if bounds is None or bounds[0] > bounds[1]:
        return invalid_params("digits_between")
    low, high = bounds

    text = _digit_text(value)
    if text is None or not low <= len(text) <= high:
        return CheckResult.fail(f"The {{field}} field must be digits between {low} and {high}")
    return CheckResult.ok()


@register_rule("len")
def check_len(value: FieldValue, params: List[str]) -> CheckResult:
    bounds = int_params(params, 1)
    if bounds is None:
        return invalid_params("len")
    (expected,) = bounds

    length = length_of(value)
    if length is None or length != expected:
        return CheckResult.fail(f"The {{field}} field must be length of {expected}")
    return CheckResult.ok()


def _bound(param: str) -> Optional[Decimal]:
    return to_number(param) if param.strip() else None


@register_rule("min")
def check_min(value: FieldValue, params: List[str]) -> CheckResult:
    if len(params) != 1 or _bound(params[0]) is None:
        return invalid_params("min")
    minimum = _bound(params[0])

    size = size_of(value)
    if size is None or size < minimum:
        return CheckResult.fail(f"The {{field}} field value can not be less than {params[0]}")
    return CheckResult.ok()


@register_rule("max")
def check_max(value: FieldValue, params: List[str]) -> CheckResult:
    if len(params) != 1 or _bound(params[0]) is None:
        return invalid_params("max")
    maximum = _bound(params[0])

    size = size_of(value)
    if size is None or size > maximum:
        return CheckResult.fail(f"The {{field}} field value can not be greater than {params[0]}")
    return CheckResult.ok()


@register_rule("between")
def check_between(value: FieldValue, params: List[str]) -> CheckResult:
    if len(params) != 2:
        return invalid_params("between")
    low, high = _bound(params[0]), _bound(params[1])
    if low is None or high is None or low > high:
        return invalid_params("between")

    size = size_of(value)
    if size is None or not low <= size <= high:
        return CheckResult.fail(f"The {{field}} field must be between {params[0]} and {params[1]}")
    return CheckResult.ok()


@register_rule("numeric_between")
def check_numeric_between(value: FieldValue, params: List[str]) -> CheckResult:
    """Either bound may be left empty: ``numeric_between:18,`` has no upper bound"""
    if len(params) != 2:
        return invalid_params("numeric_between")
    low, high = _bound(params[0]), _bound(params[1])
    if (params[0].strip() and low is None) or (params[1].strip() and high is None):
        return invalid_params("numeric_between")
    if low is None and high is None:
        return invalid_params("numeric_between")

    number = numeric_value(value)
    if number is None:
        return CheckResult.fail("The {field} field must be numeric")
    if low is not None and number < low:
        return CheckResult.fail(f"The {{field}} field value can not be less than {params[0]}")
    if high is not None and number > high:
        return CheckResult.fail(f"The {{field}} field value can not be greater than {params[1]}")
    return CheckResult.ok()


@register_rule("lat")
def check_lat(value: FieldValue, params: List[str]) -> CheckResult:
    number = numeric_value(value)
    if number is None or not -90 <= number <= 90:
        return CheckResult.fail("The {field} field must be a valid latitude")
    return CheckResult.ok()


@register_rule("lon")
def check_lon(value: FieldValue, params: List[str]) -> CheckResult:
    number = numeric_value(value)
    if number is None or not -180 <= number <= 180:
        return CheckResult.fail("The {field} field must be a valid longitude")
    return CheckResult.ok()
