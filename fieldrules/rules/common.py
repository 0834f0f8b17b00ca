"""
Helpers shared by the built-in rules.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Union

from fieldrules.core.base import CheckResult, FieldValue, ValueKind

Number = Union[int, float, Decimal]

INTEGER_PATTERN = re.compile(r'-?[0-9]+')
DIGITS_PATTERN = re.compile(r'[0-9]+')
FLOAT_PATTERN = re.compile(r'[+-]?([0-9]*[.])?[0-9]+')


def invalid_params(rule: str) -> CheckResult:
    """Failed result for a rule whose parameters are missing or malformed"""
    return CheckResult.fail(f"The {{field}} field has an invalid '{rule}' rule parameter")


def to_int(param: str) -> Optional[int]:
    try:
        return int(param.strip())
    except ValueError:
        return None


def to_number(text: str) -> Optional[Decimal]:
    """Parse a decimal string, returning None when it is not a finite number"""
    try:
        number = Decimal(text.strip())
    except (InvalidOperation, ValueError):
        return None
    if not number.is_finite():
        return None
    return number


def int_params(params: List[str], count: int) -> Optional[List[int]]:
    """Exactly ``count`` integer params, or None"""
    if len(params) != count:
        return None
    values = [to_int(p) for p in params]
    if any(v is None for v in values):
        return None
    return values


def numeric_value(value: FieldValue) -> Optional[Decimal]:
    """Numeric value of a number or a numeric string"""
    if value.kind == ValueKind.NUMBER:
        return to_number(str(value.raw))
    if value.kind == ValueKind.STRING and FLOAT_PATTERN.fullmatch(value.raw):
        return to_number(value.raw)
    return None


def size_of(value: FieldValue) -> Optional[Number]:
    """
    Size used by min/max/between.

    Strings measure their length, lists and objects their element count
    and numbers their own value.
    """
    if value.kind == ValueKind.STRING:
        return len(value.raw)
    if value.kind in (ValueKind.LIST, ValueKind.OBJECT):
        return len(value.raw)
    if value.kind == ValueKind.NUMBER:
        return to_number(str(value.raw))
    return None


def length_of(value: FieldValue) -> Optional[int]:
    """Length used by len: characters of the text form or element count"""
    if value.kind in (ValueKind.LIST, ValueKind.OBJECT):
        return len(value.raw)
    text = value.as_text()
    if text is None or value.kind == ValueKind.BOOLEAN:
        return None
    return len(text)
