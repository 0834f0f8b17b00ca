"""
Base types for the rule engine.

This module provides the values that flow between the engine and checks:
- ValueKind / FieldValue: Tagged request value handed to every check
- CheckResult: Outcome of a single check
- RuleSpec: Parsed rule specification
"""

from dataclasses import dataclass, field as dataclass_field
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Dict, List, Optional


# Field name -> list of strings. Used for rules, messages and the error bag.
MapData = Dict[str, List[str]]


class ValueKind(str, Enum):
    """Kinds of request values a check can receive"""
    ABSENT = "absent"
    NULL = "null"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    LIST = "list"
    OBJECT = "object"
    OTHER = "other"


@dataclass(frozen=True)
class FieldValue:
    """
    A request value tagged with its kind.

    Checks match on ``kind`` instead of inspecting ``raw`` with isinstance.
    ``raw`` is None for ABSENT and NULL values.
    """
    kind: ValueKind
    raw: Any = None

    @classmethod
    def missing(cls) -> "FieldValue":
        """Sentinel for a field that is not present in the request"""
        return cls(ValueKind.ABSENT)

    @classmethod
    def of(cls, raw: Any) -> "FieldValue":
        """Classify a raw (typically JSON-decoded) value"""
        if raw is None:
            return cls(ValueKind.NULL)
        # bool is a subclass of int, check it first
        if isinstance(raw, bool):
            return cls(ValueKind.BOOLEAN, raw)
        if isinstance(raw, (int, float, Decimal)):
            return cls(ValueKind.NUMBER, raw)
        if isinstance(raw, str):
            return cls(ValueKind.STRING, raw)
        if isinstance(raw, (list, tuple)):
            return cls(ValueKind.LIST, list(raw))
        if isinstance(raw, dict):
            return cls(ValueKind.OBJECT, raw)
        return cls(ValueKind.OTHER, raw)

    @property
    def is_missing(self) -> bool:
        """True for absent and null values"""
        return self.kind in (ValueKind.ABSENT, ValueKind.NULL)

    def as_text(self) -> Optional[str]:
        """
        String form used by text-oriented checks.

        Returns None when the value has no sensible text form
        (absent, null, lists and objects).
        """
        if self.kind == ValueKind.STRING:
            return self.raw
        if self.kind == ValueKind.NUMBER:
            if isinstance(self.raw, float) and self.raw.is_integer():
                # JSON decoding turns 8233 into 8233.0 in some decoders
                return str(int(self.raw))
            return str(self.raw)
        if self.kind == ValueKind.BOOLEAN:
            return "true" if self.raw else "false"
        return None


@dataclass(frozen=True)
class CheckResult:
    """
    Outcome of a check.

    ``message`` is the default failure message; ``{field}`` in it is
    replaced with the field name when the error is recorded.
    """
    passed: bool
    message: str = ""

    @classmethod
    def ok(cls) -> "CheckResult":
        return cls(True)

    @classmethod
    def fail(cls, message: str) -> "CheckResult":
        return cls(False, message)


# Signature every registered rule implements
CheckFunction = Callable[[FieldValue, List[str]], CheckResult]


@dataclass(frozen=True)
class RuleSpec:
    """A parsed rule specification such as ``between:5,16``"""
    raw: str
    name: str
    params: List[str] = dataclass_field(default_factory=list)

    @property
    def has_params(self) -> bool:
        return bool(self.params)
