"""
Custom exceptions for the rule engine.
"""


class FieldRulesException(Exception):
    """Base exception for the rule engine."""
    pass


class ConfigurationError(FieldRulesException):
    """Exception raised for programmer mistakes in rules, messages or options."""
    pass


class ValidateArgsMismatchError(ConfigurationError):
    """Exception raised when validate() is called without rules or request values."""

    def __init__(self, message: str = "fieldrules: provide at least rules and a request to validate"):
        super().__init__(message)


class UnknownRuleError(ConfigurationError):
    """Exception raised when a rule specification names an unregistered rule."""

    def __init__(self, rule: str):
        self.rule = rule
        super().__init__(f"fieldrules: {rule} is not a valid rule")


class RequestDecodeError(FieldRulesException):
    """Exception raised when a request body cannot be decoded into field values."""
    pass
