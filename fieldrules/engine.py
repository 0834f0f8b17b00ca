"""
Validator - Main orchestrator for field validation.

This is the primary entry point for validating request values.
It checks its configuration, resolves exempt fields, executes rules and
aggregates failure messages into an error bag.
"""

from dataclasses import dataclass, field as dataclass_field
from typing import Any, Dict, Optional, Union

from fieldrules.core.base import FieldValue, MapData
from fieldrules.core.config_loader import RuleSetConfigLoader
from fieldrules.core.exceptions import ConfigurationError, ValidateArgsMismatchError
from fieldrules.core.messages import get_custom_message
from fieldrules.core.parser import parse_rule
from fieldrules.core.registry import RULE_REGISTRY, RuleRegistry
from fieldrules.core.request import request_from_data, request_from_json
from fieldrules.core.required import get_non_required_fields
from shared.utils.config import settings
from shared.utils.logger import log_error, setup_logger

# Import rules to trigger registration
from fieldrules import rules  # noqa: F401

logger = setup_logger(__name__)

FIELD_PLACEHOLDER = "{field}"


@dataclass
class Options:
    """Configuration of a validator"""
    request: Optional[Dict[str, Any]] = None  # Field -> value
    rules: MapData = dataclass_field(default_factory=dict)  # Field -> rule specifications
    messages: MapData = dataclass_field(default_factory=dict)  # Field -> "rule:message" overrides
    required_default: bool = dataclass_field(default_factory=lambda: settings.REQUIRED_DEFAULT)
    tag_identifier: str = dataclass_field(default_factory=lambda: settings.TAG_IDENTIFIER)
    data: Any = None  # Typed request data, used when request is None
    registry: Optional[RuleRegistry] = None  # Defaults to the global registry


class Validator:
    """
    Field validator.

    Orchestrates validation by:
    1. Checking rules, request and rule names up front
    2. Resolving fields exempt for this pass
    3. Executing every rule of every remaining field
    4. Collecting failure messages per field

    Rules, messages and options are fixed at construction; only the
    required default can change afterwards.

    Usage:
        v = Validator(Options(
            request={"zip": "8233"},
            rules={"zip": ["digits:4"]},
        ))
        errors = v.validate()

        if not errors:
            print("All validations passed!")
    """

    def __init__(self, options: Optional[Options] = None):
        options = options or Options()
        self.opts = options
        self.registry = options.registry or RULE_REGISTRY

        self._rules: Dict[str, tuple] = {
            field: tuple(field_rules) for field, field_rules in (options.rules or {}).items()
        }
        self._messages: Dict[str, tuple] = {
            field: tuple(overrides) for field, overrides in (options.messages or {}).items()
        }
        self._required_default = options.required_default

        request = options.request
        if request is None and options.data is not None:
            request = request_from_data(options.data, options.tag_identifier)
        self._request = dict(request) if request is not None else None

    @classmethod
    def from_json(
        cls,
        body: Union[str, bytes, bytearray],
        rules: MapData,
        messages: Optional[MapData] = None,
        **kwargs: Any
    ) -> "Validator":
        """
        Build a validator for a JSON object body.

        Raises:
            RequestDecodeError: If the body is not a JSON object
        """
        return cls(Options(
            request=request_from_json(body),
            rules=rules,
            messages=messages or {},
            **kwargs
        ))

    @classmethod
    def from_rule_set(
        cls,
        name: str,
        request: Dict[str, Any],
        loader: Optional[RuleSetConfigLoader] = None,
        registry: Optional[RuleRegistry] = None
    ) -> "Validator":
        """
        Build a validator from a rule set in the YAML configuration.

        Args:
            name: Rule set identifier
            request: Field -> value
            loader: Config loader, defaults to the configured rules file
            registry: Rule registry, defaults to the global registry
        """
        loader = loader or RuleSetConfigLoader()
        rule_set = loader.get_rule_set(name)
        return cls(Options(
            request=request,
            rules=rule_set.rules,
            messages=rule_set.messages,
            required_default=rule_set.required_default,
            registry=registry,
        ))

    @property
    def required_default(self) -> bool:
        return self._required_default

    def set_default_required(self, required: bool) -> None:
        """
        Change the required behavior of fields.

        When True every field in the rules is validated even if it is
        absent from the request. Not safe to call while another thread
        is validating with this instance.
        """
        self._required_default = required
        self.opts.required_default = required

    def validate(self) -> MapData:
        """
        Validate the request values against the rules.

        Returns:
            Error bag: field -> failure messages in rule order. Fields
            without failures are left out; an empty bag means success.

        Raises:
            ValidateArgsMismatchError: If rules are empty or no request was given
            UnknownRuleError: If a rule specification names an unregistered rule
        """
        self._check_preconditions()

        errors_bag: MapData = {}
        exempt = get_non_required_fields(self._rules, self._request, self._required_default)
        logger.debug(
            f"Validating {len(self._rules)} fields ({len(exempt)} exempt)"
        )

        for field, field_rules in self._rules.items():
            if field in exempt:
                continue

            if field in self._request:
                value = FieldValue.of(self._request[field])
            else:
                value = FieldValue.missing()

            for rule in field_rules:
                spec = parse_rule(rule)
                check = self.registry.require(spec.name)
                result = check(value, list(spec.params))
                if result.passed:
                    continue

                message = get_custom_message(self._messages, field, rule)
                if message is None:
                    message = result.message.replace(FIELD_PLACEHOLDER, field)

                logger.debug(f"Field '{field}' failed rule '{rule}'")
                errors_bag.setdefault(field, []).append(message)

        return errors_bag

    def _check_preconditions(self) -> None:
        """Fail before any field is processed on a configuration error"""
        if not self._rules or self._request is None:
            error = ValidateArgsMismatchError()
            log_error(logger, error, "Validation aborted")
            raise error

        for field, field_rules in self._rules.items():
            for rule in field_rules:
                if not isinstance(rule, str):
                    error = ConfigurationError(
                        f"fieldrules: rule for field '{field}' must be a string, got {type(rule).__name__}"
                    )
                    log_error(logger, error, "Validation aborted")
                    raise error
                try:
                    self.registry.require(parse_rule(rule).name)
                except ConfigurationError as e:
                    log_error(logger, e, "Validation aborted")
                    raise


def new(options: Optional[Options] = None) -> Validator:
    """Return a new validator using the provided options"""
    return Validator(options)
