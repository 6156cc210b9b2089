"""Validation Engine — resolves rule-specs against attribute values.

This is the main entry point for attribute validation. Every attribute in the
record is run through the rule-specs configured for it and the failures are
collected into an error mapping.

Usage:
    engine = ValidationEngine()
    errors = engine.validate({"name": ""}, {"name": {"required": True}})
    # {"name": ["Is required"]}
"""

import time
from collections.abc import Mapping
from typing import Any, Optional

import structlog

from fieldcheck.config import get_settings
from fieldcheck.validators.models import CheckFunction, interpret_result, resolve_message
from fieldcheck.validators.registry import RuleRegistry, create_default_registry

logger = structlog.get_logger()


def _unique(items: list) -> list:
    """Drop repeated items, keeping first occurrences. Works for unhashable items."""
    unique = []
    for item in items:
        if item not in unique:
            unique.append(item)
    return unique


def _flatten_specs(validations: Any) -> list[Mapping]:
    """Normalize None, a single rule-spec or (nested) sequences of rule-specs."""
    if validations is None:
        return []
    if isinstance(validations, Mapping):
        return [validations]

    specs = []
    for item in validations:
        specs.extend(_flatten_specs(item))
    return specs


class ValidationEngine:
    """Evaluates validation configs against attribute records.

    Design principles:
        - Pure: same input → same output, inputs are never mutated
        - Failures are data: an invalid value yields an error mapping, never an exception
        - Structural mistakes (unknown validator names) raise immediately
    """

    def __init__(
        self,
        registry: Optional[RuleRegistry] = None,
        fallback_message: Optional[str] = None,
        message_key: Optional[str] = None,
    ):
        """Initialize with a registry of validators.

        Args:
            registry: Registry to resolve validator names. If None, a fresh
                registry with the built-in validators is created.
            fallback_message: Message used when neither the rule-spec nor the
                validator provides one. Defaults to settings.
            message_key: Reserved rule-spec key holding a custom message.
                Defaults to settings.
        """
        settings = get_settings()
        self.registry = registry if registry is not None else create_default_registry()
        self.fallback_message = fallback_message or settings.FALLBACK_MESSAGE
        self.message_key = message_key or settings.MESSAGE_KEY

    def register(
        self,
        name: str,
        check: CheckFunction,
        default_message: Optional[str] = None,
        force_override: bool = False,
    ) -> None:
        """Register a custom validator in this engine's registry."""
        self.registry.register(name, check, default_message, force_override)

    def validate(
        self,
        attrs: Mapping[str, Any],
        validations: Optional[Mapping[str, Any]],
        context: Any = None,
    ) -> Optional[dict[str, list]]:
        """Validate every attribute in ``attrs`` against its configured rule-specs.

        Attributes missing from ``validations`` are valid. Names that appear
        only in ``validations`` are not checked.

        Args:
            attrs: Attribute name → current value
            validations: Attribute name → rule-spec or list of rule-specs
            context: Passed through untouched to every check function

        Returns:
            None if everything is valid, else attribute name → list of errors

        Raises:
            UnknownValidatorError: a rule-spec names an unregistered validator
        """
        start_time = time.perf_counter()
        validations = validations or {}

        errors: dict[str, list] = {}
        for attr_name, attr_value in attrs.items():
            error = self.evaluate_entries(validations.get(attr_name), attr_value, context)
            if error:
                errors[attr_name] = error

        logger.debug(
            "validation_complete",
            attributes=len(attrs),
            invalid=list(errors.keys()),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 3),
        )

        return errors or None

    def evaluate_entries(self, validations: Any, value: Any, context: Any = None) -> Optional[list]:
        """Run one value through a rule-spec or a list of rule-specs.

        Returns:
            None if valid, else the de-duplicated errors in first-seen order
        """
        errors = []
        for validation in _flatten_specs(validations):
            error = self.evaluate_entry(validation, value, context)
            if error:
                errors.extend(error)

        return _unique(errors) if errors else None

    def evaluate_entry(self, validation: Mapping[str, Any], value: Any, context: Any = None) -> Optional[list]:
        """Run one value through every check of a single rule-spec.

        The reserved message key is not a check: its value overrides the
        default message of every check in this rule-spec.
        """
        message = validation.get(self.message_key)

        errors = []
        for validator_name, expectation in validation.items():
            if validator_name == self.message_key:
                continue
            error = self.evaluate(validator_name, value, expectation, message, context)
            if error:
                errors.append(error)

        return _unique(errors) if errors else None

    def evaluate(
        self,
        validator_name: str,
        value: Any,
        expectation: Any,
        custom_message: Optional[str] = None,
        context: Any = None,
    ) -> Any:
        """Apply one named validator to one value.

        Anything but an exact ``True`` from the check is a failure: a falsy
        answer resolves to a message (custom, then validator default, then the
        fallback), any other answer is returned as the error itself.

        Raises:
            UnknownValidatorError: ``validator_name`` is not registered
        """
        validator = self.registry.lookup(validator_name)
        message = resolve_message(custom_message, validator.default_message, self.fallback_message)
        outcome = interpret_result(validator.check(value, expectation, context), message)
        return outcome.to_error()


# Module-level default engine
validation_engine = ValidationEngine()
