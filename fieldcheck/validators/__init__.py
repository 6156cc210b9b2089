"""Validation core — rule registry, built-in validators and the evaluation engine.

Usage:
    from fieldcheck.validators import validation_engine

    errors = validation_engine.validate(attrs, {"email": {"format": "email"}})
    if errors:
        # errors == {"email": ["Does not match format"]}
"""

from fieldcheck.validators.engine import ValidationEngine, validation_engine
from fieldcheck.validators.exceptions import DuplicateValidatorError, FieldcheckError, UnknownValidatorError
from fieldcheck.validators.models import (
    Invalid,
    InvalidWithPayload,
    RuleOutcome,
    Valid,
    ValidatorDefinition,
    interpret_result,
    resolve_message,
)
from fieldcheck.validators.registry import RuleRegistry, create_default_registry

__all__ = [
    "ValidationEngine",
    "validation_engine",
    "RuleRegistry",
    "create_default_registry",
    "ValidatorDefinition",
    "RuleOutcome",
    "Valid",
    "Invalid",
    "InvalidWithPayload",
    "interpret_result",
    "resolve_message",
    "FieldcheckError",
    "DuplicateValidatorError",
    "UnknownValidatorError",
]
