"""fieldcheck — declarative attribute validation.

Validate a record of named values against a config of named rules:

    from fieldcheck import validate

    validate({"pwd": "abcdef"}, {"pwd": [{"minLength": 8, "message": "short"}]})
    # {"pwd": ["short"]}

Custom rules are added with ``register(name, check, message)``.
"""

from fieldcheck.extensions import FieldBinder, ValidatedModel
from fieldcheck.log import configure_logging
from fieldcheck.services import EventBus
from fieldcheck.validators import (
    DuplicateValidatorError,
    FieldcheckError,
    RuleRegistry,
    UnknownValidatorError,
    ValidationEngine,
    create_default_registry,
    validation_engine,
)

__version__ = "0.1.0"

validate = validation_engine.validate
register = validation_engine.register

__all__ = [
    "validate",
    "register",
    "ValidationEngine",
    "validation_engine",
    "RuleRegistry",
    "create_default_registry",
    "FieldcheckError",
    "DuplicateValidatorError",
    "UnknownValidatorError",
    "ValidatedModel",
    "FieldBinder",
    "EventBus",
    "configure_logging",
]
