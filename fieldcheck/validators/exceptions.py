"""Structural errors raised by the registry and the engine.

A failed validation is never an exception: it is returned as data. These
errors signal programmer mistakes (bad registration, unknown rule names) and
abort the call that hit them.
"""


class FieldcheckError(Exception):
    """Base class for all fieldcheck errors."""


class DuplicateValidatorError(FieldcheckError):
    """A validator name is already registered and override was not forced."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Validator "{name}" already exists')


class UnknownValidatorError(FieldcheckError):
    """A rule-spec references a validator name missing from the registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid validator name: {name}")
