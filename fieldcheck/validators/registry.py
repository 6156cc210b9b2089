"""Rule registry — validator name to check function and default message."""

from typing import Iterator, Optional

import structlog

from fieldcheck.validators.builtin import register_builtin_validators
from fieldcheck.validators.exceptions import DuplicateValidatorError, UnknownValidatorError
from fieldcheck.validators.models import CheckFunction, ValidatorDefinition

logger = structlog.get_logger()


class RuleRegistry:
    """Holds every validator a ``ValidationEngine`` can reference by name.

    Entries are never removed, only replaced with ``force_override=True``.
    Registration is not synchronized; register rules during startup, before
    the registry is shared between threads.
    """

    def __init__(self):
        self._validators: dict[str, ValidatorDefinition] = {}

    def register(
        self,
        name: str,
        check: CheckFunction,
        default_message: Optional[str] = None,
        force_override: bool = False,
    ) -> None:
        """Add a validator.

        Args:
            name: Name used as a key inside rule-specs
            check: ``check(value, expectation, context)``
            default_message: Message used when the check fails without a payload
            force_override: Replace an existing validator instead of raising

        Raises:
            DuplicateValidatorError: ``name`` exists and ``force_override`` is false
        """
        exists = name in self._validators
        if exists and not force_override:
            raise DuplicateValidatorError(name)

        self._validators[name] = ValidatorDefinition(
            name=name,
            check=check,
            default_message=default_message,
        )
        logger.debug("validator_registered", name=name, overridden=exists)

    def lookup(self, name: str) -> ValidatorDefinition:
        """Get a validator definition by name.

        Raises:
            UnknownValidatorError: no validator is registered under ``name``
        """
        try:
            return self._validators[name]
        except KeyError:
            raise UnknownValidatorError(name) from None

    def names(self) -> list[str]:
        """List registered validator names in registration order."""
        return list(self._validators.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._validators

    def __len__(self) -> int:
        return len(self._validators)

    def __iter__(self) -> Iterator[str]:
        return iter(self._validators)


def create_default_registry() -> RuleRegistry:
    """Create a registry preloaded with the built-in validators."""
    registry = RuleRegistry()
    register_builtin_validators(registry)
    return registry
