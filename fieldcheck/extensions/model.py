"""Self-validating model — runs its validation config through the engine.

Usage:
    class Signup(ValidatedModel):
        validation = {
            "email": {"required": True, "format": "email"},
            "password": [{"minLength": 8, "message": "Too short"}],
        }

    signup = Signup({"email": "a@b.com", "password": "secret"})
    signup.validate()   # {"password": ["Too short"]}
    signup.events.flush()   # delivers "validated" and "validated:invalid"
"""

from collections.abc import Mapping
from typing import Any, Iterable, Optional, Union

from fieldcheck.services.event_bus import EventBus
from fieldcheck.validators.engine import ValidationEngine, validation_engine


def pick_all(attributes: Mapping[str, Any], keys: Iterable[str]) -> dict[str, Any]:
    """Pick ``keys`` from ``attributes``, using None for missing ones."""
    return {key: attributes.get(key) for key in keys}


class ValidatedModel:
    """Attribute container that validates itself against ``validation``.

    The model passes itself as the execution context, so ``fn`` rules can read
    sibling attributes. Results are kept on ``errors`` and announced on
    ``events`` as ``validated`` and ``validated:valid`` / ``validated:invalid``.
    """

    validation: dict[str, Any] = {}

    def __init__(
        self,
        attributes: Optional[Mapping[str, Any]] = None,
        validation: Optional[dict[str, Any]] = None,
        engine: Optional[ValidationEngine] = None,
        event_bus: Optional[EventBus] = None,
    ):
        self.attributes: dict[str, Any] = dict(attributes or {})
        if validation is not None:
            self.validation = validation
        self.engine = engine or validation_engine
        self.events = event_bus or EventBus()
        self.errors: Optional[dict[str, list]] = None

    def get(self, name: str, default: Any = None) -> Any:
        return self.attributes.get(name, default)

    def set(self, **attrs: Any) -> None:
        self.attributes.update(attrs)

    def validate(
        self,
        attrs: Union[None, str, Iterable[str], Mapping[str, Any]] = None,
        *,
        silent: bool = False,
        suppress: bool = False,
    ) -> Optional[dict[str, list]]:
        """Validate the whole model or some of its attributes.

        Args:
            attrs: None for every attribute plus every configured name, a name
                or list of names to validate from the model, or a mapping of
                values to validate as given
            silent: Skip the ``validated`` notifications
            suppress: Store errors on ``self.errors`` but return None

        Returns:
            None if valid (or suppressed), else attribute name → errors
        """
        validation = self.validation or {}

        if isinstance(attrs, str):
            attrs = pick_all(self.attributes, [attrs])
        elif attrs is None:
            attrs = pick_all(self.attributes, {**self.attributes, **validation}.keys())
        elif not isinstance(attrs, Mapping):
            attrs = pick_all(self.attributes, attrs)

        errors = self.errors = self.engine.validate(attrs, validation, self)

        if not silent:
            self.trigger_validated(attrs, errors)

        return None if suppress else errors

    def trigger_validated(self, attrs: Mapping[str, Any], errors: Optional[dict[str, list]]) -> None:
        self.events.publish("validated", self, attrs, errors)
        self.events.publish("validated:" + ("invalid" if errors else "valid"), self, attrs, self.errors)

    def is_valid(self, attrs: Union[None, str, Iterable[str]] = None, **options: Any) -> bool:
        """Check validity of the given attribute names, or of the whole model.

        Names not present on the model are skipped.
        """
        names = [attrs] if isinstance(attrs, str) else list(attrs or [])
        picked = {name: self.attributes[name] for name in names if name in self.attributes} if names else None
        return not self.validate(picked, **options)
