"""Field binder — per-field valid/invalid callbacks driven by model notifications."""

from typing import Any, Callable, Optional

import structlog

from fieldcheck.extensions.model import ValidatedModel

logger = structlog.get_logger()

ValidFieldCallback = Callable[[str, Any, ValidatedModel], None]
InvalidFieldCallback = Callable[[str, Any, list, ValidatedModel], None]


class FieldBinder:
    """Listens to a model's ``validated`` notification and reports each field.

    Callbacks are taken from the constructor first, then from overriding
    methods in a subclass. The default callbacks keep ``invalid_fields`` up to
    date with the joined error messages of every invalid field.
    """

    def __init__(
        self,
        model: Optional[ValidatedModel] = None,
        on_valid_field: Optional[ValidFieldCallback] = None,
        on_invalid_field: Optional[InvalidFieldCallback] = None,
    ):
        self.model = model
        self.invalid_fields: dict[str, str] = {}
        self._on_valid_field = on_valid_field or self.on_valid_field
        self._on_invalid_field = on_invalid_field or self.on_invalid_field
        self._bound: list[ValidatedModel] = []

    def bind(self, model: Optional[ValidatedModel] = None) -> None:
        """Subscribe to ``model`` (or the binder's own model).

        Raises:
            ValueError: no model was passed and none was set on the binder
        """
        model = model or self.model
        if model is None:
            raise ValueError("Model is not provided")

        model.events.subscribe("validated", self._handle_validated)
        self._bound.append(model)
        logger.debug("field_binder_bound", model=type(model).__name__)

    def unbind(self) -> None:
        """Stop listening to every bound model."""
        for model in self._bound:
            model.events.unsubscribe("validated", self._handle_validated)
        self._bound = []

    def _handle_validated(self, model: ValidatedModel, attributes: dict, errors: Optional[dict]) -> None:
        errors = errors or {}

        for name, value in attributes.items():
            attr_errors = errors.get(name)
            if attr_errors:
                self._on_invalid_field(name, value, attr_errors, model)
            else:
                self._on_valid_field(name, value, model)

    def on_valid_field(self, name: str, value: Any, model: ValidatedModel) -> None:
        self.invalid_fields.pop(name, None)

    def on_invalid_field(self, name: str, value: Any, errors: list, model: ValidatedModel) -> None:
        self.invalid_fields[name] = ", ".join(str(error) for error in errors)
