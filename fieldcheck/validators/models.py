"""Validation models — validator definitions and rule outcomes.

A check function may answer in three ways: exactly ``True`` (valid), any falsy
value (invalid, use the configured message), or any other truthy value (invalid,
the value itself is the error payload). ``interpret_result`` turns those raw
answers into one of the tagged ``RuleOutcome`` variants below.
"""

from typing import Any, Callable, Literal, Optional, Union

from pydantic import BaseModel

# check(value, expectation, context) -> True | falsy | error payload
CheckFunction = Callable[[Any, Any, Any], Any]


class ValidatorDefinition(BaseModel):
    """A named check function plus its default error message."""

    name: str
    check: CheckFunction
    default_message: Optional[str] = None

    model_config = {"frozen": True}


class Valid(BaseModel):
    """The check passed."""

    kind: Literal["valid"] = "valid"

    def to_error(self) -> None:
        return None


class Invalid(BaseModel):
    """The check failed without its own payload; ``message`` is the resolved message."""

    kind: Literal["invalid"] = "invalid"
    message: str

    def to_error(self) -> str:
        return self.message


class InvalidWithPayload(BaseModel):
    """The check failed and returned its own error payload (string, list of sub-errors, ...)."""

    kind: Literal["invalid_with_payload"] = "invalid_with_payload"
    payload: Any

    def to_error(self) -> Any:
        return self.payload


RuleOutcome = Union[Valid, Invalid, InvalidWithPayload]


def resolve_message(custom_message: Optional[str], default_message: Optional[str], fallback: str) -> str:
    """Pick the rule-spec message, then the validator default, then the fallback."""
    return custom_message or default_message or fallback


def interpret_result(raw: Any, message: str) -> RuleOutcome:
    """Map a raw check result onto a ``RuleOutcome``.

    Args:
        raw: Whatever the check function returned
        message: Message carried by ``Invalid`` when the check answered falsy
    """
    if raw is True:
        return Valid()
    if not raw:
        return Invalid(message=message)
    return InvalidWithPayload(payload=raw)
