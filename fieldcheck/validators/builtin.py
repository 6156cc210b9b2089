"""Built-in validators shipped in every default registry.

Each check takes ``(value, expectation, context)`` and returns ``True`` when the
value is valid, a falsy value when it is not, or an error payload of its own.
"""

import re
from collections.abc import Sequence
from typing import Any

from fieldcheck.validators.patterns import FORMAT_PATTERNS


def check_required(value: Any, expectation: Any, context: Any = None) -> bool:
    return bool(value)


def check_min_length(value: Any, expectation: int, context: Any = None) -> bool:
    # Only strings and sequences have a length here; numbers, mappings and sets fail
    return bool(value) and isinstance(value, Sequence) and len(value) >= expectation


def check_max_length(value: Any, expectation: int, context: Any = None) -> bool:
    return bool(value) and isinstance(value, Sequence) and len(value) <= expectation


def check_format(value: Any, expectation: Any, context: Any = None) -> bool:
    """Match a string against a named pattern, a raw pattern or a compiled pattern.

    Unknown names are treated as raw patterns themselves.

    Raises:
        TypeError: the expectation is neither a string nor a compiled pattern
    """
    if not isinstance(expectation, (str, re.Pattern)):
        raise TypeError(
            f"format expects a pattern name, a pattern string or a compiled pattern, "
            f"got {type(expectation).__name__}"
        )
    if not isinstance(value, str):
        return False

    pattern = FORMAT_PATTERNS.get(expectation) if isinstance(expectation, str) else None
    if pattern is None:
        pattern = expectation
    return re.search(pattern, value) is not None


def check_fn(value: Any, expectation: Any, context: Any = None) -> Any:
    """Delegate to ``expectation(value, context)`` and hand back its raw answer."""
    return expectation(value, context)


def check_collection(collection: Any, expectation: Any = None, context: Any = None) -> Any:
    """Validate every item of a collection through its own ``validate()``.

    Accepts a plain sequence or an object exposing one as ``.models``.

    Returns:
        True if every item is valid, otherwise a list of ``[index, item_errors]``
    """
    models = getattr(collection, "models", collection)

    errors = []
    for index, model in enumerate(models):
        error = model.validate()
        if error:
            errors.append([index, error])

    return errors or True


BUILTIN_VALIDATORS: list[dict] = [
    {"name": "required", "check": check_required, "message": "Is required"},
    {"name": "collection", "check": check_collection, "message": None},
    {"name": "minLength", "check": check_min_length, "message": "Is too short"},
    {"name": "maxLength", "check": check_max_length, "message": "Is too long"},
    {"name": "format", "check": check_format, "message": "Does not match format"},
    {"name": "fn", "check": check_fn, "message": None},
]


def register_builtin_validators(registry, force_override: bool = False) -> None:
    """Register every built-in validator into ``registry``."""
    for validator in BUILTIN_VALIDATORS:
        registry.register(
            validator["name"],
            validator["check"],
            validator["message"],
            force_override=force_override,
        )
