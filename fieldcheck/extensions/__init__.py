"""Model and view extensions built on top of the validation engine."""

from fieldcheck.extensions.model import ValidatedModel, pick_all
from fieldcheck.extensions.view import FieldBinder

__all__ = ["ValidatedModel", "FieldBinder", "pick_all"]
