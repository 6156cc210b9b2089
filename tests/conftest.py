"""Shared pytest fixtures."""

import pytest

from fieldcheck.validators import RuleRegistry, ValidationEngine, create_default_registry


@pytest.fixture
def registry() -> RuleRegistry:
    """Fresh registry with the built-in validators."""
    return create_default_registry()


@pytest.fixture
def engine(registry) -> ValidationEngine:
    """Engine over its own registry, so custom rules never leak between tests."""
    return ValidationEngine(registry)


class StubItem:
    """Collection item whose validate() returns a fixed result."""

    def __init__(self, error=None):
        self.error = error
        self.calls = 0

    def validate(self):
        self.calls += 1
        return self.error


@pytest.fixture
def stub_item():
    return StubItem
