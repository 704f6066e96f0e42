"""Pytest configuration for all tests."""

import pytest

from password_helper.core.config import get_settings
from password_helper.domain.entities.policy import Policy
from password_helper.domain.services.password_generator import PasswordGenerator
from password_helper.domain.services.password_validator import PasswordValidator
from password_helper.domain.services.strength_checker import StrengthChecker


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Reload settings for every test so environment patches take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def default_policy() -> Policy:
    """Count-based policy with all defaults."""
    return Policy()


@pytest.fixture
def character_types_policy() -> Policy:
    """Character-types policy with strict complexity rules."""
    return Policy.from_character_types(minimum_length=10, maximum_length=20)


@pytest.fixture
def validator(default_policy: Policy) -> PasswordValidator:
    return PasswordValidator(default_policy)


@pytest.fixture
def generator(default_policy: Policy) -> PasswordGenerator:
    return PasswordGenerator(default_policy)


@pytest.fixture
def checker() -> StrengthChecker:
    return StrengthChecker()
