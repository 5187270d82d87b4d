"""
tests/conftest.py

Shared fixtures for rule checker tests.
"""

import pytest

from password_rules.core import config as config_module
from password_rules.core.config import Settings
from password_rules.core.schemas import PasswordRuleConfig


@pytest.fixture
def default_config() -> PasswordRuleConfig:
    """Fixture for the out-of-the-box rule."""
    return PasswordRuleConfig()


@pytest.fixture
def enforce_config() -> PasswordRuleConfig:
    """Fixture for an 8-20 character rule enforcing uppercase and numbers."""
    return PasswordRuleConfig(
        min_length=8,
        max_length=20,
        enforce_uppercase=True,
        enforce_numbers=True,
    )


@pytest.fixture
def strict_config() -> PasswordRuleConfig:
    """Fixture for a rule enforcing all four character types."""
    return PasswordRuleConfig(
        min_length=8,
        max_length=20,
        enforce_uppercase=True,
        enforce_lowercase=True,
        enforce_numbers=True,
        enforce_special_chars=True,
    )


@pytest.fixture
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Replaces the global settings with defaults that ignore env and .env."""
    for name in Settings.model_fields:
        monkeypatch.delenv(name, raising=False)
    fresh = Settings(_env_file=None)
    monkeypatch.setattr(config_module, "settings", fresh)
    return fresh
