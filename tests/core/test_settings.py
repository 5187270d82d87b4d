"""
tests/core/test_settings.py

Test cases for environment-backed settings and the default rule.
"""

import logging

import pytest

from password_rules.core.config import Settings, default_rule
from password_rules.core.enums import ConfigErrorCode
from password_rules.core.exceptions import ConfigurationError
from password_rules.core.validators import validate_password


def test_settings_defaults(isolated_settings):
    rule = default_rule()
    assert isolated_settings.LOG_LEVEL == "INFO"
    assert rule.min_length == 12
    assert rule.max_length == 64
    assert rule.required_character_types == 3
    assert not rule.enforce_mode


def test_settings_read_from_environment(isolated_settings, monkeypatch):
    monkeypatch.setenv("PASSWORD_MIN_LENGTH", "8")
    monkeypatch.setenv("PASSWORD_MAX_LENGTH", "20")
    monkeypatch.setenv("password_enforce_numbers", "true")

    rule = Settings(_env_file=None).rule
    assert rule.min_length == 8
    assert rule.max_length == 20
    assert rule.enforce_numbers
    assert not rule.enforce_uppercase


def test_settings_read_from_dotenv(isolated_settings, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("PASSWORD_REQUIRED_CHARACTER_TYPES=4\nUNRELATED=1\n", encoding="utf-8")

    rule = Settings(_env_file=env_file).rule
    assert rule.required_character_types == 4


def test_invalid_settings_fail_at_load(isolated_settings, monkeypatch):
    monkeypatch.setenv("PASSWORD_MIN_LENGTH", "80")

    with pytest.raises(ConfigurationError) as exc_info:
        Settings(_env_file=None)
    assert exc_info.value.code == ConfigErrorCode.INVALID_MAX_LENGTH


def test_invalid_dotenv_fails_at_load(isolated_settings, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("PASSWORD_REQUIRED_CHARACTER_TYPES=7\n", encoding="utf-8")

    with pytest.raises(ConfigurationError) as exc_info:
        Settings(_env_file=env_file)
    assert exc_info.value.code == ConfigErrorCode.INVALID_CHARACTER_TYPE_COUNT


def test_default_rule_built_once(isolated_settings, caplog):
    caplog.set_level(logging.DEBUG, logger="password_rules.core.config")

    assert default_rule() is default_rule()
    for _ in range(3):
        validate_password("Abcdefghijk1")
    assert "[CONFIG]" not in caplog.text
