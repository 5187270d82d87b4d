"""
password_rules/core/config.py

Rule Configuration Loader

Loads the default password rule and logging level from environment variables
using Pydantic's BaseSettings with `.env` support. The rule is built once when
the settings load, so a `.env` that breaks a rule invariant fails at load time
rather than on the first validation.
"""

import logging
from pathlib import Path
from typing import Any

from pydantic import PrivateAttr
from pydantic_settings import BaseSettings, SettingsConfigDict

from password_rules.core.schemas import (
    DEFAULT_MAX_LENGTH,
    DEFAULT_MIN_LENGTH,
    DEFAULT_REQUIRED_CHARACTER_TYPES,
    PasswordRuleConfig,
)

# ---------------------------------------------------
# Logger Configuration
# ---------------------------------------------------
logger = logging.getLogger(__name__)

# ---------------------------------------------------
# Dotenv Location
# ---------------------------------------------------
DEFAULT_DOTENV_PATH = Path.cwd() / ".env"


# ---------------------------------------------------
# Settings Definition
# ---------------------------------------------------
class Settings(BaseSettings):
    """
    Rule checker settings loaded from environment variables.

    Raises:
        ConfigurationError: If the configured values break a rule invariant.
    """

    # --- Pydantic Settings Configuration ---
    model_config = SettingsConfigDict(
        env_file=str(DEFAULT_DOTENV_PATH),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- General Settings ---
    LOG_LEVEL: str = "INFO"

    # --- Length Settings ---
    PASSWORD_MIN_LENGTH: int = DEFAULT_MIN_LENGTH
    PASSWORD_MAX_LENGTH: int = DEFAULT_MAX_LENGTH

    # --- Composition Settings ---
    PASSWORD_REQUIRED_CHARACTER_TYPES: int = DEFAULT_REQUIRED_CHARACTER_TYPES
    PASSWORD_ENFORCE_UPPERCASE: bool = False
    PASSWORD_ENFORCE_LOWERCASE: bool = False
    PASSWORD_ENFORCE_NUMBERS: bool = False
    PASSWORD_ENFORCE_SPECIAL_CHARS: bool = False

    _rule: PasswordRuleConfig = PrivateAttr()

    def model_post_init(self, __context: Any) -> None:
        self._rule = self.to_rule()

    @property
    def rule(self) -> PasswordRuleConfig:
        """The rule built when these settings were loaded."""
        return self._rule

    def to_rule(self) -> PasswordRuleConfig:
        """Builds the rule described by these settings.

        Raises:
            ConfigurationError: If the configured values break a rule invariant.
        """
        rule = PasswordRuleConfig(
            min_length=self.PASSWORD_MIN_LENGTH,
            max_length=self.PASSWORD_MAX_LENGTH,
            required_character_types=self.PASSWORD_REQUIRED_CHARACTER_TYPES,
            enforce_uppercase=self.PASSWORD_ENFORCE_UPPERCASE,
            enforce_lowercase=self.PASSWORD_ENFORCE_LOWERCASE,
            enforce_numbers=self.PASSWORD_ENFORCE_NUMBERS,
            enforce_special_chars=self.PASSWORD_ENFORCE_SPECIAL_CHARS,
        )
        logger.debug(f"[CONFIG] Loaded password rule: {rule!r}")
        return rule


# ---------------------------------------------------
# Instantiate Settings Globally
# ---------------------------------------------------
settings = Settings()


def default_rule() -> PasswordRuleConfig:
    """Returns the rule loaded with the global settings."""
    return settings.rule
