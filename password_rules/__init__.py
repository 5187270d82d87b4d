"""
password_rules

Configurable password composition rule checker.
"""

from password_rules.core.config import default_rule
from password_rules.core.enums import CharacterType, ConfigErrorCode, FailureReason
from password_rules.core.exceptions import ConfigurationError, PasswordRuleViolation
from password_rules.core.schemas import PasswordRuleConfig, ValidationOutcome
from password_rules.core.validators import (
    character_types,
    check_character_diversity,
    check_enforced_types,
    check_length,
    password_validator,
    validate_password,
)
from password_rules.fields import PasswordStr, password_str

__all__ = [
    "CharacterType",
    "ConfigErrorCode",
    "ConfigurationError",
    "FailureReason",
    "PasswordRuleConfig",
    "PasswordRuleViolation",
    "PasswordStr",
    "ValidationOutcome",
    "character_types",
    "check_character_diversity",
    "check_enforced_types",
    "check_length",
    "default_rule",
    "password_str",
    "password_validator",
    "validate_password",
]
