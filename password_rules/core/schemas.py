"""
password_rules/core/schemas.py

Core Schemas

Defines the Pydantic models shared by the rule checker:
- PasswordRuleConfig: immutable, cross-validated rule configuration
- ValidationOutcome: the verdict returned for a single password
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from password_rules.core.enums import ConfigErrorCode, FailureReason
from password_rules.core.exceptions import ConfigurationError

# ---------------------------------------------------
# Constants
# ---------------------------------------------------
DEFAULT_MIN_LENGTH = 12
DEFAULT_MAX_LENGTH = 64
DEFAULT_REQUIRED_CHARACTER_TYPES = 3
CHARACTER_TYPE_COUNT = 4


# ---------------------------------------------------
# Rule Configuration
# ---------------------------------------------------


class PasswordRuleConfig(BaseModel):
    """
    Configuration for a password composition rule.

    The config is frozen; use `replace()` to derive a changed copy. All three
    invariants are checked together whenever a config is built, so the
    min/max cross-check runs no matter which bound changed.

    Raises:
        ConfigurationError: On the first broken invariant, checked in the
            order min_length, max_length, required_character_types.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    min_length: int = Field(default=DEFAULT_MIN_LENGTH, description="Minimum password length")
    max_length: int = Field(default=DEFAULT_MAX_LENGTH, description="Maximum password length")
    required_character_types: int = Field(
        default=DEFAULT_REQUIRED_CHARACTER_TYPES,
        description="Distinct character types required when no class is enforced",
    )
    enforce_uppercase: bool = Field(default=False, description="Require an uppercase letter")
    enforce_lowercase: bool = Field(default=False, description="Require a lowercase letter")
    enforce_numbers: bool = Field(default=False, description="Require a decimal digit")
    enforce_special_chars: bool = Field(
        default=False, description="Require a symbol or punctuation character"
    )

    @model_validator(mode="after")
    def check_invariants(self) -> "PasswordRuleConfig":
        if self.min_length <= 0:
            raise ConfigurationError(
                ConfigErrorCode.INVALID_MIN_LENGTH,
                "min_length must be greater than 0.",
            )
        if self.max_length < self.min_length:
            raise ConfigurationError(
                ConfigErrorCode.INVALID_MAX_LENGTH,
                "max_length must be greater than or equal to min_length.",
            )
        if not 0 <= self.required_character_types <= CHARACTER_TYPE_COUNT:
            raise ConfigurationError(
                ConfigErrorCode.INVALID_CHARACTER_TYPE_COUNT,
                f"required_character_types must be between 0 and {CHARACTER_TYPE_COUNT}.",
            )
        return self

    @property
    def enforce_mode(self) -> bool:
        """True when any character class is explicitly enforced."""
        return (
            self.enforce_uppercase
            or self.enforce_lowercase
            or self.enforce_numbers
            or self.enforce_special_chars
        )

    def replace(self, **changes: Any) -> "PasswordRuleConfig":
        """Returns a new config with `changes` applied and fully re-validated."""
        return type(self)(**{**self.model_dump(), **changes})


# ---------------------------------------------------
# Validation Outcome
# ---------------------------------------------------


class ValidationOutcome(BaseModel):
    """
    Verdict for a single password. Only the first failed rule is reported.
    """

    model_config = ConfigDict(frozen=True)

    is_valid: bool = Field(..., description="Whether the password satisfied the rule")
    reason: Optional[FailureReason] = Field(default=None, description="First failed check")
    message: Optional[str] = Field(default=None, description="Human-readable failure message")

    @classmethod
    def valid(cls) -> "ValidationOutcome":
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, reason: FailureReason, message: str) -> "ValidationOutcome":
        return cls(is_valid=False, reason=reason, message=message)

    def __bool__(self) -> bool:
        return self.is_valid
