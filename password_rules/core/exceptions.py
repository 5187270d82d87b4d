"""
core/exceptions.py

Description:
Defines the errors raised by the rule checker.
"""

from password_rules.core.enums import ConfigErrorCode, FailureReason


class ConfigurationError(Exception):
    """Raised when a rule configuration breaks one of its invariants."""

    def __init__(self, code: ConfigErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class PasswordRuleViolation(ValueError):
    """Raised by the raising validator form when a password fails a rule."""

    def __init__(self, reason: FailureReason, message: str):
        super().__init__(message)
        self.reason = reason
        self.message = message
