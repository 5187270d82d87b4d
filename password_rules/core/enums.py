"""
password_rules/core/enums.py

Enumerations

Defines enumerations used across the rule checker:
- CharacterType: The four character classes a password is scored on
- FailureReason: Why a password was rejected
- ConfigErrorCode: Why a rule configuration was rejected
"""

from enum import Enum

# ---------------------------------------------------
# Character Type Enumeration
# ---------------------------------------------------


class CharacterType(str, Enum):
    """
    Enum representing the character classes counted by the diversity check.

    Values:
    - UPPERCASE
    - LOWERCASE
    - DIGIT
    - SPECIAL
    """

    UPPERCASE = "UPPERCASE"
    LOWERCASE = "LOWERCASE"
    DIGIT = "DIGIT"
    SPECIAL = "SPECIAL"


# ---------------------------------------------------
# Failure Reason Enumeration
# ---------------------------------------------------


class FailureReason(str, Enum):
    """
    Enum representing the first rule a password failed.
    """

    NOT_A_STRING = "NOT_A_STRING"
    LENGTH_OUT_OF_RANGE = "LENGTH_OUT_OF_RANGE"
    MISSING_UPPERCASE = "MISSING_UPPERCASE"
    MISSING_LOWERCASE = "MISSING_LOWERCASE"
    MISSING_NUMBER = "MISSING_NUMBER"
    MISSING_SPECIAL_CHAR = "MISSING_SPECIAL_CHAR"
    INSUFFICIENT_CHARACTER_TYPE_DIVERSITY = "INSUFFICIENT_CHARACTER_TYPE_DIVERSITY"


# ---------------------------------------------------
# Configuration Error Code Enumeration
# ---------------------------------------------------


class ConfigErrorCode(str, Enum):
    """
    Enum representing the invariant a rule configuration broke.

    Values:
    - INVALID_MIN_LENGTH
    - INVALID_MAX_LENGTH
    - INVALID_CHARACTER_TYPE_COUNT
    """

    INVALID_MIN_LENGTH = "INVALID_MIN_LENGTH"
    INVALID_MAX_LENGTH = "INVALID_MAX_LENGTH"
    INVALID_CHARACTER_TYPE_COUNT = "INVALID_CHARACTER_TYPE_COUNT"
