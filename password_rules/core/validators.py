"""
password_rules/core/validators.py

Password Validation Utility

Provides:
- Locale-independent character classification by Unicode general category
- Length, enforced-class and diversity sub-checks
- `validate_password`, which reports the first failed check
- `password_validator`, a raising form usable as a Pydantic AfterValidator
"""

import logging
import unicodedata
from typing import Any, Callable, Final, Optional

from password_rules.core.config import default_rule
from password_rules.core.enums import CharacterType, FailureReason
from password_rules.core.exceptions import PasswordRuleViolation
from password_rules.core.schemas import PasswordRuleConfig, ValidationOutcome

logger = logging.getLogger(__name__)

# ---------------------------------------------------
# Messages
# ---------------------------------------------------
NOT_A_STRING_MESSAGE: Final[str] = "Password must be a string."
LENGTH_MESSAGE: Final[str] = "Password length must be between {min_length} and {max_length} characters."
DIVERSITY_MESSAGE: Final[str] = (
    "Password must include at least {required} of the following character types: "
    "uppercase letters, lowercase letters, digits, special symbols."
)
MISSING_TYPE_MESSAGES: Final[dict[CharacterType, str]] = {
    CharacterType.UPPERCASE: "Password must include at least one uppercase letter.",
    CharacterType.LOWERCASE: "Password must include at least one lowercase letter.",
    CharacterType.DIGIT: "Password must include at least one number.",
    CharacterType.SPECIAL: "Password must include at least one special character.",
}
MISSING_TYPE_REASONS: Final[dict[CharacterType, FailureReason]] = {
    CharacterType.UPPERCASE: FailureReason.MISSING_UPPERCASE,
    CharacterType.LOWERCASE: FailureReason.MISSING_LOWERCASE,
    CharacterType.DIGIT: FailureReason.MISSING_NUMBER,
    CharacterType.SPECIAL: FailureReason.MISSING_SPECIAL_CHAR,
}


# ---------------------------------------------------
# Character Classification
# ---------------------------------------------------


def classify_character(char: str) -> Optional[CharacterType]:
    """
    Classifies a single code point by its Unicode general category.

    Lu is uppercase, Ll is lowercase, Nd is a digit, and any symbol (S*) or
    punctuation (P*) category is special. Everything else, including titlecase
    letters, other letters, whitespace and non-decimal numerals, is None.
    """
    category = unicodedata.category(char)
    if category == "Lu":
        return CharacterType.UPPERCASE
    if category == "Ll":
        return CharacterType.LOWERCASE
    if category == "Nd":
        return CharacterType.DIGIT
    if category[0] in ("S", "P"):
        return CharacterType.SPECIAL
    return None


def character_types(password: str) -> frozenset[CharacterType]:
    """Returns the set of character types present in `password`."""
    found = set()
    for char in password:
        char_type = classify_character(char)
        if char_type is not None:
            found.add(char_type)
            if len(found) == len(CharacterType):
                break
    return frozenset(found)


# ---------------------------------------------------
# Sub-checks
# ---------------------------------------------------


def check_length(password: str, config: PasswordRuleConfig) -> ValidationOutcome:
    """Checks min_length <= len(password) <= max_length, counted in code points."""
    if config.min_length <= len(password) <= config.max_length:
        return ValidationOutcome.valid()
    return ValidationOutcome.invalid(
        FailureReason.LENGTH_OUT_OF_RANGE,
        LENGTH_MESSAGE.format(min_length=config.min_length, max_length=config.max_length),
    )


def check_enforced_types(password: str, config: PasswordRuleConfig) -> ValidationOutcome:
    """
    Checks every explicitly enforced character type is present.

    Flags are checked in the fixed order uppercase, lowercase, numbers,
    special characters; the first missing one is reported. With no flag set
    this always passes.
    """
    enforced = (
        (config.enforce_uppercase, CharacterType.UPPERCASE),
        (config.enforce_lowercase, CharacterType.LOWERCASE),
        (config.enforce_numbers, CharacterType.DIGIT),
        (config.enforce_special_chars, CharacterType.SPECIAL),
    )
    present = character_types(password)
    for is_enforced, char_type in enforced:
        if is_enforced and char_type not in present:
            return ValidationOutcome.invalid(
                MISSING_TYPE_REASONS[char_type], MISSING_TYPE_MESSAGES[char_type]
            )
    return ValidationOutcome.valid()


def check_character_diversity(password: str, config: PasswordRuleConfig) -> ValidationOutcome:
    """Checks at least `required_character_types` distinct types are present."""
    if len(character_types(password)) >= config.required_character_types:
        return ValidationOutcome.valid()
    return ValidationOutcome.invalid(
        FailureReason.INSUFFICIENT_CHARACTER_TYPE_DIVERSITY,
        DIVERSITY_MESSAGE.format(required=config.required_character_types),
    )


# ---------------------------------------------------
# Validator Functions
# ---------------------------------------------------


def validate_password(password: Any, config: Optional[PasswordRuleConfig] = None) -> ValidationOutcome:
    """
    Validates a password against a composition rule.

    Checks run in order and stop at the first failure:
    - The value must be a string
    - Length must be within [min_length, max_length]
    - If any enforce flag is set, every flagged type must be present and the
      diversity check is skipped; otherwise at least
      `required_character_types` distinct types must be present

    Args:
        password (Any): Candidate password
        config (Optional[PasswordRuleConfig]): Rule to apply, defaults to the
            rule loaded from settings

    Returns:
        ValidationOutcome: Valid, or Invalid with the first failed reason
    """
    if config is None:
        config = default_rule()

    if not isinstance(password, str):
        outcome = ValidationOutcome.invalid(FailureReason.NOT_A_STRING, NOT_A_STRING_MESSAGE)
    else:
        outcome = check_length(password, config)
        if outcome.is_valid:
            if config.enforce_mode:
                outcome = check_enforced_types(password, config)
            else:
                outcome = check_character_diversity(password, config)

    if not outcome.is_valid:
        logger.debug(f"Password rejected: {outcome.reason.value}")
    return outcome


def password_validator(password: str, config: Optional[PasswordRuleConfig] = None) -> str:
    """
    Validates password strength, raising on the first failed rule.

    Returns:
        str: The valid password (if all checks pass)

    Raises:
        PasswordRuleViolation: If any rule is violated
    """
    outcome = validate_password(password, config)
    if not outcome.is_valid:
        raise PasswordRuleViolation(outcome.reason, outcome.message)
    return password


def make_password_validator(config: Optional[PasswordRuleConfig] = None) -> Callable[[str], str]:
    """Binds `password_validator` to a fixed rule."""

    def _validator(password: str) -> str:
        return password_validator(password, config)

    return _validator
