"""
password_rules/fields.py

Pydantic field adapter.

Lets host models declare a password field governed by a rule:

    class SignupRequest(BaseModel):
        password: password_str(PasswordRuleConfig(min_length=8))

A failed rule surfaces as a pydantic ValidationError carrying the rule message.
"""

from typing import Annotated, Any, Optional

from pydantic import AfterValidator

from password_rules.core.schemas import PasswordRuleConfig
from password_rules.core.validators import make_password_validator


def password_str(config: Optional[PasswordRuleConfig] = None) -> Any:
    """Returns an annotated `str` type validated against `config`."""
    return Annotated[str, AfterValidator(make_password_validator(config))]


# Validated against the rule loaded from settings at validation time.
PasswordStr = password_str()
