"""
tests/test_fields.py

Test cases for the Pydantic password field adapter.
"""

import pytest
from pydantic import BaseModel, ValidationError

from password_rules.core.schemas import PasswordRuleConfig
from password_rules.fields import PasswordStr, password_str

SignupPassword = password_str(
    PasswordRuleConfig(min_length=8, max_length=20, enforce_uppercase=True, enforce_numbers=True)
)


class SignupRequest(BaseModel):
    email: str
    password: SignupPassword


class DefaultRuleRequest(BaseModel):
    password: PasswordStr


def test_valid_password_accepted():
    request = SignupRequest(email="client@example.com", password="PASSWORD1")
    assert request.password == "PASSWORD1"


def test_invalid_password_reports_rule_message():
    with pytest.raises(ValidationError) as exc_info:
        SignupRequest(email="client@example.com", password="password")
    assert "Password must include at least one uppercase letter." in str(exc_info.value)
    assert exc_info.value.errors()[0]["loc"] == ("password",)


def test_default_rule_field(isolated_settings):
    assert DefaultRuleRequest(password="Abcdefghijk1").password == "Abcdefghijk1"
    with pytest.raises(ValidationError):
        DefaultRuleRequest(password="abcdefgh1234")
