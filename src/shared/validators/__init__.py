"""Shared validators package for the application.

This package contains the field validators used by the validation endpoint
and the built-in rule table mirrored by the rules store.

Available validators:
- email.py: Email format validation
- password.py: Password length, digit and special character validation
- phone.py: E.164 phone number validation
"""

from .email import validate_email
from .password import validate_password
from .phone import validate_phone
from .result import ValidationResult, normalize_input
from .rules import DEFAULT_RULES, ERROR_MESSAGES, RULES_BY_NAME, RuleDefinition, RuleName

__all__ = [
    "DEFAULT_RULES",
    "ERROR_MESSAGES",
    "RULES_BY_NAME",
    "RuleDefinition",
    "RuleName",
    "ValidationResult",
    "normalize_input",
    "validate_email",
    "validate_password",
    "validate_phone",
]
