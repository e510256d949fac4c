"""Built-in validation rule table.

The rules below are the single source of truth for the validators. The same
rows are published to the ``validation_rules`` table for introspection, but
the validators never read them back.
"""

import re
from enum import StrEnum
from types import MappingProxyType
from typing import NamedTuple


class RuleName(StrEnum):
    """Fixed rule keys shared by the validators and the rules store."""

    EMAIL_FORMAT = "email_format"
    PASSWORD_LENGTH = "password_length"
    PASSWORD_NUMBER = "password_number"
    PASSWORD_SPECIAL = "password_special"
    PHONE_FORMAT = "phone_format"


ERROR_MESSAGES: MappingProxyType[RuleName, str] = MappingProxyType(
    {
        RuleName.EMAIL_FORMAT: "Invalid email format",
        RuleName.PASSWORD_LENGTH: "Password must be at least 8 characters long",
        RuleName.PASSWORD_NUMBER: "Password must contain at least one number",
        RuleName.PASSWORD_SPECIAL: "Password must contain at least one special character",
        RuleName.PHONE_FORMAT: "Invalid phone number format",
    }
)

PASSWORD_MIN_LENGTH = 8

# Allowed password specials: ! @ # $ % ^ & * ( ) _ + - = [ ] { } ; ' : " \ | , . < > / ?
PASSWORD_SPECIAL_CHARS = "!@#$%^&*()_+-=[]{};':\"\\|,.<>/?"

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PASSWORD_NUMBER_PATTERN = re.compile(r"[0-9]")
PASSWORD_SPECIAL_PATTERN = re.compile(f"[{re.escape(PASSWORD_SPECIAL_CHARS)}]")
PHONE_PATTERN = re.compile(r"^\+[1-9][0-9]{7,14}$")


class RuleDefinition(NamedTuple):
    """A rule as published to the rules store."""

    rule_name: RuleName
    regex_pattern: str
    error_message: str


DEFAULT_RULES: tuple[RuleDefinition, ...] = (
    RuleDefinition(RuleName.EMAIL_FORMAT, EMAIL_PATTERN.pattern, ERROR_MESSAGES[RuleName.EMAIL_FORMAT]),
    RuleDefinition(
        RuleName.PASSWORD_LENGTH,
        f"^.{{{PASSWORD_MIN_LENGTH},}}$",
        ERROR_MESSAGES[RuleName.PASSWORD_LENGTH],
    ),
    RuleDefinition(RuleName.PASSWORD_NUMBER, r".*[0-9].*", ERROR_MESSAGES[RuleName.PASSWORD_NUMBER]),
    RuleDefinition(
        RuleName.PASSWORD_SPECIAL,
        f".*{PASSWORD_SPECIAL_PATTERN.pattern}.*",
        ERROR_MESSAGES[RuleName.PASSWORD_SPECIAL],
    ),
    RuleDefinition(RuleName.PHONE_FORMAT, PHONE_PATTERN.pattern, ERROR_MESSAGES[RuleName.PHONE_FORMAT]),
)

RULES_BY_NAME: MappingProxyType[str, RuleDefinition] = MappingProxyType(
    {rule.rule_name.value: rule for rule in DEFAULT_RULES}
)


__all__ = [
    "DEFAULT_RULES",
    "ERROR_MESSAGES",
    "PASSWORD_MIN_LENGTH",
    "PASSWORD_SPECIAL_CHARS",
    "RULES_BY_NAME",
    "RuleDefinition",
    "RuleName",
]
