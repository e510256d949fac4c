"""Email validation functions."""

from typing import Any

from .result import ValidationResult, normalize_input
from .rules import EMAIL_PATTERN, ERROR_MESSAGES, RuleName


def validate_email(value: Any) -> ValidationResult:
    """Validate an email address shape (``local@domain.tld``).

    This is a lightweight single-pattern check, not RFC 5322 validation:
    any run of non-whitespace, non-``@`` characters is accepted on each side.

    Examples:
        >>> validate_email("user@test.com").valid
        True
        >>> validate_email("user@").errors
        ('Invalid email format',)

    """
    errors: list[str] = []
    if not EMAIL_PATTERN.fullmatch(normalize_input(value)):
        errors.append(ERROR_MESSAGES[RuleName.EMAIL_FORMAT])
    return ValidationResult.from_errors(errors)
