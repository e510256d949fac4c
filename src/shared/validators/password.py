"""Password validation functions."""

from typing import Any

from .result import ValidationResult, normalize_input
from .rules import (
    ERROR_MESSAGES,
    PASSWORD_MIN_LENGTH,
    PASSWORD_NUMBER_PATTERN,
    PASSWORD_SPECIAL_PATTERN,
    RuleName,
)


def validate_password(value: Any) -> ValidationResult:
    """Validate password requirements.

    Requirements:
    - At least 8 characters
    - At least one digit (0-9)
    - At least one special character from the allowed set

    Every requirement is checked, so a weak password reports all of its
    failures at once, in the order listed above.

    Args:
        value: Raw password value (None is treated as empty)

    Returns:
        ValidationResult with one message per failed requirement

    Examples:
        >>> validate_password("Passw0rd!").valid
        True
        >>> validate_password("Password!").errors
        ('Password must contain at least one number',)

    """
    password = normalize_input(value)
    errors: list[str] = []

    if len(password) < PASSWORD_MIN_LENGTH:
        errors.append(ERROR_MESSAGES[RuleName.PASSWORD_LENGTH])
    if not PASSWORD_NUMBER_PATTERN.search(password):
        errors.append(ERROR_MESSAGES[RuleName.PASSWORD_NUMBER])
    if not PASSWORD_SPECIAL_PATTERN.search(password):
        errors.append(ERROR_MESSAGES[RuleName.PASSWORD_SPECIAL])

    return ValidationResult.from_errors(errors)
