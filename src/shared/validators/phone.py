"""Phone number validation functions."""

from typing import Any

from .result import ValidationResult, normalize_input
from .rules import ERROR_MESSAGES, PHONE_PATTERN, RuleName


def validate_phone(value: Any) -> ValidationResult:
    """Validate an E.164 phone number.

    Accepts a leading ``+``, a non-zero first digit and 8 to 15 digits in
    total. Spaces, parentheses and dashes are rejected.
    """
    errors: list[str] = []
    if not PHONE_PATTERN.fullmatch(normalize_input(value)):
        errors.append(ERROR_MESSAGES[RuleName.PHONE_FORMAT])
    return ValidationResult.from_errors(errors)
