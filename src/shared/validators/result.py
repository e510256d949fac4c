"""Validation result model and input normalization."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ValidationResult(BaseModel):
    """Outcome of validating a single field.

    ``valid`` is always equal to ``not errors``; errors keep the order in
    which the checks were applied. The error tuple is immutable, so a result
    cannot drift out of that state after construction.
    """

    model_config = ConfigDict(frozen=True)

    valid: bool
    errors: tuple[str, ...] = Field(default_factory=tuple)

    @model_validator(mode="after")
    def check_valid_matches_errors(self) -> Self:
        """Reject results whose flag disagrees with the error list."""
        if self.valid != (len(self.errors) == 0):
            raise ValueError("valid must be True exactly when errors is empty")
        return self

    @classmethod
    def from_errors(cls, errors: list[str]) -> "ValidationResult":
        """Build a result from collected error messages."""
        return cls(valid=not errors, errors=tuple(errors))


def normalize_input(value: Any) -> str:
    """Normalize a raw input value before validation.

    Examples:
        >>> normalize_input(None)
        ''
        >>> normalize_input("  user@test.com ")
        'user@test.com'
        >>> normalize_input(42)
        '42'

    """
    if value is None:
        return ""
    return str(value).strip()
