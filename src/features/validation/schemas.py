"""Validation endpoint schemas (DTOs)."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from src.shared.validators import ValidationResult


class ValidatedField(StrEnum):
    """Fields accepted by the validation endpoint, in reporting order."""

    EMAIL = "email"
    PASSWORD = "password"
    PHONE = "phone"


# Request schemas
class ValidationRequest(BaseModel):
    """Fields to validate.

    Only keys present in the JSON body are validated. A key sent as null or
    an empty string is still validated; a key left out is skipped. Presence
    is read from ``model_fields_set``, so the defaults below never reach the
    validators.
    """

    model_config = ConfigDict(extra="ignore")

    email: Any = Field(None, description="Email address (local@domain.tld)")
    password: Any = Field(
        None, description="Password (minimum 8 characters, must include a digit and a special character)"
    )
    phone: Any = Field(None, description="Phone number in E.164 format, e.g. +14155552671")


class FieldValidationRequest(BaseModel):
    """Single value to validate."""

    value: Any = None


# Response schemas
class ValidationResponse(BaseModel):
    """Aggregated validation outcome for all supplied fields."""

    valid: bool
    errors: list[str] = Field(default_factory=list)
    fields: dict[str, ValidationResult] = Field(default_factory=dict)
