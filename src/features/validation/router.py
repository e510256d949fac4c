"""Validation router (field validation endpoints)."""

import logging

from fastapi import APIRouter

from src.shared.validators import ValidationResult

from .schemas import FieldValidationRequest, ValidationRequest, ValidationResponse
from .service import ValidationService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/validate", tags=["Validation"])


@router.post("", response_model=ValidationResponse)
async def validate(data: ValidationRequest):
    """Validate any combination of email, password and phone.

    - **email**: Email address (validated only if the key is present)
    - **password**: Password (validated only if the key is present)
    - **phone**: E.164 phone number (validated only if the key is present)

    Always returns 200; check `valid` and `errors` in the body.
    """
    return ValidationService.validate_request(data)


@router.post("/{field}", response_model=ValidationResult)
async def validate_single_field(field: str, data: FieldValidationRequest):
    """Validate a single value against the `email`, `password` or `phone` rules."""
    return ValidationService.validate_field(field, data.value)
