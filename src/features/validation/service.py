"""Validation service layer."""

import logging
from collections.abc import Callable
from typing import Any

from src.shared.validators import ValidationResult, validate_email, validate_password, validate_phone

from .exceptions import UnknownFieldException
from .schemas import ValidatedField, ValidationRequest, ValidationResponse

logger = logging.getLogger(__name__)

FIELD_VALIDATORS: dict[ValidatedField, Callable[[Any], ValidationResult]] = {
    ValidatedField.EMAIL: validate_email,
    ValidatedField.PASSWORD: validate_password,
    ValidatedField.PHONE: validate_phone,
}


class ValidationService:
    """Service for field validation."""

    @staticmethod
    def validate_request(data: ValidationRequest) -> ValidationResponse:
        """Validate every field present in the request.

        Fields are processed in the order email, password, phone. The
        aggregated ``errors`` list concatenates each field's errors in that
        order, and ``valid`` is True only if every supplied field is valid.

        Args:
            data: Parsed request body

        Returns:
            ValidationResponse with one entry per supplied field

        """
        fields: dict[str, ValidationResult] = {}
        errors: list[str] = []

        for field, validator in FIELD_VALIDATORS.items():
            if field.value not in data.model_fields_set:
                continue
            result = validator(getattr(data, field.value))
            fields[field.value] = result
            errors.extend(result.errors)

        valid = all(result.valid for result in fields.values())
        logger.debug(f"Validated fields {list(fields)}: valid={valid}, {len(errors)} error(s)")
        return ValidationResponse(valid=valid, errors=errors, fields=fields)

    @staticmethod
    def validate_field(field: str, value: Any) -> ValidationResult:
        """Validate a single value with the validator registered for ``field``.

        Raises:
            UnknownFieldException: If no validator exists for the field

        """
        try:
            validator = FIELD_VALIDATORS[ValidatedField(field)]
        except ValueError as err:
            raise UnknownFieldException(field) from err
        return validator(value)
