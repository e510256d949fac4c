"""Validation endpoint exceptions."""

from fastapi import HTTPException, status


class ValidationException(HTTPException):
    """Base validation endpoint exception."""

    def __init__(self, detail: str = "Validation request failed", status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(status_code=status_code, detail=detail)


class UnknownFieldException(ValidationException):
    """Raised when a single-field request names a field with no validator."""

    def __init__(self, field: str):
        super().__init__(detail=f"Unknown field '{field}'", status_code=status.HTTP_404_NOT_FOUND)
