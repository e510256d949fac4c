"""Rules store exceptions."""

from fastapi import HTTPException, status


class RuleException(HTTPException):
    """Base rules store exception."""

    def __init__(self, detail: str = "Rule operation failed", status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(status_code=status_code, detail=detail)


class RuleNotFound(RuleException):
    """Raised when a rule name is not present in the store."""

    def __init__(self, rule_name: str):
        super().__init__(detail=f"Validation rule '{rule_name}' not found", status_code=status.HTTP_404_NOT_FOUND)
