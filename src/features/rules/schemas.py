"""Rules store schemas (DTOs)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field


class RuleResponse(BaseModel):
    """Stored validation rule."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    rule_name: str
    regex_pattern: str
    error_message: str
    created_at: datetime
    updated_at: datetime


class RuleMismatch(BaseModel):
    """A stored rule whose pattern or message differs from the built-in rule."""

    rule_name: str
    expected_pattern: str
    stored_pattern: str
    expected_message: str
    stored_message: str


class RuleConsistencyReport(BaseModel):
    """Comparison between the rules store and the built-in rule table."""

    missing: list[str] = Field(default_factory=list, description="Built-in rules absent from the store")
    mismatched: list[RuleMismatch] = Field(default_factory=list)
    unknown: list[str] = Field(default_factory=list, description="Stored rules with no built-in counterpart")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def consistent(self) -> bool:
        """True when the store mirrors the built-in rules exactly."""
        return not (self.missing or self.mismatched or self.unknown)
