"""Tests for the validation result model, normalization and the rule table."""

import re

import pytest
from pydantic import ValidationError

from src.shared.validators import (
    DEFAULT_RULES,
    ERROR_MESSAGES,
    RuleName,
    ValidationResult,
    normalize_input,
    validate_email,
    validate_password,
    validate_phone,
)


class TestNormalizeInput:
    """Test input normalization."""

    def test_none_becomes_empty_string(self):
        assert normalize_input(None) == ""

    def test_whitespace_is_stripped(self):
        assert normalize_input("\t user@test.com \n") == "user@test.com"

    def test_non_string_is_converted(self):
        assert normalize_input(14155552671) == "14155552671"

    def test_empty_string_is_kept(self):
        assert normalize_input("") == ""

    def test_booleans_use_python_string_form(self):
        """Test booleans normalize to their Python spelling, not JSON's."""
        assert normalize_input(True) == "True"
        assert normalize_input(False) == "False"

    def test_floats_keep_their_fraction(self):
        assert normalize_input(1.0) == "1.0"


class TestValidationResult:
    """Test the ValidationResult invariant."""

    def test_from_errors_without_errors_is_valid(self):
        result = ValidationResult.from_errors([])
        assert result.valid is True
        assert result.errors == ()

    def test_from_errors_with_errors_is_invalid(self):
        result = ValidationResult.from_errors(["Invalid email format"])
        assert result.valid is False

    def test_inconsistent_flag_is_rejected(self):
        """Test a valid flag contradicting the errors cannot be built."""
        with pytest.raises(ValidationError):
            ValidationResult(valid=True, errors=["Invalid email format"])
        with pytest.raises(ValidationError):
            ValidationResult(valid=False, errors=[])

    def test_result_is_frozen(self):
        result = ValidationResult.from_errors([])
        with pytest.raises(ValidationError):
            result.valid = False  # type: ignore[misc]

    def test_errors_cannot_be_mutated(self):
        """Test the error sequence cannot be extended after construction."""
        result = ValidationResult.from_errors([])
        with pytest.raises(AttributeError):
            result.errors.append("Invalid email format")  # type: ignore[attr-defined]
        assert result.valid is True
        assert result.errors == ()

    def test_errors_serialize_as_json_array(self):
        result = ValidationResult.from_errors(["Invalid email format"])
        assert result.model_dump(mode="json") == {"valid": False, "errors": ["Invalid email format"]}

    @pytest.mark.parametrize("validator", [validate_email, validate_password, validate_phone])
    @pytest.mark.parametrize("value", [None, "", "  ", "user@test.com", "Passw0rd!", "+14155552671", 0, "@@@"])
    def test_valid_flag_matches_errors_for_all_validators(self, validator, value):
        """Test valid is True exactly when errors is empty."""
        result = validator(value)
        assert result.valid == (not result.errors)


class TestRuleTable:
    """Test the built-in rule table mirrored by the rules store."""

    def test_every_rule_name_has_a_message_and_definition(self):
        assert set(ERROR_MESSAGES) == set(RuleName)
        assert [rule.rule_name for rule in DEFAULT_RULES] == list(RuleName)

    def test_error_messages_are_read_only(self):
        with pytest.raises(TypeError):
            ERROR_MESSAGES[RuleName.EMAIL_FORMAT] = "changed"  # type: ignore[index]

    @pytest.mark.parametrize(
        ("rule_name", "accepted", "rejected"),
        [
            (RuleName.EMAIL_FORMAT, "user@test.com", "user@"),
            (RuleName.PASSWORD_LENGTH, "12345678", "1234567"),
            (RuleName.PASSWORD_NUMBER, "abc1", "abc!"),
            (RuleName.PASSWORD_SPECIAL, "abc_", "abc1"),
            (RuleName.PHONE_FORMAT, "+14155552671", "4155552671"),
        ],
    )
    def test_published_patterns_agree_with_validators(self, rule_name, accepted, rejected):
        """Test the published pattern text accepts and rejects like the validator."""
        rule = next(rule for rule in DEFAULT_RULES if rule.rule_name == rule_name)
        assert re.fullmatch(rule.regex_pattern, accepted)
        assert not re.fullmatch(rule.regex_pattern, rejected)
        assert rule.error_message == ERROR_MESSAGES[rule_name]
