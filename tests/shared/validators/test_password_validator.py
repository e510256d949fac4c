"""Tests for the password validator."""

import pytest

from src.shared.validators.password import validate_password

LENGTH_ERROR = "Password must be at least 8 characters long"
NUMBER_ERROR = "Password must contain at least one number"
SPECIAL_ERROR = "Password must contain at least one special character"


class TestPasswordValidation:
    """Test password requirement validation."""

    def test_valid_password_with_all_requirements(self):
        """Test password with all requirements passes validation."""
        result = validate_password("Passw0rd!")
        assert result.valid is True
        assert result.errors == ()

    def test_valid_password_with_underscore(self):
        """Test underscore counts as a special character."""
        result = validate_password("Password1_")
        assert result.valid is True
        assert result.errors == ()

    def test_password_too_short_fails(self):
        """Test short password reports only the length error."""
        result = validate_password("Pass1!")
        assert result.valid is False
        assert result.errors == (LENGTH_ERROR,)

    def test_password_without_digit_fails(self):
        """Test password without digit reports only the number error."""
        result = validate_password("Password!")
        assert result.valid is False
        assert result.errors == (NUMBER_ERROR,)

    def test_password_without_special_fails(self):
        """Test password without special character reports only the special error."""
        result = validate_password("Password1")
        assert result.valid is False
        assert result.errors == (SPECIAL_ERROR,)

    def test_password_reports_all_failures_in_order(self):
        """Test every failed requirement is reported, length then number then special."""
        result = validate_password("Pass")
        assert result.valid is False
        assert result.errors == (LENGTH_ERROR, NUMBER_ERROR, SPECIAL_ERROR)

    def test_password_none_reports_all_failures(self):
        """Test None is treated as an empty password."""
        result = validate_password(None)
        assert result.errors == (LENGTH_ERROR, NUMBER_ERROR, SPECIAL_ERROR)

    def test_password_short_without_special_keeps_order(self):
        """Test two failures are reported in the fixed order."""
        result = validate_password("abc1")
        assert result.errors == (LENGTH_ERROR, SPECIAL_ERROR)

    def test_password_length_counted_after_trimming(self):
        """Test surrounding whitespace does not count towards the length."""
        result = validate_password("  Pas1!   ")
        assert result.errors == (LENGTH_ERROR,)

    def test_password_with_inner_spaces(self):
        """Test inner spaces count as characters but not as specials."""
        result = validate_password("Pass word 1")
        assert result.errors == (SPECIAL_ERROR,)

    def test_non_ascii_digit_is_not_a_number(self):
        """Test only ASCII digits satisfy the number requirement."""
        result = validate_password("Password\u0663!")
        assert result.errors == (NUMBER_ERROR,)

    @pytest.mark.parametrize("special", list("!@#$%^&*()_+-=[]{};':\"\\|,.<>/?"))
    def test_every_whitelisted_special_is_accepted(self, special):
        """Test each character of the allowed special set satisfies the requirement."""
        result = validate_password(f"Password1{special}")
        assert result.valid is True

    @pytest.mark.parametrize("special", ["~", "`", "€", "§"])
    def test_characters_outside_whitelist_are_rejected(self, special):
        """Test characters outside the allowed set do not count as specials."""
        result = validate_password(f"Password1{special}")
        assert result.errors == (SPECIAL_ERROR,)

    def test_numeric_input_is_converted_to_string(self):
        """Test non-string input is validated by its string form."""
        result = validate_password(12345678)
        assert result.errors == (SPECIAL_ERROR,)

    def test_validation_is_repeatable(self):
        """Test validating the same value twice yields equal results."""
        assert validate_password("Pass") == validate_password("Pass")
