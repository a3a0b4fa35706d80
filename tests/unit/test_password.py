"""Tests for password hashing and validation."""

import pytest

from kca.auth.password import (
    PasswordStrengthError,
    hash_password,
    validate_password_strength,
    verify_password,
)


class TestPasswordHashing:
    def test_hash_and_verify(self):
        hashed = hash_password("secret123")
        assert hashed.startswith("$argon2id$")
        assert verify_password("secret123", hashed) is True

    def test_wrong_password_rejected(self):
        hashed = hash_password("secret123")
        assert verify_password("secret124", hashed) is False

    def test_invalid_hash_rejected(self):
        assert verify_password("secret123", "not-a-hash") is False

    def test_hashes_are_salted(self):
        assert hash_password("secret123") != hash_password("secret123")


class TestPasswordStrength:
    def test_demo_password_is_acceptable(self):
        validate_password_strength("demo123")  # Should not raise

    def test_empty_password_rejected(self):
        with pytest.raises(PasswordStrengthError):
            validate_password_strength("")

    def test_whitespace_password_rejected(self):
        with pytest.raises(PasswordStrengthError):
            validate_password_strength("        ")

    def test_short_password_rejected(self):
        with pytest.raises(PasswordStrengthError, match="at least 6"):
            validate_password_strength("abc12")

    def test_no_digit_rejected(self):
        with pytest.raises(PasswordStrengthError, match="digit"):
            validate_password_strength("abcdefg")

    def test_no_letter_rejected(self):
        with pytest.raises(PasswordStrengthError, match="letter"):
            validate_password_strength("1234567")

    def test_too_long_password_rejected(self):
        with pytest.raises(PasswordStrengthError):
            validate_password_strength("a1" * 65)

    def test_strength_error_is_value_error(self):
        assert issubclass(PasswordStrengthError, ValueError)
