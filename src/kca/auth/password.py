"""
Password hashing and validation using argon2id.

Demo accounts and registered users share the same hasher, so a hash created
at seed time verifies exactly like one created at registration.
"""

from __future__ import annotations

import argon2

from kca.config import get_settings

_hasher = argon2.PasswordHasher(
    time_cost=2,
    memory_cost=65536,  # 64 MB
    parallelism=1,
    hash_len=32,
    salt_len=16,
    type=argon2.Type.ID,  # argon2id
)


class PasswordStrengthError(ValueError):
    """Raised when a password does not meet strength requirements."""


def hash_password(password: str) -> str:
    """Hash a password using argon2id. Returns the full hash string."""
    return _hasher.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Check ``password`` against a stored hash. A malformed hash simply fails."""
    try:
        return _hasher.verify(password_hash, password)
    except (argon2.exceptions.VerifyMismatchError, argon2.exceptions.InvalidHashError):
        return False


def validate_password_strength(password: str) -> None:
    """
    Raise PasswordStrengthError for the first rule ``password`` breaks.

    Rules stay simple enough for young students: a length window taken from
    settings, plus at least one letter and one digit.
    """
    settings = get_settings()
    rules = [
        (bool(password.strip()), "Password cannot be empty"),
        (
            len(password) >= settings.password_min_length,
            f"Password must be at least {settings.password_min_length} characters",
        ),
        (
            len(password) <= settings.password_max_length,
            f"Password must not exceed {settings.password_max_length} characters",
        ),
        (any(c.isalpha() for c in password), "Password must contain at least one letter"),
        (any(c.isdigit() for c in password), "Password must contain at least one digit"),
    ]
    for ok, msg in rules:
        if not ok:
            raise PasswordStrengthError(msg)
