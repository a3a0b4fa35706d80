"""
Account business logic.

Handles registration, credential checks and profile edits against the
injected user store.
"""

from __future__ import annotations

import random

import structlog

from kca.auth.password import hash_password, validate_password_strength, verify_password
from kca.db.models import User, new_id
from kca.db.repositories import UserStore

logger = structlog.get_logger()

AVATARS = [
    "\U0001f431", "\U0001f436", "\U0001f98a", "\U0001f43c", "\U0001f428",
    "\U0001f981", "\U0001f438", "\U0001f435", "\U0001f984", "\U0001f432",
]


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------


async def register_user(
    users: UserStore,
    username: str,
    email: str,
    password: str,
    grade: int = 5,
    parent_email: str | None = None,
    role: str = "student",
    rng: random.Random | None = None,
) -> User:
    """
    Register a new account with fresh progression state.

    Raises:
        ValueError: If email or username already exists, or the password is weak.
    """
    validate_password_strength(password)

    if await users.find_by_email(email) is not None:
        msg = "Email already registered"
        raise ValueError(msg)
    if await users.find_by_username(username) is not None:
        msg = "Username already taken"
        raise ValueError(msg)

    user = User(
        id=new_id(),
        username=username,
        email=email.lower().strip(),
        password_hash=hash_password(password),
        role=role,  # type: ignore[arg-type]
        grade=grade,
        avatar=(rng or random).choice(AVATARS),
        parent_email=parent_email,
        is_verified=parent_email is None,
    )
    await users.save(user)
    logger.info("user_registered", user_id=user.id, role=user.role, needs_parent_approval=not user.is_verified)
    return user


# ---------------------------------------------------------------------------
# Login
# ---------------------------------------------------------------------------


async def authenticate_user(users: UserStore, email: str, password: str) -> User:
    """
    Authenticate a user with email + password.

    Raises:
        ValueError: If credentials are invalid.
    """
    user = await users.find_by_email(email)
    if user is None:
        msg = "Invalid credentials"
        raise ValueError(msg)

    if not verify_password(password, user.password_hash):
        logger.info("login_failed", user_id=user.id)
        msg = "Invalid credentials"
        raise ValueError(msg)

    logger.info("user_logged_in", user_id=user.id, role=user.role)
    return user


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------


async def update_profile(
    users: UserStore,
    user: User,
    avatar: str | None = None,
    theme: str | None = None,
    grade: int | None = None,
) -> User:
    """Apply the provided profile fields and save the user."""
    if avatar is not None:
        user.avatar = avatar
    if theme is not None:
        user.theme = theme  # type: ignore[assignment]
    if grade is not None:
        user.grade = grade
    await users.save(user)
    return user
