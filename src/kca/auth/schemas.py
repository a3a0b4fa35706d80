"""Request/response schemas for authentication and account endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, EmailStr, Field, field_validator

from kca.sanitize import SafeText

# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class RegisterRequest(BaseModel):
    """Self-service registration. Only students and parents may sign up."""

    username: SafeText = Field(..., min_length=3, max_length=32)
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)
    grade: int = Field(5, ge=1, le=12)
    parent_email: EmailStr | None = None
    role: Literal["student", "parent"] = "student"

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Normalize email to lowercase."""
        return v.lower().strip()

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        return v.strip()


class LoginRequest(BaseModel):
    """Login with email + password."""

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Normalize email to lowercase."""
        return v.lower().strip()


class ProfileUpdateRequest(BaseModel):
    """Owner-editable profile fields. Omitted fields are left alone."""

    avatar: SafeText | None = Field(None, min_length=1, max_length=16)
    theme: Literal["light", "dark"] | None = None
    grade: int | None = Field(None, ge=1, le=12)


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class UserResponse(BaseModel):
    """Public user profile. Never includes the password hash."""

    id: str
    username: str
    email: str
    role: str
    grade: int
    avatar: str
    xp: int
    level: int
    rank: str
    streak: int
    longest_streak: int
    streak_freeze_used: bool
    last_active_date: datetime | None
    badges: list[str]
    solved_problems: list[str]
    parent_email: str | None
    is_verified: bool
    subscription: str
    theme: str
    created_at: datetime


class AuthResponse(BaseModel):
    """Returned by register and login."""

    user: UserResponse
    token: str


class LeaderboardEntry(BaseModel):
    position: int
    id: str
    username: str
    avatar: str
    grade: int
    xp: int
    level: int
    rank: str
    streak: int
    badge_count: int
    solved_count: int
