"""Account router: all /api/auth/* endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from kca.auth.dependencies import get_current_user, require_roles
from kca.auth.jwt import create_access_token
from kca.auth.schemas import (
    AuthResponse,
    LeaderboardEntry,
    LoginRequest,
    ProfileUpdateRequest,
    RegisterRequest,
    UserResponse,
)
from kca.auth.service import authenticate_user, register_user, update_profile
from kca.database import DataStore, get_store
from kca.db.models import User

router = APIRouter(prefix="/api/auth", tags=["Authentication"])

LEADERBOARD_SIZE = 50


def user_response(user: User) -> UserResponse:
    """Build a UserResponse from a User record."""
    return UserResponse(
        id=user.id,
        username=user.username,
        email=user.email,
        role=user.role,
        grade=user.grade,
        avatar=user.avatar,
        xp=user.xp,
        level=user.level,
        rank=user.rank,
        streak=user.streak,
        longest_streak=user.longest_streak,
        streak_freeze_used=user.streak_freeze_used,
        last_active_date=user.last_active_date,
        badges=list(user.badges),
        solved_problems=list(user.solved_problems),
        parent_email=user.parent_email,
        is_verified=user.is_verified,
        subscription=user.subscription,
        theme=user.theme,
        created_at=user.created_at,
    )


def _auth_response(user: User) -> AuthResponse:
    return AuthResponse(
        user=user_response(user),
        token=create_access_token(user.id, user.role, user.email),
    )


# ---------------------------------------------------------------------------
# Registration / login
# ---------------------------------------------------------------------------


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(
    body: RegisterRequest,
    store: DataStore = Depends(get_store),
) -> AuthResponse:
    """Create an account and return it with an access token."""
    try:
        user = await register_user(
            store.users,
            username=body.username,
            email=body.email,
            password=body.password,
            grade=body.grade,
            parent_email=body.parent_email,
            role=body.role,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return _auth_response(user)


@router.post("/login", response_model=AuthResponse)
async def login(
    body: LoginRequest,
    store: DataStore = Depends(get_store),
) -> AuthResponse:
    """Exchange email + password for an access token."""
    try:
        user = await authenticate_user(store.users, body.email, body.password)
    except ValueError as e:
        raise HTTPException(status_code=401, detail=str(e)) from e
    return _auth_response(user)


# ---------------------------------------------------------------------------
# Current user
# ---------------------------------------------------------------------------


@router.get("/me", response_model=UserResponse)
async def me(user: User = Depends(get_current_user)) -> UserResponse:
    return user_response(user)


@router.put("/profile", response_model=UserResponse)
async def profile(
    body: ProfileUpdateRequest,
    user: User = Depends(get_current_user),
    store: DataStore = Depends(get_store),
) -> UserResponse:
    """Update avatar, theme or grade for the current user."""
    user = await update_profile(store.users, user, avatar=body.avatar, theme=body.theme, grade=body.grade)
    return user_response(user)


# ---------------------------------------------------------------------------
# Listings
# ---------------------------------------------------------------------------


@router.get("/all", response_model=list[UserResponse])
async def all_users(
    _admin: User = Depends(require_roles("admin")),
    store: DataStore = Depends(get_store),
) -> list[UserResponse]:
    """All accounts (admin only)."""
    return [user_response(u) for u in await store.users.list_all()]


@router.get("/leaderboard", response_model=list[LeaderboardEntry])
async def leaderboard(store: DataStore = Depends(get_store)) -> list[LeaderboardEntry]:
    """Top students by XP."""
    students = await store.users.list_by_role("student")
    students.sort(key=lambda u: u.xp, reverse=True)
    return [
        LeaderboardEntry(
            position=i,
            id=u.id,
            username=u.username,
            avatar=u.avatar,
            grade=u.grade,
            xp=u.xp,
            level=u.level,
            rank=u.rank,
            streak=u.streak,
            badge_count=len(u.badges),
            solved_count=len(u.solved_problems),
        )
        for i, u in enumerate(students[:LEADERBOARD_SIZE], start=1)
    ]
