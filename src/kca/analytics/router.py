"""Dashboard endpoints under /api/analytics."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from kca.analytics.schemas import (
    AdminDashboardResponse,
    DeveloperDashboardResponse,
    StudentDashboardResponse,
)
from kca.analytics.service import admin_dashboard, developer_dashboard, student_dashboard
from kca.auth.dependencies import get_current_user, require_roles
from kca.auth.router import user_response
from kca.config import get_settings
from kca.database import DataStore, get_store
from kca.db.models import User, utcnow
from kca.gamification.schemas import BadgeResponse
from kca.problems.router import submission_response

router = APIRouter(prefix="/api/analytics", tags=["Analytics"])


@router.get("/student", response_model=StudentDashboardResponse)
async def student(
    user: User = Depends(get_current_user),
    store: DataStore = Depends(get_store),
) -> StudentDashboardResponse:
    """The caller's own progress dashboard."""
    data = await student_dashboard(store, user, utcnow())
    data["badges"] = [
        BadgeResponse(
            id=b.id, name=b.name, description=b.description, icon=b.icon, requirement=b.requirement, xp_bonus=b.xp_bonus
        )
        for b in data["badges"]
    ]
    data["recent_submissions"] = [submission_response(s) for s in data["recent_submissions"]]
    return StudentDashboardResponse(**data)


@router.get("/admin", response_model=AdminDashboardResponse)
async def admin(
    _user: User = Depends(require_roles("admin")),
    store: DataStore = Depends(get_store),
) -> AdminDashboardResponse:
    """Platform-wide usage overview."""
    data = await admin_dashboard(store, utcnow())
    data["recent_students"] = [user_response(u) for u in data["recent_students"]]
    return AdminDashboardResponse(**data)


@router.get("/developer", response_model=DeveloperDashboardResponse)
async def developer(
    _user: User = Depends(require_roles("developer", "admin")),
    store: DataStore = Depends(get_store),
) -> DeveloperDashboardResponse:
    """Question bank, submission totals and service info."""
    settings = get_settings()
    data = await developer_dashboard(store, utcnow(), settings.app_version, settings.environment)
    return DeveloperDashboardResponse(**data)
