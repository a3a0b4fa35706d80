"""Badge catalog and progression rules endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from kca.database import DataStore, get_store
from kca.db.models import Badge
from kca.gamification.badges import BADGE_CATALOG, get_badge
from kca.gamification.level_thresholds import RANK_THRESHOLDS, XP_PER_LEVEL
from kca.gamification.schemas import (
    BadgeDetailResponse,
    BadgeResponse,
    ProgressionRulesResponse,
    RankThreshold,
)

router = APIRouter(prefix="/api", tags=["Gamification"])


def _badge_fields(badge: Badge) -> dict:
    return {
        "id": badge.id,
        "name": badge.name,
        "description": badge.description,
        "icon": badge.icon,
        "requirement": badge.requirement,
        "xp_bonus": badge.xp_bonus,
    }


# ── Public endpoints ──


@router.get("/badges", response_model=list[BadgeResponse])
async def list_badges() -> list[BadgeResponse]:
    """The full badge catalog."""
    return [BadgeResponse(**_badge_fields(b)) for b in BADGE_CATALOG]


@router.get("/badges/{badge_id}", response_model=BadgeDetailResponse)
async def badge_detail(badge_id: str, store: DataStore = Depends(get_store)) -> BadgeDetailResponse:
    """One badge with how many users hold it."""
    badge = get_badge(badge_id)
    if badge is None:
        raise HTTPException(status_code=404, detail="Badge not found")

    users = await store.users.list_all()
    earned = sum(1 for u in users if badge_id in u.badges)
    return BadgeDetailResponse(
        **_badge_fields(badge),
        total_earned=earned,
        percentage=round(earned / len(users) * 100, 1) if users else 0.0,
    )


@router.get("/progression/ranks", response_model=ProgressionRulesResponse)
async def progression_ranks() -> ProgressionRulesResponse:
    """Rank thresholds (highest first) and the XP needed per level."""
    return ProgressionRulesResponse(
        xp_per_level=XP_PER_LEVEL,
        ranks=[RankThreshold(rank=t["rank"], min_xp=t["min_xp"]) for t in RANK_THRESHOLDS],
    )
