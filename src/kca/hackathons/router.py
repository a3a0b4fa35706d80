"""Hackathon API: listings, registration and leaderboards under /api/hackathons."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from kca.auth.dependencies import get_current_user, require_roles
from kca.database import DataStore, get_store
from kca.db.models import Hackathon, HackathonScore, User, utcnow
from kca.hackathons.schemas import (
    HackathonCreateRequest,
    HackathonDetail,
    HackathonScoreResponse,
    HackathonSummary,
    HackathonUpdateRequest,
    RankedScoreResponse,
)
from kca.hackathons.service import (
    create_hackathon,
    get_hackathon,
    ranked_leaderboard,
    register_participant,
    update_hackathon,
)
from kca.problems.schemas import MessageResponse

router = APIRouter(prefix="/api/hackathons", tags=["Hackathons"])

UNKNOWN_AVATAR = "\U0001f464"


def _summary_fields(hackathon: Hackathon) -> dict:
    return {
        "id": hackathon.id,
        "title": hackathon.title,
        "description": hackathon.description,
        "start_time": hackathon.start_time,
        "end_time": hackathon.end_time,
        "problems": list(hackathon.problems),
        "participants": list(hackathon.participants),
        "participant_count": len(hackathon.participants),
        "status": hackathon.status_at(utcnow()),
        "is_active": hackathon.is_active,
        "is_premium": hackathon.is_premium,
        "created_at": hackathon.created_at,
    }


async def _score_fields(store: DataStore, entry: HackathonScore) -> dict:
    user = await store.users.find_by_id(entry.user_id)
    return {
        "user_id": entry.user_id,
        "score": entry.score,
        "solved_count": entry.solved_count,
        "total_time": entry.total_time,
        "username": user.username if user else "Unknown",
        "avatar": user.avatar if user else UNKNOWN_AVATAR,
    }


async def _detail(store: DataStore, hackathon: Hackathon) -> HackathonDetail:
    return HackathonDetail(
        **_summary_fields(hackathon),
        leaderboard=[HackathonScoreResponse(**await _score_fields(store, e)) for e in hackathon.leaderboard],
    )


@router.get("", response_model=list[HackathonSummary])
async def list_hackathons(store: DataStore = Depends(get_store)) -> list[HackathonSummary]:
    """All hackathons with participant count and upcoming/active/ended status."""
    return [HackathonSummary(**_summary_fields(h)) for h in await store.hackathons.list_all()]


@router.get("/{hackathon_id}", response_model=HackathonDetail)
async def get_detail(hackathon_id: str, store: DataStore = Depends(get_store)) -> HackathonDetail:
    try:
        hackathon = await get_hackathon(store, hackathon_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return await _detail(store, hackathon)


@router.post("/{hackathon_id}/register", response_model=MessageResponse)
async def register(
    hackathon_id: str,
    user: User = Depends(get_current_user),
    store: DataStore = Depends(get_store),
) -> MessageResponse:
    try:
        await register_participant(store, hackathon_id, user.id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return MessageResponse(message="Registered successfully")


@router.get("/{hackathon_id}/leaderboard", response_model=list[RankedScoreResponse])
async def leaderboard(hackathon_id: str, store: DataStore = Depends(get_store)) -> list[RankedScoreResponse]:
    """Scores, highest first, with 1-based rank."""
    try:
        hackathon = await get_hackathon(store, hackathon_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return [
        RankedScoreResponse(rank=rank, **await _score_fields(store, entry))
        for rank, entry in ranked_leaderboard(hackathon)
    ]


# ---- Organizers ----


@router.post("", response_model=HackathonDetail, status_code=201)
async def create(
    body: HackathonCreateRequest,
    _user: User = Depends(require_roles("admin", "developer")),
    store: DataStore = Depends(get_store),
) -> HackathonDetail:
    hackathon = await create_hackathon(store, body.model_dump())
    return await _detail(store, hackathon)


@router.put("/{hackathon_id}", response_model=HackathonDetail)
async def update(
    hackathon_id: str,
    body: HackathonUpdateRequest,
    _user: User = Depends(require_roles("admin", "developer")),
    store: DataStore = Depends(get_store),
) -> HackathonDetail:
    try:
        hackathon = await update_hackathon(store, hackathon_id, body.model_dump(exclude_unset=True, exclude_none=True))
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return await _detail(store, hackathon)
