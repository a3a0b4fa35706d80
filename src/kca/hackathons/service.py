"""Hackathon registration and leaderboards."""

from __future__ import annotations

from typing import Any

import structlog

from kca.database import DataStore
from kca.db.models import Hackathon, HackathonScore, new_id

logger = structlog.get_logger()


async def get_hackathon(store: DataStore, hackathon_id: str) -> Hackathon:
    """
    Raises:
        LookupError: If the hackathon does not exist.
    """
    hackathon = await store.hackathons.find_by_id(hackathon_id)
    if hackathon is None:
        msg = "Hackathon not found"
        raise LookupError(msg)
    return hackathon


async def register_participant(store: DataStore, hackathon_id: str, user_id: str) -> Hackathon:
    """
    Add a user to the participant list.

    Raises:
        LookupError: If the hackathon does not exist.
        ValueError: If the user is already registered.
    """
    hackathon = await get_hackathon(store, hackathon_id)
    if user_id in hackathon.participants:
        msg = "Already registered"
        raise ValueError(msg)
    hackathon.participants.append(user_id)
    await store.hackathons.save(hackathon)
    logger.info("hackathon_registered", hackathon_id=hackathon.id, user_id=user_id)
    return hackathon


def ranked_leaderboard(hackathon: Hackathon) -> list[tuple[int, HackathonScore]]:
    """Entries sorted by score, highest first, with 1-based ranks."""
    ordered = sorted(hackathon.leaderboard, key=lambda e: e.score, reverse=True)
    return list(enumerate(ordered, start=1))


async def create_hackathon(store: DataStore, fields: dict[str, Any]) -> Hackathon:
    hackathon = Hackathon(id=new_id(), **fields)
    await store.hackathons.save(hackathon)
    logger.info("hackathon_created", hackathon_id=hackathon.id, start_time=hackathon.start_time.isoformat())
    return hackathon


async def update_hackathon(store: DataStore, hackathon_id: str, changes: dict[str, Any]) -> Hackathon:
    """
    Apply a partial update.

    Raises:
        LookupError: If the hackathon does not exist.
        ValueError: If the update would end the hackathon before it starts.
    """
    hackathon = await get_hackathon(store, hackathon_id)
    start = changes.get("start_time", hackathon.start_time)
    end = changes.get("end_time", hackathon.end_time)
    if end <= start:
        msg = "end_time must be after start_time"
        raise ValueError(msg)
    for key, value in changes.items():
        setattr(hackathon, key, value)
    await store.hackathons.save(hackathon)
    logger.info("hackathon_updated", hackathon_id=hackathon.id, fields=sorted(changes))
    return hackathon
