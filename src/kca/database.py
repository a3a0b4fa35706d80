"""In-memory data store and its lifecycle."""

from __future__ import annotations

import asyncio
import random
from dataclasses import dataclass, field
from datetime import datetime

from kca.db import seed as demo
from kca.db.models import utcnow
from kca.db.repositories import (
    InMemoryHackathonStore,
    InMemoryMentorSlotStore,
    InMemoryProblemStore,
    InMemorySubmissionStore,
    InMemoryUserStore,
)
from kca.problems.daily_challenge import DailyChallengeBoard


class UserLocks:
    """One asyncio.Lock per user id, created on first use."""

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}

    def for_user(self, user_id: str) -> asyncio.Lock:
        lock = self._locks.get(user_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[user_id] = lock
        return lock


@dataclass
class DataStore:
    users: InMemoryUserStore = field(default_factory=InMemoryUserStore)
    problems: InMemoryProblemStore = field(default_factory=InMemoryProblemStore)
    submissions: InMemorySubmissionStore = field(default_factory=InMemorySubmissionStore)
    hackathons: InMemoryHackathonStore = field(default_factory=InMemoryHackathonStore)
    mentor_slots: InMemoryMentorSlotStore = field(default_factory=InMemoryMentorSlotStore)
    daily_challenges: DailyChallengeBoard = field(default_factory=DailyChallengeBoard)
    user_locks: UserLocks = field(default_factory=UserLocks)
    started_at: datetime = field(default_factory=utcnow)


_store: DataStore | None = None


def build_store(
    seed: bool = False,
    daily_bonus_xp: int = 50,
    rng: random.Random | None = None,
    now: datetime | None = None,
) -> DataStore:
    """Create a store, optionally filled with the demo data set."""
    board = DailyChallengeBoard(bonus_xp=daily_bonus_xp, rng=rng)
    if not seed:
        return DataStore(daily_challenges=board)

    now = now or utcnow()
    store = DataStore(
        users=InMemoryUserStore(demo.demo_users(now)),
        problems=InMemoryProblemStore(demo.demo_problems()),
        submissions=InMemorySubmissionStore(demo.demo_submissions()),
        hackathons=InMemoryHackathonStore(demo.demo_hackathons(now)),
        mentor_slots=InMemoryMentorSlotStore(demo.demo_mentor_slots()),
        daily_challenges=board,
    )
    board.put(demo.demo_daily_challenge(now, daily_bonus_xp))
    return store


def init_store(
    seed: bool = False,
    daily_bonus_xp: int = 50,
    rng: random.Random | None = None,
) -> DataStore:
    """Initialize the process-wide store."""
    global _store  # noqa: PLW0603
    _store = build_store(seed=seed, daily_bonus_xp=daily_bonus_xp, rng=rng)
    return _store


def close_store() -> None:
    """Drop the process-wide store."""
    global _store  # noqa: PLW0603
    _store = None


def get_store() -> DataStore:
    """Get the data store (FastAPI dependency)."""
    if _store is None:
        msg = "Data store not initialized. Call init_store() first."
        raise RuntimeError(msg)
    return _store
