"""Domain records held by the in-memory data store.

Plain dataclasses; the repositories in ``kca.db.repositories`` own them.
Field names are snake_case versions of the records the frontend consumes.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal

Role = Literal["student", "developer", "admin", "mentor", "parent"]
Difficulty = Literal["easy", "medium", "hard"]
SubmissionStatus = Literal["accepted", "wrong_answer"]
SlotStatus = Literal["available", "booked", "completed", "cancelled"]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid.uuid4())


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


@dataclass
class User:
    """Registered account plus its progression state."""

    id: str
    username: str
    email: str
    password_hash: str
    role: Role = "student"
    grade: int = 5
    avatar: str = "\U0001f431"
    xp: int = 0
    level: int = 1
    rank: str = "Bronze"
    streak: int = 0
    longest_streak: int = 0
    streak_freeze_used: bool = False
    # None until the first streak-qualifying solve.
    last_active_date: datetime | None = None
    badges: list[str] = field(default_factory=list)
    solved_problems: list[str] = field(default_factory=list)
    parent_email: str | None = None
    is_verified: bool = True
    subscription: Literal["free", "pro"] = "free"
    theme: Literal["light", "dark"] = "light"
    created_at: datetime = field(default_factory=utcnow)


# ---------------------------------------------------------------------------
# Problems
# ---------------------------------------------------------------------------


@dataclass
class TestCase:
    __test__ = False

    input: str
    expected_output: str
    is_hidden: bool = False


@dataclass
class Problem:
    """Static problem content. Read-only from the progression engine's view."""

    id: str
    title: str
    description: str
    difficulty: Difficulty
    xp_reward: int
    grade: list[int] = field(default_factory=list)
    topics: list[str] = field(default_factory=list)
    languages: list[str] = field(default_factory=list)
    test_cases: list[TestCase] = field(default_factory=list)
    hints: list[str] = field(default_factory=list)
    starter_code: dict[str, str] = field(default_factory=dict)
    solution: str | None = None
    created_at: datetime = field(default_factory=utcnow)
    created_by: str = ""
    is_active: bool = True


@dataclass(frozen=True)
class TestResult:
    __test__ = False

    passed: bool
    input: str
    expected: str
    actual: str


@dataclass(frozen=True)
class Submission:
    """One grading attempt. Append-only, never mutated."""

    id: str
    user_id: str
    problem_id: str
    language: str
    code: str
    status: SubmissionStatus
    created_at: datetime
    test_results: tuple[TestResult, ...] = ()
    execution_time_ms: int | None = None
    memory_mb: float | None = None
    output: str = ""


@dataclass(frozen=True)
class DailyChallenge:
    id: str
    problem_id: str
    date: str  # ISO day, e.g. "2024-11-02"
    bonus_xp: int


# ---------------------------------------------------------------------------
# Badges
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Badge:
    id: str
    name: str
    description: str
    icon: str
    requirement: str
    xp_bonus: int


# ---------------------------------------------------------------------------
# Hackathons & mentoring
# ---------------------------------------------------------------------------


@dataclass
class HackathonScore:
    user_id: str
    score: int
    solved_count: int
    total_time: int


@dataclass
class Hackathon:
    id: str
    title: str
    description: str
    start_time: datetime
    end_time: datetime
    problems: list[str] = field(default_factory=list)
    participants: list[str] = field(default_factory=list)
    leaderboard: list[HackathonScore] = field(default_factory=list)
    is_active: bool = True
    is_premium: bool = False
    created_at: datetime = field(default_factory=utcnow)

    def status_at(self, now: datetime) -> str:
        """Return upcoming, active or ended relative to ``now``."""
        if self.start_time > now:
            return "upcoming"
        if self.end_time < now:
            return "ended"
        return "active"


@dataclass
class MentorSlot:
    id: str
    mentor_id: str
    date: str
    start_time: str
    end_time: str
    duration: Literal[1, 2] = 1
    price: float = 25
    is_booked: bool = False
    student_id: str | None = None
    meeting_link: str | None = None
    status: SlotStatus = "available"
