"""Problem catalog: filtering, authoring and the daily challenge."""

from __future__ import annotations

from datetime import datetime
from typing import Any

import structlog

from kca.database import DataStore
from kca.db.models import DailyChallenge, Problem, TestCase, new_id, utcnow
from kca.gamification.streak_service import get_day_iso

logger = structlog.get_logger()


def filter_problems(
    problems: list[Problem],
    grade: int | None = None,
    difficulty: str | None = None,
    language: str | None = None,
    topic: str | None = None,
    search: str | None = None,
) -> list[Problem]:
    """Apply the catalog filters. ``search`` matches title or description, case-insensitively."""
    result = problems
    if grade is not None:
        result = [p for p in result if grade in p.grade]
    if difficulty:
        result = [p for p in result if p.difficulty == difficulty]
    if language:
        result = [p for p in result if language in p.languages]
    if topic:
        result = [p for p in result if topic in p.topics]
    if search:
        needle = search.lower()
        result = [p for p in result if needle in p.title.lower() or needle in p.description.lower()]
    return result


async def list_topics(store: DataStore) -> list[str]:
    """Distinct topics across all problems, in first-seen order."""
    seen: dict[str, None] = {}
    for problem in await store.problems.list_all():
        for topic in problem.topics:
            seen.setdefault(topic, None)
    return list(seen)


# ---------------------------------------------------------------------------
# Authoring
# ---------------------------------------------------------------------------


def _test_cases(raw: list[dict[str, Any]]) -> list[TestCase]:
    return [TestCase(tc.get("input", ""), tc["expected_output"], bool(tc.get("is_hidden", False))) for tc in raw]


async def create_problem(store: DataStore, fields: dict[str, Any], created_by: str) -> Problem:
    fields = dict(fields)
    fields["test_cases"] = _test_cases(fields.get("test_cases", []))
    problem = Problem(id=new_id(), created_by=created_by, **fields)
    await store.problems.save(problem)
    logger.info("problem_created", problem_id=problem.id, created_by=created_by)
    return problem


async def update_problem(store: DataStore, problem_id: str, changes: dict[str, Any]) -> Problem:
    """
    Apply a partial update.

    Raises:
        LookupError: If the problem does not exist.
    """
    problem = await store.problems.find_by_id(problem_id)
    if problem is None:
        msg = "Problem not found"
        raise LookupError(msg)

    for key, value in changes.items():
        if key == "test_cases":
            value = _test_cases(value)
        setattr(problem, key, value)
    await store.problems.save(problem)
    logger.info("problem_updated", problem_id=problem.id, fields=sorted(changes))
    return problem


async def deactivate_problem(store: DataStore, problem_id: str) -> Problem:
    """
    Soft-delete: the problem stays for existing submissions but leaves the catalog.

    Raises:
        LookupError: If the problem does not exist.
    """
    problem = await store.problems.find_by_id(problem_id)
    if problem is None:
        msg = "Problem not found"
        raise LookupError(msg)
    problem.is_active = False
    await store.problems.save(problem)
    logger.info("problem_deactivated", problem_id=problem.id)
    return problem


# ---------------------------------------------------------------------------
# Daily challenge
# ---------------------------------------------------------------------------


async def get_today_challenge(store: DataStore, now: datetime | None = None) -> DailyChallenge:
    """
    Today's challenge, picking one from the active problems if none is set.

    Raises:
        LookupError: If there is no challenge and no active problem to pick.
    """
    day = get_day_iso(now or utcnow())
    existing = store.daily_challenges.for_day(day)
    if existing is not None:
        return existing

    challenge = store.daily_challenges.rotate(day, await store.problems.list_active())
    logger.info("daily_challenge_rotated", day=day, problem_id=challenge.problem_id)
    return challenge
