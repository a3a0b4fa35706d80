"""Badge catalog: the 12 badges shown in the frontend badge gallery."""

from __future__ import annotations

from kca.db.models import Badge

BADGE_CATALOG: tuple[Badge, ...] = (
    Badge(
        id="first-solve",
        name="First Steps",
        description="Solved your first problem!",
        icon="\U0001f3af",
        requirement="Solve 1 problem",
        xp_bonus=50,
    ),
    Badge(
        id="streak-7",
        name="On Fire!",
        description="Maintained a 7-day streak",
        icon="\U0001f525",
        requirement="7-day streak",
        xp_bonus=100,
    ),
    Badge(
        id="streak-14",
        name="Unstoppable",
        description="Maintained a 14-day streak",
        icon="⚡",
        requirement="14-day streak",
        xp_bonus=200,
    ),
    Badge(
        id="streak-30",
        name="Legend",
        description="Maintained a 30-day streak",
        icon="\U0001f451",
        requirement="30-day streak",
        xp_bonus=500,
    ),
    Badge(
        id="python-beginner",
        name="Python Tamer",
        description="Solved 5 problems in Python",
        icon="\U0001f40d",
        requirement="5 Python solves",
        xp_bonus=75,
    ),
    Badge(
        id="js-beginner",
        name="JS Ninja",
        description="Solved 5 problems in JavaScript",
        icon="⚡",
        requirement="5 JavaScript solves",
        xp_bonus=75,
    ),
    Badge(
        id="cpp-beginner",
        name="C++ Warrior",
        description="Solved 5 problems in C++",
        icon="⚔️",
        requirement="5 C++ solves",
        xp_bonus=75,
    ),
    Badge(
        id="java-beginner",
        name="Java Knight",
        description="Solved 5 problems in Java",
        icon="☕",
        requirement="5 Java solves",
        xp_bonus=75,
    ),
    Badge(
        id="hackathon-participant",
        name="Hackathon Hero",
        description="Participated in a hackathon",
        icon="\U0001f3c6",
        requirement="Join 1 hackathon",
        xp_bonus=100,
    ),
    Badge(
        id="hackathon-winner",
        name="Champion",
        description="Won a hackathon!",
        icon="\U0001f947",
        requirement="Win a hackathon",
        xp_bonus=300,
    ),
    Badge(
        id="ten-solves",
        name="Problem Crusher",
        description="Solved 10 problems",
        icon="\U0001f4aa",
        requirement="10 problems solved",
        xp_bonus=150,
    ),
    Badge(
        id="fifty-solves",
        name="Code Master",
        description="Solved 50 problems",
        icon="\U0001f9e0",
        requirement="50 problems solved",
        xp_bonus=500,
    ),
)

_BY_ID: dict[str, Badge] = {b.id: b for b in BADGE_CATALOG}


def get_badge(badge_id: str) -> Badge | None:
    """Fetch a catalog entry by id."""
    return _BY_ID.get(badge_id)


def badge_xp_bonus(badge_id: str) -> int:
    badge = _BY_ID.get(badge_id)
    return badge.xp_bonus if badge else 0
