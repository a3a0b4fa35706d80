"""Progression engine: XP, streak, level, rank and badges for a newly solved problem.

The order of the steps decides which thresholds a single solve crosses, so it
is fixed: XP (+ daily bonus) -> streak -> level -> rank -> badges. Badge XP is
added after level and rank are computed and does not feed back into them
until the next solve.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime

from kca.db.models import DailyChallenge, Problem, User
from kca.gamification.badges import badge_xp_bonus
from kca.gamification.level_thresholds import compute_level, compute_rank
from kca.gamification.streak_service import get_day_iso, update_daily_streak

logger = logging.getLogger(__name__)

SOLVE_COUNT_BADGES: list[tuple[str, int]] = [
    ("first-solve", 1),
    ("ten-solves", 10),
    ("fifty-solves", 50),
]

STREAK_BADGES: list[tuple[str, int]] = [
    ("streak-7", 7),
    ("streak-14", 14),
    ("streak-30", 30),
]


@dataclass(frozen=True)
class ProgressionResult:
    """What a single ``record_solve`` call changed."""

    applied: bool
    xp_before: int
    xp_after: int
    streak_before: int
    streak_after: int
    level_before: int
    level_after: int
    rank_before: str
    rank_after: str
    daily_bonus_xp: int = 0
    badges_awarded: tuple[str, ...] = field(default_factory=tuple)

    @property
    def xp_gained(self) -> int:
        return self.xp_after - self.xp_before

    @property
    def leveled_up(self) -> bool:
        return self.level_after > self.level_before


def unchanged_result(user: User) -> ProgressionResult:
    """Summary for a solve that changed nothing."""
    return ProgressionResult(
        applied=False,
        xp_before=user.xp,
        xp_after=user.xp,
        streak_before=user.streak,
        streak_after=user.streak,
        level_before=user.level,
        level_after=user.level,
        rank_before=user.rank,
        rank_after=user.rank,
    )


def evaluate_badges(user: User) -> list[str]:
    """Award every unlocked badge the user does not hold yet.

    Returns the newly awarded badge ids in evaluation order.
    """
    checks = [(slug, len(user.solved_problems) >= n) for slug, n in SOLVE_COUNT_BADGES]
    checks += [(slug, user.streak >= n) for slug, n in STREAK_BADGES]

    awarded = []
    for slug, unlocked in checks:
        if unlocked and slug not in user.badges:
            user.badges.append(slug)
            user.xp += badge_xp_bonus(slug)
            awarded.append(slug)
    return awarded


def record_solve(
    user: User,
    problem: Problem,
    now: datetime,
    daily_challenge: DailyChallenge | None = None,
) -> ProgressionResult:
    """Apply all gamification side effects of ``user`` solving ``problem``.

    A problem already in ``user.solved_problems`` is a no-op. Mutates ``user``
    in place and never raises; callers validate inputs and hold the user's
    lock.
    """
    if problem.id in user.solved_problems:
        return unchanged_result(user)

    xp_before = user.xp
    streak_before = user.streak
    level_before = user.level
    rank_before = user.rank

    user.solved_problems.append(problem.id)
    user.xp += problem.xp_reward

    daily_bonus = 0
    if (
        daily_challenge is not None
        and daily_challenge.date == get_day_iso(now)
        and daily_challenge.problem_id == problem.id
    ):
        daily_bonus = daily_challenge.bonus_xp
        user.xp += daily_bonus

    update_daily_streak(user, now)

    user.level = compute_level(user.xp)
    user.rank = compute_rank(user.xp)

    awarded = evaluate_badges(user)

    logger.info(
        "Solve recorded: user=%s problem=%s xp=%d->%d streak=%d badges=%s",
        user.id, problem.id, xp_before, user.xp, user.streak, awarded,
    )

    return ProgressionResult(
        applied=True,
        xp_before=xp_before,
        xp_after=user.xp,
        streak_before=streak_before,
        streak_after=user.streak,
        level_before=level_before,
        level_after=user.level,
        rank_before=rank_before,
        rank_after=user.rank,
        daily_bonus_xp=daily_bonus,
        badges_awarded=tuple(awarded),
    )
