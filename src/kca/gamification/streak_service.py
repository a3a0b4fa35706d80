"""Daily streak tracking: calendar-day comparison in UTC."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from kca.db.models import User


def get_day_iso(dt: datetime) -> str:
    """ISO calendar day of ``dt`` in UTC, e.g. '2026-02-23'."""
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    return dt.date().isoformat()


def get_previous_day_iso(day: str) -> str:
    return (date.fromisoformat(day) - timedelta(days=1)).isoformat()


def update_daily_streak(user: User, now: datetime) -> None:
    """Advance, reset or keep the user's streak for a solve at ``now``.

    Only the first solve of a new day moves the streak and stamps
    ``last_active_date``; later solves on the same day leave both alone.
    ``streak_freeze_used`` is read but never written here: once it is True a
    broken streak is kept instead of reset.
    """
    today = get_day_iso(now)
    last_day = get_day_iso(user.last_active_date) if user.last_active_date else None

    if last_day != today:
        if last_day == get_previous_day_iso(today):
            user.streak += 1
        elif not user.streak_freeze_used:
            user.streak = 1
        user.last_active_date = now

    if user.streak > user.longest_streak:
        user.longest_streak = user.streak
