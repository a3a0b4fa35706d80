"""Daily streak rules: calendar days in UTC."""

from datetime import datetime, timedelta, timezone

from kca.db.models import User
from kca.gamification.streak_service import get_day_iso, get_previous_day_iso, update_daily_streak

NOW = datetime(2026, 3, 10, 15, 0, 0, tzinfo=timezone.utc)


def _user(**kwargs) -> User:
    return User(id="u1", username="u1", email="u1@example.com", password_hash="x", **kwargs)


class TestDayHelpers:
    def test_day_iso_is_utc(self):
        dt = datetime(2026, 3, 2, 1, 0, 0, tzinfo=timezone(timedelta(hours=5)))
        assert get_day_iso(dt) == "2026-03-01"

    def test_naive_datetime_taken_as_is(self):
        assert get_day_iso(datetime(2026, 3, 2, 23, 59)) == "2026-03-02"

    def test_previous_day(self):
        assert get_previous_day_iso("2026-03-01") == "2026-02-28"

    def test_previous_day_leap_year(self):
        assert get_previous_day_iso("2024-03-01") == "2024-02-29"

    def test_previous_day_year_boundary(self):
        assert get_previous_day_iso("2026-01-01") == "2025-12-31"


class TestUpdateDailyStreak:
    def test_first_ever_solve_starts_streak(self):
        user = _user()
        update_daily_streak(user, NOW)
        assert user.streak == 1
        assert user.longest_streak == 1
        assert user.last_active_date == NOW

    def test_same_day_is_unchanged(self):
        earlier = NOW - timedelta(hours=5)
        user = _user(streak=3, longest_streak=3, last_active_date=earlier)
        update_daily_streak(user, NOW)
        assert user.streak == 3
        assert user.last_active_date == earlier

    def test_consecutive_day_increments(self):
        user = _user(streak=3, longest_streak=3, last_active_date=NOW - timedelta(days=1))
        update_daily_streak(user, NOW)
        assert user.streak == 4
        assert user.longest_streak == 4
        assert user.last_active_date == NOW

    def test_midnight_boundary_counts_as_consecutive(self):
        last = datetime(2026, 3, 9, 23, 59, 59, tzinfo=timezone.utc)
        now = datetime(2026, 3, 10, 0, 0, 1, tzinfo=timezone.utc)
        user = _user(streak=2, longest_streak=2, last_active_date=last)
        update_daily_streak(user, now)
        assert user.streak == 3

    def test_gap_resets_streak(self):
        user = _user(streak=9, longest_streak=9, last_active_date=NOW - timedelta(days=2))
        update_daily_streak(user, NOW)
        assert user.streak == 1
        assert user.longest_streak == 9
        assert user.last_active_date == NOW

    def test_freeze_keeps_broken_streak(self):
        user = _user(streak=5, longest_streak=6, streak_freeze_used=True, last_active_date=NOW - timedelta(days=3))
        update_daily_streak(user, NOW)
        assert user.streak == 5
        assert user.last_active_date == NOW

    def test_freeze_flag_is_never_written(self):
        user = _user(streak=5, longest_streak=5, last_active_date=NOW - timedelta(days=3))
        update_daily_streak(user, NOW)
        assert user.streak_freeze_used is False

        frozen = _user(streak=5, longest_streak=5, streak_freeze_used=True, last_active_date=NOW - timedelta(days=3))
        update_daily_streak(frozen, NOW)
        assert frozen.streak_freeze_used is True

    def test_longest_streak_never_below_streak(self):
        user = _user(streak=4, longest_streak=1, last_active_date=NOW)
        update_daily_streak(user, NOW)
        assert user.longest_streak == 4
