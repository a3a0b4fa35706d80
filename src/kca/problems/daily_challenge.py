"""Problem-of-the-day rotation.

One challenge per ISO day. Entries older than ``retain_days`` are dropped
whenever a new day is rotated in, so the board never grows unbounded.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from datetime import date, timedelta

from kca.db.models import DailyChallenge, Problem, new_id


class DailyChallengeBoard:
    """Daily challenges keyed by ISO day."""

    def __init__(
        self,
        bonus_xp: int = 50,
        rng: random.Random | None = None,
        retain_days: int = 30,
    ) -> None:
        self.bonus_xp = bonus_xp
        self.retain_days = retain_days
        self._rng = rng or random.Random()
        self._by_day: dict[str, DailyChallenge] = {}

    def __len__(self) -> int:
        return len(self._by_day)

    def put(self, challenge: DailyChallenge) -> None:
        """Pin a challenge for its day, replacing any existing one."""
        self._by_day[challenge.date] = challenge

    def for_day(self, day: str) -> DailyChallenge | None:
        return self._by_day.get(day)

    def rotate(self, day: str, problems: Sequence[Problem]) -> DailyChallenge:
        """Return the challenge for ``day``, picking a random problem if none is set.

        Raises:
            LookupError: If there is no challenge yet and ``problems`` is empty.
        """
        existing = self._by_day.get(day)
        if existing is not None:
            return existing
        if not problems:
            msg = "No problems available for a daily challenge"
            raise LookupError(msg)

        challenge = DailyChallenge(
            id=new_id(),
            problem_id=self._rng.choice(list(problems)).id,
            date=day,
            bonus_xp=self.bonus_xp,
        )
        self._by_day[day] = challenge
        self.prune_before((date.fromisoformat(day) - timedelta(days=self.retain_days)).isoformat())
        return challenge

    def prune_before(self, day: str) -> int:
        """Drop challenges dated strictly before ``day``. Returns how many were dropped."""
        stale = [d for d in self._by_day if d < day]
        for d in stale:
            del self._by_day[d]
        return len(stale)

    def reset(self) -> None:
        self._by_day.clear()
