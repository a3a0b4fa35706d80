"""Daily challenge board tests."""

import random

import pytest

from kca.db.models import DailyChallenge, Problem
from kca.problems.daily_challenge import DailyChallengeBoard

PROBLEMS = [
    Problem(id=f"p{i}", title=f"P{i}", description="", difficulty="easy", xp_reward=50) for i in range(1, 6)
]


class TestRotate:
    def test_creates_challenge_from_problems(self):
        board = DailyChallengeBoard(bonus_xp=50, rng=random.Random(1))
        challenge = board.rotate("2026-03-10", PROBLEMS)
        assert challenge.date == "2026-03-10"
        assert challenge.bonus_xp == 50
        assert challenge.problem_id in {p.id for p in PROBLEMS}
        assert board.for_day("2026-03-10") == challenge

    def test_same_day_returns_existing(self):
        board = DailyChallengeBoard(rng=random.Random(1))
        first = board.rotate("2026-03-10", PROBLEMS)
        assert board.rotate("2026-03-10", PROBLEMS) is first
        assert board.rotate("2026-03-10", []) is first
        assert len(board) == 1

    def test_no_problems_raises(self):
        board = DailyChallengeBoard()
        with pytest.raises(LookupError):
            board.rotate("2026-03-10", [])

    def test_seeded_boards_pick_the_same_problem(self):
        a = DailyChallengeBoard(rng=random.Random(42)).rotate("2026-03-10", PROBLEMS)
        b = DailyChallengeBoard(rng=random.Random(42)).rotate("2026-03-10", PROBLEMS)
        assert a.problem_id == b.problem_id

    def test_configured_bonus(self):
        board = DailyChallengeBoard(bonus_xp=75)
        assert board.rotate("2026-03-10", PROBLEMS).bonus_xp == 75

    def test_old_days_are_dropped_on_rotate(self):
        board = DailyChallengeBoard(retain_days=30)
        board.put(DailyChallenge(id="old", problem_id="p1", date="2026-01-01", bonus_xp=50))
        board.put(DailyChallenge(id="recent", problem_id="p1", date="2026-02-20", bonus_xp=50))
        board.rotate("2026-03-10", PROBLEMS)
        assert board.for_day("2026-01-01") is None
        assert board.for_day("2026-02-20") is not None


class TestBoardState:
    def test_put_replaces(self):
        board = DailyChallengeBoard()
        board.put(DailyChallenge(id="a", problem_id="p1", date="2026-03-10", bonus_xp=50))
        board.put(DailyChallenge(id="b", problem_id="p2", date="2026-03-10", bonus_xp=50))
        assert board.for_day("2026-03-10").id == "b"

    def test_prune_before(self):
        board = DailyChallengeBoard()
        for day in ("2026-03-08", "2026-03-09", "2026-03-10"):
            board.put(DailyChallenge(id=day, problem_id="p1", date=day, bonus_xp=50))
        assert board.prune_before("2026-03-10") == 2
        assert len(board) == 1

    def test_reset(self):
        board = DailyChallengeBoard()
        board.rotate("2026-03-10", PROBLEMS)
        board.reset()
        assert len(board) == 0
        assert board.for_day("2026-03-10") is None
