"""Level and rank computation tests."""

import pytest

from kca.gamification.level_thresholds import (
    RANK_THRESHOLDS,
    XP_PER_LEVEL,
    compute_level,
    compute_rank,
    xp_to_next_level,
)


class TestComputeLevel:
    """Level is floor(xp / 200) + 1."""

    @pytest.mark.parametrize(
        ("xp", "level"),
        [(0, 1), (199, 1), (200, 2), (399, 2), (400, 3), (2450, 13), (5000, 26)],
    )
    def test_levels(self, xp, level):
        assert compute_level(xp) == level

    def test_xp_to_next_level(self):
        assert xp_to_next_level(1) == 200
        assert xp_to_next_level(12) == 2400

    def test_next_level_boundary_matches_compute_level(self):
        for level in range(1, 30):
            assert compute_level(xp_to_next_level(level)) == level + 1
            assert compute_level(xp_to_next_level(level) - 1) == level


class TestComputeRank:
    @pytest.mark.parametrize(
        ("xp", "rank"),
        [
            (0, "Bronze"),
            (999, "Bronze"),
            (1000, "Silver"),
            (1999, "Silver"),
            (2000, "Gold"),
            (2999, "Gold"),
            (3000, "Platinum"),
            (4999, "Platinum"),
            (5000, "Diamond"),
            (100_000, "Diamond"),
        ],
    )
    def test_rank_boundaries(self, xp, rank):
        assert compute_rank(xp) == rank

    def test_thresholds_are_descending(self):
        mins = [t["min_xp"] for t in RANK_THRESHOLDS]
        assert mins == sorted(mins, reverse=True)
        assert mins[-1] == 0

    def test_xp_per_level(self):
        assert XP_PER_LEVEL == 200
