"""Badge catalog tests."""

from kca.gamification.badges import BADGE_CATALOG, badge_xp_bonus, get_badge
from kca.gamification.progression import SOLVE_COUNT_BADGES, STREAK_BADGES


class TestBadgeCatalog:
    def test_twelve_badges(self):
        assert len(BADGE_CATALOG) == 12

    def test_ids_are_unique(self):
        ids = [b.id for b in BADGE_CATALOG]
        assert len(ids) == len(set(ids))

    def test_every_auto_awarded_badge_is_in_catalog(self):
        for slug, _ in SOLVE_COUNT_BADGES + STREAK_BADGES:
            assert get_badge(slug) is not None

    def test_xp_bonuses(self):
        assert badge_xp_bonus("first-solve") == 50
        assert badge_xp_bonus("ten-solves") == 150
        assert badge_xp_bonus("fifty-solves") == 500
        assert badge_xp_bonus("streak-7") == 100
        assert badge_xp_bonus("streak-14") == 200
        assert badge_xp_bonus("streak-30") == 500

    def test_unknown_badge(self):
        assert get_badge("nope") is None
        assert badge_xp_bonus("nope") == 0
