"""In-memory repositories and the seeded store."""

from datetime import datetime, timezone

import pytest

from kca.database import UserLocks, build_store
from kca.db.models import MentorSlot, Problem, Submission, User
from kca.db.repositories import (
    InMemoryMentorSlotStore,
    InMemoryProblemStore,
    InMemorySubmissionStore,
    InMemoryUserStore,
)

NOW = datetime(2026, 3, 10, 12, 0, 0, tzinfo=timezone.utc)


def _user(uid: str, email: str, role: str = "student") -> User:
    return User(id=uid, username=uid, email=email, password_hash="x", role=role)


class TestUserStore:
    @pytest.mark.asyncio
    async def test_find_by_email_is_case_insensitive(self):
        users = InMemoryUserStore([_user("u1", "Kid@Example.com")])
        found = await users.find_by_email("kid@example.COM")
        assert found is not None
        assert found.id == "u1"

    @pytest.mark.asyncio
    async def test_find_by_username_is_case_insensitive(self):
        users = InMemoryUserStore([_user("u1", "a@example.com")])
        assert (await users.find_by_username("u1")).id == "u1"
        assert (await users.find_by_username("U1")).id == "u1"
        assert await users.find_by_username("u2") is None

    @pytest.mark.asyncio
    async def test_save_replaces_by_id(self):
        users = InMemoryUserStore([_user("u1", "a@example.com")])
        updated = _user("u1", "b@example.com")
        await users.save(updated)
        assert len(users) == 1
        assert (await users.find_by_id("u1")).email == "b@example.com"

    @pytest.mark.asyncio
    async def test_list_by_role(self):
        users = InMemoryUserStore([_user("u1", "a@example.com"), _user("m1", "m@example.com", role="mentor")])
        assert [u.id for u in await users.list_by_role("mentor")] == ["m1"]


class TestOtherStores:
    @pytest.mark.asyncio
    async def test_list_active_problems(self):
        problems = InMemoryProblemStore([
            Problem(id="p1", title="a", description="", difficulty="easy", xp_reward=1),
            Problem(id="p2", title="b", description="", difficulty="easy", xp_reward=1, is_active=False),
        ])
        assert [p.id for p in await problems.list_active()] == ["p1"]
        assert len(await problems.list_all()) == 2

    @pytest.mark.asyncio
    async def test_submissions_are_append_only(self):
        subs = InMemorySubmissionStore()
        for i, (user_id, problem_id) in enumerate([("u1", "p1"), ("u1", "p2"), ("u2", "p1"), ("u1", "p1")]):
            await subs.append(Submission(
                id=f"s{i}", user_id=user_id, problem_id=problem_id, language="python",
                code="x", status="accepted", created_at=NOW,
            ))
        assert len(subs) == 4
        assert [s.id for s in await subs.list_for_user("u1")] == ["s0", "s1", "s3"]
        assert [s.id for s in await subs.list_for_user_problem("u1", "p1")] == ["s0", "s3"]
        assert not hasattr(subs, "save")

    @pytest.mark.asyncio
    async def test_mentor_slot_lookups(self):
        slots = InMemoryMentorSlotStore([
            MentorSlot(id="s1", mentor_id="m1", date="2026-03-10", start_time="10:00", end_time="11:00"),
            MentorSlot(id="s2", mentor_id="m2", date="2026-03-10", start_time="10:00", end_time="11:00",
                       student_id="u1", is_booked=True, status="booked"),
        ])
        assert [s.id for s in await slots.list_for_mentor("m1")] == ["s1"]
        assert [s.id for s in await slots.list_for_student("u1")] == ["s2"]


class TestUserLocks:
    def test_same_user_same_lock(self):
        locks = UserLocks()
        assert locks.for_user("u1") is locks.for_user("u1")

    def test_different_users_different_locks(self):
        locks = UserLocks()
        assert locks.for_user("u1") is not locks.for_user("u2")


class TestSeededStore:
    def test_empty_store(self):
        store = build_store(seed=False)
        assert len(store.users) == 0
        assert len(store.problems) == 0
        assert len(store.daily_challenges) == 0

    @pytest.mark.asyncio
    async def test_demo_data(self):
        store = build_store(seed=True, now=NOW)
        assert len(store.users) == 6
        assert len(store.problems) == 10
        assert len(store.submissions) == 2
        assert len(store.hackathons) == 1
        assert len(store.mentor_slots) == 2

        challenge = store.daily_challenges.for_day("2026-03-10")
        assert challenge is not None
        assert challenge.problem_id == "p5"
        assert challenge.bonus_xp == 50

    @pytest.mark.asyncio
    async def test_demo_students_follow_progression_rules(self):
        store = build_store(seed=True, now=NOW)
        for user in await store.users.list_by_role("student"):
            assert user.level == user.xp // 200 + 1
            assert user.longest_streak >= user.streak
            assert len(set(user.solved_problems)) == len(user.solved_problems)

    @pytest.mark.asyncio
    async def test_demo_hackathon_starts_in_two_days(self):
        store = build_store(seed=True, now=NOW)
        hackathon = await store.hackathons.find_by_id("hack-001")
        assert hackathon.status_at(NOW) == "upcoming"
        assert (hackathon.start_time - NOW).days == 2
