"""Repository interfaces and their in-memory implementations.

Handlers and services only talk to these interfaces, so the in-memory
dictionaries can be replaced by a real database without touching callers.
All methods are async to keep that swap mechanical.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, Protocol, TypeVar

from kca.db.models import Hackathon, MentorSlot, Problem, Submission, User


class _HasId(Protocol):
    id: str


T = TypeVar("T", bound=_HasId)


class UserStore(Protocol):
    async def find_by_id(self, user_id: str) -> User | None: ...

    async def find_by_email(self, email: str) -> User | None: ...

    async def find_by_username(self, username: str) -> User | None: ...

    async def save(self, user: User) -> User: ...

    async def list_all(self) -> list[User]: ...


class InMemoryRepository(Generic[T]):
    """Id-keyed collection preserving insertion order."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: dict[str, T] = {}
        for item in items:
            self._items[item.id] = item

    def __len__(self) -> int:
        return len(self._items)

    async def find_by_id(self, item_id: str) -> T | None:
        return self._items.get(item_id)

    async def save(self, item: T) -> T:
        self._items[item.id] = item
        return item

    async def list_all(self) -> list[T]:
        return list(self._items.values())


class InMemoryUserStore(InMemoryRepository[User]):
    async def find_by_email(self, email: str) -> User | None:
        """Case-insensitive email lookup."""
        wanted = email.lower().strip()
        for user in self._items.values():
            if user.email.lower() == wanted:
                return user
        return None

    async def find_by_username(self, username: str) -> User | None:
        """Case-insensitive username lookup."""
        wanted = username.lower().strip()
        for user in self._items.values():
            if user.username.lower() == wanted:
                return user
        return None

    async def list_by_role(self, role: str) -> list[User]:
        return [u for u in self._items.values() if u.role == role]


class InMemoryProblemStore(InMemoryRepository[Problem]):
    async def list_active(self) -> list[Problem]:
        return [p for p in self._items.values() if p.is_active]


class InMemoryHackathonStore(InMemoryRepository[Hackathon]):
    pass


class InMemoryMentorSlotStore(InMemoryRepository[MentorSlot]):
    async def list_for_mentor(self, mentor_id: str) -> list[MentorSlot]:
        return [s for s in self._items.values() if s.mentor_id == mentor_id]

    async def list_for_student(self, student_id: str) -> list[MentorSlot]:
        return [s for s in self._items.values() if s.student_id == student_id]


class InMemorySubmissionStore:
    """Append-only submission log."""

    def __init__(self, items: Iterable[Submission] = ()) -> None:
        self._items: list[Submission] = list(items)

    def __len__(self) -> int:
        return len(self._items)

    async def append(self, submission: Submission) -> Submission:
        self._items.append(submission)
        return submission

    async def list_all(self) -> list[Submission]:
        return list(self._items)

    async def list_for_user(self, user_id: str) -> list[Submission]:
        return [s for s in self._items if s.user_id == user_id]

    async def list_for_user_problem(self, user_id: str, problem_id: str) -> list[Submission]:
        return [s for s in self._items if s.user_id == user_id and s.problem_id == problem_id]
