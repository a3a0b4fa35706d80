"""Shared test fixtures."""

from __future__ import annotations

import random
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from kca.auth.jwt import create_access_token
from kca.config import get_settings
from kca.database import DataStore, close_store, get_store, init_store
from kca.db.models import TestCase
from kca.main import create_app
from kca.problems.grader import ExecutionUsage, close_grader, get_grader, init_grader


class ScriptedGrader:
    """Grader whose verdict is set by the test."""

    def __init__(self, passes: bool = True) -> None:
        self.passes = passes
        self.calls: list[tuple[str, str, TestCase]] = []

    def run(self, code: str, language: str, test_case: TestCase) -> bool:
        self.calls.append((code, language, test_case))
        return self.passes

    def usage(self) -> ExecutionUsage:
        return ExecutionUsage(execution_time_ms=42, memory_mb=8.5)


@pytest.fixture
def grader() -> ScriptedGrader:
    return ScriptedGrader(passes=True)


@pytest_asyncio.fixture
async def client(grader: ScriptedGrader) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP test client over a freshly seeded store.

    ASGITransport does not run the lifespan, so the store and grader are
    initialized here the same way the lifespan does it.
    """
    get_settings.cache_clear()
    app = create_app()
    init_store(seed=True, daily_bonus_xp=50, rng=random.Random(1234))
    init_grader(seed=1234)
    app.dependency_overrides[get_grader] = lambda: grader

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    close_grader()
    close_store()


@pytest.fixture
def store(client: AsyncClient) -> DataStore:
    """The store behind ``client``."""
    return get_store()


def bearer(user_id: str, role: str, email: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user_id, role, email)}"}


@pytest.fixture
def student_headers() -> dict[str, str]:
    """sam_code: 800 XP, solved p1 and p2."""
    return bearer("student-003", "student", "sam@example.com")


@pytest.fixture
def alex_headers() -> dict[str, str]:
    """alex_coder: has one booked mentor slot."""
    return bearer("student-001", "student", "alex@example.com")


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return bearer("admin-001", "admin", "admin@kidscode.com")


@pytest.fixture
def developer_headers() -> dict[str, str]:
    return bearer("dev-001", "developer", "dev@kidscode.com")


@pytest.fixture
def mentor_headers() -> dict[str, str]:
    return bearer("mentor-001", "mentor", "sarah@kidscode.com")


@pytest_asyncio.fixture
async def new_student(client: AsyncClient) -> dict:
    """Register a brand-new student through the API. Returns the auth response plus headers."""
    response = await client.post("/api/auth/register", json={
        "username": "newbie",
        "email": "newbie@example.com",
        "password": "secret123",
        "grade": 6,
    })
    assert response.status_code == 201
    data = response.json()
    data["headers"] = {"Authorization": f"Bearer {data['token']}"}
    return data
