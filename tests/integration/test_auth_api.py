"""Integration tests for /api/auth endpoints."""

from __future__ import annotations

import pytest
from httpx import AsyncClient

from kca.auth.jwt import create_access_token


class TestRegister:
    """POST /api/auth/register."""

    @pytest.mark.asyncio
    async def test_new_account_has_fresh_progression(self, new_student: dict):
        user = new_student["user"]
        assert user["username"] == "newbie"
        assert user["role"] == "student"
        assert user["grade"] == 6
        assert user["xp"] == 0
        assert user["level"] == 1
        assert user["rank"] == "Bronze"
        assert user["streak"] == 0
        assert user["longest_streak"] == 0
        assert user["last_active_date"] is None
        assert user["badges"] == []
        assert user["solved_problems"] == []
        assert user["is_verified"] is True
        assert "password_hash" not in user
        assert new_student["token"]

    @pytest.mark.asyncio
    async def test_token_from_register_works(self, client: AsyncClient, new_student: dict):
        response = await client.get("/api/auth/me", headers=new_student["headers"])
        assert response.status_code == 200
        assert response.json()["id"] == new_student["user"]["id"]

    @pytest.mark.asyncio
    async def test_parent_email_needs_verification(self, client: AsyncClient):
        response = await client.post("/api/auth/register", json={
            "username": "little_one",
            "email": "little@example.com",
            "password": "secret123",
            "parent_email": "parent@example.com",
        })
        assert response.status_code == 201
        assert response.json()["user"]["is_verified"] is False
        assert response.json()["user"]["parent_email"] == "parent@example.com"

    @pytest.mark.asyncio
    async def test_duplicate_email_case_insensitive(self, client: AsyncClient):
        response = await client.post("/api/auth/register", json={
            "username": "someone_else",
            "email": "ALEX@example.com",
            "password": "secret123",
        })
        assert response.status_code == 400
        assert response.json()["detail"] == "Email already registered"

    @pytest.mark.asyncio
    async def test_duplicate_username(self, client: AsyncClient):
        response = await client.post("/api/auth/register", json={
            "username": "alex_coder",
            "email": "another@example.com",
            "password": "secret123",
        })
        assert response.status_code == 400
        assert response.json()["detail"] == "Username already taken"

    @pytest.mark.asyncio
    async def test_duplicate_username_case_insensitive(self, client: AsyncClient):
        response = await client.post("/api/auth/register", json={
            "username": "Alex_Coder",
            "email": "another@example.com",
            "password": "secret123",
        })
        assert response.status_code == 400
        assert response.json()["detail"] == "Username already taken"

    @pytest.mark.asyncio
    async def test_weak_password(self, client: AsyncClient):
        response = await client.post("/api/auth/register", json={
            "username": "weakling",
            "email": "weak@example.com",
            "password": "abc",
        })
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_cannot_self_register_as_admin(self, client: AsyncClient):
        response = await client.post("/api/auth/register", json={
            "username": "sneaky",
            "email": "sneaky@example.com",
            "password": "secret123",
            "role": "admin",
        })
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_missing_fields(self, client: AsyncClient):
        response = await client.post("/api/auth/register", json={"email": "x@example.com"})
        assert response.status_code == 422
        assert response.json()["detail"] == "Validation error"

    @pytest.mark.asyncio
    async def test_username_is_sanitized(self, client: AsyncClient):
        response = await client.post("/api/auth/register", json={
            "username": "<b>bold</b>",
            "email": "bold@example.com",
            "password": "secret123",
        })
        assert response.status_code == 201
        assert response.json()["user"]["username"] == "&lt;b&gt;bold&lt;/b&gt;"


class TestLogin:
    """POST /api/auth/login."""

    @pytest.mark.asyncio
    async def test_demo_account_login(self, client: AsyncClient):
        response = await client.post("/api/auth/login", json={"email": "alex@example.com", "password": "demo123"})
        assert response.status_code == 200
        data = response.json()
        assert data["user"]["id"] == "student-001"
        assert data["token"]

    @pytest.mark.asyncio
    async def test_registered_account_login(self, client: AsyncClient, new_student: dict):
        response = await client.post("/api/auth/login", json={"email": "Newbie@Example.com", "password": "secret123"})
        assert response.status_code == 200
        assert response.json()["user"]["id"] == new_student["user"]["id"]

    @pytest.mark.asyncio
    async def test_wrong_password(self, client: AsyncClient):
        response = await client.post("/api/auth/login", json={"email": "alex@example.com", "password": "nope1234"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid credentials"

    @pytest.mark.asyncio
    async def test_unknown_email(self, client: AsyncClient):
        response = await client.post("/api/auth/login", json={"email": "ghost@example.com", "password": "demo123"})
        assert response.status_code == 401


class TestCurrentUser:
    """GET /api/auth/me and PUT /api/auth/profile."""

    @pytest.mark.asyncio
    async def test_me_requires_token(self, client: AsyncClient):
        response = await client.get("/api/auth/me")
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_me_rejects_bad_token(self, client: AsyncClient):
        response = await client.get("/api/auth/me", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_me_for_vanished_user(self, client: AsyncClient):
        token = create_access_token("does-not-exist", "student", "gone@example.com")
        response = await client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_me(self, client: AsyncClient, student_headers: dict):
        response = await client.get("/api/auth/me", headers=student_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["username"] == "sam_code"
        assert data["xp"] == 800

    @pytest.mark.asyncio
    async def test_update_profile(self, client: AsyncClient, student_headers: dict):
        response = await client.put(
            "/api/auth/profile",
            json={"theme": "dark", "grade": 7, "avatar": "\U0001f436"},
            headers=student_headers,
        )
        assert response.status_code == 200
        data = response.json()
        assert data["theme"] == "dark"
        assert data["grade"] == 7
        assert data["avatar"] == "\U0001f436"

    @pytest.mark.asyncio
    async def test_partial_profile_update(self, client: AsyncClient, student_headers: dict):
        response = await client.put("/api/auth/profile", json={"theme": "dark"}, headers=student_headers)
        assert response.json()["grade"] == 4

    @pytest.mark.asyncio
    async def test_invalid_theme(self, client: AsyncClient, student_headers: dict):
        response = await client.put("/api/auth/profile", json={"theme": "neon"}, headers=student_headers)
        assert response.status_code == 422


class TestListings:
    @pytest.mark.asyncio
    async def test_all_users_admin_only(self, client: AsyncClient, student_headers: dict, admin_headers: dict):
        assert (await client.get("/api/auth/all", headers=student_headers)).status_code == 403
        response = await client.get("/api/auth/all", headers=admin_headers)
        assert response.status_code == 200
        assert len(response.json()) == 6

    @pytest.mark.asyncio
    async def test_leaderboard(self, client: AsyncClient):
        response = await client.get("/api/auth/leaderboard")
        assert response.status_code == 200
        board = response.json()
        assert [e["username"] for e in board] == ["maya_dev", "alex_coder", "sam_code"]
        assert [e["position"] for e in board] == [1, 2, 3]
        assert "email" not in board[0]

    @pytest.mark.asyncio
    async def test_leaderboard_excludes_staff(self, client: AsyncClient):
        board = (await client.get("/api/auth/leaderboard")).json()
        assert "admin" not in {e["username"] for e in board}
