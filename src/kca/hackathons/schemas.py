"""Request/response schemas for hackathon endpoints."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator, model_validator

from kca.sanitize import SafeText


def _as_utc(value: datetime | None) -> datetime | None:
    """Naive timestamps are taken to be UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class HackathonScoreResponse(BaseModel):
    user_id: str
    score: int
    solved_count: int
    total_time: int
    username: str
    avatar: str


class RankedScoreResponse(HackathonScoreResponse):
    rank: int


class HackathonSummary(BaseModel):
    id: str
    title: str
    description: str
    start_time: datetime
    end_time: datetime
    problems: list[str]
    participants: list[str]
    participant_count: int
    status: str
    is_active: bool
    is_premium: bool
    created_at: datetime


class HackathonDetail(HackathonSummary):
    leaderboard: list[HackathonScoreResponse]


class HackathonCreateRequest(BaseModel):
    title: SafeText = Field(..., min_length=1, max_length=200)
    description: SafeText = Field("", max_length=5_000)
    start_time: datetime
    end_time: datetime
    problems: list[str] = Field(default_factory=list)
    is_premium: bool = False

    @field_validator("start_time", "end_time")
    @classmethod
    def assume_utc(cls, v: datetime | None) -> datetime | None:
        return _as_utc(v)

    @model_validator(mode="after")
    def check_window(self) -> HackathonCreateRequest:
        if self.end_time <= self.start_time:
            msg = "end_time must be after start_time"
            raise ValueError(msg)
        return self


class HackathonUpdateRequest(BaseModel):
    """Partial update; only fields present in the body change."""

    title: SafeText | None = Field(None, min_length=1, max_length=200)
    description: SafeText | None = Field(None, max_length=5_000)
    start_time: datetime | None = None
    end_time: datetime | None = None
    problems: list[str] | None = None
    is_active: bool | None = None
    is_premium: bool | None = None

    @field_validator("start_time", "end_time")
    @classmethod
    def assume_utc(cls, v: datetime | None) -> datetime | None:
        return _as_utc(v)
