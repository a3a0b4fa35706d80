"""Request/response schemas for mentor booking endpoints."""

from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

_TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class MentorProfile(BaseModel):
    id: str
    username: str
    email: str
    avatar: str
    specialization: str
    rating: float
    sessions_completed: int
    bio: str


class SlotResponse(BaseModel):
    id: str
    mentor_id: str
    date: str
    start_time: str
    end_time: str
    duration: int
    price: float
    is_booked: bool
    student_id: str | None
    meeting_link: str | None
    status: str


class SlotWithNamesResponse(SlotResponse):
    mentor_name: str
    student_name: str | None


class BookingResponse(SlotResponse):
    mentor_name: str
    mentor_avatar: str | None


class BookingConfirmation(BaseModel):
    message: str
    slot: SlotResponse


class SlotCreateRequest(BaseModel):
    date: str
    start_time: str = Field(..., pattern=_TIME_PATTERN)
    end_time: str = Field(..., pattern=_TIME_PATTERN)
    duration: Literal[1, 2] = 1
    price: float = Field(25, ge=0)

    @field_validator("date")
    @classmethod
    def iso_day(cls, v: str) -> str:
        """Accept only ISO calendar days (YYYY-MM-DD)."""
        return date.fromisoformat(v).isoformat()

    @model_validator(mode="after")
    def check_times(self) -> SlotCreateRequest:
        if self.end_time <= self.start_time:
            msg = "end_time must be after start_time"
            raise ValueError(msg)
        return self
