"""Pydantic response models for dashboard endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from kca.auth.schemas import UserResponse
from kca.gamification.schemas import BadgeResponse
from kca.problems.schemas import SubmissionResponse


# --- Student ---


class StudentProfile(BaseModel):
    username: str
    avatar: str
    level: int
    xp: int
    xp_to_next_level: int
    rank: str
    grade: int
    streak: int
    longest_streak: int
    streak_freeze_available: bool
    subscription: str
    member_since: datetime


class StudentStats(BaseModel):
    total_solved: int
    total_submissions: int
    accepted_submissions: int
    acceptance_rate: int
    solved_by_difficulty: dict[str, int]
    language_stats: dict[str, int]
    total_problems: int


class WeeklyProgressEntry(BaseModel):
    day: str
    date: str
    problems: int
    xp: int


class StudentDashboardResponse(BaseModel):
    profile: StudentProfile
    stats: StudentStats
    heatmap: dict[str, int]
    weekly_progress: list[WeeklyProgressEntry]
    badges: list[BadgeResponse]
    recent_submissions: list[SubmissionResponse]


# --- Admin ---


class AdminOverview(BaseModel):
    total_students: int
    active_students: int
    total_problems: int
    total_submissions: int
    today_submissions: int
    pro_users: int
    total_hackathons: int


class DailySubmissionsEntry(BaseModel):
    date: str
    submissions: int
    users: int


class GradeBucket(BaseModel):
    grade: int
    students: int


class AdminDashboardResponse(BaseModel):
    overview: AdminOverview
    daily_submissions: list[DailySubmissionsEntry]
    grade_distribution: list[GradeBucket]
    recent_students: list[UserResponse]


# --- Developer ---


class QuestionBank(BaseModel):
    total: int
    active: int
    by_difficulty: dict[str, int]


class SubmissionTotals(BaseModel):
    total: int
    today: int
    accepted: int


class ServiceInfo(BaseModel):
    version: str
    environment: str
    started_at: datetime
    uptime_seconds: int
    registered_users: int
    daily_challenges: int


class DeveloperDashboardResponse(BaseModel):
    question_bank: QuestionBank
    submissions: SubmissionTotals
    service: ServiceInfo
