"""Request/response schemas for problem, daily-challenge and submission endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from kca.sanitize import SafeText

Difficulty = Literal["easy", "medium", "hard"]


# ---------------------------------------------------------------------------
# Problems
# ---------------------------------------------------------------------------


class TestCaseSchema(BaseModel):
    __test__ = False

    input: str = ""
    expected_output: str
    is_hidden: bool = False


class ProblemResponse(BaseModel):
    """A problem as students see it: no solution, no hidden test cases."""

    id: str
    title: str
    description: str
    difficulty: str
    xp_reward: int
    grade: list[int]
    topics: list[str]
    languages: list[str]
    test_cases: list[TestCaseSchema]
    hidden_test_count: int
    hints: list[str]
    starter_code: dict[str, str]
    created_at: datetime
    created_by: str
    is_active: bool


class ProblemCreateRequest(BaseModel):
    title: SafeText = Field(..., min_length=1, max_length=200)
    description: SafeText = Field(..., min_length=1, max_length=10_000)
    difficulty: Difficulty = "easy"
    xp_reward: int = Field(50, ge=0, le=10_000)
    grade: list[int] = Field(default_factory=list)
    topics: list[SafeText] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=lambda: ["python", "javascript", "java", "cpp"])
    test_cases: list[TestCaseSchema] = Field(..., min_length=1)
    hints: list[SafeText] = Field(default_factory=list)
    starter_code: dict[str, str] = Field(default_factory=dict)
    solution: str | None = None


class ProblemUpdateRequest(BaseModel):
    """Partial update; only fields present in the body change."""

    title: SafeText | None = Field(None, min_length=1, max_length=200)
    description: SafeText | None = Field(None, min_length=1, max_length=10_000)
    difficulty: Difficulty | None = None
    xp_reward: int | None = Field(None, ge=0, le=10_000)
    grade: list[int] | None = None
    topics: list[SafeText] | None = None
    languages: list[str] | None = None
    test_cases: list[TestCaseSchema] | None = Field(None, min_length=1)
    hints: list[SafeText] | None = None
    starter_code: dict[str, str] | None = None
    solution: str | None = None
    is_active: bool | None = None


class MessageResponse(BaseModel):
    message: str


class DailyChallengeResponse(BaseModel):
    id: str
    problem_id: str
    date: str
    bonus_xp: int
    problem: ProblemResponse | None


# ---------------------------------------------------------------------------
# Submissions
# ---------------------------------------------------------------------------


class SubmitRequest(BaseModel):
    """Source code is passed through untouched."""

    code: str = Field(..., min_length=1, max_length=50_000)
    language: str = Field(..., min_length=1, max_length=32)


class RunRequest(SubmitRequest):
    custom_input: str | None = Field(None, max_length=10_000)


class TestResultResponse(BaseModel):
    __test__ = False

    passed: bool
    input: str
    expected: str
    actual: str


class SubmissionResponse(BaseModel):
    id: str
    user_id: str
    problem_id: str
    language: str
    code: str
    status: str
    created_at: datetime
    execution_time_ms: int | None
    memory_mb: float | None
    output: str
    test_results: list[TestResultResponse]


class ProgressionSummary(BaseModel):
    """What the submission did to the submitter's progression."""

    applied: bool
    xp_gained: int
    daily_bonus_xp: int
    xp: int
    level: int
    leveled_up: bool
    rank: str
    rank_changed: bool
    streak: int
    badges_awarded: list[str]


class SubmitResponse(BaseModel):
    submission: SubmissionResponse
    progression: ProgressionSummary


class RunResponse(BaseModel):
    test_results: list[TestResultResponse]
    execution_time_ms: int
    memory_mb: float
