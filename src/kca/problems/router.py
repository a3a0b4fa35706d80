"""Problem API: catalog, daily challenge, submissions and authoring under /api/problems."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from kca.auth.dependencies import get_current_user, require_roles
from kca.database import DataStore, get_store
from kca.db.models import Problem, Submission, TestResult, User
from kca.gamification.progression import ProgressionResult
from kca.problems.grader import Grader, get_grader
from kca.problems.schemas import (
    DailyChallengeResponse,
    MessageResponse,
    ProblemCreateRequest,
    ProblemResponse,
    ProblemUpdateRequest,
    ProgressionSummary,
    RunRequest,
    RunResponse,
    SubmissionResponse,
    SubmitRequest,
    SubmitResponse,
    TestCaseSchema,
    TestResultResponse,
)
from kca.problems.service import (
    create_problem,
    deactivate_problem,
    filter_problems,
    get_today_challenge,
    list_topics,
    update_problem,
)
from kca.problems.submission_service import list_user_submissions, run_code, submit_solution

router = APIRouter(prefix="/api/problems", tags=["Problems"])


def problem_response(problem: Problem) -> ProblemResponse:
    """Build a ProblemResponse; hidden test cases and the solution are left out."""
    visible = [tc for tc in problem.test_cases if not tc.is_hidden]
    return ProblemResponse(
        id=problem.id,
        title=problem.title,
        description=problem.description,
        difficulty=problem.difficulty,
        xp_reward=problem.xp_reward,
        grade=problem.grade,
        topics=problem.topics,
        languages=problem.languages,
        test_cases=[
            TestCaseSchema(input=tc.input, expected_output=tc.expected_output, is_hidden=False) for tc in visible
        ],
        hidden_test_count=len(problem.test_cases) - len(visible),
        hints=problem.hints,
        starter_code=problem.starter_code,
        created_at=problem.created_at,
        created_by=problem.created_by,
        is_active=problem.is_active,
    )


def _test_results(results: list[TestResult] | tuple[TestResult, ...]) -> list[TestResultResponse]:
    return [TestResultResponse(passed=r.passed, input=r.input, expected=r.expected, actual=r.actual) for r in results]


def submission_response(submission: Submission) -> SubmissionResponse:
    return SubmissionResponse(
        id=submission.id,
        user_id=submission.user_id,
        problem_id=submission.problem_id,
        language=submission.language,
        code=submission.code,
        status=submission.status,
        created_at=submission.created_at,
        execution_time_ms=submission.execution_time_ms,
        memory_mb=submission.memory_mb,
        output=submission.output,
        test_results=_test_results(submission.test_results),
    )


def _progression_summary(result: ProgressionResult) -> ProgressionSummary:
    return ProgressionSummary(
        applied=result.applied,
        xp_gained=result.xp_gained,
        daily_bonus_xp=result.daily_bonus_xp,
        xp=result.xp_after,
        level=result.level_after,
        leveled_up=result.leveled_up,
        rank=result.rank_after,
        rank_changed=result.rank_after != result.rank_before,
        streak=result.streak_after,
        badges_awarded=list(result.badges_awarded),
    )


# ---- Catalog ----


@router.get("", response_model=list[ProblemResponse])
async def list_problems(
    grade: int | None = Query(None, ge=1, le=12),
    difficulty: str | None = None,
    language: str | None = None,
    topic: str | None = None,
    search: str | None = Query(None, max_length=100),
    store: DataStore = Depends(get_store),
) -> list[ProblemResponse]:
    """Active problems, optionally filtered."""
    problems = filter_problems(
        await store.problems.list_active(),
        grade=grade,
        difficulty=difficulty,
        language=language,
        topic=topic,
        search=search,
    )
    return [problem_response(p) for p in problems]


@router.get("/meta/topics", response_model=list[str])
async def topics(store: DataStore = Depends(get_store)) -> list[str]:
    return await list_topics(store)


@router.get("/daily/today", response_model=DailyChallengeResponse)
async def daily_today(store: DataStore = Depends(get_store)) -> DailyChallengeResponse:
    """Today's challenge and its problem."""
    try:
        challenge = await get_today_challenge(store)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e

    problem = await store.problems.find_by_id(challenge.problem_id)
    return DailyChallengeResponse(
        id=challenge.id,
        problem_id=challenge.problem_id,
        date=challenge.date,
        bonus_xp=challenge.bonus_xp,
        problem=problem_response(problem) if problem else None,
    )


@router.get("/{problem_id}", response_model=ProblemResponse)
async def get_problem(problem_id: str, store: DataStore = Depends(get_store)) -> ProblemResponse:
    problem = await store.problems.find_by_id(problem_id)
    if problem is None:
        raise HTTPException(status_code=404, detail="Problem not found")
    return problem_response(problem)


# ---- Solving ----


@router.post("/{problem_id}/submit", response_model=SubmitResponse)
async def submit(
    problem_id: str,
    body: SubmitRequest,
    user: User = Depends(get_current_user),
    store: DataStore = Depends(get_store),
    grader: Grader = Depends(get_grader),
) -> SubmitResponse:
    """Grade a solution; an accepted first solve updates XP, streak, level, rank and badges."""
    try:
        outcome = await submit_solution(store, grader, user.id, problem_id, body.code, body.language)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    return SubmitResponse(
        submission=submission_response(outcome.submission),
        progression=_progression_summary(outcome.progression),
    )


@router.post("/{problem_id}/run", response_model=RunResponse)
async def run(
    problem_id: str,
    body: RunRequest,
    _user: User = Depends(get_current_user),
    store: DataStore = Depends(get_store),
    grader: Grader = Depends(get_grader),
) -> RunResponse:
    """Try code against visible tests or a custom input. Nothing is recorded."""
    try:
        outcome = await run_code(store, grader, problem_id, body.code, body.language, body.custom_input)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    return RunResponse(
        test_results=_test_results(outcome.test_results),
        execution_time_ms=outcome.usage.execution_time_ms,
        memory_mb=outcome.usage.memory_mb,
    )


@router.get("/{problem_id}/submissions", response_model=list[SubmissionResponse])
async def my_submissions(
    problem_id: str,
    user: User = Depends(get_current_user),
    store: DataStore = Depends(get_store),
) -> list[SubmissionResponse]:
    """The caller's submissions for this problem, newest first."""
    return [submission_response(s) for s in await list_user_submissions(store, user.id, problem_id)]


# ---- Authoring ----


@router.post("", response_model=ProblemResponse, status_code=201)
async def create(
    body: ProblemCreateRequest,
    user: User = Depends(require_roles("admin", "developer")),
    store: DataStore = Depends(get_store),
) -> ProblemResponse:
    problem = await create_problem(store, body.model_dump(), created_by=user.id)
    return problem_response(problem)


@router.put("/{problem_id}", response_model=ProblemResponse)
async def update(
    problem_id: str,
    body: ProblemUpdateRequest,
    _user: User = Depends(require_roles("admin", "developer")),
    store: DataStore = Depends(get_store),
) -> ProblemResponse:
    try:
        problem = await update_problem(store, problem_id, body.model_dump(exclude_unset=True, exclude_none=True))
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return problem_response(problem)


@router.delete("/{problem_id}", response_model=MessageResponse)
async def delete(
    problem_id: str,
    _user: User = Depends(require_roles("admin")),
    store: DataStore = Depends(get_store),
) -> MessageResponse:
    """Deactivate a problem. It is never removed."""
    try:
        await deactivate_problem(store, problem_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return MessageResponse(message="Problem deactivated")
