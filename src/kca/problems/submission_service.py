"""
Submission handling: grade, record, and feed accepted solves into progression.

Every submission is appended, accepted or not. The user's lookup, progression
update and save happen under that user's lock so two concurrent accepted
submissions cannot both award the same problem.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

import structlog

from kca.database import DataStore
from kca.db.models import Problem, Submission, TestResult, new_id, utcnow
from kca.gamification.progression import ProgressionResult, record_solve, unchanged_result
from kca.gamification.streak_service import get_day_iso
from kca.problems.grader import ExecutionUsage, Grader, grade_against

logger = structlog.get_logger()


@dataclass(frozen=True)
class SubmissionOutcome:
    submission: Submission
    progression: ProgressionResult


@dataclass(frozen=True)
class RunOutcome:
    test_results: list[TestResult]
    usage: ExecutionUsage


def _check_language(problem: Problem, language: str) -> None:
    if problem.languages and language not in problem.languages:
        msg = f"Language '{language}' is not supported for this problem"
        raise ValueError(msg)


async def _get_problem(store: DataStore, problem_id: str) -> Problem:
    problem = await store.problems.find_by_id(problem_id)
    if problem is None:
        msg = "Problem not found"
        raise LookupError(msg)
    return problem


async def submit_solution(
    store: DataStore,
    grader: Grader,
    user_id: str,
    problem_id: str,
    code: str,
    language: str,
    now: datetime | None = None,
) -> SubmissionOutcome:
    """
    Grade a submission and apply progression when it is accepted.

    Raises:
        LookupError: Unknown problem or user.
        ValueError: Language not offered by the problem.
    """
    problem = await _get_problem(store, problem_id)
    _check_language(problem, language)

    results = grade_against(grader, code, language, problem.test_cases)
    usage = grader.usage()
    accepted = bool(results) and all(r.passed for r in results)
    now = now or utcnow()

    async with store.user_locks.for_user(user_id):
        user = await store.users.find_by_id(user_id)
        if user is None:
            msg = "User not found"
            raise LookupError(msg)

        if accepted:
            daily = store.daily_challenges.for_day(get_day_iso(now))
            progression = record_solve(user, problem, now, daily)
            if progression.applied:
                await store.users.save(user)
        else:
            progression = unchanged_result(user)

        submission = Submission(
            id=new_id(),
            user_id=user_id,
            problem_id=problem.id,
            language=language,
            code=code,
            status="accepted" if accepted else "wrong_answer",
            created_at=now,
            test_results=tuple(results),
            execution_time_ms=usage.execution_time_ms,
            memory_mb=usage.memory_mb,
            output=results[0].actual if results else "",
        )
        await store.submissions.append(submission)

    logger.info(
        "submission_graded",
        submission_id=submission.id,
        user_id=user_id,
        problem_id=problem.id,
        status=submission.status,
        passed=sum(r.passed for r in results),
        total=len(results),
    )
    if progression.applied:
        logger.info(
            "progression_applied",
            user_id=user_id,
            xp_gained=progression.xp_gained,
            level=progression.level_after,
            rank=progression.rank_after,
            streak=progression.streak_after,
        )
        for badge_id in progression.badges_awarded:
            logger.info("badge_awarded", user_id=user_id, badge_id=badge_id)

    return SubmissionOutcome(submission=submission, progression=progression)


async def run_code(
    store: DataStore,
    grader: Grader,
    problem_id: str,
    code: str,
    language: str,
    custom_input: str | None = None,
) -> RunOutcome:
    """
    Try code against the visible test cases (or one custom input) without recording anything.

    A custom input has no expected output, so it is always reported as passed.
    """
    problem = await _get_problem(store, problem_id)
    _check_language(problem, language)

    if custom_input:
        results = [TestResult(True, custom_input, "", "")]
    else:
        visible = [tc for tc in problem.test_cases if not tc.is_hidden]
        results = grade_against(grader, code, language, visible)
    return RunOutcome(test_results=results, usage=grader.usage())


async def list_user_submissions(store: DataStore, user_id: str, problem_id: str) -> list[Submission]:
    """The user's submissions for a problem, newest first."""
    submissions = await store.submissions.list_for_user_problem(user_id, problem_id)
    return sorted(submissions, key=lambda s: s.created_at, reverse=True)

