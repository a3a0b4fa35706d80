"""Pluggable grading of submitted code against test cases.

Nothing here executes user code. ``SimulatedGrader`` stands in for a real
judge: it decides pass/fail from the code's length and a random draw, so the
rest of the submission flow can be exercised end to end.
"""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from kca.db.models import TestCase, TestResult

HIDDEN = "[Hidden]"
INCORRECT_OUTPUT = "Incorrect output"


@dataclass(frozen=True)
class ExecutionUsage:
    execution_time_ms: int
    memory_mb: float


class Grader(Protocol):
    def run(self, code: str, language: str, test_case: TestCase) -> bool:
        """Return True if ``code`` passes ``test_case``."""
        ...

    def usage(self) -> ExecutionUsage:
        """Resource usage reported for the last graded run."""
        ...


class SimulatedGrader:
    """Randomized placeholder grader.

    - blank code, or fewer than 5 characters once trimmed: fail
    - otherwise pass when ``random() > 0.2`` or the trimmed code exceeds 50 characters

    Execution time is reported as 20-119 ms and memory as 5-15 MB.
    """

    MIN_CODE_LENGTH = 5
    ALWAYS_PASS_LENGTH = 50
    FAIL_RATE = 0.2

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def run(self, code: str, language: str, test_case: TestCase) -> bool:
        trimmed = code.strip()
        if len(trimmed) < self.MIN_CODE_LENGTH:
            return False
        return self._rng.random() > self.FAIL_RATE or len(trimmed) > self.ALWAYS_PASS_LENGTH

    def usage(self) -> ExecutionUsage:
        return ExecutionUsage(
            execution_time_ms=self._rng.randrange(20, 120),
            memory_mb=round(self._rng.random() * 10 + 5, 2),
        )


def grade_against(
    grader: Grader,
    code: str,
    language: str,
    test_cases: Iterable[TestCase],
    mask_hidden: bool = True,
) -> list[TestResult]:
    """Grade ``code`` against every test case, masking hidden ones."""
    results = []
    for tc in test_cases:
        passed = grader.run(code, language, tc)
        actual = tc.expected_output if passed else INCORRECT_OUTPUT
        if mask_hidden and tc.is_hidden:
            results.append(TestResult(passed, HIDDEN, HIDDEN, HIDDEN if passed else actual))
        else:
            results.append(TestResult(passed, tc.input, tc.expected_output, actual))
    return results


# ---------------------------------------------------------------------------
# Process-wide grader
# ---------------------------------------------------------------------------

_grader: Grader | None = None


def init_grader(seed: int | None = None) -> Grader:
    """Install the simulated grader, seeded for reproducible runs when ``seed`` is set."""
    global _grader  # noqa: PLW0603
    _grader = SimulatedGrader(random.Random(seed))
    return _grader


def close_grader() -> None:
    global _grader  # noqa: PLW0603
    _grader = None


def get_grader() -> Grader:
    """Get the grader (FastAPI dependency)."""
    if _grader is None:
        msg = "Grader not initialized. Call init_grader() first."
        raise RuntimeError(msg)
    return _grader
