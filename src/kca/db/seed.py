"""Demo data set loaded when KCA_SEED_DEMO_DATA is on.

Matches the frontend demo accounts and problem set. Every demo account logs
in with the password ``demo123``.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from functools import lru_cache

from kca.auth.password import hash_password
from kca.db.models import (
    DailyChallenge,
    Hackathon,
    HackathonScore,
    MentorSlot,
    Problem,
    Submission,
    TestCase,
    User,
)
from kca.gamification.level_thresholds import compute_level, compute_rank

DEMO_PASSWORD = "demo123"
LANGUAGES = ["python", "javascript", "java", "cpp"]


@lru_cache
def _demo_password_hash() -> str:
    return hash_password(DEMO_PASSWORD)


def _dt(value: str) -> datetime:
    return datetime.fromisoformat(value).replace(tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


def _staff(user_id: str, username: str, email: str, role: str, avatar: str, rank: str,
           level: int, created_at: datetime, theme: str) -> User:
    return User(
        id=user_id,
        username=username,
        email=email,
        password_hash=_demo_password_hash(),
        role=role,  # type: ignore[arg-type]
        grade=0,
        avatar=avatar,
        level=level,
        rank=rank,
        subscription="pro",
        theme=theme,  # type: ignore[arg-type]
        created_at=created_at,
    )


def _student(user_id: str, username: str, email: str, grade: int, avatar: str, xp: int,
             streak: int, longest_streak: int, badges: list[str], solved: list[str],
             subscription: str, created_at: datetime, theme: str, now: datetime) -> User:
    return User(
        id=user_id,
        username=username,
        email=email,
        password_hash=_demo_password_hash(),
        role="student",
        grade=grade,
        avatar=avatar,
        xp=xp,
        level=compute_level(xp),
        rank=compute_rank(xp),
        streak=streak,
        longest_streak=longest_streak,
        last_active_date=now,
        badges=badges,
        solved_problems=solved,
        subscription=subscription,  # type: ignore[arg-type]
        theme=theme,  # type: ignore[arg-type]
        created_at=created_at,
    )


def demo_users(now: datetime) -> list[User]:
    return [
        _staff("admin-001", "admin", "admin@kidscode.com", "admin", "\U0001f981", "Admin", 99, now, "dark"),
        _student(
            "student-001", "alex_coder", "alex@example.com", 6, "\U0001f431", 2450, 7, 14,
            ["first-solve", "streak-7", "python-beginner", "hackathon-participant"],
            ["p1", "p2", "p3", "p5", "p6", "p8"],
            "pro", _dt("2024-09-01T00:00:00"), "light", now,
        ),
        _student(
            "student-002", "maya_dev", "maya@example.com", 8, "\U0001f98a", 3200, 12, 20,
            ["first-solve", "streak-7", "streak-14", "python-beginner", "js-beginner", "hackathon-winner"],
            ["p1", "p2", "p3", "p4", "p5", "p6", "p7", "p8", "p9"],
            "pro", _dt("2024-08-15T00:00:00"), "dark", now,
        ),
        _student(
            "student-003", "sam_code", "sam@example.com", 4, "\U0001f43c", 800, 3, 5,
            ["first-solve"], ["p1", "p2"],
            "free", _dt("2024-10-01T00:00:00"), "light", now,
        ),
        _staff("mentor-001", "dr_sarah", "sarah@kidscode.com", "mentor", "\U0001f469‍\U0001f4bb", "Mentor", 0,
               _dt("2024-07-01T00:00:00"), "light"),
        _staff("dev-001", "dev_team", "dev@kidscode.com", "developer", "\U0001f527", "Developer", 0,
               _dt("2024-07-01T00:00:00"), "dark"),
    ]


# ---------------------------------------------------------------------------
# Problems
# ---------------------------------------------------------------------------


def _starter(python: str, javascript: str, java: str, cpp: str) -> dict[str, str]:
    return {
        "python": python,
        "javascript": 'const readline = require("readline");\n'
        "const rl = readline.createInterface({ input: process.stdin });\n" + javascript,
        "java": "import java.util.Scanner;\npublic class Main {\n"
        "    public static void main(String[] args) {\n"
        "        Scanner sc = new Scanner(System.in);\n" + java + "        // Your code here\n    }\n}",
        "cpp": "#include <iostream>\nusing namespace std;\nint main() {\n" + cpp
        + "    // Your code here\n    return 0;\n}",
    }


_READ_INT_JAVA = "        int n = sc.nextInt();\n"
_READ_INT_CPP = "    int n;\n    cin >> n;\n"
_READ_LINE_JAVA = "        String s = sc.nextLine();\n"
_READ_LINE_CPP = "    string s;\n    cin >> s;\n"
_JS_ON_LINE = 'rl.on("line", (line) => {\n    // Your code here\n});'
_JS_ON_CLOSE = 'const lines = [];\nrl.on("line", (line) => lines.push(line));\nrl.on("close", () => {\n    // Your code here\n});'


def demo_problems() -> list[Problem]:
    return [
        Problem(
            id="p1",
            title="Hello World",
            description=(
                'Write a program that prints "Hello, World!" to the console.\n\n'
                "This is your first step into coding! Every programmer starts here."
            ),
            difficulty="easy",
            xp_reward=50,
            grade=[3, 4, 5, 6],
            topics=["basics", "output"],
            languages=LANGUAGES,
            test_cases=[TestCase("", "Hello, World!")],
            hints=["Use the print function in Python", "Use console.log in JavaScript"],
            starter_code=_starter("# Write your code here\n", _JS_ON_CLOSE, "", ""),
            created_at=_dt("2024-01-01T00:00:00"),
            created_by="admin-001",
        ),
        Problem(
            id="p2",
            title="Add Two Numbers",
            description=(
                "Read two numbers from input and print their sum.\n\n"
                "**Input:** Two integers on separate lines\n**Output:** Their sum"
            ),
            difficulty="easy",
            xp_reward=50,
            grade=[3, 4, 5, 6],
            topics=["basics", "math", "input-output"],
            languages=LANGUAGES,
            test_cases=[
                TestCase("3\n5", "8"),
                TestCase("10\n20", "30"),
                TestCase("-5\n5", "0", is_hidden=True),
            ],
            hints=["Read two inputs separately", "Convert strings to numbers before adding"],
            starter_code=_starter("# Read two numbers and print their sum\n", _JS_ON_CLOSE, "", ""),
            created_at=_dt("2024-01-02T00:00:00"),
            created_by="admin-001",
        ),
        Problem(
            id="p3",
            title="Even or Odd",
            description=(
                "Given a number, determine if it is even or odd.\n\n"
                '**Input:** A single integer\n**Output:** "Even" if the number is even, "Odd" if odd'
            ),
            difficulty="easy",
            xp_reward=50,
            grade=[3, 4, 5, 6, 7],
            topics=["basics", "conditionals"],
            languages=LANGUAGES,
            test_cases=[
                TestCase("4", "Even"),
                TestCase("7", "Odd"),
                TestCase("0", "Even", is_hidden=True),
            ],
            hints=["Use the modulo operator %", "A number is even if number % 2 equals 0"],
            starter_code=_starter(
                "n = int(input())\n# Check if n is even or odd\n", _JS_ON_LINE, _READ_INT_JAVA, _READ_INT_CPP,
            ),
            created_at=_dt("2024-01-03T00:00:00"),
            created_by="admin-001",
        ),
        Problem(
            id="p4",
            title="Reverse a String",
            description="Given a string, print it in reverse.\n\n**Input:** A single string\n**Output:** The reversed string",
            difficulty="easy",
            xp_reward=75,
            grade=[5, 6, 7, 8],
            topics=["strings", "basics"],
            languages=LANGUAGES,
            test_cases=[
                TestCase("hello", "olleh"),
                TestCase("KidsCode", "edoCsdiK"),
                TestCase("a", "a", is_hidden=True),
            ],
            hints=["In Python, you can use slicing [::-1]", "Loop through the string backwards"],
            starter_code=_starter("s = input()\n# Reverse the string\n", _JS_ON_LINE, _READ_LINE_JAVA, _READ_LINE_CPP),
            created_at=_dt("2024-01-04T00:00:00"),
            created_by="admin-001",
        ),
        Problem(
            id="p5",
            title="FizzBuzz",
            description=(
                'Print numbers from 1 to N. For multiples of 3, print "Fizz". For multiples of 5, '
                'print "Buzz". For multiples of both, print "FizzBuzz".'
            ),
            difficulty="medium",
            xp_reward=100,
            grade=[6, 7, 8, 9],
            topics=["loops", "conditionals"],
            languages=LANGUAGES,
            test_cases=[
                TestCase("5", "1\n2\nFizz\n4\nBuzz"),
                TestCase("15", "1\n2\nFizz\n4\nBuzz\nFizz\n7\n8\nFizz\nBuzz\n11\nFizz\n13\n14\nFizzBuzz"),
            ],
            hints=["Check divisibility by both 3 AND 5 first", "Use a loop from 1 to N"],
            starter_code=_starter(
                "n = int(input())\n# Print FizzBuzz from 1 to n\n", _JS_ON_LINE, _READ_INT_JAVA, _READ_INT_CPP,
            ),
            created_at=_dt("2024-01-05T00:00:00"),
            created_by="admin-001",
        ),
        Problem(
            id="p6",
            title="Factorial Calculator",
            description="Calculate the factorial of a given number N.\n\n**Input:** A non-negative integer N (0 ≤ N ≤ 20)\n**Output:** N!",
            difficulty="medium",
            xp_reward=100,
            grade=[7, 8, 9, 10],
            topics=["math", "loops", "recursion"],
            languages=LANGUAGES,
            test_cases=[
                TestCase("5", "120"),
                TestCase("0", "1"),
                TestCase("10", "3628800", is_hidden=True),
            ],
            hints=["0! = 1 by definition", "You can use a loop or recursion"],
            starter_code=_starter(
                "n = int(input())\n# Calculate and print n!\n", _JS_ON_LINE, _READ_INT_JAVA, _READ_INT_CPP,
            ),
            created_at=_dt("2024-01-06T00:00:00"),
            created_by="admin-001",
        ),
        Problem(
            id="p7",
            title="Palindrome Check",
            description=(
                "Check if a given string is a palindrome (reads the same forwards and backwards).\n\n"
                '**Input:** A single string (lowercase letters only)\n**Output:** "Yes" if palindrome, "No" otherwise'
            ),
            difficulty="medium",
            xp_reward=100,
            grade=[7, 8, 9, 10],
            topics=["strings", "logic"],
            languages=LANGUAGES,
            test_cases=[
                TestCase("racecar", "Yes"),
                TestCase("hello", "No"),
                TestCase("a", "Yes", is_hidden=True),
                TestCase("abba", "Yes", is_hidden=True),
            ],
            hints=["Compare the string with its reverse", "Use two pointers from start and end"],
            starter_code=_starter(
                "s = input()\n# Check if s is a palindrome\n", _JS_ON_LINE, _READ_LINE_JAVA, _READ_LINE_CPP,
            ),
            created_at=_dt("2024-01-07T00:00:00"),
            created_by="admin-001",
        ),
        Problem(
            id="p8",
            title="Find the Largest Element",
            description=(
                "Given an array of N integers, find the largest element.\n\n"
                "**Input:**\nFirst line: N (size of array)\nSecond line: N space-separated integers\n\n"
                "**Output:** The largest element"
            ),
            difficulty="easy",
            xp_reward=75,
            grade=[6, 7, 8],
            topics=["arrays", "loops"],
            languages=LANGUAGES,
            test_cases=[
                TestCase("5\n3 1 4 1 5", "5"),
                TestCase("3\n-1 -5 -2", "-1", is_hidden=True),
            ],
            hints=["Start with the first element as the maximum", "Compare each element with the current max"],
            starter_code=_starter(
                "n = int(input())\narr = list(map(int, input().split()))\n# Find and print the largest element\n",
                _JS_ON_CLOSE, _READ_INT_JAVA, _READ_INT_CPP,
            ),
            created_at=_dt("2024-01-08T00:00:00"),
            created_by="admin-001",
        ),
        Problem(
            id="p9",
            title="Two Sum",
            description=(
                "Given an array of integers and a target sum, find two numbers that add up to the target.\n\n"
                "**Output:** Indices of the two numbers (0-indexed), space-separated"
            ),
            difficulty="hard",
            xp_reward=200,
            grade=[9, 10, 11, 12],
            topics=["arrays", "hash-map", "algorithms"],
            languages=LANGUAGES,
            test_cases=[
                TestCase("4\n2 7 11 15\n9", "0 1"),
                TestCase("3\n3 2 4\n6", "1 2", is_hidden=True),
            ],
            hints=["Use a hash map to store seen numbers", "For each number, check if target - number exists in the map"],
            starter_code=_starter(
                "n = int(input())\narr = list(map(int, input().split()))\ntarget = int(input())\n# Find two indices\n",
                _JS_ON_CLOSE, _READ_INT_JAVA, _READ_INT_CPP,
            ),
            created_at=_dt("2024-01-09T00:00:00"),
            created_by="admin-001",
        ),
        Problem(
            id="p10",
            title="Fibonacci Sequence",
            description=(
                "Print the first N numbers of the Fibonacci sequence.\n\n"
                "**Input:** A positive integer N\n**Output:** First N Fibonacci numbers, space-separated"
            ),
            difficulty="medium",
            xp_reward=125,
            grade=[8, 9, 10, 11],
            topics=["math", "loops", "dynamic-programming"],
            languages=LANGUAGES,
            test_cases=[
                TestCase("7", "0 1 1 2 3 5 8"),
                TestCase("1", "0", is_hidden=True),
                TestCase("2", "0 1", is_hidden=True),
            ],
            hints=["Start with 0 and 1", "Each next number is the sum of the previous two"],
            starter_code=_starter(
                "n = int(input())\n# Print first n Fibonacci numbers\n", _JS_ON_LINE, _READ_INT_JAVA, _READ_INT_CPP,
            ),
            created_at=_dt("2024-01-10T00:00:00"),
            created_by="admin-001",
        ),
    ]


# ---------------------------------------------------------------------------
# Activity
# ---------------------------------------------------------------------------


def demo_submissions() -> list[Submission]:
    return [
        Submission(
            id="sub-001",
            user_id="student-001",
            problem_id="p1",
            language="python",
            code='print("Hello, World!")',
            status="accepted",
            created_at=_dt("2024-10-01T10:00:00"),
            execution_time_ms=32,
            memory_mb=9.2,
            output="Hello, World!",
        ),
        Submission(
            id="sub-002",
            user_id="student-001",
            problem_id="p2",
            language="python",
            code="a = int(input())\nb = int(input())\nprint(a + b)",
            status="accepted",
            created_at=_dt("2024-10-02T14:30:00"),
            execution_time_ms=45,
            memory_mb=9.5,
            output="8",
        ),
    ]


def demo_hackathons(now: datetime) -> list[Hackathon]:
    start = now + timedelta(days=2)
    return [
        Hackathon(
            id="hack-001",
            title="Weekend Code Sprint #12",
            description="Solve as many problems as you can in 2 hours! Compete with coders from around the world.",
            start_time=start,
            end_time=start + timedelta(hours=2),
            problems=["p5", "p6", "p7", "p9"],
            participants=["student-001", "student-002"],
            leaderboard=[
                HackathonScore("student-002", score=350, solved_count=3, total_time=4500),
                HackathonScore("student-001", score=200, solved_count=2, total_time=3200),
            ],
            created_at=_dt("2024-10-01T00:00:00"),
        ),
    ]


def demo_mentor_slots() -> list[MentorSlot]:
    return [
        MentorSlot(
            id="slot-001",
            mentor_id="mentor-001",
            date="2024-11-02",
            start_time="10:00",
            end_time="11:00",
            duration=1,
            price=25,
        ),
        MentorSlot(
            id="slot-002",
            mentor_id="mentor-001",
            date="2024-11-02",
            start_time="14:00",
            end_time="16:00",
            duration=2,
            price=45,
            is_booked=True,
            student_id="student-001",
            meeting_link="https://meet.google.com/abc-defg-hij",
            status="booked",
        ),
    ]


def demo_daily_challenge(now: datetime, bonus_xp: int = 50) -> DailyChallenge:
    return DailyChallenge(id="dc-001", problem_id="p5", date=now.date().isoformat(), bonus_xp=bonus_xp)
