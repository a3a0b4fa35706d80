"""Dashboard aggregation for students, admins and developers.

Everything is computed from the store on each request. Charts cover fixed
windows ending today (UTC): 90 days for the activity heatmap, 7 for weekly
progress and 30 for the admin submission series.
"""

from __future__ import annotations

from collections import Counter
from datetime import datetime, timedelta

from kca.database import DataStore
from kca.db.models import Problem, Submission, User
from kca.gamification.badges import BADGE_CATALOG
from kca.gamification.level_thresholds import xp_to_next_level
from kca.gamification.streak_service import get_day_iso

HEATMAP_DAYS = 90
WEEKLY_DAYS = 7
ADMIN_SERIES_DAYS = 30
RECENT_SUBMISSIONS = 5
RECENT_STUDENTS = 10
GRADES = range(3, 13)


def _last_days(now: datetime, count: int) -> list[datetime]:
    """``count`` timestamps one day apart, oldest first, ending at ``now``."""
    return [now - timedelta(days=count - 1 - i) for i in range(count)]


def _difficulty_counts(problems: list[Problem]) -> dict[str, int]:
    counts = {"easy": 0, "medium": 0, "hard": 0}
    for p in problems:
        counts[p.difficulty] += 1
    return counts


def _first_accepts(submissions: list[Submission]) -> list[Submission]:
    """The earliest accepted submission per problem."""
    first: dict[str, Submission] = {}
    for s in sorted(submissions, key=lambda s: s.created_at):
        if s.status == "accepted" and s.problem_id not in first:
            first[s.problem_id] = s
    return list(first.values())


# ---------------------------------------------------------------------------
# Student
# ---------------------------------------------------------------------------


async def student_dashboard(store: DataStore, user: User, now: datetime) -> dict:
    submissions = await store.submissions.list_for_user(user.id)
    accepted = [s for s in submissions if s.status == "accepted"]

    solved = []
    for pid in user.solved_problems:
        problem = await store.problems.find_by_id(pid)
        if problem is not None:
            solved.append(problem)

    per_day = Counter(get_day_iso(s.created_at) for s in submissions)
    heatmap = {get_day_iso(d): per_day.get(get_day_iso(d), 0) for d in _last_days(now, HEATMAP_DAYS)}

    xp_rewards = {p.id: p.xp_reward for p in await store.problems.list_all()}
    solved_per_day: Counter[str] = Counter()
    xp_per_day: Counter[str] = Counter()
    for s in _first_accepts(submissions):
        day = get_day_iso(s.created_at)
        solved_per_day[day] += 1
        xp_per_day[day] += xp_rewards.get(s.problem_id, 0)

    weekly = []
    for d in _last_days(now, WEEKLY_DAYS):
        day = get_day_iso(d)
        weekly.append({"day": d.strftime("%a"), "date": day, "problems": solved_per_day[day], "xp": xp_per_day[day]})

    total = len(submissions)
    return {
        "profile": {
            "username": user.username,
            "avatar": user.avatar,
            "level": user.level,
            "xp": user.xp,
            "xp_to_next_level": xp_to_next_level(user.level),
            "rank": user.rank,
            "grade": user.grade,
            "streak": user.streak,
            "longest_streak": user.longest_streak,
            "streak_freeze_available": not user.streak_freeze_used,
            "subscription": user.subscription,
            "member_since": user.created_at,
        },
        "stats": {
            "total_solved": len(user.solved_problems),
            "total_submissions": total,
            "accepted_submissions": len(accepted),
            "acceptance_rate": round(len(accepted) / total * 100) if total else 0,
            "solved_by_difficulty": _difficulty_counts(solved),
            "language_stats": dict(Counter(s.language for s in accepted)),
            "total_problems": len(await store.problems.list_active()),
        },
        "heatmap": heatmap,
        "weekly_progress": weekly,
        "badges": [b for b in BADGE_CATALOG if b.id in user.badges],
        "recent_submissions": list(reversed(submissions[-RECENT_SUBMISSIONS:])),
    }


# ---------------------------------------------------------------------------
# Admin
# ---------------------------------------------------------------------------


async def admin_dashboard(store: DataStore, now: datetime) -> dict:
    students = await store.users.list_by_role("student")
    users = await store.users.list_all()
    submissions = await store.submissions.list_all()
    today = get_day_iso(now)
    day_ago = now - timedelta(days=1)

    by_day: dict[str, list[Submission]] = {}
    for s in submissions:
        by_day.setdefault(get_day_iso(s.created_at), []).append(s)

    series = []
    for d in _last_days(now, ADMIN_SERIES_DAYS):
        day_subs = by_day.get(get_day_iso(d), [])
        series.append({
            "date": get_day_iso(d),
            "submissions": len(day_subs),
            "users": len({s.user_id for s in day_subs}),
        })

    grades = Counter(u.grade for u in students)
    return {
        "overview": {
            "total_students": len(students),
            "active_students": sum(
                1 for u in students if u.last_active_date is not None and u.last_active_date > day_ago
            ),
            "total_problems": len(store.problems),
            "total_submissions": len(submissions),
            "today_submissions": len(by_day.get(today, [])),
            "pro_users": sum(1 for u in users if u.subscription == "pro"),
            "total_hackathons": len(store.hackathons),
        },
        "daily_submissions": series,
        "grade_distribution": [{"grade": g, "students": grades.get(g, 0)} for g in GRADES],
        "recent_students": list(reversed(students[-RECENT_STUDENTS:])),
    }


# ---------------------------------------------------------------------------
# Developer
# ---------------------------------------------------------------------------


async def developer_dashboard(store: DataStore, now: datetime, version: str, environment: str) -> dict:
    problems = await store.problems.list_all()
    submissions = await store.submissions.list_all()
    today = get_day_iso(now)
    return {
        "question_bank": {
            "total": len(problems),
            "active": sum(1 for p in problems if p.is_active),
            "by_difficulty": _difficulty_counts(problems),
        },
        "submissions": {
            "total": len(submissions),
            "today": sum(1 for s in submissions if get_day_iso(s.created_at) == today),
            "accepted": sum(1 for s in submissions if s.status == "accepted"),
        },
        "service": {
            "version": version,
            "environment": environment,
            "started_at": store.started_at,
            "uptime_seconds": int((now - store.started_at).total_seconds()),
            "registered_users": len(store.users),
            "daily_challenges": len(store.daily_challenges),
        },
    }
