"""Level and rank computation.

These values MUST match the frontend exactly: the dashboard shows
``level * XP_PER_LEVEL`` as the XP needed for the next level.
"""

from __future__ import annotations

XP_PER_LEVEL = 200

# Evaluated high to low, first match wins.
RANK_THRESHOLDS: list[dict] = [
    {"rank": "Diamond", "min_xp": 5000},
    {"rank": "Platinum", "min_xp": 3000},
    {"rank": "Gold", "min_xp": 2000},
    {"rank": "Silver", "min_xp": 1000},
    {"rank": "Bronze", "min_xp": 0},
]


def compute_level(total_xp: int) -> int:
    """Level is one plus every full block of XP_PER_LEVEL."""
    return total_xp // XP_PER_LEVEL + 1


def compute_rank(total_xp: int) -> str:
    for threshold in RANK_THRESHOLDS:
        if total_xp >= threshold["min_xp"]:
            return threshold["rank"]
    return RANK_THRESHOLDS[-1]["rank"]


def xp_to_next_level(level: int) -> int:
    """Cumulative XP at which ``level + 1`` starts."""
    return level * XP_PER_LEVEL
