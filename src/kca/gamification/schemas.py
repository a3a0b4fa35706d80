"""Pydantic response models for badge and progression endpoints."""

from __future__ import annotations

from pydantic import BaseModel


# --- Badge ---


class BadgeResponse(BaseModel):
    id: str
    name: str
    description: str
    icon: str
    requirement: str
    xp_bonus: int


class BadgeDetailResponse(BadgeResponse):
    total_earned: int = 0
    percentage: float = 0.0


# --- Progression ---


class RankThreshold(BaseModel):
    rank: str
    min_xp: int


class ProgressionRulesResponse(BaseModel):
    xp_per_level: int
    ranks: list[RankThreshold]
