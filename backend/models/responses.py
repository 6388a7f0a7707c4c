from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict


class ScoreBreakdown(BaseModel):
    """Sub-scores (0-100) that feed the weighted match score."""
    semantic_score: float = 0.0
    skill_score: float = 0.0
    keyword_score: float = 0.0
    readability_score: float = 0.0
    raw_score: float = 0.0
    match_score: int = 0


class PriorityMissingSkill(BaseModel):
    model_config = ConfigDict(frozen=True)

    skill: str
    importance: Literal["high", "medium", "low"]
    reason: str


class SuggestedImprovement(BaseModel):
    model_config = ConfigDict(frozen=True)

    section: str
    suggestion: str
    impact: str


class AtsOptimization(BaseModel):
    model_config = ConfigDict(frozen=True)

    issue: str
    fix: str
    priority: int


class MatchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    match_score: int = 15
    matched_skills: tuple[str, ...] = ()
    missing_skills: tuple[str, ...] = ()
    keyword_matches: int = 0
    total_keywords: int = 0
    recommendations: tuple[str, ...] = ()
    strengths: tuple[str, ...] = ()
    weaknesses: tuple[str, ...] = ()
    priority_missing_skills: tuple[PriorityMissingSkill, ...] = ()
    suggested_improvements: tuple[SuggestedImprovement, ...] = ()
    ats_optimization: tuple[AtsOptimization, ...] = ()


class JobMatchRecord(BaseModel):
    """What the result sink keeps for one computed match."""
    id: str
    user_id: str
    resume_id: str
    job_description: str
    match_score: int
    matched_skills: list[str] = []
    missing_skills: list[str] = []
    recommendations: list[str] = []
    created_at: datetime
