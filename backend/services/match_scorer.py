"""Weighted match score from similarity, skill, keyword and readability signals."""

import logging
import math

from models.responses import ScoreBreakdown

logger = logging.getLogger(__name__)

# Weights for the four sub-scores (sum to 1.0)
W_SEMANTIC = 0.3
W_SKILL = 0.4
W_KEYWORD = 0.2
W_READABILITY = 0.1

# Never report 0 for a real input, never claim a perfect 100
SCORE_FLOOR = 15
SCORE_CEILING = 98


def _coverage(matched: int, total: int) -> float:
    """Percentage coverage; 0 when there is nothing to cover.

    Not capped: substring and synonym matches can push it past 100, and
    the final clamp absorbs the excess.
    """
    if total == 0:
        return 0.0
    return matched / total * 100


def clamp_score(raw: float) -> int:
    """Round half up, then clamp to [SCORE_FLOOR, SCORE_CEILING]."""
    return min(SCORE_CEILING, max(SCORE_FLOOR, math.floor(raw + 0.5)))


def compute_match_score(
    semantic_similarity: float,
    matched_skill_count: int,
    job_skill_count: int,
    keyword_matches: int,
    job_keyword_count: int,
    resume_readability: float,
) -> ScoreBreakdown:
    """Combine the four signals into a match score clamped to [15, 98]."""
    semantic_score = semantic_similarity * 100
    skill_score = _coverage(matched_skill_count, job_skill_count)
    keyword_score = _coverage(keyword_matches, job_keyword_count)
    readability = min(100.0, resume_readability)

    raw = (
        W_SEMANTIC * semantic_score
        + W_SKILL * skill_score
        + W_KEYWORD * keyword_score
        + W_READABILITY * readability
    )
    match_score = clamp_score(raw)
    logger.debug(
        "Score: semantic=%.1f skill=%.1f keyword=%.1f readability=%.1f raw=%.2f -> %d",
        semantic_score, skill_score, keyword_score, readability, raw, match_score,
    )

    return ScoreBreakdown(
        semantic_score=semantic_score,
        skill_score=skill_score,
        keyword_score=keyword_score,
        readability_score=readability,
        raw_score=raw,
        match_score=match_score,
    )
