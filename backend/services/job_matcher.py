"""Match pipeline: resume text + job text -> MatchResult.

Pipeline:
1. Per-text analysis (skills, keywords, entities, sentiment, readability, phrases)
2. Token-overlap similarity between the raw texts
3. Skill matching (matched resume skills, missing job skills)
4. Keyword coverage
5. Weighted, clamped match score
6. Rule-based insights
"""

import logging

from models.responses import MatchResult
from models.schemas.resume_profile import PlainTextContent, ResumeProfile, StructuredContent
from services import insight_generator
from services.exceptions import InvalidInputError
from services.match_scorer import compute_match_score
from services.skill_matcher import count_keyword_matches, find_matched_skills, find_missing_skills
from services.text_analyzer import analyze_text, compare_texts

logger = logging.getLogger(__name__)

MAX_MATCHED_SKILLS = 8
# Matched skills beyond this many do not raise the skill score
MAX_SCORED_MATCHES = 10
MAX_MISSING_SKILLS = 8


def build_resume_text(profile: ResumeProfile) -> str:
    """Flatten a profile into the composite text the pipeline analyses.

    Order: flat skill list, then the content (plain text, or summary,
    experience, education and structured skills).
    """
    parts: list[str] = []
    if profile.skills:
        parts.append(" ".join(profile.skills))

    content = profile.content
    if isinstance(content, PlainTextContent):
        parts.append(content.text)
    elif isinstance(content, StructuredContent):
        if content.personal.summary:
            parts.append(content.personal.summary)
        for exp in content.experience:
            parts.append(f"{exp.position} {exp.company} {exp.description}")
        for edu in content.education:
            parts.append(f"{edu.degree} {edu.school} {edu.field}")
        if content.skills:
            parts.append(" ".join(content.skills))
    else:
        raise InvalidInputError("content", content)

    return " ".join(parts).strip()


def _require_text(field: str, value: object) -> str:
    if not isinstance(value, str):
        raise InvalidInputError(field, value)
    return value


def compute_match(resume_text: str, job_text: str) -> MatchResult:
    """Score a resume against a job posting and explain the result.

    Raises InvalidInputError when either input is not a string. Empty
    strings are valid and produce a minimal result.
    """
    resume_text = _require_text("resume_text", resume_text)
    job_text = _require_text("job_text", job_text)

    # --- Stage 1: per-text analysis + comparison ---
    resume_analysis = analyze_text(resume_text)
    job_analysis = analyze_text(job_text)
    comparison = compare_texts(resume_text, job_text, resume_analysis, job_analysis)

    # --- Stage 2: skill and keyword coverage ---
    matched_skills = find_matched_skills(resume_analysis.skills, job_analysis.skills)
    missing_skills = find_missing_skills(resume_analysis.skills, job_analysis.skills)
    keyword_matches = count_keyword_matches(resume_analysis.keywords, job_analysis.keywords)

    # --- Stage 3: score ---
    breakdown = compute_match_score(
        semantic_similarity=comparison.semantic_similarity,
        matched_skill_count=min(len(matched_skills), MAX_SCORED_MATCHES),
        job_skill_count=len(job_analysis.skills),
        keyword_matches=keyword_matches,
        job_keyword_count=len(job_analysis.keywords),
        resume_readability=resume_analysis.readability_score,
    )
    score = breakdown.match_score

    # --- Stage 4: insights ---
    matched_skills = matched_skills[:MAX_MATCHED_SKILLS]
    missing_skills = missing_skills[:MAX_MISSING_SKILLS]

    logger.info(
        "Match computed: score=%d matched=%d missing=%d keywords=%d/%d",
        score, len(matched_skills), len(missing_skills),
        keyword_matches, len(job_analysis.keywords),
    )

    return MatchResult(
        match_score=score,
        matched_skills=matched_skills,
        missing_skills=missing_skills,
        keyword_matches=keyword_matches,
        total_keywords=len(job_analysis.keywords),
        recommendations=insight_generator.recommend(missing_skills, score),
        strengths=insight_generator.list_strengths(matched_skills, score),
        weaknesses=insight_generator.list_weaknesses(missing_skills, score),
        priority_missing_skills=insight_generator.classify_priority_skills(missing_skills, job_text),
        suggested_improvements=insight_generator.suggest_improvements(
            resume_analysis, job_analysis, score
        ),
        ats_optimization=insight_generator.optimize_for_ats(resume_analysis, job_analysis),
    )


def match_profile(profile: ResumeProfile, job_text: str) -> MatchResult:
    """Score a stored resume profile against a job posting."""
    return compute_match(build_resume_text(profile), job_text)
