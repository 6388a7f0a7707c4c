"""Per-text lexical analysis and the resume-vs-job comparison record."""

import logging

from models.schemas.text_analysis import ComparisonRecord, TextAnalysis
from services.keyword_extractor import extract_key_phrases, extract_keywords
from services.similarity import semantic_similarity
from services.skill_extractor import extract_entities, extract_skills
from services.text_metrics import analyze_sentiment, readability_score

logger = logging.getLogger(__name__)


def analyze_text(text: str) -> TextAnalysis:
    """Run every single-text stage over one input."""
    return TextAnalysis(
        skills=extract_skills(text),
        keywords=extract_keywords(text),
        entities=extract_entities(text),
        sentiment=analyze_sentiment(text),
        readability_score=readability_score(text),
        key_phrases=extract_key_phrases(text),
    )


def _ordered_union(first: list[str], second: list[str]) -> list[str]:
    return list(dict.fromkeys([*first, *second]))


def compare_texts(
    resume_text: str,
    job_text: str,
    resume_analysis: TextAnalysis | None = None,
    job_analysis: TextAnalysis | None = None,
) -> ComparisonRecord:
    """Merge both analyses and attach the token-overlap similarity.

    Pre-computed analyses may be passed in to avoid analysing twice.
    """
    if resume_analysis is None:
        resume_analysis = analyze_text(resume_text)
    if job_analysis is None:
        job_analysis = analyze_text(job_text)
    similarity = semantic_similarity(resume_text, job_text)
    logger.debug("Semantic similarity: %.4f", similarity)

    return ComparisonRecord(
        skills=_ordered_union(resume_analysis.skills, job_analysis.skills),
        keywords=_ordered_union(resume_analysis.keywords, job_analysis.keywords),
        semantic_similarity=similarity,
    )
