"""Per-text analysis record and the resume-vs-job comparison record."""

from pydantic import BaseModel


class Entities(BaseModel):
    """Named entity groups found in one text, each capped independently."""
    technologies: list[str] = []
    companies: list[str] = []
    roles: list[str] = []
    certifications: list[str] = []


class Sentiment(BaseModel):
    score: int = 0  # positive hits minus negative hits
    comparative: float = 0.0  # score / token count


class TextAnalysis(BaseModel):
    """Lexical analysis of a single text (resume or job posting).

    Transient: built once per text inside a match computation and
    discarded with it.
    """
    skills: list[str] = []  # catalog scan order, capped at 20
    keywords: list[str] = []  # frequency-ranked, capped at 20
    entities: Entities = Entities()
    sentiment: Sentiment = Sentiment()
    readability_score: float = 0.0  # 0-100
    key_phrases: list[str] = []  # capped at 15


class ComparisonRecord(BaseModel):
    """Union of both texts' skills and keywords plus their token overlap."""
    skills: list[str] = []
    keywords: list[str] = []
    semantic_similarity: float = 0.0  # 0.0-1.0 Jaccard
