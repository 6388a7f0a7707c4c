"""Inter-stage Pydantic contracts for the match pipeline."""

from models.schemas.resume_profile import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    PlainTextContent,
    ResumeProfile,
    StructuredContent,
)
from models.schemas.text_analysis import (
    ComparisonRecord,
    Entities,
    Sentiment,
    TextAnalysis,
)

__all__ = [
    "ComparisonRecord",
    "EducationEntry",
    "Entities",
    "ExperienceEntry",
    "PersonalInfo",
    "PlainTextContent",
    "ResumeProfile",
    "Sentiment",
    "StructuredContent",
    "TextAnalysis",
]
