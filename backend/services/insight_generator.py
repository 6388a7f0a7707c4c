"""Rule-based feedback for a computed match.

Every builder is a fixed, ordered rule chain: rules append in order and
the result is truncated to the builder's cap, so identical inputs always
produce identical feedback.
"""

from models.responses import AtsOptimization, PriorityMissingSkill, SuggestedImprovement
from models.schemas.text_analysis import TextAnalysis
from services.lexicon import (
    AGILE_TERMS,
    CERTIFICATION_TERMS,
    CLOUD_TERMS,
    DEFAULT_IMPORTANCE,
    IMPORTANCE_CUES,
)
from services.skill_matcher import skills_match

MAX_PRIORITY_SKILLS = 8
MAX_SUGGESTIONS = 6
MAX_ATS_TIPS = 4
MAX_RECOMMENDATIONS = 4

STRONG_MATCH_THRESHOLD = 70
WEAK_MATCH_THRESHOLD = 60
READABILITY_THRESHOLD = 60


# ---------------------------------------------------------------------------
# Missing-skill prioritization
# ---------------------------------------------------------------------------

def classify_skill_importance(skill: str, job_text: str) -> PriorityMissingSkill:
    """Classify one missing skill by the first cue phrase the posting contains.

    Cues are tried in fixed precedence; the first hit wins even when a
    weaker cue is also present.
    """
    job_lower = job_text.lower()
    skill_lower = skill.lower()

    for cue, importance, reason in IMPORTANCE_CUES:
        if cue in job_lower and skill_lower in job_lower:
            return PriorityMissingSkill(
                skill=skill, importance=importance, reason=reason.format(skill=skill)
            )

    importance, reason = DEFAULT_IMPORTANCE
    return PriorityMissingSkill(skill=skill, importance=importance, reason=reason.format(skill=skill))


def classify_priority_skills(missing_skills: list[str], job_text: str) -> list[PriorityMissingSkill]:
    return [
        classify_skill_importance(skill, job_text)
        for skill in missing_skills[:MAX_PRIORITY_SKILLS]
    ]


# ---------------------------------------------------------------------------
# Section-level suggestions
# ---------------------------------------------------------------------------

def _mentions_any(terms: list[str], needles: tuple[str, ...]) -> bool:
    return any(needle in term.lower() for term in terms for needle in needles)


def suggest_improvements(
    resume: TextAnalysis,
    job: TextAnalysis,
    match_score: int,
) -> list[SuggestedImprovement]:
    """Generate section-level improvement suggestions."""
    suggestions: list[SuggestedImprovement] = []

    if match_score < STRONG_MATCH_THRESHOLD:
        suggestions.append(SuggestedImprovement(
            section="Summary",
            suggestion="Rewrite your professional summary to include key terms from the job description",
            impact="Can increase match score by 10-15%",
        ))

    if _mentions_any(job.skills, CLOUD_TERMS) and not _mentions_any(resume.skills, CLOUD_TERMS):
        suggestions.append(SuggestedImprovement(
            section="Skills",
            suggestion="Add cloud computing skills (AWS, Azure, or Google Cloud)",
            impact="Highly valued in modern tech roles",
        ))

    if _mentions_any(job.skills, AGILE_TERMS) and not _mentions_any(resume.skills, AGILE_TERMS):
        suggestions.append(SuggestedImprovement(
            section="Skills",
            suggestion="Include Agile/Scrum methodology experience",
            impact="Shows familiarity with modern development practices",
        ))

    suggestions.append(SuggestedImprovement(
        section="Experience",
        suggestion="Use action verbs and quantify achievements with specific metrics",
        impact="Makes your accomplishments more compelling",
    ))

    if match_score < WEAK_MATCH_THRESHOLD:
        suggestions.append(SuggestedImprovement(
            section="Experience",
            suggestion="Reorganize bullet points to highlight relevant experience first",
            impact="Improves ATS scanning and recruiter attention",
        ))

    if _mentions_any(job.keywords, CERTIFICATION_TERMS):
        suggestions.append(SuggestedImprovement(
            section="Certifications",
            suggestion="Consider obtaining relevant industry certifications",
            impact="Demonstrates commitment to professional development",
        ))

    if resume.readability_score < READABILITY_THRESHOLD:
        suggestions.append(SuggestedImprovement(
            section="Overall",
            suggestion="Improve readability by using shorter sentences and simpler language",
            impact="Better ATS parsing and recruiter comprehension",
        ))

    if resume.sentiment.score < 0:
        suggestions.append(SuggestedImprovement(
            section="Tone",
            suggestion="Use more positive language to describe your achievements",
            impact="Creates a more confident and appealing impression",
        ))

    return suggestions[:MAX_SUGGESTIONS]


# ---------------------------------------------------------------------------
# ATS tips
# ---------------------------------------------------------------------------

def optimize_for_ats(resume: TextAnalysis, job: TextAnalysis) -> list[AtsOptimization]:
    """Missing-keyword tip (when any) followed by the three generic tips."""
    tips: list[AtsOptimization] = []

    missing_keywords = [
        keyword
        for keyword in job.keywords
        if not any(skills_match(resume_keyword, keyword) for resume_keyword in resume.keywords)
    ]
    if missing_keywords:
        tips.append(AtsOptimization(
            issue=f"Missing {len(missing_keywords)} important keywords",
            fix=f"Naturally incorporate: {', '.join(missing_keywords[:3])}",
            priority=1,
        ))

    tips.append(AtsOptimization(
        issue="ATS may have trouble parsing complex formatting",
        fix="Use simple, clean formatting with standard section headers",
        priority=2,
    ))
    tips.append(AtsOptimization(
        issue="Resume length optimization",
        fix="Keep resume to 1-2 pages with most relevant information first",
        priority=3,
    ))
    tips.append(AtsOptimization(
        issue="File format compatibility",
        fix="Save as both PDF and Word document for different ATS systems",
        priority=4,
    ))

    return tips[:MAX_ATS_TIPS]


# ---------------------------------------------------------------------------
# Recommendations, strengths, weaknesses
# ---------------------------------------------------------------------------

def recommend(missing_skills: list[str], match_score: int) -> list[str]:
    recs: list[str] = []

    if missing_skills:
        recs.append(f"Add {missing_skills[0]} experience to your skills section")
        if len(missing_skills) > 1:
            recs.append(f"Include specific {missing_skills[1]} projects or certifications")

    if match_score < STRONG_MATCH_THRESHOLD:
        recs.append("Use more action verbs in your experience descriptions")
        recs.append("Quantify your achievements with specific metrics")

    if match_score < WEAK_MATCH_THRESHOLD:
        recs.append("Tailor your summary to better match the job requirements")

    return recs[:MAX_RECOMMENDATIONS]


def list_strengths(matched_skills: list[str], match_score: int) -> list[str]:
    strengths: list[str] = []

    if len(matched_skills) > 3:
        strengths.append("Strong technical skills alignment")

    if match_score > STRONG_MATCH_THRESHOLD:
        strengths.append("Good keyword density")
        strengths.append("Relevant work experience")

    return strengths


def list_weaknesses(missing_skills: list[str], match_score: int) -> list[str]:
    weaknesses: list[str] = []

    if len(missing_skills) > 2:
        weaknesses.append("Missing some required technical skills")

    if match_score < STRONG_MATCH_THRESHOLD:
        weaknesses.append("Could improve quantifiable achievements")

    if match_score < WEAK_MATCH_THRESHOLD:
        weaknesses.append("Lacks specific industry experience")

    return weaknesses
