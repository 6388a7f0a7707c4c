"""Tests for the rule-based insight chain."""

from models.schemas.text_analysis import Sentiment, TextAnalysis
from services.insight_generator import (
    MAX_PRIORITY_SKILLS,
    classify_priority_skills,
    classify_skill_importance,
    list_strengths,
    list_weaknesses,
    optimize_for_ats,
    recommend,
    suggest_improvements,
)


SCENARIO_JD = "Required skills: Python, AWS, Docker. Experience with React preferred."


def _analysis(**overrides) -> TextAnalysis:
    defaults = dict(
        skills=["Python"],
        keywords=["python"],
        readability_score=80.0,
        sentiment=Sentiment(score=1, comparative=0.1),
    )
    defaults.update(overrides)
    return TextAnalysis(**defaults)


class TestClassifySkillImportance:
    def test_required_is_high(self):
        item = classify_skill_importance("AWS", SCENARIO_JD)
        assert item.importance == "high"
        assert item.reason == "AWS is listed as a required skill"

    def test_first_cue_wins_over_closer_cue(self):
        jd = "Nice to have: Kubernetes. Required: Python."
        item = classify_skill_importance("Kubernetes", jd)
        assert item.importance == "high"

    def test_nice_to_have_is_low(self):
        item = classify_skill_importance("Kubernetes", "Backend role. nice to have: Kubernetes")
        assert item.importance == "low"
        assert "nice to have" in item.reason

    def test_bonus_is_low(self):
        item = classify_skill_importance("Terraform", "Terraform is a bonus")
        assert item.importance == "low"
        assert item.reason == "Terraform would be a bonus"

    def test_experience_with_is_medium(self):
        item = classify_skill_importance("Redis", "Experience with Redis")
        assert item.importance == "medium"
        assert item.reason == "Experience with Redis is mentioned"

    def test_must_have_is_high(self):
        item = classify_skill_importance("Go", "Must have: Go")
        assert item.importance == "high"
        assert item.reason == 'Go is marked as "must have"'

    def test_default_is_medium(self):
        item = classify_skill_importance("Go", "We use Go daily")
        assert item.importance == "medium"
        assert item.reason == "Go appears in the job requirements"

    def test_cue_ignored_when_skill_absent_from_text(self):
        item = classify_skill_importance("Rust", "required: python")
        assert item.importance == "medium"

    def test_classify_priority_skills_capped(self):
        skills = [f"Skill{i}" for i in range(12)]
        items = classify_priority_skills(skills, "required")
        assert len(items) == MAX_PRIORITY_SKILLS
        assert [item.skill for item in items] == skills[:MAX_PRIORITY_SKILLS]


class TestSuggestImprovements:
    def test_low_score_full_chain(self):
        job = _analysis(skills=["AWS", "Scrum"], keywords=["certification", "python"])
        sections = [s.section for s in suggest_improvements(_analysis(), job, 50)]
        assert sections == [
            "Summary", "Skills", "Skills", "Experience", "Experience", "Certifications",
        ]

    def test_high_score_only_experience(self):
        job = _analysis(skills=["Python"], keywords=["python"])
        suggestions = suggest_improvements(_analysis(), job, 90)
        assert [s.section for s in suggestions] == ["Experience"]

    def test_capped_at_six(self):
        resume = _analysis(readability_score=10.0, sentiment=Sentiment(score=-2, comparative=-0.2))
        job = _analysis(skills=["Azure", "Agile"], keywords=["certified"])
        suggestions = suggest_improvements(resume, job, 40)
        assert len(suggestions) == 6
        assert "Tone" not in [s.section for s in suggestions]

    def test_tone_and_readability(self):
        resume = _analysis(readability_score=30.0, sentiment=Sentiment(score=-1, comparative=-0.1))
        sections = [s.section for s in suggest_improvements(resume, _analysis(), 90)]
        assert sections == ["Experience", "Overall", "Tone"]

    def test_no_cloud_suggestion_when_resume_has_cloud(self):
        resume = _analysis(skills=["Google Cloud"])
        job = _analysis(skills=["AWS"])
        suggestions = suggest_improvements(resume, job, 90)
        assert all("cloud" not in s.suggestion.lower() for s in suggestions)


class TestOptimizeForAts:
    def test_missing_keywords_tip_first(self):
        resume = _analysis(keywords=["python"])
        job = _analysis(keywords=["python", "kubernetes", "terraform", "helm", "ansible"])
        tips = optimize_for_ats(resume, job)
        assert [t.priority for t in tips] == [1, 2, 3, 4]
        assert tips[0].issue == "Missing 4 important keywords"
        assert tips[0].fix == "Naturally incorporate: kubernetes, terraform, helm"

    def test_generic_tips_only_when_covered(self):
        tips = optimize_for_ats(_analysis(), _analysis())
        assert [t.priority for t in tips] == [2, 3, 4]


def test_recommend():
    recs = recommend(["AWS", "Docker", "Go"], 55)
    assert recs == [
        "Add AWS experience to your skills section",
        "Include specific Docker projects or certifications",
        "Use more action verbs in your experience descriptions",
        "Quantify your achievements with specific metrics",
    ]
    assert recommend([], 90) == []
    assert len(recommend(["AWS"], 65)) == 3


def test_list_strengths():
    assert list_strengths(["a", "b", "c", "d"], 75) == [
        "Strong technical skills alignment",
        "Good keyword density",
        "Relevant work experience",
    ]
    assert list_strengths(["a"], 70) == []


def test_list_weaknesses():
    assert list_weaknesses(["a", "b", "c"], 55) == [
        "Missing some required technical skills",
        "Could improve quantifiable achievements",
        "Lacks specific industry experience",
    ]
    assert list_weaknesses([], 70) == []
