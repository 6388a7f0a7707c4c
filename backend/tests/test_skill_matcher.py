import pytest

from services.skill_matcher import (
    count_keyword_matches,
    find_matched_skills,
    find_missing_skills,
    skills_match,
)


@pytest.mark.parametrize("a,b,expected", [
    ("Python", "python", True),
    ("  Machine   Learning ", "machine learning", True),
    ("React", "React.js", True),  # substring
    ("ML", "Artificial Intelligence", True),  # synonym group
    ("AWS", "Amazon Web Services", True),
    ("GCP", "Google Cloud", True),
    ("db", "nosql", True),
    ("js", "nodejs", True),
    ("Python", "Java", False),
    ("Docker", "Kubernetes", False),
    ("", "python", False),
    ("", "", False),
])
def test_skills_match(a, b, expected):
    assert skills_match(a, b) is expected
    assert skills_match(b, a) is expected


@pytest.mark.parametrize("skill", ["Python", "C++", "Node.js", "Machine Learning", "AI", "R"])
def test_skills_match_reflexive(skill):
    assert skills_match(skill, skill) is True


def test_find_matched_skills_keeps_resume_order():
    matched = find_matched_skills(
        ["JavaScript", "React", "Node.js", "Python"],
        ["Python", "React", "AWS", "Docker"],
    )
    assert matched == ["React", "Python"]


def test_find_missing_skills_keeps_job_order():
    missing = find_missing_skills(
        ["JavaScript", "React", "Node.js", "Python"],
        ["Python", "React", "AWS", "Docker"],
    )
    assert missing == ["AWS", "Docker"]


def test_find_skills_with_empty_sides():
    assert find_matched_skills([], ["Python"]) == []
    assert find_missing_skills([], ["Python"]) == ["Python"]
    assert find_matched_skills(["Python"], []) == []
    assert find_missing_skills(["Python"], []) == []


def test_count_keyword_matches():
    assert count_keyword_matches(["python", "react", "go"], ["python", "golang"]) == 2
    assert count_keyword_matches(["python"], []) == 0
