"""Skill equivalence: exact, substring, or shared synonym group."""

import re

from services.lexicon import SYNONYM_GROUPS

# term -> indices of every synonym group that contains it
_GROUP_INDEX: dict[str, frozenset[int]] = {}
for _idx, _group in enumerate(SYNONYM_GROUPS):
    for _term in _group:
        _GROUP_INDEX[_term] = _GROUP_INDEX.get(_term, frozenset()) | {_idx}


def normalize_skill(skill: str) -> str:
    return re.sub(r"\s+", " ", skill.lower().strip())


def _share_synonym_group(a: str, b: str) -> bool:
    groups_a = _GROUP_INDEX.get(a)
    groups_b = _GROUP_INDEX.get(b)
    return bool(groups_a and groups_b and groups_a & groups_b)


def skills_match(skill_a: str, skill_b: str) -> bool:
    """True when two skill strings denote the same capability.

    Checked in order: equality after normalization, containment in either
    direction, membership in a common synonym group. Empty strings never
    match anything.
    """
    a = normalize_skill(skill_a)
    b = normalize_skill(skill_b)
    if not a or not b:
        return False
    if a == b:
        return True
    if a in b or b in a:
        return True
    return _share_synonym_group(a, b)


def find_matched_skills(resume_skills: list[str], job_skills: list[str]) -> list[str]:
    """Resume skills that match at least one job skill, in resume order."""
    matched: dict[str, None] = {}
    for resume_skill in resume_skills:
        if any(skills_match(resume_skill, job_skill) for job_skill in job_skills):
            matched.setdefault(resume_skill)
    return list(matched)


def find_missing_skills(resume_skills: list[str], job_skills: list[str]) -> list[str]:
    """Job skills no resume skill matches, in job order."""
    return [
        job_skill
        for job_skill in job_skills
        if not any(skills_match(resume_skill, job_skill) for resume_skill in resume_skills)
    ]


def count_keyword_matches(resume_keywords: list[str], job_keywords: list[str]) -> int:
    """Number of resume keywords that match any job keyword."""
    return sum(
        1
        for resume_keyword in resume_keywords
        if any(skills_match(resume_keyword, job_keyword) for job_keyword in job_keywords)
    )
