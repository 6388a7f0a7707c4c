"""Catalog-driven skill and entity extraction.

Combines:
1. Catalog scan over the skill tables in services.lexicon (canonical terms)
2. A capitalized-token heuristic for technical terms the catalog misses
3. Separate catalog scans for companies, roles and certifications
"""

import logging
import re

from models.schemas.text_analysis import Entities
from services.lexicon import (
    CAPITALIZED_TERM_RE,
    CERTIFICATION_PHRASE_RE,
    COMPILED_CERTIFICATION_CATALOG,
    COMPILED_COMPANY_CATALOG,
    COMPILED_ROLE_CATALOGS,
    COMPILED_SKILL_CATALOG,
    TECHNICAL_INDICATORS,
)

logger = logging.getLogger(__name__)

MAX_SKILLS = 20
MAX_TECHNOLOGIES = 10
MAX_COMPANIES = 10
MAX_ROLES_PER_GROUP = 5
MAX_CERTIFICATIONS_PER_GROUP = 5


def _normalize_skill(skill: str) -> str:
    """Normalize a skill string for de-duplication."""
    return re.sub(r"\s+", " ", skill.lower().strip())


class _OrderedTermSet:
    """Insertion-ordered set keyed case-insensitively; first spelling wins."""

    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    def add(self, term: str) -> None:
        self._items.setdefault(_normalize_skill(term), term)

    def __contains__(self, term: str) -> bool:
        return _normalize_skill(term) in self._items

    def __len__(self) -> int:
        return len(self._items)

    def to_list(self, limit: int | None = None) -> list[str]:
        values = list(self._items.values())
        return values if limit is None else values[:limit]


def _scan_catalog(text: str, compiled_terms, limit: int | None = None) -> list[str]:
    """Return catalog terms found in text, in catalog order."""
    found = _OrderedTermSet()
    for term, pattern in compiled_terms:
        if limit is not None and len(found) >= limit:
            break
        if pattern.search(text):
            found.add(term)
    return found.to_list(limit)


def is_technical_term(term: str) -> bool:
    """Heuristic test for capitalized tokens that look like technology names."""
    lower_term = term.lower()
    if any(indicator in lower_term for indicator in TECHNICAL_INDICATORS):
        return True
    return len(term) > 3 and term[0].isupper()


def extract_skills_catalog(text: str) -> list[str]:
    """Scan every skill category in order and collect canonical terms."""
    found = _OrderedTermSet()
    for compiled_terms in COMPILED_SKILL_CATALOG.values():
        for term in _scan_catalog(text, compiled_terms):
            found.add(term)
    return found.to_list()


def extract_skills_heuristic(text: str) -> list[str]:
    """Capitalized tokens (length > 2) that pass the technical-term heuristic."""
    found = _OrderedTermSet()
    for match in CAPITALIZED_TERM_RE.finditer(text):
        term = match.group()
        if len(term) > 2 and is_technical_term(term):
            found.add(term)
    return found.to_list()


def extract_skills(text: str) -> list[str]:
    """Extract capabilities from text, catalog hits first, capped at MAX_SKILLS."""
    skills = _OrderedTermSet()
    for term in extract_skills_catalog(text):
        skills.add(term)
    for term in extract_skills_heuristic(text):
        skills.add(term)
    result = skills.to_list(MAX_SKILLS)
    logger.debug("Extracted %d skills (%d before cap)", len(result), len(skills))
    return result


def _extract_certifications(text: str) -> list[str]:
    certifications = _scan_catalog(
        text, COMPILED_CERTIFICATION_CATALOG, limit=MAX_CERTIFICATIONS_PER_GROUP
    )
    phrases = _OrderedTermSet()
    for match in CERTIFICATION_PHRASE_RE.finditer(text):
        if len(phrases) >= MAX_CERTIFICATIONS_PER_GROUP:
            break
        phrases.add(match.group().strip())
    return certifications + phrases.to_list()


def extract_entities(text: str) -> Entities:
    """Extract technology, company, role and certification entities."""
    roles: list[str] = []
    for compiled_group in COMPILED_ROLE_CATALOGS:
        roles.extend(_scan_catalog(text, compiled_group, limit=MAX_ROLES_PER_GROUP))

    return Entities(
        technologies=extract_skills_catalog(text)[:MAX_TECHNOLOGIES],
        companies=_scan_catalog(text, COMPILED_COMPANY_CATALOG, limit=MAX_COMPANIES),
        roles=roles,
        certifications=_extract_certifications(text),
    )
