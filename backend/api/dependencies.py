"""Shared dependencies for API routes."""

from services.match_service import MatchService
from services.match_store import InMemoryMatchResultSink, InMemoryProfileRepository

_profiles = InMemoryProfileRepository()
_results = InMemoryMatchResultSink()


def get_profile_repository() -> InMemoryProfileRepository:
    return _profiles


def get_result_sink() -> InMemoryMatchResultSink:
    return _results


def get_match_service() -> MatchService:
    return MatchService(_profiles, _results)
