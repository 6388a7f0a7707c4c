"""Service boundary around the match engine.

Fetches the profile, runs the pipeline, persists the record, and maps any
failure to a single user-facing message instead of raising.
"""

import logging
import uuid
from datetime import datetime, timezone

from models.responses import JobMatchRecord, MatchResult
from models.schemas.resume_profile import ResumeProfile
from services.exceptions import ProfileNotFoundError
from services.job_matcher import match_profile
from services.match_store import MatchResultSink, ProfileRepository

logger = logging.getLogger(__name__)

ANALYZE_FAILED = "Failed to analyze job match"
FETCH_FAILED = "Failed to fetch matches"


class MatchService:
    def __init__(self, profiles: ProfileRepository, results: MatchResultSink) -> None:
        self._profiles = profiles
        self._results = results

    def find_profile(self, user_id: str, resume_id: str) -> ResumeProfile | None:
        """The profile if it exists and belongs to ``user_id``, else None."""
        profile = self._profiles.get(resume_id)
        if profile is None or profile.user_id != user_id:
            return None
        return profile

    def _load_profile(self, user_id: str, resume_id: str) -> ResumeProfile:
        profile = self.find_profile(user_id, resume_id)
        if profile is None:
            raise ProfileNotFoundError(resume_id, user_id)
        return profile

    def analyze_job_match(
        self, user_id: str, resume_id: str, job_description: str
    ) -> tuple[MatchResult | None, str | None]:
        """Compute and store a match. Returns (result, None) or (None, error)."""
        try:
            profile = self._load_profile(user_id, resume_id)
            result = match_profile(profile, job_description)
            self._results.save(JobMatchRecord(
                id=uuid.uuid4().hex,
                user_id=user_id,
                resume_id=resume_id,
                job_description=job_description,
                match_score=result.match_score,
                matched_skills=list(result.matched_skills),
                missing_skills=list(result.missing_skills),
                recommendations=list(result.recommendations),
                created_at=datetime.now(timezone.utc),
            ))
        except ProfileNotFoundError as e:
            logger.warning("Job match rejected: %s", e)
            return None, ANALYZE_FAILED
        except Exception:
            logger.exception("Job match failed for user %s resume %s", user_id, resume_id)
            return None, ANALYZE_FAILED

        logger.info("Stored job match for user %s resume %s", user_id, resume_id)
        return result, None

    def get_user_matches(self, user_id: str) -> tuple[list[JobMatchRecord], str | None]:
        """Stored matches for a user, newest first."""
        try:
            return self._results.list_for_user(user_id), None
        except Exception:
            logger.exception("Failed to fetch matches for user %s", user_id)
            return [], FETCH_FAILED
