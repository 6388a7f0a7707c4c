"""Collaborator contracts for profile lookup and result storage.

The match engine only needs to read a profile by id and hand one result
record to a sink. The in-memory implementations back the API and tests;
a real deployment swaps in its own storage.
"""

import threading
from typing import Protocol

from models.responses import JobMatchRecord
from models.schemas.resume_profile import ResumeProfile


class ProfileRepository(Protocol):
    def get(self, resume_id: str) -> ResumeProfile | None: ...


class MatchResultSink(Protocol):
    def save(self, record: JobMatchRecord) -> None: ...

    def list_for_user(self, user_id: str) -> list[JobMatchRecord]: ...


class InMemoryProfileRepository:
    def __init__(self) -> None:
        self._profiles: dict[str, ResumeProfile] = {}
        self._lock = threading.Lock()

    def add(self, profile: ResumeProfile) -> None:
        with self._lock:
            self._profiles[profile.id] = profile

    def get(self, resume_id: str) -> ResumeProfile | None:
        with self._lock:
            return self._profiles.get(resume_id)

    def clear(self) -> None:
        with self._lock:
            self._profiles.clear()


class InMemoryMatchResultSink:
    def __init__(self) -> None:
        self._records: list[JobMatchRecord] = []
        self._lock = threading.Lock()

    def save(self, record: JobMatchRecord) -> None:
        with self._lock:
            self._records.append(record)

    def list_for_user(self, user_id: str) -> list[JobMatchRecord]:
        """Records for one user, newest first."""
        with self._lock:
            records = [r for r in self._records if r.user_id == user_id]
        return sorted(records, key=lambda r: r.created_at, reverse=True)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
