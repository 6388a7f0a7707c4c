"""Shared test fixtures."""

import pytest

from api.dependencies import get_profile_repository, get_result_sink
from models.schemas.resume_profile import PlainTextContent, ResumeProfile
from services.match_store import InMemoryMatchResultSink, InMemoryProfileRepository


SAMPLE_RESUME = """Jane Doe
Senior Software Engineer at Google. Experienced Python developer who
delivered scalable REST APIs with Django and PostgreSQL. Improved deployment
speed by 40% using Docker and Kubernetes. Led an Agile team of five engineers.
AWS Certified Solutions Architect."""

SAMPLE_JD = """Backend Engineer

Required skills: Python, Django, PostgreSQL, Docker.
Experience with AWS and Terraform preferred.
Nice to have: Kubernetes, GraphQL.
We work in an Agile environment using Scrum.
AWS certification is a bonus."""


@pytest.fixture
def sample_resume() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def sample_jd() -> str:
    return SAMPLE_JD


@pytest.fixture
def profiles() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def results() -> InMemoryMatchResultSink:
    return InMemoryMatchResultSink()


@pytest.fixture
def plain_profile() -> ResumeProfile:
    return ResumeProfile(
        id="resume-1",
        user_id="user-1",
        title="Backend resume",
        skills=["JavaScript", "React", "Node.js", "Python"],
        content=PlainTextContent(text=SAMPLE_RESUME),
    )


@pytest.fixture(autouse=True)
def _reset_api_stores():
    """Clear the API's in-memory collaborators around each test."""
    get_profile_repository().clear()
    get_result_sink().clear()
    yield
    get_profile_repository().clear()
    get_result_sink().clear()
