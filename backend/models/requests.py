from pydantic import BaseModel, Field

from config import settings


class QuickMatchRequest(BaseModel):
    resume_text: str = Field(
        ..., max_length=settings.max_resume_chars, description="Plain text resume content"
    )
    job_description: str = Field(
        ..., max_length=settings.max_job_description_chars, description="Job description text"
    )


class JobMatchRequest(BaseModel):
    user_id: str = Field(..., min_length=1)
    resume_id: str = Field(..., min_length=1)
    job_description: str = Field(
        ..., max_length=settings.max_job_description_chars, description="Job description text"
    )
