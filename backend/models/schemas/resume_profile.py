"""Resume profile record as handed over by the profile store.

Content is either free text or a structured document; the two shapes are
told apart by the ``kind`` tag.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class PersonalInfo(BaseModel):
    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    summary: str = ""


class ExperienceEntry(BaseModel):
    position: str = ""
    company: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""


class EducationEntry(BaseModel):
    degree: str = ""
    school: str = ""
    field: str = ""
    graduation_date: str = ""


class PlainTextContent(BaseModel):
    kind: Literal["text"] = "text"
    text: str = ""


class StructuredContent(BaseModel):
    kind: Literal["structured"] = "structured"
    personal: PersonalInfo = PersonalInfo()
    experience: list[ExperienceEntry] = []
    education: list[EducationEntry] = []
    skills: list[str] = []
    certifications: list[str] = []


ResumeContent = Annotated[
    Union[PlainTextContent, StructuredContent],
    Field(discriminator="kind"),
]


class ResumeProfile(BaseModel):
    id: str
    user_id: str
    title: str = ""
    skills: list[str] = []
    content: ResumeContent = PlainTextContent()
