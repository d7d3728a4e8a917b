from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _ResumeModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class ContactInfo(_ResumeModel):
    name: str = ""
    email: str = ""
    phone: str | None = None
    linkedin: str | None = None
    github: str | None = None
    portfolio: str | None = None
    location: str | None = None


class ExperienceEntry(_ResumeModel):
    id: str | None = None
    title: str = ""
    company: str = ""
    location: str | None = None
    start_date: str = Field(default="", alias="startDate")
    end_date: str | None = Field(default=None, alias="endDate")
    current: bool = False
    bullets: list[str] = Field(default_factory=list)


class ProjectEntry(_ResumeModel):
    id: str | None = None
    name: str = ""
    description: str = ""
    technologies: list[str] = Field(default_factory=list)
    link: str | None = None
    bullets: list[str] = Field(default_factory=list)


class EducationEntry(_ResumeModel):
    id: str | None = None
    degree: str = ""
    institution: str = ""
    location: str | None = None
    graduation_date: str = Field(default="", alias="graduationDate")
    gpa: str | None = None
    highlights: list[str] = Field(default_factory=list)


class ResumeData(_ResumeModel):
    summary: str = ""
    skills: list[str] = Field(default_factory=list)
    experience: list[ExperienceEntry] = Field(default_factory=list)
    projects: list[ProjectEntry] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    contact: ContactInfo | None = None

    def is_empty(self) -> bool:
        return not (
            self.summary.strip()
            or self.skills
            or self.experience
            or self.projects
            or self.education
            or self.contact
        )
