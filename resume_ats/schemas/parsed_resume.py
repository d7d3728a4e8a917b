from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

from resume_ats.core.errors import InputError

from .ats import AIUsage
from .resume import ContactInfo, EducationEntry, ExperienceEntry, ProjectEntry, ResumeData

_TRUE_STRINGS = {"true", "yes", "y", "1"}


class ParsedResume(BaseModel):
    model_config = ConfigDict(frozen=True)

    raw_text: str
    skills: tuple[str, ...] = ()
    experience: tuple[str, ...] = ()
    structured_data: ResumeData | None = None
    strategy: Literal["ai", "rule_based"] = "rule_based"
    usage: AIUsage | None = None

    def to_resume_data(self) -> ResumeData:
        """Structured data when available; otherwise the raw text as summary plus the heuristic skills."""
        if self.structured_data is not None:
            return self.structured_data
        return ResumeData(summary=self.raw_text, skills=list(self.skills))


def _text(value: Any) -> str:
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def _optional_text(value: Any) -> str | None:
    return _text(value) or None


def _flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return False


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [text for text in (_text(item) for item in value) if text]


def _pick(item: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if item.get(key) not in (None, ""):
            return item[key]
    return None


def _mappings(value: Any) -> list[tuple[int, Mapping[str, Any]]]:
    if not isinstance(value, list):
        return []
    return [(index, item) for index, item in enumerate(value, start=1) if isinstance(item, Mapping)]


def coerce_experience(items: Any) -> list[ExperienceEntry]:
    return [
        ExperienceEntry(
            id=_text(item.get("id")) or f"exp-{index}",
            title=_text(item.get("title")),
            company=_text(item.get("company")),
            location=_optional_text(item.get("location")),
            start_date=_text(_pick(item, "startDate", "start_date")),
            end_date=_optional_text(_pick(item, "endDate", "end_date")),
            current=_flag(item.get("current")),
            bullets=_string_list(item.get("bullets")),
        )
        for index, item in _mappings(items)
    ]


def coerce_projects(items: Any) -> list[ProjectEntry]:
    return [
        ProjectEntry(
            id=_text(item.get("id")) or f"proj-{index}",
            name=_text(item.get("name")),
            description=_text(item.get("description")),
            technologies=_string_list(item.get("technologies")),
            link=_optional_text(item.get("link")),
            bullets=_string_list(item.get("bullets")),
        )
        for index, item in _mappings(items)
    ]


def coerce_education(items: Any) -> list[EducationEntry]:
    return [
        EducationEntry(
            id=_text(item.get("id")) or f"edu-{index}",
            degree=_text(item.get("degree")),
            institution=_text(item.get("institution")),
            location=_optional_text(item.get("location")),
            graduation_date=_text(_pick(item, "graduationDate", "graduation_date")),
            gpa=_optional_text(item.get("gpa")),
            highlights=_string_list(item.get("highlights")),
        )
        for index, item in _mappings(items)
    ]


def coerce_contact(value: Any) -> ContactInfo | None:
    if not isinstance(value, Mapping):
        return None
    contact = ContactInfo(
        name=_text(value.get("name")),
        email=_text(value.get("email")),
        phone=_optional_text(value.get("phone")),
        linkedin=_optional_text(value.get("linkedin")),
        github=_optional_text(value.get("github")),
        portfolio=_optional_text(value.get("portfolio")),
        location=_optional_text(value.get("location")),
    )
    # An all-blank contact block carries no information.
    if not any(contact.model_dump().values()):
        return None
    return contact


def coerce_parsed_resume(payload: Any) -> ResumeData:
    """Build ResumeData from a loosely shaped parser payload.

    Missing or mistyped fields become empty values, entries without an id get
    positional ids (``exp-1``, ``proj-1``, ``edu-1``) and non-object entries are
    skipped. Only a non-mapping payload is rejected.
    """
    if not isinstance(payload, Mapping):
        raise InputError(f"parsed resume payload must be a mapping, got {type(payload).__name__}")
    return ResumeData(
        summary=_text(payload.get("summary")),
        skills=_string_list(payload.get("skills")),
        experience=coerce_experience(payload.get("experience")),
        projects=coerce_projects(payload.get("projects")),
        education=coerce_education(payload.get("education")),
        contact=coerce_contact(payload.get("contact")),
    )
