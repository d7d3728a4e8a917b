from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from resume_ats.normalize.utils import clamp_score, clean_strings

MAX_LIST_ITEMS = 15

ScoringStrategyName = Literal["ai", "rule_based", "empty"]


class ATSAnalysis(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    strengths: tuple[str, ...] = ()
    weaknesses: tuple[str, ...] = ()
    missing_qualifications: tuple[str, ...] = Field(default=(), alias="missingQualifications")
    experience_gaps: tuple[str, ...] = Field(default=(), alias="experienceGaps")
    recommendations: tuple[str, ...] = ()

    @field_validator(
        "strengths",
        "weaknesses",
        "missing_qualifications",
        "experience_gaps",
        "recommendations",
        mode="before",
    )
    @classmethod
    def _clean_lists(cls, value: Any) -> tuple[str, ...]:
        return tuple(clean_strings(value if isinstance(value, (list, tuple)) else []))


class AIUsage(BaseModel):
    model_config = ConfigDict(frozen=True)

    model: str
    prompt_tokens: int = Field(default=0, ge=0)
    completion_tokens: int = Field(default=0, ge=0)
    total_tokens: int = Field(default=0, ge=0)
    cost_usd: float = Field(default=0.0, ge=0.0)


class ScoreResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    score: int = Field(default=0, ge=0, le=100)
    skill_match: int = Field(default=0, ge=0, le=100, alias="skillMatch")
    missing_skills: tuple[str, ...] = Field(default=(), alias="missingSkills")
    keyword_improvements: tuple[str, ...] = Field(default=(), alias="keywordImprovements")
    experience_alignment: int = Field(default=0, ge=0, le=100, alias="experienceAlignment")
    strategy: ScoringStrategyName = "rule_based"
    analysis: ATSAnalysis | None = None
    usage: AIUsage | None = None

    @field_validator("score", "skill_match", "experience_alignment", mode="before")
    @classmethod
    def _clamp(cls, value: Any) -> int:
        return clamp_score(float(value))

    @field_validator("missing_skills", "keyword_improvements", mode="before")
    @classmethod
    def _clean(cls, value: Any) -> tuple[str, ...]:
        return tuple(clean_strings(value, limit=MAX_LIST_ITEMS))

    @classmethod
    def empty(cls) -> "ScoreResult":
        return cls(strategy="empty")

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
