from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


def _prepare(skills: Iterable[str]) -> list[str]:
    prepared: list[str] = []
    for skill in skills:
        cleaned = (skill or "").strip().lower()
        if cleaned:
            prepared.append(cleaned)
    return prepared


@dataclass(slots=True)
class SkillMatchResult:
    matched: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.matched) + len(self.missing)

    @property
    def percentage(self) -> float:
        if not self.total:
            return 0.0
        return len(self.matched) / self.total * 100


class SkillMatcher:
    """Exact-then-substring matching of required skills against a candidate's skills."""

    @staticmethod
    def is_match(required: str, candidate: set[str]) -> bool:
        if required in candidate:
            return True
        return any(skill in required or required in skill for skill in candidate)

    def compare(self, candidate_skills: Iterable[str], required_skills: Iterable[str]) -> SkillMatchResult:
        candidate = set(_prepare(candidate_skills))
        result = SkillMatchResult()
        for required in _prepare(required_skills):
            if self.is_match(required, candidate):
                result.matched.append(required)
            else:
                result.missing.append(required)
        return result

    def match_percentage(self, candidate_skills: Iterable[str], required_skills: Iterable[str]) -> float:
        return self.compare(candidate_skills, required_skills).percentage

    def missing_skills(self, candidate_skills: Iterable[str], required_skills: Iterable[str]) -> list[str]:
        return self.compare(candidate_skills, required_skills).missing
