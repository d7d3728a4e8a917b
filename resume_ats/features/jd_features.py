from __future__ import annotations

import re
from collections.abc import Set

from resume_ats.core.config.scoring import get_scoring_value
from resume_ats.normalize.keywords import KeywordExtractor
from resume_ats.normalize.utils import unique_in_order
from resume_ats.taxonomy import SECTION_TERMS

_TITLE_PATTERNS = (
    re.compile(
        r"(?:position|role|title|looking for|seeking)[:\s]+([a-z\s]+?)(?:\.|,|\n|$)",
        re.IGNORECASE,
    ),
    re.compile(
        r"^([a-z\s]+?)(?:\s+(?:engineer|developer|manager|analyst|specialist|coordinator|director|lead|senior|junior))",
        re.IGNORECASE,
    ),
)

_SECTION_END = r"(?=\n[ \t]*\n|\n[ \t]*(?:experience|education|responsibilities|duties)\b|\Z)"
# Header must open a line and be followed by a colon or a line break.
_SKILL_SECTION_PATTERNS = (
    re.compile(
        r"^[ \t]*(?:required\s+skills?|qualifications?|requirements?|skills?|required)[ \t]*(?::|\n)\s*(.*?)"
        + _SECTION_END,
        re.IGNORECASE | re.DOTALL | re.MULTILINE,
    ),
    re.compile(
        r"^[ \t]*(?:technical\s+skills?|core\s+competenc(?:y|ies)|key\s+skills?)[ \t]*(?::|\n)\s*(.*?)"
        + _SECTION_END,
        re.IGNORECASE | re.DOTALL | re.MULTILINE,
    ),
)
_FRAGMENT_SPLIT_RE = re.compile(r"[,\n•\-*|]")
_FRAGMENT_STRIP = " \t.;:"
DEFAULT_MAX_FRAGMENT_CHARS = 50


def split_skill_fragments(section: str, max_chars: int = DEFAULT_MAX_FRAGMENT_CHARS) -> list[str]:
    """Split a skills block on commas, bullets, hyphens and pipes; keep fragments shorter than max_chars."""
    fragments = (part.strip(_FRAGMENT_STRIP) for part in _FRAGMENT_SPLIT_RE.split(section or ""))
    return [part for part in fragments if 0 < len(part) < max_chars]


def infer_job_title(job_description: str) -> str:
    for pattern in _TITLE_PATTERNS:
        match = pattern.search(job_description or "")
        if match and match.group(1).strip():
            return match.group(1).strip().lower()
    return ""


def extract_skill_section(job_description: str, *, max_fragment_chars: int | None = None) -> list[str]:
    """Fragments listed under the first skills/requirements heading, or [] when there is none."""
    if max_fragment_chars is None:
        max_fragment_chars = int(
            get_scoring_value("ats.rule_based.limits.skill_fragment_max_chars", DEFAULT_MAX_FRAGMENT_CHARS)
        )
    for pattern in _SKILL_SECTION_PATTERNS:
        match = pattern.search(job_description or "")
        if not match or not match.group(1):
            continue
        return [part.lower() for part in split_skill_fragments(match.group(1), max_fragment_chars)]
    return []


def extract_required_skills(
    job_description: str,
    extractor: KeywordExtractor,
    *,
    section_terms: Set[str] = SECTION_TERMS,
    max_fragment_chars: int | None = None,
) -> list[str]:
    section = extract_skill_section(job_description, max_fragment_chars=max_fragment_chars)
    skills = section + extractor.extract(job_description)
    return [skill for skill in unique_in_order(skills) if skill not in section_terms]
