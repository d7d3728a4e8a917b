from __future__ import annotations

import re

from resume_ats.normalize.utils import unique_in_order

from .jd_features import DEFAULT_MAX_FRAGMENT_CHARS, split_skill_fragments

# Headings must open a line and be followed by a colon or a line break.
_SKILL_SECTION_RE = re.compile(
    r"^[ \t]*(?:technical\s+skills?|core\s+competenc(?:y|ies)|skills?)[ \t]*(?::|\n)\s*(.*?)"
    r"(?=\n[ \t]*\n|\n[ \t]*[a-z]+:|\Z)",
    re.IGNORECASE | re.DOTALL | re.MULTILINE,
)
_EXPERIENCE_SECTION_RE = re.compile(
    r"^[ \t]*(?:(?:work|professional)\s+experience|experience|employment\s+history)[ \t]*(?::|\n)\s*(.*?)"
    r"(?=\n[ \t]*\n[ \t]*(?:education|projects|skills)\b|\Z)",
    re.IGNORECASE | re.DOTALL | re.MULTILINE,
)
# A new entry starts on a line that opens with a dated word ("Jan 2020", "Since 03/2021")
# or a "<Role> at <Company>" phrase.
_ENTRY_START_RE = re.compile(
    r"\n(?=\w+\s+\d{4}|\w+\s+\d{2}/\d{4}|[a-z]+\s+at\s+[a-z])",
    re.IGNORECASE,
)
DEFAULT_MIN_ENTRY_CHARS = 10


def extract_resume_skills(text: str, *, max_fragment_chars: int = DEFAULT_MAX_FRAGMENT_CHARS) -> list[str]:
    """Skills listed under the first skills heading, original casing kept, duplicates removed."""
    match = _SKILL_SECTION_RE.search(text or "")
    if not match or not match.group(1):
        return []
    return unique_in_order(split_skill_fragments(match.group(1), max_fragment_chars))


def extract_resume_experience(text: str, *, min_entry_chars: int = DEFAULT_MIN_ENTRY_CHARS) -> list[str]:
    match = _EXPERIENCE_SECTION_RE.search(text or "")
    if not match or not match.group(1):
        return []
    entries = (entry.strip() for entry in _ENTRY_START_RE.split(match.group(1)))
    return [entry for entry in entries if len(entry) > min_entry_chars]
