from __future__ import annotations

import logging
from dataclasses import dataclass

from resume_ats.core.config.scoring import get_scoring_value
from resume_ats.normalize.keywords import KeywordExtractor
from resume_ats.schemas.resume import ExperienceEntry, ResumeData

from .jd_features import infer_job_title

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AlignmentBreakdown:
    inferred_title: str
    title_match: float
    keyword_match: float
    score: float


def _title_match(job_title: str, entries: list[ExperienceEntry], min_word_chars: int) -> float:
    title_words = [word for word in job_title.split() if len(word) >= min_word_chars]
    if not title_words:
        return 0.0
    best = 0.0
    for entry in entries:
        entry_title = entry.title.lower()
        matched = sum(1 for word in title_words if word in entry_title)
        best = max(best, matched / len(title_words) * 100)
    return best


def _experience_blob(entries: list[ExperienceEntry]) -> str:
    chunks: list[str] = []
    for entry in entries:
        chunks.append(entry.title)
        chunks.append(entry.company)
        chunks.extend(entry.bullets)
    return " ".join(chunks).lower()


class ExperienceAligner:
    """Scores work history against the role a job description appears to be hiring for."""

    def __init__(
        self,
        extractor: KeywordExtractor | None = None,
        *,
        title_weight: float | None = None,
        keyword_weight: float | None = None,
    ) -> None:
        self._extractor = extractor or KeywordExtractor()
        self._title_weight = float(
            title_weight if title_weight is not None
            else get_scoring_value("ats.experience_alignment.weights.title", 0.4)
        )
        self._keyword_weight = float(
            keyword_weight if keyword_weight is not None
            else get_scoring_value("ats.experience_alignment.weights.keywords", 0.6)
        )
        self._min_title_word_chars = int(
            get_scoring_value("ats.experience_alignment.min_title_word_chars", 4)
        )

    def breakdown(
        self,
        resume: ResumeData,
        job_description: str,
        *,
        job_keywords: list[str] | None = None,
    ) -> AlignmentBreakdown:
        if not resume.experience:
            return AlignmentBreakdown(inferred_title="", title_match=0.0, keyword_match=0.0, score=0.0)

        job_title = infer_job_title(job_description)
        title_match = _title_match(job_title, resume.experience, self._min_title_word_chars)

        keywords = job_keywords if job_keywords is not None else self._extractor.extract(job_description)
        keyword_match = 0.0
        if keywords:
            blob = _experience_blob(resume.experience)
            found = sum(1 for keyword in keywords if keyword in blob)
            keyword_match = found / len(keywords) * 100

        score = self._title_weight * title_match + self._keyword_weight * keyword_match
        logger.debug(
            "experience_alignment title=%r title_match=%.2f keyword_match=%.2f score=%.2f",
            job_title,
            title_match,
            keyword_match,
            score,
        )
        return AlignmentBreakdown(
            inferred_title=job_title,
            title_match=title_match,
            keyword_match=keyword_match,
            score=score,
        )

    def alignment_score(self, resume: ResumeData, job_description: str) -> float:
        return self.breakdown(resume, job_description).score
