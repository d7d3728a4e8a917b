from __future__ import annotations

import logging

from resume_ats.core.config.scoring import get_scoring_value
from resume_ats.features.experience_alignment import ExperienceAligner
from resume_ats.features.jd_features import extract_required_skills
from resume_ats.features.skill_matcher import SkillMatcher
from resume_ats.normalize.keywords import KeywordExtractor
from resume_ats.normalize.resume_text import flatten_resume_text
from resume_ats.normalize.text import TextNormalizer
from resume_ats.normalize.utils import clamp_score, unique_in_order
from resume_ats.schemas.ats import ScoreResult
from resume_ats.schemas.resume import ResumeData
from resume_ats.taxonomy import Lexicon, get_default_lexicon

logger = logging.getLogger(__name__)


def candidate_skills(resume: ResumeData) -> list[str]:
    skills = [skill.strip().lower() for skill in resume.skills]
    for project in resume.projects:
        skills.extend(tech.strip().lower() for tech in project.technologies)
    return unique_in_order(skill for skill in skills if skill)


def keyword_overlap(job_keywords: list[str], resume_tokens: set[str]) -> float:
    if not job_keywords:
        return 0.0
    found = sum(1 for keyword in job_keywords if keyword in resume_tokens)
    return found / len(job_keywords) * 100


class RuleBasedScorer:
    """Deterministic lexical ATS scoring. Makes no external calls."""

    name = "rule_based"

    def __init__(self, lexicon: Lexicon | None = None) -> None:
        self._lexicon = lexicon or get_default_lexicon()
        self._normalizer = TextNormalizer(self._lexicon.stop_words)
        self._extractor = KeywordExtractor(self._normalizer, self._lexicon.tech_terms)
        self._matcher = SkillMatcher()
        self._aligner = ExperienceAligner(self._extractor)

        self._w_keywords = float(get_scoring_value("ats.rule_based.weights.keyword_overlap", 0.4))
        self._w_skills = float(get_scoring_value("ats.rule_based.weights.skill_match", 0.4))
        self._w_experience = float(get_scoring_value("ats.rule_based.weights.experience_alignment", 0.2))
        self._max_missing = int(get_scoring_value("ats.rule_based.limits.missing_skills", 15))
        self._max_improvements = int(get_scoring_value("ats.rule_based.limits.keyword_improvements", 10))
        self._max_fragment_chars = int(get_scoring_value("ats.rule_based.limits.skill_fragment_max_chars", 50))

    def score(self, resume: ResumeData, job_description: str) -> ScoreResult:
        job_text = job_description or ""
        resume_tokens = set(self._normalizer.tokens(flatten_resume_text(resume)))
        job_keywords = self._extractor.extract(job_text)

        overlap = keyword_overlap(job_keywords, resume_tokens)

        required = extract_required_skills(
            job_text,
            self._extractor,
            section_terms=self._lexicon.section_terms,
            max_fragment_chars=self._max_fragment_chars,
        )
        skills = self._matcher.compare(candidate_skills(resume), required)

        alignment = self._aligner.breakdown(resume, job_text, job_keywords=job_keywords).score

        composite = (
            self._w_keywords * overlap
            + self._w_skills * skills.percentage
            + self._w_experience * alignment
        )
        improvements = [keyword for keyword in job_keywords if keyword not in resume_tokens]

        logger.info(
            "ats_rule_based_scored score=%s keyword_overlap=%.2f skill_match=%.2f "
            "experience_alignment=%.2f required_skills=%s job_keywords=%s",
            clamp_score(composite),
            overlap,
            skills.percentage,
            alignment,
            len(required),
            len(job_keywords),
        )
        return ScoreResult(
            score=composite,
            skill_match=skills.percentage,
            missing_skills=skills.missing[: self._max_missing],
            keyword_improvements=improvements[: self._max_improvements],
            experience_alignment=alignment,
            strategy="rule_based",
        )
