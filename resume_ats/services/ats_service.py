from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Mapping
from functools import lru_cache
from typing import Any, Protocol

from pydantic import ValidationError

from resume_ats.core.config import settings
from resume_ats.core.errors import AICancelledError, AIScoringError, InputError
from resume_ats.schemas.ats import ScoreResult
from resume_ats.schemas.resume import ResumeData

from .ats_ai import AIScorer
from .ats_rule_based import RuleBasedScorer

logger = logging.getLogger(__name__)


class AIStrategy(Protocol):
    async def score(self, resume: ResumeData, job_description: str) -> ScoreResult: ...


class RuleBasedStrategy(Protocol):
    def score(self, resume: ResumeData, job_description: str) -> ScoreResult: ...


def coerce_resume(resume_data: Any) -> ResumeData | None:
    """Return None for absent/empty input, a ResumeData otherwise; raise InputError on malformed input."""
    if resume_data is None:
        return None
    if isinstance(resume_data, ResumeData):
        return None if resume_data.is_empty() else resume_data
    if not isinstance(resume_data, Mapping):
        raise InputError(
            f"resume_data must be a mapping or ResumeData, got {type(resume_data).__name__}"
        )
    if not resume_data:
        return None
    try:
        resume = ResumeData.model_validate(dict(resume_data))
    except ValidationError as exc:
        raise InputError(f"resume_data is malformed: {exc.error_count()} invalid field(s)") from exc
    return None if resume.is_empty() else resume


class ATSScoringFacade:
    """Single entry point for ATS scoring: AI first, rule-based on any AI failure."""

    def __init__(
        self,
        ai_strategy: AIStrategy | None,
        rule_strategy: RuleBasedStrategy | None = None,
    ) -> None:
        self._ai = ai_strategy
        self._rules = rule_strategy or RuleBasedScorer()

    @staticmethod
    async def _score_with_ai(
        ai: AIStrategy,
        resume: ResumeData,
        job_description: str,
        cancel_event: asyncio.Event | None,
    ) -> ScoreResult:
        if cancel_event is None:
            return await ai.score(resume, job_description)

        ai_task = asyncio.ensure_future(ai.score(resume, job_description))
        cancel_task = asyncio.ensure_future(cancel_event.wait())
        try:
            done, _ = await asyncio.wait({ai_task, cancel_task}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            cancel_task.cancel()
            if not ai_task.done():
                ai_task.cancel()

        if ai_task in done:
            return ai_task.result()
        with contextlib.suppress(asyncio.CancelledError, AIScoringError):
            await ai_task
        raise AICancelledError()

    async def compute_score(
        self,
        resume_data: Any,
        job_description: str,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> ScoreResult:
        if job_description is not None and not isinstance(job_description, str):
            raise InputError(
                f"job_description must be a string, got {type(job_description).__name__}"
            )
        resume = coerce_resume(resume_data)
        if resume is None:
            return ScoreResult.empty()

        job_text = job_description or ""
        if self._ai is None:
            return self._rules.score(resume, job_text)

        try:
            return await self._score_with_ai(self._ai, resume, job_text, cancel_event)
        except AIScoringError as exc:
            logger.warning("ats_ai_failed code=%s fallback=rule_based: %s", exc.code, exc)
            return self._rules.score(resume, job_text)

    def compute_score_sync(self, resume_data: Any, job_description: str) -> ScoreResult:
        return asyncio.run(self.compute_score(resume_data, job_description))


@lru_cache(maxsize=1)
def get_default_facade() -> ATSScoringFacade:
    ai_strategy = AIScorer() if settings.ats_ai_enabled else None
    if ai_strategy is None:
        logger.info("ats_ai_disabled strategy=rule_based")
    return ATSScoringFacade(ai_strategy, RuleBasedScorer())


async def compute_score(
    resume_data: Any,
    job_description: str,
    *,
    cancel_event: asyncio.Event | None = None,
) -> ScoreResult:
    return await get_default_facade().compute_score(
        resume_data, job_description, cancel_event=cancel_event
    )
