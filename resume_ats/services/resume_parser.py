from __future__ import annotations

import logging
from functools import lru_cache
from typing import Callable

from resume_ats.ai.factory import get_ai_client
from resume_ats.ai.types import AIClient
from resume_ats.core.config import settings
from resume_ats.core.config.scoring import get_scoring_value
from resume_ats.core.errors import AIScoringError, InputError, ResponseFormatError
from resume_ats.features.resume_features import extract_resume_experience, extract_resume_skills
from resume_ats.schemas.ats import AIUsage
from resume_ats.schemas.parsed_resume import ParsedResume, coerce_parsed_resume
from resume_ats.schemas.resume import ResumeData

from .ats_ai import parse_ai_payload, request_json_completion, usage_from_completion
from .resume_prompts import build_resume_parse_messages

logger = logging.getLogger(__name__)


class ResumeParser:
    """Turns plain resume text into structured data.

    The language model is asked first. When it is disabled or fails, skills and
    experience entries are pulled from the text with section heuristics and
    ``structured_data`` stays empty.
    """

    def __init__(
        self,
        client: AIClient | None = None,
        *,
        client_factory: Callable[[], AIClient] = get_ai_client,
        timeout_s: float | None = None,
        ai_enabled: bool | None = None,
    ) -> None:
        self._client = client
        self._client_factory = client_factory
        self._ai_enabled = settings.resume_parse_ai_enabled if ai_enabled is None else ai_enabled
        self._timeout_s = float(timeout_s if timeout_s is not None else settings.resume_parse_ai_timeout_s)
        self._temperature = float(get_scoring_value("resume_parse.ai.temperature", 0.1))
        self._max_tokens = int(get_scoring_value("resume_parse.ai.max_tokens", 4000))
        self._max_fragment_chars = int(get_scoring_value("resume_parse.limits.skill_fragment_max_chars", 50))
        self._min_entry_chars = int(get_scoring_value("resume_parse.limits.min_experience_entry_chars", 10))

    def _get_client(self) -> AIClient:
        if self._client is None:
            self._client = self._client_factory()
        return self._client

    async def _parse_with_ai(self, raw_text: str) -> tuple[ResumeData, AIUsage]:
        completion = await request_json_completion(
            self._get_client,
            build_resume_parse_messages(raw_text),
            temperature=self._temperature,
            max_tokens=self._max_tokens,
            timeout_s=self._timeout_s,
        )
        parsed = parse_ai_payload(completion.text)
        if not parsed.ok:
            raise ResponseFormatError(f"Failed to parse resume extraction as JSON: {parsed.error}")
        if parsed.recovered:
            logger.info("resume_ai_payload_recovered_from_fence model=%s", completion.model)
        return coerce_parsed_resume(parsed.payload or {}), usage_from_completion(completion)

    async def parse(self, raw_text: str) -> ParsedResume:
        if not isinstance(raw_text, str) or not raw_text.strip():
            raise InputError("resume text must be a non-empty string")
        text = raw_text.strip()

        structured: ResumeData | None = None
        usage: AIUsage | None = None
        if self._ai_enabled:
            try:
                structured, usage = await self._parse_with_ai(text)
            except AIScoringError as exc:
                logger.warning("resume_ai_parse_failed code=%s fallback=rule_based: %s", exc.code, exc)

        if structured is None:
            result = ParsedResume(
                raw_text=text,
                skills=extract_resume_skills(text, max_fragment_chars=self._max_fragment_chars),
                experience=extract_resume_experience(text, min_entry_chars=self._min_entry_chars),
            )
        else:
            result = ParsedResume(
                raw_text=text,
                skills=structured.skills,
                experience=[f"{entry.title} at {entry.company}" for entry in structured.experience],
                structured_data=structured,
                strategy="ai",
                usage=usage,
            )

        logger.info(
            "resume_parsed strategy=%s skills=%s experience_entries=%s chars=%s",
            result.strategy,
            len(result.skills),
            len(result.experience),
            len(text),
        )
        return result


@lru_cache(maxsize=1)
def get_default_resume_parser() -> ResumeParser:
    return ResumeParser()


async def parse_resume(raw_text: str) -> ParsedResume:
    return await get_default_resume_parser().parse(raw_text)
