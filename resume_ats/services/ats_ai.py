from __future__ import annotations

import asyncio
import json
import logging
import math
import re
import time
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from resume_ats.ai.factory import get_ai_client
from resume_ats.ai.pricing import calculate_cost
from resume_ats.ai.types import AIClient, ChatMessage, Completion
from resume_ats.core.config import settings
from resume_ats.core.config.scoring import get_scoring_value
from resume_ats.core.errors import (
    AIScoringError,
    ConfigurationError,
    ResponseFormatError,
    ResponseValidationError,
    TransportError,
)
from resume_ats.normalize.utils import clean_strings
from resume_ats.schemas.ats import AIUsage, ATSAnalysis, ScoreResult
from resume_ats.schemas.resume import ResumeData

from .ats_prompts import build_ats_messages

logger = logging.getLogger(__name__)

_FENCED_JSON_RE = re.compile(r"```(?:json)?\s*(\{[\s\S]*\})\s*```", re.IGNORECASE)
_NUMERIC_FIELDS = ("score", "skillMatch", "experienceAlignment")
_ARRAY_FIELDS = ("missingSkills", "keywordImprovements")


@dataclass(frozen=True)
class ParseOutcome:
    payload: dict[str, Any] | None = None
    error: str | None = None
    recovered: bool = False

    @property
    def ok(self) -> bool:
        return self.payload is not None


@dataclass(frozen=True)
class ValidationOutcome:
    result: ScoreResult | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.result is not None


def _as_object(text: str) -> dict[str, Any] | None:
    try:
        parsed = json.loads(text)
    except (json.JSONDecodeError, ValueError):
        return None
    return parsed if isinstance(parsed, dict) else None


def parse_ai_payload(text: str) -> ParseOutcome:
    """Canonical JSON parse, then a fenced ```json block as the only recovery path."""
    raw = (text or "").strip()
    if not raw:
        return ParseOutcome(error="empty response")

    payload = _as_object(raw)
    if payload is not None:
        return ParseOutcome(payload=payload)

    match = _FENCED_JSON_RE.search(raw)
    if match:
        payload = _as_object(match.group(1))
        if payload is not None:
            return ParseOutcome(payload=payload, recovered=True)
    return ParseOutcome(error="response is not a JSON object")


def _coerce_number(value: Any) -> float | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def validate_ai_payload(
    payload: dict[str, Any],
    *,
    max_missing: int = 15,
    max_improvements: int = 15,
    max_recommendations: int = 5,
) -> ValidationOutcome:
    numbers: dict[str, float] = {}
    for name in _NUMERIC_FIELDS:
        number = _coerce_number(payload.get(name))
        if number is None:
            return ValidationOutcome(error=f"'{name}' is missing or not a number")
        numbers[name] = number

    for name in _ARRAY_FIELDS:
        if not isinstance(payload.get(name), list):
            return ValidationOutcome(error=f"'{name}' is missing or not an array")

    raw_analysis = payload.get("analysis")
    analysis = ATSAnalysis.model_validate(raw_analysis) if isinstance(raw_analysis, dict) else None

    improvements = clean_strings(payload["keywordImprovements"])
    if analysis is not None:
        known = {item.casefold() for item in improvements}
        for recommendation in analysis.recommendations[:max_recommendations]:
            if recommendation.casefold() not in known:
                improvements.append(recommendation)
                known.add(recommendation.casefold())

    result = ScoreResult(
        score=numbers["score"],
        skill_match=numbers["skillMatch"],
        missing_skills=clean_strings(payload["missingSkills"], limit=max_missing),
        keyword_improvements=improvements[:max_improvements],
        experience_alignment=numbers["experienceAlignment"],
        strategy="ai",
        analysis=analysis,
    )
    return ValidationOutcome(result=result)


async def request_json_completion(
    get_client: Callable[[], AIClient],
    messages: Sequence[ChatMessage],
    *,
    temperature: float,
    max_tokens: int,
    timeout_s: float,
) -> Completion:
    """Run one JSON-mode completion; every failure surfaces as an AIScoringError."""
    try:
        client = get_client()
    except AIScoringError:
        raise
    except Exception as exc:  # noqa: BLE001 - a broken client factory means AI is unusable
        raise ConfigurationError(f"AI client could not be created: {exc}") from exc

    try:
        return await asyncio.wait_for(
            client.complete(messages, json_mode=True, temperature=temperature, max_tokens=max_tokens),
            timeout=timeout_s,
        )
    except AIScoringError:
        raise
    except asyncio.TimeoutError as exc:
        raise TransportError(f"AI request timed out after {timeout_s:g}s") from exc
    except Exception as exc:  # noqa: BLE001 - any collaborator failure is a transport failure
        raise TransportError(f"AI collaborator failed: {exc}") from exc


def usage_from_completion(completion: Completion) -> AIUsage:
    return AIUsage(
        model=completion.model,
        prompt_tokens=completion.prompt_tokens,
        completion_tokens=completion.completion_tokens,
        total_tokens=completion.prompt_tokens + completion.completion_tokens,
        cost_usd=calculate_cost(completion.model, completion.prompt_tokens, completion.completion_tokens),
    )


class AIScorer:
    """Delegates ATS scoring to a language model and validates its JSON answer."""

    name = "ai"

    def __init__(
        self,
        client: AIClient | None = None,
        *,
        client_factory: Callable[[], AIClient] = get_ai_client,
        timeout_s: float | None = None,
    ) -> None:
        self._client = client
        self._client_factory = client_factory
        self._timeout_s = float(timeout_s if timeout_s is not None else settings.ats_ai_timeout_s)
        self._temperature = float(get_scoring_value("ats.ai.temperature", 0.3))
        self._max_tokens = int(get_scoring_value("ats.ai.max_tokens", 2000))
        self._max_missing = int(get_scoring_value("ats.ai.limits.missing_skills", 15))
        self._max_improvements = int(get_scoring_value("ats.ai.limits.keyword_improvements", 15))
        self._max_recommendations = int(get_scoring_value("ats.ai.limits.recommendations_as_keywords", 5))

    def _get_client(self) -> AIClient:
        if self._client is None:
            self._client = self._client_factory()
        return self._client

    async def score(self, resume: ResumeData, job_description: str) -> ScoreResult:
        started = time.perf_counter()
        completion = await request_json_completion(
            self._get_client,
            build_ats_messages(resume, job_description),
            temperature=self._temperature,
            max_tokens=self._max_tokens,
            timeout_s=self._timeout_s,
        )

        parsed = parse_ai_payload(completion.text)
        if not parsed.ok:
            raise ResponseFormatError(f"Failed to parse AI response as JSON: {parsed.error}")
        if parsed.recovered:
            logger.info("ats_ai_payload_recovered_from_fence model=%s", completion.model)

        validated = validate_ai_payload(
            parsed.payload or {},
            max_missing=self._max_missing,
            max_improvements=self._max_improvements,
            max_recommendations=self._max_recommendations,
        )
        if not validated.ok or validated.result is None:
            raise ResponseValidationError(f"AI response failed validation: {validated.error}")

        usage = usage_from_completion(completion)
        logger.info(
            "ats_ai_scored model=%s score=%s tokens=%s latency_ms=%s",
            completion.model,
            validated.result.score,
            usage.total_tokens,
            int((time.perf_counter() - started) * 1000),
        )
        return validated.result.model_copy(update={"usage": usage})
