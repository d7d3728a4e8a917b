from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_float(name: str, default: float) -> float:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    log_level: str
    sentry_dsn: str | None
    ai_provider: str
    ai_model: str
    openai_api_key: str | None
    openai_base_url: str | None
    openai_timeout_s: float
    openai_max_retries: int
    ats_ai_enabled: bool
    ats_ai_timeout_s: float
    resume_parse_ai_enabled: bool
    resume_parse_ai_timeout_s: float


def load_settings() -> Settings:
    return Settings(
        log_level=(_get_env("LOG_LEVEL", "INFO") or "INFO").upper(),
        sentry_dsn=_get_env("SENTRY_DSN"),
        ai_provider=(_get_env("AI_PROVIDER", "openai") or "openai").strip().lower(),
        ai_model=(_get_env("AI_MODEL") or _get_env("OPENAI_MODEL") or "gpt-4o-mini").strip(),
        openai_api_key=(_get_env("OPENAI_API_KEY") or "").strip() or None,
        openai_base_url=_get_env("OPENAI_BASE_URL"),
        openai_timeout_s=_get_env_float("OPENAI_TIMEOUT_S", 30.0),
        openai_max_retries=_get_env_int("OPENAI_MAX_RETRIES", 2),
        ats_ai_enabled=_get_env_bool("ATS_AI_ENABLED", True),
        ats_ai_timeout_s=_get_env_float("ATS_AI_TIMEOUT_S", 20.0),
        resume_parse_ai_enabled=_get_env_bool("RESUME_PARSE_AI_ENABLED", True),
        resume_parse_ai_timeout_s=_get_env_float("RESUME_PARSE_AI_TIMEOUT_S", 45.0),
    )


settings = load_settings()

if settings.ats_ai_timeout_s <= 0:
    raise RuntimeError("ATS_AI_TIMEOUT_S must be a positive number of seconds.")

if settings.resume_parse_ai_timeout_s <= 0:
    raise RuntimeError("RESUME_PARSE_AI_TIMEOUT_S must be a positive number of seconds.")

__all__ = ["Settings", "settings", "load_settings"]
