from dataclasses import dataclass

from resume_ats.core.config import Settings, settings


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str
    api_key: str | None
    base_url: str | None
    timeout_s: float
    max_retries: int


def load_ai_config(source: Settings | None = None) -> AIConfig:
    cfg = source or settings
    return AIConfig(
        provider=cfg.ai_provider,
        model=cfg.ai_model,
        api_key=cfg.openai_api_key,
        base_url=cfg.openai_base_url,
        timeout_s=cfg.openai_timeout_s,
        max_retries=cfg.openai_max_retries,
    )
