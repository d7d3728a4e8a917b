from resume_ats.ai.config import load_ai_config
from resume_ats.ai.providers.openai_provider import OpenAIProvider
from resume_ats.ai.types import AIClient
from resume_ats.core.errors import ConfigurationError


def get_ai_client() -> AIClient:
    cfg = load_ai_config()

    if cfg.provider == "openai":
        return OpenAIProvider(
            model=cfg.model,
            api_key=cfg.api_key,
            base_url=cfg.base_url,
            timeout_s=cfg.timeout_s,
            max_retries=cfg.max_retries,
        )

    raise ConfigurationError(f"Unsupported AI_PROVIDER='{cfg.provider}'")
