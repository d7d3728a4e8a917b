from __future__ import annotations

from typing import Optional, Sequence

import httpx
import openai
from openai import AsyncOpenAI

from resume_ats.ai.types import ChatMessage, Completion
from resume_ats.core.errors import ConfigurationError, TransportError


def _looks_like_placeholder(value: str) -> bool:
    lower = value.strip().lower()
    return lower.startswith("your_") or lower.startswith("replace_") or lower in {"changeme", "todo"}


class OpenAIProvider:
    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: float = 30.0,
        max_retries: int = 2,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self._model = model
        key = (api_key or "").strip()
        if not key or _looks_like_placeholder(key):
            raise ConfigurationError("OPENAI_API_KEY is missing")

        self._client = AsyncOpenAI(
            api_key=key,
            base_url=base_url or None,
            timeout=timeout_s,
            max_retries=max_retries,
            http_client=http_client,
        )

    @property
    def model(self) -> str:
        return self._model

    async def complete(
        self,
        messages: Sequence[ChatMessage],
        *,
        json_mode: bool = False,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> Completion:
        payload = [{"role": m.role, "content": m.content} for m in messages]

        create_kwargs = {
            "model": self._model,
            "messages": payload,
        }
        if temperature is not None:
            create_kwargs["temperature"] = temperature
        if max_tokens is not None:
            create_kwargs["max_tokens"] = max_tokens
        if json_mode:
            create_kwargs["response_format"] = {"type": "json_object"}

        try:
            response = await self._client.chat.completions.create(**create_kwargs)
        except (openai.AuthenticationError, openai.PermissionDeniedError) as exc:
            raise ConfigurationError(f"OpenAI rejected the configured credentials: {exc}") from exc
        except openai.OpenAIError as exc:
            raise TransportError(f"OpenAI API error: {exc}") from exc

        content = response.choices[0].message.content if response.choices else ""
        usage = getattr(response, "usage", None)
        return Completion(
            text=(content or "").strip(),
            model=getattr(response, "model", None) or self._model,
            prompt_tokens=int(getattr(usage, "prompt_tokens", 0) or 0),
            completion_tokens=int(getattr(usage, "completion_tokens", 0) or 0),
        )
