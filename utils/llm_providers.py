"""
Thin adapter layer over OpenAI-compatible chat completion APIs.

OpenRouter speaks the OpenAI wire format, so one provider class covers it by
pointing the SDK at a different ``base_url``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

from config.settings import Settings

logger = logging.getLogger(__name__)


class BaseLLMProvider(ABC):
    """Common interface that every concrete provider implements."""

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        *,
        temperature: float = 0.7,
        model: str | None = None,
        max_tokens: int = 2000,
    ) -> str:
        ...


class OpenAICompatibleProvider(BaseLLMProvider):
    def __init__(
        self,
        api_key: str,
        *,
        base_url: str | None = None,
        default_model: str = "gpt-4o-mini",
        extra_headers: Optional[Dict[str, str]] = None,
    ):
        from openai import AsyncOpenAI

        self.client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            default_headers=extra_headers or None,
        )
        self.default_model = default_model

    async def generate(
        self,
        prompt: str,
        *,
        temperature: float = 0.7,
        model: str | None = None,
        max_tokens: int = 2000,
    ) -> str:
        model = model or self.default_model

        response = await self.client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
            temperature=temperature,
            max_tokens=max_tokens,
        )

        if not response.choices:
            logger.warning("Completion from %s returned no choices", model)
            return ""
        return response.choices[0].message.content or ""


# ═══════════════════════════════════════════════════════════════════════════════
# Factory
# ═══════════════════════════════════════════════════════════════════════════════

_provider_cache: Dict[str, BaseLLMProvider] = {}


def get_llm_provider(settings: Settings) -> BaseLLMProvider:
    """Return (and cache) the provider described by ``settings``."""
    cache_key = f"{settings.openrouter_base_url}:{settings.report_model}"
    if cache_key in _provider_cache:
        return _provider_cache[cache_key]

    headers: Dict[str, str] = {}
    if settings.site_url:
        headers["HTTP-Referer"] = settings.site_url
    if settings.site_name:
        headers["X-Title"] = settings.site_name

    instance = OpenAICompatibleProvider(
        api_key=settings.openrouter_api_key,
        base_url=settings.openrouter_base_url,
        default_model=settings.report_model,
        extra_headers=headers,
    )
    _provider_cache[cache_key] = instance
    return instance
