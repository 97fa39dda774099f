"""
Report generator — forwards a user prompt to the LLM and returns HTML.
"""

from __future__ import annotations

import logging
from typing import Optional

from config.settings import Settings
from utils.errors import UpstreamServiceError, ValidationError
from utils.llm_providers import BaseLLMProvider, get_llm_provider
from utils.prompt_utils import format_report_prompt

logger = logging.getLogger(__name__)


class ReportGenerator:
    def __init__(self, settings: Settings, provider: Optional[BaseLLMProvider] = None):
        self.settings = settings
        self._provider = provider

    @property
    def provider(self) -> BaseLLMProvider:
        if self._provider is None:
            if not self.settings.openrouter_api_key:
                logger.error("OPENROUTER_API_KEY is not configured")
                raise UpstreamServiceError()
            self._provider = get_llm_provider(self.settings)
        return self._provider

    async def generate(self, prompt: Optional[str]) -> str:
        if prompt is None or not prompt.strip():
            raise ValidationError("O prompt é obrigatório.")

        provider = self.provider
        try:
            report = await provider.generate(
                format_report_prompt(prompt),
                temperature=self.settings.report_temperature,
                model=self.settings.report_model,
                max_tokens=self.settings.report_max_tokens,
            )
        except Exception as exc:
            logger.error("Report generation with %s failed: %s", self.settings.report_model, exc)
            raise UpstreamServiceError() from exc

        if not report.strip():
            logger.error("Report generation with %s returned empty content", self.settings.report_model)
            raise UpstreamServiceError()

        logger.info("Generated report (%d chars)", len(report))
        return report
