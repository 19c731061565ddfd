"""
Claude Translator - Anthropic
Localization Orchestrator - ProviderA (high-quality regional)
"""

from typing import Optional

import anthropic

from config.logging_config import get_logger
from .base import (
    BaseTranslator,
    ProviderID,
    ProviderError,
    ErrorKind,
    TranslateOptions,
    build_system_prompt,
    classify_error,
)

logger = get_logger(__name__)


class ClaudeTranslator(BaseTranslator):
    """
    Anthropic Claude translator.

    Used for the high-quality regional markets where nuance matters most.
    """

    MODELS = {
        "claude-sonnet-4-20250514": "Claude Sonnet 4 (Latest)",
        "claude-3-5-sonnet-20241022": "Claude 3.5 Sonnet",
        "claude-3-5-haiku-20241022": "Claude 3.5 Haiku",
    }

    DEFAULT_MODEL = "claude-sonnet-4-20250514"

    @property
    def provider_id(self) -> ProviderID:
        return ProviderID.CLAUDE

    async def initialize(self) -> None:
        """Initialize Anthropic client"""
        self._client = anthropic.AsyncAnthropic(
            api_key=self.config.api_key,
            base_url=self.config.base_url,
            http_client=self._http_client(),
            max_retries=0,  # retries are owned by the orchestrator
        )

    async def translate(
        self,
        text: str,
        source_locale: str,
        target_locale: str,
        options: Optional[TranslateOptions] = None
    ) -> str:
        """Translate text using Claude"""
        if not self._client:
            await self.initialize()

        options = options or TranslateOptions()
        system_prompt = build_system_prompt(source_locale, target_locale, options)

        try:
            response = await self._client.messages.create(
                model=self.config.model,
                max_tokens=self.config.max_tokens,
                temperature=self.config.temperature,
                system=system_prompt,
                messages=[{"role": "user", "content": text}]
            )
        except anthropic.APITimeoutError as e:
            raise ProviderError(ErrorKind.TIMEOUT, str(e), provider=self.provider_id) from e
        except anthropic.RateLimitError as e:
            raise ProviderError(ErrorKind.QUOTA_EXCEEDED, str(e), provider=self.provider_id) from e
        except anthropic.APIError as e:
            logger.warning(f"Claude API error ({target_locale}): {e}")
            raise ProviderError(classify_error(e), str(e), provider=self.provider_id) from e

        blocks = [
            block.text for block in (response.content or [])
            if getattr(block, "type", None) == "text"
        ]
        return self._require_text("".join(blocks) if blocks else None)
