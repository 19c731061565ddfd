"""
OpenAI Translator - GPT-4o, GPT-4o-mini, etc.
Localization Orchestrator - ProviderB (marketing / technical content)
"""

from typing import Optional

import openai
from openai import AsyncOpenAI

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


class OpenAITranslator(BaseTranslator):
    """
    OpenAI GPT translator.

    Strong on marketing copy and technical documentation.
    """

    MODELS = {
        "gpt-4o": "GPT-4o (Latest, Multimodal)",
        "gpt-4o-mini": "GPT-4o Mini (Fast)",
        "gpt-4-turbo": "GPT-4 Turbo",
    }

    DEFAULT_MODEL = "gpt-4o"

    @property
    def provider_id(self) -> ProviderID:
        return ProviderID.OPENAI

    async def initialize(self) -> None:
        """Initialize OpenAI client"""
        self._client = AsyncOpenAI(
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
        """Translate text using the chat completions API"""
        if not self._client:
            await self.initialize()

        options = options or TranslateOptions()
        messages = [
            {"role": "system", "content": build_system_prompt(source_locale, target_locale, options)},
            {"role": "user", "content": text},
        ]

        try:
            response = await self._client.chat.completions.create(
                model=self.config.model,
                max_tokens=self.config.max_tokens,
                temperature=self.config.temperature,
                messages=messages
            )
        except openai.APITimeoutError as e:
            raise ProviderError(ErrorKind.TIMEOUT, str(e), provider=self.provider_id) from e
        except openai.RateLimitError as e:
            raise ProviderError(ErrorKind.QUOTA_EXCEEDED, str(e), provider=self.provider_id) from e
        except openai.APIError as e:
            logger.warning(f"{self.provider_id.value} API error ({target_locale}): {e}")
            raise ProviderError(classify_error(e), str(e), provider=self.provider_id) from e

        if not response.choices:
            raise ProviderError(
                ErrorKind.INVALID_RESPONSE, "no choices returned", provider=self.provider_id
            )
        return self._require_text(response.choices[0].message.content)
