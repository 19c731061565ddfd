"""
DeepSeek Translator - OpenAI-compatible API
Localization Orchestrator - ProviderC (default / fallback)
"""

from dataclasses import replace

from config.constants import DEEPSEEK_BASE_URL
from .base import ProviderID, TranslatorConfig
from .openai_translator import OpenAITranslator


class DeepSeekTranslator(OpenAITranslator):
    """
    DeepSeek translator.

    Cost-effective, strong multilingual model; the default route for
    generic content outside the regional markets.
    """

    MODELS = {
        "deepseek-chat": "DeepSeek V3 (Chat)",
        "deepseek-reasoner": "DeepSeek R1 (Reasoning)",
    }

    DEFAULT_MODEL = "deepseek-chat"

    def __init__(self, config: TranslatorConfig):
        if not config.base_url:
            config = replace(config, base_url=DEEPSEEK_BASE_URL)
        super().__init__(config)

    @property
    def provider_id(self) -> ProviderID:
        return ProviderID.DEEPSEEK
