"""
Translator Manager
Localization Orchestrator - Multi-Provider Support

Builds the translator for every configured provider.
"""

import os
from typing import Optional, Dict, List, Type
from dataclasses import dataclass

from config.logging_config import get_logger
from config.settings import Settings
from .base import BaseTranslator, ProviderID, TranslatorConfig
from .claude_translator import ClaudeTranslator
from .openai_translator import OpenAITranslator
from .deepseek_translator import DeepSeekTranslator

logger = get_logger(__name__)


@dataclass
class ProviderInfo:
    """Information about a translation provider"""
    id: ProviderID
    name: str
    description: str
    models: Dict[str, str]
    default_model: str
    env_key: str  # Environment variable name for API key


# Registry of all available providers
PROVIDER_REGISTRY: Dict[ProviderID, Type[BaseTranslator]] = {
    ProviderID.CLAUDE: ClaudeTranslator,
    ProviderID.OPENAI: OpenAITranslator,
    ProviderID.DEEPSEEK: DeepSeekTranslator,
}

# Provider information
PROVIDER_INFO: Dict[ProviderID, ProviderInfo] = {
    ProviderID.CLAUDE: ProviderInfo(
        id=ProviderID.CLAUDE,
        name="Anthropic Claude",
        description="Claude - Best for nuanced regional localization",
        models=ClaudeTranslator.MODELS,
        default_model=ClaudeTranslator.DEFAULT_MODEL,
        env_key="ANTHROPIC_API_KEY"
    ),
    ProviderID.OPENAI: ProviderInfo(
        id=ProviderID.OPENAI,
        name="OpenAI GPT",
        description="GPT-4o - Marketing and technical content",
        models=OpenAITranslator.MODELS,
        default_model=OpenAITranslator.DEFAULT_MODEL,
        env_key="OPENAI_API_KEY"
    ),
    ProviderID.DEEPSEEK: ProviderInfo(
        id=ProviderID.DEEPSEEK,
        name="DeepSeek",
        description="DeepSeek V3 - Cost-effective default",
        models=DeepSeekTranslator.MODELS,
        default_model=DeepSeekTranslator.DEFAULT_MODEL,
        env_key="DEEPSEEK_API_KEY"
    ),
}


class TranslatorManager:
    """
    Creates and caches one translator per provider.

    Usage:
        manager = TranslatorManager(settings)
        translators = manager.build_all()
        text = await translators[ProviderID.CLAUDE].translate("Hello", "en", "de")
    """

    def __init__(
        self,
        settings: Settings,
        api_keys: Optional[Dict[ProviderID, str]] = None
    ):
        """
        Args:
            settings: Application settings (models, timeouts, keys)
            api_keys: Optional explicit keys; override settings and environment
        """
        self._settings = settings
        self._api_keys = api_keys or {}
        self._translators: Dict[ProviderID, BaseTranslator] = {}

    def _get_api_key(self, provider_id: ProviderID) -> str:
        """Get API key for a provider from dict, settings or environment"""
        if provider_id in self._api_keys:
            return self._api_keys[provider_id]

        key = self._settings.get_api_key(provider_id.value)
        if not key:
            key = os.environ.get(PROVIDER_INFO[provider_id].env_key, "")

        if not key:
            info = PROVIDER_INFO[provider_id]
            raise ValueError(
                f"API key not found for {info.name}. "
                f"Set {info.env_key} environment variable or pass api_keys dict."
            )
        return key

    def _model_for(self, provider_id: ProviderID) -> str:
        return {
            ProviderID.CLAUDE: self._settings.claude_model,
            ProviderID.OPENAI: self._settings.openai_model,
            ProviderID.DEEPSEEK: self._settings.deepseek_model,
        }[provider_id]

    def _create_translator(self, provider_id: ProviderID) -> BaseTranslator:
        """Create a translator instance"""
        config = TranslatorConfig(
            api_key=self._get_api_key(provider_id),
            model=self._model_for(provider_id) or PROVIDER_INFO[provider_id].default_model,
            timeout=self._settings.provider_timeout,
            base_url=self._settings.deepseek_base_url if provider_id is ProviderID.DEEPSEEK else None,
        )
        return PROVIDER_REGISTRY[provider_id](config)

    def get_translator(self, provider_id: ProviderID) -> BaseTranslator:
        """Get a translator, creating it on first use"""
        if provider_id not in self._translators:
            self._translators[provider_id] = self._create_translator(provider_id)
        return self._translators[provider_id]

    def get_available_providers(self) -> List[ProviderInfo]:
        """Get list of providers that have API keys configured"""
        available = []
        for pid, info in PROVIDER_INFO.items():
            try:
                self._get_api_key(pid)
                available.append(info)
            except ValueError:
                pass
        return available

    def build_all(self) -> Dict[ProviderID, BaseTranslator]:
        """Translators for every provider with a configured key"""
        translators = {}
        for info in self.get_available_providers():
            translators[info.id] = self.get_translator(info.id)

        missing = set(PROVIDER_REGISTRY) - set(translators)
        if missing:
            logger.warning(
                "No API key for: " + ", ".join(sorted(p.value for p in missing))
                + " - locales routed there will fail"
            )
        return translators

    @staticmethod
    def list_providers() -> List[ProviderInfo]:
        """List all known providers"""
        return list(PROVIDER_INFO.values())
