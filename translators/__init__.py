"""
Translators Package
Localization Orchestrator - Multi-Provider Support

Closed set of providers behind one capability:
- ProviderA: Anthropic Claude (high-quality regional markets)
- ProviderB: OpenAI GPT (marketing / technical content)
- ProviderC: DeepSeek (default)

Usage:
    from translators import TranslatorManager, ProviderID, TranslateOptions

    translators = TranslatorManager(settings).build_all()
    text = await translators[ProviderID.OPENAI].translate(
        "Hello, world!", "en", "de",
        TranslateOptions(glossary={"world": "Welt"})
    )
"""

from .base import (
    BaseTranslator,
    ProviderID,
    ErrorKind,
    ProviderError,
    TranslateOptions,
    TranslatorConfig,
    classify_error,
    build_system_prompt,
)

from .claude_translator import ClaudeTranslator
from .openai_translator import OpenAITranslator
from .deepseek_translator import DeepSeekTranslator

from .manager import (
    TranslatorManager,
    ProviderInfo,
    PROVIDER_REGISTRY,
    PROVIDER_INFO,
)

__all__ = [
    # Base classes
    "BaseTranslator",
    "ProviderID",
    "ErrorKind",
    "ProviderError",
    "TranslateOptions",
    "TranslatorConfig",
    "classify_error",
    "build_system_prompt",

    # Providers
    "ClaudeTranslator",
    "OpenAITranslator",
    "DeepSeekTranslator",

    # Manager
    "TranslatorManager",
    "ProviderInfo",
    "PROVIDER_REGISTRY",
    "PROVIDER_INFO",
]

__version__ = "1.0.0"
