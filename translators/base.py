"""
Base Translator - Abstract Interface
Localization Orchestrator - Multi-Provider Support
"""

from abc import ABC, abstractmethod
from typing import Optional, Mapping
from dataclasses import dataclass, field
from enum import Enum

import httpx

from config.constants import TRANSLATION_MAX_TOKENS, TRANSLATION_TEMPERATURE


class ProviderID(Enum):
    """Closed set of translation providers"""
    CLAUDE = "claude"      # ProviderA - high-quality regional
    OPENAI = "openai"      # ProviderB - marketing / technical content
    DEEPSEEK = "deepseek"  # ProviderC - default


class ErrorKind(str, Enum):
    """Why a locale failed"""
    TIMEOUT = "timeout"
    QUOTA_EXCEEDED = "quota-exceeded"
    INVALID_RESPONSE = "invalid-response"
    INTERNAL = "internal"


class ProviderError(Exception):
    """A translate() call failed; isolated to one locale"""

    def __init__(self, kind: ErrorKind, message: str = "", provider: Optional[ProviderID] = None):
        self.kind = ErrorKind(kind)
        self.provider = provider
        detail = f"{self.kind.value}: {message}" if message else self.kind.value
        if provider is not None:
            detail = f"[{provider.value}] {detail}"
        super().__init__(detail)


@dataclass(frozen=True)
class TranslateOptions:
    """Per-call options passed to every provider"""
    preserve_formatting: bool = True
    glossary: Mapping[str, str] = field(default_factory=dict)
    context: Optional[str] = None
    formality: Optional[str] = None  # formal | informal; None leaves the register to the model


@dataclass
class TranslatorConfig:
    """Provider configuration"""
    api_key: str
    model: str
    max_tokens: int = TRANSLATION_MAX_TOKENS
    temperature: float = TRANSLATION_TEMPERATURE
    base_url: Optional[str] = None  # For custom endpoints
    timeout: float = 30.0


# Billing/credit/rate-limit error patterns
QUOTA_ERROR_PATTERNS = [
    "credit balance is too low",
    "insufficient_quota",
    "billing",
    "exceeded your current quota",
    "payment required",
    "insufficient funds",
    "rate_limit",
    "rate limit",
    "too many requests",
    "429",
]

TIMEOUT_ERROR_PATTERNS = [
    "timed out",
    "timeout",
]


def classify_error(error: BaseException) -> ErrorKind:
    """Classify a vendor/transport exception into an ErrorKind."""
    if isinstance(error, (httpx.TimeoutException, TimeoutError)):
        return ErrorKind.TIMEOUT

    error_str = str(error).lower()
    if any(p in error_str for p in QUOTA_ERROR_PATTERNS):
        return ErrorKind.QUOTA_EXCEEDED
    if any(p in error_str for p in TIMEOUT_ERROR_PATTERNS):
        return ErrorKind.TIMEOUT
    return ErrorKind.INVALID_RESPONSE


def build_system_prompt(
    source_locale: str,
    target_locale: str,
    options: TranslateOptions
) -> str:
    """System prompt shared by all LLM-backed providers"""
    lines = [
        f"You are an expert translator specializing in {source_locale} to {target_locale} localization.",
        "",
        "Translation Guidelines:",
        "- Preserve the original meaning, tone, and style",
        "- Keep placeholders such as {name}, numbers and proper nouns intact",
        "- Ensure natural, fluent output in the target language",
    ]
    if options.preserve_formatting:
        lines.append("- Maintain formatting exactly (line breaks, lists, markup, emphasis)")
    if options.formality:
        lines.append(
            f"- Address the reader in a consistently {options.formality} register "
            "(pronouns, verb forms and greetings must agree)"
        )
    if options.context:
        lines += ["", f"Context: {options.context}"]
    if options.glossary:
        lines += ["", "Required terminology:"]
        for term, preferred in list(options.glossary.items())[:50]:  # Limit to avoid token overflow
            lines.append(f"- {term} -> {preferred}")
    lines += ["", "Output ONLY the translated text, no explanations."]
    return "\n".join(lines)


class BaseTranslator(ABC):
    """
    Abstract base class for translation providers.

    Implementations are interchangeable and stateless per call; the only
    state is the lazily created SDK client.
    """

    def __init__(self, config: TranslatorConfig):
        self.config = config
        self._client = None

    @property
    @abstractmethod
    def provider_id(self) -> ProviderID:
        """Return the provider id"""
        pass

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the client connection"""
        pass

    @abstractmethod
    async def translate(
        self,
        text: str,
        source_locale: str,
        target_locale: str,
        options: Optional[TranslateOptions] = None
    ) -> str:
        """
        Translate text between locales.

        Args:
            text: Text to translate
            source_locale: Source locale code
            target_locale: Target locale code
            options: Formatting, glossary and context hints

        Returns:
            Translated text

        Raises:
            ProviderError: timeout, quota-exceeded or invalid-response
        """
        pass

    def _http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=httpx.Timeout(self.config.timeout))

    async def aclose(self) -> None:
        """Close the SDK client and its HTTP connection pool"""
        if self._client is not None:
            client, self._client = self._client, None
            await client.close()

    def _require_text(self, content: Optional[str]) -> str:
        if content is None or not content.strip():
            raise ProviderError(
                ErrorKind.INVALID_RESPONSE, "empty completion", provider=self.provider_id
            )
        return content.strip()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} model={self.config.model}>"
