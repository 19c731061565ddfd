"""
Provider routing policy.

Pure and deterministic; first matching rule wins:
  1. target locale in the high-quality regional set -> regional provider (Claude)
  2. marketing or technical content                 -> content provider (OpenAI)
  3. anything else                                  -> default provider (DeepSeek)
"""

from typing import FrozenSet, Iterable, Union

from config.constants import HIGH_QUALITY_REGIONAL_LOCALES
from translators.base import ProviderID
from .models import ContentType


CONTENT_ROUTED_TYPES: FrozenSet[ContentType] = frozenset({ContentType.MARKETING, ContentType.TECHNICAL})


class ProviderRouter:
    """Maps (target locale, content type) to a provider"""

    def __init__(
        self,
        regional_locales: Iterable[str] = HIGH_QUALITY_REGIONAL_LOCALES,
        regional_provider: ProviderID = ProviderID.CLAUDE,
        content_provider: ProviderID = ProviderID.OPENAI,
        default_provider: ProviderID = ProviderID.DEEPSEEK
    ):
        self.regional_locales = frozenset(regional_locales)
        self.regional_provider = regional_provider
        self.content_provider = content_provider
        self.default_provider = default_provider

    def select_provider(
        self,
        target_locale: str,
        content_type: Union[ContentType, str]
    ) -> ProviderID:
        if target_locale in self.regional_locales:
            return self.regional_provider
        if ContentType(content_type) in CONTENT_ROUTED_TYPES:
            return self.content_provider
        return self.default_provider
