"""
Data model for multi-locale localization requests and results.

Usage:
    from localization.models import TranslationRequest, ContentType

    request = TranslationRequest(
        source_text="Bonjour",
        source_locale="fr",
        target_locales=["en", "de", "es"],
        content_type=ContentType.TECHNICAL,
    )

Classes:
    TranslationRequest: Immutable caller input.
    TranslationResult: Per-locale outcome, either success or failure shape.
    ReviewQueueItem: Low-quality result handed to human review.
"""

import math
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Tuple

from config.constants import REVIEW_THRESHOLD
from translators.base import ErrorKind, ProviderID


class ContentType(str, Enum):
    """Kind of content being localized"""
    GENERIC = "generic"
    MARKETING = "marketing"
    TECHNICAL = "technical"


class LocaleState(Enum):
    """Per-locale processing states"""
    PENDING = "pending"
    PROVIDER_SELECTED = "provider_selected"
    TRANSLATED = "translated"
    FAILED = "failed"
    ASSESSED = "assessed"
    NEEDS_REVIEW = "needs_review"
    APPROVED = "approved"
    LOCALIZED = "localized"
    DONE = "done"


@dataclass(frozen=True)
class TranslationRequest:
    """
    One caller invocation.

    target_locales accepts any iterable; duplicates collapse into a frozenset.
    Well-formedness (non-empty text and locales, supported codes) is checked
    by the orchestrator so that a malformed request is rejected as a whole.
    """
    source_text: str
    source_locale: str
    target_locales: FrozenSet[str]
    content_type: ContentType = ContentType.GENERIC
    context: Optional[str] = None
    request_id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def __post_init__(self):
        locales = self.target_locales
        if isinstance(locales, str):
            locales = [locales]
        object.__setattr__(self, "target_locales", frozenset(locales))
        object.__setattr__(self, "content_type", ContentType(self.content_type))

    @property
    def word_count(self) -> int:
        return len(self.source_text.split())


@dataclass(frozen=True)
class TranslationResult:
    """
    Outcome for one requested locale.

    Exactly one shape is populated:
      success: content, quality_score, provider_used, needs_review, adaptations
      failure: error, fallback_content (the untranslated source text)

    Build through TranslationResult.success() / TranslationResult.failure().
    """
    locale: str
    content: Optional[str] = None
    quality_score: Optional[float] = None
    provider_used: Optional[ProviderID] = None
    needs_review: Optional[bool] = None
    adaptations: Tuple[str, ...] = ()
    sub_scores: Mapping[str, float] = field(default_factory=dict)
    error: Optional[ErrorKind] = None
    fallback_content: Optional[str] = None
    error_message: Optional[str] = None

    def __post_init__(self):
        has_success = self.content is not None
        has_failure = self.error is not None or self.fallback_content is not None

        if has_success == has_failure:
            raise ValueError(
                f"TranslationResult for '{self.locale}' must be either success or failure"
            )

        if has_success:
            score = self.quality_score
            if score is None or math.isnan(score) or not 0.0 <= score <= 1.0:
                raise ValueError(f"quality_score must be in [0, 1], got {score!r}")
            if self.provider_used is None:
                raise ValueError("provider_used is required on a successful result")
            if self.needs_review != (score < REVIEW_THRESHOLD):
                raise ValueError("needs_review must be true exactly when quality_score < threshold")
        else:
            if self.error is None or self.fallback_content is None:
                raise ValueError("failed results need both error and fallback_content")

    @classmethod
    def success(
        cls,
        locale: str,
        content: str,
        quality_score: float,
        provider_used: ProviderID,
        adaptations: Iterable[str] = (),
        sub_scores: Optional[Mapping[str, float]] = None,
    ) -> "TranslationResult":
        return cls(
            locale=locale,
            content=content,
            quality_score=quality_score,
            provider_used=provider_used,
            needs_review=quality_score < REVIEW_THRESHOLD,
            adaptations=tuple(adaptations),
            sub_scores=dict(sub_scores or {}),
        )

    @classmethod
    def failure(
        cls,
        locale: str,
        error: ErrorKind,
        source_text: str,
        message: str = "",
    ) -> "TranslationResult":
        return cls(
            locale=locale,
            error=ErrorKind(error),
            fallback_content=source_text,
            error_message=message or None,
        )

    @property
    def is_success(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for JSON serialization"""
        if not self.is_success:
            return {
                "locale": self.locale,
                "error": self.error.value,
                "fallback_content": self.fallback_content,
                "error_message": self.error_message,
            }
        return {
            "locale": self.locale,
            "content": self.content,
            "quality_score": round(self.quality_score, 4),
            "provider_used": self.provider_used.value,
            "needs_review": self.needs_review,
            "adaptations": list(self.adaptations),
            "sub_scores": {k: round(v, 4) for k, v in self.sub_scores.items()},
        }


@dataclass(frozen=True)
class ReviewQueueItem:
    """A result waiting for human review; owned by the queue after enqueue"""
    locale: str
    result: TranslationResult
    quality_score: float
    enqueued_at: datetime
    request_id: Optional[str] = None

    @classmethod
    def for_result(cls, result: TranslationResult, request_id: Optional[str] = None) -> "ReviewQueueItem":
        return cls(
            locale=result.locale,
            result=result,
            quality_score=result.quality_score,
            enqueued_at=datetime.now(timezone.utc),
            request_id=request_id,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "locale": self.locale,
            "quality_score": self.quality_score,
            "enqueued_at": self.enqueued_at.isoformat(),
            "request_id": self.request_id,
            "result": self.result.to_dict(),
        }
