"""
Localization Package
Multi-locale translation with quality gating and market adaptation.

Usage:
    from localization import build_orchestrator, TranslationRequest

    orchestrator = build_orchestrator()
    results = await orchestrator.orchestrate(TranslationRequest(
        source_text="Bonjour",
        source_locale="fr",
        target_locales=["en", "de", "es"],
        content_type="technical",
    ))
    for locale, result in results.items():
        print(locale, result.to_dict())
"""

from .models import (
    ContentType,
    LocaleState,
    TranslationRequest,
    TranslationResult,
    ReviewQueueItem,
)
from .errors import (
    LocalizationError,
    ValidationError,
    QualityCheckError,
    ProviderError,
    ErrorKind,
)
from .glossary import GlossaryStore
from .market import MarketConfig, MarketConfigTable, MarketLocalizer, LocalizedContent
from .quality import QualityAssessor, QualityAssessment, CHECK_WEIGHTS
from .review_queue import ReviewQueue, InMemoryReviewQueue, SqliteReviewQueue
from .analytics import (
    EventSink,
    NullEventSink,
    LoggingEventSink,
    JsonlEventSink,
    RequestCompletedEvent,
    summarize_events,
)
from .router import ProviderRouter
from .validation import validate_request
from .orchestrator import LocalizationOrchestrator, build_orchestrator

__all__ = [
    # Models
    "ContentType",
    "LocaleState",
    "TranslationRequest",
    "TranslationResult",
    "ReviewQueueItem",

    # Errors
    "LocalizationError",
    "ValidationError",
    "QualityCheckError",
    "ProviderError",
    "ErrorKind",

    # Collaborators
    "GlossaryStore",
    "MarketConfig",
    "MarketConfigTable",
    "MarketLocalizer",
    "LocalizedContent",
    "QualityAssessor",
    "QualityAssessment",
    "CHECK_WEIGHTS",
    "ReviewQueue",
    "InMemoryReviewQueue",
    "SqliteReviewQueue",
    "EventSink",
    "NullEventSink",
    "LoggingEventSink",
    "JsonlEventSink",
    "RequestCompletedEvent",
    "summarize_events",
    "ProviderRouter",
    "validate_request",

    # Orchestration
    "LocalizationOrchestrator",
    "build_orchestrator",
]
