"""
Pytest configuration and shared fixtures for localization orchestrator tests.
"""
import asyncio
import sys
import pytest
from pathlib import Path
from typing import Dict, List, Optional

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from translators.base import (
    BaseTranslator,
    ProviderID,
    TranslateOptions,
    TranslatorConfig,
)
from localization.analytics import EventSink, RequestCompletedEvent
from localization.glossary import GlossaryStore
from localization.market import MarketConfigTable, MarketLocalizer
from localization.orchestrator import LocalizationOrchestrator
from localization.quality import QualityAssessor, QualityCheck
from localization.review_queue import InMemoryReviewQueue
from localization.router import ProviderRouter


# ============================================================================
# Fakes
# ============================================================================

class FakeTranslator(BaseTranslator):
    """Scripted translator: per-locale responses, delays and errors."""

    def __init__(
        self,
        provider_id: ProviderID,
        responses: Optional[Dict[str, str]] = None,
        delays: Optional[Dict[str, float]] = None,
        errors: Optional[Dict[str, object]] = None,
    ):
        super().__init__(TranslatorConfig(api_key="test", model=f"fake-{provider_id.value}"))
        self._provider_id = provider_id
        self.responses = responses or {}
        self.delays = delays or {}
        self.errors = errors or {}  # locale -> exception, or list of exceptions raised in turn
        self.calls: List[tuple] = []
        self.cancelled: List[str] = []
        self.closed = 0

    @property
    def provider_id(self) -> ProviderID:
        return self._provider_id

    async def initialize(self) -> None:
        pass

    async def translate(self, text, source_locale, target_locale, options: Optional[TranslateOptions] = None) -> str:
        self.calls.append((text, source_locale, target_locale, options))
        try:
            delay = self.delays.get(target_locale, 0.0)
            if delay:
                await asyncio.sleep(delay)
        except asyncio.CancelledError:
            self.cancelled.append(target_locale)
            raise

        error = self.errors.get(target_locale)
        if isinstance(error, list):
            if error:
                raise error.pop(0)
        elif error is not None:
            raise error

        return self.responses.get(target_locale, f"[{target_locale}] {text}")

    async def aclose(self) -> None:
        self.closed += 1
        await super().aclose()

    def locales_called(self) -> List[str]:
        return [call[2] for call in self.calls]


class FixedScoreCheck(QualityCheck):
    """Quality check returning a constant (or raising)."""

    def __init__(self, name: str, score: float = 1.0, error: Optional[Exception] = None, delay: float = 0.0):
        self.name = name
        self.score = score
        self.error = error
        self.delay = delay

    async def run(self, original, translated, source_locale, target_locale) -> float:
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.score


class RecordingEventSink(EventSink):
    """Keeps every event it receives."""

    def __init__(self):
        self.events: List[RequestCompletedEvent] = []

    async def record(self, event: RequestCompletedEvent) -> None:
        self.events.append(event)


def fixed_assessor(score: float) -> QualityAssessor:
    """Assessor whose four checks all return the same score."""
    return QualityAssessor({
        name: FixedScoreCheck(name, score)
        for name in ("grammar", "terminology", "cultural", "accuracy")
    })


# ============================================================================
# Fixtures: Collaborators
# ============================================================================

@pytest.fixture
def sample_glossary_terms():
    """Sample glossary terms for testing."""
    return {
        ("en", "de"): {
            "dashboard": "Dashboard",
            "invoice": "Rechnung",
            "cloud computing": "Cloud-Computing",
        },
        ("fr", "en"): {
            "facture": "invoice",
        },
    }


@pytest.fixture
def glossary(sample_glossary_terms) -> GlossaryStore:
    return GlossaryStore.from_dict(sample_glossary_terms)


@pytest.fixture
def market_table() -> MarketConfigTable:
    return MarketConfigTable.from_defaults()


@pytest.fixture
def review_queue() -> InMemoryReviewQueue:
    return InMemoryReviewQueue()


@pytest.fixture
def event_sink() -> RecordingEventSink:
    return RecordingEventSink()


@pytest.fixture
def fake_translators() -> Dict[ProviderID, FakeTranslator]:
    return {pid: FakeTranslator(pid) for pid in ProviderID}


@pytest.fixture
def make_orchestrator(glossary, market_table, review_queue, event_sink, fake_translators):
    """Factory building an orchestrator around fakes; keyword args override."""

    def _make(**overrides) -> LocalizationOrchestrator:
        options = dict(
            translators=fake_translators,
            router=ProviderRouter(),
            assessor=QualityAssessor.default(glossary, market_table),
            localizer=MarketLocalizer(market_table),
            glossary=glossary,
            review_queue=review_queue,
            event_sink=event_sink,
            provider_timeout=1.0,
            max_retries=2,
            retry_base_delay=0.0,
        )
        options.update(overrides)
        return LocalizationOrchestrator(**options)

    return _make
