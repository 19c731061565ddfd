#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
LocalizationOrchestrator - fans one request out across target locales

Per locale, concurrently:
    route -> translate -> assess -> localize -> result (+ review enqueue)

Failures stay inside their locale: a provider error becomes a fallback
result carrying the untranslated source text. Only a malformed request
(ValidationError) is raised to the caller, before any provider work.
"""

import asyncio
import random
import time
from collections import Counter
from datetime import datetime, timezone
from typing import Dict, Iterable, Mapping, Optional, Set

from tqdm import tqdm

from config.constants import (
    SUPPORTED_LOCALES,
    PROVIDER_TIMEOUT_SECONDS,
    PROVIDER_MAX_RETRIES,
    PROVIDER_RETRY_BASE_DELAY,
    PROVIDER_RETRY_MAX_DELAY,
    MAX_CONCURRENT_LOCALES,
)
from config.logging_config import get_logger
from config.settings import Settings
from translators import BaseTranslator, ProviderID, TranslateOptions, TranslatorManager
from .analytics import EventSink, LoggingEventSink, RequestCompletedEvent
from .errors import ErrorKind, ProviderError
from .glossary import GlossaryStore
from .market import MarketConfigTable, MarketLocalizer
from .models import LocaleState, ReviewQueueItem, TranslationRequest, TranslationResult
from .quality import QualityAssessor
from .review_queue import InMemoryReviewQueue, ReviewQueue, SqliteReviewQueue
from .router import ProviderRouter
from .validation import validate_request

logger = get_logger(__name__)


class LocalizationOrchestrator:
    """Coordinates router, translators, assessor and localizer per locale"""

    def __init__(
        self,
        translators: Mapping[ProviderID, BaseTranslator],
        router: ProviderRouter,
        assessor: QualityAssessor,
        localizer: MarketLocalizer,
        glossary: GlossaryStore,
        review_queue: ReviewQueue,
        event_sink: Optional[EventSink] = None,
        supported_locales: Iterable[str] = SUPPORTED_LOCALES,
        provider_timeout: float = PROVIDER_TIMEOUT_SECONDS,
        max_retries: int = PROVIDER_MAX_RETRIES,
        retry_base_delay: float = PROVIDER_RETRY_BASE_DELAY,
        max_concurrency: int = MAX_CONCURRENT_LOCALES,
        preserve_formatting: bool = True,
        show_progress: bool = False
    ):
        """
        Args:
            translators: One translator per provider the router may pick
            router: Provider routing policy
            assessor: Quality assessor
            localizer: Market localizer
            glossary: Glossary store (read-only)
            review_queue: Sink for results below the review threshold
            event_sink: Notified once per completed request (fire-and-forget)
            supported_locales: Locale codes accepted in requests
            provider_timeout: Seconds per translate() call
            max_retries: Retries for quota-exceeded errors
            retry_base_delay: Backoff base in seconds
            max_concurrency: Locales processed at the same time
            preserve_formatting: Passed to every provider call
            show_progress: Show a progress bar over locales
        """
        self.translators = dict(translators)
        self.router = router
        self.assessor = assessor
        self.localizer = localizer
        self.glossary = glossary
        self.review_queue = review_queue
        self.event_sink = event_sink or LoggingEventSink()
        self.supported_locales = frozenset(supported_locales)
        self.provider_timeout = provider_timeout
        self.max_retries = max_retries
        self.retry_base_delay = retry_base_delay
        self.max_concurrency = max_concurrency
        self.preserve_formatting = preserve_formatting
        self.show_progress = show_progress

        self._pending_events: Set[asyncio.Task] = set()

    async def orchestrate(self, request: TranslationRequest) -> Dict[str, TranslationResult]:
        """
        Localize one request into every target locale.

        Returns:
            Dict keyed by exactly the requested locales

        Raises:
            ValidationError: malformed request; no provider is called
        """
        validate_request(request, self.supported_locales)

        locales = sorted(request.target_locales)
        semaphore = asyncio.Semaphore(self.max_concurrency)
        start_time = time.time()

        progress_bar = None
        if self.show_progress:
            progress_bar = tqdm(
                total=len(locales),
                desc="Localizing",
                unit="locale",
                bar_format="{l_bar}{bar}| {n_fmt}/{total_fmt} [{elapsed}<{remaining}]"
            )

        try:
            results = await asyncio.gather(*[
                self._process_locale(request, locale, semaphore, progress_bar)
                for locale in locales
            ])
        finally:
            if progress_bar:
                progress_bar.close()

        result_map = dict(zip(locales, results))

        failed = [loc for loc, r in result_map.items() if not r.is_success]
        review = [loc for loc, r in result_map.items() if r.is_success and r.needs_review]
        logger.info(
            f"Request {request.request_id}: {len(locales) - len(failed)}/{len(locales)} locales localized, "
            f"{len(failed)} failed, {len(review)} for review in {time.time() - start_time:.2f}s"
        )

        self._emit(request, result_map)
        return result_map

    async def _process_locale(
        self,
        request: TranslationRequest,
        locale: str,
        semaphore: asyncio.Semaphore,
        progress_bar: Optional[tqdm] = None
    ) -> TranslationResult:
        """Run one locale to a terminal state; never raises except on cancellation"""
        async with semaphore:
            self._transition(request, locale, LocaleState.PENDING)
            try:
                result = await self._localize_one(request, locale)
            except ProviderError as e:
                self._transition(request, locale, LocaleState.FAILED, str(e))
                logger.warning(f"'{locale}' failed ({e.kind.value}), using source text as fallback")
                result = TranslationResult.failure(locale, e.kind, request.source_text, str(e))
            except Exception as e:
                self._transition(request, locale, LocaleState.FAILED, repr(e))
                logger.exception(f"'{locale}' failed unexpectedly")
                result = TranslationResult.failure(
                    locale, ErrorKind.INTERNAL, request.source_text, f"{type(e).__name__}: {e}"
                )

        if progress_bar:
            progress_bar.update(1)
        return result

    async def _localize_one(self, request: TranslationRequest, locale: str) -> TranslationResult:
        provider_id = self.router.select_provider(locale, request.content_type)
        self._transition(request, locale, LocaleState.PROVIDER_SELECTED, provider_id.value)

        translated = await self._translate(request, locale, provider_id)
        self._transition(request, locale, LocaleState.TRANSLATED)

        assessment = await self.assessor.evaluate(
            request.source_text, translated, request.source_locale, locale
        )
        self._transition(request, locale, LocaleState.ASSESSED, f"{assessment.score:.3f}")

        localized = self.localizer.localize(translated, locale)

        result = TranslationResult.success(
            locale=locale,
            content=localized.content,
            quality_score=assessment.score,
            provider_used=provider_id,
            adaptations=localized.adaptations,
            sub_scores=assessment.sub_scores,
        )
        self._transition(
            request, locale,
            LocaleState.NEEDS_REVIEW if result.needs_review else LocaleState.APPROVED
        )

        if result.needs_review:
            await self._enqueue_for_review(request, result)

        self._transition(request, locale, LocaleState.LOCALIZED, ", ".join(localized.adaptations))
        self._transition(request, locale, LocaleState.DONE)
        return result

    async def _translate(self, request: TranslationRequest, locale: str, provider_id: ProviderID) -> str:
        """Provider call bounded by provider_timeout; quota errors retried with backoff"""
        translator = self.translators.get(provider_id)
        if translator is None:
            raise LookupError(f"no translator configured for {provider_id.value}")

        options = TranslateOptions(
            preserve_formatting=self.preserve_formatting,
            glossary=self.glossary.terms_for(request.source_locale, locale),
            context=request.context,
            formality=self.localizer.register_for(locale),
        )

        attempt = 0
        while True:
            try:
                return await asyncio.wait_for(
                    translator.translate(request.source_text, request.source_locale, locale, options),
                    timeout=self.provider_timeout
                )
            except asyncio.TimeoutError as e:
                raise ProviderError(
                    ErrorKind.TIMEOUT, f"no response after {self.provider_timeout}s", provider=provider_id
                ) from e
            except ProviderError as e:
                if e.kind is not ErrorKind.QUOTA_EXCEEDED or attempt >= self.max_retries:
                    raise
                attempt += 1
                base_delay = min(self.retry_base_delay * 2 ** (attempt - 1), PROVIDER_RETRY_MAX_DELAY)
                jitter = random.uniform(0, base_delay * 0.1)  # 10% jitter
                logger.warning(
                    f"'{locale}' {provider_id.value}: quota exceeded (retry {attempt}/{self.max_retries})"
                )
                await asyncio.sleep(base_delay + jitter)

    async def _enqueue_for_review(self, request: TranslationRequest, result: TranslationResult):
        """Write runs off the loop; once started it completes even if the locale is cancelled"""
        item = ReviewQueueItem.for_result(result, request.request_id)
        try:
            await asyncio.shield(self.review_queue.submit(item))
        except Exception:
            logger.exception(f"Could not enqueue '{result.locale}' for review")

    def _transition(self, request: TranslationRequest, locale: str, state: LocaleState, detail: str = ""):
        logger.debug(f"[{request.request_id[:8]}] {locale}: {state.value}" + (f" ({detail})" if detail else ""))

    # ========== Analytics ==========

    def _emit(self, request: TranslationRequest, result_map: Dict[str, TranslationResult]):
        """Schedule the completion event without awaiting it"""
        event = RequestCompletedEvent(
            timestamp=datetime.now(timezone.utc),
            request_id=request.request_id,
            content_type=request.content_type.value,
            word_count=request.word_count,
            locale_count=len(result_map),
            failed_locales=tuple(sorted(loc for loc, r in result_map.items() if not r.is_success)),
            review_count=sum(1 for r in result_map.values() if r.is_success and r.needs_review),
            provider_usage=dict(Counter(
                r.provider_used.value for r in result_map.values() if r.is_success
            )),
        )
        task = asyncio.get_running_loop().create_task(self._deliver(event))
        self._pending_events.add(task)
        task.add_done_callback(self._pending_events.discard)

    async def _deliver(self, event: RequestCompletedEvent):
        try:
            await self.event_sink.record(event)
        except Exception as e:
            logger.warning(f"Event sink failed for request {event.request_id}: {e}")

    async def drain_events(self):
        """Wait for outstanding event deliveries (shutdown, tests)"""
        if self._pending_events:
            await asyncio.gather(*list(self._pending_events))

    async def aclose(self):
        """Close every translator client once"""
        unique = {id(t): t for t in self.translators.values()}
        for translator in unique.values():
            await translator.aclose()


def build_orchestrator(
    settings: Optional[Settings] = None,
    translators: Optional[Mapping[ProviderID, BaseTranslator]] = None,
    review_queue: Optional[ReviewQueue] = None,
    event_sink: Optional[EventSink] = None
) -> LocalizationOrchestrator:
    """Wire an orchestrator from settings; explicit collaborators win"""
    if settings is None:
        from config.settings import settings as default_settings
        settings = default_settings

    glossary = GlossaryStore(settings.glossary_dir)
    market_table = MarketConfigTable.from_defaults(settings.market_config_file)

    if translators is None:
        translators = TranslatorManager(settings).build_all()

    if review_queue is None:
        if settings.review_queue_db:
            review_queue = SqliteReviewQueue(settings.review_queue_db)
        else:
            review_queue = InMemoryReviewQueue()

    return LocalizationOrchestrator(
        translators=translators,
        router=ProviderRouter(settings.regional_locales),
        assessor=QualityAssessor.default(glossary, market_table, settings.quality_check_timeout),
        localizer=MarketLocalizer(market_table),
        glossary=glossary,
        review_queue=review_queue,
        event_sink=event_sink,
        supported_locales=settings.supported_locales,
        provider_timeout=settings.provider_timeout,
        max_retries=settings.provider_max_retries,
        retry_base_delay=settings.retry_base_delay,
        max_concurrency=settings.max_concurrency,
        preserve_formatting=settings.preserve_formatting,
        show_progress=settings.show_progress,
    )
