"""
Unit tests for localization/review_queue.py
"""
import threading

import pytest

from localization.models import ReviewQueueItem, TranslationResult
from localization.review_queue import InMemoryReviewQueue, SqliteReviewQueue
from translators.base import ProviderID


def review_item(locale: str, score: float = 0.65, request_id: str = "req-1") -> ReviewQueueItem:
    result = TranslationResult.success(locale, f"text {locale}", score, ProviderID.CLAUDE)
    return ReviewQueueItem.for_result(result, request_id=request_id)


class TestInMemoryReviewQueue:
    """Test the process-local queue."""

    def test_fifo_order(self, review_queue):
        for locale in ("de", "fr", "es"):
            review_queue.enqueue(review_item(locale))

        assert [item.locale for item in review_queue.items()] == ["de", "fr", "es"]
        assert len(review_queue) == 3

    def test_item_carries_result(self, review_queue):
        item = review_item("de", score=0.4)
        review_queue.enqueue(item)

        stored = review_queue.items()[0]
        assert stored.quality_score == 0.4
        assert stored.result.needs_review is True
        assert stored.enqueued_at.tzinfo is not None

    def test_items_is_snapshot(self, review_queue):
        review_queue.enqueue(review_item("de"))
        snapshot = review_queue.items()
        review_queue.enqueue(review_item("fr"))
        assert len(snapshot) == 1

    def test_concurrent_writers(self):
        queue = InMemoryReviewQueue()

        def writer(prefix):
            for i in range(50):
                queue.enqueue(review_item(f"{prefix}{i}"))

        threads = [threading.Thread(target=writer, args=(p,)) for p in "abcd"]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(queue) == 200
        locales = [item.locale for item in queue.items()]
        # Per-writer order is preserved
        for prefix in "abcd":
            own = [loc for loc in locales if loc.startswith(prefix)]
            assert own == [f"{prefix}{i}" for i in range(50)]


class TestSqliteReviewQueue:
    """Test the persistent queue."""

    @pytest.fixture
    def sqlite_queue(self, tmp_path):
        return SqliteReviewQueue(tmp_path / "data" / "review.db")

    def test_enqueue_and_pending(self, sqlite_queue):
        sqlite_queue.enqueue(review_item("de", 0.5))
        sqlite_queue.enqueue(review_item("ja", 0.7, request_id="req-2"))

        rows = sqlite_queue.pending()

        assert sqlite_queue.count() == 2
        assert [row["locale"] for row in rows] == ["de", "ja"]
        assert rows[1]["request_id"] == "req-2"
        assert rows[0]["result"]["content"] == "text de"
        assert rows[0]["result"]["needs_review"] is True

    def test_pending_limit(self, sqlite_queue):
        for locale in ("de", "fr", "es"):
            sqlite_queue.enqueue(review_item(locale))
        assert [row["locale"] for row in sqlite_queue.pending(limit=2)] == ["de", "fr"]

    def test_persists_across_instances(self, tmp_path):
        db_path = tmp_path / "review.db"
        SqliteReviewQueue(db_path).enqueue(review_item("de"))
        assert SqliteReviewQueue(db_path).count() == 1

    @pytest.mark.asyncio
    async def test_submit_writes_off_the_event_loop(self, tmp_path):
        writer_threads = []

        class RecordingQueue(SqliteReviewQueue):
            def enqueue(self, item):
                writer_threads.append(threading.get_ident())
                super().enqueue(item)

        queue = RecordingQueue(tmp_path / "review.db")
        await queue.submit(review_item("de"))

        assert queue.count() == 1
        assert writer_threads != [threading.get_ident()]
