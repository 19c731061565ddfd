#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Review Queue - append-only sink for results that need human review

The orchestrator only ever appends; reading and clearing the queue is the
business of the reviewing tool. Both implementations are safe under
concurrent writers and keep FIFO order by enqueue time.
"""

import asyncio
import json
import sqlite3
import threading
from abc import ABC, abstractmethod
from collections import deque
from pathlib import Path
from typing import Any, Dict, List

from config.logging_config import get_logger
from .models import ReviewQueueItem

logger = get_logger(__name__)


class ReviewQueue(ABC):
    """Append-only review sink"""

    @abstractmethod
    def enqueue(self, item: ReviewQueueItem) -> None:
        """Append one item"""
        pass

    async def submit(self, item: ReviewQueueItem) -> None:
        """Append from async code without blocking the event loop"""
        await asyncio.to_thread(self.enqueue, item)


class InMemoryReviewQueue(ReviewQueue):
    """Process-local queue; handy for tests and single-run CLIs"""

    def __init__(self):
        self._items = deque()
        self._lock = threading.Lock()

    def enqueue(self, item: ReviewQueueItem) -> None:
        with self._lock:
            self._items.append(item)
        logger.info(f"Queued '{item.locale}' for review (score {item.quality_score:.2f})")

    async def submit(self, item: ReviewQueueItem) -> None:
        self.enqueue(item)

    def items(self) -> List[ReviewQueueItem]:
        """Snapshot in FIFO order"""
        with self._lock:
            return list(self._items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


class SqliteReviewQueue(ReviewQueue):
    """
    SQLite-backed review queue.

    Rows are append-only; the autoincrement id gives FIFO order.
    """

    def __init__(self, db_path: Path):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()
        self._init_database()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self.db_path), timeout=30)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_database(self):
        """Initialize database schema"""
        conn = self._connect()
        try:
            with conn:
                conn.execute("""
                    CREATE TABLE IF NOT EXISTS review_queue (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        locale TEXT NOT NULL,
                        request_id TEXT,
                        quality_score REAL NOT NULL,
                        enqueued_at TEXT NOT NULL,
                        result_json TEXT NOT NULL
                    )
                """)
                conn.execute("CREATE INDEX IF NOT EXISTS idx_review_locale ON review_queue(locale)")
        finally:
            conn.close()

    def enqueue(self, item: ReviewQueueItem) -> None:
        with self._lock:
            conn = self._connect()
            try:
                with conn:
                    conn.execute(
                        """
                        INSERT INTO review_queue (locale, request_id, quality_score, enqueued_at, result_json)
                        VALUES (?, ?, ?, ?, ?)
                        """,
                        (
                            item.locale,
                            item.request_id,
                            item.quality_score,
                            item.enqueued_at.isoformat(),
                            json.dumps(item.result.to_dict(), ensure_ascii=False),
                        )
                    )
            finally:
                conn.close()
        logger.info(f"Queued '{item.locale}' for review (score {item.quality_score:.2f})")

    def pending(self, limit: int = 100) -> List[Dict[str, Any]]:
        """Oldest rows first, as plain dicts (for reviewer tooling)"""
        conn = self._connect()
        try:
            rows = conn.execute(
                "SELECT * FROM review_queue ORDER BY id ASC LIMIT ?", (limit,)
            ).fetchall()
        finally:
            conn.close()
        return [
            {
                "id": row["id"],
                "locale": row["locale"],
                "request_id": row["request_id"],
                "quality_score": row["quality_score"],
                "enqueued_at": row["enqueued_at"],
                "result": json.loads(row["result_json"]),
            }
            for row in rows
        ]

    def count(self) -> int:
        conn = self._connect()
        try:
            return conn.execute("SELECT COUNT(*) FROM review_queue").fetchone()[0]
        finally:
            conn.close()
