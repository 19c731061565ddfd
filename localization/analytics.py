#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Analytics Module - request-level events and reporting

The orchestrator notifies one EventSink per completed request. Delivery is
fire-and-forget: a failing sink is logged and never reaches the caller.
"""

import asyncio
import json
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Tuple

from config.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class RequestCompletedEvent:
    """Aggregate metadata for one completed request"""
    timestamp: datetime
    request_id: str
    content_type: str
    word_count: int
    locale_count: int = 0
    failed_locales: Tuple[str, ...] = ()
    review_count: int = 0
    provider_usage: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dict for JSON serialization"""
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat()
        data["failed_locales"] = list(self.failed_locales)
        return data


class EventSink(ABC):
    """Receives one event per completed request"""

    @abstractmethod
    async def record(self, event: RequestCompletedEvent) -> None:
        pass


class NullEventSink(EventSink):
    """Discards events"""

    async def record(self, event: RequestCompletedEvent) -> None:
        return None


class LoggingEventSink(EventSink):
    """Writes a one-line summary to the log"""

    async def record(self, event: RequestCompletedEvent) -> None:
        logger.info(
            f"Request {event.request_id}: {event.locale_count} locales, "
            f"{event.word_count} words, {len(event.failed_locales)} failed, "
            f"{event.review_count} for review ({event.content_type})"
        )


class JsonlEventSink(EventSink):
    """Appends events as JSON lines to analytics_dir/events.jsonl"""

    def __init__(self, analytics_dir: Path, filename: str = "events.jsonl"):
        self.analytics_dir = Path(analytics_dir)
        self.analytics_dir.mkdir(exist_ok=True, parents=True)
        self.path = self.analytics_dir / filename
        self._lock = threading.Lock()

    def _append(self, line: str):
        with self._lock:
            with self.path.open("a", encoding="utf-8") as f:
                f.write(line + "\n")

    async def record(self, event: RequestCompletedEvent) -> None:
        line = json.dumps(event.to_dict(), ensure_ascii=False)
        await asyncio.to_thread(self._append, line)

    def load_events(self) -> List[Dict[str, Any]]:
        """All recorded events, oldest first"""
        if not self.path.exists():
            return []
        return [
            json.loads(line)
            for line in self.path.read_text(encoding="utf-8").splitlines()
            if line.strip()
        ]


def summarize_events(events: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Aggregate report over serialized events"""
    if not events:
        return {"requests": 0}

    total_locales = sum(e.get("locale_count", 0) for e in events)
    total_failed = sum(len(e.get("failed_locales", [])) for e in events)
    total_review = sum(e.get("review_count", 0) for e in events)

    by_content_type: Dict[str, int] = {}
    for e in events:
        by_content_type[e["content_type"]] = by_content_type.get(e["content_type"], 0) + 1

    return {
        "requests": len(events),
        "total_words": sum(e.get("word_count", 0) for e in events),
        "total_locales": total_locales,
        "failure_rate": total_failed / total_locales if total_locales else 0.0,
        "review_rate": total_review / total_locales if total_locales else 0.0,
        "by_content_type": by_content_type,
    }
