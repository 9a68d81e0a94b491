"""
In-memory pending prediction cache keyed by content id.
"""

import logging
import threading
import time
from collections.abc import Callable
from typing import Any

from cachetools import TTLCache

from ..config import PREDICTION_CACHE_CONFIG
from ..models.content import PendingPrediction

logger = logging.getLogger(__name__)


class PredictionCache:
    """Bounded store of AI predictions awaiting a moderator decision.

    Entries expire after ``ttl_seconds`` and the least recently used entry is
    evicted once ``max_entries`` is reached.
    """

    def __init__(
        self,
        max_entries: int = PREDICTION_CACHE_CONFIG["max_entries"],
        ttl_seconds: float = PREDICTION_CACHE_CONFIG["ttl_seconds"],
        timer: Callable[[], float] = time.monotonic,
    ):
        self._cache: TTLCache = TTLCache(maxsize=max_entries, ttl=ttl_seconds, timer=timer)
        self._lock = threading.RLock()
        self.max_entries = max_entries
        self.ttl_seconds = ttl_seconds

        # Observability counters
        self._hits = 0
        self._misses = 0
        self._overwrites = 0

    def put(self, prediction: PendingPrediction) -> None:
        """Store a prediction, replacing any earlier one for the same content"""
        with self._lock:
            if prediction.content_id in self._cache:
                self._overwrites += 1
                logger.debug(f"Superseding pending prediction for {prediction.content_id}")
            self._cache[prediction.content_id] = prediction

    def get(self, content_id: str) -> PendingPrediction | None:
        """Get the pending prediction for a content id"""
        with self._lock:
            prediction = self._cache.get(content_id)
            if prediction is None:
                self._misses += 1
            else:
                self._hits += 1
            return prediction

    def pop(self, content_id: str) -> PendingPrediction | None:
        """Remove and return the pending prediction for a content id"""
        with self._lock:
            prediction = self._cache.pop(content_id, None)
            if prediction is None:
                self._misses += 1
            else:
                self._hits += 1
            return prediction

    def discard(self, content_id: str) -> None:
        """Drop any pending prediction for a content id without touching the hit counters"""
        with self._lock:
            if self._cache.pop(content_id, None) is not None:
                logger.debug(f"Discarded pending prediction for {content_id}")

    def __contains__(self, content_id: object) -> bool:
        with self._lock:
            return content_id in self._cache

    def __len__(self) -> int:
        with self._lock:
            self._cache.expire()
            return len(self._cache)

    def clear(self) -> None:
        """Clear all pending predictions"""
        with self._lock:
            self._cache.clear()

    def get_statistics(self) -> dict[str, Any]:
        """Get cache statistics"""
        with self._lock:
            self._cache.expire()
            return {
                'size': len(self._cache),
                'max_entries': self.max_entries,
                'ttl_seconds': self.ttl_seconds,
                'hits': self._hits,
                'misses': self._misses,
                'overwrites': self._overwrites,
            }
