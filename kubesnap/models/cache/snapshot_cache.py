"""Snapshot cache implementation."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from typing import Any

from kubesnap.constants.defaults import (
    SNAPSHOT_CACHE_MAX_ENTRIES_DEFAULT,
    SNAPSHOT_CACHE_TTL_SECONDS_DEFAULT,
)
from kubesnap.models.snapshot.snapshot import Snapshot

logger = logging.getLogger(__name__)


class SnapshotCache:
    """TTL-based snapshot caching keyed by ``{cluster}_{region}``.

    Notes:
    - The clock is injected so freshness can be tested without sleeping.
      It must be monotonic and return seconds.
    - Read operations are lock-free; expired entries are left in place
      (soft-expired) and cleaned up lazily during put() eviction.
    - Write operations (put, clear) take the lock.
    """

    def __init__(
        self,
        ttl_seconds: float = SNAPSHOT_CACHE_TTL_SECONDS_DEFAULT,
        max_entries: int = SNAPSHOT_CACHE_MAX_ENTRIES_DEFAULT,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._cache: dict[str, dict[str, Any]] = {}
        self._lock = threading.Lock()
        self._ttl_seconds = ttl_seconds
        self._max_entries = max(1, max_entries)
        self._clock = clock

    @property
    def ttl_seconds(self) -> float:
        return self._ttl_seconds

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def get(self, key: str) -> tuple[Snapshot, float] | None:
        """Return ``(snapshot, captured_at)`` or None when missing or stale."""
        entry = self._cache.get(key)
        if entry is None:
            return None
        if self._is_expired(entry):
            logger.debug("Snapshot cache entry expired: %s", key)
            return None
        return entry["snapshot"], entry["timestamp"]

    def _is_expired(self, entry: dict[str, Any]) -> bool:
        age = self._clock() - entry["timestamp"]
        return age > self._ttl_seconds

    def put(self, key: str, snapshot: Snapshot) -> None:
        """Cache ``snapshot`` with the current clock reading."""
        with self._lock:
            self._cache[key] = {"snapshot": snapshot, "timestamp": self._clock()}
            if len(self._cache) > self._max_entries:
                self._evict_expired_then_oldest()

    def _evict_expired_then_oldest(self) -> None:
        """Evict expired entries first, then oldest by timestamp if still over limit.

        Must be called under lock.
        """
        expired_keys = [k for k, entry in self._cache.items() if self._is_expired(entry)]
        for k in expired_keys:
            del self._cache[k]

        while len(self._cache) > self._max_entries:
            oldest_key = min(self._cache, key=lambda k: self._cache[k]["timestamp"])
            del self._cache[oldest_key]
            logger.debug("Evicted snapshot cache entry: %s", oldest_key)

    def clear(self, key: str | None = None) -> None:
        """Clear one entry or the whole cache."""
        with self._lock:
            if key:
                self._cache.pop(key, None)
            else:
                self._cache.clear()


__all__ = ["SnapshotCache"]
