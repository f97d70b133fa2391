"""An in-memory forecast cache with a time-to-live and a size limit."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import asdict, dataclass, field
from typing import Any, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class CachedEntry(Generic[T]):
    """A cached value and the wall-clock time, in seconds, it was stored."""

    data: T
    timestamp: float = field(default_factory=time.time)

    def _elapsed(self) -> Optional[float]:
        elapsed = time.time() - self.timestamp
        return elapsed if elapsed >= 0 else None

    def is_valid(self, ttl: float) -> bool:
        """Whether the entry is younger than ``ttl`` seconds; a future timestamp is invalid."""
        elapsed = self._elapsed()
        return elapsed is not None and elapsed < ttl

    def remaining_ttl(self, ttl: float) -> Optional[float]:
        """Seconds the entry has left, or None once it has expired."""
        elapsed = self._elapsed()
        if elapsed is None or elapsed >= ttl:
            return None
        return ttl - elapsed


@dataclass
class CacheStats:
    """Snapshot of a cache's contents and settings."""

    total_entries: int
    expired_entries: int
    valid_entries: int
    capacity: int
    ttl_seconds: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class ForecastCache(Generic[T]):
    """Cache safe for concurrent use by asyncio tasks.

    When full, the oldest inserted entry is dropped to make room.
    """

    def __init__(self, ttl_secs: float, max_entries: int) -> None:
        self._entries: dict[str, CachedEntry[T]] = {}
        self._lock = asyncio.Lock()
        self.ttl = ttl_secs
        self.max_entries = max_entries

    async def get(self, key: str) -> Optional[T]:
        """Return the cached value if present and not expired."""
        async with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.is_valid(self.ttl):
                logger.debug("[Cache] HIT: %s", key)
                return entry.data
            logger.debug("[Cache] EXPIRED: %s", key)
            return None

    async def insert(self, key: str, data: T) -> None:
        """Store ``data`` under ``key``, evicting the oldest entry if at capacity."""
        async with self._lock:
            if len(self._entries) >= self.max_entries and self._entries:
                logger.warning(
                    "[Cache] At capacity (%d), removing oldest entry", self.max_entries
                )
                del self._entries[next(iter(self._entries))]
            self._entries[key] = CachedEntry(data)
            logger.debug("[Cache] WRITE: %s", key)

    async def get_or_fetch(self, key: str, fetch_fn: Callable[[], Awaitable[T]]) -> T:
        """Return the cached value, or await ``fetch_fn``, cache and return its result.

        Exceptions from ``fetch_fn`` propagate and nothing is cached.
        """
        cached = await self.get(key)
        if cached is not None:
            return cached
        logger.info("[Cache] MISS: Fetching fresh data for %s", key)
        data = await fetch_fn()
        await self.insert(key, data)
        return data

    async def clear(self) -> None:
        async with self._lock:
            count = len(self._entries)
            self._entries.clear()
            logger.info("[Cache] Cleared %d entries", count)

    async def size(self) -> int:
        async with self._lock:
            return len(self._entries)

    async def stats(self) -> CacheStats:
        async with self._lock:
            total = len(self._entries)
            expired = sum(1 for e in self._entries.values() if not e.is_valid(self.ttl))
            return CacheStats(
                total_entries=total,
                expired_entries=expired,
                valid_entries=total - expired,
                capacity=self.max_entries,
                ttl_seconds=int(self.ttl),
            )

    async def cleanup(self) -> None:
        """Remove expired entries."""
        async with self._lock:
            before = len(self._entries)
            self._entries = {
                k: e for k, e in self._entries.items() if e.is_valid(self.ttl)
            }
            removed = before - len(self._entries)
            if removed:
                logger.info("[Cache] Cleanup: Removed %d expired entries", removed)