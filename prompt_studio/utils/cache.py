"""Time-bounded in-memory result cache."""

import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

from prompt_studio.utils.logger import get_logger

logger = get_logger()

DEFAULT_TTL_SECONDS = 30 * 60


@dataclass
class CacheEntry:
    """A cached value and the time it was stored."""

    value: Any
    timestamp: float


class ResultCache:
    """Key-value cache whose entries expire after a fixed TTL.

    A lookup evicts its own expired entry and every write sweeps all expired
    entries. Writes are last-write-wins.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        """Return the cached value, or None when absent or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._clock() - entry.timestamp < self.ttl_seconds:
                return entry.value
            del self._entries[key]
        logger.debug(f"Evicted expired cache entry {key[:60]}")
        return None

    def set(self, key: str, value: Any) -> None:
        """Store a value under key, sweeping out every expired entry first."""
        with self._lock:
            now = self._clock()
            expired = [k for k, e in self._entries.items() if now - e.timestamp >= self.ttl_seconds]
            for k in expired:
                del self._entries[k]
            self._entries[key] = CacheEntry(value=value, timestamp=now)
        if expired:
            logger.debug(f"Evicted {len(expired)} expired cache entries")

    def clear(self) -> None:
        """Drop every entry."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
