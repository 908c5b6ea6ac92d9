"""
Thread-safe TTL cache for Home Assistant entity snapshots.

Every entry shares one TTL. Expiry is lazy: stale entries are dropped
the next time the cache is read.
"""
import threading
import time
import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)


class EntityCache:
    """Latest snapshot per entity id, each living `ttl` seconds after its last set"""

    def __init__(self, ttl: float, clock: Callable[[], float] = time.monotonic):
        if ttl <= 0:
            raise ValueError("ttl must be positive")
        self.ttl = ttl
        self.clock = clock
        # key -> (expires_at, value); dict order follows the latest write
        self._items: Dict[str, Tuple[float, Any]] = {}
        self.lock = threading.Lock()

    def set(self, key: str, value: Any) -> None:
        """Insert or replace `key` and restart its TTL"""
        expires_at = self.clock() + self.ttl
        with self.lock:
            self._items.pop(key, None)
            self._items[key] = (expires_at, value)

    def get(self, key: str) -> Optional[Any]:
        """Return the live value for `key`, or None"""
        now = self.clock()
        with self.lock:
            item = self._items.get(key)
            if item is None:
                return None
            expires_at, value = item
            if now >= expires_at:
                del self._items[key]
                return None
            return value

    def snapshot(self) -> List[Any]:
        """Return all live values as a new list, evicting expired ones"""
        now = self.clock()
        with self.lock:
            self._evict(now)
            return [value for _, value in self._items.values()]

    def purge(self) -> int:
        """Drop expired entries, returning how many were removed"""
        now = self.clock()
        with self.lock:
            removed = self._evict(now)
        if removed:
            logger.debug(f"Purged {removed} expired entities from cache")
        return removed

    def _evict(self, now: float) -> int:
        expired = [key for key, (expires_at, _) in self._items.items() if now >= expires_at]
        for key in expired:
            del self._items[key]
        return len(expired)

    def __len__(self) -> int:
        now = self.clock()
        with self.lock:
            self._evict(now)
            return len(self._items)
