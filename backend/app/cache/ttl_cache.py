"""Time-To-Live (TTL) Cache implementation with per-entry expiry."""
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar
import threading
import time

T = TypeVar("T")


@dataclass
class CacheEntry(Generic[T]):
    """A cached value with the clock reading it was stored at and its TTL."""
    data: T
    timestamp: float
    ttl: float

    def is_expired(self, now: float) -> bool:
        return now - self.timestamp > self.ttl


class TTLCache(Generic[T]):
    """
    In-memory cache where every entry carries its own time-to-live.

    Thread-safe cache that stores values with the time they were written and
    treats them as missing once their TTL has elapsed. Expired entries are
    dropped lazily on read and in bulk by ``cleanup()``.

    Attributes:
        default_ttl: TTL in seconds used when ``set`` is called without one

    Example:
        >>> cache = TTLCache(default_ttl=300)
        >>> cache.set("featured_businesses_10", [{"id": 1}], ttl=60)
        >>> cache.get("featured_businesses_10")
        [{'id': 1}]
    """

    def __init__(
        self,
        default_ttl: float = 300.0,
        clock: Optional[Callable[[], float]] = None,
    ):
        """
        Initialize TTL cache.

        Args:
            default_ttl: Time-to-live in seconds for entries stored without an
                explicit ttl (default: 300 = 5 minutes)
            clock: Zero-argument callable returning the current time in
                seconds. Defaults to ``time.monotonic``.
        """
        self.default_ttl = default_ttl
        self._clock = clock or time.monotonic
        self._cache: Dict[str, CacheEntry[T]] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._expired = 0

    def set(self, key: str, data: T, ttl: Optional[float] = None) -> None:
        """
        Store a value with the current timestamp, replacing any previous entry.

        Args:
            key: Cache key (e.g., "featured_businesses_10")
            data: Value to cache
            ttl: Time-to-live in seconds; ``default_ttl`` when omitted
        """
        entry = CacheEntry(
            data=data,
            timestamp=self._clock(),
            ttl=self.default_ttl if ttl is None else ttl,
        )
        with self._lock:
            self._cache[key] = entry

    def get(self, key: str) -> Optional[T]:
        """
        Retrieve a value if it exists and hasn't expired.

        An entry found past its TTL is removed before returning, so a stale
        value is never handed out twice.

        Returns:
            Cached value, or None on a miss or expiry
        """
        with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                self._misses += 1
                return None

            if entry.is_expired(self._clock()):
                del self._cache[key]
                self._expired += 1
                self._misses += 1
                return None

            self._hits += 1
            return entry.data

    def has(self, key: str) -> bool:
        """True if ``get(key)`` would return a value."""
        return self.get(key) is not None

    def delete(self, key: str) -> None:
        """Remove an entry. Missing keys are ignored."""
        with self._lock:
            self._cache.pop(key, None)

    def delete_prefix(self, *prefixes: str) -> int:
        """
        Remove every entry whose key starts with one of ``prefixes``.

        Returns:
            Number of entries removed
        """
        if not prefixes:
            return 0
        with self._lock:
            doomed = [k for k in self._cache if k.startswith(prefixes)]
            for key in doomed:
                del self._cache[key]
            return len(doomed)

    def clear(self) -> None:
        """Remove all entries."""
        with self._lock:
            self._cache.clear()

    def cleanup(self) -> int:
        """
        Remove all expired entries.

        Run periodically (see ``CacheSweeper``) so keys that are never read
        again do not pile up.

        Returns:
            Number of entries removed
        """
        with self._lock:
            now = self._clock()
            expired_keys = [k for k, e in self._cache.items() if e.is_expired(now)]
            for key in expired_keys:
                del self._cache[key]
            self._expired += len(expired_keys)
            return len(expired_keys)

    def keys(self) -> List[str]:
        """Raw stored keys, including expired entries not yet swept."""
        with self._lock:
            return list(self._cache.keys())

    def size(self) -> int:
        with self._lock:
            return len(self._cache)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    def stats(self) -> Dict[str, Any]:
        """
        Get cache statistics.

        Returns:
            Dict with 'size', 'default_ttl_seconds', 'hits', 'misses' and
            'expired' keys
        """
        with self._lock:
            return {
                "size": len(self._cache),
                "default_ttl_seconds": self.default_ttl,
                "hits": self._hits,
                "misses": self._misses,
                "expired": self._expired,
            }
