"""Business listing cache with fixed TTLs per listing type."""
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional

from .cache_key import (
    BUSINESS_KEY_PREFIXES,
    business_stats_key,
    categories_key,
    featured_businesses_key,
    random_businesses_key,
)
from .ttl_cache import TTLCache

BusinessList = List[Dict[str, Any]]


class BusinessCache(TTLCache[Any]):
    """
    TTL cache for the directory's hot read paths.

    Wraps the generic primitives with key naming and TTL selection so route
    handlers never pick keys or durations themselves.

    Example:
        >>> cache = BusinessCache()
        >>> cache.set_featured_businesses([{"id": 1}], limit=6)
        >>> cache.get_featured_businesses(6)
        [{'id': 1}]
        >>> cache.get_featured_businesses(10) is None
        True
    """

    # TTLs in seconds
    CACHE_TTLS: Mapping[str, float] = MappingProxyType({
        "FEATURED_BUSINESSES": 5 * 60,
        "RANDOM_BUSINESSES": 2 * 60,
        "CATEGORIES": 10 * 60,
        "BUSINESS_STATS": 15 * 60,
    })

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        super().__init__(default_ttl=self.CACHE_TTLS["FEATURED_BUSINESSES"], clock=clock)

    def set_featured_businesses(self, businesses: BusinessList, limit: int = 10) -> None:
        self.set(featured_businesses_key(limit), businesses, self.CACHE_TTLS["FEATURED_BUSINESSES"])

    def get_featured_businesses(self, limit: int = 10) -> Optional[BusinessList]:
        return self.get(featured_businesses_key(limit))

    def set_random_businesses(self, businesses: BusinessList, limit: int = 10) -> None:
        self.set(random_businesses_key(limit), businesses, self.CACHE_TTLS["RANDOM_BUSINESSES"])

    def get_random_businesses(self, limit: int = 10) -> Optional[BusinessList]:
        return self.get(random_businesses_key(limit))

    def set_categories(self, categories: List[Dict[str, Any]]) -> None:
        self.set(categories_key(), categories, self.CACHE_TTLS["CATEGORIES"])

    def get_categories(self) -> Optional[List[Dict[str, Any]]]:
        return self.get(categories_key())

    def set_business_stats(self, stats: Dict[str, Any]) -> None:
        self.set(business_stats_key(), stats, self.CACHE_TTLS["BUSINESS_STATS"])

    def get_business_stats(self) -> Optional[Dict[str, Any]]:
        return self.get(business_stats_key())

    def invalidate_business_caches(self) -> int:
        """
        Drop every featured and random listing, whatever its limit.

        Called after any write to the businesses table. Keys outside those
        two families are left alone.

        Returns:
            Number of entries removed
        """
        return self.delete_prefix(*BUSINESS_KEY_PREFIXES)
