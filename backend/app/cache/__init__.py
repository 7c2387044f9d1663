"""In-memory TTL caches for the directory's hot read paths."""
from .ttl_cache import CacheEntry, TTLCache
from .business_cache import BusinessCache
from .sweeper import CacheSweeper, DEFAULT_SWEEP_INTERVAL_SECONDS
from .cache_key import (
    BUSINESS_KEY_PREFIXES,
    business_stats_key,
    categories_key,
    featured_businesses_key,
    random_businesses_key,
)

__all__ = [
    "CacheEntry",
    "TTLCache",
    "BusinessCache",
    "CacheSweeper",
    "DEFAULT_SWEEP_INTERVAL_SECONDS",
    "BUSINESS_KEY_PREFIXES",
    "business_stats_key",
    "categories_key",
    "featured_businesses_key",
    "random_businesses_key",
]
