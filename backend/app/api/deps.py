from typing import Optional

from fastapi import Request

from app.cache import BusinessCache, CacheSweeper


def get_business_cache(request: Request) -> BusinessCache:
    """The cache instance created by the app lifespan."""
    return request.app.state.business_cache


def get_cache_sweeper(request: Request) -> Optional[CacheSweeper]:
    return getattr(request.app.state, "cache_sweeper", None)
