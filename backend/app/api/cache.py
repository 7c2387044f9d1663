"""Admin endpoints for inspecting and flushing the business cache."""
from typing import Optional

from fastapi import APIRouter, Depends

from app.api.deps import get_business_cache, get_cache_sweeper
from app.cache import BusinessCache, CacheSweeper
from app.schemas.schemas import CacheInvalidationResult, CacheStats

router = APIRouter(prefix="/api/cache", tags=["cache"])


@router.get("/stats", response_model=CacheStats)
def cache_stats(
    cache: BusinessCache = Depends(get_business_cache),
    sweeper: Optional[CacheSweeper] = Depends(get_cache_sweeper),
):
    return {
        **cache.stats(),
        "keys": sorted(cache.keys()),
        "sweeper_running": bool(sweeper and sweeper.is_running),
    }


@router.post("/invalidate", response_model=CacheInvalidationResult)
def invalidate_business_listings(cache: BusinessCache = Depends(get_business_cache)):
    """Drop all cached featured and random listings."""
    return {"removed": cache.invalidate_business_caches()}


@router.post("/cleanup", response_model=CacheInvalidationResult)
def cleanup_expired(cache: BusinessCache = Depends(get_business_cache)):
    """Run an expired-entry sweep now instead of waiting for the sweeper."""
    return {"removed": cache.cleanup()}
